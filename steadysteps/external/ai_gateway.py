import logging

import requests
from flask import current_app

from steadysteps.errors import CoachGatewayError

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = "I'm getting a lot of questions right now! Please try again in a moment."
CREDITS_EXHAUSTED_MESSAGE = "The coach is temporarily unavailable. Please try again later."
GENERIC_ERROR_MESSAGE = "I had trouble processing that. Could you try asking again?"
FALLBACK_REPLY = "I'm here to help! What would you like to know about fitness or nutrition?"


def request_coach_reply(system_prompt: str, messages: list) -> str:
    """
    Send the conversation to the chat-completions gateway and return the
    reply text. Raises CoachGatewayError with a user-facing message.
    """
    api_key = current_app.config.get("AI_GATEWAY_API_KEY")
    if not api_key:
        logger.error("AI_GATEWAY_API_KEY is not configured")
        raise CoachGatewayError(GENERIC_ERROR_MESSAGE, 500)

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json"
    }
    body = {
        "model": current_app.config["AI_MODEL"],
        "messages": [{"role": "system", "content": system_prompt}] + list(messages),
        "max_tokens": current_app.config["AI_MAX_TOKENS"],
        "temperature": current_app.config["AI_TEMPERATURE"]
    }

    try:
        response = requests.post(
            current_app.config["AI_GATEWAY_URL"],
            headers=headers,
            json=body,
            timeout=current_app.config["AI_TIMEOUT"]
        )
    except requests.RequestException as e:
        logger.error(f"AI gateway request failed: {e}")
        raise CoachGatewayError(GENERIC_ERROR_MESSAGE, 502)

    if response.status_code != 200:
        logger.error(f"AI gateway error {response.status_code}: {response.text}")
        if response.status_code == 429:
            raise CoachGatewayError(RATE_LIMITED_MESSAGE, 429)
        if response.status_code == 402:
            raise CoachGatewayError(CREDITS_EXHAUSTED_MESSAGE, 402)
        raise CoachGatewayError(GENERIC_ERROR_MESSAGE, 500)

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"AI gateway returned invalid JSON: {e}")
        raise CoachGatewayError(GENERIC_ERROR_MESSAGE, 500)

    choices = data.get("choices") or [{}]
    reply = (choices[0].get("message") or {}).get("content")
    logger.debug(f"AI gateway reply of {len(reply or '')} characters")
    return reply or FALLBACK_REPLY
