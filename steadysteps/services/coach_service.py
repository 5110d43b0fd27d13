# steadysteps/services/coach_service.py
import logging
from dataclasses import replace
from datetime import date

from flask import jsonify

from steadysteps.errors import CoachGatewayError, StoreError
from steadysteps.external.ai_gateway import request_coach_reply
from steadysteps.mappers.coach_prompt_mapper import build_system_prompt
from steadysteps.schemas.contexts import CoachContext
from steadysteps.services.badge_service import award_badges, coach_badge_ids
from steadysteps.utils import mean, recent_window, window_start

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000
COACH_ROLES = ("user", "assistant")


def build_coach_context(profile, checkins, today: date) -> CoachContext:
    """Coach context assembled from stored data, never from the client."""
    recent = recent_window(checkins, today)[:7]

    def average(attribute):
        value = mean(getattr(c, attribute) for c in recent if getattr(c, attribute))
        return round(value, 1) if value is not None else None

    activity_rate = None
    if recent:
        activity_rate = sum(1 for c in recent if c.activity_completed) / len(recent) * 100

    return CoachContext(
        first_name=profile.first_name,
        language=profile.language,
        current_stage=profile.current_stage,
        current_streak=profile.current_streak,
        current_activity_goal_minutes=profile.current_activity_goal_minutes,
        primary_goal=profile.primary_goal.value,
        nutrition_challenge=profile.nutrition_challenge.value,
        biggest_obstacle=profile.biggest_obstacle,
        diet_preference=profile.diet_preference,
        fitness_confidence=profile.fitness_confidence,
        recent_checkins=len(recent),
        average_stress=average("stress_level"),
        average_sleep=average("sleep_quality"),
        average_energy=average("energy_level"),
        activity_rate=activity_rate,
    )


def validate_messages(messages):
    if not isinstance(messages, list) or not messages:
        return None, "messages must be a non-empty list"

    cleaned = []
    for message in messages:
        if not isinstance(message, dict) or message.get("role") not in COACH_ROLES:
            return None, "Each message needs a role of user or assistant"
        content = message.get("content")
        if not isinstance(content, str) or not content.strip():
            return None, "Message cannot be empty"
        if len(content) > MAX_MESSAGE_LENGTH:
            return None, f"Message must be less than {MAX_MESSAGE_LENGTH} characters"
        cleaned.append({"role": message["role"], "content": content.strip()})

    if cleaned[-1]["role"] != "user":
        return None, "The last message must come from the user"
    return cleaned, None


class CoachService:

    @staticmethod
    def send_message(store, user_id: str, payload: dict, today: date | None = None):
        today = today or date.today()

        messages, error = validate_messages((payload or {}).get("messages"))
        if error:
            return jsonify({"error": error}), 400

        try:
            profile = store.get_profile(user_id)
            if not profile:
                return jsonify({"error": "Profile not found"}), 404
            checkins = store.get_checkins(user_id, start_date=window_start(today), end_date=today)
        except StoreError as e:
            logger.error(f"Failed to load coach context for user {user_id}: {e}")
            return jsonify({"error": "Failed to load profile"}), 500

        context = build_coach_context(profile, checkins, today)

        try:
            reply = request_coach_reply(build_system_prompt(context), messages)
        except CoachGatewayError as e:
            return jsonify({"error": str(e)}), e.status_code

        # a conversation is counted once per reply
        conversations = profile.coach_conversations_count + 1
        new_badges = []
        try:
            badges = store.get_badges(user_id)
            new_badges = award_badges(badges, coach_badge_ids(conversations))
            store.save_profile(replace(profile, coach_conversations_count=conversations))
            if new_badges:
                store.save_badges(user_id, badges)
        except StoreError as e:
            # the reply is still delivered
            logger.error(f"Failed to count coach conversation for user {user_id}: {e}")

        logger.info(f"Coach reply sent to user {user_id}, conversation #{conversations}")

        return jsonify({
            "reply": reply,
            "new_badges": [badge.name for badge in new_badges]
        }), 200
