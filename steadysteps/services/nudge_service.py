# steadysteps/services/nudge_service.py
import logging
import random
from datetime import date, timedelta

from flask import jsonify

from steadysteps.data.nudge_messages import DEFAULT_LANGUAGE, NUDGE_MESSAGES
from steadysteps.enums.app_enum import NudgeTypeEnum, ToneEnum
from steadysteps.errors import StoreError
from steadysteps.schemas.contexts import Nudge, NudgeContext
from steadysteps.utils import mean, recent_window, window_start

logger = logging.getLogger(__name__)

HIGH_STRESS_MEAN = 3.5
LOW_SLEEP_MEAN = 2.5
TREND_SAMPLE_SIZE = 3
TREND_MIN_SAMPLES = 2
CONSISTENCY_CHECKINS = 5


def _latest_values(checkins, attribute, limit=TREND_SAMPLE_SIZE):
    values = []
    for checkin in checkins:
        value = getattr(checkin, attribute)
        if value is not None:
            values.append(value)
        if len(values) == limit:
            break
    return values


def _trend_fires(values, predicate):
    return len(values) >= TREND_MIN_SAMPLES and predicate(mean(values))


def select_nudge_type(context: NudgeContext):
    """
    First matching rule wins:
    missed days > high stress > low sleep > consistency > encouragement.
    """
    checkin_dates = {checkin.checkin_date for checkin in context.checkins}
    yesterday = context.today - timedelta(days=1)
    if context.today not in checkin_dates and yesterday not in checkin_dates:
        return NudgeTypeEnum.missed_days, ToneEnum.gentle

    stress = _latest_values(context.checkins, "stress_level")
    if _trend_fires(stress, lambda avg: avg > HIGH_STRESS_MEAN):
        return NudgeTypeEnum.high_stress, ToneEnum.supportive

    sleep = _latest_values(context.checkins, "sleep_quality")
    if _trend_fires(sleep, lambda avg: avg < LOW_SLEEP_MEAN):
        return NudgeTypeEnum.low_sleep, ToneEnum.supportive

    completed = sum(1 for checkin in context.checkins if checkin.checkin_completed)
    if completed >= CONSISTENCY_CHECKINS:
        return NudgeTypeEnum.consistency, ToneEnum.celebratory

    return NudgeTypeEnum.encouragement, ToneEnum.gentle


def select_nudge(context: NudgeContext, rng=None) -> Nudge:
    rng = rng or random.Random()
    nudge_type, tone = select_nudge_type(context)
    messages = NUDGE_MESSAGES.get(context.language, NUDGE_MESSAGES[DEFAULT_LANGUAGE])
    return Nudge(type=nudge_type, tone=tone, message=rng.choice(messages[nudge_type]))


def default_nudge(language=DEFAULT_LANGUAGE, rng=None) -> Nudge:
    rng = rng or random.Random()
    messages = NUDGE_MESSAGES.get(language, NUDGE_MESSAGES[DEFAULT_LANGUAGE])
    return Nudge(
        type=NudgeTypeEnum.encouragement,
        tone=ToneEnum.gentle,
        message=rng.choice(messages[NudgeTypeEnum.encouragement]),
    )


def build_nudge_context(profile, checkins, today: date) -> NudgeContext:
    return NudgeContext(
        today=today,
        checkins=tuple(recent_window(checkins, today)),
        current_streak=profile.current_streak,
        language=profile.language,
    )


class NudgeService:

    @staticmethod
    def get_nudge(store, user_id: str, today: date | None = None, rng=None):
        today = today or date.today()
        try:
            profile = store.get_profile(user_id)
            if not profile:
                return jsonify({"error": "Profile not found"}), 404
            checkins = store.get_checkins(user_id, start_date=window_start(today), end_date=today)
            nudge = select_nudge(build_nudge_context(profile, checkins, today), rng)
        except StoreError as e:
            # fall back to the default message
            logger.error(f"Failed to load check-ins for nudge, user {user_id}: {e}")
            nudge = default_nudge(rng=rng)

        logger.debug(f"Nudge {nudge.type.value} selected for user {user_id}")

        return jsonify({
            "status": "success",
            "nudge": {
                "id": nudge.type.value,
                "type": nudge.type.value,
                "tone": nudge.tone.value,
                "message": nudge.message
            }
        }), 200
