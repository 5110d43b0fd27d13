# steadysteps/services/user_profile_service.py
import logging
from dataclasses import replace
from datetime import date

from flask import jsonify

from steadysteps.data.levels import STAGE_DESCRIPTIONS
from steadysteps.data.nutrition_questions import ACTIVITY_GOAL_BY_COMMITMENT
from steadysteps.enums.app_enum import (
    ActivityLevelEnum,
    GoalAdjustmentEnum,
    NutritionChallengeEnum,
    PrimaryGoalEnum,
    TimeCommitmentEnum,
)
from steadysteps.errors import StoreError
from steadysteps.mappers.progress_mapper import profile_to_dict
from steadysteps.schemas.progress import Profile
from steadysteps.services.badge_service import award_badges, goal_badge_ids
from steadysteps.services.level_service import habit_library_unlocked, level_for_points

logger = logging.getLogger(__name__)

MIN_ACTIVITY_GOAL = 5
MAX_ACTIVITY_GOAL = 30
ACTIVITY_GOAL_STEP = 5
PAUSED_ACTIVITY_GOAL = 0
SUPPORTED_LANGUAGES = ("en", "es")

ONBOARDING_ENUM_FIELDS = {
    "primary_goal": PrimaryGoalEnum,
    "activity_level": ActivityLevelEnum,
    "nutrition_challenge": NutritionChallengeEnum,
    "time_commitment": TimeCommitmentEnum,
}
EDITABLE_TEXT_FIELDS = ("first_name", "morning_reminder_time", "evening_reminder_time",
                        "diet_preference", "biggest_obstacle")


def initial_activity_goal(time_commitment: TimeCommitmentEnum) -> int:
    minutes = ACTIVITY_GOAL_BY_COMMITMENT.get(time_commitment, MIN_ACTIVITY_GOAL)
    return min(minutes, MAX_ACTIVITY_GOAL)


def adjusted_activity_goal(current_minutes: int, adjustment: GoalAdjustmentEnum) -> int:
    """
    New daily activity goal after a flexible-progress adjustment.
    Raises ValueError when the adjustment does not apply.
    """
    if adjustment == GoalAdjustmentEnum.pause:
        return PAUSED_ACTIVITY_GOAL
    if adjustment == GoalAdjustmentEnum.resume:
        if current_minutes != PAUSED_ACTIVITY_GOAL:
            raise ValueError("Activity is not paused")
        return MIN_ACTIVITY_GOAL

    if current_minutes == PAUSED_ACTIVITY_GOAL:
        raise ValueError("Activity is paused, resume it first")
    if adjustment == GoalAdjustmentEnum.up:
        if current_minutes >= MAX_ACTIVITY_GOAL:
            raise ValueError(f"Activity goal is already at the maximum of {MAX_ACTIVITY_GOAL} minutes")
        return min(current_minutes + ACTIVITY_GOAL_STEP, MAX_ACTIVITY_GOAL)

    if current_minutes <= MIN_ACTIVITY_GOAL:
        raise ValueError(f"Activity goal is already at the minimum of {MIN_ACTIVITY_GOAL} minutes")
    return max(current_minutes - ACTIVITY_GOAL_STEP, MIN_ACTIVITY_GOAL)


def _parse_profile_fields(payload: dict, require_onboarding: bool):
    values = {}

    for name, enum_cls in ONBOARDING_ENUM_FIELDS.items():
        raw = payload.get(name)
        if raw is None:
            if require_onboarding:
                return None, f"{name} is required"
            continue
        try:
            values[name] = enum_cls(raw)
        except ValueError:
            return None, f"Invalid {name}: {raw}"

    for name in EDITABLE_TEXT_FIELDS:
        if payload.get(name) is not None:
            if not isinstance(payload[name], str):
                return None, f"{name} must be a string"
            values[name] = payload[name].strip()

    language = payload.get("language")
    if language is not None:
        if language not in SUPPORTED_LANGUAGES:
            return None, f"Unsupported language: {language}"
        values["language"] = language

    confidence = payload.get("fitness_confidence")
    if confidence is not None:
        if isinstance(confidence, bool) or not isinstance(confidence, int) or not 1 <= confidence <= 5:
            return None, "fitness_confidence must be an integer between 1 and 5"
        values["fitness_confidence"] = confidence

    return values, None


def profile_response(profile: Profile) -> dict:
    level = level_for_points(profile.total_points)
    data = profile_to_dict(profile)
    data.pop("sync_status", None)
    data.update({
        "level": {
            "level": level.level,
            "name": level.name,
            "progress": round(level.progress, 1),
            "next_level_name": level.next_level_name,
            "points_to_next": level.points_to_next
        },
        "stage_description": STAGE_DESCRIPTIONS[profile.current_stage],
        "habit_library_unlocked": habit_library_unlocked(profile),
        "activity_paused": profile.activity_paused,
        "is_paid": profile.is_paid
    })
    return data


class UserProfileService:

    @staticmethod
    def get_user_profile(store, user_id: str):
        try:
            profile = store.get_profile(user_id)
        except StoreError as e:
            logger.error(f"Failed to load profile {user_id}: {e}")
            return jsonify({"error": "Failed to load profile"}), 500

        if not profile:
            return jsonify({"error": "Profile not found"}), 404

        return jsonify(profile_response(profile)), 200

    @staticmethod
    def create_user_profile(store, user_id: str, payload: dict, today: date | None = None):
        """Onboarding completion: every counter starts at zero."""
        values, error = _parse_profile_fields(payload or {}, require_onboarding=True)
        if error:
            return jsonify({"error": error}), 400

        try:
            if store.get_profile(user_id):
                return jsonify({"error": "Profile already exists"}), 400

            profile = Profile(
                user_id=user_id,
                account_created_date=today or date.today(),
                current_activity_goal_minutes=initial_activity_goal(values["time_commitment"]),
                **values
            )
            store.save_profile(profile)
            store.save_badges(user_id, store.get_badges(user_id))
        except StoreError as e:
            logger.error(f"Failed to create profile {user_id}: {e}")
            return jsonify({"error": "Failed to create profile"}), 500

        logger.info(f"Profile created for user {user_id}")

        return jsonify({
            "status": "success",
            "message": "Profile created",
            "profile": profile_response(profile)
        }), 201

    @staticmethod
    def update_user_profile(store, user_id: str, payload: dict):
        values, error = _parse_profile_fields(payload or {}, require_onboarding=False)
        if error:
            return jsonify({"error": error}), 400

        try:
            profile = store.get_profile(user_id)
            if not profile:
                return jsonify({"error": "Profile not found"}), 404

            # progression counters are only changed by check-ins
            profile = replace(profile, **values)
            store.save_profile(profile)
        except StoreError as e:
            logger.error(f"Failed to update profile {user_id}: {e}")
            return jsonify({"error": "Failed to update profile"}), 500

        return jsonify({"status": "success", "message": "Profile updated"}), 200

    @staticmethod
    def adjust_activity_goal(store, user_id: str, payload: dict):
        raw = (payload or {}).get("adjustment")
        try:
            adjustment = GoalAdjustmentEnum(raw)
        except ValueError:
            return jsonify({"error": f"Invalid adjustment: {raw}"}), 400

        try:
            profile = store.get_profile(user_id)
            if not profile:
                return jsonify({"error": "Profile not found"}), 404

            try:
                minutes = adjusted_activity_goal(profile.current_activity_goal_minutes, adjustment)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400

            progressions = profile.goal_progressions + (1 if adjustment == GoalAdjustmentEnum.up else 0)
            profile = replace(profile, current_activity_goal_minutes=minutes, goal_progressions=progressions)

            new_badges = []
            if adjustment == GoalAdjustmentEnum.up:
                badges = store.get_badges(user_id)
                new_badges = award_badges(badges, goal_badge_ids(progressions, minutes))
                if new_badges:
                    store.save_badges(user_id, badges)
            store.save_profile(profile)
        except StoreError as e:
            logger.error(f"Failed to adjust activity goal for user {user_id}: {e}")
            return jsonify({"error": "Failed to update activity goal"}), 500

        logger.info(f"Activity goal for user {user_id} set to {minutes} minutes ({adjustment.value})")

        return jsonify({
            "status": "success",
            "current_activity_goal_minutes": minutes,
            "activity_paused": profile.activity_paused,
            "goal_progressions": progressions,
            "new_badges": [badge.name for badge in new_badges]
        }), 200
