# steadysteps/services/checkin_service.py
import logging
import math
from dataclasses import replace
from datetime import date, datetime

from flask import jsonify

from steadysteps.data.nutrition_questions import PRIMARY_NUTRITION_QUESTIONS, SECONDARY_NUTRITION_QUESTIONS
from steadysteps.enums.app_enum import MoodEnum
from steadysteps.errors import CheckinDateError, ProfileNotFoundError, StoreError
from steadysteps.mappers.progress_mapper import checkin_summary
from steadysteps.schemas.contexts import CheckinFacts, CheckinResult
from steadysteps.schemas.progress import Checkin
from steadysteps.services.badge_service import award_badges, checkin_badge_ids, should_celebrate
from steadysteps.services.level_service import level_for_points, stage_for_checkins
from steadysteps.services.points_service import (
    calculate_points,
    count_missed_days,
    count_nutrition_yes,
    is_full_nutrition_day,
    is_perfect_day,
    resolve_prior_streak,
)
from steadysteps.utils import parse_date

logger = logging.getLogger(__name__)

PAGE_SIZE = 30
WELLNESS_FIELDS = ("stress_level", "sleep_quality", "energy_level")
WELLNESS_MIN = 1
WELLNESS_MAX = 5


def nutrition_questions(profile):
    primary = PRIMARY_NUTRITION_QUESTIONS[profile.nutrition_challenge]
    return [primary] + SECONDARY_NUTRITION_QUESTIONS[:max(profile.nutrition_questions_count - 1, 0)]


class CheckinRecorder:
    """
    Applies a daily check-in to a user's progression: points, streak,
    counters, stage/level and badges. One record per date; a second
    submission for an already completed date only replaces the answers.
    """

    def __init__(self, store):
        self.store = store

    def record(self, user_id, activity_completed, nutrition_responses, mood=None,
               checkin_date=None, library_habits_completed=None, now=None, today=None) -> CheckinResult:
        now = now or datetime.utcnow()
        today = today or date.today()
        checkin_date = checkin_date or today
        nutrition_responses = list(nutrition_responses)
        library_habits_completed = list(library_habits_completed or [])

        profile = self.store.get_profile(user_id)
        if not profile:
            raise ProfileNotFoundError(user_id)

        existing = self.store.get_checkin(user_id, checkin_date)
        if existing and existing.checkin_completed:
            return self._resubmit(user_id, profile, existing, activity_completed,
                                  nutrition_responses, mood, library_habits_completed)

        if checkin_date > today:
            raise CheckinDateError("Check-in date cannot be in the future")
        # streak and counters only move forward from the latest check-in
        if profile.last_checkin_date and checkin_date < profile.last_checkin_date:
            raise CheckinDateError("Check-in date is before the last check-in")

        prior_streak = resolve_prior_streak(profile.current_streak, profile.last_checkin_date, checkin_date)
        new_streak = prior_streak + 1
        streak_broken_at = profile.current_streak if prior_streak == 0 else 0

        points = calculate_points(activity_completed, nutrition_responses, new_streak)
        perfect = is_perfect_day(activity_completed, nutrition_responses)
        nutrition_yes = count_nutrition_yes(nutrition_responses)
        full_nutrition = bool(nutrition_responses) and is_full_nutrition_day(nutrition_responses)
        new_nutrition_streak = 0
        if full_nutrition:
            new_nutrition_streak = (profile.nutrition_streak if prior_streak else 0) + 1

        total_checkins = profile.total_checkins + 1
        total_points = profile.total_points + points
        new_stage = stage_for_checkins(total_checkins, profile.current_stage)
        new_level = level_for_points(total_points).level

        facts = CheckinFacts(
            activity_completed=bool(activity_completed),
            nutrition_yes_count=nutrition_yes,
            is_perfect_day=perfect,
            full_nutrition_day=full_nutrition,
            new_streak=new_streak,
            mood_provided=mood is not None,
            new_nutrition_streak=new_nutrition_streak,
            missed_days=count_missed_days(profile.last_checkin_date, checkin_date),
            streak_broken_at=streak_broken_at,
            previous_stage=profile.current_stage,
            new_stage=new_stage,
            previous_level=profile.current_level,
            new_level=new_level,
        )

        badges = self.store.get_badges(user_id)
        newly_earned = award_badges(badges, checkin_badge_ids(profile, facts), now)

        checkin = Checkin(
            checkin_date=checkin_date,
            checkin_completed=True,
            activity_completed=bool(activity_completed),
            nutrition_responses=nutrition_responses,
            mood=mood,
            points_earned=points,
            stress_level=existing.stress_level if existing else None,
            sleep_quality=existing.sleep_quality if existing else None,
            energy_level=existing.energy_level if existing else None,
            library_habits_completed=library_habits_completed,
        )

        updated_profile = replace(
            profile,
            total_points=total_points,
            current_streak=new_streak,
            longest_streak=max(profile.longest_streak, new_streak),
            total_checkins=total_checkins,
            total_activity_completions=profile.total_activity_completions + (1 if activity_completed else 0),
            total_nutrition_habits_completed=profile.total_nutrition_habits_completed + nutrition_yes,
            total_perfect_days=profile.total_perfect_days + (1 if perfect else 0),
            total_mood_checkins=profile.total_mood_checkins + (1 if mood is not None else 0),
            nutrition_streak=new_nutrition_streak,
            streak_at_loss=streak_broken_at or profile.streak_at_loss,
            current_stage=new_stage,
            current_level=new_level,
            last_checkin_date=max(checkin_date, profile.last_checkin_date or checkin_date),
        )

        self.store.save_checkin(user_id, checkin)
        self.store.save_profile(updated_profile)
        if newly_earned:
            self.store.save_badges(user_id, badges)

        badge_names = tuple(badge.name for badge in newly_earned)
        logger.info(
            f"Check-in recorded for user {user_id} on {checkin_date}: "
            f"{points} points, streak {new_streak}, badges {list(badge_names)}"
        )

        return CheckinResult(
            checkin=checkin,
            profile=updated_profile,
            points_earned=points,
            new_streak=new_streak,
            is_perfect_day=perfect,
            new_badges=badge_names,
            celebrate=should_celebrate(badge_names, perfect, new_streak),
        )

    def _resubmit(self, user_id, profile, existing, activity_completed, nutrition_responses, mood,
                  library_habits_completed):
        # points and counters stay as they were on the first submission
        checkin = replace(
            existing,
            activity_completed=bool(activity_completed),
            nutrition_responses=nutrition_responses,
            mood=mood,
            library_habits_completed=library_habits_completed,
        )
        self.store.save_checkin(user_id, checkin)
        logger.info(f"Check-in for user {user_id} on {existing.checkin_date} updated, points unchanged")

        return CheckinResult(
            checkin=checkin,
            profile=profile,
            points_earned=existing.points_earned,
            new_streak=profile.current_streak,
            is_perfect_day=is_perfect_day(activity_completed, nutrition_responses),
            resubmission=True,
        )

    def record_wellness(self, user_id, checkin_date, stress_level=None, sleep_quality=None,
                        energy_level=None) -> Checkin:
        """Upsert the wellness answers of a day without touching the check-in answers."""
        if not self.store.get_profile(user_id):
            raise ProfileNotFoundError(user_id)

        existing = self.store.get_checkin(user_id, checkin_date) or Checkin(checkin_date=checkin_date)
        checkin = replace(
            existing,
            stress_level=stress_level if stress_level is not None else existing.stress_level,
            sleep_quality=sleep_quality if sleep_quality is not None else existing.sleep_quality,
            energy_level=energy_level if energy_level is not None else existing.energy_level,
        )
        self.store.save_checkin(user_id, checkin)
        logger.info(f"Wellness check-in saved for user {user_id} on {checkin_date}")
        return checkin


def _validate_checkin_payload(payload, questions_count):
    if not isinstance(payload, dict):
        return None, "Invalid payload"

    activity_completed = payload.get("activity_completed")
    if not isinstance(activity_completed, bool):
        return None, "activity_completed must be true or false"

    responses = payload.get("nutrition_responses", [])
    if not isinstance(responses, list) or any(r is not None and not isinstance(r, bool) for r in responses):
        return None, "nutrition_responses must be a list of true, false or null"
    if len(responses) > questions_count:
        return None, f"Expected at most {questions_count} nutrition responses"
    responses = responses + [None] * (questions_count - len(responses))

    mood = payload.get("mood")
    if mood is not None:
        try:
            mood = MoodEnum(mood)
        except ValueError:
            return None, f"Invalid mood: {mood}"

    try:
        checkin_date = parse_date(payload.get("date")) or date.today()
    except (TypeError, ValueError):
        return None, "Invalid date format, use YYYY-MM-DD"
    if checkin_date > date.today():
        return None, "Check-in date cannot be in the future"

    habits = payload.get("library_habits_completed") or []
    if not isinstance(habits, list):
        return None, "library_habits_completed must be a list"

    return {
        "activity_completed": activity_completed,
        "nutrition_responses": responses,
        "mood": mood,
        "checkin_date": checkin_date,
        "library_habits_completed": habits,
    }, None


def _validate_wellness(payload):
    values = {}
    for field in WELLNESS_FIELDS:
        value = payload.get(field)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or not WELLNESS_MIN <= value <= WELLNESS_MAX:
            return None, f"{field} must be an integer between {WELLNESS_MIN} and {WELLNESS_MAX}"
        values[field] = value
    if not values:
        return None, "No wellness values provided"
    return values, None


class CheckinService:

    @staticmethod
    def submit_checkin(store, user_id: str, payload: dict):
        try:
            profile = store.get_profile(user_id)
            if not profile:
                return jsonify({"error": "Profile not found"}), 404

            data, error = _validate_checkin_payload(payload, profile.nutrition_questions_count)
            if error:
                return jsonify({"error": error}), 400

            result = CheckinRecorder(store).record(user_id, **data)
        except CheckinDateError as e:
            return jsonify({"error": str(e)}), 400
        except ProfileNotFoundError:
            return jsonify({"error": "Profile not found"}), 404
        except StoreError as e:
            logger.error(f"Failed to record check-in for user {user_id}: {e}")
            return jsonify({"error": "Failed to save check-in"}), 500

        level = level_for_points(result.profile.total_points)

        return jsonify({
            "status": "success",
            "action": "update" if result.resubmission else "create",
            "checkin": checkin_summary(result.checkin),
            "points_earned": result.points_earned,
            "total_points": result.profile.total_points,
            "current_streak": result.profile.current_streak,
            "longest_streak": result.profile.longest_streak,
            "is_perfect_day": result.is_perfect_day,
            "new_badges": list(result.new_badges),
            "celebrate": result.celebrate,
            "level": level.level,
            "level_name": level.name,
            "stage": result.profile.current_stage.value
        }), 200 if result.resubmission else 201

    @staticmethod
    def save_wellness(store, user_id: str, date_str: str, payload: dict):
        try:
            checkin_date = parse_date(date_str)
        except (TypeError, ValueError):
            return jsonify({"error": "Invalid date format, use YYYY-MM-DD"}), 400

        values, error = _validate_wellness(payload or {})
        if error:
            return jsonify({"error": error}), 400

        try:
            checkin = CheckinRecorder(store).record_wellness(user_id, checkin_date, **values)
        except ProfileNotFoundError:
            return jsonify({"error": "Profile not found"}), 404
        except StoreError as e:
            logger.error(f"Failed to save wellness check-in for user {user_id}: {e}")
            return jsonify({"error": "Failed to save wellness check-in"}), 500

        return jsonify({"status": "success", "checkin": checkin_summary(checkin)}), 200

    @staticmethod
    def get_checkins(store, user_id: str, page: int = 1, page_size: int = PAGE_SIZE):
        if page < 1 or page_size < 1:
            return jsonify({"error": "page and page_size must be positive"}), 400

        try:
            checkins = store.get_checkins(user_id)
        except StoreError as e:
            logger.error(f"Failed to load check-ins for user {user_id}: {e}")
            return jsonify({"error": "Failed to load check-ins"}), 500

        total_count = len(checkins)
        start = (page - 1) * page_size
        end = start + page_size

        return jsonify({
            "status": "success",
            "checkins": [checkin_summary(c) for c in checkins[start:end]],
            "pagination": {
                "page": page,
                "page_size": page_size,
                "total_count": total_count,
                "total_pages": math.ceil(total_count / page_size),
                "has_more": end < total_count
            }
        }), 200

    @staticmethod
    def get_checkins_for_range(store, user_id: str, start_date: str | None, end_date: str | None):
        try:
            start = parse_date(start_date)
            end = parse_date(end_date)
        except (TypeError, ValueError):
            return jsonify({"error": "Invalid date format, use YYYY-MM-DD"}), 400

        try:
            checkins = store.get_checkins(user_id, start_date=start, end_date=end)
        except StoreError as e:
            logger.error(f"Failed to load check-ins for user {user_id}: {e}")
            return jsonify({"error": "Failed to load check-ins"}), 500

        # calendar views read oldest first
        checkins = sorted(checkins, key=lambda c: c.checkin_date)
        return jsonify({"status": "success", "checkins": [checkin_summary(c) for c in checkins]}), 200

    @staticmethod
    def get_today_checkin(store, user_id: str, today: date | None = None):
        today = today or date.today()
        try:
            checkin = store.get_checkin(user_id, today)
        except StoreError as e:
            logger.error(f"Failed to load today's check-in for user {user_id}: {e}")
            return jsonify({"error": "Failed to load check-in"}), 500

        return jsonify({
            "status": "success",
            "checkin": checkin_summary(checkin) if checkin else None
        }), 200

    @staticmethod
    def get_nutrition_questions(store, user_id: str):
        try:
            profile = store.get_profile(user_id)
        except StoreError as e:
            logger.error(f"Failed to load profile {user_id}: {e}")
            return jsonify({"error": "Failed to load profile"}), 500

        if not profile:
            return jsonify({"error": "Profile not found"}), 404

        return jsonify({"status": "success", "questions": nutrition_questions(profile)}), 200
