# steadysteps/services/progress_service.py
import logging
from collections import Counter
from datetime import date

from flask import jsonify

from steadysteps.errors import StoreError
from steadysteps.mappers.progress_mapper import badge_to_dict
from steadysteps.services.level_service import habit_library_unlocked, level_for_points
from steadysteps.utils import mean, recent_window, window_start

logger = logging.getLogger(__name__)

WEEK_DAYS = 7


def weekly_stats(checkins, today: date) -> dict:
    """Summary of the last seven days (today and the six before it)."""
    week = recent_window(checkins, today, days=WEEK_DAYS - 1)
    completed = [c for c in week if c.checkin_completed]

    answered = [r for c in completed for r in c.nutrition_responses if r is not None]
    nutrition_score = round(sum(1 for r in answered if r) / len(answered) * 100) if answered else 0

    energy = mean(c.energy_level for c in week if c.energy_level)
    moods = Counter(c.mood.value for c in completed if c.mood)

    return {
        "checkins": len(completed),
        "activity_completions": sum(1 for c in completed if c.activity_completed),
        "nutrition_score": nutrition_score,
        "average_energy": round(energy, 1) if energy is not None else None,
        "most_common_mood": moods.most_common(1)[0][0] if moods else None,
        "points": sum(c.points_earned for c in completed)
    }


class ProgressService:

    @staticmethod
    def get_level(store, user_id: str):
        try:
            profile = store.get_profile(user_id)
        except StoreError as e:
            logger.error(f"Failed to load profile {user_id}: {e}")
            return jsonify({"error": "Failed to load profile"}), 500

        if not profile:
            return jsonify({"error": "Profile not found"}), 404

        level = level_for_points(profile.total_points)

        return jsonify({
            "total_points": profile.total_points,
            "level": level.level,
            "level_name": level.name,
            "level_progress": round(level.progress, 1),
            "is_max_level": level.is_max_level,
            "next_level_name": level.next_level_name,
            "points_to_next": level.points_to_next,
            "stage": profile.current_stage.value,
            "habit_library_unlocked": habit_library_unlocked(profile),
            "current_streak": profile.current_streak,
            "longest_streak": profile.longest_streak
        }), 200

    @staticmethod
    def get_weekly_stats(store, user_id: str, today: date | None = None):
        today = today or date.today()
        try:
            checkins = store.get_checkins(user_id, start_date=window_start(today, WEEK_DAYS - 1), end_date=today)
        except StoreError as e:
            logger.error(f"Failed to load weekly stats for user {user_id}: {e}")
            return jsonify({"error": "Failed to load check-ins"}), 500

        return jsonify({"status": "success", "stats": weekly_stats(checkins, today)}), 200

    @staticmethod
    def get_badges(store, user_id: str):
        try:
            badges = store.get_badges(user_id)
        except StoreError as e:
            logger.error(f"Failed to load badges for user {user_id}: {e}")
            return jsonify({"error": "Failed to load badges"}), 500

        return jsonify({
            "status": "success",
            "earned_count": sum(1 for badge in badges if badge.earned),
            "total_count": len(badges),
            "badges": [badge_to_dict(badge) for badge in badges]
        }), 200
