# steadysteps/services/not_behind_service.py
import logging
from dataclasses import replace
from datetime import date, datetime

from flask import jsonify

from steadysteps.errors import ProfileNotFoundError, StoreError
from steadysteps.schemas.contexts import NotBehindDecision
from steadysteps.utils import mean, recent_window, window_start

logger = logging.getLogger(__name__)

ACTIVATE_BELOW_CHECKINS = 3
STRESS_MIN_SAMPLES = 3
HIGH_STRESS_MEAN = 3.5
BROKEN_STREAK_BELOW_CHECKINS = 2
DEACTIVATE_FROM_CHECKINS = 4
DEACTIVATE_BELOW_STRESS = 3


def should_activate(completed: int, stress_values, current_streak: int) -> bool:
    mean_stress = mean(stress_values) or 0
    return (
        completed < ACTIVATE_BELOW_CHECKINS
        or (len(stress_values) >= STRESS_MIN_SAMPLES and mean_stress > HIGH_STRESS_MEAN)
        or (current_streak == 0 and completed < BROKEN_STREAK_BELOW_CHECKINS)
    )


def should_deactivate(completed: int, mean_stress: float) -> bool:
    return completed >= DEACTIVATE_FROM_CHECKINS and mean_stress < DEACTIVATE_BELOW_STRESS


def evaluate_not_behind(checkins, current_streak: int, currently_active: bool = False, now=None,
                        activated_at=None) -> NotBehindDecision:
    """
    Hysteresis filter over the recent check-in window.

    Activates on few check-ins, sustained high stress or a broken streak;
    deactivation (4+ check-ins with mean stress under 3) overrides activation.
    """
    completed = sum(1 for checkin in checkins if checkin.checkin_completed)
    stress_values = [checkin.stress_level for checkin in checkins if checkin.stress_level]
    mean_stress = mean(stress_values) or 0

    active = (
        should_activate(completed, stress_values, current_streak)
        and not should_deactivate(completed, mean_stress)
    )
    changed = active != currently_active

    if changed:
        activated_at = (now or datetime.utcnow()) if active else None

    return NotBehindDecision(
        active=active,
        changed=changed,
        completed_checkins=completed,
        stress_samples=len(stress_values),
        mean_stress=mean_stress,
        activated_at=activated_at,
    )


def refresh_not_behind(store, user_id: str, today: date | None = None, now=None) -> NotBehindDecision:
    """Re-evaluate the mode for one user and persist it when it flips."""
    today = today or date.today()

    profile = store.get_profile(user_id)
    if not profile:
        raise ProfileNotFoundError(user_id)

    checkins = recent_window(
        store.get_checkins(user_id, start_date=window_start(today), end_date=today),
        today
    )
    decision = evaluate_not_behind(
        checkins,
        profile.current_streak,
        currently_active=profile.not_behind_mode_active,
        now=now,
        activated_at=profile.not_behind_mode_activated_at,
    )

    if decision.changed:
        store.save_profile(replace(
            profile,
            not_behind_mode_active=decision.active,
            not_behind_mode_activated_at=decision.activated_at,
        ))
        logger.info(f"Not Behind mode {'activated' if decision.active else 'deactivated'} for user {user_id}")

    return decision


def refresh_not_behind_for_all_users(app):
    """Nightly job: re-evaluate every profile."""
    from steadysteps.stores import get_store

    with app.app_context():
        store = get_store()
        today = date.today()
        changed_count = 0
        failed_count = 0

        for user_id in store.list_user_ids():
            try:
                if refresh_not_behind(store, user_id, today).changed:
                    changed_count += 1
            except (StoreError, ProfileNotFoundError) as e:
                failed_count += 1
                logger.error(f"Not Behind refresh failed for user {user_id}: {e}")

        logger.info(f"[NotBehindJob] {changed_count} profile(s) changed, {failed_count} failed on {today}")


class NotBehindService:

    @staticmethod
    def get_status(store, user_id: str):
        try:
            profile = store.get_profile(user_id)
        except StoreError as e:
            logger.error(f"Failed to load profile {user_id}: {e}")
            return jsonify({"error": "Failed to load profile"}), 500

        if not profile:
            return jsonify({"error": "Profile not found"}), 404

        return jsonify({
            "status": "success",
            "active": profile.not_behind_mode_active,
            "activated_at": profile.not_behind_mode_activated_at.isoformat()
            if profile.not_behind_mode_activated_at else None
        }), 200

    @staticmethod
    def refresh(store, user_id: str, today: date | None = None):
        try:
            decision = refresh_not_behind(store, user_id, today)
        except ProfileNotFoundError:
            return jsonify({"error": "Profile not found"}), 404
        except StoreError as e:
            logger.error(f"Not Behind refresh failed for user {user_id}: {e}")
            return jsonify({"error": "Failed to update Not Behind mode"}), 500

        return jsonify({
            "status": "success",
            "active": decision.active,
            "changed": decision.changed,
            "activated_at": decision.activated_at.isoformat() if decision.activated_at else None,
            "completed_checkins": decision.completed_checkins,
            "mean_stress": round(decision.mean_stress, 2)
        }), 200
