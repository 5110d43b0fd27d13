# steadysteps/services/points_service.py
from datetime import date, timedelta

BASE_POINTS = 10
ACTIVITY_POINTS = 15
NUTRITION_YES_POINTS = 5
PERFECT_DAY_BONUS = 10
STREAK_BONUS = 5
STREAK_BONUS_FROM = 3


def count_nutrition_yes(nutrition_responses) -> int:
    # unanswered slots are None and never count
    return sum(1 for response in nutrition_responses if response is True)


def is_full_nutrition_day(nutrition_responses) -> bool:
    return all(response is True for response in nutrition_responses)


def is_perfect_day(activity_completed: bool, nutrition_responses) -> bool:
    return bool(activity_completed) and is_full_nutrition_day(nutrition_responses)


def calculate_points(activity_completed: bool, nutrition_responses, streak: int) -> int:
    """
    Points for one check-in.
    `streak` is the streak including this check-in (prior streak + 1).
    """
    points = BASE_POINTS

    if activity_completed:
        points += ACTIVITY_POINTS

    points += count_nutrition_yes(nutrition_responses) * NUTRITION_YES_POINTS

    if is_perfect_day(activity_completed, nutrition_responses):
        points += PERFECT_DAY_BONUS

    if streak >= STREAK_BONUS_FROM:
        points += STREAK_BONUS

    return points


def resolve_prior_streak(current_streak: int, last_checkin_date, checkin_date: date) -> int:
    """
    The streak a new check-in builds on: kept when the last check-in was the
    day before (or the same day), otherwise the streak is broken.
    """
    if last_checkin_date is None:
        return 0
    if last_checkin_date in (checkin_date, checkin_date - timedelta(days=1)):
        return current_streak
    return 0


def count_missed_days(last_checkin_date, checkin_date: date) -> int:
    if last_checkin_date is None:
        return 0
    return max(0, (checkin_date - last_checkin_date).days - 1)
