# steadysteps/services/badge_service.py
import logging
from datetime import datetime

from steadysteps.data.badge_catalog import BADGE_CATALOG
from steadysteps.enums.app_enum import StageEnum
from steadysteps.schemas.progress import Badge

logger = logging.getLogger(__name__)

# counter value -> badge id; a badge fires when the counter lands exactly on it
STREAK_BADGES = {
    3: "three_day_start",
    7: "one_week",
    10: "ten_day",
    14: "two_week",
    21: "three_week",
    30: "monthly",
    42: "six_week",
    50: "fifty_streak",
    60: "two_month",
    75: "seventy_five_club",
    90: "ninety_champion",
    100: "century",
    180: "half_year",
    365: "year_of_you",
}

ACTIVITY_BADGES = {
    5: "five_activities",
    10: "ten_activities",
    25: "twentyfive_activities",
    50: "fifty_activities",
    75: "seventyfive_activities",
    100: "hundred_activities",
    150: "onefifty_activities",
    200: "twohundred_activities",
    300: "threehundred_activities",
    400: "fourhundred_activities",
    500: "fivehundred_activities",
    750: "sevenfifty_activities",
    1000: "thousand_activities",
    1500: "movement_life",
}

NUTRITION_DAY_BADGES = {
    3: "nutrition_novice",
    7: "week_wellness",
    14: "nutrition_navigator",
    21: "three_week_nourisher",
    30: "habit_hero",
    42: "six_week_sustainer",
    50: "fifty_day_fuel",
    60: "sixty_day_dedication",
    75: "seventyfive_nourished",
    90: "ninety_nutrition",
    100: "hundred_health",
    180: "half_year_healthy",
    270: "nutrition_master",
    365: "year_good_eating",
}

PERFECT_DAY_BADGES = {
    3: "perfect_three",
    7: "perfect_week",
    10: "perfect_ten",
    20: "twenty_perfect",
    30: "thirty_perfect",
    50: "fifty_perfect",
    75: "seventyfive_perfect",
    100: "hundred_perfect",
    200: "perfect_master",
}

MOOD_BADGES = {
    7: "mood_week",
    14: "mood_aware",
    30: "mood_master",
    90: "emotional_intelligence",
}

GOAL_PROGRESSION_BADGES = {
    1: "goal_grower",
    2: "double_progression",
    3: "triple_progression",
    5: "five_time_grower",
}

COACH_BADGES = {
    10: "coach_connection",
    50: "coach_regular",
}

# missed days on return -> badge id, every reached threshold fires
COMEBACK_BADGES = [
    (3, "fresh_start"),
    (7, "resilient"),
    (14, "never_give_up"),
    (21, "bounce_back"),
    (30, "monthly_return"),
]

LEVEL_BADGES = [
    (5, "level_five"),
    (7, "level_seven"),
    (10, "level_ten"),
]

SECOND_CHANCE_STREAK = 14
THIRD_WIND_STREAK = 30
REBUILT_STREAK = 30
MAX_ACTIVITY_GOAL_MINUTES = 30


def default_badges():
    return [Badge(**entry) for entry in BADGE_CATALOG]


def merge_earned_state(saved_badges):
    """
    Full catalog with the earned flags of `saved_badges` applied.
    Saved ids that are no longer in the catalog are dropped.
    """
    saved = {badge.id: badge for badge in saved_badges}
    badges = default_badges()
    for badge in badges:
        previous = saved.get(badge.id)
        if previous and previous.earned:
            badge.earned = True
            badge.earned_date = previous.earned_date
    return badges


def checkin_badge_ids(before, facts):
    """
    Badge ids a check-in qualifies for.

    `before` is the profile as it was before this check-in was applied,
    `facts` describes the check-in itself.
    """
    ids = []

    if before.total_checkins == 0:
        ids.append("first_checkin")
    if facts.activity_completed and before.total_activity_completions == 0:
        ids.append("first_activity")
    if facts.any_nutrition_yes and before.total_nutrition_habits_completed == 0:
        ids.append("mindful_start")
    if facts.is_perfect_day and before.total_perfect_days == 0:
        ids.append("perfect_start")
    if facts.mood_provided:
        ids.append("mood_starter")

    if facts.new_streak in STREAK_BADGES:
        ids.append(STREAK_BADGES[facts.new_streak])

    if facts.activity_completed:
        ids.append(ACTIVITY_BADGES.get(before.total_activity_completions + 1))
    if facts.full_nutrition_day:
        ids.append(NUTRITION_DAY_BADGES.get(facts.new_nutrition_streak))
    if facts.is_perfect_day:
        ids.append(PERFECT_DAY_BADGES.get(before.total_perfect_days + 1))
    if facts.mood_provided:
        ids.append(MOOD_BADGES.get(before.total_mood_checkins + 1))

    for threshold, badge_id in COMEBACK_BADGES:
        if facts.missed_days >= threshold:
            ids.append(badge_id)

    if facts.new_streak == 1:
        if facts.streak_broken_at >= SECOND_CHANCE_STREAK:
            ids.append("second_chance")
        if facts.streak_broken_at >= THIRD_WIND_STREAK:
            ids.append("third_wind")
    if facts.new_streak == REBUILT_STREAK and before.streak_at_loss >= REBUILT_STREAK:
        ids.append("unstoppable_spirit")

    if facts.previous_stage == StageEnum.beginner and facts.new_stage != StageEnum.beginner:
        ids.append("stage_shifter")
    if facts.previous_stage != StageEnum.confident and facts.new_stage == StageEnum.confident:
        ids.append("confident_climber")

    for level, badge_id in LEVEL_BADGES:
        if facts.previous_level < level <= facts.new_level:
            ids.append(badge_id)

    return _unique(ids)


def goal_badge_ids(goal_progressions, activity_goal_minutes):
    ids = [GOAL_PROGRESSION_BADGES.get(goal_progressions)]
    if activity_goal_minutes >= MAX_ACTIVITY_GOAL_MINUTES:
        ids.append("maximum_achievement")
    return _unique(ids)


def coach_badge_ids(conversations_count):
    return _unique([COACH_BADGES.get(conversations_count)])


def award_badges(badges, badge_ids, now=None):
    """
    Mark the given badges earned. Badges that are already earned are left
    untouched, so an unlock happens at most once.
    Returns the badges that were newly earned.
    """
    now = now or datetime.utcnow()
    by_id = {badge.id: badge for badge in badges}
    newly_earned = []

    for badge_id in badge_ids:
        badge = by_id.get(badge_id)
        if badge is None:
            logger.warning(f"Unknown badge id {badge_id}")
            continue
        if badge.earned:
            continue
        badge.earned = True
        badge.earned_date = now
        newly_earned.append(badge)

    return newly_earned


def should_celebrate(new_badges, is_perfect_day, new_streak):
    return bool(new_badges) or is_perfect_day or new_streak % 7 == 0


def _unique(ids):
    seen = set()
    result = []
    for badge_id in ids:
        if badge_id and badge_id not in seen:
            seen.add(badge_id)
            result.append(badge_id)
    return result
