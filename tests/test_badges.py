from datetime import datetime

from steadysteps.enums.app_enum import StageEnum
from steadysteps.schemas.contexts import CheckinFacts
from steadysteps.schemas.progress import Profile
from steadysteps.services.badge_service import (
    award_badges,
    checkin_badge_ids,
    coach_badge_ids,
    default_badges,
    goal_badge_ids,
    merge_earned_state,
    should_celebrate,
)


def _facts(**overrides):
    values = dict(
        activity_completed=False,
        nutrition_yes_count=0,
        is_perfect_day=False,
        full_nutrition_day=False,
        new_streak=1,
        mood_provided=False,
    )
    values.update(overrides)
    return CheckinFacts(**values)


def test_first_perfect_checkin_fires_every_first_badge():
    facts = _facts(activity_completed=True, nutrition_yes_count=3, is_perfect_day=True,
                   full_nutrition_day=True, mood_provided=True, new_nutrition_streak=1)

    ids = checkin_badge_ids(Profile(user_id="u"), facts)

    for badge_id in ("first_checkin", "first_activity", "mindful_start", "perfect_start", "mood_starter"):
        assert badge_id in ids


def test_first_badges_need_zero_counters():
    before = Profile(user_id="u", total_checkins=4, total_activity_completions=2,
                     total_nutrition_habits_completed=6, total_perfect_days=1)
    facts = _facts(activity_completed=True, nutrition_yes_count=3, is_perfect_day=True, full_nutrition_day=True)

    ids = checkin_badge_ids(before, facts)

    assert "first_checkin" not in ids
    assert "first_activity" not in ids
    assert "mindful_start" not in ids
    assert "perfect_start" not in ids


def test_one_week_fires_on_seventh_day_only():
    before = Profile(user_id="u", total_checkins=6)
    assert "one_week" in checkin_badge_ids(before, _facts(new_streak=7))
    assert "one_week" not in checkin_badge_ids(before, _facts(new_streak=8))


def test_activity_milestone_uses_new_total():
    before = Profile(user_id="u", total_checkins=9, total_activity_completions=4)
    assert "five_activities" in checkin_badge_ids(before, _facts(activity_completed=True))


def test_comeback_badges_accumulate():
    before = Profile(user_id="u", total_checkins=10, current_streak=5)
    ids = checkin_badge_ids(before, _facts(missed_days=8))
    assert "fresh_start" in ids
    assert "resilient" in ids
    assert "never_give_up" not in ids


def test_second_chance_after_losing_long_streak():
    before = Profile(user_id="u", total_checkins=20, current_streak=15)
    ids = checkin_badge_ids(before, _facts(new_streak=1, streak_broken_at=15))
    assert "second_chance" in ids
    assert "third_wind" not in ids


def test_stage_and_level_transitions():
    before = Profile(user_id="u", total_checkins=20)
    facts = _facts(previous_stage=StageEnum.beginner, new_stage=StageEnum.consistent,
                   previous_level=4, new_level=5)
    ids = checkin_badge_ids(before, facts)
    assert "stage_shifter" in ids
    assert "level_five" in ids


def test_award_is_one_way():
    badges = default_badges()
    first = datetime(2026, 3, 1, 9, 0)

    earned = award_badges(badges, ["first_checkin"], now=first)
    again = award_badges(badges, ["first_checkin"], now=datetime(2026, 3, 2, 9, 0))

    assert [b.id for b in earned] == ["first_checkin"]
    assert again == []
    badge = next(b for b in badges if b.id == "first_checkin")
    assert badge.earned_date == first


def test_unknown_badge_is_ignored():
    assert award_badges(default_badges(), ["not_a_badge"]) == []


def test_merge_keeps_earned_state():
    badges = default_badges()
    award_badges(badges, ["one_week"])

    merged = merge_earned_state([b for b in badges if b.earned])

    assert len(merged) == len(badges)
    assert [b.id for b in merged if b.earned] == ["one_week"]


def test_goal_and_coach_badges():
    assert goal_badge_ids(1, 15) == ["goal_grower"]
    assert goal_badge_ids(4, 30) == ["maximum_achievement"]
    assert coach_badge_ids(10) == ["coach_connection"]
    assert coach_badge_ids(11) == []


def test_celebrate():
    assert should_celebrate(("One Week Wonder",), False, 3)
    assert should_celebrate((), True, 2)
    assert should_celebrate((), False, 14)
    assert not should_celebrate((), False, 5)
