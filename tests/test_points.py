from datetime import date

from steadysteps.services.points_service import (
    calculate_points,
    count_missed_days,
    is_perfect_day,
    resolve_prior_streak,
)


def test_base_points_only():
    assert calculate_points(False, [None, None, None], 1) == 10


def test_perfect_day_with_streak_bonus():
    assert calculate_points(True, [True, True, True], 3) == 55


def test_streak_bonus_starts_at_three():
    assert calculate_points(False, [], 2) == 10
    assert calculate_points(False, [], 3) == 15
    assert calculate_points(False, [], 4) == 15


def test_each_yes_answer_adds_five():
    assert calculate_points(False, [True, False, None], 1) == 15
    assert calculate_points(True, [True, True, False], 1) == 35


def test_unanswered_slot_blocks_perfect_day():
    assert not is_perfect_day(True, [True, True, None])
    assert calculate_points(True, [True, True, None], 1) == 35


def test_truthy_non_bool_is_not_a_yes():
    assert calculate_points(False, [1, "yes", True], 1) == 15


def test_prior_streak_continues_from_yesterday():
    assert resolve_prior_streak(4, date(2026, 3, 9), date(2026, 3, 10)) == 4


def test_prior_streak_breaks_after_a_gap():
    assert resolve_prior_streak(4, date(2026, 3, 7), date(2026, 3, 10)) == 0
    assert resolve_prior_streak(0, None, date(2026, 3, 10)) == 0


def test_missed_days():
    assert count_missed_days(None, date(2026, 3, 10)) == 0
    assert count_missed_days(date(2026, 3, 9), date(2026, 3, 10)) == 0
    assert count_missed_days(date(2026, 3, 5), date(2026, 3, 10)) == 4
