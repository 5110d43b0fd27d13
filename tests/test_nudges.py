import random
from datetime import date, timedelta

from steadysteps.data.nudge_messages import NUDGE_MESSAGES
from steadysteps.enums.app_enum import NudgeTypeEnum, ToneEnum
from steadysteps.schemas.contexts import NudgeContext
from steadysteps.schemas.progress import Checkin
from steadysteps.services.nudge_service import select_nudge, select_nudge_type

TODAY = date(2026, 3, 10)


def _checkin(days_ago, completed=True, **wellness):
    return Checkin(checkin_date=TODAY - timedelta(days=days_ago), checkin_completed=completed, **wellness)


def _context(*checkins, language="en"):
    ordered = sorted(checkins, key=lambda c: c.checkin_date, reverse=True)
    return NudgeContext(today=TODAY, checkins=tuple(ordered), language=language)


def test_no_recent_checkin_is_missed_days():
    assert select_nudge_type(_context(_checkin(3))) == (NudgeTypeEnum.missed_days, ToneEnum.gentle)


def test_missed_days_wins_over_high_stress():
    context = _context(_checkin(2, stress_level=5), _checkin(3, stress_level=5))
    assert select_nudge_type(context)[0] == NudgeTypeEnum.missed_days


def test_high_stress_trend():
    context = _context(_checkin(0, stress_level=4), _checkin(1, stress_level=4))
    assert select_nudge_type(context) == (NudgeTypeEnum.high_stress, ToneEnum.supportive)


def test_single_stress_value_is_not_a_trend():
    context = _context(_checkin(0, stress_level=5), _checkin(1))
    assert select_nudge_type(context)[0] == NudgeTypeEnum.encouragement


def test_stress_trend_uses_latest_three_values():
    context = _context(
        _checkin(0, stress_level=2),
        _checkin(1, stress_level=2),
        _checkin(2, stress_level=2),
        _checkin(3, stress_level=5),
    )
    assert select_nudge_type(context)[0] != NudgeTypeEnum.high_stress


def test_low_sleep_trend():
    context = _context(_checkin(0, sleep_quality=2, stress_level=2), _checkin(1, sleep_quality=2))
    assert select_nudge_type(context) == (NudgeTypeEnum.low_sleep, ToneEnum.supportive)


def test_consistency():
    context = _context(*[_checkin(days_ago) for days_ago in range(5)])
    assert select_nudge_type(context) == (NudgeTypeEnum.consistency, ToneEnum.celebratory)


def test_stress_mean_at_threshold_is_not_high_stress():
    context = _context(_checkin(0, stress_level=4), _checkin(1, stress_level=3))
    assert select_nudge_type(context)[0] == NudgeTypeEnum.encouragement


def test_sleep_mean_at_threshold_is_not_low_sleep():
    context = _context(_checkin(0, sleep_quality=3), _checkin(1, sleep_quality=2))
    assert select_nudge_type(context)[0] == NudgeTypeEnum.encouragement


def test_consistency_needs_five_checkins():
    four = _context(*[_checkin(days_ago) for days_ago in range(4)])
    five = _context(*[_checkin(days_ago) for days_ago in range(5)])

    assert select_nudge_type(four)[0] == NudgeTypeEnum.encouragement
    assert select_nudge_type(five)[0] == NudgeTypeEnum.consistency


def test_encouragement_fallback():
    assert select_nudge_type(_context(_checkin(1))) == (NudgeTypeEnum.encouragement, ToneEnum.gentle)


def test_seeded_selection_is_reproducible():
    context = _context(_checkin(0))
    first = select_nudge(context, random.Random(7))
    second = select_nudge(context, random.Random(7))
    assert first == second
    assert first.message in NUDGE_MESSAGES["en"][NudgeTypeEnum.encouragement]


def test_spanish_messages():
    nudge = select_nudge(_context(language="es"), random.Random(1))
    assert nudge.message in NUDGE_MESSAGES["es"][NudgeTypeEnum.missed_days]
