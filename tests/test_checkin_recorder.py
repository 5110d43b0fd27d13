from datetime import date, datetime, timedelta

import pytest

from steadysteps.enums.app_enum import MoodEnum, StageEnum
from steadysteps.errors import CheckinDateError, ProfileNotFoundError
from steadysteps.schemas.progress import Profile
from steadysteps.services.checkin_service import CheckinRecorder

DAY_ONE = date(2026, 3, 1)
NOW = datetime(2026, 3, 1, 20, 0)


def _record(store, user_id, day, activity=True, responses=(True, True, True), mood=None):
    return CheckinRecorder(store).record(
        user_id, activity, list(responses), mood=mood, checkin_date=day, now=NOW
    )


def test_first_checkin(store_with_profile, profile):
    result = _record(store_with_profile, profile.user_id, DAY_ONE, mood=MoodEnum.good)

    assert result.points_earned == 50
    assert result.new_streak == 1
    assert result.is_perfect_day
    assert result.celebrate
    assert "First Check-In" in result.new_badges
    assert "Mood Starter" in result.new_badges

    saved = store_with_profile.get_profile(profile.user_id)
    assert saved.total_points == 50
    assert saved.total_checkins == 1
    assert saved.total_activity_completions == 1
    assert saved.total_nutrition_habits_completed == 3
    assert saved.total_perfect_days == 1
    assert saved.total_mood_checkins == 1
    assert saved.last_checkin_date == DAY_ONE


def test_streak_bonus_on_third_day(store_with_profile, profile):
    for offset in range(3):
        result = _record(store_with_profile, profile.user_id, DAY_ONE + timedelta(days=offset))

    assert result.new_streak == 3
    assert result.points_earned == 55
    assert "Three Day Start" in result.new_badges
    assert store_with_profile.get_profile(profile.user_id).total_points == 155


def test_gap_breaks_streak_but_keeps_longest(store_with_profile, profile):
    for offset in range(3):
        _record(store_with_profile, profile.user_id, DAY_ONE + timedelta(days=offset))

    result = _record(store_with_profile, profile.user_id, DAY_ONE + timedelta(days=6), activity=False,
                     responses=(None, None, None))

    saved = store_with_profile.get_profile(profile.user_id)
    assert result.new_streak == 1
    assert result.points_earned == 10
    assert saved.current_streak == 1
    assert saved.longest_streak == 3
    assert saved.streak_at_loss == 3
    assert saved.longest_streak >= saved.current_streak
    assert "Fresh Start" in result.new_badges


def test_resubmission_keeps_points(store_with_profile, profile):
    _record(store_with_profile, profile.user_id, DAY_ONE)

    result = _record(store_with_profile, profile.user_id, DAY_ONE, activity=False, responses=(False, None, None))

    assert result.resubmission
    assert result.points_earned == 50
    assert result.new_badges == ()
    saved = store_with_profile.get_profile(profile.user_id)
    assert saved.total_checkins == 1
    assert saved.total_points == 50

    checkins = store_with_profile.get_checkins(profile.user_id)
    assert len(checkins) == 1
    assert checkins[0].activity_completed is False
    assert checkins[0].nutrition_responses == [False, None, None]


def test_wellness_before_checkin_is_kept(store_with_profile, profile):
    recorder = CheckinRecorder(store_with_profile)
    recorder.record_wellness(profile.user_id, DAY_ONE, stress_level=4, sleep_quality=2)

    _record(store_with_profile, profile.user_id, DAY_ONE)

    checkin = store_with_profile.get_checkin(profile.user_id, DAY_ONE)
    assert checkin.checkin_completed
    assert checkin.stress_level == 4
    assert checkin.sleep_quality == 2
    assert checkin.points_earned == 50


def test_wellness_does_not_touch_points(store_with_profile, profile):
    _record(store_with_profile, profile.user_id, DAY_ONE)

    CheckinRecorder(store_with_profile).record_wellness(profile.user_id, DAY_ONE, energy_level=5)

    checkin = store_with_profile.get_checkin(profile.user_id, DAY_ONE)
    assert checkin.energy_level == 5
    assert checkin.points_earned == 50
    assert store_with_profile.get_profile(profile.user_id).total_points == 50


def test_stage_advances_at_threshold(store_with_profile, profile):
    store_with_profile.save_profile(Profile(
        user_id=profile.user_id, total_checkins=20, current_streak=0
    ))

    result = _record(store_with_profile, profile.user_id, DAY_ONE)

    assert result.profile.current_stage == StageEnum.consistent
    assert "Stage Shifter" in result.new_badges


def test_badges_are_saved_once(store_with_profile, profile):
    _record(store_with_profile, profile.user_id, DAY_ONE)
    result = _record(store_with_profile, profile.user_id, DAY_ONE + timedelta(days=1))

    assert "First Check-In" not in result.new_badges
    earned = [b.id for b in store_with_profile.get_badges(profile.user_id) if b.earned]
    assert earned.count("first_checkin") == 1


def test_missing_profile(memory_store):
    with pytest.raises(ProfileNotFoundError):
        CheckinRecorder(memory_store).record("nobody", True, [True])


def test_backdated_checkin_is_rejected(store_with_profile, profile):
    for offset in range(1, 6):
        _record(store_with_profile, profile.user_id, DAY_ONE + timedelta(days=offset))
    before = store_with_profile.get_profile(profile.user_id)

    with pytest.raises(CheckinDateError):
        _record(store_with_profile, profile.user_id, DAY_ONE)

    after = store_with_profile.get_profile(profile.user_id)
    assert after == before
    assert after.current_streak == 5
    assert after.streak_at_loss == 0
    assert store_with_profile.get_checkin(profile.user_id, DAY_ONE) is None


def test_backdated_resubmission_still_updates_answers(store_with_profile, profile):
    _record(store_with_profile, profile.user_id, DAY_ONE)
    _record(store_with_profile, profile.user_id, DAY_ONE + timedelta(days=1))

    result = _record(store_with_profile, profile.user_id, DAY_ONE, activity=False)

    assert result.resubmission
    assert store_with_profile.get_profile(profile.user_id).current_streak == 2


def test_future_checkin_is_rejected(store_with_profile, profile):
    _record(store_with_profile, profile.user_id, DAY_ONE)
    recorder = CheckinRecorder(store_with_profile)

    with pytest.raises(CheckinDateError):
        recorder.record(profile.user_id, True, [True, True, True],
                        checkin_date=DAY_ONE + timedelta(days=400), now=NOW, today=DAY_ONE)

    saved = store_with_profile.get_profile(profile.user_id)
    assert saved.last_checkin_date == DAY_ONE
    assert saved.total_checkins == 1
    earned = {b.name for b in store_with_profile.get_badges(profile.user_id) if b.earned}
    assert "Fresh Start" not in earned
    assert "Monthly Return" not in earned


def test_checkin_for_today_is_accepted(store_with_profile, profile):
    result = CheckinRecorder(store_with_profile).record(
        profile.user_id, True, [True, True, True], checkin_date=DAY_ONE, now=NOW, today=DAY_ONE
    )

    assert result.new_streak == 1
