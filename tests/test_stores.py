from dataclasses import replace
from datetime import date, datetime

import pytest

from steadysteps.enums.app_enum import MoodEnum, SyncStatusEnum
from steadysteps.errors import StoreError
from steadysteps.schemas.progress import Checkin
from steadysteps.services.badge_service import award_badges
from steadysteps.stores import InMemoryProgressStore, JsonFileProgressStore, SqlProgressStore, SyncedProgressStore

DAY = date(2026, 3, 10)
FULL_DAY = date(2026, 3, 5)


def _checkin(day=DAY, points=50, **overrides):
    values = dict(
        checkin_date=day,
        checkin_completed=True,
        activity_completed=True,
        nutrition_responses=[True, None, False],
        mood=MoodEnum.great,
        points_earned=points,
        stress_level=3,
    )
    values.update(overrides)
    return Checkin(**values)


def _full_checkin():
    return Checkin(
        checkin_date=FULL_DAY,
        checkin_completed=True,
        activity_completed=True,
        nutrition_responses=[True, False, None],
        mood=MoodEnum.okay,
        points_earned=45,
        stress_level=4,
        sleep_quality=2,
        energy_level=5,
        library_habits_completed=["stretch_break", "water_first"],
    )


class FlakyStore(InMemoryProgressStore):
    """Remote stand-in whose writes fail while `offline` is set."""

    def __init__(self):
        super().__init__()
        self.offline = False

    def save_profile(self, profile):
        if self.offline:
            raise StoreError("remote unavailable")
        super().save_profile(profile)

    def save_checkin(self, user_id, checkin):
        if self.offline:
            raise StoreError("remote unavailable")
        super().save_checkin(user_id, checkin)


def _exercise_store(store, profile):
    store.save_profile(profile)
    assert store.get_profile(profile.user_id) == profile
    assert store.list_user_ids() == [profile.user_id]

    store.save_checkin(profile.user_id, _checkin(day=date(2026, 3, 8)))
    store.save_checkin(profile.user_id, _checkin())
    store.save_checkin(profile.user_id, _checkin(points=30, activity_completed=False))
    store.save_checkin(profile.user_id, _full_checkin())

    assert store.get_checkin(profile.user_id, FULL_DAY) == _full_checkin()

    checkins = store.get_checkins(profile.user_id)
    assert [c.checkin_date for c in checkins] == [DAY, date(2026, 3, 8), FULL_DAY]
    assert checkins[0].points_earned == 30
    assert checkins[0].nutrition_responses == [True, None, False]
    assert checkins[0].mood == MoodEnum.great
    assert store.get_checkins(profile.user_id, start_date=date(2026, 3, 9)) == [checkins[0]]

    badges = store.get_badges(profile.user_id)
    award_badges(badges, ["first_checkin"], now=datetime(2026, 3, 10, 9, 0))
    store.save_badges(profile.user_id, badges)
    earned = [b for b in store.get_badges(profile.user_id) if b.earned]
    assert [b.id for b in earned] == ["first_checkin"]
    assert earned[0].earned_date == datetime(2026, 3, 10, 9, 0)


def test_memory_store(profile):
    _exercise_store(InMemoryProgressStore(), profile)


def test_json_store(tmp_path, profile):
    _exercise_store(JsonFileProgressStore(str(tmp_path)), profile)


def test_json_store_keeps_one_document_per_user(tmp_path, profile):
    store = JsonFileProgressStore(str(tmp_path))
    store.save_profile(profile)
    store.save_checkin(profile.user_id, _checkin())
    assert len(list(tmp_path.iterdir())) == 1


def test_json_store_unreadable_file(tmp_path, profile):
    store = JsonFileProgressStore(str(tmp_path))
    store.save_profile(profile)
    [path] = tmp_path.iterdir()
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreError):
        store.get_profile(profile.user_id)


def test_json_store_keeps_similar_ids_apart(tmp_path, profile):
    store = JsonFileProgressStore(str(tmp_path))
    for user_id in ("a@b", "ab", "AB", "../ab"):
        store.save_profile(replace(profile, user_id=user_id, first_name=user_id))

    assert store.list_user_ids() == sorted(["a@b", "ab", "AB", "../ab"])
    assert store.get_profile("a@b").first_name == "a@b"
    assert store.get_profile("ab").first_name == "ab"
    assert store.get_profile("AB").first_name == "AB"
    assert len(list(tmp_path.iterdir())) == 4


def test_sql_store(app, profile):
    with app.app_context():
        _exercise_store(SqlProgressStore(), profile)


def test_memory_store_returns_copies(profile):
    store = InMemoryProgressStore()
    store.save_profile(profile)
    loaded = store.get_profile(profile.user_id)
    loaded.total_points = 999
    assert store.get_profile(profile.user_id).total_points == 0


def test_synced_store_marks_dirty_on_remote_failure(tmp_path, profile):
    remote = FlakyStore()
    store = SyncedProgressStore(JsonFileProgressStore(str(tmp_path)), remote)
    store.save_profile(profile)

    remote.offline = True
    store.save_checkin(profile.user_id, _checkin())

    assert store.local.get_checkin(profile.user_id, DAY).sync_status == SyncStatusEnum.dirty
    assert remote.get_checkin(profile.user_id, DAY) is None

    remote.offline = False
    summary = store.push_pending(profile.user_id)

    assert summary == {"pushed": 1, "conflicts": 0, "failed": 0}
    assert store.local.get_checkin(profile.user_id, DAY).sync_status == SyncStatusEnum.clean
    assert remote.get_checkin(profile.user_id, DAY).points_earned == 50


def test_synced_store_detects_conflict(tmp_path, profile):
    remote = FlakyStore()
    store = SyncedProgressStore(JsonFileProgressStore(str(tmp_path)), remote)
    store.save_profile(profile)

    remote.offline = True
    store.save_checkin(profile.user_id, _checkin(points=30))
    remote.offline = False
    # another device completed the same day in the meantime
    remote.save_checkin(profile.user_id, _checkin(points=50))

    summary = store.push_pending(profile.user_id)

    assert summary["conflicts"] == 1
    assert store.local.get_checkin(profile.user_id, DAY).sync_status == SyncStatusEnum.conflict
    assert remote.get_checkin(profile.user_id, DAY).points_earned == 50

    resolved = store.resolve_conflict(profile.user_id, DAY)
    assert resolved.points_earned == 50
    assert store.local.get_checkin(profile.user_id, DAY).sync_status == SyncStatusEnum.clean


def test_synced_store_reads_through_to_remote(tmp_path, profile):
    remote = InMemoryProgressStore()
    remote.save_profile(profile)
    remote.save_checkin(profile.user_id, _checkin())
    store = SyncedProgressStore(JsonFileProgressStore(str(tmp_path)), remote)

    assert store.get_profile(profile.user_id) == profile
    assert store.local.get_profile(profile.user_id) == replace(profile, sync_status=SyncStatusEnum.clean)
    assert [c.checkin_date for c in store.get_checkins(profile.user_id)] == [DAY]
