from dataclasses import fields

from steadysteps.enums.app_enum import (
    ActivityLevelEnum,
    BadgeCategoryEnum,
    MoodEnum,
    NutritionChallengeEnum,
    PrimaryGoalEnum,
    StageEnum,
    SubscriptionStatusEnum,
    SyncStatusEnum,
    TimeCommitmentEnum,
)
from steadysteps.schemas.progress import Badge, Checkin, Profile
from steadysteps.utils import parse_date, parse_datetime


PROFILE_ENUM_FIELDS = {
    "primary_goal": PrimaryGoalEnum,
    "activity_level": ActivityLevelEnum,
    "nutrition_challenge": NutritionChallengeEnum,
    "time_commitment": TimeCommitmentEnum,
    "current_stage": StageEnum,
    "subscription_status": SubscriptionStatusEnum,
    "sync_status": SyncStatusEnum,
}
PROFILE_DATE_FIELDS = {"last_checkin_date", "account_created_date"}
PROFILE_DATETIME_FIELDS = {"not_behind_mode_activated_at"}

CHECKIN_ENUM_FIELDS = {
    "mood": MoodEnum,
    "sync_status": SyncStatusEnum,
}

# columns the remote table does not carry
LOCAL_ONLY_FIELDS = {"sync_status"}


def _to_json_value(value):
    if hasattr(value, "value"):
        return value.value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def _dataclass_to_dict(obj):
    return {f.name: _to_json_value(getattr(obj, f.name)) for f in fields(obj)}


def _convert(name, value, enum_fields, date_fields=(), datetime_fields=()):
    if value is None:
        return None
    if name in enum_fields:
        return enum_fields[name](value)
    if name in date_fields:
        return parse_date(value)
    if name in datetime_fields:
        return parse_datetime(value)
    return value


# -------------------- PROFILE -------------------- #
def profile_to_dict(profile: Profile) -> dict:
    return _dataclass_to_dict(profile)


def profile_from_dict(data: dict) -> Profile:
    """
    Build a Profile from stored JSON. Missing keys fall back to the
    defaults, unknown keys are ignored.
    """
    known = {f.name for f in fields(Profile)}
    values = {
        name: _convert(name, value, PROFILE_ENUM_FIELDS, PROFILE_DATE_FIELDS, PROFILE_DATETIME_FIELDS)
        for name, value in data.items()
        if name in known and value is not None
    }
    return Profile(**values)


def profile_from_record(record) -> Profile:
    values = {}
    for f in fields(Profile):
        if f.name in LOCAL_ONLY_FIELDS:
            continue
        values[f.name] = getattr(record, f.name)
    values["sync_status"] = SyncStatusEnum.clean
    return Profile(**{k: v for k, v in values.items() if v is not None})


def apply_profile_to_record(record, profile: Profile):
    for f in fields(Profile):
        if f.name in LOCAL_ONLY_FIELDS:
            continue
        setattr(record, f.name, getattr(profile, f.name))
    return record


# -------------------- CHECKIN -------------------- #
def checkin_to_dict(checkin: Checkin) -> dict:
    data = _dataclass_to_dict(checkin)
    data["date"] = data.pop("checkin_date")
    data["nutrition_responses"] = list(checkin.nutrition_responses)
    data["library_habits_completed"] = list(checkin.library_habits_completed)
    return data


def checkin_from_dict(data: dict) -> Checkin:
    data = dict(data)
    if "date" in data:
        data["checkin_date"] = data.pop("date")
    known = {f.name for f in fields(Checkin)}
    values = {
        name: _convert(name, value, CHECKIN_ENUM_FIELDS, {"checkin_date"})
        for name, value in data.items()
        if name in known and value is not None
    }
    return Checkin(**values)


def checkin_from_record(record) -> Checkin:
    return Checkin(
        checkin_date=record.checkin_date,
        checkin_completed=bool(record.checkin_completed),
        activity_completed=bool(record.activity_completed),
        nutrition_responses=list(record.nutrition_responses or []),
        mood=record.mood,
        points_earned=record.points_earned or 0,
        stress_level=record.stress_level,
        sleep_quality=record.sleep_quality,
        energy_level=record.energy_level,
        library_habits_completed=list(record.library_habits_completed or []),
        sync_status=SyncStatusEnum.clean,
    )


def apply_checkin_to_record(record, checkin: Checkin):
    record.checkin_date = checkin.checkin_date
    record.checkin_completed = checkin.checkin_completed
    record.activity_completed = checkin.activity_completed
    record.nutrition_responses = list(checkin.nutrition_responses)
    record.mood = checkin.mood
    record.points_earned = checkin.points_earned
    record.stress_level = checkin.stress_level
    record.sleep_quality = checkin.sleep_quality
    record.energy_level = checkin.energy_level
    record.library_habits_completed = list(checkin.library_habits_completed)
    return record


# -------------------- BADGE -------------------- #
def badge_to_dict(badge: Badge) -> dict:
    return _dataclass_to_dict(badge)


def badge_from_dict(data: dict) -> Badge:
    return Badge(
        id=data["id"],
        name=data.get("name", data["id"]),
        description=data.get("description", ""),
        category=BadgeCategoryEnum(data.get("category", BadgeCategoryEnum.milestone)),
        icon=data.get("icon", ""),
        requirement=data.get("requirement"),
        earned=bool(data.get("earned", False)),
        earned_date=parse_datetime(data.get("earned_date")),
    )


def checkin_summary(checkin: Checkin) -> dict:
    """API shape of a check-in, without the local sync flag."""
    data = checkin_to_dict(checkin)
    data.pop("sync_status", None)
    return data
