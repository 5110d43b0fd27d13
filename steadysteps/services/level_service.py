# steadysteps/services/level_service.py
from steadysteps.data.levels import LEVELS, MAX_LEVEL
from steadysteps.enums.app_enum import StageEnum
from steadysteps.schemas.contexts import LevelInfo

CONSISTENT_STAGE_CHECKINS = 21
CONFIDENT_STAGE_CHECKINS = 60
HABIT_LIBRARY_UNLOCK_CHECKINS = 21

STAGE_ORDER = [StageEnum.beginner, StageEnum.consistent, StageEnum.confident]


def find_level(total_points: int) -> dict:
    for entry in LEVELS:
        max_points = entry["max_points"]
        if entry["min_points"] <= total_points and (max_points is None or total_points <= max_points):
            return entry
    return LEVELS[0]


def level_for_points(total_points: int) -> LevelInfo:
    """
    Level lookup for a points total, with progress towards the next level
    as a percentage (100 at the top level).
    """
    current = find_level(total_points)

    if current["level"] == MAX_LEVEL:
        return LevelInfo(
            level=current["level"],
            name=current["name"],
            min_points=current["min_points"],
            max_points=None,
            progress=100.0,
        )

    next_level = LEVELS[current["level"]]
    span = next_level["min_points"] - current["min_points"]
    progress = (total_points - current["min_points"]) / span * 100

    return LevelInfo(
        level=current["level"],
        name=current["name"],
        min_points=current["min_points"],
        max_points=current["max_points"],
        progress=progress,
        next_level_name=next_level["name"],
        points_to_next=next_level["min_points"] - total_points,
    )


def stage_for_checkins(total_checkins: int, current_stage=StageEnum.beginner) -> StageEnum:
    if total_checkins >= CONFIDENT_STAGE_CHECKINS:
        derived = StageEnum.confident
    elif total_checkins >= CONSISTENT_STAGE_CHECKINS:
        derived = StageEnum.consistent
    else:
        derived = StageEnum.beginner

    # stages never regress
    current_stage = StageEnum(current_stage)
    if STAGE_ORDER.index(current_stage) > STAGE_ORDER.index(derived):
        return current_stage
    return derived


def habit_library_unlocked(profile) -> bool:
    return profile.current_stage != StageEnum.beginner or profile.total_checkins >= HABIT_LIBRARY_UNLOCK_CHECKINS
