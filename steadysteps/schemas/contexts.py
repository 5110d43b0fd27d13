from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from steadysteps.enums.app_enum import NudgeTypeEnum, StageEnum, ToneEnum
from steadysteps.schemas.progress import Checkin, Profile


@dataclass(frozen=True)
class CheckinFacts:
    """What happened today, measured against the profile before the update."""
    activity_completed: bool
    nutrition_yes_count: int
    is_perfect_day: bool
    full_nutrition_day: bool
    new_streak: int
    mood_provided: bool
    new_nutrition_streak: int = 0
    missed_days: int = 0
    streak_broken_at: int = 0
    previous_stage: StageEnum = StageEnum.beginner
    new_stage: StageEnum = StageEnum.beginner
    previous_level: int = 1
    new_level: int = 1

    @property
    def any_nutrition_yes(self) -> bool:
        return self.nutrition_yes_count > 0


@dataclass(frozen=True)
class LevelInfo:
    level: int
    name: str
    min_points: int
    max_points: Optional[int]
    progress: float
    next_level_name: Optional[str] = None
    points_to_next: Optional[int] = None

    @property
    def is_max_level(self) -> bool:
        return self.max_points is None


@dataclass(frozen=True)
class CheckinResult:
    checkin: Checkin
    profile: Profile
    points_earned: int
    new_streak: int
    is_perfect_day: bool
    new_badges: Tuple[str, ...] = ()
    celebrate: bool = False
    resubmission: bool = False


@dataclass(frozen=True)
class NudgeContext:
    today: date
    checkins: Tuple[Checkin, ...]  # newest first
    current_streak: int = 0
    language: str = "en"


@dataclass(frozen=True)
class Nudge:
    type: NudgeTypeEnum
    tone: ToneEnum
    message: str


@dataclass(frozen=True)
class NotBehindDecision:
    active: bool
    changed: bool
    completed_checkins: int
    stress_samples: int
    mean_stress: float
    activated_at: Optional[datetime] = None


@dataclass(frozen=True)
class CoachContext:
    first_name: str
    language: str
    current_stage: StageEnum
    current_streak: int
    current_activity_goal_minutes: int
    primary_goal: str
    nutrition_challenge: str
    biggest_obstacle: str
    diet_preference: str
    fitness_confidence: int
    recent_checkins: int = 0
    average_stress: Optional[float] = None
    average_sleep: Optional[float] = None
    average_energy: Optional[float] = None
    activity_rate: Optional[float] = None
