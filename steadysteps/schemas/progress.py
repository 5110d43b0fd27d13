"""
Progression records shared by every store implementation.

- Profile: the canonical per-user progression record
- Checkin: one record per user per calendar date
- Badge: a catalog entry plus the user's earned state
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

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


@dataclass
class Profile:
    user_id: str
    first_name: str = ""
    language: str = "en"
    morning_reminder_time: str = "08:00"
    evening_reminder_time: str = "19:00"

    # onboarding answers
    primary_goal: PrimaryGoalEnum = PrimaryGoalEnum.habits
    activity_level: ActivityLevelEnum = ActivityLevelEnum.sedentary
    nutrition_challenge: NutritionChallengeEnum = NutritionChallengeEnum.unsure
    time_commitment: TimeCommitmentEnum = TimeCommitmentEnum.five_to_ten
    diet_preference: str = "no_preference"
    biggest_obstacle: str = "time"
    fitness_confidence: int = 3

    # counters
    total_points: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_checkins: int = 0
    total_activity_completions: int = 0
    total_nutrition_habits_completed: int = 0
    total_perfect_days: int = 0
    total_mood_checkins: int = 0
    nutrition_streak: int = 0
    goal_progressions: int = 0
    coach_conversations_count: int = 0
    streak_at_loss: int = 0

    # derived
    current_stage: StageEnum = StageEnum.beginner
    current_level: int = 1
    current_activity_goal_minutes: int = 5
    nutrition_questions_count: int = 3

    last_checkin_date: Optional[date] = None
    account_created_date: date = field(default_factory=date.today)

    not_behind_mode_active: bool = False
    not_behind_mode_activated_at: Optional[datetime] = None
    subscription_status: SubscriptionStatusEnum = SubscriptionStatusEnum.trial

    sync_status: SyncStatusEnum = SyncStatusEnum.clean

    @property
    def is_paid(self) -> bool:
        return self.subscription_status == SubscriptionStatusEnum.active

    @property
    def activity_paused(self) -> bool:
        return self.current_activity_goal_minutes == 0


@dataclass
class Checkin:
    checkin_date: date
    checkin_completed: bool = False
    activity_completed: bool = False
    nutrition_responses: List[Optional[bool]] = field(default_factory=list)
    mood: Optional[MoodEnum] = None
    points_earned: int = 0
    stress_level: Optional[int] = None
    sleep_quality: Optional[int] = None
    energy_level: Optional[int] = None
    library_habits_completed: List[str] = field(default_factory=list)
    sync_status: SyncStatusEnum = SyncStatusEnum.clean


@dataclass
class Badge:
    id: str
    name: str
    description: str
    category: BadgeCategoryEnum
    icon: str = ""
    requirement: Optional[int] = None
    earned: bool = False
    earned_date: Optional[datetime] = None
