from enum import Enum


class PrimaryGoalEnum(str, Enum):
    weight_loss = "weight_loss"
    energy = "energy"
    habits = "habits"
    confidence = "confidence"


class ActivityLevelEnum(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"


class NutritionChallengeEnum(str, Enum):
    sugary_drinks = "sugary_drinks"
    late_snacking = "late_snacking"
    portions = "portions"
    processed_food = "processed_food"
    unsure = "unsure"


class TimeCommitmentEnum(str, Enum):
    five_to_ten = "5_to_10"
    ten_to_fifteen = "10_to_15"
    fifteen_to_twenty = "15_to_20"
    twenty_to_thirty = "20_to_30"
    thirty_to_fortyfive = "30_to_45"
    fortyfive_to_sixty = "45_to_60"


class StageEnum(str, Enum):
    beginner = "beginner"
    consistent = "consistent"
    confident = "confident"


class MoodEnum(str, Enum):
    great = "great"
    good = "good"
    okay = "okay"
    stressed = "stressed"
    tired = "tired"


class BadgeCategoryEnum(str, Enum):
    consistency = "consistency"
    activity = "activity"
    nutrition = "nutrition"
    milestone = "milestone"
    comeback = "comeback"


class SubscriptionStatusEnum(str, Enum):
    trial = "trial"
    active = "active"
    cancelled = "cancelled"
    expired = "expired"


class NudgeTypeEnum(str, Enum):
    missed_days = "missed_days"
    high_stress = "high_stress"
    low_sleep = "low_sleep"
    consistency = "consistency"
    encouragement = "encouragement"


class ToneEnum(str, Enum):
    gentle = "gentle"
    supportive = "supportive"
    celebratory = "celebratory"


class SyncStatusEnum(str, Enum):
    clean = "clean"
    dirty = "dirty"
    conflict = "conflict"


class GoalAdjustmentEnum(str, Enum):
    up = "up"
    down = "down"
    pause = "pause"
    resume = "resume"
