from datetime import date, datetime

from sqlalchemy import Enum as SAEnum

from steadysteps.enums.app_enum import (
    ActivityLevelEnum,
    NutritionChallengeEnum,
    PrimaryGoalEnum,
    StageEnum,
    SubscriptionStatusEnum,
    TimeCommitmentEnum,
)
from steadysteps.extensions import BigIntId, db


class UserProfile(db.Model):
    __tablename__ = "user_profiles"

    id = db.Column(BigIntId, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, unique=True, index=True)
    first_name = db.Column(db.String(100), nullable=False, default="")
    language = db.Column(db.String(5), nullable=False, default="en")
    morning_reminder_time = db.Column(db.String(5), default="08:00")
    evening_reminder_time = db.Column(db.String(5), default="19:00")

    primary_goal = db.Column(SAEnum(PrimaryGoalEnum), nullable=False, default=PrimaryGoalEnum.habits)
    activity_level = db.Column(SAEnum(ActivityLevelEnum), nullable=False, default=ActivityLevelEnum.sedentary)
    nutrition_challenge = db.Column(SAEnum(NutritionChallengeEnum), nullable=False, default=NutritionChallengeEnum.unsure)
    time_commitment = db.Column(SAEnum(TimeCommitmentEnum), nullable=False, default=TimeCommitmentEnum.five_to_ten)
    diet_preference = db.Column(db.String(30), default="no_preference")
    biggest_obstacle = db.Column(db.String(30), default="time")
    fitness_confidence = db.Column(db.Integer, default=3)

    total_points = db.Column(db.Integer, nullable=False, default=0)
    current_streak = db.Column(db.Integer, nullable=False, default=0)
    longest_streak = db.Column(db.Integer, nullable=False, default=0)
    total_checkins = db.Column(db.Integer, nullable=False, default=0)
    total_activity_completions = db.Column(db.Integer, nullable=False, default=0)
    total_nutrition_habits_completed = db.Column(db.Integer, nullable=False, default=0)
    total_perfect_days = db.Column(db.Integer, nullable=False, default=0)
    total_mood_checkins = db.Column(db.Integer, nullable=False, default=0)
    nutrition_streak = db.Column(db.Integer, nullable=False, default=0)
    goal_progressions = db.Column(db.Integer, nullable=False, default=0)
    coach_conversations_count = db.Column(db.Integer, nullable=False, default=0)
    streak_at_loss = db.Column(db.Integer, nullable=False, default=0)

    current_stage = db.Column(SAEnum(StageEnum), nullable=False, default=StageEnum.beginner)
    current_level = db.Column(db.Integer, nullable=False, default=1)
    # 0 = paused
    current_activity_goal_minutes = db.Column(db.Integer, nullable=False, default=5)
    nutrition_questions_count = db.Column(db.Integer, nullable=False, default=3)

    last_checkin_date = db.Column(db.Date)
    account_created_date = db.Column(db.Date, default=date.today)

    not_behind_mode_active = db.Column(db.Boolean, nullable=False, default=False)
    not_behind_mode_activated_at = db.Column(db.DateTime)
    subscription_status = db.Column(SAEnum(SubscriptionStatusEnum), nullable=False, default=SubscriptionStatusEnum.trial)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
