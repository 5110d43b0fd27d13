from datetime import datetime

from sqlalchemy import Enum as SAEnum

from steadysteps.enums.app_enum import MoodEnum
from steadysteps.extensions import BigIntId, db


class DailyCheckin(db.Model):
    __tablename__ = "daily_checkins"

    id = db.Column(BigIntId, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    checkin_date = db.Column(db.Date, nullable=False)

    checkin_completed = db.Column(db.Boolean, nullable=False, default=False)
    activity_completed = db.Column(db.Boolean, nullable=False, default=False)
    # list of true / false / null, one slot per nutrition question
    nutrition_responses = db.Column(db.JSON, nullable=False, default=list)
    mood = db.Column(SAEnum(MoodEnum), nullable=True)
    points_earned = db.Column(db.Integer, nullable=False, default=0)

    # wellness check-in, 1-5
    stress_level = db.Column(db.Integer)
    sleep_quality = db.Column(db.Integer)
    energy_level = db.Column(db.Integer)

    library_habits_completed = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "checkin_date", name="uk_user_checkin_date"),
    )
