from datetime import datetime

from steadysteps.extensions import BigIntId, db


class EarnedBadge(db.Model):
    __tablename__ = "earned_badges"

    id = db.Column(BigIntId, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    badge_id = db.Column(db.String(64), nullable=False)
    earned_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "badge_id", name="uk_user_badge"),
    )
