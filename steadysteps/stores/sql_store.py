import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from .base import ProgressStore
from steadysteps.errors import StoreError
from steadysteps.extensions import db
from steadysteps.mappers.progress_mapper import (
    apply_checkin_to_record,
    apply_profile_to_record,
    checkin_from_record,
    profile_from_record,
)
from steadysteps.models import DailyCheckin, EarnedBadge, UserProfile
from steadysteps.services.badge_service import default_badges

logger = logging.getLogger(__name__)


class SqlProgressStore(ProgressStore):
    """Relational store backed by the Flask-SQLAlchemy session."""

    def _commit(self, action):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Database error while {action}: {str(e)}")
            raise StoreError(f"Failed while {action}") from e

    def _query(self, action, fn):
        try:
            return fn()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Database error while {action}: {str(e)}")
            raise StoreError(f"Failed while {action}") from e

    def get_profile(self, user_id):
        record = self._query(
            "loading profile",
            lambda: UserProfile.query.filter_by(user_id=user_id).first()
        )
        return profile_from_record(record) if record else None

    def save_profile(self, profile):
        record = self._query(
            "loading profile",
            lambda: UserProfile.query.filter_by(user_id=profile.user_id).first()
        )
        if not record:
            record = UserProfile(user_id=profile.user_id)
            db.session.add(record)
        apply_profile_to_record(record, profile)
        self._commit("saving profile")

    def list_user_ids(self):
        rows = self._query(
            "listing profiles",
            lambda: db.session.query(UserProfile.user_id).order_by(UserProfile.user_id.asc()).all()
        )
        return [row.user_id for row in rows]

    def get_checkin(self, user_id, checkin_date):
        record = self._query(
            "loading check-in",
            lambda: DailyCheckin.query.filter_by(user_id=user_id, checkin_date=checkin_date).first()
        )
        return checkin_from_record(record) if record else None

    def get_checkins(self, user_id, start_date=None, end_date=None):
        query = DailyCheckin.query.filter_by(user_id=user_id)
        if start_date:
            query = query.filter(DailyCheckin.checkin_date >= start_date)
        if end_date:
            query = query.filter(DailyCheckin.checkin_date <= end_date)

        records = self._query(
            "loading check-ins",
            lambda: query.order_by(DailyCheckin.checkin_date.desc()).all()
        )
        return [checkin_from_record(record) for record in records]

    def save_checkin(self, user_id, checkin):
        # upsert on (user_id, checkin_date)
        record = self._query(
            "loading check-in",
            lambda: DailyCheckin.query.filter_by(user_id=user_id, checkin_date=checkin.checkin_date).first()
        )
        if not record:
            record = DailyCheckin(user_id=user_id)
            db.session.add(record)
        apply_checkin_to_record(record, checkin)
        self._commit("saving check-in")

    def get_badges(self, user_id):
        rows = self._query(
            "loading badges",
            lambda: EarnedBadge.query.filter_by(user_id=user_id).all()
        )
        earned = {row.badge_id: row.earned_at for row in rows}

        badges = default_badges()
        for badge in badges:
            if badge.id in earned:
                badge.earned = True
                badge.earned_date = earned[badge.id]
        return badges

    def save_badges(self, user_id, badges):
        # rows are only ever added, an earned badge is never removed
        existing = {
            row.badge_id for row in self._query(
                "loading badges",
                lambda: EarnedBadge.query.filter_by(user_id=user_id).all()
            )
        }
        for badge in badges:
            if badge.earned and badge.id not in existing:
                db.session.add(EarnedBadge(user_id=user_id, badge_id=badge.id, earned_at=badge.earned_date or datetime.utcnow()))
        self._commit("saving badges")
