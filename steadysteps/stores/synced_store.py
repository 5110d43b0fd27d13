import logging
from dataclasses import replace

from .base import ProgressStore, in_range
from steadysteps.enums.app_enum import SyncStatusEnum
from steadysteps.errors import StoreError
from steadysteps.services.badge_service import merge_earned_state

logger = logging.getLogger(__name__)


class SyncedProgressStore(ProgressStore):
    """
    Local cache in front of the remote store.

    Writes land locally first, marked dirty, and are marked clean once the
    remote write succeeds. A failed remote write leaves the record dirty
    until push_pending() sends it again. A dirty check-in whose remote copy
    was completed with different points is marked as a conflict instead of
    overwriting it.
    """

    def __init__(self, local, remote):
        self.local = local
        self.remote = remote

    # -------------------- PROFILE -------------------- #
    def get_profile(self, user_id):
        profile = self.local.get_profile(user_id)
        if profile:
            return profile

        profile = self.remote.get_profile(user_id)
        if profile:
            self.local.save_profile(replace(profile, sync_status=SyncStatusEnum.clean))
        return profile

    def save_profile(self, profile):
        self.local.save_profile(replace(profile, sync_status=SyncStatusEnum.dirty))
        try:
            self.remote.save_profile(profile)
        except StoreError as e:
            logger.error(f"Remote profile write failed for user {profile.user_id}, kept as dirty: {e}")
            return
        self.local.save_profile(replace(profile, sync_status=SyncStatusEnum.clean))

    def list_user_ids(self):
        user_ids = set(self.local.list_user_ids())
        try:
            user_ids.update(self.remote.list_user_ids())
        except StoreError as e:
            logger.error(f"Remote profile listing failed, using local cache only: {e}")
        return sorted(user_ids)

    # -------------------- CHECKINS -------------------- #
    def get_checkin(self, user_id, checkin_date):
        checkin = self.local.get_checkin(user_id, checkin_date)
        if checkin:
            return checkin
        return self.remote.get_checkin(user_id, checkin_date)

    def get_checkins(self, user_id, start_date=None, end_date=None):
        merged = {}
        try:
            for checkin in self.remote.get_checkins(user_id, start_date, end_date):
                merged[checkin.checkin_date] = checkin
        except StoreError as e:
            logger.error(f"Remote check-in read failed for user {user_id}, using local cache only: {e}")

        # local copies win, they may hold writes the remote has not seen yet
        for checkin in self.local.get_checkins(user_id, start_date, end_date):
            merged[checkin.checkin_date] = checkin

        checkins = [c for c in merged.values() if in_range(c.checkin_date, start_date, end_date)]
        return sorted(checkins, key=lambda c: c.checkin_date, reverse=True)

    def save_checkin(self, user_id, checkin):
        self.local.save_checkin(user_id, replace(checkin, sync_status=SyncStatusEnum.dirty))
        try:
            self.remote.save_checkin(user_id, checkin)
        except StoreError as e:
            logger.error(f"Remote check-in write failed for user {user_id} on {checkin.checkin_date}, kept as dirty: {e}")
            return
        self.local.save_checkin(user_id, replace(checkin, sync_status=SyncStatusEnum.clean))

    # -------------------- BADGES -------------------- #
    def get_badges(self, user_id):
        badges = self.local.get_badges(user_id)
        try:
            remote_earned = [b for b in self.remote.get_badges(user_id) if b.earned]
        except StoreError as e:
            logger.error(f"Remote badge read failed for user {user_id}: {e}")
            return badges

        # earning is one-way, so the union of both sides is always safe
        local_earned = {b.id for b in badges if b.earned}
        return merge_earned_state(
            [b for b in badges if b.earned] + [b for b in remote_earned if b.id not in local_earned]
        )

    def save_badges(self, user_id, badges):
        self.local.save_badges(user_id, badges)
        try:
            self.remote.save_badges(user_id, badges)
        except StoreError as e:
            logger.error(f"Remote badge write failed for user {user_id}: {e}")

    # -------------------- SYNC -------------------- #
    def push_pending(self, user_id):
        """
        Send every dirty record of a user to the remote store.
        Returns counts of pushed, conflicting and still-failing records.
        """
        summary = {"pushed": 0, "conflicts": 0, "failed": 0}

        profile = self.local.get_profile(user_id)
        if profile and profile.sync_status == SyncStatusEnum.dirty:
            try:
                self.remote.save_profile(profile)
                self.local.save_profile(replace(profile, sync_status=SyncStatusEnum.clean))
                summary["pushed"] += 1
            except StoreError as e:
                logger.error(f"Profile push failed for user {user_id}: {e}")
                summary["failed"] += 1

        for checkin in self.local.get_checkins(user_id):
            if checkin.sync_status != SyncStatusEnum.dirty:
                continue
            try:
                remote_copy = self.remote.get_checkin(user_id, checkin.checkin_date)
                if (remote_copy and remote_copy.checkin_completed
                        and remote_copy.points_earned != checkin.points_earned):
                    self.local.save_checkin(user_id, replace(checkin, sync_status=SyncStatusEnum.conflict))
                    logger.warning(f"Check-in conflict for user {user_id} on {checkin.checkin_date}")
                    summary["conflicts"] += 1
                    continue
                self.remote.save_checkin(user_id, checkin)
                self.local.save_checkin(user_id, replace(checkin, sync_status=SyncStatusEnum.clean))
                summary["pushed"] += 1
            except StoreError as e:
                logger.error(f"Check-in push failed for user {user_id} on {checkin.checkin_date}: {e}")
                summary["failed"] += 1

        try:
            self.remote.save_badges(user_id, self.local.get_badges(user_id))
        except StoreError as e:
            logger.error(f"Badge push failed for user {user_id}: {e}")
            summary["failed"] += 1

        return summary

    def resolve_conflict(self, user_id, checkin_date, keep_local=False):
        """Settle a conflicting check-in by keeping one side."""
        local_copy = self.local.get_checkin(user_id, checkin_date)
        if not local_copy or local_copy.sync_status != SyncStatusEnum.conflict:
            return None

        resolved = None if keep_local else self.remote.get_checkin(user_id, checkin_date)
        if resolved is None:
            self.remote.save_checkin(user_id, local_copy)
            resolved = local_copy

        resolved = replace(resolved, sync_status=SyncStatusEnum.clean)
        self.local.save_checkin(user_id, resolved)
        return resolved
