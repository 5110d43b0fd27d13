from copy import deepcopy

from .base import ProgressStore, in_range
from steadysteps.services.badge_service import merge_earned_state


class InMemoryProgressStore(ProgressStore):
    """Dictionary-backed store; returns copies so callers never share state."""

    def __init__(self):
        self.profiles = {}
        self.checkins = {}
        self.badges = {}

    def get_profile(self, user_id):
        return deepcopy(self.profiles.get(user_id))

    def save_profile(self, profile):
        self.profiles[profile.user_id] = deepcopy(profile)

    def list_user_ids(self):
        return sorted(self.profiles)

    def get_checkin(self, user_id, checkin_date):
        return deepcopy(self.checkins.get(user_id, {}).get(checkin_date))

    def get_checkins(self, user_id, start_date=None, end_date=None):
        checkins = [
            c for c in self.checkins.get(user_id, {}).values()
            if in_range(c.checkin_date, start_date, end_date)
        ]
        return deepcopy(sorted(checkins, key=lambda c: c.checkin_date, reverse=True))

    def save_checkin(self, user_id, checkin):
        # keyed by date: a second save for the same date replaces the first
        self.checkins.setdefault(user_id, {})[checkin.checkin_date] = deepcopy(checkin)

    def get_badges(self, user_id):
        return merge_earned_state(self.badges.get(user_id, []))

    def save_badges(self, user_id, badges):
        self.badges[user_id] = deepcopy(list(badges))
