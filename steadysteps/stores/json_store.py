import base64
import json
import logging
import os

from .base import ProgressStore, in_range
from steadysteps.errors import StoreError
from steadysteps.mappers.progress_mapper import (
    badge_from_dict,
    badge_to_dict,
    checkin_from_dict,
    checkin_to_dict,
    profile_from_dict,
    profile_to_dict,
)
from steadysteps.services.badge_service import merge_earned_state

logger = logging.getLogger(__name__)

USER_ID_KEY = "user_id"
PROFILE_KEY = "profile"
CHECKINS_KEY = "checkins"
BADGES_KEY = "badges"


class JsonFileProgressStore(ProgressStore):
    """
    Local cache: one JSON document per user holding the profile, the
    check-in list and the badge list. Each key is read and written
    wholesale. Files are named after the base32 form of the user id.
    """

    def __init__(self, directory):
        self.directory = directory
        os.makedirs(directory, exist_ok=True)

    def _path(self, user_id):
        if not user_id:
            raise StoreError(f"Invalid user id {user_id!r}")
        encoded = base64.b32encode(str(user_id).encode("utf-8")).decode("ascii")
        return os.path.join(self.directory, f"{encoded}.json")

    @staticmethod
    def _read(path):
        try:
            with open(path, "r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Unreadable cache file {path}: {e}")
            raise StoreError(f"Unreadable cache file {os.path.basename(path)}") from e

    def _load(self, user_id):
        path = self._path(user_id)
        if not os.path.exists(path):
            return {}
        return self._read(path)

    def _write_key(self, user_id, key, value):
        document = self._load(user_id)
        document[USER_ID_KEY] = user_id
        document[key] = value
        path = self._path(user_id)
        tmp_path = f"{path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(document, fh, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to write cache file {path}: {e}")
            raise StoreError(f"Failed to write cache for user {user_id}") from e

    def get_profile(self, user_id):
        data = self._load(user_id).get(PROFILE_KEY)
        return profile_from_dict(data) if data else None

    def save_profile(self, profile):
        self._write_key(profile.user_id, PROFILE_KEY, profile_to_dict(profile))

    def list_user_ids(self):
        user_ids = []
        for filename in sorted(os.listdir(self.directory)):
            if not filename.endswith(".json"):
                continue
            document = self._read(os.path.join(self.directory, filename))
            if document.get(PROFILE_KEY):
                user_ids.append(document.get(USER_ID_KEY) or document[PROFILE_KEY]["user_id"])
        return sorted(user_ids)

    def _checkins(self, user_id):
        return [checkin_from_dict(c) for c in self._load(user_id).get(CHECKINS_KEY, [])]

    def get_checkin(self, user_id, checkin_date):
        for checkin in self._checkins(user_id):
            if checkin.checkin_date == checkin_date:
                return checkin
        return None

    def get_checkins(self, user_id, start_date=None, end_date=None):
        checkins = [c for c in self._checkins(user_id) if in_range(c.checkin_date, start_date, end_date)]
        return sorted(checkins, key=lambda c: c.checkin_date, reverse=True)

    def save_checkin(self, user_id, checkin):
        checkins = self._checkins(user_id)
        for index, existing in enumerate(checkins):
            if existing.checkin_date == checkin.checkin_date:
                checkins[index] = checkin
                break
        else:
            checkins.append(checkin)
        self._write_key(user_id, CHECKINS_KEY, [checkin_to_dict(c) for c in checkins])

    def get_badges(self, user_id):
        saved = [badge_from_dict(b) for b in self._load(user_id).get(BADGES_KEY, [])]
        return merge_earned_state(saved)

    def save_badges(self, user_id, badges):
        self._write_key(user_id, BADGES_KEY, [badge_to_dict(b) for b in badges])
