from abc import ABC, abstractmethod


class ProgressStore(ABC):
    """
    Storage interface for the progression records of each user.

    get_checkins returns check-ins newest first; get_badges returns the whole
    badge catalog with the user's earned state applied.
    """

    @abstractmethod
    def get_profile(self, user_id):
        pass

    @abstractmethod
    def save_profile(self, profile):
        pass

    @abstractmethod
    def list_user_ids(self):
        pass

    @abstractmethod
    def get_checkin(self, user_id, checkin_date):
        pass

    @abstractmethod
    def get_checkins(self, user_id, start_date=None, end_date=None):
        pass

    @abstractmethod
    def save_checkin(self, user_id, checkin):
        pass

    @abstractmethod
    def get_badges(self, user_id):
        pass

    @abstractmethod
    def save_badges(self, user_id, badges):
        pass


def in_range(checkin_date, start_date=None, end_date=None):
    if start_date and checkin_date < start_date:
        return False
    if end_date and checkin_date > end_date:
        return False
    return True
