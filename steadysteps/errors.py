class StoreError(Exception):
    """Raised when a progress store cannot read or write its data."""


class ProfileNotFoundError(LookupError):
    def __init__(self, user_id):
        super().__init__(f"Profile not found for user {user_id}")
        self.user_id = user_id


class CoachGatewayError(Exception):
    def __init__(self, message, status_code=500):
        super().__init__(message)
        self.status_code = status_code


class CheckinDateError(ValueError):
    """Raised when a new check-in is dated outside the days a user can still record."""
