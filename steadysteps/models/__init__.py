from .user_profile import UserProfile
from .daily_checkin import DailyCheckin
from .earned_badge import EarnedBadge
