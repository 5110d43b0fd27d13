from .progress import Profile, Checkin, Badge
from .contexts import (
    CheckinFacts,
    CheckinResult,
    CoachContext,
    LevelInfo,
    Nudge,
    NudgeContext,
    NotBehindDecision,
)
