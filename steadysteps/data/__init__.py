from .badge_catalog import BADGE_CATALOG
from .levels import LEVELS, MAX_LEVEL, STAGE_DESCRIPTIONS
from .nudge_messages import NUDGE_MESSAGES, DEFAULT_LANGUAGE
from .nutrition_questions import (
    PRIMARY_NUTRITION_QUESTIONS,
    SECONDARY_NUTRITION_QUESTIONS,
    ACTIVITY_GOAL_BY_COMMITMENT,
)
