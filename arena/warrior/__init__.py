"""
Warrior module - progression rules.

Provides:
- Warrior component with battle and training
- Rank tiers and progression constants
- Fight outcome labels
"""

from arena.warrior.constants import (
    Rank,
    RANKS,
    EXPERIENCE_PER_LEVEL,
    EXPERIENCE_START,
    EXPERIENCE_MAX,
    LEVELS_PER_RANK,
    LEVEL_MIN,
    LEVEL_MAX,
    level_for_experience,
    rank_for_level,
    tier_index,
)
from arena.warrior.outcomes import FightOutcome
from arena.warrior.warrior import Warrior

__all__ = [
    # Component
    "Warrior",
    # Ranks
    "Rank",
    "RANKS",
    "level_for_experience",
    "rank_for_level",
    "tier_index",
    # Constants
    "EXPERIENCE_PER_LEVEL",
    "EXPERIENCE_START",
    "EXPERIENCE_MAX",
    "LEVELS_PER_RANK",
    "LEVEL_MIN",
    "LEVEL_MAX",
    # Outcomes
    "FightOutcome",
]
