"""
Warrior progression constants and level/rank lookups.

A warrior's experience starts at 100 and every further 100 points is a
new level, up to level 100 where experience stops at 10000. Every 10
levels is a new rank tier: levels 1-9 are "Pushover", 80-89 "Champion",
and level 100 alone is "Greatest".
"""

from __future__ import annotations

from enum import Enum


class Rank(str, Enum):
    """Rank tiers, lowest first."""
    PUSHOVER = "Pushover"
    NOVICE = "Novice"
    FIGHTER = "Fighter"
    WARRIOR = "Warrior"
    VETERAN = "Veteran"
    SAGE = "Sage"
    ELITE = "Elite"
    CONQUEROR = "Conqueror"
    CHAMPION = "Champion"
    MASTER = "Master"
    GREATEST = "Greatest"

    def __str__(self) -> str:
        return self.value


# Indexed by tier: RANKS[level // LEVELS_PER_RANK]
RANKS: tuple[Rank, ...] = tuple(Rank)

EXPERIENCE_PER_LEVEL = 100
EXPERIENCE_START = 100
LEVELS_PER_RANK = 10
LEVEL_MIN = 1
LEVEL_MAX = 100
EXPERIENCE_MAX = EXPERIENCE_PER_LEVEL * LEVEL_MAX

# Battle rewards
SAME_LEVEL_EXPERIENCE = 10
ONE_LEVEL_BELOW_EXPERIENCE = 5
INTENSE_FIGHT_FACTOR = 20  # 20 * diff * diff
DEFEAT_LEVEL_GAP = 5


def _div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def level_for_experience(experience: int) -> int:
    """Level reached with the given cumulative experience."""
    return _div(experience, EXPERIENCE_PER_LEVEL)


def tier_index(level: int) -> int:
    """Index into RANKS for a level."""
    return _div(level, LEVELS_PER_RANK)


def rank_for_level(level: int) -> Rank:
    """
    Rank tier for a level.

    Levels below the table (only reachable through negative training
    awards) stay "Pushover".
    """
    index = min(max(tier_index(level), 0), len(RANKS) - 1)
    return RANKS[index]
