"""
Battle and training outcome labels.
"""

from __future__ import annotations

from enum import Enum


class FightOutcome(str, Enum):
    """
    Results of a battle or a refused training.

    Members compare equal to their labels, so callers matching on the
    plain strings keep working.
    """
    INVALID_LEVEL = "Invalid level"
    EASY_FIGHT = "Easy fight"
    GOOD_FIGHT = "A good fight"
    INTENSE_FIGHT = "An intense fight"
    DEFEATED = "You've been defeated"
    NOT_STRONG_ENOUGH = "Not strong enough"

    def __str__(self) -> str:
        return self.value

    @property
    def is_victory(self) -> bool:
        """True for a battle the warrior finished."""
        return self in (
            FightOutcome.EASY_FIGHT,
            FightOutcome.GOOD_FIGHT,
            FightOutcome.INTENSE_FIGHT,
        )
