"""
Warrior component - experience, level, rank and achievements.

A warrior gains experience from battles and training. Experience is the
only authoritative value: level and rank are recomputed from it after
every change.

Usage:
    warrior = Warrior()
    warrior.battle(6)                    # "An intense fight"
    warrior.train("Sparring", 50, 1)     # "Sparring"
    warrior.level, warrior.rank          # (6, Rank.PUSHOVER)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import PrivateAttr, StrictInt, validate_call

from arena.core.component import Component, register_component
from arena.core.events import EventBus, WarriorEvent
from arena.warrior.constants import (
    DEFEAT_LEVEL_GAP,
    EXPERIENCE_MAX,
    EXPERIENCE_PER_LEVEL,
    EXPERIENCE_START,
    INTENSE_FIGHT_FACTOR,
    LEVEL_MAX,
    LEVEL_MIN,
    ONE_LEVEL_BELOW_EXPERIENCE,
    RANKS,
    SAME_LEVEL_EXPERIENCE,
    Rank,
    level_for_experience,
    rank_for_level,
    tier_index,
)
from arena.warrior.outcomes import FightOutcome

logger = logging.getLogger(__name__)


@register_component
class Warrior(Component):
    """
    A single warrior's progression state.

    Attributes:
        experience: Cumulative XP, capped at 10000
        level: Derived from experience, 1-100
        rank: Derived from level, one tier per 10 levels
        achievements: Descriptions of completed trainings, oldest first

    Level and rank passed to the constructor are ignored; pass
    ``experience`` to start a warrior further along.
    """
    experience: int = EXPERIENCE_START
    level: int = LEVEL_MIN
    rank: Rank = Rank.PUSHOVER
    achievements: tuple[str, ...] = ()

    _event_bus: Optional[EventBus] = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        """Derive level and rank from the starting experience."""
        self._recheck_stats()

    @property
    def progress(self) -> float:
        """
        Get progress to next level (0-1).

        Experience at or below zero (only reachable through negative
        training awards) reports no progress.
        """
        if self.experience >= EXPERIENCE_MAX:
            return 1.0
        if self.experience <= 0:
            return 0.0
        return (self.experience % EXPERIENCE_PER_LEVEL) / EXPERIENCE_PER_LEVEL

    def attach_event_bus(self, event_bus: EventBus) -> None:
        """Publish battles, trainings and level/rank changes on event_bus."""
        self._event_bus = event_bus

    def detach_event_bus(self) -> None:
        """Stop publishing events."""
        self._event_bus = None

    def clone(self) -> Warrior:
        """
        Copy this warrior.

        The copy publishes on the same event bus as the original; detaching
        one does not detach the other.
        """
        # Fields are immutable values, so a shallow copy is independent
        return self.model_copy()

    @validate_call
    def battle(self, enemy_level: StrictInt) -> FightOutcome:
        """
        Fight an enemy of the given level.

        - Same level: +10 XP, "A good fight"
        - One level lower: +5 XP, "A good fight"
        - Two or more levels lower: no XP, "Easy fight"
        - Higher: +20 * diff * diff XP, "An intense fight", unless the enemy
          is in a higher rank tier and at least 5 levels above, in which
          case the warrior is defeated and nothing changes.

        Args:
            enemy_level: Enemy level, 1-100. Bools and floats are rejected.

        Returns:
            The fight outcome. Enemies outside 1-100 give "Invalid level".
        """
        level = self.level
        gained = 0

        if enemy_level < LEVEL_MIN or enemy_level > LEVEL_MAX:
            outcome = FightOutcome.INVALID_LEVEL
        elif enemy_level > level:
            diff = enemy_level - level
            if tier_index(level) != tier_index(enemy_level) and diff >= DEFEAT_LEVEL_GAP:
                outcome = FightOutcome.DEFEATED
            else:
                gained = self._gain(INTENSE_FIGHT_FACTOR * diff * diff)
                outcome = FightOutcome.INTENSE_FIGHT
        elif enemy_level == level:
            gained = self._gain(SAME_LEVEL_EXPERIENCE)
            outcome = FightOutcome.GOOD_FIGHT
        elif level - enemy_level == 1:
            gained = self._gain(ONE_LEVEL_BELOW_EXPERIENCE)
            outcome = FightOutcome.GOOD_FIGHT
        else:
            outcome = FightOutcome.EASY_FIGHT

        logger.debug(
            "Battle vs level %d at level %d: %s (+%d XP)",
            enemy_level, level, outcome, gained,
        )
        self._publish(
            WarriorEvent.BATTLE_RESOLVED,
            enemy_level=enemy_level,
            outcome=outcome,
            experience_gained=gained,
            victory=outcome.is_victory,
        )
        return outcome

    @validate_call
    def train(self, description: str, experience_points: StrictInt, required_level: StrictInt) -> str:
        """
        Train for experience.

        The award is not bounded below: a negative award lowers experience.

        Args:
            description: What the training was; archived on success
            experience_points: XP awarded
            required_level: Minimum level to take the training

        Returns:
            The description, or "Not strong enough" if the warrior's level
            is below required_level (nothing is archived or awarded then).
        """
        if self.level < required_level:
            logger.debug(
                "Training %r refused: level %d < %d",
                description, self.level, required_level,
            )
            self._publish(
                WarriorEvent.TRAINING_REFUSED,
                description=description,
                required_level=required_level,
            )
            return FightOutcome.NOT_STRONG_ENOUGH

        self.achievements = (*self.achievements, description)
        gained = self._gain(experience_points)

        logger.debug("Training %r completed (%+d XP)", description, gained)
        self._publish(
            WarriorEvent.TRAINING_COMPLETED,
            description=description,
            experience_gained=gained,
        )
        return description

    def _gain(self, amount: int) -> int:
        """Add experience, re-derive stats and announce progress. Returns the applied delta."""
        old_experience = self.experience
        old_level = self.level
        old_rank = self.rank

        self.experience += amount
        self._recheck_stats()

        if self.level > old_level:
            logger.info("Warrior reached level %d", self.level)
            self._publish(WarriorEvent.LEVEL_UP, old_level=old_level, new_level=self.level)
        if RANKS.index(self.rank) > RANKS.index(old_rank):
            logger.info("Warrior promoted to %s", self.rank)
            self._publish(WarriorEvent.RANK_UP, old_rank=old_rank, new_rank=self.rank)

        return self.experience - old_experience

    def _recheck_stats(self) -> None:
        """Clamp experience and re-derive level and rank."""
        if self.experience > EXPERIENCE_MAX:
            self.experience = EXPERIENCE_MAX
        self.level = level_for_experience(self.experience)
        self.rank = rank_for_level(self.level)

    def _publish(self, event_type: WarriorEvent, **data: Any) -> None:
        if self._event_bus is not None and self._event_bus.has_subscribers(event_type):
            self._event_bus.publish(event_type, warrior=self, **data)
