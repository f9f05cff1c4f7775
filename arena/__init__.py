"""
Arena

Warrior progression rules: experience, levels, ranks, battles and training.

Quick Start:
    from arena import Warrior

    warrior = Warrior()
    warrior.battle(6)                 # "An intense fight"
    warrior.train("Sparring", 50, 1)  # "Sparring"
    print(warrior.level, warrior.rank)
"""

__version__ = "0.1.0"
__author__ = "Developer"

from arena.core import (
    Component,
    register_component,
    EventBus,
    Event,
    WarriorEvent,
)
from arena.warrior import (
    Warrior,
    Rank,
    RANKS,
    FightOutcome,
)

__all__ = [
    # Core
    "Component",
    "register_component",
    # Events
    "EventBus",
    "Event",
    "WarriorEvent",
    # Warrior
    "Warrior",
    "Rank",
    "RANKS",
    "FightOutcome",
]
