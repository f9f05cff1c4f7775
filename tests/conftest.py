import os
import sys
import pytest

# Ensure arena modules can be imported
sys.path.append(os.getcwd())


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from arena.core.events import EventBus
    return EventBus()


@pytest.fixture
def warrior():
    """Fresh level 1 warrior."""
    from arena.warrior import Warrior
    return Warrior()


@pytest.fixture
def recorded_events(warrior, event_bus):
    """Warrior wired to an event bus; returns the list of received events."""
    from arena.core.events import WarriorEvent

    received = []

    def record(event):
        received.append(event)

    for event_type in WarriorEvent:
        event_bus.subscribe(event_type, record, weak=False)
    warrior.attach_event_bus(event_bus)
    return received
