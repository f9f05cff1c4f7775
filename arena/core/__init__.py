"""
Core module.

Exports:
- Component, register_component: Component base and registration
- EventBus, Event, WarriorEvent: Event system
"""

from arena.core.component import (
    Component,
    register_component,
    get_component_type,
)
from arena.core.events import EventBus, Event, EventHandler, WarriorEvent

__all__ = [
    # Components
    "Component",
    "register_component",
    "get_component_type",
    # Events
    "EventBus",
    "Event",
    "EventHandler",
    "WarriorEvent",
]
