"""
Component base class for game-state components.

Components are Pydantic models holding the state of one game entity.
Keeping them as models makes:
- Input validation automatic
- Inspection trivial (model_dump)
- Testing easier

Usage:
    class Stamina(Component):
        current: int = 10
        max_stamina: int = 10
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Components use Pydantic for:
    - Automatic validation
    - Type hints
    - Default values

    Fields are validated on assignment, so rule code that writes a field
    goes through the same checks as construction.
    """

    model_config = ConfigDict(
        # Allow arbitrary types (for references)
        arbitrary_types_allowed=True,
        # Validate on assignment
        validate_assignment=True,
        # Unknown fields are a caller error
        extra='forbid',
    )

    # Class variable: component type name (used by the registry)
    _type_name: ClassVar[str] = ""

    @classmethod
    def get_type_name(cls) -> str:
        """Get the component type name."""
        return cls._type_name or cls.__name__

    def model_post_init(self, __context) -> None:
        """Called after model initialization."""
        pass

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)


# Registry of component types by name
_component_registry: dict[str, type[Component]] = {}


def register_component(cls: type[Component]) -> type[Component]:
    """
    Decorator to register a component type.

    Usage:
        @register_component
        class Stamina(Component):
            current: int
    """
    type_name = cls.get_type_name()
    _component_registry[type_name] = cls
    return cls


def get_component_type(type_name: str) -> type[Component] | None:
    """Get component class by type name."""
    return _component_registry.get(type_name)

