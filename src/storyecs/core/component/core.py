"""Capability registry and decorator.

Usage:
    @component
    @dataclass(slots=True)
    class Lamp:
        lit: bool = False

    # With an explicit capability name:
    @component(capability="room")
    @dataclass(slots=True)
    class Room:
        name: str
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import is_dataclass
from typing import overload

from storyecs.core.component.models import ComponentTypeMeta


def _default_capability_name(cls: type) -> str:
    """Derive a capability name from the class name (``FlagSet`` -> ``flag_set``)."""
    chars: list[str] = []
    for i, ch in enumerate(cls.__name__):
        if ch.isupper() and i > 0:
            chars.append("_")
        chars.append(ch.lower())
    return "".join(chars)


class ComponentRegistry:
    """Process-local registry mapping component types to capability names.

    Capability names are what dumps and error messages show; they must be
    unique so that a name identifies exactly one component type.
    """

    def __init__(self) -> None:
        """Initialize empty component registry."""
        self._by_type: dict[type, ComponentTypeMeta] = {}
        self._by_capability: dict[str, type] = {}

    def register(self, cls: type, capability: str | None = None) -> ComponentTypeMeta:
        """Register a component type and return its metadata.

        Args:
            cls: Component class to register.
            capability: Capability name; derived from the class name if omitted.

        Returns:
            Component metadata including capability and type name.

        Raises:
            RuntimeError: If the capability name is taken by another type.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        name = capability or _default_capability_name(cls)
        if name in self._by_capability:
            existing = self._by_capability[name]
            raise RuntimeError(f"Capability name collision: {cls} and {existing} are both {name!r}")

        meta = ComponentTypeMeta(
            capability=name,
            type_name=f"{cls.__module__}.{cls.__qualname__}",
        )
        self._by_type[cls] = meta
        self._by_capability[name] = cls
        return meta

    def get_meta(self, cls: type) -> ComponentTypeMeta | None:
        """Get metadata for a registered component type.

        Args:
            cls: Component class to look up.

        Returns:
            Component metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)


# Module-level registry instance
_registry = ComponentRegistry()


def get_registry() -> ComponentRegistry:
    """Access the global component registry.

    Returns:
        The process-local ComponentRegistry instance.
    """
    return _registry


def capability_name(cls: type) -> str:
    """Capability name of a component type, falling back to the class name."""
    meta = _registry.get_meta(cls)
    return meta.capability if meta is not None else cls.__name__


@overload
def component(cls: type) -> type: ...


@overload
def component(cls: None = None, *, capability: str | None = None) -> Callable[[type], type]: ...


def component(
    cls: type | None = None, *, capability: str | None = None
) -> type | Callable[[type], type]:
    """Register a dataclass as a capability component type.

    Supports three forms:
        @component                       # bare decorator
        @component()                     # parenthesized, no args
        @component(capability="room")    # factory with args

    Args:
        cls: The class to register, or None if called with arguments.
        capability: Capability name used in dumps and error messages.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is not a dataclass.

    Note:
        Apply @component AFTER @dataclass:

        >>> @component
        ... @dataclass(slots=True)
        ... class MyComponent:
        ...     value: int
    """

    def decorator(c: type) -> type:
        if not is_dataclass(c):
            raise TypeError(
                f"Component {c.__name__} must be a dataclass. Did you forget @dataclass decorator?"
            )
        meta = _registry.register(c, capability=capability)
        c.__component_meta__ = meta  # type: ignore
        return c

    if cls is None:
        return decorator
    else:
        return decorator(cls)
