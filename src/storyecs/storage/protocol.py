"""Storage protocol for swappable backends.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from storyecs.core.identity import EntityId

T = TypeVar("T")


class Storage(Protocol):
    """Abstract storage interface. Implementations handle actual data.

    A fresh backend must already hold an empty record for the reserved
    entities (``SystemEntity.LIMBO``, id 0): ``entity_exists(LIMBO)`` is True
    and ``set_component`` accepts it. ``create_entity`` never returns a
    reserved id.
    """

    def create_entity(self) -> EntityId:
        """Allocate new entity."""
        ...

    def entity_exists(self, entity: EntityId) -> bool:
        """Check if entity was allocated."""
        ...

    def all_entities(self) -> Iterator[EntityId]:
        """Iterate all entities in creation order."""
        ...

    def entity_count(self) -> int:
        """Number of entities."""
        ...

    def get_component(self, entity: EntityId, component_type: type[T]) -> T | None:
        """Get live component from entity."""
        ...

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Attach component to entity."""
        ...

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        """Check if entity has component."""
        ...

    def get_component_types(self, entity: EntityId) -> frozenset[type]:
        """Get all component types on entity."""
        ...

    def query(
        self,
        *component_types: type,
    ) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components."""
        ...

    def query_single(self, component_type: type[T]) -> Iterator[tuple[EntityId, T]]:
        """Single-component query."""
        ...
