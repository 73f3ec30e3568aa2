"""Local in-memory storage implementation.

Simple dict-based storage; entity records are kept in creation order, which
is also the order rules were authored in.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar, cast

from storyecs.core.identity import EntityId, SystemEntity
from storyecs.storage.allocator import EntityAllocator

T = TypeVar("T")


class LocalStorage:
    """Simple in-memory storage using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance

    Components are returned live, not copied: a change made through a
    returned component is a change to the world.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {SystemEntity.LIMBO: {}}

    def create_entity(self) -> EntityId:
        """Create a new entity and return its ID.

        Returns:
            Newly allocated EntityId.
        """
        entity = self._allocator.allocate()
        self._components[entity] = {}
        return entity

    def entity_exists(self, entity: EntityId) -> bool:
        """Check if an entity was allocated.

        Args:
            entity: Entity to check.

        Returns:
            True if entity exists, False otherwise.
        """
        return entity in self._components and self._allocator.is_allocated(entity)

    def all_entities(self) -> Iterator[EntityId]:
        """Iterate over all entities in creation order.

        Yields:
            EntityId for each entity, limbo first.
        """
        yield from self._components

    def entity_count(self) -> int:
        """Number of entities, limbo included."""
        return len(self._components)

    def get_component(self, entity: EntityId, component_type: type[T]) -> T | None:
        """Get a component from an entity.

        Args:
            entity: Entity to query.
            component_type: Type of component to retrieve.

        Returns:
            Live component instance or None if not present.
        """
        return cast(T | None, self._components.get(entity, {}).get(component_type))

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set a component on an entity, replacing any of the same type.

        Args:
            entity: Entity to modify.
            component: Component instance to set (type inferred).

        Raises:
            KeyError: If the entity was never created.
        """
        if entity not in self._components:
            raise KeyError(f"Entity {entity} does not exist")
        self._components[entity][type(component)] = component

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        """Check if an entity has a specific component type.

        Args:
            entity: Entity to check.
            component_type: Component type to look for.

        Returns:
            True if entity has component, False otherwise.
        """
        return component_type in self._components.get(entity, {})

    def get_component_types(self, entity: EntityId) -> frozenset[type]:
        """Get all component types present on an entity.

        Args:
            entity: Entity to query.

        Returns:
            Frozenset of component types on entity.
        """
        return frozenset(self._components.get(entity, {}))

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Find entities with all specified components, in creation order.

        Args:
            *component_types: Component types to query for.

        Yields:
            Tuples of (entity, (component1, component2, ...)) for each match.
        """
        for entity, components in self._components.items():
            if all(t in components for t in component_types):
                yield entity, tuple(components[t] for t in component_types)

    def query_single(self, component_type: type[T]) -> Iterator[tuple[EntityId, T]]:
        """Single-component query.

        Args:
            component_type: Component type to query for.

        Yields:
            Tuples of (entity, component) for each match.
        """
        for entity, components in self.query(component_type):
            yield entity, components[0]
