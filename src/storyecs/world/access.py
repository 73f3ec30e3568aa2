"""Entity handles: live, per-entity views of the world.

Usage:
    e = world.get(note)
    if Thing in e:
        thing = e[Thing]
    room = world.get(clearing).as_room()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from storyecs.components import Contents, FlagSet, Location, Player, Room, Rule, Thing
from storyecs.core.component import capability_name
from storyecs.core.identity import EntityId

if TYPE_CHECKING:
    from storyecs.world.world import World

T = TypeVar("T")


class EntityHandle:
    """Convenient wrapper for repeated single-entity reads.

    Components returned by a handle are the live records; mutate them through
    World methods so that invariants (containment, logging) are kept. The
    capability set itself is fixed, so there is no ``__setitem__``.

    Args:
        world: World the entity lives in.
        entity: EntityId to wrap.
    """

    def __init__(self, world: World, entity: EntityId):
        self._world = world
        self._entity = entity

    @property
    def id(self) -> EntityId:
        """Get the entity ID for this handle."""
        return self._entity

    @property
    def tag(self) -> str:
        return self._world._label(self._entity).tag

    @property
    def name(self) -> str:
        return self._world._label(self._entity).name

    def __getitem__(self, component_type: type[T]) -> T | None:
        """Get component from entity: e[Room] -> Room or None.

        Args:
            component_type: Component type to retrieve.

        Returns:
            Live component instance or None if not present.
        """
        return self._world._storage.get_component(self._entity, component_type)

    def __contains__(self, component_type: type) -> bool:
        """Check if entity has component: Room in e."""
        return self._world._storage.has_component(self._entity, component_type)

    def capabilities(self) -> list[str]:
        """Capability names of the entity's components, sorted."""
        types = self._world._storage.get_component_types(self._entity)
        return sorted(capability_name(t) for t in types)

    def as_room(self) -> Room:
        return self._world.as_room(self._entity)

    def as_thing(self) -> Thing:
        return self._world.as_thing(self._entity)

    def as_player(self) -> Player:
        return self._world.as_player(self._entity)

    def as_rule(self) -> Rule:
        return self._world.as_rule(self._entity)

    def as_flag_bearer(self) -> FlagSet:
        return self._world.as_flag_bearer(self._entity)

    def as_contents(self) -> Contents:
        return self._world.as_contents(self._entity)

    def as_location(self) -> Location:
        return self._world.as_location(self._entity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityHandle):
            return NotImplemented
        return self._world is other._world and self._entity == other._entity

    def __hash__(self) -> int:
        return hash(self._entity)

    def __repr__(self) -> str:
        return f"EntityHandle({self._entity}, {self.tag!r})"
