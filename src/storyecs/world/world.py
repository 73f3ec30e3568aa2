"""World: the entity store and every query/mutation the game makes on it.

Usage:
    world = World()

    # Build phase
    clearing = world.create("clearing").room("Clearing").id()
    note = world.create("note").thing("note").id()
    world.put_in(note, clearing)

    # Play
    world.relocate(note, world.pid)
    world.set_flag(note, DIRTY)
    messages = world.tick()  # run rules
    world.advance_clock()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, TypeVar

from storyecs.components import (
    Contents,
    DeadEnd,
    FlagSet,
    Label,
    Link,
    Location,
    Player,
    Room,
    RoomLink,
    Rule,
    Thing,
)
from storyecs.core.component import capability_name
from storyecs.core.events import EventKind
from storyecs.core.flags import SCENERY, Flag
from storyecs.core.identity import EntityId, SystemEntity
from storyecs.core.prose import ProseKind, resolve
from storyecs.core.system import SystemDescriptor
from storyecs.core.types import Dir
from storyecs.storage.local import LocalStorage
from storyecs.storage.protocol import Storage
from storyecs.world.access import EntityHandle
from storyecs.world.builder import EntityBuilder
from storyecs.world.errors import (
    ContainmentError,
    MissingCapabilityError,
    UnknownEntityError,
    WorldBuildError,
)
from storyecs.world.hooks import HookTable

if TYPE_CHECKING:
    from storyecs.scheduling import Scheduler

ComponentT = TypeVar("ComponentT")

logger = logging.getLogger(__name__)


class World:
    """Central world state.

    Owns the storage backend, the event hook table, the turn clock and the
    scheduler that runs per-turn systems (by default, the rule engine).
    There is exactly one mutator: whoever holds the World.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        scheduler: Scheduler | None = None,
    ):
        self._storage = storage or LocalStorage()
        # Import here to avoid circular dependency at module level
        if scheduler is None:
            from storyecs.scheduling import Scheduler
            from storyecs.systems import rule_system

            scheduler = Scheduler()
            scheduler.register_system(rule_system)
        self._scheduler = scheduler
        self._hooks = HookTable()
        self._tags: dict[str, EntityId] = {}
        self._pid: EntityId | None = None
        self._clock = 0
        self._ensure_system_entities()

    def _ensure_system_entities(self) -> None:
        """Give limbo its label, flags and contents list.

        Raises:
            WorldBuildError: If the storage backend has no record for limbo.
        """
        limbo = SystemEntity.LIMBO
        if not self._storage.entity_exists(limbo):
            raise WorldBuildError(
                f"Storage backend {type(self._storage).__name__} has no record for limbo"
            )
        if not self._storage.has_component(limbo, Label):
            self._storage.set_component(limbo, Label(tag="limbo", name="limbo"))
            self._storage.set_component(limbo, FlagSet())
            self._storage.set_component(limbo, Contents())
        self._tags["limbo"] = limbo

    # Build phase

    def create(self, tag: str) -> EntityBuilder:
        """Allocate a new entity and return a builder for its capabilities.

        Args:
            tag: Unique machine name, used by ``lookup_id`` and in dumps.

        Raises:
            WorldBuildError: If the tag is already taken.
        """
        if tag in self._tags:
            raise WorldBuildError(f"Tag {tag!r} is already used by entity {self._tags[tag]}")
        entity = self._storage.create_entity()
        self._storage.set_component(entity, Label(tag=tag, name=tag))
        self._storage.set_component(entity, FlagSet())
        self._tags[tag] = entity
        logger.debug("Created entity %s (%s)", entity, tag)
        return EntityBuilder(self, entity)

    def _set_player(self, entity: EntityId) -> None:
        if self._pid is not None:
            raise WorldBuildError(f"World already has a player: entity {self._pid}")
        self._pid = entity

    def _enter_limbo(self, entity: EntityId) -> None:
        self._project(SystemEntity.LIMBO, Contents).items.append(entity)

    def link(self, room: EntityId, direction: Dir, link: Link) -> None:
        """Add (or replace) a one-way exit from ``room``."""
        if isinstance(link, RoomLink):
            self.as_room(link.dest)
        self.as_room(room).links[direction] = link

    def oneway(self, a: EntityId, direction: Dir, b: EntityId) -> None:
        """Add an exit from ``a`` to ``b``."""
        self.link(a, direction, RoomLink(b))

    def twoway(self, a: EntityId, direction: Dir, back: Dir, b: EntityId) -> None:
        """Add an exit from ``a`` to ``b`` and one from ``b`` back to ``a``."""
        self.oneway(a, direction, b)
        self.oneway(b, back, a)

    def dead_end(self, room: EntityId, direction: Dir, prose: str) -> None:
        """Add an exit that leads nowhere, described by ``prose``."""
        self.link(room, direction, DeadEnd(prose.strip()))

    # Entity access

    def exists(self, entity: EntityId) -> bool:
        return self._storage.entity_exists(entity)

    def _require(self, entity: EntityId) -> None:
        if not self._storage.entity_exists(entity):
            raise UnknownEntityError(
                f"Entity {entity} out of range (0..{self._storage.entity_count() - 1})"
            )

    def get(self, entity: EntityId) -> EntityHandle:
        """Get a live handle on an entity.

        Raises:
            UnknownEntityError: If the id was never allocated.
        """
        self._require(entity)
        return EntityHandle(self, entity)

    def entities(self) -> Iterator[EntityId]:
        """Iterate over all entities in creation order, limbo first."""
        return self._storage.all_entities()

    def lookup_id(self, tag: str) -> EntityId | None:
        """Find an entity by tag."""
        return self._tags.get(tag)

    def _project(self, entity: EntityId, component_type: type[ComponentT]) -> ComponentT:
        self._require(entity)
        component = self._storage.get_component(entity, component_type)
        if component is None:
            raise MissingCapabilityError(
                f"Entity {entity} ({self._label(entity).tag}) has no "
                f"{capability_name(component_type)} capability"
            )
        return component

    def _label(self, entity: EntityId) -> Label:
        label = self._storage.get_component(entity, Label)
        if label is None:
            raise UnknownEntityError(f"Entity {entity} has no label")
        return label

    def as_room(self, entity: EntityId) -> Room:
        return self._project(entity, Room)

    def as_thing(self, entity: EntityId) -> Thing:
        return self._project(entity, Thing)

    def as_player(self, entity: EntityId) -> Player:
        return self._project(entity, Player)

    def as_rule(self, entity: EntityId) -> Rule:
        return self._project(entity, Rule)

    def as_flag_bearer(self, entity: EntityId) -> FlagSet:
        return self._project(entity, FlagSet)

    def as_contents(self, entity: EntityId) -> Contents:
        return self._project(entity, Contents)

    def as_location(self, entity: EntityId) -> Location:
        return self._project(entity, Location)

    def is_room(self, entity: EntityId) -> bool:
        return self._storage.has_component(entity, Room)

    def is_thing(self, entity: EntityId) -> bool:
        return self._storage.has_component(entity, Thing)

    def is_player(self, entity: EntityId) -> bool:
        return self._storage.has_component(entity, Player)

    def is_rule(self, entity: EntityId) -> bool:
        return self._storage.has_component(entity, Rule)

    @property
    def pid(self) -> EntityId:
        """The player entity."""
        if self._pid is None:
            raise WorldBuildError("World has no player")
        return self._pid

    def tag(self, entity: EntityId) -> str:
        self._require(entity)
        return self._label(entity).tag

    def name(self, entity: EntityId) -> str:
        """Display name of an entity."""
        self._require(entity)
        return self._label(entity).name

    def rule_ids(self) -> list[EntityId]:
        """All rule entities, in the order they were authored."""
        return [entity for entity, _ in self._storage.query_single(Rule)]

    # Containment

    def loc(self, entity: EntityId) -> EntityId:
        """The container ``entity`` is in (limbo if none)."""
        return self.as_location(entity).container

    def contents(self, entity: EntityId) -> list[EntityId]:
        """Entities directly inside ``entity``; empty if it holds nothing."""
        self._require(entity)
        contents = self._storage.get_component(entity, Contents)
        return list(contents.items) if contents is not None else []

    def _would_cycle(self, entity: EntityId, container: EntityId) -> bool:
        current = container
        while True:
            if current == entity:
                return True
            location = self._storage.get_component(current, Location)
            if location is None or location.container.is_limbo():
                return False
            current = location.container

    def _check_destination(self, entity: EntityId, container: EntityId) -> None:
        if container.is_limbo():
            raise ContainmentError(f"Use take_out to move entity {entity} into limbo")
        if self._would_cycle(entity, container):
            raise ContainmentError(f"Entity {entity} cannot be put inside {container}: cycle")

    def put_in(self, entity: EntityId, container: EntityId) -> None:
        """Move ``entity`` out of limbo into ``container``.

        Raises:
            ContainmentError: If the entity is not in limbo, the container is
                limbo, or the move would make the entity contain itself.
            MissingCapabilityError: If the entity cannot be contained or the
                container cannot hold things.
        """
        location = self.as_location(entity)
        contents = self.as_contents(container)
        self._check_destination(entity, container)
        if not location.container.is_limbo():
            raise ContainmentError(
                f"Entity {entity} is in {location.container}, not limbo; take it out first"
            )

        limbo = self.as_contents(SystemEntity.LIMBO)
        limbo.items.remove(entity)
        contents.items.append(entity)
        location.container = container
        logger.debug("Put %s in %s", self._label(entity).tag, self._label(container).tag)

    def take_out(self, entity: EntityId, container: EntityId) -> None:
        """Move ``entity`` from ``container`` into limbo.

        Raises:
            ContainmentError: If the entity is not in ``container``, or is
                already in limbo.
        """
        location = self.as_location(entity)
        if location.container != container:
            raise ContainmentError(
                f"Entity {entity} is not in {container}; it is in {location.container}"
            )
        if container.is_limbo():
            raise ContainmentError(f"Entity {entity} is already in limbo")

        self.as_contents(container).items.remove(entity)
        self.as_contents(SystemEntity.LIMBO).items.append(entity)
        location.container = SystemEntity.LIMBO
        logger.debug("Took %s out of %s", self._label(entity).tag, self._label(container).tag)

    def relocate(self, entity: EntityId, dest: EntityId) -> None:
        """Move ``entity`` from wherever it is into ``dest``."""
        current = self.loc(entity)
        self.as_contents(dest)
        self._check_destination(entity, dest)
        if not current.is_limbo():
            self.take_out(entity, current)
        self.put_in(entity, dest)

    def follow(self, room: EntityId, direction: Dir) -> Link | None:
        """Exit from ``room`` in ``direction``, or None if there is none."""
        return self.as_room(room).links.get(direction)

    # Flags

    def set_flag(self, entity: EntityId, flag: Flag) -> None:
        """Set a flag; setting a flag already present is a no-op."""
        if flag.target is not None:
            self._require(flag.target)
        self.as_flag_bearer(entity).add(flag)
        logger.debug("Set %s on %s", flag, self._label(entity).tag)

    def clear_flag(self, entity: EntityId, flag: Flag) -> None:
        """Clear a flag; clearing an absent flag is a no-op."""
        self.as_flag_bearer(entity).discard(flag)
        logger.debug("Cleared %s on %s", flag, self._label(entity).tag)

    def has_flag(self, entity: EntityId, flag: Flag) -> bool:
        return self.as_flag_bearer(entity).has(flag)

    def is_scenery(self, entity: EntityId) -> bool:
        return self.has_flag(entity, SCENERY)

    # Prose and events

    def prose(self, entity: EntityId, kind: ProseKind = ProseKind.THING) -> str:
        """Resolve an entity's prose; see ``storyecs.core.prose.resolve``."""
        self._require(entity)
        return resolve(self, entity, kind)

    @property
    def hooks(self) -> HookTable:
        return self._hooks

    def dispatch(self, entity: EntityId, kind: EventKind) -> str | None:
        """Run the ``kind`` hook registered on ``entity``, if any."""
        self._require(entity)
        return self._hooks.dispatch(self, entity, kind)

    # Turns

    @property
    def clock(self) -> int:
        """Number of completed turns."""
        return self._clock

    def advance_clock(self) -> int:
        """Advance the turn counter. Called once per turn by the driver."""
        self._clock += 1
        return self._clock

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register a per-turn system with the scheduler."""
        self._scheduler.register_system(descriptor)

    def tick(self) -> list[str]:
        """Run every registered system once and return the text they produced."""
        return self._scheduler.tick(self)
