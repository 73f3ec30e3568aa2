"""Scenario builder: the only way to attach components to an entity.

Usage:
    clearing = (
        world.create("clearing")
        .room("Clearing")
        .prose(ProseKind.ROOM, "A wide spot in the woods.")
        .id()
    )

    world.create("rule-story").once(lambda w: w.clock == 2).action(Print("..."))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from storyecs.components import (
    Contents,
    Location,
    Player,
    Predicate,
    Prose,
    Room,
    Rule,
    Thing,
)
from storyecs.core.actions import Action
from storyecs.core.component import capability_name
from storyecs.core.events import EventHook, EventKind
from storyecs.core.flags import Flag
from storyecs.core.identity import EntityId
from storyecs.core.prose import ProseHook, ProseKind, ProseSource
from storyecs.world.errors import WorldBuildError

if TYPE_CHECKING:
    from storyecs.world.world import World


class EntityBuilder:
    """Fluent builder returned by ``World.create``.

    Each method attaches a capability (or initial state) and returns the
    builder; ``id()`` ends the chain.
    """

    def __init__(self, world: World, entity: EntityId):
        self._world = world
        self._entity = entity

    def _attach(self, component: Any) -> None:
        if self._world._storage.has_component(self._entity, type(component)):
            raise WorldBuildError(
                f"Entity {self._entity} already has a {capability_name(type(component))} capability"
            )
        self._world._storage.set_component(self._entity, component)

    def _ensure_contents(self) -> None:
        if not self._world._storage.has_component(self._entity, Contents):
            self._attach(Contents())

    def _ensure_location(self) -> None:
        if not self._world._storage.has_component(self._entity, Location):
            self._attach(Location())
            self._world._enter_limbo(self._entity)

    def room(self, name: str) -> Self:
        """Make the entity a room with the given display name."""
        self._attach(Room(name=name))
        self._ensure_contents()
        self._world._label(self._entity).name = name
        return self

    def thing(self, name: str, noun: str | None = None) -> Self:
        """Make the entity a thing. It starts out in limbo."""
        self._attach(Thing(name=name, noun=noun or name))
        self._ensure_location()
        self._world._label(self._entity).name = name
        return self

    def container(self) -> Self:
        """Let the entity hold other entities."""
        self._ensure_contents()
        return self

    def player(self) -> Self:
        """Make the entity the player. It starts out in limbo."""
        self._attach(Player())
        self._ensure_contents()
        self._ensure_location()
        self._world._set_player(self._entity)
        return self

    def _set_prose(self, kind: ProseKind, source: ProseSource) -> None:
        prose = self._world._storage.get_component(self._entity, Prose)
        if prose is None:
            prose = Prose()
            self._attach(prose)
        prose.slots[kind] = source

    def prose(self, kind: ProseKind, text: str) -> Self:
        """Attach fixed prose of the given kind."""
        self._set_prose(kind, text.strip())
        return self

    def prose_hook(self, kind: ProseKind, hook: ProseHook) -> Self:
        """Attach prose computed by ``hook(world, id)`` each time it is read."""
        self._set_prose(kind, hook)
        return self

    def flag(self, flag: Flag) -> Self:
        """Set an initial flag."""
        self._world.set_flag(self._entity, flag)
        return self

    def event_hook(self, kind: EventKind, hook: EventHook) -> Self:
        """Register ``hook`` for ``kind`` events on this entity."""
        self._world.hooks.register(self._entity, kind, hook)
        return self

    def once(self, predicate: Predicate) -> Self:
        """Make the entity a rule that fires at most once."""
        self._attach(Rule(predicate=predicate, once_only=True))
        return self

    def always(self, predicate: Predicate) -> Self:
        """Make the entity a rule that fires every turn its predicate holds."""
        self._attach(Rule(predicate=predicate, once_only=False))
        return self

    def action(self, action: Action) -> Self:
        """Append an action to the rule's script."""
        rule = self._world._storage.get_component(self._entity, Rule)
        if rule is None:
            raise WorldBuildError(
                f"Entity {self._entity} is not a rule; call once() or always() first"
            )
        rule.actions.append(action)
        return self

    def id(self) -> EntityId:
        """Finish building and return the entity's id."""
        return self._entity
