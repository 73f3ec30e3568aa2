"""Capability components.

An entity is an id plus any combination of these. Two are attached to every
entity at creation (Label and FlagSet); the rest are attached by the
EntityBuilder and never change afterwards. Their fields do change during play.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from storyecs.core.actions import Action
from storyecs.core.component import component
from storyecs.core.flags import Flag
from storyecs.core.identity import EntityId, SystemEntity
from storyecs.core.prose import ProseKind, ProseSource
from storyecs.core.types import Dir

if TYPE_CHECKING:
    from storyecs.world.world import World

Predicate = Callable[["World"], bool]


@component
@dataclass(slots=True)
class Label:
    """Machine tag and display name."""

    tag: str
    name: str


@component(capability="flag_bearer")
@dataclass(slots=True)
class FlagSet:
    """Per-entity set of flags. Unordered, no duplicates."""

    flags: set[Flag] = field(default_factory=set)

    def has(self, flag: Flag) -> bool:
        return flag in self.flags

    def add(self, flag: Flag) -> None:
        self.flags.add(flag)

    def discard(self, flag: Flag) -> None:
        self.flags.discard(flag)


@dataclass(frozen=True, slots=True)
class RoomLink:
    """Exit leading to another room."""

    dest: EntityId


@dataclass(frozen=True, slots=True)
class DeadEnd:
    """Exit that goes nowhere, with the prose explaining why."""

    prose: str


Link = RoomLink | DeadEnd


@component(capability="room")
@dataclass(slots=True)
class Room:
    """A location the player can be in."""

    name: str
    links: dict[Dir, Link] = field(default_factory=dict)


@component(capability="thing")
@dataclass(slots=True)
class Thing:
    """An object in the world; ``noun`` is what the player types."""

    name: str
    noun: str


@component(capability="player")
@dataclass(slots=True)
class Player:
    """Marks the player entity."""

    pass


@component(capability="rule")
@dataclass(slots=True)
class Rule:
    """A predicate/action-script pair evaluated once per turn."""

    predicate: Predicate
    actions: list[Action] = field(default_factory=list)
    once_only: bool = False
    fired: bool = False

    def is_eligible(self) -> bool:
        return not (self.once_only and self.fired)


@component(capability="contents")
@dataclass(slots=True)
class Contents:
    """Containment list: what is in a room, carried by the player, etc."""

    items: list[EntityId] = field(default_factory=list)


@component(capability="location")
@dataclass(slots=True)
class Location:
    """The container an entity is currently in."""

    container: EntityId = SystemEntity.LIMBO


@component(capability="prose")
@dataclass(slots=True)
class Prose:
    """Prose slots keyed by kind."""

    slots: dict[ProseKind, ProseSource] = field(default_factory=dict)
