"""Flags: tagged markers of entity state.

A flag is a value, not a field. Most kinds are plain markers; ``SEEN`` carries
the id of the entity it applies to and ``GENERIC`` carries a scenario-chosen
name, so one kind can express many distinct facts.

Usage:
    world.set_flag(player, DIRTY_HANDS)
    world.set_flag(player, Flag.seen(clearing))
    world.has_flag(lamp, Flag.generic("lit"))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from storyecs.core.identity import EntityId


class FlagKind(Enum):
    """Closed flag vocabulary."""

    DEAD = auto()  # Has the entity been killed?
    SEEN = auto()  # Has the target been seen? Payload: target id
    SCENERY = auto()  # Fixed in place, described by its room
    DIRTY_HANDS = auto()
    HAS_WATER = auto()  # Location has clean water
    DIRTY = auto()
    GENERIC = auto()  # Scenario-defined. Payload: name


@dataclass(frozen=True, slots=True)
class Flag:
    """A flag value. Equality includes the payload."""

    kind: FlagKind
    target: EntityId | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind == FlagKind.SEEN and self.target is None:
            raise ValueError("SEEN flag requires a target entity")
        if self.kind == FlagKind.GENERIC and not self.name:
            raise ValueError("GENERIC flag requires a name")

    @classmethod
    def seen(cls, target: EntityId) -> Flag:
        """Flag recording that ``target`` has been seen."""
        return cls(FlagKind.SEEN, target=target)

    @classmethod
    def generic(cls, name: str) -> Flag:
        """Scenario-defined flag identified by name."""
        return cls(FlagKind.GENERIC, name=name)

    def __str__(self) -> str:
        label = self.kind.name.lower()
        if self.target is not None:
            return f"{label}({self.target})"
        if self.name is not None:
            return f"{label}({self.name})"
        return label


DEAD = Flag(FlagKind.DEAD)
SCENERY = Flag(FlagKind.SCENERY)
DIRTY_HANDS = Flag(FlagKind.DIRTY_HANDS)
HAS_WATER = Flag(FlagKind.HAS_WATER)
DIRTY = Flag(FlagKind.DIRTY)
