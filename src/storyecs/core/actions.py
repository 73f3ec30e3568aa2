"""Rule actions.

The action vocabulary is closed: a rule's script is a list of these values,
executed in order by the rule engine. New behaviour means a new action class
with ``apply`` and ``references``.

Usage:
    Print("A bird sings.")
    SetFlag(player, DIRTY_HANDS)
    Swap(corpse, ghost)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from storyecs.core.flags import Flag
from storyecs.core.identity import EntityId

if TYPE_CHECKING:
    from storyecs.world.world import World


def _with_flag_target(refs: tuple[EntityId, ...], flag: Flag) -> tuple[EntityId, ...]:
    return refs + (flag.target,) if flag.target is not None else refs


class Action(Protocol):
    """Something a rule does when it fires."""

    def apply(self, world: World) -> str | None:
        """Execute against the world, returning any text to display."""
        ...

    def references(self) -> tuple[EntityId, ...]:
        """Entities the action touches."""
        ...


@dataclass(frozen=True, slots=True)
class Print:
    """Display text."""

    text: str

    def apply(self, world: World) -> str | None:
        return self.text.strip()

    def references(self) -> tuple[EntityId, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class SetFlag:
    """Set a flag on the target entity."""

    target: EntityId
    flag: Flag

    def apply(self, world: World) -> str | None:
        world.set_flag(self.target, self.flag)
        return None

    def references(self) -> tuple[EntityId, ...]:
        return _with_flag_target((self.target,), self.flag)


@dataclass(frozen=True, slots=True)
class ClearFlag:
    """Clear a flag on the target entity."""

    target: EntityId
    flag: Flag

    def apply(self, world: World) -> str | None:
        world.clear_flag(self.target, self.flag)
        return None

    def references(self) -> tuple[EntityId, ...]:
        return _with_flag_target((self.target,), self.flag)


@dataclass(frozen=True, slots=True)
class Swap:
    """Replace ``a`` with ``b``.

    ``a`` goes to limbo; ``b`` comes out of limbo into the container ``a``
    just left.
    """

    a: EntityId
    b: EntityId

    def apply(self, world: World) -> str | None:
        container = world.loc(self.a)
        world.take_out(self.a, container)
        world.put_in(self.b, container)
        return None

    def references(self) -> tuple[EntityId, ...]:
        return (self.a, self.b)
