"""Prose slots and lazy resolution.

Prose is never cached: every ``resolve`` call re-reads the slot and, for
producers, re-runs the producer against the current world.

Usage:
    text = resolve(world, note, ProseKind.BOOK)

    ProseBuffer().add("A note.").when(dirty, "It is grubby.").get()
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from storyecs.core.identity import EntityId

if TYPE_CHECKING:
    from storyecs.world.world import World


class ProseKind(Enum):
    """The different kinds of prose an entity may carry."""

    ROOM = auto()  # A room's interior
    THING = auto()  # A thing's visible appearance
    BOOK = auto()  # Readable contents of a book, note, etc.
    SCENERY = auto()  # Blurb for scenery mentioned by its room


ProseHook = Callable[["World", EntityId], str]
ProseSource = str | ProseHook


class MissingProseError(LookupError):
    """Raised when an entity has no prose of the requested kind."""

    pass


def resolve(world: World, entity: EntityId, kind: ProseKind) -> str:
    """Resolve an entity's prose of the given kind.

    Args:
        world: World to resolve against.
        entity: Entity whose prose is wanted.
        kind: Prose slot to read.

    Returns:
        The fixed string, or the producer's result for the current world.

    Raises:
        MissingProseError: If the entity has no slot of that kind.
    """
    from storyecs.components import Prose

    prose = world.get(entity)[Prose]
    if prose is None or kind not in prose.slots:
        raise MissingProseError(f"Entity {entity} has no {kind.name.lower()} prose")

    source = prose.slots[kind]
    if isinstance(source, str):
        return source
    return source(world, entity)


class ProseBuffer:
    """Builds a paragraph from fragments, some of them conditional.

    Fragments are joined with single spaces and trimmed.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def add(self, text: str) -> ProseBuffer:
        """Append a fragment."""
        text = text.strip()
        if text:
            self._parts.append(text)
        return self

    def when(self, condition: bool, text: str) -> ProseBuffer:
        """Append a fragment if ``condition`` holds."""
        if condition:
            self.add(text)
        return self

    def get(self) -> str:
        """Return the assembled paragraph."""
        return " ".join(self._parts)
