"""Event kinds and hook signature."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from storyecs.core.identity import EntityId

if TYPE_CHECKING:
    from storyecs.world.world import World


class EventKind(Enum):
    """Events that can happen to an entity."""

    GET = auto()  # The player picked the entity up
    DROP = auto()  # The player put the entity down


EventHook = Callable[["World", EntityId, EventKind], "str | None"]
"""Hook called as ``hook(world, entity, kind)``; may return text to show."""
