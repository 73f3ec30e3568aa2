"""Event hook table.

Usage:
    hooks.register(note, EventKind.GET, on_note_get)
    text = hooks.dispatch(world, note, EventKind.GET)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyecs.core.events import EventHook, EventKind
from storyecs.core.identity import EntityId

if TYPE_CHECKING:
    from storyecs.world.world import World

logger = logging.getLogger(__name__)


class HookTable:
    """Callbacks keyed by (entity, event kind).

    At most one hook per pair; registering again replaces the old hook.
    """

    def __init__(self) -> None:
        self._hooks: dict[tuple[EntityId, EventKind], EventHook] = {}

    def register(self, entity: EntityId, kind: EventKind, hook: EventHook) -> None:
        """Register the hook for ``kind`` events on ``entity``."""
        key = (entity, kind)
        if key in self._hooks:
            logger.debug("Replacing %s hook on entity %s", kind.name, entity)
        self._hooks[key] = hook

    def dispatch(self, world: World, entity: EntityId, kind: EventKind) -> str | None:
        """Call the hook for (entity, kind), if there is one.

        Args:
            world: World passed through to the hook.
            entity: Entity the event happened to.
            kind: What happened.

        Returns:
            Whatever the hook returned, or None when no hook is registered.
        """
        hook = self._hooks.get((entity, kind))
        if hook is None:
            return None
        logger.debug("Dispatching %s to entity %s", kind.name, entity)
        return hook(world, entity, kind)

    def __contains__(self, key: tuple[EntityId, EventKind]) -> bool:
        return key in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)
