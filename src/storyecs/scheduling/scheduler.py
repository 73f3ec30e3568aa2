"""Per-turn system scheduler.

Usage:
    scheduler = Scheduler()
    scheduler.register_system(rule_system)
    messages = scheduler.tick(world)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyecs.core.system import SystemDescriptor

if TYPE_CHECKING:
    from storyecs.world.world import World

logger = logging.getLogger(__name__)


class Scheduler:
    """Runs registered systems one at a time, in registration order.

    Each system sees the writes of the systems before it; nothing runs
    concurrently.
    """

    def __init__(self) -> None:
        self._systems: list[SystemDescriptor] = []

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Register system for execution.

        Raises:
            ValueError: If a system with the same name is already registered.
        """
        if any(s.name == descriptor.name for s in self._systems):
            raise ValueError(f"System {descriptor.name!r} is already registered")
        self._systems.append(descriptor)

    @property
    def systems(self) -> tuple[SystemDescriptor, ...]:
        return tuple(self._systems)

    def tick(self, world: World) -> list[str]:
        """Execute all systems once and collect the text they produce."""
        messages: list[str] = []
        for descriptor in self._systems:
            logger.debug("Running system %s at clock %d", descriptor.name, world.clock)
            messages.extend(descriptor(world))
        return messages
