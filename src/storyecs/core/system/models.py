"""System models: descriptors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storyecs.world.world import World

SystemReturn = list[str] | None
"""Systems return the lines of text they produced, or None."""

@dataclass(frozen=True)
class SystemDescriptor:
    """Metadata about a registered system."""

    name: str
    run: Callable[[World], SystemReturn]

    def __call__(self, world: World) -> list[str]:
        return list(self.run(world) or [])
