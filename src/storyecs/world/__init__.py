"""World state and access.

Architecture Note:
    world/ is the stateful service layer: the entity store, the builder that
    populates it, live entity handles and the event hook table. Unlike core/
    (stateless definitions), world/ holds the game's runtime state.
"""

from storyecs.world.access import EntityHandle
from storyecs.world.builder import EntityBuilder
from storyecs.world.errors import (
    ContainmentError,
    MissingCapabilityError,
    UnknownEntityError,
    WorldBuildError,
    WorldError,
)
from storyecs.world.hooks import HookTable
from storyecs.world.world import World

__all__ = [
    "World",
    "EntityBuilder",
    "EntityHandle",
    "HookTable",
    "WorldError",
    "UnknownEntityError",
    "MissingCapabilityError",
    "ContainmentError",
    "WorldBuildError",
]
