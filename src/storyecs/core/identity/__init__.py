"""Entity identity functionality: lightweight IDs and the reserved limbo entity."""

from storyecs.core.identity.models import EntityId, SystemEntity

__all__ = [
    "EntityId",
    "SystemEntity",
]
