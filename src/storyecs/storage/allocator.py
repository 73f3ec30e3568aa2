"""Entity allocation service.

EntityAllocator is a stateful service that hands out entity IDs in order.
"""

from __future__ import annotations

from storyecs.core.identity import EntityId, SystemEntity


class EntityAllocator:
    """Allocates entity IDs monotonically.

    IDs are never recycled: entities leave play by moving into limbo, not by
    being destroyed. Allocation starts after the reserved system entities.
    """

    def __init__(self) -> None:
        self._next_index = SystemEntity._RESERVED_COUNT

    def allocate(self) -> EntityId:
        """Allocate the next entity ID.

        Returns:
            Newly allocated EntityId.
        """
        index = self._next_index
        self._next_index += 1
        return EntityId(index=index)

    def is_allocated(self, entity: EntityId) -> bool:
        """Check if entity ID was ever handed out (or is reserved).

        Args:
            entity: Entity ID to check.

        Returns:
            True if the index is reserved or below the allocation watermark.
        """
        return 0 <= entity.index < self._next_index
