"""Entity identity models.

Usage:
    entity = EntityId(index=42)
    nowhere = SystemEntity.LIMBO
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class EntityId:
    """Lightweight entity identifier.

    Indices are assigned monotonically and never reused, so an id stays
    valid for the lifetime of the world that allocated it.
    """

    index: int = 0

    def __hash__(self) -> int:
        return hash(self.index)

    def __str__(self) -> str:
        return str(self.index)

    def is_limbo(self) -> bool:
        """Check if this is the reserved "nowhere" container.

        Returns:
            True if entity is SystemEntity.LIMBO, False otherwise.
        """
        return self.index == 0


class SystemEntity:
    """Reserved entity IDs. Present in every world."""

    LIMBO = EntityId(index=0)

    _RESERVED_COUNT = 1  # Index 0 is limbo
