"""World errors.

All of these are authoring defects: a scenario that references an entity
that does not exist, asks an entity for a capability it lacks, or breaks the
containment forest. They are not recovered at play time.
"""


class WorldError(Exception):
    """Base class for scenario-authoring errors."""

    pass


class UnknownEntityError(WorldError, IndexError):
    """Raised when an entity id was never allocated."""

    pass


class MissingCapabilityError(WorldError):
    """Raised when an entity is projected onto a capability it does not have."""

    pass


class ContainmentError(WorldError):
    """Raised when a containment move would corrupt the containment forest."""

    pass


class WorldBuildError(WorldError):
    """Raised when the scenario builder is misused."""

    pass
