"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains stateless definitions: identities, flags, prose kinds,
    event kinds, actions and the component/system decorators. For stateful
    services, see world/, storage/, and scheduling/.
"""

from storyecs.core.actions import Action, ClearFlag, Print, SetFlag, Swap
from storyecs.core.component import (
    ComponentRegistry,
    ComponentTypeMeta,
    capability_name,
    component,
    get_registry,
)
from storyecs.core.events import EventHook, EventKind
from storyecs.core.flags import (
    DEAD,
    DIRTY,
    DIRTY_HANDS,
    HAS_WATER,
    SCENERY,
    Flag,
    FlagKind,
)
from storyecs.core.identity import EntityId, SystemEntity
from storyecs.core.prose import (
    MissingProseError,
    ProseBuffer,
    ProseHook,
    ProseKind,
    ProseSource,
    resolve,
)
from storyecs.core.system import SystemDescriptor, SystemReturn, system
from storyecs.core.types import Detail, Dir

__all__ = [
    # Types
    "Dir",
    "Detail",
    # Identity
    "EntityId",
    "SystemEntity",
    # Component
    "component",
    "get_registry",
    "capability_name",
    "ComponentRegistry",
    "ComponentTypeMeta",
    # Flags
    "Flag",
    "FlagKind",
    "DEAD",
    "SCENERY",
    "DIRTY_HANDS",
    "HAS_WATER",
    "DIRTY",
    # Prose
    "ProseKind",
    "ProseHook",
    "ProseSource",
    "ProseBuffer",
    "MissingProseError",
    "resolve",
    # Events
    "EventKind",
    "EventHook",
    # Actions
    "Action",
    "Print",
    "SetFlag",
    "ClearFlag",
    "Swap",
    # System
    "system",
    "SystemDescriptor",
    "SystemReturn",
]
