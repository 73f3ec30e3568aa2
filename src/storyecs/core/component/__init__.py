"""Component functionality: capability metadata, registry and decorator."""

from storyecs.core.component.core import (
    ComponentRegistry,
    capability_name,
    component,
    get_registry,
)
from storyecs.core.component.models import ComponentTypeMeta

__all__ = [
    "ComponentTypeMeta",
    "ComponentRegistry",
    "component",
    "get_registry",
    "capability_name",
]
