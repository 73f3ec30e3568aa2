"""Component models: capability metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ComponentTypeMeta:
    """Metadata for registered capability component types."""

    capability: str
    type_name: str
