"""Storage backends."""

from storyecs.storage.allocator import EntityAllocator
from storyecs.storage.local import LocalStorage
from storyecs.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "EntityAllocator",
]
