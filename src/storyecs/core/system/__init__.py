"""System functionality: decorator and descriptors."""

from storyecs.core.system.core import system
from storyecs.core.system.models import SystemDescriptor, SystemReturn

__all__ = [
    "system",
    "SystemDescriptor",
    "SystemReturn",
]
