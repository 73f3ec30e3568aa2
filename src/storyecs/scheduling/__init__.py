"""System scheduling."""

from storyecs.scheduling.scheduler import Scheduler

__all__ = [
    "Scheduler",
]
