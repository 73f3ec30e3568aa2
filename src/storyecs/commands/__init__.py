"""Player command layer."""

from storyecs.commands.player_control import (
    describe_location,
    execute,
    find_visible_thing,
)
from storyecs.commands.results import CommandResult, Outcome

__all__ = [
    "execute",
    "describe_location",
    "find_visible_thing",
    "CommandResult",
    "Outcome",
]
