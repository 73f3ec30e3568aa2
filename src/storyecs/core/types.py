"""Core type definitions for storyecs."""

from enum import Enum, auto


class Dir(Enum):
    """Exit directions."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()
    UP = auto()
    DOWN = auto()
    IN = auto()
    OUT = auto()


class Detail(Enum):
    """How much of a room to describe."""

    FULL = auto()
    BRIEF = auto()
