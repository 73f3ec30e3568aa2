"""storyecs: the run-time core of a small interactive fiction engine.

Usage:
    from storyecs import World, Print, ProseKind, Dir

    world = World()
    clearing = (
        world.create("clearing")
        .room("Clearing")
        .prose(ProseKind.ROOM, "A wide spot in the woods.")
        .id()
    )
    player = world.create("self").player().id()
    world.put_in(player, clearing)
    world.create("rule-hello").once(lambda w: True).action(Print("Hello."))

    world.tick()  # -> ["Hello."]
    world.advance_clock()
"""

__version__ = "0.1.0"

# Commands and turn loop
from storyecs.commands import CommandResult, Outcome, execute

# Components
from storyecs.components import (
    Contents,
    DeadEnd,
    FlagSet,
    Label,
    Location,
    Player,
    Prose,
    Room,
    RoomLink,
    Rule,
    Thing,
)
from storyecs.config import GameSettings

# Core primitives
from storyecs.core import (
    DEAD,
    DIRTY,
    DIRTY_HANDS,
    HAS_WATER,
    SCENERY,
    ClearFlag,
    Detail,
    Dir,
    EntityId,
    EventKind,
    Flag,
    FlagKind,
    MissingProseError,
    Print,
    ProseBuffer,
    ProseKind,
    SetFlag,
    Swap,
    SystemEntity,
    component,
    resolve,
    system,
)
from storyecs.game import Game, TurnReport

# Scheduling and systems
from storyecs.scheduling import Scheduler
from storyecs.systems import rule_system, run_rules, validate_rules

# World
from storyecs.world import (
    ContainmentError,
    EntityBuilder,
    EntityHandle,
    HookTable,
    MissingCapabilityError,
    UnknownEntityError,
    World,
    WorldBuildError,
    WorldError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "SystemEntity",
    "Dir",
    "Detail",
    "Flag",
    "FlagKind",
    "DEAD",
    "SCENERY",
    "DIRTY_HANDS",
    "HAS_WATER",
    "DIRTY",
    "ProseKind",
    "ProseBuffer",
    "MissingProseError",
    "resolve",
    "EventKind",
    "Print",
    "SetFlag",
    "ClearFlag",
    "Swap",
    "component",
    "system",
    # Components
    "Label",
    "FlagSet",
    "Room",
    "RoomLink",
    "DeadEnd",
    "Thing",
    "Player",
    "Rule",
    "Contents",
    "Location",
    "Prose",
    # World
    "World",
    "EntityBuilder",
    "EntityHandle",
    "HookTable",
    "WorldError",
    "UnknownEntityError",
    "MissingCapabilityError",
    "ContainmentError",
    "WorldBuildError",
    # Scheduling
    "Scheduler",
    "rule_system",
    "run_rules",
    "validate_rules",
    # Commands and game
    "execute",
    "CommandResult",
    "Outcome",
    "Game",
    "TurnReport",
    "GameSettings",
]
