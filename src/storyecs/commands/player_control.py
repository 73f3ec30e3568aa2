"""Player control: maps one line of player input onto the world.

Tokens are matched exactly; there is no synonym mapping or punctuation
stripping. Every command returns a CommandResult instead of printing.

Usage:
    result = execute(world, "get note")
    if result.finished:
        ...
"""

from __future__ import annotations

import logging

from storyecs.commands.results import CommandResult
from storyecs.components import DeadEnd, Thing
from storyecs.core.events import EventKind
from storyecs.core.flags import DIRTY_HANDS, HAS_WATER, Flag
from storyecs.core.identity import EntityId
from storyecs.core.prose import MissingProseError, ProseKind
from storyecs.core.types import Detail, Dir
from storyecs.debug import dump_entity, dump_world, list_world
from storyecs.world.world import World

logger = logging.getLogger(__name__)

HELP_TEXT = """\
You've got the usual commands: n, s, e, w, look, x, read, get, drop, quit.
You know.  Like that."""


def execute(world: World, command: str, *, debug: bool = False) -> CommandResult:
    """Run one player command.

    Args:
        world: World to act on.
        command: Raw input line.
        debug: Whether the ``dump`` and ``list`` commands are available.

    Returns:
        Result carrying the text to display.
    """
    tokens = command.split()
    logger.debug("Command tokens: %s", tokens)

    match tokens:
        case ["n" | "north"]:
            return cmd_go(world, Dir.NORTH)
        case ["s" | "south"]:
            return cmd_go(world, Dir.SOUTH)
        case ["e" | "east"]:
            return cmd_go(world, Dir.EAST)
        case ["w" | "west"]:
            return cmd_go(world, Dir.WEST)
        case ["help"]:
            return CommandResult.ok(HELP_TEXT)
        case ["look"]:
            return CommandResult.ok(describe_location(world, here(world), Detail.FULL))
        case ["i" | "invent" | "inventory"]:
            return cmd_inventory(world)
        case ["x" | "examine", "self" | "me"]:
            return cmd_examine_self(world)
        case ["x" | "examine", name]:
            return cmd_examine(world, name)
        case ["read", name]:
            return cmd_read(world, name)
        case ["get", name]:
            return cmd_get(world, name)
        case ["drop", name]:
            return cmd_drop(world, name)
        case ["wash", "hands"]:
            return cmd_wash_hands(world)
        case ["wash", _]:
            return CommandResult.fail("Whatever for?")
        case ["exit" | "quit"]:
            return CommandResult.quit("Bye, then.")
        case ["dump", id_arg] if debug:
            return cmd_dump(world, id_arg)
        case ["dump"] if debug:
            return CommandResult.ok(dump_world(world))
        case ["list"] if debug:
            return CommandResult.ok(list_world(world))
        case _:
            return CommandResult.fail("I don't understand.")


# User commands


def cmd_go(world: World, direction: Dir) -> CommandResult:
    """Move the player in the given direction."""
    link = world.follow(here(world), direction)
    if link is None:
        return CommandResult.fail("You can't go that way.")
    if isinstance(link, DeadEnd):
        return CommandResult.fail(link.prose)

    dest = link.dest
    world.relocate(world.pid, dest)

    seen = Flag.seen(dest)
    detail = Detail.BRIEF if world.has_flag(world.pid, seen) else Detail.FULL
    world.set_flag(world.pid, seen)
    return CommandResult.ok(describe_location(world, dest, detail))


def cmd_inventory(world: World) -> CommandResult:
    carried = world.contents(world.pid)
    if not carried:
        return CommandResult.ok("You aren't carrying anything.")
    return CommandResult.ok(f"You have: {invent_list(world, carried)}.")


def cmd_examine(world: World, name: str) -> CommandResult:
    """Describe a visible thing."""
    entity = find_visible_thing(world, name)
    if entity is None:
        return CommandResult.fail("You don't see any such thing.")
    try:
        return CommandResult.ok(world.prose(entity, ProseKind.THING))
    except MissingProseError:
        return CommandResult.ok(f"You see nothing special about the {name}.")


def cmd_examine_self(world: World) -> CommandResult:
    try:
        return CommandResult.ok(world.prose(world.pid, ProseKind.THING))
    except MissingProseError:
        return CommandResult.ok("You've got all the usual bits.")


def cmd_read(world: World, name: str) -> CommandResult:
    """Show a visible thing's readable contents."""
    entity = find_visible_thing(world, name)
    if entity is None:
        return CommandResult.fail("You don't see any such thing.")
    try:
        return CommandResult.ok(world.prose(entity, ProseKind.BOOK))
    except MissingProseError:
        return CommandResult.fail("You can't read that.")


def cmd_get(world: World, name: str) -> CommandResult:
    """Pick a thing up from the current location."""
    loc = here(world)
    if find_in_inventory(world, world.pid, name) is not None:
        return CommandResult.fail("You already have it.")
    if find_in_scenery(world, loc, name) is not None:
        return CommandResult.fail("You can't take that!")

    entity = find_in_inventory(world, loc, name)
    if entity is None:
        return CommandResult.fail("You don't see any such thing.")

    world.relocate(entity, world.pid)
    return CommandResult.ok("Taken.", world.dispatch(entity, EventKind.GET) or "")


def cmd_drop(world: World, name: str) -> CommandResult:
    """Put down a carried thing."""
    entity = find_in_inventory(world, world.pid, name)
    if entity is not None:
        world.relocate(entity, here(world))
        return CommandResult.ok("Dropped.", world.dispatch(entity, EventKind.DROP) or "")
    if find_visible_thing(world, name) is not None:
        return CommandResult.fail("You aren't carrying that.")
    return CommandResult.fail("You don't see any such thing.")


def cmd_wash_hands(world: World) -> CommandResult:
    if not world.has_flag(here(world), HAS_WATER):
        return CommandResult.fail("That'd be a neat trick.")

    msg = "You wash your hands in the water."
    if world.has_flag(world.pid, DIRTY_HANDS):
        msg += " They look much cleaner."
        world.clear_flag(world.pid, DIRTY_HANDS)
    return CommandResult.ok(msg)


# Debugging commands


def cmd_dump(world: World, id_arg: str) -> CommandResult:
    """Dump one entity, provided the ID string is valid."""
    try:
        entity = EntityId(int(id_arg))
    except ValueError:
        return CommandResult.fail(f"Not an ID: {id_arg}")
    if not world.exists(entity):
        return CommandResult.fail(f"Out of range: {id_arg}")
    return CommandResult.ok(dump_entity(world, entity))


# Description


def describe_location(world: World, room: EntityId, detail: Detail) -> str:
    """Describe a room; scenery is left to the room's own prose."""
    name = world.as_room(room).name
    parts = [name]
    if detail is Detail.FULL:
        try:
            parts = [f"{name}\n{world.prose(room, ProseKind.ROOM)}"]
        except MissingProseError:
            pass

    visible = [
        entity
        for entity in world.contents(room)
        if entity != world.pid and not world.is_scenery(entity)
    ]
    if visible:
        parts.append(f"You see: {invent_list(world, visible)}.")
    return "\n\n".join(parts)


def invent_list(world: World, entities: list[EntityId]) -> str:
    """Names of the entities, separated by commas."""
    return ", ".join(world.name(entity) for entity in entities)


# Name resolution


def here(world: World) -> EntityId:
    return world.loc(world.pid)


def _called(world: World, entity: EntityId, name: str) -> bool:
    thing = world.get(entity)[Thing]
    if thing is not None:
        return thing.noun == name
    return world.name(entity) == name


def find_in_inventory(world: World, container: EntityId, name: str) -> EntityId | None:
    """Non-scenery entity directly in ``container`` called ``name``."""
    for entity in world.contents(container):
        if entity == world.pid or world.is_scenery(entity):
            continue
        if _called(world, entity, name):
            return entity
    return None


def find_in_scenery(world: World, container: EntityId, name: str) -> EntityId | None:
    """Scenery in ``container`` called ``name``."""
    for entity in world.contents(container):
        if world.is_scenery(entity) and _called(world, entity, name):
            return entity
    return None


def find_visible_thing(world: World, name: str) -> EntityId | None:
    """Resolve a name among carried items, then room contents, then room scenery."""
    loc = here(world)
    for found in (
        find_in_inventory(world, world.pid, name),
        find_in_inventory(world, loc, name),
        find_in_scenery(world, loc, name),
    ):
        if found is not None:
            return found
    return None
