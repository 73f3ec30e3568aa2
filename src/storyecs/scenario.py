"""Demo scenario: a clearing, a trail, a bridge over a stream, and a note."""

from __future__ import annotations

from storyecs.core.actions import ClearFlag, Print
from storyecs.core.events import EventKind
from storyecs.core.flags import DEAD, DIRTY, DIRTY_HANDS, HAS_WATER, SCENERY, Flag
from storyecs.core.identity import EntityId
from storyecs.core.prose import ProseBuffer, ProseKind
from storyecs.core.types import Dir
from storyecs.world.world import World

NOTE = "note"

BACKSTORY = """
You don't know where you are.  You don't even know where you want to
be.  All you know is that your feet are wet, your hands are dirty,
and gosh, this doesn't look anything like the toy aisle.
"""

FAIRY_GODMOTHER = """
A fairy godmother hovers over your limp body.  She frowns;
then, apparently against her better judgment, she waves
her wand.  There's a flash, and she disappears.

*** You are alive! ***
"""

WELCOME = """
Welcome, dear friend.  Your mission, should you choose to
accept it, is to figure out how to get to the end of
the trail.  You've already taken the first big
step!
"""


def build() -> World:
    """Build the initial state of the game world."""
    world = World()

    pid = (
        world.create("self")
        .player()
        .prose_hook(ProseKind.THING, player_visual)
        .flag(DIRTY_HANDS)
        .id()
    )

    # Rooms
    clearing = (
        world.create("clearing")
        .room("Clearing")
        .prose(ProseKind.ROOM, "A wide spot in the woods.  You can go east.")
        .id()
    )

    trail = (
        world.create("trail")
        .room("Trail")
        .prose(ProseKind.ROOM, "A trail from hither to yon.  You can go east or west.")
        .id()
    )

    bridge = (
        world.create("bridge")
        .room("Bridge")
        .prose(ProseKind.ROOM, "The trail crosses a small stream here.  You can go east or west.")
        .flag(HAS_WATER)
        .id()
    )

    stream = (
        world.create("stream")
        .thing("stream")
        .prose(
            ProseKind.THING,
            """
The stream comes from the north, down a little waterfall, and runs
away under the bridge.  It looks surprisingly deep, considering
how narrow it is.
            """,
        )
        .flag(SCENERY)
        .id()
    )
    world.put_in(stream, bridge)

    # Links
    world.twoway(clearing, Dir.EAST, Dir.WEST, trail)
    world.twoway(trail, Dir.EAST, Dir.WEST, bridge)
    world.dead_end(clearing, Dir.NORTH, "The trees are too thick to pass that way.")

    # The note
    note = (
        world.create(NOTE)
        .thing("note")
        .prose_hook(ProseKind.THING, note_thing_prose)
        .prose_hook(ProseKind.BOOK, note_book_prose)
        .event_hook(EventKind.GET, on_note_get)
        .id()
    )
    world.put_in(note, clearing)

    # Stories: rules that supply backstory to the player.
    world.create("rule-story-1").once(lambda w: w.clock == 2).action(Print(BACKSTORY))

    (
        world.create("fairy-godmother-rule")
        .always(player_is_dead)
        .action(Print(FAIRY_GODMOTHER))
        .action(ClearFlag(pid, DEAD))
    )

    # Starting location
    world.put_in(pid, clearing)
    world.set_flag(pid, Flag.seen(clearing))

    return world


def player_visual(world: World, pid: EntityId) -> str:
    """The player's current appearance."""
    dirty = world.has_flag(pid, DIRTY_HANDS)
    return (
        ProseBuffer()
        .add("You've got all the usual bits.")
        .when(dirty, "Your hands are kind of dirty, though.")
        .when(not dirty, "Plus, they're clean bits!")
        .get()
    )


def on_note_get(world: World, note: EntityId, _: EventKind) -> str | None:
    if world.has_flag(world.pid, DIRTY_HANDS) and not world.has_flag(note, DIRTY):
        world.set_flag(note, DIRTY)
        return "The dirt from your hands got all over the note."
    return None


def player_is_dead(world: World) -> bool:
    return world.has_flag(world.pid, DEAD)


def note_thing_prose(world: World, note: EntityId) -> str:
    if world.has_flag(note, DIRTY):
        return "A note, on plain paper.  It looks pretty grubby; someone's been mishandling it."
    return "A note, on plain paper."


def note_book_prose(world: World, note: EntityId) -> str:
    if world.has_flag(note, DIRTY):
        return "You've gotten it too dirty to read."
    return WELCOME.strip()
