"""Tests for player commands against the demo scenario and small worlds."""

import pytest

from storyecs import (
    DIRTY_HANDS,
    SCENERY,
    Flag,
    Outcome,
    ProseKind,
    execute,
)
from storyecs.scenario import WELCOME


def test_look_describes_room_and_visible_things(demo_world):
    result = execute(demo_world, "look")

    assert result.succeeded
    assert result.messages == [
        "Clearing\nA wide spot in the woods.  You can go east.\n\nYou see: note."
    ]


def test_unknown_command(demo_world):
    result = execute(demo_world, "dance wildly")

    assert result.outcome is Outcome.FAILED
    assert result.messages == ["I don't understand."]


def test_tokens_must_match_exactly(demo_world):
    assert execute(demo_world, "Look").messages == ["I don't understand."]
    assert execute(demo_world, "  look  ").succeeded


class TestMovement:
    def test_missing_exit(self, demo_world):
        result = execute(demo_world, "s")

        assert result.outcome is Outcome.FAILED
        assert result.messages == ["You can't go that way."]

    def test_dead_end_prints_its_prose_and_stays_put(self, demo_world):
        clearing = demo_world.lookup_id("clearing")

        result = execute(demo_world, "north")

        assert result.outcome is Outcome.FAILED
        assert result.messages == ["The trees are too thick to pass that way."]
        assert demo_world.loc(demo_world.pid) == clearing

    def test_first_visit_full_then_brief(self, demo_world):
        trail = demo_world.lookup_id("trail")

        first = execute(demo_world, "e")
        assert first.messages == ["Trail\nA trail from hither to yon.  You can go east or west."]
        assert demo_world.loc(demo_world.pid) == trail
        assert demo_world.has_flag(demo_world.pid, Flag.seen(trail))

        back = execute(demo_world, "w")
        assert back.messages == ["Clearing\n\nYou see: note."]

        again = execute(demo_world, "e")
        assert again.messages == ["Trail"]

    def test_look_always_gives_full_description(self, demo_world):
        execute(demo_world, "e")
        execute(demo_world, "w")

        assert execute(demo_world, "look").messages[0].startswith("Clearing\nA wide spot")


class TestThings:
    def test_examine_and_read_note(self, demo_world):
        assert execute(demo_world, "x note").messages == ["A note, on plain paper."]
        assert execute(demo_world, "read note").messages == [WELCOME.strip()]

    def test_examine_missing_thing(self, demo_world):
        result = execute(demo_world, "examine unicorn")

        assert result.outcome is Outcome.FAILED
        assert result.messages == ["You don't see any such thing."]

    def test_get_note_with_dirty_hands(self, demo_world):
        note = demo_world.lookup_id("note")

        result = execute(demo_world, "get note")

        assert result.messages == ["Taken.", "The dirt from your hands got all over the note."]
        assert demo_world.loc(note) == demo_world.pid
        assert execute(demo_world, "read note").messages == ["You've gotten it too dirty to read."]
        assert "grubby" in execute(demo_world, "x note").messages[0]

    def test_get_note_with_clean_hands_keeps_it_readable(self, demo_world):
        demo_world.clear_flag(demo_world.pid, DIRTY_HANDS)

        assert execute(demo_world, "get note").messages == ["Taken."]
        assert execute(demo_world, "read note").messages == [WELCOME.strip()]

    def test_get_twice(self, demo_world):
        execute(demo_world, "get note")

        result = execute(demo_world, "get note")

        assert result.outcome is Outcome.FAILED
        assert result.messages == ["You already have it."]

    def test_inventory(self, demo_world):
        assert execute(demo_world, "i").messages == ["You aren't carrying anything."]

        execute(demo_world, "get note")

        assert execute(demo_world, "inventory").messages == ["You have: note."]
        assert execute(demo_world, "look").messages[0].endswith("You can go east.")

    def test_drop(self, demo_world):
        clearing = demo_world.lookup_id("clearing")
        note = demo_world.lookup_id("note")

        assert execute(demo_world, "drop note").messages == ["You aren't carrying that."]
        assert execute(demo_world, "drop rock").messages == ["You don't see any such thing."]

        execute(demo_world, "get note")
        execute(demo_world, "e")
        execute(demo_world, "w")
        result = execute(demo_world, "drop note")

        assert result.messages == ["Dropped."]
        assert demo_world.contents(clearing)[-1] == note

    def test_scenery_cannot_be_taken(self, demo_world):
        execute(demo_world, "e")
        execute(demo_world, "e")

        assert execute(demo_world, "get stream").messages == ["You can't take that!"]
        assert "waterfall" in execute(demo_world, "x stream").messages[0]
        assert execute(demo_world, "read stream").messages == ["You can't read that."]

    def test_thing_without_prose(self, small_world):
        spoon = small_world.create("spoon").thing("spoon").id()
        small_world.put_in(spoon, small_world.lookup_id("hall"))

        result = execute(small_world, "x spoon")

        assert result.succeeded
        assert result.messages == ["You see nothing special about the spoon."]


class TestVisibility:
    @pytest.fixture
    def key_world(self, small_world):
        hall = small_world.lookup_id("hall")
        for tag, where in [("carried-key", small_world.pid), ("floor-key", hall)]:
            key = (
                small_world.create(tag)
                .thing(f"{tag.split('-')[0]} key", noun="key")
                .prose(ProseKind.THING, f"The {tag}.")
                .id()
            )
            small_world.put_in(key, where)
        return small_world

    def test_carried_items_win(self, key_world):
        assert execute(key_world, "x key").messages == ["The carried-key."]

    def test_room_contents_before_scenery(self, key_world):
        hall = key_world.lookup_id("hall")
        scenery = (
            key_world.create("painted-key")
            .thing("painted key", noun="key")
            .prose(ProseKind.THING, "The painted-key.")
            .flag(SCENERY)
            .id()
        )
        key_world.put_in(scenery, hall)
        key_world.relocate(key_world.lookup_id("carried-key"), key_world.lookup_id("study"))

        assert execute(key_world, "x key").messages == ["The floor-key."]

        key_world.relocate(key_world.lookup_id("floor-key"), key_world.lookup_id("study"))

        assert execute(key_world, "x key").messages == ["The painted-key."]

    def test_nested_contents_are_not_visible(self, small_world):
        hall = small_world.lookup_id("hall")
        box = small_world.create("box").thing("box").container().id()
        gem = small_world.create("gem").thing("gem").id()
        small_world.put_in(box, hall)
        small_world.put_in(gem, box)

        assert execute(small_world, "get gem").messages == ["You don't see any such thing."]


class TestSelfAndWashing:
    def test_examine_self_follows_hands(self, demo_world):
        assert execute(demo_world, "x me").messages == [
            "You've got all the usual bits. Your hands are kind of dirty, though."
        ]

        demo_world.clear_flag(demo_world.pid, DIRTY_HANDS)

        assert execute(demo_world, "x self").messages == [
            "You've got all the usual bits. Plus, they're clean bits!"
        ]

    def test_wash_without_water(self, demo_world):
        assert execute(demo_world, "wash hands").messages == ["That'd be a neat trick."]
        assert execute(demo_world, "wash feet").messages == ["Whatever for?"]

    def test_wash_at_bridge(self, demo_world):
        execute(demo_world, "e")
        execute(demo_world, "e")

        first = execute(demo_world, "wash hands")
        second = execute(demo_world, "wash hands")

        assert first.messages == ["You wash your hands in the water. They look much cleaner."]
        assert second.messages == ["You wash your hands in the water."]
        assert not demo_world.has_flag(demo_world.pid, DIRTY_HANDS)


def test_help(demo_world):
    assert "usual commands" in execute(demo_world, "help").messages[0]


@pytest.mark.parametrize("line", ["quit", "exit"])
def test_quit(demo_world, line):
    result = execute(demo_world, line)

    assert result.outcome is Outcome.QUIT
    assert result.finished
    assert result.messages == ["Bye, then."]


class TestDebugCommands:
    def test_disabled_by_default(self, demo_world):
        assert execute(demo_world, "dump").messages == ["I don't understand."]
        assert execute(demo_world, "list").messages == ["I don't understand."]

    def test_dump_entity(self, demo_world):
        result = execute(demo_world, f"dump {demo_world.pid}", debug=True)

        assert result.succeeded
        assert result.messages[0].startswith("[1] self ('self')")
        assert "dirty_hands" in result.messages[0]

    def test_dump_bad_ids(self, demo_world):
        assert execute(demo_world, "dump x", debug=True).messages == ["Not an ID: x"]
        assert execute(demo_world, "dump 99", debug=True).messages == ["Out of range: 99"]

    def test_dump_world_and_list(self, demo_world):
        dump = execute(demo_world, "dump", debug=True).messages[0]
        listing = execute(demo_world, "list", debug=True).messages[0]

        assert dump.startswith("clock: 0")
        assert "exit north: dead end" in dump
        assert listing.splitlines()[0] == "[0] limbo (limbo)"
        assert "[2] clearing (Clearing)" in listing
