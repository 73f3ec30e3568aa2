"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from storyecs import ProseKind, World, scenario


@pytest.fixture
def world():
    """Fresh World instance."""
    return World()


@pytest.fixture
def small_world():
    """World with two linked rooms and a player standing in the first."""
    from storyecs import Dir

    w = World()
    hall = w.create("hall").room("Hall").prose(ProseKind.ROOM, "A long hall.").id()
    study = w.create("study").room("Study").prose(ProseKind.ROOM, "Books everywhere.").id()
    w.twoway(hall, Dir.NORTH, Dir.SOUTH, study)
    pid = w.create("self").player().id()
    w.put_in(pid, hall)
    return w


@pytest.fixture
def demo_world():
    """The demo scenario, freshly built."""
    return scenario.build()
