"""Tests for flags and flag sets.

Critical Invariants:
- Flag equality includes the payload
- Setting a present flag or clearing an absent one changes nothing
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from storyecs import DIRTY, SCENERY, EntityId, Flag, FlagKind, FlagSet


def test_parameterized_flags_compare_by_payload():
    assert Flag.seen(EntityId(1)) == Flag.seen(EntityId(1))
    assert Flag.seen(EntityId(1)) != Flag.seen(EntityId(2))
    assert Flag.generic("lit") == Flag.generic("lit")
    assert Flag.generic("lit") != Flag.generic("open")
    assert DIRTY != SCENERY


def test_payload_is_required_where_the_kind_needs_one():
    with pytest.raises(ValueError, match="target"):
        Flag(FlagKind.SEEN)
    with pytest.raises(ValueError, match="name"):
        Flag(FlagKind.GENERIC)


def test_flag_str():
    assert str(DIRTY) == "dirty"
    assert str(Flag.seen(EntityId(4))) == "seen(4)"
    assert str(Flag.generic("lit")) == "generic(lit)"


flag_values = st.one_of(
    st.sampled_from([DIRTY, SCENERY, Flag(FlagKind.DEAD)]),
    st.builds(Flag.seen, st.builds(EntityId, st.integers(0, 5))),
    st.builds(Flag.generic, st.sampled_from(["lit", "open", "locked"])),
)


@given(st.lists(st.tuples(st.booleans(), flag_values), max_size=40))
def test_flag_set_behaves_like_a_set(ops):
    """Property: a FlagSet matches a plain set model under any op sequence."""
    flag_set = FlagSet()
    model: set[Flag] = set()

    for adding, flag in ops:
        if adding:
            flag_set.add(flag)
            model.add(flag)
        else:
            flag_set.discard(flag)
            model.discard(flag)
        assert flag_set.has(flag) == (flag in model)

    assert flag_set.flags == model


def test_world_flag_idempotence(world):
    thing = world.create("pebble").thing("pebble").id()

    world.set_flag(thing, DIRTY)
    world.set_flag(thing, DIRTY)
    assert world.has_flag(thing, DIRTY)
    assert world.as_flag_bearer(thing).flags == {DIRTY}

    world.clear_flag(thing, DIRTY)
    world.clear_flag(thing, DIRTY)
    assert not world.has_flag(thing, DIRTY)
