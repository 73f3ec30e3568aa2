"""Tests for the component decorator and capability registry."""

from dataclasses import dataclass

import pytest

from storyecs import FlagSet, Room, Rule, component
from storyecs.core.component import ComponentRegistry, capability_name, get_registry


def test_component_requires_dataclass():
    with pytest.raises(TypeError, match="must be a dataclass"):

        @component
        class NotADataclass:
            pass


def test_bare_decorator_derives_capability_name():
    @component
    @dataclass(slots=True)
    class LampState:
        lit: bool = False

    assert capability_name(LampState) == "lamp_state"
    assert get_registry().get_meta(LampState).capability == "lamp_state"
    assert LampState.__component_meta__.capability == "lamp_state"


def test_builtin_capabilities_are_registered():
    registry = get_registry()

    assert registry.get_meta(Room).capability == "room"
    assert registry.get_meta(Rule).capability == "rule"
    assert capability_name(FlagSet) == "flag_bearer"


def test_capability_name_falls_back_to_class_name():
    class Unregistered:
        pass

    assert capability_name(Unregistered) == "Unregistered"


def test_registry_rejects_capability_collisions():
    registry = ComponentRegistry()

    @dataclass
    class First:
        pass

    @dataclass
    class Second:
        pass

    registry.register(First, capability="thing")
    with pytest.raises(RuntimeError, match="collision"):
        registry.register(Second, capability="thing")


def test_registering_twice_returns_same_meta():
    registry = ComponentRegistry()

    @dataclass
    class Widget:
        pass

    assert registry.register(Widget) is registry.register(Widget)
    assert registry.get_meta(Widget).capability == "widget"
    assert registry.get_meta(Widget).type_name.endswith("Widget")
