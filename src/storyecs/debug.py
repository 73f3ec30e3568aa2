"""Debugging dumps of world state. All functions return text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyecs.components import DeadEnd, Location, Prose, Room, Rule
from storyecs.core.identity import EntityId

if TYPE_CHECKING:
    from storyecs.world.world import World


def _ref(world: World, entity: EntityId) -> str:
    return f"{world.tag(entity)}[{entity}]"


def dump_entity(world: World, entity: EntityId) -> str:
    """Multi-line description of one entity's components."""
    handle = world.get(entity)
    lines = [f"[{entity}] {handle.tag} ({handle.name!r})"]
    lines.append(f"  capabilities: {', '.join(handle.capabilities())}")

    location = handle[Location]
    if location is not None:
        lines.append(f"  location: {_ref(world, location.container)}")

    contents = world.contents(entity)
    if contents:
        lines.append(f"  contents: {', '.join(_ref(world, e) for e in contents)}")

    flags = sorted(str(f) for f in world.as_flag_bearer(entity).flags)
    if flags:
        lines.append(f"  flags: {', '.join(flags)}")

    room = handle[Room]
    if room is not None:
        for direction, link in room.links.items():
            target = "dead end" if isinstance(link, DeadEnd) else _ref(world, link.dest)
            lines.append(f"  exit {direction.name.lower()}: {target}")

    prose = handle[Prose]
    if prose is not None:
        kinds = ", ".join(kind.name.lower() for kind in prose.slots)
        lines.append(f"  prose: {kinds}")

    rule = handle[Rule]
    if rule is not None:
        lines.append(
            f"  rule: once_only={rule.once_only} fired={rule.fired} actions={len(rule.actions)}"
        )

    return "\n".join(lines)


def dump_world(world: World) -> str:
    """Dump every entity, plus the clock."""
    dumps = [f"clock: {world.clock}"]
    dumps.extend(dump_entity(world, entity) for entity in world.entities())
    return "\n".join(dumps)


def list_world(world: World) -> str:
    """One line per entity: id, tag and display name."""
    return "\n".join(
        f"[{entity}] {world.tag(entity)} ({world.name(entity)})" for entity in world.entities()
    )
