"""The rule engine.

Once per turn, every rule that existed when the turn's evaluation began is
checked in authoring order. A rule whose predicate holds runs its actions;
a once-only rule is then marked fired on its live component and is never
considered again.

Usage:
    world.create("rule-story").once(lambda w: w.clock == 2).action(Print("..."))
    validate_rules(world)
    messages = run_rules(world)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storyecs.components import Rule
from storyecs.core.system import system
from storyecs.world.errors import UnknownEntityError

if TYPE_CHECKING:
    from storyecs.world.world import World

logger = logging.getLogger(__name__)


def fire_rule(world: World, rule: Rule) -> list[str]:
    """Execute a rule's actions in order.

    There is no rollback: if an action raises, earlier actions stay applied.

    Returns:
        Text produced by the actions.
    """
    messages: list[str] = []
    for action in rule.actions:
        text = action.apply(world)
        if text:
            messages.append(text)
    return messages


def run_rules(world: World) -> list[str]:
    """Evaluate every rule once against the current world.

    Rules created while this runs are not evaluated until the next call.

    Returns:
        Text produced by the rules that fired, in firing order.
    """
    messages: list[str] = []
    for rule_id in world.rule_ids():
        rule = world.as_rule(rule_id)
        if not rule.is_eligible():
            continue
        if not rule.predicate(world):
            continue

        logger.info("Rule %s fired at clock %d", world.tag(rule_id), world.clock)
        messages.extend(fire_rule(world, rule))
        if rule.once_only:
            rule.fired = True
    return messages


@system(name="rules")
def rule_system(world: World) -> list[str]:
    return run_rules(world)


def validate_rules(world: World) -> None:
    """Check that every rule action refers to entities that exist.

    Raises:
        UnknownEntityError: Naming the first rule with a dangling reference.
    """
    for rule_id in world.rule_ids():
        for action in world.as_rule(rule_id).actions:
            for ref in action.references():
                if not world.exists(ref):
                    raise UnknownEntityError(
                        f"Rule {world.tag(rule_id)} refers to unknown entity {ref} in {action!r}"
                    )
