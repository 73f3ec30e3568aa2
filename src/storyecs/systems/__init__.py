"""Built-in per-turn systems."""

from storyecs.systems.rules import fire_rule, rule_system, run_rules, validate_rules

__all__ = [
    "rule_system",
    "run_rules",
    "fire_rule",
    "validate_rules",
]
