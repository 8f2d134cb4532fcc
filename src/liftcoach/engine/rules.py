"""Ordered rule cascades.

A cascade is a tuple of rules evaluated in sequence; the first rule whose
predicate holds decides the result. Order is part of the behaviour.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger


@dataclass(frozen=True)
class Rule:
    """A named (predicate, result) pair."""

    name: str
    predicate: Callable[[Any], bool]
    build: Callable[[Any], Any]

    def matches(self, context: Any) -> bool:
        """Whether the rule applies to the context."""
        return bool(self.predicate(context))


def first_match(rules: Sequence[Rule], context: Any) -> Rule | None:
    """Return the first rule whose predicate holds, or None."""
    for rule in rules:
        if rule.matches(context):
            return rule
    return None


def evaluate(rules: Sequence[Rule], context: Any, default: Any = None) -> Any:
    """Build the result of the first matching rule.

    Args:
        rules: Rules in priority order
        context: Value every predicate and builder receives
        default: Returned when no rule matches

    Returns:
        The matching rule's result, or ``default``
    """
    rule = first_match(rules, context)
    if rule is None:
        return default
    logger.debug(f"Rule matched: {rule.name}")
    return rule.build(context)
