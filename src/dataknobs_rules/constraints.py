"""Rules and constraints applied to string field values.

A rule is any callable taking the field value and returning ``None`` when the
value passes, or the failure message when it does not. Plain boolean tests
such as ``str.isdigit`` are rules too: ``True`` passes and ``False`` fails with
``DEFAULT_MESSAGE``. A ``Constraint`` pairs a rule with an optional message
that replaces the rule's own text.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from re import Pattern as RegexPattern

from .exceptions import RuleDefinitionError

Rule = Callable[[str], str | bool | None]

REQUIRED_MESSAGE = "This value is required"
DEFAULT_MESSAGE = "Value is invalid"


@dataclass(frozen=True)
class Constraint:
    """A rule plus an optional override message."""

    rule: Rule
    message: str | None = None

    def check(self, value: str) -> str | None:
        """Run the rule against a value.

        Args:
            value: Field value to check

        Returns:
            None if the value passes, otherwise the override message when one
            was given, else the rule's own failure message

        Raises:
            RuleDefinitionError: If the rule returns something other than a
                string, a bool or None
        """
        outcome = self.rule(value)
        if outcome is None or outcome is True:
            return None
        if outcome is False:
            return self.message or DEFAULT_MESSAGE
        if not isinstance(outcome, str):
            raise RuleDefinitionError(
                f"Rule returned unexpected type: {type(outcome).__name__}",
                context={"rule": getattr(self.rule, "__name__", repr(self.rule))},
            )
        return self.message or outcome


def not_empty(value: str) -> str | None:
    """Fail when the value is exactly the empty string."""
    if value == "":
        return REQUIRED_MESSAGE
    return None


def predicate(test: Callable[[str], bool], message: str = DEFAULT_MESSAGE) -> Rule:
    """Adapt a boolean test into a rule.

    Args:
        test: Callable returning True when the value is acceptable
        message: Failure message reported when ``test`` returns False

    Returns:
        Rule wrapping ``test``
    """
    if not callable(test):
        raise RuleDefinitionError(
            "Predicate test must be callable",
            context={"test": repr(test)}
        )

    def rule(value: str) -> str | None:
        return None if test(value) else message

    rule.__name__ = getattr(test, "__name__", "predicate")
    return rule


def matches(pattern: str | RegexPattern) -> Rule:
    """Build a rule requiring the whole value to match a regex.

    Args:
        pattern: Regex pattern (string or compiled pattern)

    Returns:
        Rule failing with a message naming the pattern
    """
    if not isinstance(pattern, (str, RegexPattern)):
        raise RuleDefinitionError(
            "Pattern must be a string or compiled regex",
            context={"pattern": pattern}
        )
    try:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error as e:
        raise RuleDefinitionError(
            f"Invalid pattern: {e}",
            context={"pattern": pattern}
        ) from e
    pattern_str = regex.pattern

    def rule(value: str) -> str | None:
        if regex.fullmatch(value) is None:
            return f"Value '{value}' does not match pattern '{pattern_str}'"
        return None

    rule.__name__ = "matches"
    return rule


def length(min: int | None = None, max: int | None = None) -> Rule:
    """Build a rule bounding the number of characters (inclusive).

    Args:
        min: Minimum length
        max: Maximum length

    Returns:
        Rule reporting each violated bound
    """
    if min is not None and min < 0:
        raise RuleDefinitionError(f"min length cannot be negative: {min}")
    if max is not None and max < 0:
        raise RuleDefinitionError(f"max length cannot be negative: {max}")
    if min is not None and max is not None and min > max:
        raise RuleDefinitionError(
            f"min length ({min}) cannot be greater than max ({max})",
            context={"min": min, "max": max}
        )

    def rule(value: str) -> str | None:
        size = len(value)
        if min is not None and size < min:
            return f"Length {size} is less than minimum {min}"
        if max is not None and size > max:
            return f"Length {size} is greater than maximum {max}"
        return None

    rule.__name__ = "length"
    return rule


def one_of(choices: Iterable[str], case_sensitive: bool = True) -> Rule:
    """Build a rule requiring the value to be one of a fixed set of strings.

    Args:
        choices: Allowed values
        case_sensitive: If False, comparisons ignore case

    Returns:
        Rule failing with a message listing the allowed values
    """
    if isinstance(choices, str):
        raise RuleDefinitionError(
            "one_of choices must be a list of strings, not a single string",
            context={"choices": choices}
        )
    values = list(choices)
    if not values:
        raise RuleDefinitionError("one_of requires at least one allowed value")
    allowed_str = ", ".join(repr(v) for v in values)
    if case_sensitive:
        allowed = set(values)
    else:
        allowed = {v.lower() for v in values}

    def rule(value: str) -> str | None:
        candidate = value if case_sensitive else value.lower()
        if candidate not in allowed:
            return f"Value '{value}' is not in allowed values: {allowed_str}"
        return None

    rule.__name__ = "one_of"
    return rule
