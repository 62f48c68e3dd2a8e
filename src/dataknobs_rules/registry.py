"""Registry of field rules.

The registry maps field names (or dotted paths such as ``Address.City``) to
the ordered constraints checked against that field. It only ever grows:
registering more rules appends to a field's sequence and never touches other
fields.

Example:
    ```python
    from dataknobs_rules import Rules, length, matches

    rules = Rules("signup")
    rules.add_required("Email", matches(r"[^@]+@[^@]+"), "Invalid email")
    rules.add("Nickname", length(max=20))
    ```

The registry is a plain mutable object. Populate it before sharing it between
threads; concurrent validation against a registry nobody is writing to is safe.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from .constraints import Constraint, Rule, not_empty
from .exceptions import RuleDefinitionError

logger = logging.getLogger(__name__)


class Rules:
    """Ordered constraints keyed by field name.

    Args:
        name: Name for this registry (used in logs and error context)
    """

    def __init__(self, name: str = "rules"):
        self._name = name
        self._constraints: Dict[str, List[Constraint]] = {}

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def add(self, field_name: str, rule: Rule, message: str | None = None) -> Rules:
        """Append a rule for a field (fluent API).

        Args:
            field_name: Exact field name or dotted path
            rule: Callable returning None (or True) on pass, a failure message (or False) on failure
            message: Optional message replacing the rule's failure text

        Returns:
            Self for chaining

        Raises:
            RuleDefinitionError: If ``rule`` is not callable
        """
        if not callable(rule):
            raise RuleDefinitionError(
                f"Rule for '{field_name}' must be callable",
                context={"field": field_name, "registry": self._name},
            )

        constraint = Constraint(rule=rule, message=message or None)
        self._constraints.setdefault(field_name, []).append(constraint)
        logger.debug(
            f"Registered {getattr(rule, '__name__', 'rule')} for "
            f"'{field_name}' in {self._name}"
        )
        return self

    def add_required(self, field_name: str, rule: Rule, message: str | None = None) -> Rules:
        """Register ``not_empty`` followed by ``rule`` for a field.

        Args:
            field_name: Exact field name or dotted path
            rule: Rule checked after the non-empty check
            message: Optional message replacing ``rule``'s failure text

        Returns:
            Self for chaining
        """
        self.add(field_name, not_empty)
        return self.add(field_name, rule, message)

    def get(self, field_name: str) -> tuple[Constraint, ...]:
        """Get the constraints for a field in registration order.

        Unknown fields have no constraints.
        """
        return tuple(self._constraints.get(field_name, ()))

    def has(self, field_name: str) -> bool:
        """Check whether any constraint is registered for a field."""
        return field_name in self._constraints

    def list_fields(self) -> list[str]:
        """List field names in the order they were first registered."""
        return list(self._constraints)

    def count(self) -> int:
        """Get the number of fields with registered constraints."""
        return len(self._constraints)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._constraints

    def __len__(self) -> int:
        return len(self._constraints)

    def __repr__(self) -> str:
        return f"Rules(name={self._name!r}, fields={self.list_fields()!r})"
