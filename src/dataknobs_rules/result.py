"""Validation result types returned by the validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FieldResult:
    """Outcome of checking a single key/value pair.

    Errors are ordered as the failing constraints were registered.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @classmethod
    def success(cls) -> FieldResult:
        """Create a passing field result."""
        return cls(valid=True, errors=[])


@dataclass
class ValidationResult:
    """Outcome of validating a set of fields.

    Only fields with at least one failing constraint appear in ``errors``.
    Nested fields are reported under their dotted key (``Address.City``).
    """

    valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def add_field(self, key: str, result: FieldResult) -> ValidationResult:
        """Record a field result under ``key`` (fluent API).

        Passing results leave this result untouched.

        Args:
            key: Field name or dotted path
            result: Result of checking that field

        Returns:
            Self for chaining
        """
        if not result.valid:
            self.errors.setdefault(key, []).extend(result.errors)
            self.valid = False
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Fold another result into this one (fluent API).

        Args:
            other: Result whose errors are added to this one

        Returns:
            Self for chaining
        """
        for key, messages in other.errors.items():
            self.errors.setdefault(key, []).extend(messages)
        self.valid = self.valid and other.valid
        return self

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a result with no failing fields."""
        return cls(valid=True, errors={})
