"""Validation of key/value pairs and nested structures against a registry.

Invalid data is a normal outcome: every method returns a result object and
none of them raise because a value failed its rules.

Nested values are enumerated through the ``Validatable`` protocol rather than
by inspecting attributes, so a type decides exactly which of its fields are
validated:

    ```python
    @dataclass
    class Address:
        city: str
        zip_code: str

        def validation_fields(self):
            return {"City": self.city, "Zip": self.zip_code}

    @dataclass
    class Customer:
        name: str
        address: Address

        def validation_fields(self):
            return {"Name": self.name, "Address": self.address}

    validator = Validator(rules)
    result = validator.validate_structured(customer)
    result.errors  # {"Address.City": ["This value is required"]}
    ```

Plain mappings are accepted too; their non-string leaves are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .registry import Rules
from .result import FieldResult, ValidationResult

logger = logging.getLogger(__name__)


@runtime_checkable
class Validatable(Protocol):
    """A value whose fields can be validated by name."""

    def validation_fields(self) -> Mapping[str, str | Validatable | Mapping[str, Any]]:
        """Return the fields to validate.

        Each value is either a string leaf or a nested structure whose fields
        are reported under ``<name>.<nested name>``.
        """
        ...


class Validator:
    """Checks values against the constraints of a ``Rules`` registry.

    The validator only reads the registry, so one validator may be shared by
    any number of callers once registration is finished.

    Args:
        rules: Registry to validate against
    """

    def __init__(self, rules: Rules):
        self.rules = rules

    def validate_one(self, field_name: str, value: str) -> FieldResult:
        """Validate a single key/value pair.

        Every constraint registered for ``field_name`` runs, in registration
        order, even after one has failed. Fields without constraints are
        always valid.

        Args:
            field_name: Field name or dotted path
            value: Value to check

        Returns:
            FieldResult with the failure messages in registration order
        """
        result = FieldResult.success()
        for constraint in self.rules.get(field_name):
            failure = constraint.check(value)
            if failure is not None:
                result.valid = False
                result.errors.append(failure)

        if not result.valid:
            logger.debug(f"Field '{field_name}' failed {len(result.errors)} constraint(s)")
        return result

    def validate(self, params: Mapping[str, str]) -> ValidationResult:
        """Validate a flat mapping of field names to values.

        Only keys present in ``params`` are checked. A registered field that
        is missing from ``params`` is not reported, even when it was
        registered with ``add_required``.

        Args:
            params: Field values keyed by field name

        Returns:
            ValidationResult holding only the failing fields
        """
        result = ValidationResult.success()
        for key, value in params.items():
            result.add_field(key, self.validate_one(key, value))
        return result

    def validate_structured(self, value: Validatable | Mapping[str, Any], key_prefix: str = "") -> ValidationResult:
        """Validate a nested structure, flattening errors to dotted keys.

        String fields are checked under ``key_prefix + name``. Nested
        ``Validatable`` values and mappings are walked with
        ``key_prefix + name + "."`` as the new prefix.

        Args:
            value: ``Validatable`` instance or mapping to walk
            key_prefix: Prefix prepended to every field name

        Returns:
            ValidationResult with one entry per failing leaf

        Raises:
            TypeError: If ``value`` is neither ``Validatable`` nor a mapping,
                or a ``Validatable`` enumerates a field that is neither a
                string nor a nested structure
            ValueError: If a structure contains itself
        """
        return self._walk(value, key_prefix, set())

    def _walk(self, value: Any, key_prefix: str, active: set[int]) -> ValidationResult:
        """Walk one level of a structure; ``active`` holds ids on the current path."""
        if id(value) in active:
            raise ValueError(f"Cycle detected at '{key_prefix.rstrip('.')}'")

        if isinstance(value, Validatable):
            fields = value.validation_fields()
            strict = True
        elif isinstance(value, Mapping):
            fields = value
            strict = False
        else:
            raise TypeError(
                f"Cannot validate {type(value).__name__}: expected a Validatable or a mapping"
            )

        active.add(id(value))
        result = ValidationResult.success()
        for name, field_value in fields.items():
            key = f"{key_prefix}{name}"
            if isinstance(field_value, str):
                result.add_field(key, self.validate_one(key, field_value))
            elif isinstance(field_value, (Validatable, Mapping)):
                result.merge(self._walk(field_value, key + ".", active))
            elif strict:
                raise TypeError(
                    f"Field '{key}' of {type(value).__name__} is {type(field_value).__name__}; "
                    "validation_fields() must return strings or nested structures"
                )
            else:
                logger.debug(f"Skipping non-string field '{key}' ({type(field_value).__name__})")

        active.discard(id(value))
        return result
