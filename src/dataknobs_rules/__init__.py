"""DataKnobs Rules package.

Declarative field validation: register rules by field name, then validate
key/value pairs, flat mappings, or nested structures against them.

Example:
    ```python
    from dataknobs_rules import Rules, Validator, predicate

    rules = Rules()
    rules.add_required("Zip", predicate(str.isdigit), "must be numeric")

    result = Validator(rules).validate({"Zip": ""})
    result.valid   # False
    result.errors  # {"Zip": ["This value is required", "must be numeric"]}
    ```
"""

from .constraints import (
    DEFAULT_MESSAGE,
    REQUIRED_MESSAGE,
    Constraint,
    Rule,
    length,
    matches,
    not_empty,
    one_of,
    predicate,
)
from .exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    RuleDefinitionError,
    RulesError,
)
from .factory import RulesFactory, load_rules, rules_factory
from .registry import Rules
from .result import FieldResult, ValidationResult
from .validator import Validatable, Validator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Registry
    "Rules",
    # Constraints
    "Rule",
    "Constraint",
    "REQUIRED_MESSAGE",
    "DEFAULT_MESSAGE",
    "not_empty",
    "predicate",
    "matches",
    "length",
    "one_of",
    # Validation
    "Validator",
    "Validatable",
    "FieldResult",
    "ValidationResult",
    # Configuration
    "RulesFactory",
    "rules_factory",
    "load_rules",
    # Exceptions
    "RulesError",
    "RuleDefinitionError",
    "ConfigurationError",
    "ConfigFileNotFoundError",
]
