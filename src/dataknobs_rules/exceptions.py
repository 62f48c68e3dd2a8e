"""Exception hierarchy for dataknobs-rules.

Validation outcomes are never raised: a value that fails its rules is reported
through the returned result objects. The exceptions here cover programming and
configuration mistakes only.

Example:
    ```python
    from dataknobs_rules.exceptions import ConfigurationError

    try:
        rules = load_rules("rules.toml")
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class RulesError(Exception):
    """Base exception for all dataknobs-rules errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field names, rule types, etc.)
        details: Alternative to context (both are supported for compatibility)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context


class RuleDefinitionError(RulesError):
    """Raised when a rule cannot be built or registered.

    Common scenarios include:
    - Registering something that is not callable as a rule
    - Invalid builder parameters (negative lengths, empty choice lists)

    Example:
        ```python
        raise RuleDefinitionError(
            "Rule must be callable",
            context={"field": "Email", "rule": "not-a-function"}
        )
        ```
    """

    pass


class ConfigurationError(RulesError):
    """Raised when a rules configuration is invalid.

    Common scenarios include:
    - Field definition without a name
    - Unknown rule type
    - Unsupported configuration file format
    """

    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a rules configuration file does not exist."""

    pass
