"""Build rule registries from configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .constraints import Rule, length, matches, not_empty, one_of
from .exceptions import ConfigFileNotFoundError, ConfigurationError, RuleDefinitionError
from .registry import Rules

logger = logging.getLogger(__name__)

RuleBuilder = Callable[..., Rule]


def _not_empty_builder() -> Rule:
    return not_empty


class RulesFactory:
    """Factory for creating rule registries from configuration.

    Configuration Options:
        name (str): Registry name (default: "rules")
        fields (list): List of field definitions

    Field Definition Options:
        name (str): Field name or dotted path (``Address.City``)
        required (bool): Check ``not_empty`` before the field's rules (default: False)
        rules (list): Rule definitions, checked in order

    Rule Definition Options:
        type (str): Rule type (not_empty, pattern, length, one_of, or a custom type)
        message (str): Optional message replacing the rule's failure text
        Any other key is passed to the rule builder as a keyword argument.

    Example Configuration:
        name: signup
        fields:
          - name: Username
            required: true
            rules:
              - type: length
                min: 3
                max: 20
              - type: pattern
                pattern: "[a-zA-Z0-9_]+"
                message: Only letters, digits and underscores
          - name: Address.Country
            rules:
              - type: one_of
                choices: [US, CA, MX]
    """

    def __init__(self) -> None:
        self._builders: dict[str, RuleBuilder] = {
            "not_empty": _not_empty_builder,
            "pattern": matches,
            "length": length,
            "one_of": one_of,
        }

    def register_rule_type(self, type_name: str, builder: RuleBuilder) -> None:
        """Make a custom rule type available to configurations.

        Args:
            type_name: Name used in the ``type`` key of rule definitions
            builder: Callable taking the definition's parameters as keyword
                arguments and returning a rule
        """
        if not callable(builder):
            raise RuleDefinitionError(
                f"Builder for rule type '{type_name}' must be callable",
                context={"type": type_name},
            )
        self._builders[type_name.lower()] = builder
        logger.debug(f"Registered rule type: {type_name}")

    def rule_types(self) -> list[str]:
        """List the rule types this factory can build."""
        return sorted(self._builders)

    def create(self, **config: Any) -> Rules:
        """Create a Rules registry from configuration.

        Args:
            **config: Registry configuration

        Returns:
            Rules instance

        Raises:
            ConfigurationError: If a field or rule definition is malformed
        """
        name = config.get("name", "rules")
        logger.info(f"Creating rules: {name}")

        rules = Rules(name)
        for field_config in config.get("fields") or []:
            self._add_field(rules, field_config)
        return rules

    def _add_field(self, rules: Rules, field_config: Mapping[str, Any]) -> None:
        """Register the rules of one field definition."""
        if not isinstance(field_config, Mapping):
            raise ConfigurationError(
                "Field definition must be a mapping",
                context={"registry": rules.name, "definition": field_config},
            )

        field_name = field_config.get("name")
        if not field_name:
            raise ConfigurationError(
                "Field definition missing 'name'",
                context={"registry": rules.name, "definition": dict(field_config)},
            )

        if field_config.get("required", False):
            rules.add(field_name, not_empty)

        for rule_config in field_config.get("rules") or []:
            rule, message = self._build_rule(field_name, rule_config)
            rules.add(field_name, rule, message)

    def _build_rule(self, field_name: str, rule_config: Mapping[str, Any]) -> tuple[Rule, str | None]:
        """Build one rule and its override message from a definition."""
        if not isinstance(rule_config, Mapping):
            raise ConfigurationError(
                f"Rule definition for '{field_name}' must be a mapping",
                context={"field": field_name, "definition": rule_config},
            )

        params = dict(rule_config)
        rule_type = str(params.pop("type", "")).lower()
        message = params.pop("message", None)

        builder = self._builders.get(rule_type)
        if builder is None:
            raise ConfigurationError(
                f"Unknown rule type '{rule_type}' for field '{field_name}'",
                context={"field": field_name, "type": rule_type, "available": self.rule_types()},
            )

        try:
            rule = builder(**params)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid parameters for rule type '{rule_type}' on field '{field_name}': {e}",
                context={"field": field_name, "type": rule_type, "params": params},
            ) from e
        except RuleDefinitionError as e:
            raise ConfigurationError(
                f"Invalid rule '{rule_type}' on field '{field_name}': {e}",
                context={"field": field_name, "type": rule_type, **e.context},
            ) from e

        return rule, message


def load_rules(path: str | Path, factory: RulesFactory | None = None) -> Rules:
    """Load a Rules registry from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
        factory: Factory to build with (default: the module ``rules_factory``)

    Returns:
        Rules instance

    Raises:
        ConfigFileNotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported or the content is malformed
    """
    path = Path(path).resolve()
    if not path.exists():
        raise ConfigFileNotFoundError(f"Rules file not found: {path}")

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}",
                context={"path": str(path)},
            )

    data = data or {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            "Rules file must contain a mapping",
            context={"path": str(path)},
        )

    data = dict(data)
    data.setdefault("name", path.stem)
    return (factory or rules_factory).create(**data)


# Singleton instance for configuration-driven construction
rules_factory = RulesFactory()
