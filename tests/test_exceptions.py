"""Tests for the exception hierarchy."""

import pytest

from dataknobs_rules import (
    ConfigFileNotFoundError,
    ConfigurationError,
    RuleDefinitionError,
    RulesError,
)


class TestRulesError:
    """Test the base RulesError class."""

    def test_basic_exception(self):
        """Test basic exception without context."""
        error = RulesError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        """Test exception with context dictionary."""
        error = RulesError("Bad rule", context={"field": "Zip"})
        assert error.context == {"field": "Zip"}
        assert error.details is error.context

    def test_details_takes_precedence(self):
        """Test that details parameter takes precedence over context."""
        error = RulesError("Error", context={"key": "context"}, details={"key": "details"})
        assert error.context == {"key": "details"}

    @pytest.mark.parametrize("error_cls", [
        RuleDefinitionError,
        ConfigurationError,
        ConfigFileNotFoundError,
    ])
    def test_catchable_as_base(self, error_cls):
        """Test that specific exceptions can be caught as base."""
        with pytest.raises(RulesError):
            raise error_cls("failure")

    def test_file_not_found_is_configuration_error(self):
        """Test that a missing file is a configuration problem."""
        assert issubclass(ConfigFileNotFoundError, ConfigurationError)
