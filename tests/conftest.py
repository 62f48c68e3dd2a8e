"""Pytest configuration for dataknobs_rules tests."""

import pytest

from dataknobs_rules import Rules, Validator, predicate


@pytest.fixture
def rules():
    """Empty registry."""
    return Rules("test")


@pytest.fixture
def customer_rules():
    """Registry with rules for a customer record and its nested address."""
    rules = Rules("customers")
    rules.add_required("Name", predicate(lambda v: len(v) <= 10, "Name too long"))
    rules.add_required("Address.City", predicate(str.istitle, "City must be capitalized"))
    rules.add("Address.Zip", predicate(str.isdigit, "Value is not numeric"), "must be numeric")
    return rules


@pytest.fixture
def validator(customer_rules):
    """Validator over the customer rules."""
    return Validator(customer_rules)
