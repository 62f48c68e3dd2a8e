"""Tests for the Rules registry."""

import pytest

from dataknobs_rules import Rules, RuleDefinitionError, not_empty, predicate


class TestRules:
    """Test registration and lookup."""

    def test_empty_registry(self, rules):
        """Test a freshly created registry."""
        assert rules.name == "test"
        assert rules.count() == 0
        assert len(rules) == 0
        assert rules.list_fields() == []
        assert rules.get("anything") == ()
        assert not rules.has("anything")

    def test_add_creates_sequence(self, rules):
        """Test that the first registration creates the field's sequence."""
        rules.add("Email", not_empty, "Email is required")

        constraints = rules.get("Email")
        assert len(constraints) == 1
        assert constraints[0].rule is not_empty
        assert constraints[0].message == "Email is required"
        assert "Email" in rules

    def test_add_preserves_order(self, rules):
        """Test that constraints keep registration order."""
        first = predicate(str.isdigit)
        second = predicate(str.isupper)
        rules.add("Code", first).add("Code", second)

        assert [c.rule for c in rules.get("Code")] == [first, second]

    def test_duplicates_accumulate(self, rules):
        """Test that registering the same rule twice keeps both."""
        rules.add("Name", not_empty)
        rules.add("Name", not_empty)
        assert len(rules.get("Name")) == 2

    def test_empty_message_is_no_override(self, rules):
        """Test that an empty message is stored as no override."""
        rules.add("Name", not_empty, "")
        assert rules.get("Name")[0].message is None

    def test_other_fields_untouched(self, rules):
        """Test that registering never changes other fields."""
        rules.add("A", not_empty, "a message")
        before = rules.get("A")

        rules.add("B", not_empty)
        rules.add_required("C", predicate(str.isalpha))

        assert rules.get("A") == before
        assert rules.list_fields() == ["A", "B", "C"]

    def test_keys_are_case_sensitive(self, rules):
        """Test exact, case-sensitive field names."""
        rules.add("Address.City", not_empty)
        assert rules.has("Address.City")
        assert not rules.has("address.city")
        assert not rules.has("City")

    def test_add_required(self, rules):
        """Test that add_required registers not_empty first."""
        numeric = predicate(str.isdigit)
        rules.add_required("Zip", numeric, "must be numeric")

        constraints = rules.get("Zip")
        assert len(constraints) == 2
        assert constraints[0].rule is not_empty
        assert constraints[0].message is None
        assert constraints[1].rule is numeric
        assert constraints[1].message == "must be numeric"

    def test_get_returns_snapshot(self, rules):
        """Test that the returned tuple cannot be used to mutate the registry."""
        rules.add("Name", not_empty)
        snapshot = rules.get("Name")
        rules.add("Name", not_empty)
        assert len(snapshot) == 1
        assert len(rules.get("Name")) == 2

    def test_non_callable_rule(self, rules):
        """Test that registering a non-callable rule fails loudly."""
        with pytest.raises(RuleDefinitionError) as exc_info:
            rules.add("Name", "not_empty")
        assert exc_info.value.context == {"field": "Name", "registry": "test"}
        assert not rules.has("Name")

    def test_independent_registries(self):
        """Test that registries share no state."""
        first = Rules("first")
        second = Rules("second")
        first.add("Name", not_empty)
        assert not second.has("Name")

    def test_repr(self, rules):
        """Test the debugging representation."""
        rules.add("Name", not_empty)
        assert repr(rules) == "Rules(name='test', fields=['Name'])"
