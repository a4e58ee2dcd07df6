"""Tests for message templates and formatting."""

from infivalidator.validators import DEFAULT_TEMPLATES, RuleCategory, RuleRegistry, register_rules
from infivalidator.validators.messages import format_message


class TestFormatMessage:
    """Placeholder substitution."""

    def test_field_placeholder(self):
        assert format_message("Bad request. Empty '%1$' provided.", "title") == "Bad request. Empty 'title' provided."

    def test_location_placeholder_needs_location(self):
        assert format_message("'%1$' missing in %2$", "id", "body") == "'id' missing in body"
        assert format_message("'%1$' missing in %2$", "id") == "'id' missing in %2$"

    def test_location_ignored_without_placeholder(self):
        assert format_message("Bad '%1$'", "id", "body") == "Bad 'id'"

    def test_each_placeholder_replaced_once(self):
        assert format_message("%1$ %1$", "id") == "id %1$"


class TestDefaultTemplates:
    """The shipped template set."""

    def test_every_general_rule_has_a_template(self):
        registry = RuleRegistry().load_from([register_rules])

        assert set(registry.names(RuleCategory.GENERAL)) <= set(DEFAULT_TEMPLATES)
        assert "isEmpty" in DEFAULT_TEMPLATES

    def test_compatibility_templates(self):
        assert DEFAULT_TEMPLATES["isEmpty"] == "Bad request. Empty '%1$' provided."
        assert DEFAULT_TEMPLATES["isMongoId"] == "Bad request. Provided '%1$' is not a Mongo ID."
        assert DEFAULT_TEMPLATES["isFirebaseId"] == "Bad request. Provided '%1$' is not a Firebase ID."
        assert DEFAULT_TEMPLATES["isUUIDv4"] == "Bad request. Provided '%1$' is not a UUID Version 4."
