"""
Tests for message translation.
"""

import pytest

from fieldcheck import DEFAULT_MESSAGES, Translator, ValidationError, translate_default
from fieldcheck.translate import render


class TestTranslateDefault:
    """Test the default message table."""

    @pytest.mark.parametrize(
        "error, message",
        [
            (ValidationError("invalid"), "is invalid"),
            (ValidationError("presence"), "can't be blank"),
            (ValidationError("wrongLength", {"count": 3}), "is the wrong length (should be 3 characters)"),
            (ValidationError("tooShort", {"count": 2}), "is too short (minimum is 2 characters)"),
            (ValidationError("tooLong", {"count": 10}), "is too long (maximum is 10 characters)"),
            (ValidationError("notInteger"), "is not an integer"),
            (ValidationError("greaterThan", {"count": 2}), "must be greater than 2"),
            (ValidationError("greaterThanOrEqualTo", {"count": 0}), "must be greater than or equal to 0"),
            (ValidationError("equalTo", {"count": 4}), "equal to 4"),
            (ValidationError("lessThan", {"count": 1.5}), "must be less than 1.5"),
            (ValidationError("lessThanOrEqualTo", {"count": 10}), "must be less than or equal to 10"),
            (ValidationError("divisibleBy", {"count": 3}), "must be divisible by 3"),
        ],
    )
    def test_known_kinds(self, error, message):
        """Test every entry in the default table."""
        assert translate_default(error) == message

    def test_unknown_kind_falls_back(self):
        """Test that unknown kinds render as the generic message."""
        assert translate_default(ValidationError("inclusion", {"values": [1, 2]})) == "is invalid"
        assert translate_default(ValidationError("noSuchKind")) == "is invalid"

    def test_invalid_with_details(self):
        """Test that format errors render without their details."""
        assert translate_default(ValidationError("invalid", {"details": "digits"})) == "is invalid"

    def test_table_covers_numeric_kinds(self):
        """Test that every bound kind has a template."""
        for kind in ("greaterThan", "greaterThanOrEqualTo", "equalTo", "lessThan", "lessThanOrEqualTo", "divisibleBy"):
            assert "{{count}}" in DEFAULT_MESSAGES[kind]


class TestRender:
    """Test placeholder substitution."""

    def test_substitution(self):
        """Test replacing several placeholders."""
        assert render("{{a}} and {{b}}", {"a": 1, "b": "two"}) == "1 and two"

    def test_missing_and_none_options(self):
        """Test that missing or None options render as empty text."""
        assert render("[{{count}}]", None) == "[]"
        assert render("[{{count}}]", {}) == "[]"
        assert render("[{{count}}]", {"count": None}) == "[]"

    def test_sequences(self):
        """Test that lists render as comma-separated items."""
        assert render("one of {{values}}", {"values": [0, "a", 2]}) == "one of 0, a, 2"

    def test_text_without_placeholders(self):
        """Test that other braces are left alone."""
        assert render("{count} {{ count }}", {"count": 1}) == "{count} {{ count }}"


class TestTranslator:
    """Test custom translators."""

    def test_overrides_merge_with_defaults(self):
        """Test that overrides replace only the kinds they name."""
        translate = Translator({"presence": "is required", "inclusion": "must be one of {{values}}"})

        assert translate(ValidationError("presence")) == "is required"
        assert translate(ValidationError("inclusion", {"values": ["a", "b"]})) == "must be one of a, b"
        assert translate(ValidationError("tooLong", {"count": 2})) == "is too long (maximum is 2 characters)"

    def test_custom_fallback(self):
        """Test a custom fallback message."""
        translate = Translator(fallback="is not acceptable")
        assert translate(ValidationError("noSuchKind")) == "is not acceptable"

    def test_defaults_are_not_modified(self):
        """Test that overrides do not leak into the default table."""
        Translator({"presence": "is required"})
        assert DEFAULT_MESSAGES["presence"] == "can't be blank"
        assert translate_default(ValidationError("presence")) == "can't be blank"
