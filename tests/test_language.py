"""Tests for message lookup."""

import pytest

from forge import language
from forge.language import lang


@pytest.fixture(autouse=True)
def _restore_locale():
    previous = language.get_locale()
    yield
    language.set_locale(previous)


class TestLang:
    """Test key lookup, placeholders and fallbacks."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("CLI.helpUsage", "Usage:"),
            ("CLI.helpDescription", "Description:"),
            ("CLI.helpArguments", "Arguments:"),
            ("CLI.helpOptions", "Options:"),
        ],
    )
    def test_help_headings(self, key, expected):
        assert lang(key) == expected

    def test_placeholders(self):
        assert lang("CLI.commandNotFound", "foo") == 'Command "foo" not found.'

    def test_unknown_key_returns_key(self):
        assert lang("CLI.noSuchLine") == "CLI.noSuchLine"
        assert lang("Nope.helpUsage") == "Nope.helpUsage"
        assert lang("nodot") == "nodot"

    def test_unknown_locale_falls_back_to_english(self):
        assert lang("CLI.helpUsage", locale="xx") == "Usage:"

    def test_invalid_locale_name_falls_back(self):
        language.set_locale("../etc")

        assert lang("CLI.helpUsage") == "Usage:"

    def test_missing_placeholder_argument_keeps_message(self):
        assert lang("CLI.commandNotFound") == 'Command "{0}" not found.'
