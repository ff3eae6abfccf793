"""
Tests for configuration, helpers and the host entry point.
"""

import pytest
from unittest.mock import patch

import main
from config.settings import Settings
from entity_registry import ErrorKind
from entity_registry.validation import identifier_problem, is_valid_identifier
from plugins import LoadReport, PluginResult
from utils.helpers import format_load_report, format_registry_summary


class TestSettings:
    """Test settings validation."""

    def test_defaults_are_valid(self):
        Settings.validate()

    def test_plugin_modules_split(self):
        with patch.object(Settings, "PLUGIN_MODULES", " a.b , c.d ,,"):
            assert Settings.plugin_modules() == ["a.b", "c.d"]

    def test_bad_fallback_identifier(self):
        with patch.object(Settings, "FALLBACK_ENTITY_IDENTIFIER", "Unknown"):
            with pytest.raises(ValueError, match="FALLBACK_ENTITY_IDENTIFIER"):
                Settings.validate()

    def test_missing_plugin_modules(self):
        with patch.object(Settings, "PLUGIN_MODULES", ""):
            with pytest.raises(ValueError, match="PLUGIN_MODULES"):
                Settings.validate()


class TestIdentifierRules:
    """Test identifier validation rules."""

    @pytest.mark.parametrize("identifier, expected", [
        ("copper", None),
        ("", "non-empty"),
        (None, "non-empty"),
        ("red copper", "spaces"),
        ("Copper", "lowercase"),
    ])
    def test_identifier_problem(self, identifier, expected):
        problem = identifier_problem(identifier)
        if expected is None:
            assert problem is None
            assert is_valid_identifier(identifier)
        else:
            assert expected in problem


class TestHelpers:
    """Test report formatting."""

    def test_format_load_report(self):
        report = LoadReport([
            PluginResult("alpha", ok=True),
            PluginResult("beta", ok=False, error_kind=ErrorKind.DUPLICATE, message="taken"),
            PluginResult("gamma", ok=False, message="KeyError: x"),
        ])

        text = format_load_report(report)

        assert "loaded: 1, failed: 2" in text
        assert "[duplicate] beta: taken" in text
        assert "[error] gamma" in text

    def test_format_registry_summary(self):
        assert format_registry_summary({"entities": 2, "tools": 0}) == "entities=2, tools=0"


class TestMain:
    """Test the host entry point."""

    def test_run_load_phase(self):
        report = main.run_load_phase(["plugins.builtin.defaults", "plugins.builtin.metals"])

        assert report.loaded == ["defaults", "metals"]

    def test_main_exit_codes(self):
        """Test the exit code reflects plugin failures."""
        with patch.object(main, "setup_logging"):
            with patch("sys.argv", ["main.py", "plugins.builtin.metals"]):
                assert main.main() == 1
            with patch("sys.argv", ["main.py", "plugins.builtin.defaults"]):
                assert main.main() == 0
