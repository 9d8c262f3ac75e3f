"""Unit tests for cla.config.settings."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from cla.config.settings import (
    ClaSettings,
    DisplaySettings,
    LoggingSettings,
    get_settings,
    reset_settings,
)


def _write_config(config_dir: Path, text: str) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(text, encoding="utf-8")


@pytest.fixture
def make_settings(tmp_path):
    """Build settings rooted in a temporary directory."""

    def _make(**kwargs):
        kwargs.setdefault("config_dir", tmp_path / "config")
        kwargs.setdefault("cache_dir", tmp_path / "cache")
        return ClaSettings(**kwargs)

    return _make


class TestDefaults:
    """Test default values of the settings models."""

    def test_display_defaults(self):
        """Test layout constants are the defaults."""
        display = DisplaySettings()
        assert display.cal_padding == 4
        assert display.max_columns == 4
        assert display.columns is None
        assert display.highlight_today is True

    def test_logging_defaults(self):
        """Test console logging is on and file logging off."""
        settings = LoggingSettings()
        assert settings.console_enabled is True
        assert settings.console_level == "WARNING"
        assert settings.file_enabled is False

    def test_display_validation(self):
        """Test invalid layout values are rejected."""
        with pytest.raises(ValidationError):
            DisplaySettings(max_columns=0)
        with pytest.raises(ValidationError):
            DisplaySettings(cal_padding=-1)

    def test_paths(self, make_settings, tmp_path):
        """Test config file and log directory locations."""
        settings = make_settings()
        assert settings.config_file == tmp_path / "config" / "config.yaml"
        assert settings.log_dir == tmp_path / "cache" / "logs"

    def test_custom_log_directory(self, make_settings, tmp_path):
        """Test a configured log directory wins over the cache directory."""
        settings = make_settings(logging=LoggingSettings(file_directory=str(tmp_path / "logs")))
        assert settings.log_dir == tmp_path / "logs"


class TestYamlConfig:
    """Test loading config.yaml."""

    def test_missing_file_uses_defaults(self, make_settings):
        """Test no config file leaves defaults in place."""
        assert make_settings().display == DisplaySettings()

    def test_sections_are_loaded(self, make_settings, tmp_path):
        """Test display and logging sections override defaults."""
        _write_config(
            tmp_path / "config",
            "display:\n  cal_padding: 2\n  highlight_today: false\n"
            "logging:\n  console_level: INFO\n",
        )
        settings = make_settings()
        assert settings.display.cal_padding == 2
        assert settings.display.highlight_today is False
        assert settings.display.max_columns == 4
        assert settings.logging.console_level == "INFO"

    def test_unknown_key_warns(self, make_settings, tmp_path, caplog):
        """Test unknown keys are reported and ignored."""
        _write_config(tmp_path / "config", "display:\n  colour: blue\n  max_columns: 3\n")
        with caplog.at_level(logging.WARNING, logger="cla"):
            settings = make_settings()

        assert settings.display.max_columns == 3
        assert "Unknown display setting 'colour'" in caplog.text

    def test_non_mapping_section_warns(self, make_settings, tmp_path, caplog):
        """Test a scalar section is ignored with a warning."""
        _write_config(tmp_path / "config", "display: wide\n")
        with caplog.at_level(logging.WARNING, logger="cla"):
            settings = make_settings()

        assert settings.display == DisplaySettings()
        assert "non-mapping 'display'" in caplog.text

    def test_invalid_yaml_falls_back_to_defaults(self, make_settings, tmp_path, caplog):
        """Test unparsable YAML is reported and defaults kept."""
        _write_config(tmp_path / "config", "display: [unclosed\n")
        with caplog.at_level(logging.WARNING, logger="cla"):
            settings = make_settings()

        assert settings.display == DisplaySettings()
        assert "Could not load YAML config" in caplog.text

    def test_invalid_value_falls_back_to_defaults(self, make_settings, tmp_path, caplog):
        """Test out-of-range values are reported and defaults kept."""
        _write_config(tmp_path / "config", "display:\n  max_columns: 0\n")
        with caplog.at_level(logging.WARNING, logger="cla"):
            settings = make_settings()

        assert settings.display.max_columns == 4
        assert "Could not load YAML config" in caplog.text

    def test_explicit_section_wins(self, make_settings, tmp_path):
        """Test sections passed to the constructor are not overridden."""
        _write_config(tmp_path / "config", "display:\n  cal_padding: 2\n")
        settings = make_settings(display=DisplaySettings(cal_padding=6))
        assert settings.display.cal_padding == 6


class TestEnvironment:
    """Test CLA_ environment variables."""

    def test_nested_variable(self, make_settings, monkeypatch):
        """Test nested settings are read with a double underscore delimiter."""
        monkeypatch.setenv("CLA_DISPLAY__MAX_COLUMNS", "2")
        assert make_settings().display.max_columns == 2

    def test_environment_wins_over_yaml(self, make_settings, monkeypatch, tmp_path):
        """Test environment variables take priority over config.yaml."""
        _write_config(tmp_path / "config", "display:\n  max_columns: 3\n  cal_padding: 1\n")
        monkeypatch.setenv("CLA_DISPLAY__MAX_COLUMNS", "2")

        settings = make_settings()
        assert settings.display.max_columns == 2
        assert settings.display.cal_padding == 1


class TestGlobalSettings:
    """Test the lazily created global settings."""

    def test_get_settings_is_cached(self, monkeypatch, tmp_path):
        """Test the same instance is returned until reset."""
        monkeypatch.setenv("CLA_CONFIG_DIR", str(tmp_path / "config"))
        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first

    def test_config_dir_from_environment(self, monkeypatch, tmp_path):
        """Test the config directory can be set from the environment."""
        monkeypatch.setenv("CLA_CONFIG_DIR", str(tmp_path / "elsewhere"))
        assert get_settings().config_dir == tmp_path / "elsewhere"
