"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, cast

import yaml
from pydantic import BaseModel, Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_PREFIX = "CLA_"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    # Console Logging (stderr, so it never mixes with calendar output)
    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to cache_dir/logs)"
    )
    file_prefix: str = Field(default="cla", description="Log file prefix")
    max_log_files: int = Field(default=5, description="Maximum number of log files to keep")


class DisplaySettings(BaseModel):
    """Calendar layout settings."""

    cal_padding: int = Field(default=4, ge=0, description="Blank columns between months")
    max_columns: int = Field(default=4, ge=1, description="Maximum months per row")
    columns: Optional[int] = Field(
        default=None, ge=1, description="Force months per row instead of using terminal width"
    )
    highlight_today: bool = Field(default=True, description="Invert the colors of today")


class ClaSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    # Private attributes
    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "cla")
    cache_dir: Path = Field(default_factory=lambda: Path.home() / ".cache" / "cla")

    # Logging Configuration
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    # Display Settings
    display: DisplaySettings = Field(
        default_factory=DisplaySettings, description="Calendar layout settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    def __init__(self, **kwargs: Any) -> None:
        # Track which environment variables are set before calling parent
        env_vars_set = {
            key[len(ENV_PREFIX) :].lower()
            for key in os.environ
            if key.upper().startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        # Track which arguments were explicitly provided
        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML config file in the config directory."""
        config_file = self.config_file
        if config_file.exists():
            return config_file
        return None

    def _load_section(self, config_data: dict, section: str) -> None:
        """Copy known keys of a YAML section onto the matching nested settings."""
        if section not in config_data or section in self._explicit_args:
            return

        section_data = config_data[section]
        if not isinstance(section_data, dict):
            logger.warning(f"Ignoring non-mapping '{section}' section in config file")
            return

        target = getattr(self, section)
        merged = target.model_dump()
        for key, value in section_data.items():
            if f"{section}__{key}" in self._env_vars_set:
                continue
            if key in merged:
                merged[key] = value
            else:
                logger.warning(f"Unknown {section} setting '{key}' in config file")
        setattr(self, section, type(target).model_validate(merged))

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return

            self._load_section(config_data, "display")
            self._load_section(config_data, "logging")

        except Exception as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")

    @property
    def config_file(self) -> Path:
        """Path to YAML configuration file."""
        return self.config_dir / "config.yaml"

    @property
    def log_dir(self) -> Path:
        """Directory for log files."""
        if self.logging.file_directory:
            return Path(self.logging.file_directory).expanduser()
        return self.cache_dir / "logs"


# Global settings management
_settings_instance: Optional[ClaSettings] = None


def get_settings() -> ClaSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = ClaSettings()
    return cast(ClaSettings, globals()["_settings_instance"])


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
