"""Configuration management for cla."""

from .settings import ClaSettings, DisplaySettings, LoggingSettings, get_settings, reset_settings

__all__ = [
    "ClaSettings",
    "DisplaySettings",
    "LoggingSettings",
    "get_settings",
    "reset_settings",
]
