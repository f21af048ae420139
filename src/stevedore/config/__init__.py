"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- Cached settings access via get_settings()
"""

from .settings import (
    CodefreshSettings,
    LogFormat,
    LogLevel,
    Settings,
    get_settings,
)

__all__ = [
    # Main settings
    "Settings",
    "get_settings",
    # Enums
    "LogLevel",
    "LogFormat",
    # Component settings
    "CodefreshSettings",
]
