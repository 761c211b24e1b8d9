"""Configuration management for identitrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- IdenticonConfig: Grid size, colours, opacity and padding
- GeometryConfig: Outline geometry switches
- ProcessingConfig: Layer processing settings
- LoggingConfig: Logging settings
- IdentitraceSettings: Main application settings
"""

from identitrace.config.settings import (
    BackgroundMode,
    GeometryConfig,
    IdenticonConfig,
    IdentitraceSettings,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "BackgroundMode",
    "GeometryConfig",
    "IdenticonConfig",
    "IdentitraceSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
