"""Configuration management for polylab.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Polygon and vertex styling
- CanvasConfig: Canvas size and scene scaling
- ArtConfig: Art composition palette and ranges
- LogLevel: Accepted log level names
- LoggingConfig: Logging settings
- PolylabSettings: Main application settings
"""

from polylab.config.settings import (
    ArtConfig,
    CanvasConfig,
    LoggingConfig,
    LogLevel,
    PolylabSettings,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "ArtConfig",
    "CanvasConfig",
    "LoggingConfig",
    "LogLevel",
    "PolylabSettings",
    "RenderConfig",
    "get_default_settings",
]
