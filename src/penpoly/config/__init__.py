"""Configuration management for penpoly.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlattenConfig: Curve flattening settings
- BooleanConfig: Boolean engine scale and fill rule
- LoggingConfig: Logging settings
- PenpolySettings: Main application settings
"""

from penpoly.config.settings import (
    BooleanConfig,
    BooleanOp,
    FillRule,
    FlattenConfig,
    LoggingConfig,
    PenpolySettings,
    get_default_settings,
)

__all__ = [
    "BooleanConfig",
    "BooleanOp",
    "FillRule",
    "FlattenConfig",
    "LoggingConfig",
    "PenpolySettings",
    "get_default_settings",
]
