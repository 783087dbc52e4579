"""Configuration management for svg2pts.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplingConfig: Flattening accuracy and point spacing
- OutputConfig: Point output settings
- ProcessingConfig: Path processing settings
- LoggingConfig: Logging settings
- Svg2PtsSettings: Main application settings
"""

from svg2pts.config.settings import (
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    SamplingConfig,
    Svg2PtsSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "SamplingConfig",
    "Svg2PtsSettings",
    "get_default_settings",
]
