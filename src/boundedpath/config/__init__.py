"""Configuration management for boundedpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplingConfig: Boundary sample count policy
- SmoothingConfig: Centerline smoothing settings
- ConversionConfig: Centerline space conversion settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- BoundedPathSettings: Main application settings
"""

from boundedpath.config.settings import (
    BoundedPathSettings,
    ConversionConfig,
    LoggingConfig,
    ProcessingConfig,
    SamplingConfig,
    SmoothingConfig,
    get_default_settings,
)

__all__ = [
    "BoundedPathSettings",
    "ConversionConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "SamplingConfig",
    "SmoothingConfig",
    "get_default_settings",
]
