"""Utility functions for boundedpath.

This module provides utility functions including:

- Logging setup and configuration
- Progress and statistics tracking for batch runs
"""

from boundedpath.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
