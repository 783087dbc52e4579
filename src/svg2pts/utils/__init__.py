"""Utility functions for svg2pts.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from svg2pts.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
