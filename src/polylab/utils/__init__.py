"""Utility functions for polylab.

This module provides logging setup and render statistics tracking.
"""

from polylab.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
