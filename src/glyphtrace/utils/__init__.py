"""Utility functions for glyphtrace.

This module provides utility functions including:

- Logging setup and configuration
- Per-attempt scoring logs and session statistics
"""

from glyphtrace.utils.logging import (
    ScoringLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "ScoringLogger",
    "SessionStats",
    "configure_logging",
]
