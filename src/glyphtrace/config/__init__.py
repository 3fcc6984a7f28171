"""Configuration management for glyphtrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Arc-length sampling resolution and curve strategy
- ScoringConfig: Accuracy scoring weights, tolerances and thresholds
- AnimationConfig: Demonstration playback timing
- LoggingConfig: Logging settings
- GlyphTraceSettings: Main application settings
"""

from glyphtrace.config.settings import (
    AnimationConfig,
    CurveMode,
    GeometryConfig,
    GlyphTraceSettings,
    LoggingConfig,
    ScoringConfig,
    get_default_settings,
)

__all__ = [
    "AnimationConfig",
    "CurveMode",
    "GeometryConfig",
    "GlyphTraceSettings",
    "LoggingConfig",
    "ScoringConfig",
    "get_default_settings",
]
