"""Configuration settings for Glyphtrace."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CurveMode(str, Enum):
    """How Bezier segments are measured."""

    FIXED = "fixed"
    ADAPTIVE = "adaptive"


class GeometryConfig(BaseModel):
    """Configuration for arc-length geometry.

    Curves are measured by fixed-step polygonal sampling by default. The
    adaptive mode flattens curves by recursive subdivision instead, bounded
    by ``flatten_tolerance`` in canvas units.
    """

    curve_steps: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Sampling steps per curve when measuring arc length",
    )
    fine_steps: int = Field(
        default=50,
        ge=1,
        le=5000,
        description="Sampling steps per curve when locating a point inside it",
    )
    trim_steps: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Line segments used to build a trimmed path",
    )
    curve_mode: CurveMode = Field(
        default=CurveMode.FIXED,
        description="Curve length strategy (fixed steps or adaptive subdivision)",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=10.0,
        description="Maximum flattening error for adaptive curve mode",
    )

    def tolerance(self) -> float | None:
        """Get the flattening tolerance, or None in fixed-step mode."""
        if self.curve_mode == CurveMode.ADAPTIVE:
            return self.flatten_tolerance
        return None


class ScoringConfig(BaseModel):
    """Configuration for tracing accuracy scoring.

    The weights, tolerances and curve thresholds are empirical constants
    tuned for young learners. Distances are in canvas units.
    """

    reference_samples: int = Field(
        default=150,
        ge=2,
        le=2000,
        description="Arc-length-even points sampled from the reference glyph",
    )
    max_user_samples: int = Field(
        default=300,
        ge=2,
        le=5000,
        description="Maximum points kept from the user's strokes",
    )
    generous_tolerance: float = Field(
        default=40.0,
        gt=0.0,
        description="Distance counted as a hit for coverage and accuracy",
    )
    tight_tolerance: float = Field(
        default=25.0,
        gt=0.0,
        description="Distance counted as a hit for the precision metrics",
    )
    coverage_weight: float = Field(default=0.40, ge=0.0, le=1.0)
    accuracy_weight: float = Field(default=0.25, ge=0.0, le=1.0)
    precision_weight: float = Field(default=0.20, ge=0.0, le=1.0)
    precision_user_weight: float = Field(default=0.15, ge=0.0, le=1.0)
    stroke_penalty: float = Field(
        default=2.0,
        ge=0.0,
        description="Points subtracted per missing stroke on pen-lift glyphs",
    )
    skew_coverage_threshold: float = Field(
        default=80.0,
        ge=0.0,
        le=100.0,
        description="Coverage above which the skew bonus is considered",
    )
    skew_max_offset: float = Field(
        default=100.0,
        gt=0.0,
        description="Per-axis centroid offset below which the skew bonus applies",
    )
    skew_bonus: float = Field(
        default=4.0,
        ge=0.0,
        description="Maximum skew bonus",
    )
    skew_falloff: float = Field(
        default=200.0,
        gt=0.0,
        description="Combined centroid offset at which the skew bonus reaches zero",
    )
    high_curve_threshold: float = Field(default=85.0, ge=0.0, le=100.0)
    high_curve_factor: float = Field(default=0.1, ge=0.0, le=1.0)
    mid_curve_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
    mid_curve_factor: float = Field(default=0.15, ge=0.0, le=1.0)
    fallback_score: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Lenient score returned when there is nothing to compare",
    )


class AnimationConfig(BaseModel):
    """Configuration for demonstration playback."""

    tick_interval: float = Field(
        default=0.016,
        gt=0.0,
        le=5.0,
        description="Seconds between playback ticks",
    )
    step: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="Progress added per tick",
    )
    loop: bool = Field(
        default=True,
        description="Restart from 0 after reaching the end",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphTraceSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphTraceSettings:
    """Get default application settings."""
    return GlyphTraceSettings()
