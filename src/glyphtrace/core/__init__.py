"""Core algorithms for glyphtrace.

This module contains the core algorithms for:

- Arc-length geometry (length, point at fraction, trimming, sampling)
- Tracing accuracy scoring (coverage and accuracy metrics)
- Demonstration playback (progress to partial glyph)

Geometry and scoring are:
- Stateless (safe to call from any thread)
- Pure (no side effects, no I/O)
- Total (degenerate input falls back to defaults instead of raising)

Key functions:
- arc_length: Total length of a glyph path
- point_at_fraction: Point at a fraction of the arc length
- trim: Sub-path from fraction 0 to t
- sample_path: Arc-length-even samples of a path
- resample_polyline: Arc-length-even reduction of a user polyline
- segment_reveal: Progress to partially revealed stroke segments

Key classes:
- PathGeometry: Geometry operations bound to a configuration
- AccuracyScorer: Scores drawing attempts
- AnimationProgressMapper: Progress to renderable partial path
- DemoPlayback: Tick-driven demonstration progress
- TracingEngine: Facade used by rendering and app layers
"""

from glyphtrace.core.animation import (
    AnimationProgressMapper,
    DemoPlayback,
    partial_points,
    segment_reveal,
    segments_to_path,
)
from glyphtrace.core.engine import TracingEngine
from glyphtrace.core.geometry import (
    PathGeometry,
    arc_length,
    centroid,
    nearest_distance,
    point_at_fraction,
    polyline_length,
    resample_polyline,
    sample_path,
    trim,
)
from glyphtrace.core.scorer import AccuracyScorer

__all__ = [
    # Scoring
    "AccuracyScorer",
    # Animation
    "AnimationProgressMapper",
    "DemoPlayback",
    # Geometry
    "PathGeometry",
    # Engine
    "TracingEngine",
    "arc_length",
    "centroid",
    "nearest_distance",
    "partial_points",
    "point_at_fraction",
    "polyline_length",
    "resample_polyline",
    "sample_path",
    "segment_reveal",
    "segments_to_path",
    "trim",
]
