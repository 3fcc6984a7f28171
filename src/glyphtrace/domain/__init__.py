"""Domain models for glyphtrace.

This module contains the value types shared by geometry, scoring and
animation. All models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries (catalog files, attempt files)
- Independent of fonttools and of any rendering layer

Key classes:
- Point: A 2D point
- MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ClosePath: Path segments
- GlyphPath: An ordered sequence of path segments
- StrokeSegment: One pen-down unit of a reference glyph
- UserStroke, DrawingAttempt: Recorded user input
- ScoreBreakdown: Every term of a computed accuracy score
"""

from glyphtrace.domain.path import (
    ClosePath,
    CubicCurveTo,
    GlyphPath,
    LineTo,
    MoveTo,
    PathSegment,
    QuadCurveTo,
    segment_from_dict,
)
from glyphtrace.domain.point import Point
from glyphtrace.domain.score import ScoreBreakdown
from glyphtrace.domain.stroke import DrawingAttempt, StrokeSegment, UserStroke

__all__: list[str] = [
    # Core types
    "Point",
    "GlyphPath",
    "PathSegment",
    # Segments
    "MoveTo",
    "LineTo",
    "QuadCurveTo",
    "CubicCurveTo",
    "ClosePath",
    "segment_from_dict",
    # Strokes
    "StrokeSegment",
    "UserStroke",
    "DrawingAttempt",
    # Scoring
    "ScoreBreakdown",
]
