"""Converters between fonttools recordings and glyph paths.

Font outlines use font units with y growing upward. Glyph paths use the unit
square with y growing downward, so converted outlines are normalized against
the font's vertical metrics.
"""

from collections.abc import Callable
from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment

from glyphtrace.domain import (
    ClosePath,
    CubicCurveTo,
    GlyphPath,
    LineTo,
    MoveTo,
    PathSegment,
    Point,
    QuadCurveTo,
)


def recording_to_path(recording: list[tuple[str, tuple[Any, ...]]]) -> GlyphPath:
    """Convert a RecordingPen recording to a GlyphPath.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Quadratic runs with implied on-curve points and cubic super-Beziers are
    decomposed into single segments. Closed contours get an explicit line
    back to their start so the closing edge is part of the traced length.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        GlyphPath in font units
    """
    segments: list[PathSegment] = []
    start: tuple[float, float] | None = None
    current: tuple[float, float] | None = None

    for command, args in recording:
        if command == "moveTo":
            start = current = args[0]
            segments.append(MoveTo(Point(*args[0])))
        elif command == "lineTo":
            current = args[0]
            segments.append(LineTo(Point(*args[0])))
        elif command == "qCurveTo":
            points = list(args)
            if points[-1] is None:
                # Contour made only of off-curve points
                points.pop()
                implied = _midpoint(points[-1], points[0])
                start = implied
                segments.append(MoveTo(Point(*implied)))
                points.append(implied)
            if len(points) == 1:
                segments.append(LineTo(Point(*points[0])))
            else:
                for control, end in decomposeQuadraticSegment(points):
                    segments.append(QuadCurveTo(Point(*control), Point(*end)))
            current = points[-1]
        elif command == "curveTo":
            for c1, c2, end in decomposeSuperBezierSegment(list(args)):
                segments.append(CubicCurveTo(Point(*c1), Point(*c2), Point(*end)))
            current = args[-1]
        elif command in ("closePath", "endPath"):
            if command == "closePath" and start is not None and current != start:
                segments.append(LineTo(Point(*start)))
            segments.append(ClosePath())
            current = start

    return GlyphPath(tuple(segments))


def _midpoint(a: tuple[float, float], b: tuple[float, float]) -> tuple[float, float]:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def map_path(path: GlyphPath, transform: Callable[[Point], Point]) -> GlyphPath:
    """Apply a point transform to every point of a path, controls included."""
    segments: list[PathSegment] = []
    for segment in path.segments:
        if isinstance(segment, MoveTo):
            segments.append(MoveTo(transform(segment.point)))
        elif isinstance(segment, LineTo):
            segments.append(LineTo(transform(segment.point)))
        elif isinstance(segment, QuadCurveTo):
            segments.append(QuadCurveTo(transform(segment.control), transform(segment.end)))
        elif isinstance(segment, CubicCurveTo):
            segments.append(
                CubicCurveTo(
                    transform(segment.control1),
                    transform(segment.control2),
                    transform(segment.end),
                )
            )
        else:
            segments.append(segment)
    return GlyphPath(tuple(segments))


def normalize_to_unit_square(
    path: GlyphPath,
    ascent: float,
    descent: float,
    advance_width: float,
) -> GlyphPath:
    """Map a path from font units into the unit square.

    The square spans the font's ascent to descent vertically, with y flipped
    so that it grows downward, and is centred on the glyph's advance width.

    Args:
        path: Path in font units
        ascent: Font ascent (positive, font units)
        descent: Font descent (negative, font units)
        advance_width: Horizontal advance of the glyph

    Returns:
        Path in unit-square coordinates
    """
    height = ascent - descent
    if height <= 0:
        height = 1.0
    x_offset = (height - advance_width) / 2

    def transform(point: Point) -> Point:
        return Point((point.x + x_offset) / height, (ascent - point.y) / height)

    return map_path(path, transform)
