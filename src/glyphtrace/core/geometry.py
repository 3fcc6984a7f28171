"""Arc-length geometry over glyph paths and user polylines.

This module provides the measurement utilities the scorer and the animation
mapper are built on:
- Arc length of a path made of lines and Bezier curves
- Position at a fraction of the total arc length
- Trimming a path to a fraction of its length
- Arc-length-even sampling of paths and polylines
- Nearest-distance and centroid helpers

Curves are measured by fixed-step polygonal sampling (10 steps for length,
50 steps when locating a point inside a curve). Passing a
``flatten_tolerance`` switches curves to adaptive recursive subdivision.

All functions are pure, stateless and safe to call from any thread. They never
raise for empty or degenerate input: an empty path measures 0 and samples
to the origin, and zero-length segments are skipped.
"""

import math
from collections.abc import Iterator, Sequence

from glyphtrace.config import GeometryConfig
from glyphtrace.core._bezier import flatten_cubic, flatten_quadratic, sample_bezier
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

DEFAULT_CURVE_STEPS = 10
DEFAULT_FINE_STEPS = 50
DEFAULT_TRIM_STEPS = 100

ORIGIN = Point(0.0, 0.0)


def _drawn_segments(path: GlyphPath) -> Iterator[tuple[Point, PathSegment]]:
    """Yield (start point, segment) for every line or curve in the path.

    MoveTo and ClosePath only move the current point. ClosePath returns it to
    the start of the subpath without measuring the closing edge.
    """
    current: Point | None = None
    subpath_start: Point | None = None

    for segment in path.segments:
        if isinstance(segment, MoveTo):
            current = segment.point
            subpath_start = segment.point
        elif isinstance(segment, ClosePath):
            current = subpath_start
        else:
            if current is not None:
                yield current, segment
            current = segment.end_point


def _curve_polyline(
    start: Point,
    segment: QuadCurveTo | CubicCurveTo,
    steps: int,
    flatten_tolerance: float | None,
) -> list[Point]:
    """Approximate a curve segment by a polyline."""
    if isinstance(segment, QuadCurveTo):
        controls = [start, segment.control, segment.end]
        if flatten_tolerance is not None:
            return flatten_quadratic(controls, flatten_tolerance)
    else:
        controls = [start, segment.control1, segment.control2, segment.end]
        if flatten_tolerance is not None:
            return flatten_cubic(controls, flatten_tolerance)
    return sample_bezier(controls, steps)


def _segment_length(
    start: Point,
    segment: PathSegment,
    curve_steps: int,
    flatten_tolerance: float | None,
) -> float:
    if isinstance(segment, LineTo):
        return start.distance_to(segment.point)
    if isinstance(segment, (QuadCurveTo, CubicCurveTo)):
        return polyline_length(
            _curve_polyline(start, segment, curve_steps, flatten_tolerance)
        )
    return 0.0


def arc_length(
    path: GlyphPath,
    curve_steps: int = DEFAULT_CURVE_STEPS,
    flatten_tolerance: float | None = None,
) -> float:
    """Calculate the total arc length of a path.

    Lines contribute their Euclidean length. Curves are sampled with the
    Bezier formula at ``curve_steps`` steps and the distances between
    consecutive samples are summed. MoveTo, ClosePath and zero-length
    segments contribute nothing.

    Args:
        path: The path to measure
        curve_steps: Sampling steps per curve
        flatten_tolerance: If given, measure curves on an adaptive
            flattening with this maximum error instead of fixed steps

    Returns:
        Total length in path units. Returns 0.0 for empty paths.

    Examples:
        >>> path = GlyphPath.from_points([Point(0, 0), Point(3, 4), Point(3, 10)])
        >>> arc_length(path)
        11.0
    """
    return sum(
        _segment_length(start, segment, curve_steps, flatten_tolerance)
        for start, segment in _drawn_segments(path)
    )


def point_at_fraction(
    path: GlyphPath,
    t: float,
    curve_steps: int = DEFAULT_CURVE_STEPS,
    fine_steps: int = DEFAULT_FINE_STEPS,
    flatten_tolerance: float | None = None,
) -> Point:
    """Find the point at fraction ``t`` of the path's arc length.

    Walks the segments accumulating length. Inside the segment where the
    accumulated length first reaches the target, lines are interpolated
    linearly and curves are re-sampled at ``fine_steps`` to find the point
    whose accumulated sub-length matches the remaining distance.

    Args:
        path: The path to sample
        t: Fraction of the total length, clamped to [0, 1]
        curve_steps: Sampling steps per curve when measuring length
        fine_steps: Sampling steps per curve when locating the point
        flatten_tolerance: If given, use adaptive flattening for curves

    Returns:
        The point at the requested fraction. A path with no length returns
        its first point; the empty path returns the origin.
    """
    first = path.first_point
    if first is None:
        return ORIGIN

    t = max(0.0, min(1.0, t))
    total = arc_length(path, curve_steps, flatten_tolerance)
    if total <= 0.0:
        return first

    if t >= 1.0:
        return path.last_point or first

    target = total * t
    accumulated = 0.0

    for start, segment in _drawn_segments(path):
        length = _segment_length(start, segment, curve_steps, flatten_tolerance)
        if length <= 0.0:
            continue

        if accumulated + length >= target:
            remaining = target - accumulated
            if isinstance(segment, LineTo):
                return start.lerp(segment.point, remaining / length)
            fine = _curve_polyline(start, segment, fine_steps, flatten_tolerance)
            return _point_along(fine, remaining)

        accumulated += length

    return path.last_point or first


def _point_along(points: Sequence[Point], distance: float) -> Point:
    """Point at ``distance`` along a polyline, clamped to its end."""
    travelled = 0.0
    for a, b in zip(points, points[1:]):
        step = a.distance_to(b)
        if step <= 0.0:
            continue
        if travelled + step >= distance:
            return a.lerp(b, (distance - travelled) / step)
        travelled += step
    return points[-1]


def trim(
    path: GlyphPath,
    t: float,
    steps: int = DEFAULT_TRIM_STEPS,
    curve_steps: int = DEFAULT_CURVE_STEPS,
    fine_steps: int = DEFAULT_FINE_STEPS,
    flatten_tolerance: float | None = None,
) -> GlyphPath:
    """Return the portion of a path traced from fraction 0 to ``t``.

    The partial path is a polyline through ``steps + 1`` points sampled with
    :func:`point_at_fraction`.

    Args:
        path: The path to trim
        t: Fraction of the total length to keep
        steps: Number of line segments in the trimmed path

    Returns:
        The empty path for ``t <= 0``, the original path for ``t >= 1``,
        otherwise a MoveTo followed by ``steps`` LineTo segments
    """
    if t <= 0.0:
        return GlyphPath()
    if t >= 1.0:
        return path

    steps = max(1, steps)
    return GlyphPath.from_points(
        point_at_fraction(path, t * i / steps, curve_steps, fine_steps, flatten_tolerance)
        for i in range(steps + 1)
    )


def sample_path(
    path: GlyphPath,
    count: int,
    curve_steps: int = DEFAULT_CURVE_STEPS,
    fine_steps: int = DEFAULT_FINE_STEPS,
    flatten_tolerance: float | None = None,
) -> list[Point]:
    """Sample ``count`` arc-length-even points along a path.

    Args:
        path: The path to sample
        count: Number of points, including both endpoints

    Returns:
        Sampled points, or an empty list for the empty path
    """
    if path.is_empty() or count <= 0:
        return []
    if count == 1:
        return [point_at_fraction(path, 0.0, curve_steps, fine_steps, flatten_tolerance)]
    return [
        point_at_fraction(path, i / (count - 1), curve_steps, fine_steps, flatten_tolerance)
        for i in range(count)
    ]


def polyline_length(points: Sequence[Point]) -> float:
    """Total length of a polyline."""
    return sum(a.distance_to(b) for a, b in zip(points, points[1:]))


def resample_polyline(points: Sequence[Point], max_count: int) -> list[Point]:
    """Reduce a polyline to at most ``max_count`` arc-length-even points.

    Polylines that already fit are returned unchanged. Longer ones are
    resampled at even spacing along their length, keeping both endpoints.

    Args:
        points: Polyline vertices in order
        max_count: Upper bound on the number of returned points

    Returns:
        The resampled points
    """
    if len(points) <= max_count:
        return list(points)
    if max_count <= 1:
        return [points[0]] if max_count == 1 else []

    cumulative = [0.0]
    for a, b in zip(points, points[1:]):
        cumulative.append(cumulative[-1] + a.distance_to(b))

    total = cumulative[-1]
    if total <= 0.0:
        return [points[0]] * max_count

    result: list[Point] = []
    j = 0
    for i in range(max_count):
        target = total * i / (max_count - 1)
        while j < len(points) - 2 and cumulative[j + 1] < target:
            j += 1
        span = cumulative[j + 1] - cumulative[j]
        if span <= 0.0:
            result.append(points[j])
        else:
            fraction = min(1.0, max(0.0, (target - cumulative[j]) / span))
            result.append(points[j].lerp(points[j + 1], fraction))
    return result


def nearest_distance(point: Point, candidates: Sequence[Point]) -> float:
    """Distance from ``point`` to the closest candidate.

    Returns:
        The minimum distance, or ``math.inf`` if there are no candidates
    """
    best = math.inf
    px, py = point.x, point.y
    for candidate in candidates:
        d = math.hypot(candidate.x - px, candidate.y - py)
        if d < best:
            best = d
    return best


def centroid(points: Sequence[Point]) -> Point | None:
    """Arithmetic mean of the points, or None if there are none."""
    if not points:
        return None
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


class PathGeometry:
    """Arc-length queries bound to a geometry configuration.

    Example:
        geometry = PathGeometry(GeometryConfig(curve_steps=20))
        half = geometry.trim(path, 0.5)
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def arc_length(self, path: GlyphPath) -> float:
        return arc_length(path, self.config.curve_steps, self.config.tolerance())

    def point_at_fraction(self, path: GlyphPath, t: float) -> Point:
        return point_at_fraction(
            path,
            t,
            self.config.curve_steps,
            self.config.fine_steps,
            self.config.tolerance(),
        )

    def trim(self, path: GlyphPath, t: float) -> GlyphPath:
        return trim(
            path,
            t,
            self.config.trim_steps,
            self.config.curve_steps,
            self.config.fine_steps,
            self.config.tolerance(),
        )

    def sample(self, path: GlyphPath, count: int) -> list[Point]:
        return sample_path(
            path,
            count,
            self.config.curve_steps,
            self.config.fine_steps,
            self.config.tolerance(),
        )
