"""Internal Bezier curve evaluation and flattening.

This is an internal module containing helper functions for the arc-length
geometry. Not intended for public use.
"""

import math

from glyphtrace.domain import Point

# Subdivision depth limit for adaptive flattening
MAX_DEPTH = 16


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t."""
    mt = 1.0 - t
    a = mt * mt
    b = 2.0 * mt * t
    c = t * t
    return Point(a * p0.x + b * p1.x + c * p2.x, a * p0.y + b * p1.y + c * p2.y)


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bezier curve at parameter t."""
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3.0 * mt * mt * t
    c = 3.0 * mt * t * t
    d = t * t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def sample_bezier(points: list[Point], steps: int) -> list[Point]:
    """Sample a Bezier curve at ``steps`` uniform parameter steps.

    Args:
        points: Control points (3 for quadratic, 4 for cubic)
        steps: Number of intervals; ``steps + 1`` points are returned

    Returns:
        Points on the curve from t=0 to t=1 inclusive
    """
    steps = max(1, steps)
    if len(points) == 3:
        p0, p1, p2 = points
        return [quadratic_point(p0, p1, p2, i / steps) for i in range(steps + 1)]
    p0, p1, p2, p3 = points
    return [cubic_point(p0, p1, p2, p3, i / steps) for i in range(steps + 1)]


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2 = points

    # Actual curve midpoint (at t=0.5)
    curve_mid_x = 0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x
    curve_mid_y = 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y

    # Chord midpoint
    line_mid_x = (p0.x + p2.x) / 2
    line_mid_y = (p0.y + p2.y) / 2

    distance = math.hypot(curve_mid_x - line_mid_x, curve_mid_y - line_mid_y)

    if distance <= tolerance or depth >= MAX_DEPTH:
        return [p0, p2]

    # Subdivide at t=0.5
    mid = Point(curve_mid_x, curve_mid_y)
    left_points = [p0, Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2), mid]
    right_points = [mid, Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2), p2]

    left = flatten_quadratic(left_points, tolerance, depth + 1)
    right = flatten_quadratic(right_points, tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2, p3 = points

    # Curve midpoint (at t=0.5)
    curve_mid_x = 0.125 * (p0.x + 3 * p1.x + 3 * p2.x + p3.x)
    curve_mid_y = 0.125 * (p0.y + 3 * p1.y + 3 * p2.y + p3.y)

    # Chord midpoint
    line_mid_x = (p0.x + p3.x) / 2
    line_mid_y = (p0.y + p3.y) / 2

    distance = math.hypot(curve_mid_x - line_mid_x, curve_mid_y - line_mid_y)

    # The midpoint test misses S-curves whose midpoint lies on the chord
    control_span = max(
        _distance_to_line(p1, p0, p3),
        _distance_to_line(p2, p0, p3),
    )

    if (distance <= tolerance and control_span <= tolerance) or depth >= MAX_DEPTH:
        return [p0, p3]

    # First level
    q1 = Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
    q2 = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
    q3 = Point((p2.x + p3.x) / 2, (p2.y + p3.y) / 2)

    # Second level
    r1 = Point((q1.x + q2.x) / 2, (q1.y + q2.y) / 2)
    r2 = Point((q2.x + q3.x) / 2, (q2.y + q3.y) / 2)

    # Third level (midpoint)
    mid = Point((r1.x + r2.x) / 2, (r1.y + r2.y) / 2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right


def _distance_to_line(point: Point, start: Point, end: Point) -> float:
    """Perpendicular distance from point to the infinite line start-end."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length < 1e-10:
        return math.hypot(point.x - start.x, point.y - start.y)
    return abs(dy * (point.x - start.x) - dx * (point.y - start.y)) / length
