"""Sample glyphs for demonstrations and tests.

Coordinates are fractions of the canvas with y growing downward. Glyphs that
need a pen lift list their stroke segments in drawing order.
"""

from glyphtrace.catalog.catalog import GlyphCatalog, GlyphDefinition
from glyphtrace.domain import (
    ClosePath,
    CubicCurveTo,
    GlyphPath,
    LineTo,
    MoveTo,
    Point,
    StrokeSegment,
)

# Cubic control offset for quarter ellipses
KAPPA = 0.5523


def _polyline(*coords: tuple[float, float]) -> list[Point]:
    return [Point(x, y) for x, y in coords]


def _strokes(*polylines: list[Point]) -> tuple[StrokeSegment, ...]:
    return tuple(StrokeSegment(points=tuple(points)) for points in polylines)


def _multi_stroke_path(*polylines: list[Point]) -> GlyphPath:
    segments = []
    for points in polylines:
        first, *rest = points
        segments.append(MoveTo(first))
        segments.extend(LineTo(p) for p in rest)
    return GlyphPath(tuple(segments))


def _ellipse(cx: float, cy: float, rx: float, ry: float) -> GlyphPath:
    """Ellipse drawn counter-clockwise on screen, starting at the top."""
    kx = rx * KAPPA
    ky = ry * KAPPA
    top = Point(cx, cy - ry)
    left = Point(cx - rx, cy)
    bottom = Point(cx, cy + ry)
    right = Point(cx + rx, cy)
    return GlyphPath(
        (
            MoveTo(top),
            CubicCurveTo(Point(cx - kx, cy - ry), Point(cx - rx, cy - ky), left),
            CubicCurveTo(Point(cx - rx, cy + ky), Point(cx - kx, cy + ry), bottom),
            CubicCurveTo(Point(cx + kx, cy + ry), Point(cx + rx, cy + ky), right),
            CubicCurveTo(Point(cx + rx, cy - ky), Point(cx + kx, cy - ry), top),
            ClosePath(),
        )
    )


def _definitions() -> list[GlyphDefinition]:
    t_bar = _polyline((0.2, 0.15), (0.8, 0.15))
    t_stem = _polyline((0.5, 0.15), (0.5, 0.85))

    h_left = _polyline((0.25, 0.15), (0.25, 0.85))
    h_right = _polyline((0.75, 0.15), (0.75, 0.85))
    h_bar = _polyline((0.25, 0.5), (0.75, 0.5))

    x_down = _polyline((0.25, 0.15), (0.75, 0.85))
    x_up = _polyline((0.75, 0.15), (0.25, 0.85))

    return [
        GlyphDefinition("I", GlyphPath.from_points(_polyline((0.5, 0.15), (0.5, 0.85)))),
        GlyphDefinition(
            "L",
            GlyphPath.from_points(_polyline((0.3, 0.15), (0.3, 0.85), (0.75, 0.85))),
        ),
        GlyphDefinition("O", _ellipse(0.5, 0.5, 0.3, 0.35)),
        GlyphDefinition(
            "C",
            GlyphPath(
                (
                    MoveTo(Point(0.75, 0.25)),
                    CubicCurveTo(Point(0.65, 0.1), Point(0.3, 0.12), Point(0.28, 0.5)),
                    CubicCurveTo(Point(0.3, 0.88), Point(0.65, 0.9), Point(0.75, 0.75)),
                )
            ),
        ),
        GlyphDefinition("T", _multi_stroke_path(t_bar, t_stem), _strokes(t_bar, t_stem)),
        GlyphDefinition(
            "H",
            _multi_stroke_path(h_left, h_right, h_bar),
            _strokes(h_left, h_right, h_bar),
        ),
        GlyphDefinition("X", _multi_stroke_path(x_down, x_up), _strokes(x_down, x_up)),
    ]


def builtin_catalog() -> GlyphCatalog:
    """Catalog with the sample glyphs I, L, O, C, T, H and X."""
    return GlyphCatalog(_definitions())
