"""Interface for obtaining reference glyphs."""

from typing import Protocol, runtime_checkable

from glyphtrace.domain import GlyphPath, StrokeSegment

CanvasSize = tuple[float, float]


@runtime_checkable
class GlyphProvider(Protocol):
    """Source of canonical glyph outlines.

    Paths are returned in unit-square coordinates (fractions of the canvas,
    y growing downward); stroke segments are returned already scaled to the
    requested canvas size.
    """

    def lookup_glyph_path(self, glyph: str) -> GlyphPath:
        """Canonical path of a glyph in unit-square coordinates."""
        ...

    def lookup_stroke_segments(
        self, glyph: str, canvas_size: CanvasSize
    ) -> list[StrokeSegment] | None:
        """Ordered stroke segments in canvas coordinates, or None if the
        glyph is drawn without lifting the pen."""
        ...

    def requires_pen_lift(self, glyph: str) -> bool:
        """True if the glyph is drawn in more than one stroke."""
        ...
