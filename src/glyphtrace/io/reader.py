"""Font-backed glyph provider.

This module provides the FontGlyphProvider class, which reads glyph outlines
from TTF/OTF files and serves them as reference glyphs. Each contour of a
glyph is treated as one stroke segment, so glyphs with several contours
require a pen lift.
"""

from pathlib import Path

from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.ttLib import TTFont

from glyphtrace.catalog.provider import CanvasSize
from glyphtrace.core.geometry import sample_path
from glyphtrace.domain import GlyphPath, StrokeSegment
from glyphtrace.exceptions import FontLoadError, GlyphNotFoundError
from glyphtrace.io.converter import normalize_to_unit_square, recording_to_path


class FontGlyphProvider:
    """Loads TTF/OTF fonts and serves their glyphs by character.

    Example:
        with FontGlyphProvider(Path("font.ttf")) as provider:
            path = provider.lookup_glyph_path("A")
    """

    def __init__(self, font_path: Path, segment_points: int = 32) -> None:
        """Initialize the provider.

        Args:
            font_path: Path to the TTF or OTF font file
            segment_points: Points sampled along each contour when building
                stroke segments
        """
        self._font_path = font_path
        self._segment_points = segment_points
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}
        self._paths: dict[str, GlyphPath] = {}

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the font cannot be parsed or has no cmap
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
            cmap = self._font.getBestCmap()
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        if not cmap:
            raise FontLoadError(str(self._font_path), "font has no Unicode cmap")
        self._cmap = dict(cmap)
        self._paths = {}

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    def glyphs(self) -> list[str]:
        """Characters mapped by the font that have an outline, sorted.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        self._require_font()
        return sorted(
            chr(code)
            for code in self._cmap
            if not self.lookup_glyph_path(chr(code)).is_empty()
        )

    def lookup_glyph_path(self, glyph: str) -> GlyphPath:
        """Outline of a character in unit-square coordinates.

        Raises:
            GlyphNotFoundError: If the font does not map the character
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if len(glyph) != 1 or ord(glyph) not in self._cmap:
            raise GlyphNotFoundError(glyph)

        name = self._cmap[ord(glyph)]
        if name not in self._paths:
            glyph_set = font.getGlyphSet()
            pen = DecomposingRecordingPen(glyph_set)
            glyph_set[name].draw(pen)

            hhea = font["hhea"]
            advance_width, _ = font["hmtx"][name]
            self._paths[name] = normalize_to_unit_square(
                recording_to_path(pen.value),
                ascent=hhea.ascent,
                descent=hhea.descent,
                advance_width=advance_width,
            )
        return self._paths[name]

    def lookup_stroke_segments(
        self, glyph: str, canvas_size: CanvasSize
    ) -> list[StrokeSegment] | None:
        """One stroke segment per contour, or None for single-contour glyphs."""
        subpaths = self.lookup_glyph_path(glyph).subpaths()
        if len(subpaths) <= 1:
            return None

        width, height = canvas_size
        return [
            StrokeSegment(
                points=tuple(
                    p.scaled(width, height)
                    for p in sample_path(subpath, self._segment_points)
                )
            )
            for subpath in subpaths
        ]

    def requires_pen_lift(self, glyph: str) -> bool:
        return len(self.lookup_glyph_path(glyph).subpaths()) > 1

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
        self._paths = {}

    def __enter__(self) -> "FontGlyphProvider":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
