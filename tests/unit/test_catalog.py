"""Unit tests for the glyph catalog.

Tests cover:
- Built-in sample glyphs and their pen-lift flags
- Lookups, scaling and missing glyphs
- GlyphDefinition validation and serialization
"""

import pytest

from glyphtrace.catalog import (
    GlyphCatalog,
    GlyphDefinition,
    GlyphProvider,
    builtin_catalog,
)
from glyphtrace.core.geometry import arc_length
from glyphtrace.domain import ClosePath, GlyphPath, Point, StrokeSegment
from glyphtrace.exceptions import GlyphNotFoundError, PathError


@pytest.fixture
def catalog() -> GlyphCatalog:
    return builtin_catalog()


class TestBuiltinCatalog:
    """Tests for the built-in sample glyphs."""

    def test_glyphs(self, catalog):
        """Sample glyphs are listed in sorted order."""
        assert catalog.glyphs() == ["C", "H", "I", "L", "O", "T", "X"]
        assert len(catalog) == 7

    @pytest.mark.parametrize("glyph", ["T", "H", "X"])
    def test_pen_lift_glyphs(self, catalog, glyph):
        """Glyphs drawn in several strokes need a pen lift."""
        assert catalog.requires_pen_lift(glyph)

    @pytest.mark.parametrize("glyph", ["I", "L", "O", "C"])
    def test_single_stroke_glyphs(self, catalog, glyph):
        """Glyphs drawn in one stroke have no stroke segments."""
        assert not catalog.requires_pen_lift(glyph)
        assert catalog.lookup_stroke_segments(glyph, (400, 400)) is None

    def test_paths_inside_unit_square(self, catalog):
        """Every sample glyph lies inside the unit square."""
        for definition in catalog:
            for point in definition.path.points():
                assert 0.0 <= point.x <= 1.0
                assert 0.0 <= point.y <= 1.0

    def test_paths_have_length(self, catalog):
        """Every sample glyph has something to trace."""
        for definition in catalog:
            assert arc_length(definition.path) > 0.0

    def test_o_is_closed(self, catalog):
        """The O outline is a closed contour."""
        path = catalog.lookup_glyph_path("O")
        assert isinstance(path.segments[-1], ClosePath)
        assert path.first_point == path.last_point

    def test_conforms_to_provider(self, catalog):
        """The catalog is a GlyphProvider."""
        assert isinstance(catalog, GlyphProvider)


class TestLookups:
    """Tests for catalog lookups."""

    def test_stroke_segments_scaled_to_canvas(self, catalog):
        """Stroke segments are returned in canvas coordinates."""
        segments = catalog.lookup_stroke_segments("T", (400, 400))

        assert len(segments) == 2
        bar = segments[0].points
        assert bar[0].x == pytest.approx(80.0)
        assert bar[0].y == pytest.approx(60.0)
        assert bar[1].x == pytest.approx(320.0)
        assert all(s.is_new_stroke for s in segments)

    def test_h_has_three_strokes(self, catalog):
        """H is drawn as two uprights and a bar."""
        assert len(catalog.lookup_stroke_segments("H", (100, 100))) == 3

    def test_unknown_glyph(self, catalog):
        """Unknown glyphs raise GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError) as exc_info:
            catalog.lookup_glyph_path("Q")
        assert exc_info.value.glyph == "Q"

        with pytest.raises(GlyphNotFoundError):
            catalog.requires_pen_lift("Q")

    def test_contains(self, catalog):
        """Membership checks use the glyph character."""
        assert "L" in catalog
        assert "Q" not in catalog

    def test_add_replaces(self):
        """Adding a definition for an existing glyph replaces it."""
        first = GlyphDefinition("A", GlyphPath.from_points([Point(0, 0), Point(1, 1)]))
        second = GlyphDefinition("A", GlyphPath.from_points([Point(0, 1), Point(1, 0)]))
        catalog = GlyphCatalog([first])
        catalog.add(second)

        assert len(catalog) == 1
        assert catalog.get("A") is second


class TestGlyphDefinition:
    """Tests for GlyphDefinition."""

    def test_glyph_must_be_single_character(self):
        """Multi-character keys are rejected."""
        with pytest.raises(PathError):
            GlyphDefinition("AB", GlyphPath())

    def test_single_stroke_is_not_pen_lift(self):
        """One stroke segment does not need a pen lift."""
        definition = GlyphDefinition(
            "I",
            GlyphPath.from_points([Point(0.5, 0.1), Point(0.5, 0.9)]),
            (StrokeSegment((Point(0.5, 0.1), Point(0.5, 0.9))),),
        )
        assert not definition.requires_pen_lift

    def test_strokes_list_becomes_tuple(self):
        """Stroke lists are stored as tuples."""
        definition = GlyphDefinition(
            "I", GlyphPath(), [StrokeSegment((Point(0, 0),))]  # type: ignore[arg-type]
        )
        assert isinstance(definition.strokes, tuple)

    def test_round_trip(self, catalog):
        """Definitions survive dictionary serialization."""
        for definition in catalog:
            assert GlyphDefinition.from_dict(definition.to_dict()) == definition
