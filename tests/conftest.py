"""Shared fixtures: small fonts built on the fly."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

ASCENT = 800
DESCENT = -200
ADVANCE = 600


def _rect_glyph(rects: list[tuple[int, int, int, int]]):
    pen = TTGlyphPen(None)
    for x0, y0, x1, y1 in rects:
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Build a TrueType font with 'I' (one contour) and '=' (two contours)."""
    glyph_order = [".notdef", "I", "equal", "space"]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("I"): "I", ord("="): "equal", ord(" "): "space"})
    fb.setupGlyf(
        {
            ".notdef": TTGlyphPen(None).glyph(),
            "I": _rect_glyph([(250, 0, 350, 700)]),
            "equal": _rect_glyph([(100, 200, 500, 260), (100, 440, 500, 500)]),
            "space": TTGlyphPen(None).glyph(),
        }
    )
    fb.setupHorizontalMetrics({name: (ADVANCE, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "Glyphtrace Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_test_font(tmp_path / "GlyphtraceTest.ttf")
