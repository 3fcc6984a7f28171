"""Glyph I/O layer for glyphtrace.

This module loads reference glyphs and recorded attempts from files:

- JSON glyph catalogs (load and save)
- JSON drawing attempts (load and save)
- TTF/OTF fonts via fonttools, converted to unit-square glyph paths

Key classes:
- FontGlyphProvider: Serve a font's glyphs through the GlyphProvider interface

Key functions:
- load_catalog / dump_catalog: JSON catalog files
- load_attempt / dump_attempt: JSON attempt files
"""

from glyphtrace.io.attempt_file import dump_attempt, load_attempt
from glyphtrace.io.catalog_file import dump_catalog, load_catalog
from glyphtrace.io.reader import FontGlyphProvider

__all__ = [
    "FontGlyphProvider",
    "dump_attempt",
    "dump_catalog",
    "load_attempt",
    "load_catalog",
]
