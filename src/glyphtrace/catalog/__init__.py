"""Reference glyph providers.

Key classes:
- GlyphProvider: Interface the engine depends on
- GlyphDefinition: A glyph's unit-square path and stroke segments
- GlyphCatalog: In-memory provider keyed by character

Key functions:
- builtin_catalog: Sample glyphs for demonstrations and tests
"""

from glyphtrace.catalog.builtin import builtin_catalog
from glyphtrace.catalog.catalog import GlyphCatalog, GlyphDefinition
from glyphtrace.catalog.provider import CanvasSize, GlyphProvider

__all__ = [
    "CanvasSize",
    "GlyphCatalog",
    "GlyphDefinition",
    "GlyphProvider",
    "builtin_catalog",
]
