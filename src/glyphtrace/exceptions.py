"""Exception hierarchy for Glyphtrace.

Geometry and scoring never raise during normal operation; these exceptions
only surface at construction time (malformed paths) and at provider
boundaries (catalogs and fonts).
"""


class GlyphTraceError(Exception):
    """Base exception for all Glyphtrace errors."""

    pass


class PathError(GlyphTraceError):
    """Malformed glyph path or stroke segment."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class CatalogError(GlyphTraceError):
    """Errors related to glyph catalogs."""

    pass


class GlyphNotFoundError(CatalogError):
    """Requested glyph not found in the provider."""

    def __init__(self, glyph: str) -> None:
        self.glyph = glyph
        super().__init__(f"Glyph '{glyph}' not found")


class CatalogLoadError(CatalogError):
    """Error loading a glyph catalog file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load catalog '{path}': {reason}")


class FontError(GlyphTraceError):
    """Errors related to reading glyph outlines from fonts."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class AttemptLoadError(GlyphTraceError):
    """Error loading a recorded drawing attempt."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load attempt '{path}': {reason}")
