"""In-memory glyph catalog.

Holds hand-authored glyph definitions in unit-square coordinates and serves
them through the GlyphProvider interface.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from glyphtrace.catalog.provider import CanvasSize
from glyphtrace.domain import GlyphPath, StrokeSegment
from glyphtrace.exceptions import GlyphNotFoundError, PathError


@dataclass(frozen=True)
class GlyphDefinition:
    """A traceable glyph.

    Attributes:
        glyph: The character this definition draws
        path: Canonical outline in unit-square coordinates
        strokes: Pen-down units in drawing order, in unit-square coordinates.
            Empty for glyphs drawn in a single stroke.
    """

    glyph: str
    path: GlyphPath
    strokes: tuple[StrokeSegment, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.strokes, tuple):
            object.__setattr__(self, "strokes", tuple(self.strokes))
        if len(self.glyph) != 1:
            raise PathError(f"Glyph key must be a single character, got {self.glyph!r}")

    @property
    def requires_pen_lift(self) -> bool:
        """True if the glyph has more than one stroke segment."""
        return len(self.strokes) > 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with glyph, path and strokes fields
        """
        return {
            "glyph": self.glyph,
            "path": self.path.to_dict(),
            "strokes": [s.to_dict() for s in self.strokes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphDefinition":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            GlyphDefinition instance
        """
        return cls(
            glyph=data["glyph"],
            path=GlyphPath.from_dict(data["path"]),
            strokes=tuple(StrokeSegment.from_dict(s) for s in data.get("strokes", [])),
        )


class GlyphCatalog:
    """Glyph definitions keyed by character.

    Example:
        catalog = GlyphCatalog([definition])
        path = catalog.lookup_glyph_path("T")
        segments = catalog.lookup_stroke_segments("T", (400, 400))
    """

    def __init__(self, definitions: Iterable[GlyphDefinition] = ()) -> None:
        self._definitions: dict[str, GlyphDefinition] = {}
        for definition in definitions:
            self.add(definition)

    def add(self, definition: GlyphDefinition) -> None:
        """Add or replace a glyph definition."""
        self._definitions[definition.glyph] = definition

    def get(self, glyph: str) -> GlyphDefinition:
        """Get a glyph definition.

        Raises:
            GlyphNotFoundError: If the glyph is not in the catalog
        """
        try:
            return self._definitions[glyph]
        except KeyError:
            raise GlyphNotFoundError(glyph) from None

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[GlyphDefinition]:
        return iter(self._definitions.values())

    def glyphs(self) -> list[str]:
        """Characters in the catalog, sorted."""
        return sorted(self._definitions)

    def lookup_glyph_path(self, glyph: str) -> GlyphPath:
        return self.get(glyph).path

    def lookup_stroke_segments(
        self, glyph: str, canvas_size: CanvasSize
    ) -> list[StrokeSegment] | None:
        definition = self.get(glyph)
        if not definition.requires_pen_lift:
            return None
        width, height = canvas_size
        return [segment.scaled(width, height) for segment in definition.strokes]

    def requires_pen_lift(self, glyph: str) -> bool:
        return self.get(glyph).requires_pen_lift
