"""Vector glyph paths made of line and Bezier segments.

A GlyphPath is an immutable, ordered sequence of drawing commands:
- MoveTo: start a new subpath (pen up, then down)
- LineTo: straight line to a point
- QuadCurveTo: quadratic Bezier with one control point
- CubicCurveTo: cubic Bezier with two control points
- ClosePath: close the current subpath
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from glyphtrace.domain.point import Point
from glyphtrace.exceptions import PathError


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Begin a new subpath at ``point``."""

    point: Point

    @property
    def end_point(self) -> Point:
        return self.point

    def scaled(self, width: float, height: float) -> "MoveTo":
        return MoveTo(self.point.scaled(width, height))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "move", "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the current point to ``point``."""

    point: Point

    @property
    def end_point(self) -> Point:
        return self.point

    def scaled(self, width: float, height: float) -> "LineTo":
        return LineTo(self.point.scaled(width, height))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "line", "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier from the current point to ``end``."""

    control: Point
    end: Point

    @property
    def end_point(self) -> Point:
        return self.end

    def scaled(self, width: float, height: float) -> "QuadCurveTo":
        return QuadCurveTo(
            self.control.scaled(width, height),
            self.end.scaled(width, height),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "quad",
            "control": self.control.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier from the current point to ``end``."""

    control1: Point
    control2: Point
    end: Point

    @property
    def end_point(self) -> Point:
        return self.end

    def scaled(self, width: float, height: float) -> "CubicCurveTo":
        return CubicCurveTo(
            self.control1.scaled(width, height),
            self.control2.scaled(width, height),
            self.end.scaled(width, height),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "cubic",
            "control1": self.control1.to_dict(),
            "control2": self.control2.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath.

    Contributes no length; the closing edge is not measured.
    """

    @property
    def end_point(self) -> None:
        return None

    def scaled(self, width: float, height: float) -> "ClosePath":  # noqa: ARG002
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"type": "close"}


PathSegment = Union[MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ClosePath]


def segment_from_dict(data: dict[str, Any]) -> PathSegment:
    """Deserialize a path segment from its dictionary form.

    Args:
        data: Dictionary produced by a segment's ``to_dict``

    Returns:
        The corresponding segment

    Raises:
        PathError: If the segment is not a mapping or its type is unknown
    """
    if not isinstance(data, dict):
        raise PathError(f"Path segment must be a mapping, got {data!r}")
    kind = data.get("type")
    if kind == "move":
        return MoveTo(Point.from_dict(data["point"]))
    if kind == "line":
        return LineTo(Point.from_dict(data["point"]))
    if kind == "quad":
        return QuadCurveTo(
            Point.from_dict(data["control"]),
            Point.from_dict(data["end"]),
        )
    if kind == "cubic":
        return CubicCurveTo(
            Point.from_dict(data["control1"]),
            Point.from_dict(data["control2"]),
            Point.from_dict(data["end"]),
        )
    if kind == "close":
        return ClosePath()
    raise PathError(f"Unknown path segment type: {kind!r}")


@dataclass(frozen=True)
class GlyphPath:
    """An immutable ordered sequence of path segments.

    A non-empty path must begin with MoveTo. The empty path is valid and is
    what trimming to fraction 0 produces.

    Attributes:
        segments: Ordered drawing commands
    """

    segments: tuple[PathSegment, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))
        if self.segments and not isinstance(self.segments[0], MoveTo):
            raise PathError(
                f"Path must begin with MoveTo, got {type(self.segments[0]).__name__}"
            )

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    def is_empty(self) -> bool:
        """Check if the path has no segments."""
        return not self.segments

    @property
    def first_point(self) -> Point | None:
        """Starting point of the path, or None for the empty path."""
        if not self.segments:
            return None
        return self.segments[0].end_point

    @property
    def last_point(self) -> Point | None:
        """Final drawn point of the path, ignoring trailing ClosePath."""
        for segment in reversed(self.segments):
            end = segment.end_point
            if end is not None:
                return end
        return None

    def points(self) -> list[Point]:
        """On-curve points in order (control points excluded)."""
        return [s.end_point for s in self.segments if s.end_point is not None]

    def subpaths(self) -> list["GlyphPath"]:
        """Split into subpaths, one per MoveTo."""
        result: list[GlyphPath] = []
        current: list[PathSegment] = []
        for segment in self.segments:
            if isinstance(segment, MoveTo) and current:
                result.append(GlyphPath(tuple(current)))
                current = []
            current.append(segment)
        if current:
            result.append(GlyphPath(tuple(current)))
        return result

    def scaled(self, width: float, height: float) -> "GlyphPath":
        """Scale unit-square coordinates to a canvas of the given size."""
        return GlyphPath(tuple(s.scaled(width, height) for s in self.segments))

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "GlyphPath":
        """Build a polyline path: MoveTo the first point, LineTo the rest."""
        segments: list[PathSegment] = []
        for point in points:
            segments.append(LineTo(point) if segments else MoveTo(point))
        return cls(tuple(segments))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the list of serialized segments
        """
        return {"segments": [s.to_dict() for s in self.segments]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphPath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            GlyphPath instance

        Raises:
            PathError: If a segment is malformed or the path does not start
                with MoveTo
        """
        return cls(tuple(segment_from_dict(s) for s in data["segments"]))
