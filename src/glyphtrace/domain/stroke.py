"""Stroke types: reference stroke segments and recorded user input.

- StrokeSegment: one pen-down unit of a reference glyph, used to
  demonstrate multi-stroke glyphs
- UserStroke: points recorded during one pen-down-to-pen-up gesture
- DrawingAttempt: every stroke recorded while tracing one glyph
"""

from dataclasses import dataclass, field
from typing import Any

from glyphtrace.domain.point import Point
from glyphtrace.exceptions import PathError


@dataclass(frozen=True)
class StrokeSegment:
    """One continuous pen-down unit of a reference glyph.

    Only produced for glyphs that require a pen lift.

    Attributes:
        points: Ordered points of the segment (at least one)
        is_new_stroke: True if the pen is lifted before this segment
    """

    points: tuple[Point, ...]
    is_new_stroke: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))
        if not self.points:
            raise PathError("Stroke segment must contain at least one point")

    def scaled(self, width: float, height: float) -> "StrokeSegment":
        """Scale unit-square coordinates to a canvas of the given size."""
        return StrokeSegment(
            points=tuple(p.scaled(width, height) for p in self.points),
            is_new_stroke=self.is_new_stroke,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with points as [x, y] pairs and the pen-lift flag
        """
        return {
            "points": [list(p.to_tuple()) for p in self.points],
            "is_new_stroke": self.is_new_stroke,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeSegment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            StrokeSegment instance

        Raises:
            PathError: If the entry is not a mapping
        """
        if not isinstance(data, dict):
            raise PathError(f"Stroke segment must be a mapping, got {data!r}")
        return cls(
            points=tuple(Point(float(x), float(y)) for x, y in data["points"]),
            is_new_stroke=data.get("is_new_stroke", True),
        )


@dataclass
class UserStroke:
    """Points recorded from one pen-down-to-pen-up gesture.

    Attributes:
        points: Recorded points in canvas coordinates
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class DrawingAttempt:
    """All strokes recorded while tracing one glyph.

    Created when the user starts touching the canvas and cleared when the
    glyph changes or the canvas is wiped. Scoring reads it without
    modifying it.

    Attributes:
        strokes: Recorded strokes in the order they were drawn
    """

    strokes: list[UserStroke] = field(default_factory=list)
    _drawing: bool = field(default=False, repr=False)

    @property
    def stroke_count(self) -> int:
        """Number of recorded strokes."""
        return len(self.strokes)

    def begin_stroke(self, point: Point) -> None:
        """Start a new stroke at ``point`` (pen down)."""
        self.strokes.append(UserStroke(points=[point]))
        self._drawing = True

    def add_point(self, point: Point) -> None:
        """Extend the current stroke, starting one if the pen is up."""
        if not self._drawing:
            self.begin_stroke(point)
            return
        self.strokes[-1].points.append(point)

    def end_stroke(self) -> None:
        """Finish the current stroke (pen up)."""
        self._drawing = False

    def clear(self) -> None:
        """Discard every recorded stroke."""
        self.strokes.clear()
        self._drawing = False

    def is_empty(self) -> bool:
        """Check if no points have been recorded."""
        return not any(stroke.points for stroke in self.strokes)

    def all_points(self) -> list[Point]:
        """Points of every stroke concatenated in recording order."""
        return [point for stroke in self.strokes for point in stroke.points]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with strokes as lists of [x, y] pairs
        """
        return {
            "strokes": [
                [list(p.to_tuple()) for p in stroke.points] for stroke in self.strokes
            ]
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DrawingAttempt":
        """Deserialize from dictionary.

        Empty strokes are dropped.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            DrawingAttempt instance
        """
        strokes = [
            UserStroke(points=[Point(float(x), float(y)) for x, y in raw])
            for raw in data.get("strokes", [])
            if raw
        ]
        return cls(strokes=strokes)

    @classmethod
    def from_strokes(cls, strokes: list[list[tuple[float, float]]]) -> "DrawingAttempt":
        """Build an attempt from plain (x, y) tuples, one list per stroke."""
        return cls.from_dict({"strokes": strokes})
