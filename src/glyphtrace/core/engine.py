"""Tracing engine: the entry point rendering and app layers call into.

Wires a glyph provider to the geometry, scorer and animation mapper. The
provider and canvas size are passed explicitly; the engine keeps no state
between calls besides optional session statistics.
"""

import time

from glyphtrace.catalog import CanvasSize, GlyphProvider
from glyphtrace.config import GlyphTraceSettings, get_default_settings
from glyphtrace.core.animation import AnimationProgressMapper
from glyphtrace.core.geometry import PathGeometry
from glyphtrace.core.scorer import AccuracyScorer
from glyphtrace.domain import DrawingAttempt, GlyphPath, ScoreBreakdown
from glyphtrace.utils import ScoringLogger


class TracingEngine:
    """Scores tracing attempts and renders demonstration frames.

    Example:
        engine = TracingEngine(builtin_catalog())
        score = engine.score(attempt, "L", (400, 400))
        frame = engine.animated_reveal("T", 0.5, (400, 400))
    """

    def __init__(
        self,
        provider: GlyphProvider,
        settings: GlyphTraceSettings | None = None,
        scoring_logger: ScoringLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            provider: Source of reference glyphs
            settings: Geometry, scoring and animation settings
            scoring_logger: Optional logger that records every scored attempt
        """
        self.provider = provider
        self.settings = settings or get_default_settings()
        self.geometry = PathGeometry(self.settings.geometry)
        self.scorer = AccuracyScorer(self.settings.scoring, self.geometry)
        self.mapper = AnimationProgressMapper(self.geometry)
        self.scoring_logger = scoring_logger

    def glyph_path(self, glyph: str, canvas_size: CanvasSize) -> GlyphPath:
        """Reference path of a glyph scaled to the canvas.

        Raises:
            GlyphNotFoundError: If the provider does not know the glyph
        """
        width, height = canvas_size
        return self.provider.lookup_glyph_path(glyph).scaled(width, height)

    def expected_strokes(self, glyph: str, canvas_size: CanvasSize) -> int | None:
        """Number of strokes a pen-lift glyph needs, or None."""
        if not self.provider.requires_pen_lift(glyph):
            return None
        segments = self.provider.lookup_stroke_segments(glyph, canvas_size)
        return len(segments) if segments else None

    def evaluate(
        self,
        attempt: DrawingAttempt,
        glyph: str,
        canvas_size: CanvasSize,
    ) -> ScoreBreakdown:
        """Score a completed attempt and return every term of the score.

        Args:
            attempt: Strokes in canvas coordinates
            glyph: Character being traced
            canvas_size: (width, height) of the drawing canvas

        Returns:
            ScoreBreakdown for the attempt

        Raises:
            GlyphNotFoundError: If the provider does not know the glyph
        """
        start_time = time.time()

        breakdown = self.scorer.evaluate(
            attempt,
            self.glyph_path(glyph, canvas_size),
            expected_strokes=self.expected_strokes(glyph, canvas_size),
        )

        if self.scoring_logger is not None:
            self.scoring_logger.log_attempt(
                glyph,
                breakdown,
                stroke_count=attempt.stroke_count,
                duration_ms=(time.time() - start_time) * 1000,
            )
        return breakdown

    def score(
        self,
        attempt: DrawingAttempt,
        glyph: str,
        canvas_size: CanvasSize,
    ) -> float:
        """Score a completed attempt.

        Returns:
            Accuracy score in [0, 100]
        """
        return self.evaluate(attempt, glyph, canvas_size).score

    def animated_reveal(
        self,
        glyph: str,
        progress: float,
        canvas_size: CanvasSize,
    ) -> GlyphPath:
        """Partially drawn glyph for demonstration playback.

        Pen-lift glyphs reveal their stroke segments one after another;
        single-stroke glyphs are trimmed by arc length.

        Args:
            glyph: Character being demonstrated
            progress: Demonstration progress in [0, 1]
            canvas_size: (width, height) of the drawing canvas

        Returns:
            Renderable partial path in canvas coordinates
        """
        segments = None
        if self.provider.requires_pen_lift(glyph):
            segments = self.provider.lookup_stroke_segments(glyph, canvas_size)
        return self.mapper.reveal(self.glyph_path(glyph, canvas_size), progress, segments)
