"""Tracing accuracy scoring.

Compares a completed drawing attempt against a glyph's reference path and
produces a single forgiving score in [0, 100].

The score combines two nearest-neighbor measures:
- Coverage (reference -> user): how much of the glyph the user traced
- Accuracy (user -> reference): how much of the user's ink lies on the glyph

Using both directions stops a short, concentrated scribble from scoring well,
approximating a bidirectional (Hausdorff-like) distance with tolerance-banded
counting. Each direction is counted at a generous and a tight tolerance.
A missing-stroke penalty, a small bonus for well-centred but shifted attempts
and an upward curve for good attempts complete the score.

Traversal order is not considered: reversing or shuffling a stroke's points
does not change its score.
"""

from collections.abc import Sequence

import structlog

from glyphtrace.config import ScoringConfig
from glyphtrace.core.geometry import (
    PathGeometry,
    centroid,
    nearest_distance,
    resample_polyline,
)
from glyphtrace.domain import DrawingAttempt, GlyphPath, Point, ScoreBreakdown

logger = structlog.get_logger(__name__)


def _nearest_distances(sources: Sequence[Point], targets: Sequence[Point]) -> list[float]:
    return [nearest_distance(point, targets) for point in sources]


def _percent_within(distances: Sequence[float], tolerance: float) -> float:
    if not distances:
        return 0.0
    hits = sum(1 for d in distances if d <= tolerance)
    return 100.0 * hits / len(distances)


class AccuracyScorer:
    """Scores drawing attempts against reference glyph paths.

    The scorer is stateless and safe to share between threads. All weights,
    tolerances and thresholds come from ScoringConfig.

    Example:
        scorer = AccuracyScorer()
        score = scorer.score(attempt, glyph_path, expected_strokes=2)
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        geometry: PathGeometry | None = None,
    ) -> None:
        self.config = config or ScoringConfig()
        self.geometry = geometry or PathGeometry()

    def score(
        self,
        attempt: DrawingAttempt,
        reference_path: GlyphPath,
        expected_strokes: int | None = None,
    ) -> float:
        """Score an attempt.

        Args:
            attempt: The completed drawing attempt (canvas coordinates)
            reference_path: Glyph path in the same coordinates
            expected_strokes: Stroke count for glyphs that need a pen lift,
                or None if the glyph is drawn in one stroke

        Returns:
            Score in [0, 100]
        """
        return self.evaluate(attempt, reference_path, expected_strokes).score

    def evaluate(
        self,
        attempt: DrawingAttempt,
        reference_path: GlyphPath,
        expected_strokes: int | None = None,
    ) -> ScoreBreakdown:
        """Score an attempt and return every term of the computation.

        The reference path is sampled into arc-length-even points; the
        attempt's strokes are concatenated in recording order and reduced by
        arc-length-even resampling.

        Args:
            attempt: The completed drawing attempt (canvas coordinates)
            reference_path: Glyph path in the same coordinates
            expected_strokes: Stroke count for glyphs that need a pen lift

        Returns:
            ScoreBreakdown with the final score
        """
        reference = self.geometry.sample(reference_path, self.config.reference_samples)
        user = resample_polyline(attempt.all_points(), self.config.max_user_samples)
        return self.evaluate_points(
            reference,
            user,
            stroke_count=attempt.stroke_count,
            expected_strokes=expected_strokes,
        )

    def evaluate_points(
        self,
        reference: Sequence[Point],
        user: Sequence[Point],
        stroke_count: int = 1,
        expected_strokes: int | None = None,
    ) -> ScoreBreakdown:
        """Score already-sampled reference and user points.

        Args:
            reference: Reference points sampled from the glyph
            user: User points, already resampled
            stroke_count: Number of strokes the user drew
            expected_strokes: Stroke count for glyphs that need a pen lift

        Returns:
            ScoreBreakdown; the lenient fallback if either side is empty
        """
        cfg = self.config

        if not reference or not user:
            logger.debug(
                "Nothing to compare, using fallback score",
                reference_points=len(reference),
                user_points=len(user),
            )
            return ScoreBreakdown.fallback(cfg.fallback_score)

        forward = _nearest_distances(reference, user)
        reverse = _nearest_distances(user, reference)

        coverage = _percent_within(forward, cfg.generous_tolerance)
        precision = _percent_within(forward, cfg.tight_tolerance)
        accuracy = _percent_within(reverse, cfg.generous_tolerance)
        precision_user = _percent_within(reverse, cfg.tight_tolerance)

        penalty = self._stroke_penalty(stroke_count, expected_strokes)
        bonus = self._skew_bonus(coverage, reference, user)

        base = (
            cfg.coverage_weight * coverage
            + cfg.accuracy_weight * accuracy
            + cfg.precision_weight * precision
            + cfg.precision_user_weight * precision_user
            - penalty
            + bonus
        )
        score = max(0.0, min(100.0, self._curve(base)))

        logger.debug(
            "Attempt scored",
            coverage=round(coverage, 2),
            accuracy=round(accuracy, 2),
            precision=round(precision, 2),
            precision_user=round(precision_user, 2),
            penalty=penalty,
            bonus=round(bonus, 2),
            score=round(score, 2),
        )

        return ScoreBreakdown(
            coverage=coverage,
            accuracy=accuracy,
            precision=precision,
            precision_user=precision_user,
            penalty=penalty,
            bonus=bonus,
            base=base,
            score=score,
        )

    def _stroke_penalty(self, stroke_count: int, expected_strokes: int | None) -> float:
        """Penalty for drawing a pen-lift glyph with too few strokes."""
        if expected_strokes is None or stroke_count >= expected_strokes:
            return 0.0
        return self.config.stroke_penalty * (expected_strokes - stroke_count)

    def _skew_bonus(
        self,
        coverage: float,
        reference: Sequence[Point],
        user: Sequence[Point],
    ) -> float:
        """Bonus for a well-covered attempt whose centre is only slightly off."""
        cfg = self.config
        if coverage <= cfg.skew_coverage_threshold:
            return 0.0

        user_centre = centroid(user)
        reference_centre = centroid(reference)
        if user_centre is None or reference_centre is None:
            return 0.0

        dx = abs(user_centre.x - reference_centre.x)
        dy = abs(user_centre.y - reference_centre.y)
        if dx >= cfg.skew_max_offset or dy >= cfg.skew_max_offset:
            return 0.0

        return cfg.skew_bonus * max(0.0, 1.0 - (dx + dy) / cfg.skew_falloff)

    def _curve(self, base: float) -> float:
        """Lift good scores toward 100."""
        cfg = self.config
        if base > cfg.high_curve_threshold:
            return base + (100.0 - base) * cfg.high_curve_factor
        if base > cfg.mid_curve_threshold:
            return base + (base - cfg.mid_curve_threshold) * cfg.mid_curve_factor
        return base
