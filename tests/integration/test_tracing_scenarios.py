"""End-to-end tracing scenarios over the built-in glyphs.

These tests draw attempts the way a learner would (following the outline,
wobbling, drawing strokes in another order) and check the resulting scores
and demonstration frames.
"""

import random

import pytest

from glyphtrace.catalog import builtin_catalog
from glyphtrace.config import AnimationConfig, CurveMode, GeometryConfig, GlyphTraceSettings
from glyphtrace.core import DemoPlayback, TracingEngine
from glyphtrace.core.geometry import sample_path
from glyphtrace.domain import DrawingAttempt

CANVAS = (400, 400)
GLYPHS = ["C", "H", "I", "L", "O", "T", "X"]


@pytest.fixture
def engine() -> TracingEngine:
    return TracingEngine(builtin_catalog())


def follow_outline(engine, glyph, jitter=0.0, seed=0):
    """Attempt that follows each subpath of a glyph, one stroke per subpath."""
    rng = random.Random(seed)
    strokes = []
    for subpath in engine.glyph_path(glyph, CANVAS).subpaths():
        points = sample_path(subpath, 60)
        strokes.append(
            [(p.x + rng.uniform(-jitter, jitter), p.y + rng.uniform(-jitter, jitter)) for p in points]
        )
    return DrawingAttempt.from_strokes(strokes)


class TestTracingScores:
    """Scores for realistic attempts."""

    @pytest.mark.parametrize("glyph", GLYPHS)
    def test_following_outline_scores_full_marks(self, engine, glyph):
        """Following the outline closely scores 100 for every glyph."""
        assert engine.score(follow_outline(engine, glyph), glyph, CANVAS) == pytest.approx(100.0)

    @pytest.mark.parametrize("glyph", GLYPHS)
    def test_wobbly_tracing_still_scores_well(self, engine, glyph):
        """A wobble well inside the tight tolerance keeps a high score."""
        attempt = follow_outline(engine, glyph, jitter=10.0, seed=42)
        assert engine.score(attempt, glyph, CANVAS) >= 95.0

    def test_stroke_order_does_not_matter(self, engine):
        """Drawing the stem of T before its bar scores the same."""
        attempt = follow_outline(engine, "T")
        swapped = DrawingAttempt(strokes=list(reversed(attempt.strokes)))

        assert engine.score(swapped, "T", CANVAS) == pytest.approx(
            engine.score(attempt, "T", CANVAS)
        )

    def test_half_traced_glyph_scores_lower(self, engine):
        """Tracing only part of a glyph lowers the score."""
        full = follow_outline(engine, "H")
        partial = DrawingAttempt(strokes=full.strokes[:1])

        assert engine.score(partial, "H", CANVAS) < engine.score(full, "H", CANVAS)

    def test_different_glyph_scores_low(self, engine):
        """Drawing O when asked for X scores poorly."""
        attempt = follow_outline(engine, "O")
        assert engine.score(attempt, "X", CANVAS) < 60.0

    def test_adaptive_curves(self):
        """Adaptive curve flattening scores curved glyphs the same way."""
        settings = GlyphTraceSettings(geometry=GeometryConfig(curve_mode=CurveMode.ADAPTIVE))
        engine = TracingEngine(builtin_catalog(), settings)
        assert engine.score(follow_outline(engine, "O"), "O", CANVAS) == pytest.approx(100.0)


class TestDemonstration:
    """Demonstration playback driving the engine."""

    def test_frames_grow_with_progress(self, engine):
        """Each frame of a single-stroke glyph extends the previous one."""
        config = AnimationConfig(step=0.1, loop=False)
        lengths = []
        playback = DemoPlayback(
            config,
            on_frame=lambda p: lengths.append(
                engine.geometry.arc_length(engine.animated_reveal("L", p, CANVAS))
            ),
        )
        for _ in range(12):
            playback.tick()

        assert lengths == sorted(lengths)
        full = engine.geometry.arc_length(engine.glyph_path("L", CANVAS))
        assert lengths[-1] == pytest.approx(full)

    def test_pen_lift_frames_add_strokes(self, engine):
        """Strokes of X appear one after the other."""
        counts = [
            len(engine.animated_reveal("X", p, CANVAS).subpaths())
            for p in (0.0, 0.25, 0.5, 0.75, 1.0)
        ]
        assert counts == [1, 1, 2, 2, 2]
