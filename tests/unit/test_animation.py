"""Unit tests for demonstration playback.

Tests cover:
- Index-based reveal of stroke segments
- Progress mapping for single-stroke and pen-lift glyphs
- Tick-driven playback, looping and stopping
"""

import threading

import pytest

from glyphtrace.catalog import builtin_catalog
from glyphtrace.config import AnimationConfig
from glyphtrace.core.animation import (
    AnimationProgressMapper,
    DemoPlayback,
    partial_points,
    segment_reveal,
    segments_to_path,
)
from glyphtrace.domain import GlyphPath, LineTo, MoveTo, Point, StrokeSegment

POINTS = [Point(float(x), 0.0) for x in range(5)]


class TestPartialPoints:
    """Tests for partial_points."""

    def test_zero_keeps_first_point(self):
        """Nothing revealed still shows the starting point."""
        assert partial_points(POINTS, 0.0) == [POINTS[0]]

    def test_full(self):
        """Fraction 1 reveals every point."""
        assert partial_points(POINTS, 1.0) == POINTS

    def test_exact_index(self):
        """A fraction landing on a point ends at that point."""
        assert partial_points(POINTS, 0.5) == POINTS[:3]

    def test_interpolates_remainder(self):
        """The remainder adds a point toward the next one."""
        revealed = partial_points(POINTS, 0.6)
        assert len(revealed) == 4
        assert revealed[:3] == POINTS[:3]
        assert revealed[3].x == pytest.approx(2.4)

    def test_clamps(self):
        """Fractions outside [0, 1] are clamped."""
        assert partial_points(POINTS, -1.0) == [POINTS[0]]
        assert partial_points(POINTS, 3.0) == POINTS

    def test_single_point(self):
        """Single points are always fully shown."""
        assert partial_points([Point(1, 1)], 0.3) == [Point(1, 1)]


class TestSegmentReveal:
    """Tests for splitting progress between stroke segments."""

    @pytest.fixture
    def segments(self):
        return [
            StrokeSegment((Point(0, 0), Point(100, 0))),
            StrokeSegment((Point(50, 0), Point(50, 100))),
        ]

    def test_first_half_draws_first_segment(self, segments):
        """Progress 0.25 reveals half of the first segment only."""
        revealed = segment_reveal(segments, 0.25)
        assert len(revealed) == 1
        assert revealed[0].points[-1].x == pytest.approx(50.0)

    def test_second_segment_starts_at_its_share(self, segments):
        """At progress 0.5 the second segment shows only its start."""
        revealed = segment_reveal(segments, 0.5)
        assert len(revealed) == 2
        assert revealed[0].points == segments[0].points
        assert revealed[1].points == (Point(50, 0),)

    def test_complete(self, segments):
        """Progress 1 reveals every segment completely."""
        revealed = segment_reveal(segments, 1.0)
        assert [s.points for s in revealed] == [s.points for s in segments]

    def test_no_segments(self):
        """No segments reveal nothing."""
        assert segment_reveal([], 0.5) == []


class TestSegmentsToPath:
    """Tests for joining segments into a path."""

    def test_new_strokes_start_with_move(self):
        """Each new stroke starts with a MoveTo."""
        path = segments_to_path(
            [
                StrokeSegment((Point(0, 0), Point(10, 0))),
                StrokeSegment((Point(5, 0), Point(5, 10))),
            ]
        )
        kinds = [type(s) for s in path.segments]
        assert kinds == [MoveTo, LineTo, MoveTo, LineTo]

    def test_continuing_segment_uses_line(self):
        """A segment that continues the previous stroke joins with a LineTo."""
        path = segments_to_path(
            [
                StrokeSegment((Point(0, 0), Point(10, 0))),
                StrokeSegment((Point(10, 0), Point(10, 10)), is_new_stroke=False),
            ]
        )
        kinds = [type(s) for s in path.segments]
        assert kinds == [MoveTo, LineTo, LineTo, LineTo]

    def test_empty(self):
        """No segments give the empty path."""
        assert segments_to_path([]).is_empty()


class TestAnimationProgressMapper:
    """Tests for progress to partial glyph mapping."""

    def test_single_stroke_is_trimmed(self):
        """Single-stroke glyphs are trimmed by arc length."""
        path = GlyphPath.from_points([Point(0, 0), Point(100, 0)])
        partial = AnimationProgressMapper().reveal(path, 0.5)
        assert partial.last_point.x == pytest.approx(50.0)

    def test_zero_progress_is_empty(self):
        """Nothing is shown at progress 0 for single-stroke glyphs."""
        path = GlyphPath.from_points([Point(0, 0), Point(100, 0)])
        assert AnimationProgressMapper().reveal(path, 0.0).is_empty()

    def test_pen_lift_glyph_uses_segments(self):
        """Pen-lift glyphs reveal their segments in order."""
        catalog = builtin_catalog()
        segments = catalog.lookup_stroke_segments("T", (400, 400))
        path = catalog.lookup_glyph_path("T").scaled(400, 400)

        partial = AnimationProgressMapper().reveal(path, 0.5, segments)
        moves = [s for s in partial.segments if isinstance(s, MoveTo)]
        assert len(moves) == 2
        assert partial.last_point.x == pytest.approx(200.0)
        assert partial.last_point.y == pytest.approx(60.0)


class TestDemoPlaybackTicks:
    """Tests for manually driven playback ticks."""

    def test_ticks_advance_and_loop(self):
        """Progress climbs to 1 and restarts at 0 when looping."""
        playback = DemoPlayback(AnimationConfig(step=0.25, loop=True))
        values = [playback.tick() for _ in range(6)]
        assert values == [0.25, 0.5, 0.75, 1.0, 0.0, 0.25]

    def test_ticks_halt_without_loop(self):
        """Progress stays at 1 when not looping."""
        playback = DemoPlayback(AnimationConfig(step=0.25, loop=False))
        values = [playback.tick() for _ in range(6)]
        assert values == [0.25, 0.5, 0.75, 1.0, 1.0, 1.0]

    def test_step_capped_at_one(self):
        """Steps never overshoot the end."""
        playback = DemoPlayback(AnimationConfig(step=0.3, loop=False))
        values = [playback.tick() for _ in range(4)]
        assert values[-1] == 1.0

    def test_on_frame_receives_progress(self):
        """Every tick reports its progress."""
        frames = []
        playback = DemoPlayback(AnimationConfig(step=0.5), on_frame=frames.append)
        playback.tick()
        playback.tick()
        assert frames == [0.5, 1.0]

    def test_stop_resets_progress(self):
        """Stopping resets progress to 0."""
        playback = DemoPlayback(AnimationConfig(step=0.25))
        playback.tick()
        playback.stop()
        assert playback.progress == 0.0


class TestDemoPlaybackThread:
    """Tests for the background tick thread."""

    @staticmethod
    def _playback_threads():
        return [
            t for t in threading.enumerate()
            if t.name == "glyphtrace-demo-playback" and t.is_alive()
        ]

    def test_start_and_stop(self):
        """Playback ticks in the background until stopped."""
        first_frame = threading.Event()
        playback = DemoPlayback(
            AnimationConfig(tick_interval=0.001, step=0.01),
            on_frame=lambda _: first_frame.set(),
        )

        playback.start()
        assert first_frame.wait(timeout=5)
        assert playback.is_running

        playback.stop()
        assert not playback.is_running
        assert playback.progress == 0.0

    def test_restart_keeps_single_thread(self):
        """Starting again replaces the running tick thread."""
        playback = DemoPlayback(AnimationConfig(tick_interval=0.001, step=0.01))

        playback.start()
        playback.start()
        assert len(self._playback_threads()) == 1

        playback.stop()
        assert self._playback_threads() == []

    def test_concurrent_starts_leave_no_orphan_thread(self):
        """Overlapping start() calls never leave an untracked tick thread."""
        playback = DemoPlayback(AnimationConfig(tick_interval=0.001, step=0.01))
        barrier = threading.Barrier(4)
        errors = []

        def worker():
            barrier.wait()
            try:
                playback.start()
            except Exception as e:
                errors.append(e)

        workers = [threading.Thread(target=worker) for _ in range(4)]
        for w in workers:
            w.start()
        for w in workers:
            w.join(timeout=5)

        assert errors == []
        assert len(self._playback_threads()) == 1

        playback.stop()
        assert self._playback_threads() == []

    def test_concurrent_start_and_stop(self):
        """stop() racing start() neither raises nor leaks a thread."""
        playback = DemoPlayback(AnimationConfig(tick_interval=0.001, step=0.01))
        barrier = threading.Barrier(4)
        errors = []

        def worker(action):
            barrier.wait()
            try:
                action()
            except Exception as e:
                errors.append(e)

        actions = [playback.start, playback.stop, playback.start, playback.stop]
        workers = [threading.Thread(target=worker, args=(a,)) for a in actions]
        for w in workers:
            w.start()
        for w in workers:
            w.join(timeout=5)

        assert errors == []
        playback.stop()
        assert self._playback_threads() == []
        assert playback.progress == 0.0

    def test_stop_from_frame_callback(self):
        """A frame callback can stop playback without deadlocking."""
        holder = {}

        def on_frame(_):
            holder["playback"].stop()

        playback = DemoPlayback(
            AnimationConfig(tick_interval=0.001, step=0.01), on_frame=on_frame
        )
        holder["playback"] = playback
        playback.start()

        thread = playback._thread
        assert thread is not None
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert playback.progress == 0.0

        playback.stop()
        assert self._playback_threads() == []

    def test_non_looping_playback_finishes_at_one(self):
        """Without looping the thread exits once progress reaches 1."""
        done = threading.Event()

        def on_frame(value):
            if value >= 1.0:
                done.set()

        playback = DemoPlayback(
            AnimationConfig(tick_interval=0.001, step=0.25, loop=False),
            on_frame=on_frame,
        )
        playback.start()
        assert done.wait(timeout=5)

        thread = playback._thread
        assert thread is not None
        thread.join(timeout=5)
        assert not playback.is_running
        assert playback.progress == 1.0

        playback.stop()
        assert playback.progress == 0.0
