"""Demonstration playback: progress scalar to partially drawn glyph.

The mapping from a progress value in [0, 1] to renderable geometry is a pure
function, recomputed by whatever render loop the caller runs. Multi-stroke
glyphs split progress evenly between their stroke segments and reveal each
segment by point index; single-stroke glyphs are trimmed by arc length.

DemoPlayback is the only stateful element: it advances the progress value on
a periodic tick, loops back to 0 after reaching the end, and owns at most one
tick thread at a time.
"""

import math
import threading
from collections.abc import Callable, Sequence

import structlog

from glyphtrace.config import AnimationConfig
from glyphtrace.core.geometry import PathGeometry
from glyphtrace.domain import GlyphPath, LineTo, MoveTo, PathSegment, Point, StrokeSegment

logger = structlog.get_logger(__name__)


def partial_points(points: Sequence[Point], fraction: float) -> list[Point]:
    """Reveal a fraction of a point sequence, keyed by point index.

    Keeps points ``0..floor(fraction * (n - 1))`` and appends a point
    interpolated toward the next one for the remainder.

    Args:
        points: Points of one stroke segment
        fraction: Local reveal fraction, clamped to [0, 1]

    Returns:
        The revealed points (at least the first point)
    """
    fraction = max(0.0, min(1.0, fraction))
    if len(points) <= 1:
        return list(points)

    position = fraction * (len(points) - 1)
    last_full = math.floor(position)
    revealed = list(points[: last_full + 1])

    remainder = position - last_full
    if remainder > 0.0 and last_full + 1 < len(points):
        revealed.append(points[last_full].lerp(points[last_full + 1], remainder))
    return revealed


def segment_reveal(segments: Sequence[StrokeSegment], progress: float) -> list[StrokeSegment]:
    """Map global progress onto the visible part of each stroke segment.

    With N segments each gets an equal share ``1 / N`` of the progress range.
    Segment ``i`` appears once progress reaches ``i / N`` and is revealed by
    ``clamp((progress - i / N) * N, 0, 1)``.

    Args:
        segments: Stroke segments in drawing order
        progress: Global progress, clamped to [0, 1]

    Returns:
        Partially revealed segments; segments not yet started are omitted
    """
    if not segments:
        return []

    progress = max(0.0, min(1.0, progress))
    share = 1.0 / len(segments)
    revealed: list[StrokeSegment] = []

    for index, segment in enumerate(segments):
        start = index * share
        if progress < start:
            break
        local = max(0.0, min(1.0, (progress - start) / share))
        revealed.append(
            StrokeSegment(
                points=tuple(partial_points(segment.points, local)),
                is_new_stroke=segment.is_new_stroke,
            )
        )
    return revealed


def segments_to_path(segments: Sequence[StrokeSegment]) -> GlyphPath:
    """Join stroke segments into a renderable path.

    A segment flagged ``is_new_stroke`` starts with a MoveTo; otherwise it
    continues from the previous segment with a LineTo.
    """
    commands: list[PathSegment] = []
    for segment in segments:
        first, *rest = segment.points
        if segment.is_new_stroke or not commands:
            commands.append(MoveTo(first))
        else:
            commands.append(LineTo(first))
        commands.extend(LineTo(p) for p in rest)
    return GlyphPath(tuple(commands))


class AnimationProgressMapper:
    """Converts demonstration progress into a partial glyph.

    Stateless; a single instance can serve every glyph.
    """

    def __init__(self, geometry: PathGeometry | None = None) -> None:
        self.geometry = geometry or PathGeometry()

    def reveal(
        self,
        path: GlyphPath,
        progress: float,
        segments: Sequence[StrokeSegment] | None = None,
    ) -> GlyphPath:
        """Partial glyph for the given progress.

        Args:
            path: Full glyph path in canvas coordinates
            progress: Demonstration progress in [0, 1]
            segments: Stroke segments for glyphs that need a pen lift, or
                None for single-stroke glyphs

        Returns:
            Renderable partial path
        """
        if segments:
            return segments_to_path(segment_reveal(segments, progress))
        return self.geometry.trim(path, progress)


class DemoPlayback:
    """Tick-driven demonstration progress.

    ``start()`` plays from 0, each tick advances progress by ``step`` up to 1,
    and the tick after reaching 1 restarts at 0 when looping (otherwise the
    tick thread exits and progress stays at 1). ``stop()`` halts the tick and
    resets progress to 0. Starting again always cancels the previous tick
    thread first.

    Example:
        playback = DemoPlayback(on_frame=lambda p: render(mapper.reveal(path, p)))
        playback.start()
        ...
        playback.stop()
    """

    def __init__(
        self,
        config: AnimationConfig | None = None,
        on_frame: Callable[[float], None] | None = None,
    ) -> None:
        self.config = config or AnimationConfig()
        self._on_frame = on_frame
        self._lock = threading.Lock()
        self._restart_lock = threading.Lock()
        self._tick_local = threading.local()
        self._progress = 0.0
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None

    @property
    def progress(self) -> float:
        """Current progress in [0, 1]."""
        with self._lock:
            return self._progress

    @property
    def is_running(self) -> bool:
        """True while a tick thread is alive."""
        with self._lock:
            thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        """Start playback from 0, replacing any running tick thread."""
        with self._restart_lock:
            self._halt()

            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(stop_event,),
                name="glyphtrace-demo-playback",
                daemon=True,
            )
            thread.start()
            with self._lock:
                self._stop_event = stop_event
                self._thread = thread

        logger.debug("Playback started", interval=self.config.tick_interval)

    def stop(self) -> None:
        """Halt the tick and reset progress to 0."""
        tick_event = getattr(self._tick_local, "stop_event", None)
        if tick_event is not None:
            # Called from a frame callback; a start() holding the restart
            # lock may be joining this thread.
            tick_event.set()
            with self._lock:
                self._progress = 0.0
            return

        with self._restart_lock:
            self._halt()

    def _halt(self) -> None:
        """Stop and join the tick thread, then reset progress.

        Must be called with the restart lock held.
        """
        with self._lock:
            stop_event, thread = self._stop_event, self._thread
            self._stop_event = None
            self._thread = None

        if stop_event is not None:
            stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join()
            logger.debug("Playback stopped")

        # Reset after the join so a tick in flight cannot overwrite it
        with self._lock:
            self._progress = 0.0

    def tick(self) -> float:
        """Advance progress by one step.

        Returns:
            The new progress value
        """
        with self._lock:
            if self._progress >= 1.0:
                if self.config.loop:
                    self._progress = 0.0
            else:
                self._progress = min(1.0, self._progress + self.config.step)
            value = self._progress

        if self._on_frame is not None:
            self._on_frame(value)
        return value

    def _run(self, stop_event: threading.Event) -> None:
        self._tick_local.stop_event = stop_event
        while not stop_event.wait(self.config.tick_interval):
            value = self.tick()
            if value >= 1.0 and not self.config.loop:
                break
