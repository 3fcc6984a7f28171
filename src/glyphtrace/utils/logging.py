"""Logging utilities for Glyphtrace."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from glyphtrace.domain import ScoreBreakdown


@dataclass
class SessionStats:
    """Statistics over the attempts scored in one session."""

    attempt_count: int = 0
    fallback_count: int = 0
    scores: list[float] = field(default_factory=list)

    @property
    def mean_score(self) -> float | None:
        """Mean score, or None before the first attempt."""
        if not self.scores:
            return None
        return sum(self.scores) / len(self.scores)

    @property
    def min_score(self) -> float | None:
        return min(self.scores) if self.scores else None

    @property
    def max_score(self) -> float | None:
        return max(self.scores) if self.scores else None


# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (console only if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphtrace")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ScoringLogger:
    """Logger for scored attempts that keeps session statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SessionStats()

    def log_attempt(
        self,
        glyph: str,
        breakdown: ScoreBreakdown,
        stroke_count: int,
        duration_ms: float,
    ) -> None:
        """Log a scored attempt."""
        self._stats.attempt_count += 1
        self._stats.scores.append(breakdown.score)

        if breakdown.is_fallback:
            self._stats.fallback_count += 1
            self._logger.warning(
                "Attempt had nothing to compare, fallback score used",
                glyph=glyph,
                strokes=stroke_count,
                score=breakdown.score,
                duration_ms=round(duration_ms, 2),
            )
            return

        self._logger.info(
            "Attempt scored",
            glyph=glyph,
            strokes=stroke_count,
            score=round(breakdown.score, 2),
            coverage=round(breakdown.coverage, 2),
            accuracy=round(breakdown.accuracy, 2),
            penalty=breakdown.penalty,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
