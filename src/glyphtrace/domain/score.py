"""Accuracy score breakdown."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ScoreBreakdown:
    """Every term that went into one accuracy score.

    Attributes:
        coverage: Percent of reference points near the user's input (generous)
        accuracy: Percent of user points near the reference (generous)
        precision: Percent of reference points near the user's input (tight)
        precision_user: Percent of user points near the reference (tight)
        penalty: Points subtracted for missing strokes
        bonus: Points added for a well-centred but shifted attempt
        base: Weighted combination before the curve adjustment
        score: Final score in [0, 100]
        is_fallback: True if there was nothing to compare and the lenient
            default score was used
    """

    coverage: float
    accuracy: float
    precision: float
    precision_user: float
    penalty: float
    bonus: float
    base: float
    score: float
    is_fallback: bool = False

    @classmethod
    def fallback(cls, score: float) -> "ScoreBreakdown":
        """Breakdown for an attempt that could not be compared."""
        return cls(
            coverage=0.0,
            accuracy=0.0,
            precision=0.0,
            precision_user=0.0,
            penalty=0.0,
            bonus=0.0,
            base=score,
            score=score,
            is_fallback=True,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return asdict(self)
