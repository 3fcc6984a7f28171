"""JSON files holding recorded drawing attempts.

File layout (canvas coordinates)::

    {"strokes": [[[x, y], [x, y], ...], ...]}
"""

import json
from pathlib import Path

from glyphtrace.domain import DrawingAttempt
from glyphtrace.exceptions import AttemptLoadError


def load_attempt(path: Path) -> DrawingAttempt:
    """Load a drawing attempt from a JSON file.

    Raises:
        AttemptLoadError: If the file is missing or malformed
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise AttemptLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise AttemptLoadError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("strokes"), list):
        raise AttemptLoadError(str(path), "missing 'strokes' list")

    try:
        return DrawingAttempt.from_dict(data)
    except (TypeError, ValueError) as e:
        raise AttemptLoadError(str(path), f"malformed stroke: {e}") from e


def dump_attempt(attempt: DrawingAttempt, path: Path) -> None:
    """Write a drawing attempt to a JSON file."""
    path.write_text(json.dumps(attempt.to_dict()), encoding="utf-8")
