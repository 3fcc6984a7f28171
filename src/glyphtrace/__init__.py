"""Glyphtrace - Score freehand tracing against vector glyph outlines.

Glyphtrace parameterizes glyph outlines (lines and Bezier curves) by arc length
and compares a learner's freehand strokes against them, producing a single
forgiving accuracy score in the range 0-100. It also maps a demonstration
progress value onto a partially drawn glyph for "watch it drawn" playback.

Example:
    $ glyphtrace score attempt.json --glyph A

This prints the coverage, accuracy and precision metrics together with the
final score for the attempt.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
