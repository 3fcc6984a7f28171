"""Command-line interface for glyphtrace.

This module provides the CLI using Typer with rich output.

Key features:
- Score a recorded attempt against a glyph
- Render a demonstration frame at a given progress
- List the glyphs a catalog or font provides
"""

from glyphtrace.cli.app import cli, main

__all__ = ["cli", "main"]
