"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphtrace.domain import GlyphPath, ScoreBreakdown

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphtrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source: str, glyph_count: int) -> None:
    """Print where reference glyphs come from.

    Args:
        source: Catalog or font path, or "built-in"
        glyph_count: Number of glyphs available
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {glyph_count} glyphs")


def _score_style(score: float) -> str:
    if score >= 85:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def print_breakdown(glyph: str, breakdown: ScoreBreakdown, verbose: bool) -> None:
    """Print an attempt's score and, in verbose mode, every metric.

    Args:
        glyph: Character that was traced
        breakdown: Score breakdown from the scorer
        verbose: Whether to show the individual metrics
    """
    style = _score_style(breakdown.score)
    console.print(
        f"\n[bold {style}]{SYM_OK} {breakdown.score:.1f}[/bold {style}] "
        f"{SYM_DOT} glyph {glyph}"
    )
    if breakdown.is_fallback:
        console.print(f"  {SYM_DOT} nothing to compare, lenient default score used")
        return

    if not verbose:
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Coverage", f"{breakdown.coverage:.1f}%")
    table.add_row("Accuracy", f"{breakdown.accuracy:.1f}%")
    table.add_row("Precision", f"{breakdown.precision:.1f}%")
    table.add_row("Precision (user)", f"{breakdown.precision_user:.1f}%")
    table.add_row("Stroke penalty", f"-{breakdown.penalty:.1f}")
    table.add_row("Skew bonus", f"+{breakdown.bonus:.2f}")
    table.add_row("Base", f"{breakdown.base:.2f}")
    console.print(table)


def print_reveal(glyph: str, progress: float, path: GlyphPath, verbose: bool) -> None:
    """Print a summary of a demonstration frame.

    Args:
        glyph: Character being demonstrated
        progress: Demonstration progress
        path: Revealed partial path
        verbose: Whether to list every point
    """
    subpaths = path.subpaths()
    console.print(
        f"\n  glyph {glyph} {SYM_DOT} {progress:.0%} {SYM_DOT} "
        f"{len(subpaths)} strokes {SYM_DOT} {len(path)} segments"
    )
    end = path.last_point
    if end is not None:
        console.print(f"  pen at ({end.x:.1f}, {end.y:.1f})")
    if verbose:
        for index, subpath in enumerate(subpaths, start=1):
            points = ", ".join(f"({p.x:.1f}, {p.y:.1f})" for p in subpath.points())
            console.print(f"  {index}: {points}")


def print_glyph_table(rows: list[tuple[str, bool]]) -> None:
    """Print available glyphs and whether they need a pen lift.

    Args:
        rows: (glyph, requires pen lift) pairs
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Glyph")
    table.add_column("Pen lift")
    for glyph, pen_lift in rows:
        table.add_row(glyph, "yes" if pen_lift else "no")
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
