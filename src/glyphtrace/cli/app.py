"""CLI application entry point for glyphtrace.

This module provides the main CLI interface using Typer.
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from glyphtrace import __version__
from glyphtrace.catalog import GlyphProvider, builtin_catalog
from glyphtrace.cli.output import (
    console,
    print_breakdown,
    print_error,
    print_glyph_table,
    print_header,
    print_reveal,
    print_source_info,
    print_step,
)
from glyphtrace.config import GlyphTraceSettings, LoggingConfig
from glyphtrace.core import TracingEngine
from glyphtrace.exceptions import GlyphNotFoundError, GlyphTraceError
from glyphtrace.io import FontGlyphProvider, load_attempt, load_catalog
from glyphtrace.utils import ScoringLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphtrace",
    help="Score freehand tracing against glyph outlines and preview stroke demonstrations.",
    add_completion=False,
    no_args_is_help=True,
)

CatalogOption = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        "-c",
        help="JSON glyph catalog (default: built-in sample glyphs)",
    ),
]
FontOption = Annotated[
    Path | None,
    typer.Option(
        "--font",
        "-f",
        help="Read glyph outlines from a TTF/OTF font instead of a catalog",
    ),
]
WidthOption = Annotated[
    float,
    typer.Option("--width", help="Canvas width", min=1.0),
]
HeightOption = Annotated[
    float,
    typer.Option("--height", help="Canvas height", min=1.0),
]
GlyphOption = Annotated[
    str,
    typer.Option("--glyph", "-g", help="Character to trace", show_default=False),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print machine-readable JSON"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Verbose console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphtrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Score freehand tracing against glyph outlines."""
    settings = GlyphTraceSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"settings": settings, "logger": logger, "quiet": quiet}


@contextmanager
def _open_provider(
    catalog: Path | None, font: Path | None
) -> Iterator[tuple[GlyphProvider, str, list[str]]]:
    """Open the glyph source chosen on the command line.

    Yields:
        Tuple of (provider, source description, available glyphs)
    """
    if catalog is not None and font is not None:
        raise typer.BadParameter("Use either --catalog or --font, not both")

    if font is not None:
        with FontGlyphProvider(font) as font_provider:
            yield font_provider, str(font), font_provider.glyphs()
        return

    if catalog is not None:
        glyph_catalog = load_catalog(catalog)
        yield glyph_catalog, str(catalog), glyph_catalog.glyphs()
        return

    builtin = builtin_catalog()
    yield builtin, "built-in", builtin.glyphs()


def _check_glyph(glyph: str) -> None:
    if len(glyph) != 1:
        print_error(
            f"Invalid glyph: {glyph!r}",
            details="Pass exactly one character, e.g. --glyph A",
        )
        raise typer.Exit(code=1)


def _fail(error: Exception) -> NoReturn:
    """Print an error for a failed command and exit with code 1."""
    if isinstance(error, GlyphNotFoundError):
        print_error(str(error), details="Run 'glyphtrace glyphs' to list available glyphs.")
    elif isinstance(error, FileNotFoundError):
        print_error(str(error))
    elif isinstance(error, GlyphTraceError):
        print_error(str(error))
    else:
        print_error(f"Unexpected error: {error}")
    raise typer.Exit(code=1)


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def score(
    ctx: typer.Context,
    attempt_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with the recorded strokes",
            show_default=False,
        ),
    ],
    glyph: GlyphOption,
    catalog: CatalogOption = None,
    font: FontOption = None,
    width: WidthOption = 400.0,
    height: HeightOption = 400.0,
    json_output: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Score a recorded tracing attempt against a glyph.

    Example:
        glyphtrace score attempt.json --glyph L
    """
    _check_glyph(glyph)
    settings: GlyphTraceSettings = ctx.obj["settings"]
    quiet: bool = ctx.obj["quiet"]

    try:
        attempt = load_attempt(attempt_file)
        with _open_provider(catalog, font) as (provider, source, glyphs):
            if not quiet and not json_output:
                print_header(__version__)
                print_step("Loading glyphs")
                print_source_info(source, len(glyphs))
            engine = TracingEngine(
                provider,
                settings,
                scoring_logger=ScoringLogger(ctx.obj["logger"]),
            )
            breakdown = engine.evaluate(attempt, glyph, (width, height))
    except typer.BadParameter:
        raise
    except Exception as e:
        _fail(e)

    if json_output:
        _echo_json({"glyph": glyph, **breakdown.to_dict()})
    elif quiet:
        typer.echo(f"{breakdown.score:.1f}")
    else:
        print_breakdown(glyph, breakdown, verbose)


@app.command()
def reveal(
    ctx: typer.Context,
    glyph: GlyphOption,
    progress: Annotated[
        float,
        typer.Option(
            "--progress",
            "-p",
            help="Demonstration progress (0-1)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.5,
    catalog: CatalogOption = None,
    font: FontOption = None,
    width: WidthOption = 400.0,
    height: HeightOption = 400.0,
    json_output: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show the partially drawn glyph at a demonstration progress.

    Example:
        glyphtrace reveal --glyph T --progress 0.5
    """
    _check_glyph(glyph)
    settings: GlyphTraceSettings = ctx.obj["settings"]
    quiet: bool = ctx.obj["quiet"]

    try:
        with _open_provider(catalog, font) as (provider, _source, _glyphs):
            engine = TracingEngine(provider, settings)
            path = engine.animated_reveal(glyph, progress, (width, height))
    except typer.BadParameter:
        raise
    except Exception as e:
        _fail(e)

    if json_output:
        _echo_json({"glyph": glyph, "progress": progress, **path.to_dict()})
    elif not quiet:
        print_reveal(glyph, progress, path, verbose)


@app.command()
def glyphs(
    ctx: typer.Context,
    catalog: CatalogOption = None,
    font: FontOption = None,
    json_output: JsonOption = False,
) -> None:
    """List available glyphs and whether they need a pen lift."""
    quiet: bool = ctx.obj["quiet"]

    try:
        with _open_provider(catalog, font) as (provider, source, available):
            rows = [(g, provider.requires_pen_lift(g)) for g in available]
    except typer.BadParameter:
        raise
    except Exception as e:
        _fail(e)

    if json_output:
        _echo_json([{"glyph": g, "requires_pen_lift": lift} for g, lift in rows])
        return

    if not quiet:
        print_source_info(source, len(rows))
    print_glyph_table(rows)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
