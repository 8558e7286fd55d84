"""CLI application entry point for penpoly.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from penpoly import __version__
from penpoly.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_json,
    print_multi_polygon,
    print_path_summary,
    print_polygon,
    print_step,
    print_success,
)
from penpoly.config import (
    BooleanConfig,
    BooleanOp,
    FlattenConfig,
    LoggingConfig,
    PenpolySettings,
)
from penpoly.core import ContourGrouper, assemble_polygon, boolean_operation, flattened
from penpoly.domain import Path as GlyphPath
from penpoly.domain import Polygon
from penpoly.exceptions import FontLoadError, GlyphNotFoundError, PenpolyError
from penpoly.io import FontReader
from penpoly.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="penpoly",
    help="Inspect glyph outlines as flattened contours and polygons.",
    add_completion=False,
    no_args_is_help=True,
)

FontArgument = Annotated[
    Path,
    typer.Argument(help="Path to input TTF/OTF font file", show_default=False),
]
ToleranceOption = Annotated[
    float,
    typer.Option(
        "--tolerance",
        "-t",
        help="Maximum distance between a curve and its flattened chords",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]penpoly[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Convert glyph outlines between path commands and polygons."""


def _check_font_path(font: Path) -> None:
    if not font.exists():
        print_error(
            f"Input file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font.is_file():
        print_error(
            f"Input path is not a file: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)


def _build_settings(
    tolerance: float,
    log_file: Path | None,
    log_level: str,
    scale: float | None = None,
) -> PenpolySettings:
    """Build settings from CLI options, exiting on invalid values."""
    try:
        return PenpolySettings(
            flatten=FlattenConfig(tolerance=tolerance),
            boolean=BooleanConfig() if scale is None else BooleanConfig(scale_factor=scale),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        print_error(f"Invalid value for {field}", details=error["msg"])
        raise typer.Exit(code=1) from None


def _flatten_path(path: GlyphPath, tolerance: float) -> tuple[Polygon, int]:
    """Flatten and assemble one glyph outline.

    Returns:
        The assembled polygon and the number of abandoned sub-paths
    """
    grouper = ContourGrouper()
    grouper.feed(flattened(path, tolerance))
    return assemble_polygon(grouper.finish()), grouper.abandoned


@app.command()
def inspect(
    font: FontArgument,
    glyph: Annotated[
        str,
        typer.Argument(help="Glyph name or single character", show_default=False),
    ],
    tolerance: ToleranceOption = 0.1,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the assembled polygon as JSON"),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Flatten one glyph and show its contours.

    The first contour is reported as the exterior and every other contour
    as a hole, whatever their geometry.

    Example:
        penpoly inspect Roboto-Regular.ttf O --tolerance 0.5
    """
    _check_font_path(font)
    settings = _build_settings(tolerance, log_file, log_level)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        reader = FontReader(font)
        reader.load()
        try:
            path = reader.get_path(glyph)
            polygon, abandoned = _flatten_path(path, settings.flatten.tolerance)

            if as_json:
                print_json(polygon.to_dict())
                return

            print_header(__version__)
            print_step("Loading font")
            print_font_info(
                font_path=str(font),
                font_type=reader.format,
                glyph_count=reader.glyph_count,
                upm=reader.units_per_em,
            )
        finally:
            reader.close()

        print_step(f"Flattening (tolerance {settings.flatten.tolerance})")
        print_path_summary(glyph, path)
        print_polygon(polygon)
        if abandoned:
            print_error(f"{abandoned} unterminated sub-paths were discarded")
        logger.info(
            "Glyph inspected",
            glyph=glyph,
            rings=len(polygon.interiors) + 1,
            abandoned=abandoned,
        )

    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except PenpolyError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def boolean(
    font: FontArgument,
    subject: Annotated[str, typer.Argument(help="Subject glyph", show_default=False)],
    clip: Annotated[str, typer.Argument(help="Clip glyph", show_default=False)],
    op: Annotated[
        BooleanOp,
        typer.Option("--op", "-o", help="Boolean operation", case_sensitive=False),
    ] = BooleanOp.DIFFERENCE,
    tolerance: ToleranceOption = 0.1,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="Scale factor applied before integer clipping",
        ),
    ] = 1000.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Run a boolean operation between two glyph outlines.

    Example:
        penpoly boolean Roboto-Regular.ttf O I --op difference
    """
    _check_font_path(font)
    settings = _build_settings(tolerance, log_file, log_level, scale=scale)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        print_header(__version__)
        print_step("Loading font")
        reader = FontReader(font)
        reader.load()
        try:
            print_font_info(
                font_path=str(font),
                font_type=reader.format,
                glyph_count=reader.glyph_count,
                upm=reader.units_per_em,
            )
            subject_polygon, _ = _flatten_path(reader.get_path(subject), settings.flatten.tolerance)
            clip_polygon, _ = _flatten_path(reader.get_path(clip), settings.flatten.tolerance)
        finally:
            reader.close()

        print_step(f"{op.value.capitalize()} of {subject} and {clip}")
        result = boolean_operation(
            subject_polygon,
            clip_polygon,
            op,
            scale_factor=settings.boolean.scale_factor,
            fill_rule=settings.boolean.fill_rule,
        )
        print_multi_polygon(result)
        print_success("Done")
        logger.info("Boolean operation complete", op=op.value, polygons=len(result))

    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except PenpolyError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
