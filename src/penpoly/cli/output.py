"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

from penpoly.domain import (
    Begin,
    Contour,
    CubicCurve,
    End,
    Line,
    MultiPolygon,
    Path,
    Polygon,
    QuadraticCurve,
)

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
    console.print(f"\n[bold]penpoly[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_path_summary(name: str, path: Path) -> None:
    """Print command counts for a path.

    Args:
        name: Glyph name the path was read from
        path: Recorded path
    """
    subpaths = path.count(End)
    console.print(
        f"  [bold]{name}[/bold] {SYM_DOT} {subpaths} sub-paths {SYM_DOT} {len(path)} commands"
    )
    console.print(
        f"  {path.count(Begin)} begin {SYM_DOT} {path.count(Line)} line {SYM_DOT} "
        f"{path.count(QuadraticCurve)} quadratic {SYM_DOT} {path.count(CubicCurve)} cubic"
    )


def _winding(contour: Contour) -> str:
    direction = contour.direction
    if direction is None:
        return "-"
    return direction.name.lower().replace("_", "-")


def contour_table(polygon: Polygon, title: str | None = None) -> Table:
    """Build a table describing every ring of a polygon.

    Args:
        polygon: Polygon to describe
        title: Optional table title

    Returns:
        Rich table with one row per ring
    """
    table = Table(title=title, show_edge=False, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Role")
    table.add_column("Vertices", justify="right")
    table.add_column("Closed")
    table.add_column("Winding")
    table.add_column("Area", justify="right")

    for idx, ring in enumerate(polygon.rings()):
        role = "exterior" if idx == 0 else "hole"
        table.add_row(
            str(idx),
            role,
            str(len(ring)),
            SYM_OK if ring.closed else "",
            _winding(ring),
            f"{abs(ring.signed_area()):,.1f}",
        )
    return table


def print_polygon(polygon: Polygon, title: str | None = None) -> None:
    console.print(contour_table(polygon, title=title))


def print_multi_polygon(polygons: MultiPolygon) -> None:
    """Print each polygon of a boolean result.

    Args:
        polygons: Result polygons
    """
    console.print(
        f"  [green]{len(polygons)}[/green] polygons {SYM_DOT} total area {polygons.area():,.1f}"
    )
    for idx, polygon in enumerate(polygons):
        print_polygon(polygon, title=f"Polygon {idx}")


def print_json(data: dict) -> None:
    """Print a dictionary as JSON without Rich markup processing."""
    console.print_json(json.dumps(data))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_success(message: str) -> None:
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
