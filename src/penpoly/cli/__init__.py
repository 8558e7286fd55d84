"""Command-line interface for penpoly.

This module provides the CLI using Typer with rich output for
readable reports.

Key features:
- Flatten a glyph and list its exterior and holes
- JSON output of the assembled polygon
- Boolean operations between two glyph outlines
"""

from penpoly.cli.app import cli, main

__all__ = ["cli", "main"]
