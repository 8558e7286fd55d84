"""Shared fixtures for penpoly tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from penpoly.domain import Begin, End, Line, Path as GlyphPath, PathPoint, QuadraticCurve


def _draw_square_with_hole(pen) -> None:
    # Outer ring, clockwise (TrueType outer)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    # Hole, counter-clockwise
    pen.moveTo((200, 100))
    pen.lineTo((400, 100))
    pen.lineTo((400, 600))
    pen.lineTo((200, 600))
    pen.closePath()


def _draw_bowl(pen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.qCurveTo((500, 700), (500, 350))
    pen.qCurveTo((500, 0), (100, 0))
    pen.closePath()


def _draw_bar(pen) -> None:
    pen.moveTo((250, -100))
    pen.lineTo((250, 800))
    pen.lineTo((350, 800))
    pen.lineTo((350, -100))
    pen.closePath()


@pytest.fixture(scope="session")
def test_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Build a small TrueType font with an 'O' (square with hole), a 'D'
    (quadratic bowl) and an 'I' (vertical bar)."""
    glyphs = {}
    for name, draw in (
        (".notdef", None),
        ("O", _draw_square_with_hole),
        ("D", _draw_bowl),
        ("I", _draw_bar),
    ):
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(glyphs))
    fb.setupCharacterMap({ord("O"): "O", ord("D"): "D", ord("I"): "I"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(
        {".notdef": (500, 0), "O": (600, 100), "D": (600, 100), "I": (600, 250)}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Penpoly Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path = tmp_path_factory.mktemp("fonts") / "PenpolyTest-Regular.ttf"
    fb.save(str(path))
    return path


@pytest.fixture
def triangle_path() -> GlyphPath:
    """Single closed triangle: (0,0) -> (10,10) -> (5,20)."""
    return GlyphPath(
        events=(
            Begin(PathPoint(0.0, 0.0)),
            Line(PathPoint(10.0, 10.0)),
            Line(PathPoint(5.0, 20.0)),
            End(close=True),
        )
    )


@pytest.fixture
def curved_path() -> GlyphPath:
    """Begin, one quadratic curve, one line, End(close)."""
    return GlyphPath(
        events=(
            Begin(PathPoint(0.0, 0.0)),
            QuadraticCurve(PathPoint(10.0, 20.0), PathPoint(20.0, 0.0)),
            Line(PathPoint(10.0, -10.0)),
            End(close=True),
        )
    )
