"""Bridges between fontTools pens and penpoly paths.

fontTools pens are the drawing-command builder: anything that can draw
onto a pen (glyphs, SVG path parsers, other pens) can be recorded into a
Path, and any Path can be replayed onto any segment pen.

Pen calls map onto path commands as:
- moveTo -> Begin
- lineTo -> Line
- qCurveTo -> QuadraticCurve (TrueType implied on-curve points are
  decomposed first)
- curveTo -> CubicCurve (super-beziers are decomposed first)
- closePath -> End(close=True)
- endPath -> End(close=False)
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from penpoly.domain import (
    Begin,
    CubicCurve,
    End,
    Line,
    Path,
    PathEvent,
    PathPoint,
    QuadraticCurve,
)


class PathEventPen(BasePen):
    """Pen that records drawing calls as path commands.

    Components are decomposed through ``glyphSet`` when one is given.

    Example:
        pen = PathEventPen(font.getGlyphSet())
        font.getGlyphSet()["O"].draw(pen)
        path = pen.path
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.events: list[PathEvent] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.events.append(Begin(PathPoint.from_tuple(pt)))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.events.append(Line(PathPoint.from_tuple(pt)))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.events.append(QuadraticCurve(PathPoint.from_tuple(pt1), PathPoint.from_tuple(pt2)))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.events.append(
            CubicCurve(
                PathPoint.from_tuple(pt1),
                PathPoint.from_tuple(pt2),
                PathPoint.from_tuple(pt3),
            )
        )

    def _closePath(self) -> None:
        self.events.append(End(close=True))

    def _endPath(self) -> None:
        self.events.append(End(close=False))

    @property
    def path(self) -> Path:
        """The commands recorded so far, as an immutable Path."""
        return Path(events=tuple(self.events))


def draw_path(path: Path, pen: Any) -> None:
    """Replay a path onto a fontTools segment pen.

    Args:
        path: Path to draw
        pen: Any object implementing the fontTools pen protocol
    """
    for event in path:
        if isinstance(event, Begin):
            pen.moveTo(event.at.to_tuple())
        elif isinstance(event, Line):
            pen.lineTo(event.to.to_tuple())
        elif isinstance(event, QuadraticCurve):
            pen.qCurveTo(event.ctrl.to_tuple(), event.to.to_tuple())
        elif isinstance(event, CubicCurve):
            pen.curveTo(event.ctrl1.to_tuple(), event.ctrl2.to_tuple(), event.to.to_tuple())
        elif isinstance(event, End):
            if event.close:
                pen.closePath()
            else:
                pen.endPath()


def recording_to_path(recording: list[tuple[str, tuple[Any, ...]]]) -> Path:
    """Convert a RecordingPen value into a Path.

    Args:
        recording: List of (operator, operands) tuples

    Returns:
        Path with the same drawing
    """
    pen = PathEventPen()
    for operator, operands in recording:
        getattr(pen, operator)(*operands)
    return pen.path
