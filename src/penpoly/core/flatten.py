"""Curve flattening primitive.

Turns a path command stream that may hold quadratic and cubic curves into
a stream of Begin, Line and End commands only. Every curve is replaced by
one or more Line commands whose vertices lie on the curve and whose
chords stay within the requested tolerance of it.

The contour grouper treats this module as a black box and relies only on
that output contract.
"""

import logging
import math
from collections.abc import Iterable, Iterator

from penpoly.core._bezier import flatten_cubic, flatten_quadratic
from penpoly.domain import Begin, CubicCurve, End, Line, PathEvent, PathPoint, QuadraticCurve
from penpoly.exceptions import MalformedPathError, ToleranceError

logger = logging.getLogger(__name__)


def validate_tolerance(tolerance: float) -> float:
    """Check a flattening tolerance.

    Args:
        tolerance: Maximum allowed deviation between curve and chords

    Returns:
        The tolerance as a float

    Raises:
        ToleranceError: If tolerance is not a positive finite number
    """
    try:
        value = float(tolerance)
    except (TypeError, ValueError) as e:
        raise ToleranceError(tolerance) from e
    if not math.isfinite(value) or value <= 0:
        raise ToleranceError(tolerance)
    return value


def flattened(events: Iterable[PathEvent], tolerance: float) -> Iterator[PathEvent]:
    """Lazily flatten a path command stream.

    Begin, Line and End pass through unchanged. Each curve becomes Line
    commands to the subdivision points, the last of which is the curve's
    own end point.

    Args:
        events: Path commands, possibly with curves
        tolerance: Maximum distance between the curve and its chords

    Returns:
        Iterator over Begin, Line and End commands

    Raises:
        ToleranceError: If tolerance is not a positive finite number
        MalformedPathError: If a curve appears with no current point
    """
    return _flatten(events, validate_tolerance(tolerance))


def _flatten(events: Iterable[PathEvent], tolerance: float) -> Iterator[PathEvent]:
    current: PathPoint | None = None

    for event in events:
        if isinstance(event, Begin):
            current = event.at
            yield event

        elif isinstance(event, Line):
            current = event.to
            yield event

        elif isinstance(event, QuadraticCurve):
            if current is None:
                raise MalformedPathError("curve with no current point", event)
            points = flatten_quadratic(
                current.to_tuple(), event.ctrl.to_tuple(), event.to.to_tuple(), tolerance
            )
            yield from _lines_to(points[1:-1], event.to)
            current = event.to

        elif isinstance(event, CubicCurve):
            if current is None:
                raise MalformedPathError("curve with no current point", event)
            points = flatten_cubic(
                current.to_tuple(),
                event.ctrl1.to_tuple(),
                event.ctrl2.to_tuple(),
                event.to.to_tuple(),
                tolerance,
            )
            yield from _lines_to(points[1:-1], event.to)
            current = event.to

        elif isinstance(event, End):
            current = None
            yield event

        else:
            raise MalformedPathError("unknown path command", event)


def _lines_to(inner: list[tuple[float, float]], end: PathPoint) -> Iterator[Line]:
    for pt in inner:
        yield Line(PathPoint.from_tuple(pt))
    logger.debug("Flattened curve into %d segments", len(inner) + 1)
    yield Line(end)
