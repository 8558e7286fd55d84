"""Domain models for penpoly.

This module contains the value types on both sides of the conversion:
path commands on one side, straight-line contours and polygons on the
other. All models are:

- Immutable (frozen, slotted dataclasses)
- Independent of fontTools and pyclipper implementation details

Key classes:
- PathPoint: A float32 point in the path domain
- Begin, Line, QuadraticCurve, CubicCurve, End: Path commands
- Path: An immutable command stream
- Coordinate: A double precision vertex in the polygon domain
- Contour: An ordered vertex sequence with an open/closed flag
- MultiContour: Ordered independent contours
- Polygon: Exterior plus holes
- MultiPolygon: Ordered polygons
"""

from penpoly.domain.contour import (
    Contour,
    Coordinate,
    MultiContour,
    MultiPolygon,
    Polygon,
    WindingDirection,
)
from penpoly.domain.path import (
    CURVE_EVENTS,
    Begin,
    CubicCurve,
    End,
    Line,
    Path,
    PathEvent,
    PathPoint,
    QuadraticCurve,
    to_single_precision,
)

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Path domain
    "PathPoint",
    "Begin",
    "Line",
    "QuadraticCurve",
    "CubicCurve",
    "End",
    "PathEvent",
    "CURVE_EVENTS",
    "Path",
    "to_single_precision",
    # Polygon domain
    "Coordinate",
    "Contour",
    "MultiContour",
    "Polygon",
    "MultiPolygon",
]
