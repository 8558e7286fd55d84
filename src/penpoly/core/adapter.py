"""Conversion of single points between the path and polygon domains.

Path points are float32, polygon coordinates are float64. Widening is
exact. Narrowing rounds to the nearest float32, so a coordinate that
travels polygon -> path -> polygon only comes back approximately equal.
That precision loss is expected and is not reported.
"""

from penpoly.domain import Coordinate, PathPoint


def to_polygon_coordinate(p: PathPoint) -> Coordinate:
    """Widen a path point to a polygon coordinate."""
    return Coordinate(float(p.x), float(p.y))


def to_path_point(c: Coordinate) -> PathPoint:
    """Narrow a polygon coordinate to a float32 path point."""
    return PathPoint(c.x, c.y)
