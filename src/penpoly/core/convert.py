"""Conversion entry points between paths and polygon geometry.

Path -> geometry always runs through the flattener and then the contour
grouper. Geometry -> path is dispatched over the fixed set of shapes this
package knows about; there is no extension hook.

Functions:
- path_to_contours: Flatten and group a path
- path_to_polygon: Flatten, group and assemble exterior plus holes
- path_to_multi_polygon: Flatten, group and make each contour a polygon
- points_to_contour / points_to_contours / points_to_polygon: Already-flat
  point lists, no flattening involved
- to_path: Emit any supported shape as a path
"""

from collections.abc import Iterable, Sequence

from penpoly.core.adapter import to_path_point, to_polygon_coordinate
from penpoly.core.assembler import assemble_multi_polygon, assemble_polygon
from penpoly.core.emitter import (
    contour_to_path,
    multi_contour_to_path,
    multi_polygon_to_path,
    polygon_to_path,
)
from penpoly.core.flatten import flattened
from penpoly.core.grouper import group_contours
from penpoly.domain import (
    Begin,
    Contour,
    Coordinate,
    End,
    MultiContour,
    MultiPolygon,
    Path,
    PathEvent,
    PathPoint,
    Polygon,
)

Shape = Coordinate | Contour | MultiContour | Polygon | MultiPolygon


def path_to_contours(path: Path | Iterable[PathEvent], tolerance: float) -> MultiContour:
    """Flatten a path and group it into contours.

    Args:
        path: Path commands, curves allowed
        tolerance: Maximum deviation of the flattened chords from any curve

    Returns:
        One contour per terminated sub-path, in order

    Raises:
        ToleranceError: If tolerance is not a positive finite number
        MalformedPathError: If the command stream is broken
    """
    return group_contours(flattened(path, tolerance))


def path_to_polygon(path: Path | Iterable[PathEvent], tolerance: float) -> Polygon:
    """Flatten a path into a polygon, first sub-path as exterior.

    Args:
        path: Path commands, curves allowed
        tolerance: Maximum deviation of the flattened chords from any curve

    Returns:
        Polygon assembled from the grouped contours
    """
    return assemble_polygon(path_to_contours(path, tolerance))


def path_to_multi_polygon(path: Path | Iterable[PathEvent], tolerance: float) -> MultiPolygon:
    """Flatten a path into one hole-free polygon per sub-path."""
    return assemble_multi_polygon(path_to_contours(path, tolerance))


def points_to_contour(
    points: Sequence[PathPoint | tuple[float, float]], closed: bool
) -> Contour:
    """Build a contour from an already-flat point list.

    Points go through the path domain, so plain tuples are narrowed to
    float32 first just like recorded path points.

    Args:
        points: PathPoints or (x, y) pairs
        closed: Whether the contour is closed

    Returns:
        Contour with the widened points
    """
    coords = []
    for point in points:
        if not isinstance(point, PathPoint):
            point = PathPoint.from_tuple(point)
        coords.append(to_polygon_coordinate(point))
    return Contour(coords=tuple(coords), closed=closed)


def points_to_contours(
    points: Sequence[PathPoint | tuple[float, float]], closed: bool
) -> MultiContour:
    return MultiContour(contours=(points_to_contour(points, closed),))


def points_to_polygon(
    points: Sequence[PathPoint | tuple[float, float]], closed: bool
) -> Polygon:
    return assemble_polygon(points_to_contours(points, closed))


def to_path(shape: Shape) -> Path:
    """Emit a supported shape as path commands.

    A lone Coordinate becomes an open single-vertex sub-path.

    Args:
        shape: Coordinate, Contour, MultiContour, Polygon or MultiPolygon

    Returns:
        Path holding one sub-path per contour

    Raises:
        TypeError: For any other type
    """
    if isinstance(shape, Coordinate):
        return Path(events=(Begin(to_path_point(shape)), End(close=False)))
    if isinstance(shape, Contour):
        return contour_to_path(shape)
    if isinstance(shape, MultiContour):
        return multi_contour_to_path(shape)
    if isinstance(shape, Polygon):
        return polygon_to_path(shape)
    if isinstance(shape, MultiPolygon):
        return multi_polygon_to_path(shape)
    raise TypeError(f"Cannot convert {type(shape).__name__} to a path")
