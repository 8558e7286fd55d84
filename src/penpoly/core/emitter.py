"""Serialization of contours and polygons back into path commands.

Each contour becomes its own Begin ... End sub-path. Commands are never
merged across contour boundaries. A polygon is emitted as its exterior
followed by its holes; the resulting stream does not say which sub-path
was the exterior, so reading it back relies on the first-is-exterior
convention of the assembler.
"""

from penpoly.core.adapter import to_path_point
from penpoly.domain import (
    Begin,
    Contour,
    End,
    Line,
    MultiContour,
    MultiPolygon,
    Path,
    PathEvent,
    Polygon,
)


def contour_to_path(contour: Contour) -> Path:
    """Emit one contour as a sub-path.

    Args:
        contour: Contour to emit

    Returns:
        Begin at the first vertex, Line to each following vertex, then End
        with the contour's closed flag. Empty for an empty contour.
    """
    if contour.is_empty():
        return Path()

    first, *rest = contour.coords
    events: list[PathEvent] = [Begin(to_path_point(first))]
    events.extend(Line(to_path_point(coord)) for coord in rest)
    events.append(End(close=contour.closed))
    return Path(events=tuple(events))


def multi_contour_to_path(contours: MultiContour) -> Path:
    """Emit every contour as an independent sub-path, in order."""
    return Path.concatenate(*(contour_to_path(contour) for contour in contours))


def polygon_to_path(polygon: Polygon) -> Path:
    """Emit the exterior then each hole, each as its own sub-path."""
    return Path.concatenate(*(contour_to_path(ring) for ring in polygon.rings()))


def multi_polygon_to_path(polygons: MultiPolygon) -> Path:
    return Path.concatenate(*(polygon_to_path(polygon) for polygon in polygons))
