"""Polygon structure on top of contour collections.

The exterior/hole split is positional: the first contour is the exterior
and every following contour is a hole. No containment or winding check is
made, so a collection whose first contour is not the outer boundary yields
a polygon that is structurally valid but geometrically wrong.
"""

from penpoly.domain import Contour, MultiContour, MultiPolygon, Polygon


def assemble_polygon(contours: MultiContour) -> Polygon:
    """Build a polygon from a contour collection.

    Args:
        contours: Contours in encounter order

    Returns:
        Polygon with the first contour as exterior and the rest as holes.
        An empty collection gives an empty closed exterior and no holes.
    """
    if contours.is_empty():
        return Polygon(exterior=Contour(coords=(), closed=True), interiors=())

    exterior, *interiors = contours.contours
    return Polygon(exterior=exterior, interiors=tuple(interiors))


def disassemble_polygon(polygon: Polygon) -> MultiContour:
    """Flatten a polygon into its rings, exterior first.

    Args:
        polygon: Polygon to split

    Returns:
        MultiContour of the exterior followed by the holes in order
    """
    return MultiContour(contours=(polygon.exterior, *polygon.interiors))


def assemble_multi_polygon(contours: MultiContour) -> MultiPolygon:
    """Make every contour its own hole-free polygon."""
    return MultiPolygon(
        polygons=tuple(Polygon(exterior=contour, interiors=()) for contour in contours)
    )


def disassemble_multi_polygon(polygons: MultiPolygon) -> MultiContour:
    """Collect every ring of every polygon, polygon by polygon."""
    return MultiContour(
        contours=tuple(ring for polygon in polygons for ring in polygon.rings())
    )
