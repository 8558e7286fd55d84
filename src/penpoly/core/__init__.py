"""Core conversion algorithms for penpoly.

This module contains the conversion pipeline in both directions:

- Coordinate adaptation between float32 path points and float64 vertices
- Curve flattening into straight segments at a tolerance
- Grouping of Begin/Line/End streams into contours
- Exterior/hole assembly on top of contour collections
- Emission of contours and polygons back into path commands
- Boolean set operations through the Clipper engine

All functions are:
- Pure (no side effects beyond logging)
- Synchronous and safe to call concurrently on independent inputs

Key functions:
- path_to_contours / path_to_polygon / path_to_multi_polygon
- to_path: Emit any supported shape as a path
- flattened: Lazy curve flattening
- group_contours: Begin/Line/End stream to MultiContour
- assemble_polygon / disassemble_polygon
- boolean_operation: Union, intersection, difference and xor

Key classes:
- ContourGrouper: The stateful grouping state machine
"""

from penpoly.core.adapter import to_path_point, to_polygon_coordinate
from penpoly.core.assembler import (
    assemble_multi_polygon,
    assemble_polygon,
    disassemble_multi_polygon,
    disassemble_polygon,
)
from penpoly.core.boolean import (
    boolean_operation,
    difference,
    intersection,
    union,
    xor,
)
from penpoly.core.convert import (
    path_to_contours,
    path_to_multi_polygon,
    path_to_polygon,
    points_to_contour,
    points_to_contours,
    points_to_polygon,
    to_path,
)
from penpoly.core.emitter import (
    contour_to_path,
    multi_contour_to_path,
    multi_polygon_to_path,
    polygon_to_path,
)
from penpoly.core.flatten import flattened, validate_tolerance
from penpoly.core.grouper import ContourGrouper, discard_unterminated, group_contours

__all__ = [
    # Grouper classes
    "ContourGrouper",
    # Assembler functions
    "assemble_multi_polygon",
    "assemble_polygon",
    # Boolean functions
    "boolean_operation",
    # Emitter functions
    "contour_to_path",
    "difference",
    "disassemble_multi_polygon",
    "disassemble_polygon",
    "discard_unterminated",
    # Flattening functions
    "flattened",
    "group_contours",
    "intersection",
    "multi_contour_to_path",
    "multi_polygon_to_path",
    # Conversion functions
    "path_to_contours",
    "path_to_multi_polygon",
    "path_to_polygon",
    "points_to_contour",
    "points_to_contours",
    "points_to_polygon",
    "polygon_to_path",
    "to_path",
    # Adapter functions
    "to_path_point",
    "to_polygon_coordinate",
    "union",
    "validate_tolerance",
    "xor",
]
