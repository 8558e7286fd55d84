"""penpoly - Convert between pen path commands and polygons.

penpoly turns drawing-command paths (move, line, quadratic and cubic
curves, close) into straight-line contours and polygons with holes, and
emits contours and polygons back as paths. Curves are flattened at a
caller-chosen tolerance. fontTools pens act as the drawing-command
source and sink, and pyclipper runs boolean operations on the results.

Example:
    from penpoly import path_to_polygon, to_path

    polygon = path_to_polygon(path, tolerance=0.1)
    round_trip = to_path(polygon)
"""

from penpoly.core import (
    path_to_contours,
    path_to_multi_polygon,
    path_to_polygon,
    to_path,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "path_to_contours",
    "path_to_multi_polygon",
    "path_to_polygon",
    "to_path",
]
