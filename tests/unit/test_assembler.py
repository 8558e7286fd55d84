"""Unit tests for polygon assembly and emission."""

import pytest

from penpoly.core.assembler import (
    assemble_multi_polygon,
    assemble_polygon,
    disassemble_multi_polygon,
    disassemble_polygon,
)
from penpoly.core.emitter import (
    contour_to_path,
    multi_contour_to_path,
    multi_polygon_to_path,
    polygon_to_path,
)
from penpoly.core.grouper import group_contours
from penpoly.domain import (
    Begin,
    Contour,
    Coordinate,
    End,
    Line,
    MultiContour,
    MultiPolygon,
    Path,
    PathPoint,
    Polygon,
)


def ring(*points, closed=True):
    return Contour(coords=tuple(Coordinate(x, y) for x, y in points), closed=closed)


OUTER = ring((0, 0), (100, 0), (100, 100), (0, 100))
HOLE_A = ring((10, 10), (20, 10), (20, 20))
HOLE_B = ring((50, 50), (60, 50), (60, 60))


class TestAssemblePolygon:
    """Tests for assemble_polygon and disassemble_polygon."""

    def test_empty_collection(self):
        """Test an empty collection gives an empty closed exterior."""
        polygon = assemble_polygon(MultiContour())
        assert polygon.exterior == Contour(coords=(), closed=True)
        assert polygon.interiors == ()

    def test_first_is_exterior(self):
        """Test the first contour becomes the exterior."""
        polygon = assemble_polygon(MultiContour(contours=(OUTER, HOLE_A, HOLE_B)))
        assert polygon.exterior == OUTER
        assert polygon.interiors == (HOLE_A, HOLE_B)

    def test_no_geometric_check(self):
        """Test assignment is positional even if the hole is bigger."""
        polygon = assemble_polygon(MultiContour(contours=(HOLE_A, OUTER)))
        assert polygon.exterior == HOLE_A
        assert polygon.interiors == (OUTER,)

    @pytest.mark.parametrize(
        "contours",
        [(OUTER,), (OUTER, HOLE_A), (OUTER, HOLE_A, HOLE_B), (HOLE_B, HOLE_A)],
    )
    def test_round_trip(self, contours):
        """Test disassembling an assembled collection restores it."""
        collection = MultiContour(contours=contours)
        assert disassemble_polygon(assemble_polygon(collection)) == collection

    @pytest.mark.parametrize(
        "polygon",
        [
            Polygon(),
            Polygon(exterior=Contour(closed=False)),
            Polygon(exterior=OUTER),
            Polygon(exterior=OUTER, interiors=(Contour(closed=True), HOLE_A)),
        ],
    )
    def test_polygon_round_trip(self, polygon):
        """Test assembling a disassembled polygon restores it."""
        assert assemble_polygon(disassemble_polygon(polygon)) == polygon

    def test_disassemble_empty_polygon(self):
        """Test an empty polygon disassembles to its single empty ring."""
        result = disassemble_polygon(Polygon())
        assert len(result) == 1
        assert result[0].is_empty()


class TestAssembleMultiPolygon:
    """Tests for the one-polygon-per-contour assembly."""

    def test_each_contour_is_polygon(self):
        """Test every contour becomes a hole-free polygon."""
        result = assemble_multi_polygon(MultiContour(contours=(OUTER, HOLE_A)))
        assert len(result) == 2
        assert result[0] == Polygon(exterior=OUTER)
        assert all(p.interiors == () for p in result)

    def test_disassemble(self):
        """Test rings are collected polygon by polygon."""
        mp = MultiPolygon(
            polygons=(Polygon(exterior=OUTER, interiors=(HOLE_A,)), Polygon(exterior=HOLE_B))
        )
        assert disassemble_multi_polygon(mp).contours == (OUTER, HOLE_A, HOLE_B)


class TestEmitter:
    """Tests for emission back into path commands."""

    def test_triangle_emission(self):
        """Test a closed triangle emits Begin, two Lines and End(close)."""
        contour = ring((0, 0), (10, 10), (5, 20))
        path = contour_to_path(contour)
        assert path.events == (
            Begin(PathPoint(0, 0)),
            Line(PathPoint(10, 10)),
            Line(PathPoint(5, 20)),
            End(close=True),
        )

    def test_open_contour(self):
        """Test the closed flag is carried to End."""
        path = contour_to_path(ring((0, 0), (1, 1), closed=False))
        assert path.events[-1] == End(close=False)

    def test_empty_contour_emits_nothing(self):
        """Test an empty contour produces no commands."""
        assert contour_to_path(Contour()).is_empty()

    def test_contours_not_merged(self):
        """Test each contour gets its own Begin and End."""
        path = multi_contour_to_path(MultiContour(contours=(OUTER, HOLE_A)))
        assert path.count(Begin) == 2
        assert path.count(End) == 2
        assert path.count(Line) == 3 + 2

    def test_polygon_exterior_first(self):
        """Test polygons emit the exterior before the holes."""
        path = polygon_to_path(Polygon(exterior=OUTER, interiors=(HOLE_A,)))
        assert path.events[0] == Begin(PathPoint(0, 0))
        assert path.events[5] == Begin(PathPoint(10, 10))

    def test_multi_polygon(self):
        """Test multi-polygons emit every polygon in order."""
        mp = MultiPolygon(polygons=(Polygon(exterior=OUTER), Polygon(exterior=HOLE_B)))
        path = multi_polygon_to_path(mp)
        assert path.count(End) == 2

    def test_empty_multi_polygon(self):
        """Test an empty multi-polygon emits an empty path."""
        assert multi_polygon_to_path(MultiPolygon()) == Path()

    def test_group_then_emit(self, triangle_path):
        """Test grouping then emitting a closed block restores it."""
        contours = group_contours(triangle_path)
        assert multi_contour_to_path(contours) == triangle_path

    def test_emit_then_group(self):
        """Test emitting then grouping restores the contours."""
        collection = MultiContour(contours=(OUTER, HOLE_A, ring((1, 1), (2, 2), closed=False)))
        assert group_contours(multi_contour_to_path(collection)) == collection
