"""End-to-end tests running glyph outlines through the whole pipeline."""

import json
import logging

import pytest
from fontTools.pens.recordingPen import RecordingPen
from typer.testing import CliRunner

from penpoly import __version__, path_to_polygon, to_path
from penpoly.cli.app import app
from penpoly.core import (
    difference,
    disassemble_polygon,
    group_contours,
    path_to_contours,
    union,
)
from penpoly.domain import Begin, Coordinate, End, Line, Polygon, QuadraticCurve
from penpoly.io import FontReader, draw_path, recording_to_path

runner = CliRunner()


@pytest.fixture
def reader(test_font_path):
    with FontReader(test_font_path) as font_reader:
        yield font_reader


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith("penpoly-"):
            root.removeHandler(handler)
            handler.close()


class TestGlyphToPolygon:
    """Test glyph outlines converted to polygons."""

    def test_square_with_hole(self, reader: FontReader) -> None:
        """Test 'O' gives an exterior and one hole."""
        polygon = path_to_polygon(reader.get_path("O"), 0.1)

        assert len(polygon.exterior) == 4
        assert len(polygon.interiors) == 1
        assert polygon.exterior.closed
        assert polygon.area() == pytest.approx(400 * 700 - 200 * 500)
        assert Coordinate(100.0, 0.0) in polygon.exterior.coords

    def test_character_lookup(self, reader: FontReader) -> None:
        """Test glyphs can be requested by character."""
        assert reader.get_path("O") == reader.get_path(reader.resolve("O"))

    def test_quadratic_bowl(self, reader: FontReader) -> None:
        """Test 'D' keeps its curves until flattening."""
        path = reader.get_path("D")
        assert path.count(QuadraticCurve) == 2

        contours = path_to_contours(path, 0.5)
        assert len(contours) == 1
        contour = contours[0]
        assert contour.closed
        assert len(contour) > 4
        assert contour.coords[0] == Coordinate(100.0, 0.0)
        assert Coordinate(100.0, 700.0) in contour.coords
        assert Coordinate(500.0, 350.0) in contour.coords
        xmin, ymin, xmax, ymax = contour.bounding_box()
        assert (xmin, ymin) == (100.0, 0.0)
        assert xmax <= 500.0
        assert ymax == pytest.approx(700.0)

    def test_finer_tolerance_more_vertices(self, reader: FontReader) -> None:
        """Test lower tolerance gives a denser contour."""
        path = reader.get_path("D")
        coarse = path_to_contours(path, 10.0)[0]
        fine = path_to_contours(path, 0.05)[0]
        assert len(fine) > len(coarse)

    def test_empty_glyph(self, reader: FontReader) -> None:
        """Test a blank glyph gives the empty polygon."""
        assert path_to_polygon(reader.get_path(".notdef"), 0.1) == Polygon()


class TestRoundTrip:
    """Test polygons going back to paths and pens."""

    def test_polygon_to_path_and_back(self, reader: FontReader) -> None:
        """Test a flat glyph survives polygon -> path -> polygon."""
        polygon = path_to_polygon(reader.get_path("O"), 0.1)
        path = to_path(polygon)

        assert path.is_flat()
        assert path.count(Begin) == 2
        assert path_to_polygon(path, 0.1) == polygon

    def test_glyph_path_regroups(self, reader: FontReader) -> None:
        """Test contours grouped from a glyph match its disassembled polygon."""
        path = reader.get_path("O")
        polygon = path_to_polygon(path, 0.1)
        assert disassemble_polygon(polygon) == group_contours(path)

    def test_replay_onto_recording_pen(self, reader: FontReader) -> None:
        """Test a flattened polygon replays onto a fontTools pen."""
        polygon = path_to_polygon(reader.get_path("D"), 0.5)
        pen = RecordingPen()
        draw_path(to_path(polygon), pen)

        operators = [op for op, _ in pen.value]
        assert operators[0] == "moveTo"
        assert operators[-1] == "closePath"
        assert set(operators) == {"moveTo", "lineTo", "closePath"}
        assert recording_to_path(pen.value) == to_path(polygon)

    def test_triangle_emission(self) -> None:
        """Test the emitted commands of a simple closed triangle."""
        polygon = Polygon.from_dict(
            {
                "exterior": {
                    "coords": [{"x": 0, "y": 0}, {"x": 10, "y": 10}, {"x": 5, "y": 20}],
                    "closed": True,
                },
                "interiors": [],
            }
        )
        events = to_path(polygon).events
        assert [type(e) for e in events] == [Begin, Line, Line, End]
        assert events[-1].close


class TestBooleanOnGlyphs:
    """Test boolean operations between glyph outlines."""

    def test_bar_cuts_ring(self, reader: FontReader) -> None:
        """Test subtracting 'I' from 'O' splits it into two pieces."""
        ring = path_to_polygon(reader.get_path("O"), 0.1)
        bar = path_to_polygon(reader.get_path("I"), 0.1)

        result = difference(ring, bar)

        assert len(result) == 2
        assert all(p.interiors == () for p in result)
        # Each side: 150 x 700 minus the 50 x 500 slice of the hole
        assert result.area() == pytest.approx(2 * (150 * 700 - 50 * 500))

    def test_union_fills_nothing_new(self, reader: FontReader) -> None:
        """Test union of a glyph with itself keeps its shape."""
        ring = path_to_polygon(reader.get_path("O"), 0.1)
        result = union(ring, ring)
        assert len(result) == 1
        assert len(result[0].interiors) == 1
        assert result.area() == pytest.approx(ring.area())


class TestCLI:
    """Test the CLI end-to-end."""

    def test_cli_help(self) -> None:
        """Test that CLI --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.stdout
        assert "boolean" in result.stdout

    def test_cli_version(self) -> None:
        """Test that CLI --version works."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_inspect_table(self, test_font_path) -> None:
        """Test inspect lists the exterior and hole."""
        result = runner.invoke(app, ["inspect", str(test_font_path), "O"])
        assert result.exit_code == 0, result.output
        assert "exterior" in result.stdout
        assert "hole" in result.stdout
        assert "2 sub-paths" in result.stdout

    def test_inspect_json(self, test_font_path) -> None:
        """Test --json prints the assembled polygon."""
        result = runner.invoke(app, ["inspect", str(test_font_path), "O", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        polygon = Polygon.from_dict(data)
        assert len(polygon.exterior) == 4
        assert len(polygon.interiors) == 1

    def test_inspect_missing_glyph(self, test_font_path) -> None:
        """Test unknown glyphs exit with an error."""
        result = runner.invoke(app, ["inspect", str(test_font_path), "Zcaron"])
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_inspect_missing_font(self, tmp_path) -> None:
        """Test a missing font file exits with an error."""
        result = runner.invoke(app, ["inspect", str(tmp_path / "nope.ttf"), "O"])
        assert result.exit_code == 1
        assert "Input file not found" in result.stdout

    def test_inspect_bad_tolerance(self, test_font_path) -> None:
        """Test a non-positive tolerance is rejected."""
        result = runner.invoke(app, ["inspect", str(test_font_path), "O", "--tolerance", "0"])
        assert result.exit_code == 1
        assert "Invalid value" in result.stdout

    def test_inspect_unreadable_font(self, tmp_path) -> None:
        """Test a file that is not a font exits with an error."""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font")
        result = runner.invoke(app, ["inspect", str(bogus), "O"])
        assert result.exit_code == 1
        assert "Could not load font" in result.stdout

    def test_boolean_difference(self, test_font_path) -> None:
        """Test boolean difference of two glyphs."""
        result = runner.invoke(
            app, ["boolean", str(test_font_path), "O", "I", "--op", "difference"]
        )
        assert result.exit_code == 0, result.output
        assert "2 polygons" in result.stdout
        assert "Done" in result.stdout

    def test_boolean_log_file(self, test_font_path, tmp_path) -> None:
        """Test --log-file receives the run's log records."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            ["boolean", str(test_font_path), "O", "I", "--op", "union", "--log-file", str(log_file)],
        )
        assert result.exit_code == 0, result.output
        assert "Boolean operation complete" in log_file.read_text(encoding="utf-8")
