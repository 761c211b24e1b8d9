"""Tests for SVG conversion and writing."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from identitrace.core.outliner import outline_cells
from identitrace.domain import Cell, Edge, Identicon, OccupancyGrid, OutlinePath
from identitrace.exceptions import SvgWriteError
from identitrace.io import SvgWriter, outline_to_vertices, path_to_d

SVG_NS = "{http://www.w3.org/2000/svg}"


def bar_path() -> OutlinePath:
    """Outline of two cells side by side."""
    edges = (
        Edge((0, 1), (0, 0)),
        Edge((0, 0), (1, 0)),
        Edge((1, 0), (2, 0)),
        Edge((2, 0), (2, 1)),
        Edge((2, 1), (1, 1)),
        Edge((1, 1), (0, 1)),
    )
    return OutlinePath(edges=edges, component_index=0, loop_lengths=(6,))


@pytest.fixture
def identicon() -> Identicon:
    """A 3x3 identicon with a ring in the foreground."""
    foreground = OccupancyGrid.from_flags([1, 1, 1, 1, 0, 1, 1, 1, 1], 3)
    background = foreground.complement()
    return Identicon(
        text="ring",
        size=3,
        fg_color="#112233",
        bg_color="#eeddcc",
        opacity=0.5,
        padding=4,
        foreground=foreground,
        background=background,
        fg_paths=outline_cells(foreground.cells, 3),
        bg_paths=outline_cells(background.cells, 3),
    )


class TestConverter:
    """Tests for outline_to_vertices and path_to_d."""

    def test_scaled_vertices(self) -> None:
        """Test scaling without simplification."""
        vertices = outline_to_vertices(bar_path(), scale=10, merge_collinear=False)
        assert vertices == [(0, 10), (0, 0), (10, 0), (20, 0), (20, 10), (10, 10)]

    def test_merge_collinear(self) -> None:
        """Test that straight runs collapse."""
        vertices = outline_to_vertices(bar_path(), scale=20, offset=5)
        assert vertices == [(5, 25), (5, 5), (45, 5), (45, 25)]

    def test_path_to_d(self) -> None:
        """Test path data formatting."""
        assert path_to_d([(0, 0), (20, 0), (20, 20)]) == "M 0 0 L 20 0 L 20 20 z"
        assert path_to_d([]) == ""


class TestSvgWriter:
    """Tests for SvgWriter."""

    def test_preamble(self, identicon: Identicon) -> None:
        """Test the opening tag and view box."""
        svg = SvgWriter(scale=20).render(identicon)
        assert svg.startswith(
            '<svg version="1.1" width="20mm" height="20mm" viewBox="0 0 68 68" '
            'preserveAspectRatio="xMidYMid meet" shape-rendering="crispEdges" '
            'xmlns="http://www.w3.org/2000/svg">\n'
        )
        assert svg.endswith("</svg>")

    def test_layers(self, identicon: Identicon) -> None:
        """Test that the background group comes first and both are styled."""
        root = ET.fromstring(SvgWriter().render(identicon))
        groups = root.findall(f"{SVG_NS}g")

        assert len(groups) == 2
        assert "fill: #eeddcc;" in groups[0].get("style")
        assert "fill: #112233;" in groups[1].get("style")
        assert "fill-opacity: 0.5;" in groups[1].get("style")
        assert len(groups[0].findall(f"{SVG_NS}path")) == 1
        assert len(groups[1].findall(f"{SVG_NS}path")) == 1

    def test_padding_offsets_paths(self, identicon: Identicon) -> None:
        """Test that paths are shifted by the padding."""
        root = ET.fromstring(SvgWriter().render(identicon))
        d = root.findall(f"{SVG_NS}g")[0].find(f"{SVG_NS}path").get("d")
        assert d == "M 24 44 L 24 24 L 44 24 L 44 44 z"

    def test_no_background(self, identicon: Identicon) -> None:
        """Test that a transparent background has no group."""
        identicon.bg_color = None
        root = ET.fromstring(SvgWriter().render(identicon))
        assert len(root.findall(f"{SVG_NS}g")) == 1

    def test_save(self, identicon: Identicon, tmp_path: Path) -> None:
        """Test writing to a file."""
        output = tmp_path / "ring.svg"
        writer = SvgWriter()
        writer.save(identicon, output)
        assert output.read_text(encoding="utf-8") == writer.render(identicon)

    def test_save_failure(self, identicon: Identicon, tmp_path: Path) -> None:
        """Test that an unwritable path raises SvgWriteError."""
        output = tmp_path / "missing" / "ring.svg"
        with pytest.raises(SvgWriteError) as exc_info:
            SvgWriter().save(identicon, output)
        assert exc_info.value.path == str(output)

    def test_cell_path(self) -> None:
        """Test a single cell rendered on its own."""
        path = outline_cells([Cell(1, 0)], 2)[0]
        element = SvgWriter(scale=20).path_element(path)
        assert element == '    <path d="M 20 20 L 20 0 L 40 0 L 40 20 z"/>\n'
