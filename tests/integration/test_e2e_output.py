"""End-to-end tests of the generated SVG documents."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from identitrace import generate
from identitrace.config import IdenticonConfig, IdentitraceSettings, ProcessingConfig
from identitrace.core import IdenticonGenerator
from identitrace.core.grid import build_grid
from identitrace.core.grouping import group_components

SVG_NS = "{http://www.w3.org/2000/svg}"

EMPTY_STRING_SVG = (
    '<svg version="1.1" width="20mm" height="20mm" viewBox="0 0 100 100" '
    'preserveAspectRatio="xMidYMid meet" shape-rendering="crispEdges" '
    'xmlns="http://www.w3.org/2000/svg">\n'
    '  <g style="stroke: #d41d8c; stroke-width: 0; stroke-opacity: 1.0; '
    'fill: #d41d8c; fill-opacity: 1.0;">\n'
    '    <path d="M 0 20 L 0 0 L 20 0 L 20 20 z"/>\n'
    '    <path d="M 40 0 L 60 0 L 60 40 L 40 40 z"/>\n'
    '    <path d="M 80 20 L 80 0 L 100 0 L 100 20 z"/>\n'
    '    <path d="M 60 60 L 60 40 L 100 40 L 100 100 L 0 100 L 0 60 L 20 60 '
    "L 20 80 L 40 80 L 40 60 L 0 60 L 0 40 L 40 40 L 40 60 L 80 60 L 60 60 "
    'L 60 80 L 80 80 L 80 60 z"/>\n'
    "  </g>\n"
    "</svg>"
)

TEXTS = ["", "alice@example.com", "bob", "identitrace", "0123456789"]


def parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


class TestGoldenOutput:
    """Exact documents for known inputs."""

    def test_empty_string(self) -> None:
        """Test the identicon of the empty string byte for byte."""
        assert generate("") == EMPTY_STRING_SVG

    def test_empty_string_with_background(self) -> None:
        """Test that the complementary layer is drawn first."""
        root = parse(generate("", background="basic"))
        groups = root.findall(f"{SVG_NS}g")

        assert len(groups) == 2
        assert groups[0].get("style").startswith("stroke: #2be273;")
        assert groups[1].get("style").startswith("stroke: #d41d8c;")
        assert len(groups[0].findall(f"{SVG_NS}path")) == 5

    @pytest.mark.parametrize(
        ("mode", "color"),
        [("basic", "#2be273"), ("split1", "#d4e273"), ("split2", "#2be28c")],
    )
    def test_background_modes(self, mode: str, color: str) -> None:
        """Test the colour of each complementary scheme."""
        assert f"fill: {color};" in generate("", background=mode)


class TestDocumentStructure:
    """Structural properties of generated documents."""

    @pytest.mark.parametrize("size", range(4, 11))
    def test_one_path_per_component(self, size: int) -> None:
        """Test that each component is drawn as exactly one path."""
        svg = generate("alice@example.com", size=size, background="basic")
        groups = parse(svg).findall(f"{SVG_NS}g")
        grid = build_grid("alice@example.com", size)

        bg_components = group_components(grid.complement().cells, size)
        fg_components = group_components(grid.cells, size)
        assert len(groups[0].findall(f"{SVG_NS}path")) == len(bg_components)
        assert len(groups[1].findall(f"{SVG_NS}path")) == len(fg_components)

    @pytest.mark.parametrize("size", range(4, 11))
    def test_view_box(self, size: int) -> None:
        """Test the view box for every size with padding."""
        root = parse(generate("x", size=size, padding=10))
        length = size * 20 + 20
        assert root.get("viewBox") == f"0 0 {length} {length}"

    def test_paths_closed(self) -> None:
        """Test that every path starts with a move and ends with a close."""
        root = parse(generate("identitrace", size=8, background="#000"))
        for path in root.iter(f"{SVG_NS}path"):
            d = path.get("d")
            assert d.startswith("M ")
            assert d.endswith(" z")
            assert " M " not in d

    @pytest.mark.parametrize("text", TEXTS)
    def test_deterministic(self, text: str) -> None:
        """Test that repeated generation is stable."""
        assert generate(text, size=6) == generate(text, size=6)


class TestParallelOutput:
    """Worker processes must not change the document."""

    @pytest.mark.parametrize("size", [5, 8, 10])
    def test_parallel_matches_sequential(self, size: int) -> None:
        """Test byte-identical output with and without worker processes."""
        sequential = generate("alice@example.com", size=size, background="basic")
        settings = IdentitraceSettings(
            identicon=IdenticonConfig(size=size, background="basic"),
            processing=ProcessingConfig(parallel=True, max_workers=2),
        )
        parallel = IdenticonGenerator(settings).render("alice@example.com")

        assert parallel == sequential


class TestSavedOutput:
    """Documents written to disk."""

    def test_save_matches_render(self, tmp_path: Path) -> None:
        """Test that the saved file is the rendered document."""
        generator = IdenticonGenerator()
        identicon = generator.build("bob")
        output = tmp_path / "bob.svg"

        generator.writer.save(identicon, output)

        assert output.read_text(encoding="utf-8") == generator.writer.render(identicon)
        assert parse(output.read_text(encoding="utf-8")).tag == f"{SVG_NS}svg"
