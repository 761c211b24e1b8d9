"""Geometric properties of outlines across many generated grids."""

import pytest

from identitrace.core.grid import build_grid
from identitrace.core.grouping import group_components
from identitrace.core.inclusion import winding_number
from identitrace.core.outliner import component_loops, outline_component
from identitrace.domain import Cell

TEXTS = ["", "alice@example.com", "bob", "carol", "identitrace", "0123456789", "ünïcödé"]
SIZES = range(4, 11)


def layers(text: str, size: int):
    grid = build_grid(text, size)
    return [grid, grid.complement()]


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("text", TEXTS)
class TestOutlineProperties:
    """Properties that hold for every component of every layer."""

    def test_area_matches_cells(self, text: str, size: int) -> None:
        """Test that each path encloses exactly its component's cells."""
        for grid in layers(text, size):
            for component in group_components(grid.cells, size):
                path = outline_component(component)
                assert path.is_closed()
                assert path.signed_area() == len(component)

    def test_edge_count(self, text: str, size: int) -> None:
        """Test that a path is its loops plus every bridge walked twice."""
        for grid in layers(text, size):
            for component in group_components(grid.cells, size):
                path = outline_component(component)
                assert path.edge_count == sum(path.loop_lengths) + 2 * sum(path.bridge_lengths)
                assert len(path.bridge_lengths) == path.loop_count - 1

    def test_loops_are_simple(self, text: str, size: int) -> None:
        """Test that no loop visits a vertex twice."""
        for grid in layers(text, size):
            for component in group_components(grid.cells, size):
                for loop in component_loops(component):
                    assert loop.is_closed()
                    assert len(set(loop.vertices())) == len(loop)

    def test_cell_centres_classified(self, text: str, size: int) -> None:
        """Test that a path winds once around its own cells and never around others."""
        for grid in layers(text, size):
            for component in group_components(grid.cells, size):
                vertices = outline_component(component).vertices()
                for index in range(size * size):
                    cell = Cell.from_index(index, size)
                    centre = (cell.col + 0.5, cell.row + 0.5)
                    expected = 1 if cell in component.cells else 0
                    assert winding_number(centre, vertices) == expected
