"""Boundary edge extraction for a component.

Every cell contributes its four unit edges. An edge shared by two cells of the
component is internal and cancels out; an edge owned by a single cell is on
the boundary and keeps the orientation it has around that cell (cell on the
left), which makes hulls wind positively and holes negatively.
"""

from collections import Counter
from collections.abc import Iterable

from identitrace.domain import Cell, Edge, EdgeKey
from identitrace.exceptions import MultiplicityViolationError


def edge_multiplicity(cells: Iterable[Cell]) -> tuple[Counter[EdgeKey], dict[EdgeKey, Edge]]:
    """Count how many cells own each undirected edge.

    Returns:
        Tuple of (counts by edge key, first directed edge seen for each key)
    """
    counts: Counter[EdgeKey] = Counter()
    directed: dict[EdgeKey, Edge] = {}
    for cell in cells:
        for edge in cell.edges():
            counts[edge.key] += 1
            directed.setdefault(edge.key, edge)
    return counts, directed


def extract_boundary(cells: Iterable[Cell], component_index: int | None = None) -> list[Edge]:
    """Compute the boundary edges of a set of cells.

    Args:
        cells: Cells of one component
        component_index: Component identifier used in error reports

    Returns:
        Directed boundary edges sorted by edge key. Empty for empty input.

    Raises:
        MultiplicityViolationError: If an edge is owned by more than two cells
            (only possible when the input is not a set of distinct cells)

    Examples:
        >>> len(extract_boundary([Cell(0, 0)]))
        4
        >>> len(extract_boundary([Cell(0, 0), Cell(1, 0)]))
        6
    """
    counts, directed = edge_multiplicity(cells)

    boundary: list[Edge] = []
    for key in sorted(counts):
        count = counts[key]
        if count > 2:
            raise MultiplicityViolationError(key, count, component_index)
        if count == 1:
            boundary.append(directed[key])

    return boundary
