"""Connected-component grouping of occupied cells.

Cells belong to the same component when they share a full edge (4-connectivity);
cells touching only at a corner stay apart. Grouping is a single union-find
pass over the adjacency of occupied cells, so the result does not depend on
the order in which cells are supplied.
"""

from collections.abc import Iterable

from identitrace.domain import Cell, Component
from identitrace.exceptions import CellOutOfBoundsError, InvalidGridSizeError


class DisjointSet:
    """Union-find over hashable items with union by rank and path compression."""

    def __init__(self, items: Iterable[Cell] = ()) -> None:
        self._parent: dict[Cell, Cell] = {}
        self._rank: dict[Cell, int] = {}
        for item in items:
            self.add(item)

    def __contains__(self, item: Cell) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def add(self, item: Cell) -> None:
        """Add an item as its own singleton set (no-op if present)."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def find(self, item: Cell) -> Cell:
        """Return the representative of the item's set."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]

        return root

    def union(self, a: Cell, b: Cell) -> bool:
        """Merge the sets containing a and b.

        Returns:
            True if two different sets were merged
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True

    def groups(self) -> list[set[Cell]]:
        """All sets, in no particular order."""
        by_root: dict[Cell, set[Cell]] = {}
        for item in self._parent:
            by_root.setdefault(self.find(item), set()).add(item)
        return list(by_root.values())


def adjacency(cells: Iterable[Cell], size: int) -> dict[Cell, list[Cell]]:
    """Map every occupied cell to its occupied in-bounds 4-neighbours."""
    occupied = set(cells)
    return {
        cell: [n for n in cell.neighbors(size) if n in occupied]
        for cell in occupied
    }


def group_components(cells: Iterable[Cell], size: int) -> list[Component]:
    """Partition occupied cells into maximal 4-connected components.

    Args:
        cells: Occupied cells (duplicates are ignored)
        size: Number of cells per grid side

    Returns:
        Components ordered by their index (smallest row-major cell index)

    Raises:
        InvalidGridSizeError: If size is not positive
        CellOutOfBoundsError: If a cell lies outside the grid
    """
    if size < 1:
        raise InvalidGridSizeError(size, "size must be positive")

    occupied = set(cells)
    for cell in occupied:
        if not cell.within_bounds(size):
            raise CellOutOfBoundsError(cell.to_tuple(), size)

    components = DisjointSet(occupied)
    for cell, neighbors in adjacency(occupied, size).items():
        for neighbor in neighbors:
            components.union(cell, neighbor)

    result = [
        Component(
            index=min(c.index(size) for c in group),
            cells=frozenset(group),
        )
        for group in components.groups()
    ]
    result.sort(key=lambda c: c.index)
    return result
