"""Lattice types for grid outlines.

This module defines the fundamental geometric types used throughout identitrace:
- Vertex: An integer lattice point (x, y) = (col, row)
- Orientation: Enum for the axis of a unit edge
- Edge: A directed, axis-aligned unit edge between two lattice vertices
- Cell: A unit grid square addressed by its top-left vertex
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

Vertex = tuple[int, int]
EdgeKey = tuple[Vertex, Vertex]


class Orientation(Enum):
    """Axis of a unit edge."""

    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed unit edge of the lattice.

    Two edges with swapped endpoints describe the same undirected segment;
    use ``key`` to compare edges regardless of direction.

    Attributes:
        start: Vertex the edge leaves
        end: Vertex the edge arrives at
    """

    start: Vertex
    end: Vertex

    @property
    def key(self) -> EdgeKey:
        """Undirected identity of the edge (endpoints in sorted order)."""
        return (self.start, self.end) if self.start <= self.end else (self.end, self.start)

    @property
    def vector(self) -> tuple[int, int]:
        """Direction vector from start to end."""
        return (self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def orientation(self) -> Orientation:
        """Axis the edge runs along."""
        if self.start[1] == self.end[1]:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    @property
    def midpoint(self) -> tuple[float, float]:
        """Midpoint of the edge."""
        return (
            (self.start[0] + self.end[0]) / 2,
            (self.start[1] + self.end[1]) / 2,
        )

    def reversed(self) -> "Edge":
        """Return the same segment traversed the other way."""
        return Edge(self.end, self.start)

    def touches(self, vertex: Vertex) -> bool:
        """Check if the vertex is one of the edge's endpoints."""
        return vertex == self.start or vertex == self.end

    def oriented_from(self, vertex: Vertex) -> "Edge":
        """Return the edge directed so that it starts at ``vertex``.

        Raises:
            ValueError: If the vertex is not an endpoint of this edge
        """
        if self.start == vertex:
            return self
        if self.end == vertex:
            return self.reversed()
        raise ValueError(f"Vertex {vertex} is not an endpoint of {self}")

    def oriented_like(self, other: "Edge") -> "Edge":
        """Return the edge directed the same way as a parallel edge."""
        return self if self.vector == other.vector else self.reversed()

    def to_list(self) -> list[list[int]]:
        """Serialize to nested lists for IPC."""
        return [list(self.start), list(self.end)]

    @classmethod
    def from_list(cls, data: list[list[int]]) -> "Edge":
        """Deserialize from nested lists."""
        start, end = data
        return cls((start[0], start[1]), (end[0], end[1]))


@dataclass(frozen=True, slots=True)
class Cell:
    """A unit square of the grid, addressed by its top-left vertex.

    Attributes:
        col: Column index (x)
        row: Row index (y, growing downwards)
    """

    col: int
    row: int

    @property
    def row_major_key(self) -> tuple[int, int]:
        """Sort key giving row-major order."""
        return (self.row, self.col)

    @classmethod
    def from_index(cls, index: int, size: int) -> "Cell":
        """Create a cell from its row-major index on a size×size grid."""
        return cls(col=index % size, row=index // size)

    def index(self, size: int) -> int:
        """Row-major index on a size×size grid."""
        return self.col + self.row * size

    def to_tuple(self) -> tuple[int, int]:
        """Convert to a (col, row) tuple."""
        return (self.col, self.row)

    def within_bounds(self, size: int) -> bool:
        """Check if the cell lies on a size×size grid."""
        return 0 <= self.col < size and 0 <= self.row < size

    def neighbors(self, size: int) -> list["Cell"]:
        """In-bounds cells sharing a full edge with this one (up, right, down, left)."""
        candidates = [
            Cell(self.col, self.row - 1),
            Cell(self.col + 1, self.row),
            Cell(self.col, self.row + 1),
            Cell(self.col - 1, self.row),
        ]
        return [c for c in candidates if c.within_bounds(size)]

    def edges(self) -> list[Edge]:
        """The four unit edges around the cell.

        Edges run top, right, bottom, left so that the cell is always on the
        left of the direction of travel (positive shoelace area).
        """
        x0, y0 = self.col, self.row
        x1, y1 = x0 + 1, y0 + 1
        corners = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
        return [Edge(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"col": self.col, "row": self.row}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cell":
        """Deserialize from dictionary."""
        return cls(col=data["col"], row=data["row"])
