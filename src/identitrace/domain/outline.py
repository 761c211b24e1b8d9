"""Outline types: components, loops and bridged paths.

A component is a maximal 4-connected set of cells. Its boundary decomposes
into loops (one hull and any number of holes), which are finally merged into
a single closed outline path.
"""

from dataclasses import dataclass, field
from typing import Any

from identitrace.domain.lattice import Cell, Edge, Vertex


def _shoelace(vertices: list[Vertex]) -> float:
    n = len(vertices)
    if n < 3:
        return 0.0

    area = 0
    for i in range(n):
        j = (i + 1) % n
        area += vertices[i][0] * vertices[j][1]
        area -= vertices[j][0] * vertices[i][1]

    return area / 2.0


@dataclass(frozen=True)
class Component:
    """A maximal set of cells connected through shared edges.

    Attributes:
        index: Smallest row-major index among the cells, used as a stable
            identifier and for ordering output
        cells: Cells of the component
    """

    index: int
    cells: frozenset[Cell]

    def __len__(self) -> int:
        return len(self.cells)

    def sorted_cells(self) -> list[Cell]:
        """Cells in row-major order."""
        return sorted(self.cells, key=lambda c: c.row_major_key)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with the index and row-major list of cells
        """
        return {
            "index": self.index,
            "cells": [c.to_dict() for c in self.sorted_cells()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Component":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a component

        Returns:
            Component instance
        """
        return cls(
            index=data["index"],
            cells=frozenset(Cell.from_dict(c) for c in data["cells"]),
        )


@dataclass(frozen=True)
class Loop:
    """A directed closed sequence of unit edges.

    Each edge ends where the next one starts and the last edge ends where the
    first one starts.

    Attributes:
        edges: Edges in traversal order
    """

    edges: tuple[Edge, ...]

    def __len__(self) -> int:
        return len(self.edges)

    def vertices(self) -> list[Vertex]:
        """Vertices in traversal order (start of each edge)."""
        return [e.start for e in self.edges]

    def is_closed(self) -> bool:
        """Check that consecutive edges chain and the last returns to the first."""
        if not self.edges:
            return False
        n = len(self.edges)
        return all(self.edges[i].end == self.edges[(i + 1) % n].start for i in range(n))

    def signed_area(self) -> float:
        """Signed area via the shoelace formula.

        Positive when the enclosed region is on the left of the direction of
        travel (a hull as produced by boundary extraction), negative for holes.
        """
        return _shoelace(self.vertices())

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Bounding box as (min_x, min_y, max_x, max_y)."""
        vertices = self.vertices()
        xs = [v[0] for v in vertices]
        ys = [v[1] for v in vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def reversed(self) -> "Loop":
        """The same loop traversed in the opposite direction."""
        return Loop(tuple(e.reversed() for e in reversed(self.edges)))

    def rotated_to(self, vertex: Vertex) -> "Loop":
        """Rotate the loop so that it starts at ``vertex``.

        Raises:
            ValueError: If the vertex is not on the loop
        """
        for i, edge in enumerate(self.edges):
            if edge.start == vertex:
                return Loop(self.edges[i:] + self.edges[:i])
        raise ValueError(f"Vertex {vertex} is not on the loop")

    def canonical(self) -> "Loop":
        """The loop rotated to start at its smallest vertex."""
        return self.rotated_to(min(self.vertices()))

    def to_list(self) -> list[list[list[int]]]:
        """Serialize to nested lists for IPC."""
        return [e.to_list() for e in self.edges]

    @classmethod
    def from_list(cls, data: list[list[list[int]]]) -> "Loop":
        """Deserialize from nested lists."""
        return cls(tuple(Edge.from_list(e) for e in data))


@dataclass(frozen=True)
class OutlinePath:
    """A single closed path outlining one component.

    Made of the component's loops joined by bridges. Every bridge is
    traversed once forwards and once backwards, so it encloses no area.

    Attributes:
        edges: Edges in traversal order
        component_index: Index of the outlined component (None if unknown)
        loop_lengths: Edge count of every merged loop, hull first
        bridge_lengths: Length of every bridge, in merge order
    """

    edges: tuple[Edge, ...]
    component_index: int | None = None
    loop_lengths: tuple[int, ...] = field(default=())
    bridge_lengths: tuple[int, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.edges)

    @property
    def edge_count(self) -> int:
        """Number of unit edges in the path."""
        return len(self.edges)

    @property
    def loop_count(self) -> int:
        """Number of loops merged into the path."""
        return len(self.loop_lengths)

    def vertices(self) -> list[Vertex]:
        """Vertices in traversal order (start of each edge, implicitly closed)."""
        return [e.start for e in self.edges]

    def is_closed(self) -> bool:
        """Check that consecutive edges chain and the last returns to the first."""
        return Loop(self.edges).is_closed()

    def signed_area(self) -> float:
        """Signed area enclosed by the path (hull minus holes)."""
        return _shoelace(self.vertices())

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the path
        """
        return {
            "edges": [e.to_list() for e in self.edges],
            "component_index": self.component_index,
            "loop_lengths": list(self.loop_lengths),
            "bridge_lengths": list(self.bridge_lengths),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OutlinePath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            OutlinePath instance
        """
        return cls(
            edges=tuple(Edge.from_list(e) for e in data["edges"]),
            component_index=data.get("component_index"),
            loop_lengths=tuple(data.get("loop_lengths", ())),
            bridge_lengths=tuple(data.get("bridge_lengths", ())),
        )
