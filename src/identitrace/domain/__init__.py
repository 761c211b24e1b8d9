"""Domain models for identitrace.

This module contains the core domain models representing grids, cells, edges,
loops and outline paths. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of SVG output details

Key classes:
- Cell: A unit grid square
- Edge: A directed unit edge of the lattice
- Component: A maximal 4-connected set of cells
- Loop: A directed closed sequence of edges
- OutlinePath: A component's loops bridged into one closed path
- OccupancyGrid: The filled cells of one layer
- Identicon: The result of generating an identicon from text
"""

from identitrace.domain.identicon import Identicon, Layer, OccupancyGrid
from identitrace.domain.lattice import Cell, Edge, EdgeKey, Orientation, Vertex
from identitrace.domain.outline import Component, Loop, OutlinePath

__all__: list[str] = [
    # Enums
    "Orientation",
    "Layer",
    # Aliases
    "Vertex",
    "EdgeKey",
    # Core types
    "Cell",
    "Edge",
    "Component",
    "Loop",
    "OutlinePath",
    "OccupancyGrid",
    "Identicon",
]
