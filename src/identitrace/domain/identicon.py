"""Occupancy grids and identicon results.

This module defines the grid-level domain models: the occupancy grid of one
layer and the identicon assembled from a hashed text.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from identitrace.domain.lattice import Cell
from identitrace.domain.outline import OutlinePath
from identitrace.exceptions import CellOutOfBoundsError, InvalidGridSizeError


class Layer(str, Enum):
    """Cell partition drawn as one SVG group."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


@dataclass(frozen=True)
class OccupancyGrid:
    """The filled cells of one layer on a size×size lattice.

    Attributes:
        size: Number of cells per side
        cells: Filled cells
    """

    size: int
    cells: frozenset[Cell]

    def __post_init__(self) -> None:
        if self.size < 1:
            raise InvalidGridSizeError(self.size, "size must be positive")
        for cell in self.cells:
            if not cell.within_bounds(self.size):
                raise CellOutOfBoundsError(cell.to_tuple(), self.size)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], size: int) -> "OccupancyGrid":
        """Build a grid from an iterable of cells."""
        return cls(size=size, cells=frozenset(cells))

    @classmethod
    def from_flags(cls, flags: Sequence[int | bool], size: int) -> "OccupancyGrid":
        """Build a grid from a row-major sequence of size² presence flags.

        Raises:
            InvalidGridSizeError: If the sequence length is not size²
        """
        if len(flags) != size * size:
            raise InvalidGridSizeError(
                size, f"expected {size * size} flags, got {len(flags)}"
            )
        return cls(
            size=size,
            cells=frozenset(Cell.from_index(i, size) for i, flag in enumerate(flags) if flag),
        )

    def is_empty(self) -> bool:
        """Check if no cell is filled."""
        return not self.cells

    def complement(self) -> "OccupancyGrid":
        """Grid of the cells not filled in this one."""
        all_cells = (Cell.from_index(i, self.size) for i in range(self.size * self.size))
        return OccupancyGrid(
            size=self.size,
            cells=frozenset(c for c in all_cells if c not in self.cells),
        )

    def to_flags(self) -> list[int]:
        """Row-major list of 0/1 presence flags."""
        return [
            1 if Cell.from_index(i, self.size) in self.cells else 0
            for i in range(self.size * self.size)
        ]

    def to_rows(self, filled: str = "#", empty: str = ".") -> list[str]:
        """Render the grid as text rows."""
        flags = self.to_flags()
        return [
            "".join(filled if f else empty for f in flags[r * self.size:(r + 1) * self.size])
            for r in range(self.size)
        ]


@dataclass
class Identicon:
    """An identicon derived from a text.

    Attributes:
        text: Input text that was hashed
        size: Number of cells per side
        fg_color: Foreground colour as #rrggbb
        bg_color: Background colour as #rrggbb, or None for no background
        opacity: Fill opacity of both layers
        padding: Blank margin around the grid, in SVG units
        foreground: Filled cells
        background: Empty cells
        fg_paths: Outline of every foreground component
        bg_paths: Outline of every background component (empty when
            there is no background colour)
    """

    text: str
    size: int
    fg_color: str
    bg_color: str | None
    opacity: float
    padding: int
    foreground: OccupancyGrid
    background: OccupancyGrid
    fg_paths: list[OutlinePath] = field(default_factory=list)
    bg_paths: list[OutlinePath] = field(default_factory=list)

    def paths_for(self, layer: Layer) -> list[OutlinePath]:
        """Outline paths of one layer."""
        if layer == Layer.FOREGROUND:
            return self.fg_paths
        return self.bg_paths

    def has_background(self) -> bool:
        """Check if the background layer is drawn."""
        return self.bg_color is not None
