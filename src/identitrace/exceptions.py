"""Exception hierarchy for Identitrace."""


class IdentitraceError(Exception):
    """Base exception for all Identitrace errors."""

    pass


class GridError(IdentitraceError):
    """Errors related to the occupancy grid."""

    pass


class InvalidGridSizeError(GridError):
    """Grid size is outside the supported range."""

    def __init__(self, size: int, reason: str) -> None:
        self.size = size
        self.reason = reason
        super().__init__(f"Invalid grid size {size}: {reason}")


class CellOutOfBoundsError(GridError):
    """A cell lies outside the N×N lattice."""

    def __init__(self, cell: tuple[int, int], size: int) -> None:
        self.cell = cell
        self.size = size
        super().__init__(f"Cell {cell} is outside the {size}x{size} grid")


class ColorError(IdentitraceError):
    """Errors related to colour handling."""

    pass


class InvalidColorError(ColorError):
    """Colour value could not be parsed."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid color {value!r}: {reason}")


class GeometryError(IdentitraceError):
    """Invariant violations in outline geometry."""

    pass


class MultiplicityViolationError(GeometryError):
    """A unit edge is shared by more than two cells of one component."""

    def __init__(
        self,
        edge: tuple[tuple[int, int], tuple[int, int]],
        count: int,
        component: int | None = None,
    ) -> None:
        self.edge = edge
        self.count = count
        self.component = component
        where = f" in component {component}" if component is not None else ""
        super().__init__(f"Edge {edge} occurs {count} times{where} (at most 2 allowed)")


class DegreeViolationError(GeometryError):
    """A loop cannot be continued unambiguously from its terminal vertex."""

    def __init__(
        self,
        vertex: tuple[int, int],
        candidates: int,
        reason: str,
        component: int | None = None,
    ) -> None:
        self.vertex = vertex
        self.candidates = candidates
        self.reason = reason
        self.component = component
        where = f" in component {component}" if component is not None else ""
        super().__init__(
            f"Degree violation at vertex {vertex}{where} ({candidates} candidate edges): {reason}"
        )


class BridgeConstructionError(GeometryError):
    """No valid bridge could be built between two loops."""

    def __init__(self, reason: str, component: int | None = None) -> None:
        self.reason = reason
        self.component = component
        where = f" for component {component}" if component is not None else ""
        super().__init__(f"Bridge construction failed{where}: {reason}")


class LayerProcessingError(IdentitraceError):
    """Outlining a component of a layer failed."""

    def __init__(self, layer: str, component_index: int, reason: str) -> None:
        self.layer = layer
        self.component_index = component_index
        self.reason = reason
        super().__init__(
            f"Error outlining component {component_index} of {layer} layer: {reason}"
        )


class OutputError(IdentitraceError):
    """Errors related to writing output."""

    pass


class SvgWriteError(OutputError):
    """Error saving an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write SVG '{path}': {reason}")
