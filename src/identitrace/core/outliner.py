"""Per-component outline pipeline.

Strings the geometry stages together for one component: boundary extraction,
loop tracing and loop bridging. ``outline_cells`` runs the whole chain for a
bare set of cells, starting with connected-component grouping.
"""

from collections.abc import Iterable

from identitrace.core.boundary import extract_boundary
from identitrace.core.bridger import bridge_loops
from identitrace.core.grouping import group_components
from identitrace.core.observer import TraceObserver
from identitrace.core.tracer import trace_loops
from identitrace.domain import Cell, Component, Loop, OutlinePath


def component_loops(
    component: Component,
    split_pinches: bool = True,
    observer: TraceObserver | None = None,
) -> list[Loop]:
    """Boundary loops of a component, in seeding order."""
    edges = extract_boundary(component.cells, component.index)
    return trace_loops(
        edges,
        split_pinches=split_pinches,
        component_index=component.index,
        observer=observer,
    )


def outline_component(
    component: Component,
    split_pinches: bool = True,
    observer: TraceObserver | None = None,
) -> OutlinePath:
    """Compute the single closed outline path of a component.

    Args:
        component: Component to outline (must not be empty)
        split_pinches: Split the boundary at pinch vertices instead of failing
        observer: Receives tracing and bridging events

    Returns:
        The bridged outline path

    Raises:
        GeometryError: If any invariant of the boundary is violated
    """
    loops = component_loops(component, split_pinches, observer)
    return bridge_loops(loops, component_index=component.index, observer=observer)


def outline_cells(
    cells: Iterable[Cell],
    size: int,
    split_pinches: bool = True,
) -> list[OutlinePath]:
    """Outline every component of a set of cells.

    Args:
        cells: Occupied cells of one layer
        size: Number of cells per grid side

    Returns:
        One path per component, ordered by component index. Empty input
        gives an empty list.
    """
    return [
        outline_component(component, split_pinches)
        for component in group_components(cells, size)
    ]
