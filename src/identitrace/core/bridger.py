"""Bridging of a component's loops into a single closed path.

A component with holes has one hull loop and one loop per hole. SVG paths can
hold several subpaths, but the outline is emitted as one continuous path: each
hole is spliced into the growing path through a zero-width bridge that is
walked once towards the hole and once back.

Algorithm, per hole (holes taken in canonical order):
1. Reference edge: the last edge of the connected path
2. Candidate edge: the hole edge parallel to the reference edge and closest to it
3. Connected edge: the path edge parallel to the candidate edge and closest to it,
   among those whose bridge to the candidate is axis-aligned
4. Rotate the path so that it ends with the connected edge
5. Append the bridge, the hole starting at the bridge end, and the bridge reversed

Distances are Manhattan distances between edge midpoints; ties are broken by
edge coordinates, then by position in the sequence, so the output only depends
on the input loops.
"""

from collections.abc import Sequence

from identitrace.core.geometry import edge_distance, unit_steps
from identitrace.core.observer import NullObserver, TraceObserver
from identitrace.domain import Edge, Loop, OutlinePath
from identitrace.exceptions import BridgeConstructionError


def classify_loops(loops: Sequence[Loop]) -> tuple[Loop, list[Loop]]:
    """Split loops into the hull and the holes.

    The hull is the loop enclosing the largest area. It is returned with
    positive orientation; holes are returned with negative orientation, each
    rotated to start at its smallest vertex and sorted by that vertex.

    Raises:
        BridgeConstructionError: If there are no loops
    """
    if not loops:
        raise BridgeConstructionError("no loops to classify")

    areas = [loop.signed_area() for loop in loops]
    hull_at = max(range(len(loops)), key=lambda i: (abs(areas[i]), -i))

    hull = loops[hull_at]
    if areas[hull_at] < 0:
        hull = hull.reversed()

    holes: list[Loop] = []
    for i, loop in enumerate(loops):
        if i == hull_at:
            continue
        if areas[i] > 0:
            loop = loop.reversed()
        holes.append(loop.canonical())

    holes.sort(key=lambda loop: loop.edges[0].start)
    return hull, holes


def _closest_parallel(
    reference: Edge, edges: Sequence[Edge]
) -> tuple[int, Edge] | None:
    """Closest edge parallel to the reference edge, with its position."""
    best: tuple[float, tuple, int] | None = None
    for i, edge in enumerate(edges):
        if edge.orientation != reference.orientation:
            continue
        rank = (edge_distance(reference, edge), edge.key, i)
        if best is None or rank < best:
            best = rank
    if best is None:
        return None
    return best[2], edges[best[2]]


def _closest_aligned(candidate: Edge, connected: Sequence[Edge]) -> tuple[int, Edge] | None:
    """Closest connected edge from whose end an axis-aligned bridge reaches the candidate."""
    best: tuple[float, tuple, int] | None = None
    for i, edge in enumerate(connected):
        if edge.orientation != candidate.orientation:
            continue
        target = candidate.oriented_like(edge).end
        if edge.end[0] != target[0] and edge.end[1] != target[1]:
            continue
        rank = (edge_distance(candidate, edge), edge.key, i)
        if best is None or rank < best:
            best = rank
    if best is None:
        return None
    return best[2], connected[best[2]]


def bridge_loops(
    loops: Sequence[Loop],
    *,
    component_index: int | None = None,
    observer: TraceObserver | None = None,
) -> OutlinePath:
    """Merge a component's loops into one closed path.

    Args:
        loops: The hull and hole loops of one component, in any order
        component_index: Component identifier carried into the result and
            into error reports
        observer: Receives a ``bridge_built`` event per bridge

    Returns:
        OutlinePath whose edge count equals the loop lengths plus twice the
        bridge lengths

    Raises:
        BridgeConstructionError: If there are no loops or a hole cannot be
            reached by an axis-aligned bridge
    """
    observer = observer or NullObserver()

    if not loops:
        raise BridgeConstructionError("no loops to bridge", component_index)

    if len(loops) == 1:
        loop = loops[0]
        return OutlinePath(
            edges=loop.edges,
            component_index=component_index,
            loop_lengths=(len(loop),),
        )

    hull, holes = classify_loops(loops)
    connected: list[Edge] = list(hull.edges)
    loop_lengths = [len(hull)]
    bridge_lengths: list[int] = []

    for hole in holes:
        reference = connected[-1]
        found = _closest_parallel(reference, hole.edges)
        if found is None:
            raise BridgeConstructionError(
                f"hole at {hole.edges[0].start} has no edge parallel to {reference}",
                component_index,
            )
        _, candidate = found

        match = _closest_aligned(candidate, connected)
        if match is None:
            raise BridgeConstructionError(
                f"no connected edge aligned with hole edge {candidate}",
                component_index,
            )
        position, source = match

        target = candidate.oriented_like(source)
        bridge = unit_steps(source.end, target.end)
        observer.bridge_built(source, target, len(bridge))

        rotated = connected[position + 1:] + connected[:position + 1]
        spliced = hole.rotated_to(target.end)
        connected = (
            rotated
            + bridge
            + list(spliced.edges)
            + [e.reversed() for e in reversed(bridge)]
        )
        loop_lengths.append(len(hole))
        bridge_lengths.append(len(bridge))

    return OutlinePath(
        edges=tuple(connected),
        component_index=component_index,
        loop_lengths=tuple(loop_lengths),
        bridge_lengths=tuple(bridge_lengths),
    )
