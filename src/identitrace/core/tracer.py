"""Loop tracing over a set of boundary edges.

Boundary edges are chained into directed closed loops by repeatedly taking
the single remaining edge incident to the end of the current chain. On a
well-formed boundary every vertex has exactly two incident edges, so the
continuation is never ambiguous.

Two cells of one component that touch only at a corner (a pinch vertex)
give that vertex four incident edges. With ``split_pinches`` enabled the
tracer continues with the right-hand turn there, which keeps the empty
corner cell outside the loop and splits the boundary into simple loops.
"""

from collections import defaultdict
from collections.abc import Iterable

from identitrace.core.geometry import turn
from identitrace.core.observer import NullObserver, TraceObserver
from identitrace.domain import Edge, EdgeKey, Loop, Vertex
from identitrace.exceptions import DegreeViolationError, MultiplicityViolationError


class _EdgePool:
    """Remaining edges with O(1) removal and lookup by vertex."""

    def __init__(self, edges: Iterable[Edge], component_index: int | None = None) -> None:
        self.component_index = component_index
        self._edges: list[Edge] = []
        self._slots: dict[EdgeKey, int] = {}
        self._incident: dict[Vertex, set[EdgeKey]] = defaultdict(set)
        for edge in edges:
            self.add(edge)

    def __len__(self) -> int:
        return len(self._edges)

    def add(self, edge: Edge) -> None:
        key = edge.key
        if key in self._slots:
            raise MultiplicityViolationError(key, 2, self.component_index)
        self._slots[key] = len(self._edges)
        self._edges.append(edge)
        self._incident[edge.start].add(key)
        self._incident[edge.end].add(key)

    def remove(self, edge: Edge) -> None:
        key = edge.key
        slot = self._slots.pop(key)
        last = self._edges.pop()
        if slot < len(self._edges):
            # Move the last edge into the freed slot
            self._edges[slot] = last
            self._slots[last.key] = slot
        self._incident[edge.start].discard(key)
        self._incident[edge.end].discard(key)

    def incident(self, vertex: Vertex) -> list[Edge]:
        """Remaining edges touching the vertex, as stored, ordered by key."""
        keys = self._incident.get(vertex, ())
        return [self._edges[self._slots[k]] for k in sorted(keys)]

    def smallest(self) -> Edge:
        return min(self._edges, key=lambda e: e.key)


def _resolve_pinch(
    vertex: Vertex,
    incoming: Edge,
    candidates: list[Edge],
    component_index: int | None = None,
) -> Edge:
    """Pick the right-hand continuation at a pinch vertex.

    Raises:
        DegreeViolationError: If the vertex is not a pinch or no unique
            right turn exists
    """
    if len(candidates) != 3:
        raise DegreeViolationError(
            vertex, len(candidates), "ambiguous continuation", component_index
        )

    oriented = [c.oriented_from(vertex) for c in candidates]
    right_turns = [e for e in oriented if turn(incoming, e) < 0]
    if len(right_turns) != 1:
        raise DegreeViolationError(
            vertex, len(candidates), "pinch vertex without a unique right turn", component_index
        )
    return right_turns[0]


def trace_loops(
    edges: Iterable[Edge],
    *,
    split_pinches: bool = False,
    component_index: int | None = None,
    observer: TraceObserver | None = None,
) -> list[Loop]:
    """Order boundary edges into directed closed loops.

    Each loop is seeded with the remaining edge of smallest key, in its
    stored direction, and grown from its end vertex until it returns to the
    seed's start.

    Args:
        edges: Boundary edges, each undirected edge at most once
        split_pinches: Resolve four-edge pinch vertices by turning right
            instead of failing
        component_index: Component identifier carried into error reports
        observer: Receives tracing events (defaults to NullObserver)

    Returns:
        Loops in seeding order. Empty input gives an empty list.

    Raises:
        DegreeViolationError: If a chain has no continuation, or more than
            one that cannot be resolved
        MultiplicityViolationError: If an undirected edge is given twice
    """
    observer = observer or NullObserver()
    pool = _EdgePool(edges, component_index)
    loops: list[Loop] = []

    while len(pool):
        seed = pool.smallest()
        pool.remove(seed)
        observer.loop_started(seed)
        chain = [seed]

        while True:
            last = chain[-1]
            terminal = last.end
            candidates = pool.incident(terminal)

            if terminal == seed.start:
                if not candidates:
                    break
                if split_pinches and turn(last, seed) < 0:
                    observer.pinch_resolved(terminal, seed)
                    break
                raise DegreeViolationError(
                    terminal,
                    len(candidates) + 1,
                    "loop returns to a vertex with edges left",
                    component_index,
                )

            if not candidates:
                raise DegreeViolationError(
                    terminal, 0, "open chain has no continuation", component_index
                )

            if len(candidates) == 1:
                following = candidates[0].oriented_from(terminal)
            elif split_pinches:
                following = _resolve_pinch(terminal, last, candidates, component_index)
                observer.pinch_resolved(terminal, following)
            else:
                raise DegreeViolationError(
                    terminal, len(candidates), "ambiguous continuation", component_index
                )

            pool.remove(following)
            chain.append(following)
            observer.edge_appended(following)

        loop = Loop(tuple(chain))
        observer.loop_closed(loop)
        loops.append(loop)

    return loops
