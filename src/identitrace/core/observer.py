"""Observer hooks for loop tracing and bridging.

The tracing and bridging algorithms are pure functions. Callers that want to
follow what they do (for logging or debugging) pass an observer; the default
``NullObserver`` ignores every event.
"""

from typing import Protocol

from identitrace.domain import Edge, Loop, Vertex


class TraceObserver(Protocol):
    """Receives progress events from the tracer and the bridger."""

    def loop_started(self, seed: Edge) -> None: ...

    def edge_appended(self, edge: Edge) -> None: ...

    def pinch_resolved(self, vertex: Vertex, chosen: Edge) -> None: ...

    def loop_closed(self, loop: Loop) -> None: ...

    def bridge_built(self, source: Edge, target: Edge, length: int) -> None: ...


class NullObserver:
    """Observer that ignores every event."""

    def loop_started(self, seed: Edge) -> None:
        pass

    def edge_appended(self, edge: Edge) -> None:
        pass

    def pinch_resolved(self, vertex: Vertex, chosen: Edge) -> None:
        pass

    def loop_closed(self, loop: Loop) -> None:
        pass

    def bridge_built(self, source: Edge, target: Edge, length: int) -> None:
        pass
