"""Core processing algorithms for identitrace.

This module contains the core algorithms for:

- Connected-component grouping of occupied cells
- Boundary extraction by edge cancellation
- Directed loop tracing
- Bridging of hull and hole loops into one path
- Winding-number point-in-polygon testing
- Grid and colour derivation from hashed text

All geometry services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects; progress is reported through an optional observer)
- Deterministic (output depends only on the input cells)

Key functions:
- group_components: Partition cells into 4-connected components
- extract_boundary: Boundary unit edges of a component
- trace_loops: Order boundary edges into closed loops
- bridge_loops: Merge a hull and its holes into one path
- point_in_polygon: Classify a point against a polygon
- outline_cells: Run the whole geometry chain for a set of cells

Key classes:
- LayerProcessor: Outlines all components of a layer
- IdenticonGenerator: Builds and renders identicons
"""

from identitrace.core.boundary import extract_boundary
from identitrace.core.bridger import bridge_loops, classify_loops
from identitrace.core.color import color_wheel, resolve_background
from identitrace.core.grid import appropriate_hash, build_grid
from identitrace.core.grouping import DisjointSet, group_components
from identitrace.core.inclusion import (
    Inclusion,
    is_left,
    point_in_polygon,
    winding_number,
)
from identitrace.core.observer import NullObserver, TraceObserver
from identitrace.core.outliner import outline_cells, outline_component
from identitrace.core.processor import (
    IdenticonGenerator,
    LayerProcessor,
    generate,
    process_component,
)
from identitrace.core.tracer import trace_loops

__all__ = [
    # Geometry pipeline
    "DisjointSet",
    "group_components",
    "extract_boundary",
    "trace_loops",
    "classify_loops",
    "bridge_loops",
    "outline_component",
    "outline_cells",
    # Inclusion
    "Inclusion",
    "is_left",
    "point_in_polygon",
    "winding_number",
    # Observers
    "NullObserver",
    "TraceObserver",
    # Grid and colour
    "appropriate_hash",
    "build_grid",
    "color_wheel",
    "resolve_background",
    # Processor
    "IdenticonGenerator",
    "LayerProcessor",
    "generate",
    "process_component",
]
