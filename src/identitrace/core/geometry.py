"""Geometric helpers for lattice outlines.

This module provides the small integer-geometry utilities shared by the
tracer, the bridger and the SVG converter:
- Signed area calculation (shoelace formula)
- Turn direction between consecutive edges
- Midpoint distance between unit edges
- Unit-step segments between aligned vertices
- Collinear vertex removal

All functions are pure, stateless, and designed for use in parallel processing.
"""

from collections.abc import Sequence

from identitrace.domain import Edge, Vertex


def signed_area(points: Sequence[tuple[float, float]]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    In lattice coordinates (x right, y down) a positive area means the
    enclosed region lies on the left of the direction of travel.

    Args:
        points: Polygon vertices in order (implicitly closed)

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([(0, 0), (1, 0), (1, 1), (0, 1)])
        1.0
        >>> signed_area([(0, 0), (0, 1), (1, 1), (1, 0)])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


def turn(incoming: Edge, outgoing: Edge) -> int:
    """Cross product of two consecutive edge directions.

    Returns:
        > 0 for a left turn, < 0 for a right turn, 0 when going straight
        or turning back
    """
    ax, ay = incoming.vector
    bx, by = outgoing.vector
    return ax * by - ay * bx


def edge_distance(edge1: Edge, edge2: Edge) -> float:
    """Distance between two edges in blocks: Manhattan distance of midpoints.

    Examples:
        >>> edge_distance(Edge((0, 0), (1, 0)), Edge((0, 2), (1, 2)))
        2.0
    """
    (x1, y1), (x2, y2) = edge1.midpoint, edge2.midpoint
    return abs(x1 - x2) + abs(y1 - y2)


def is_axis_aligned(a: Vertex, b: Vertex) -> bool:
    """Check that two vertices differ along at most one axis."""
    return a[0] == b[0] or a[1] == b[1]


def unit_steps(start: Vertex, end: Vertex) -> list[Edge]:
    """Split an axis-aligned segment into unit edges from start to end.

    Coincident vertices give an empty list.

    Raises:
        ValueError: If the vertices differ along both axes
    """
    if not is_axis_aligned(start, end):
        raise ValueError(f"Segment {start} -> {end} is not axis-aligned")

    dx, dy = end[0] - start[0], end[1] - start[1]
    length = max(abs(dx), abs(dy))
    if length == 0:
        return []

    step = (dx // length, dy // length)
    steps: list[Edge] = []
    current = start
    for _ in range(length):
        following = (current[0] + step[0], current[1] + step[1])
        steps.append(Edge(current, following))
        current = following

    return steps


def simplify_vertices(vertices: Sequence[Vertex]) -> list[Vertex]:
    """Drop vertices where a closed path continues in the same direction.

    A vertex where the path turns back on itself (the far end of a bridge)
    is kept, so zero-width corridors survive.

    Args:
        vertices: Closed path vertices in order (no repeated closing vertex)

    Returns:
        Vertices at which the path changes direction
    """
    n = len(vertices)
    if n < 3:
        return list(vertices)

    kept: list[Vertex] = []
    for i in range(n):
        prev_v, v, next_v = vertices[i - 1], vertices[i], vertices[(i + 1) % n]
        d_in = (_sign(v[0] - prev_v[0]), _sign(v[1] - prev_v[1]))
        d_out = (_sign(next_v[0] - v[0]), _sign(next_v[1] - v[1]))
        if d_in != d_out:
            kept.append(v)

    return kept


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
