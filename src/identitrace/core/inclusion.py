"""Point-in-polygon classification by winding number.

Implements the winding number test from Dan Sunday's "Inclusion of a Point
in a Polygon". Only comparisons and one cross product per edge are used, so
results are exact for integer (and binary fraction) coordinates.

Boundary convention: crossings are counted half-open in y, which makes the
bottom (minimum y) and left edges of a lattice polygon part of its inside and
the top and right edges part of its outside. For the unit square, (0.5, 0)
and (0, 0.5) are INSIDE while (0.5, 1) and (1, 0.5) are OUTSIDE.
"""

from collections.abc import Sequence
from enum import Enum

Coordinate = tuple[float, float]


class Inclusion(Enum):
    """Classification of a point against a polygon."""

    INSIDE = "inside"
    OUTSIDE = "outside"


def is_left(p0: Coordinate, p1: Coordinate, p2: Coordinate) -> float:
    """Test if p2 is left of, on, or right of the infinite line through p0 and p1.

    Returns:
        > 0 if p2 is left of the line, 0 if on it, < 0 if right of it

    Examples:
        >>> is_left((0, 0), (1, 0), (0.5, 1))
        1.0
        >>> is_left((0, 0), (1, 0), (0.5, -1))
        -1.0
    """
    return (p1[0] - p0[0]) * (p2[1] - p0[1]) - (p2[0] - p0[0]) * (p1[1] - p0[1])


def winding_number(point: Coordinate, vertices: Sequence[Coordinate]) -> int:
    """Winding number of a polygon around a point.

    The polygon is closed automatically; a trailing copy of the first vertex
    is accepted as well.

    Args:
        point: The point to test
        vertices: Polygon vertices in order

    Returns:
        Signed number of times the polygon winds around the point
        (0 when the point is outside)
    """
    n = len(vertices)
    if n < 3:
        return 0

    px, py = point
    wn = 0
    for i in range(n):
        v_i = vertices[i]
        v_next = vertices[(i + 1) % n]

        if v_i[1] <= py:
            # Upward crossing with the point strictly left of the edge
            if v_next[1] > py and is_left(v_i, v_next, (px, py)) > 0:
                wn += 1
        else:
            # Downward crossing with the point strictly right of the edge
            if v_next[1] <= py and is_left(v_i, v_next, (px, py)) < 0:
                wn -= 1

    return wn


def point_in_polygon(point: Coordinate, vertices: Sequence[Coordinate]) -> Inclusion:
    """Classify a point as inside or outside a polygon.

    Args:
        point: The point to test
        vertices: Polygon vertices in order (closed automatically)

    Returns:
        Inclusion.INSIDE for a nonzero winding number, Inclusion.OUTSIDE otherwise

    Examples:
        >>> square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        >>> point_in_polygon((0.5, 0.5), square)
        <Inclusion.INSIDE: 'inside'>
        >>> point_in_polygon((2, 2), square)
        <Inclusion.OUTSIDE: 'outside'>
    """
    if winding_number(point, vertices) == 0:
        return Inclusion.OUTSIDE
    return Inclusion.INSIDE


def contains(vertices: Sequence[Coordinate], point: Coordinate) -> bool:
    """Check if a polygon contains a point (see point_in_polygon)."""
    return point_in_polygon(point, vertices) == Inclusion.INSIDE
