"""Converters from outline paths to SVG path data.

Outline paths live on the integer lattice of the grid. For drawing, every
lattice point is scaled to SVG units and shifted by the padding, and vertices
where the outline runs straight on are optionally dropped.
"""

from collections.abc import Sequence

from identitrace.core.geometry import simplify_vertices
from identitrace.domain import OutlinePath, Vertex


def outline_to_vertices(
    path: OutlinePath,
    scale: int = 20,
    offset: int = 0,
    merge_collinear: bool = True,
) -> list[Vertex]:
    """Convert an outline path to scaled SVG vertices.

    Args:
        path: Closed outline path on the grid lattice
        scale: SVG units per grid cell
        offset: Shift applied to both axes (the padding)
        merge_collinear: Drop vertices where the path continues straight

    Returns:
        Vertices in traversal order, without a repeated closing vertex
    """
    vertices = path.vertices()
    if merge_collinear:
        vertices = simplify_vertices(vertices)
    return [(x * scale + offset, y * scale + offset) for x, y in vertices]


def path_to_d(vertices: Sequence[Vertex]) -> str:
    """Format vertices as the ``d`` attribute of a closed SVG path.

    Examples:
        >>> path_to_d([(0, 0), (20, 0), (20, 20), (0, 20)])
        'M 0 0 L 20 0 L 20 20 L 0 20 z'
    """
    if not vertices:
        return ""

    (x0, y0), *rest = vertices
    parts = [f"M {x0} {y0}"]
    parts.extend(f"L {x} {y}" for x, y in rest)
    parts.append("z")
    return " ".join(parts)
