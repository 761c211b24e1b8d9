"""SVG output layer for identitrace.

This module turns outline paths into SVG markup. It provides a clean
abstraction layer between the lattice geometry and the document format.

Key responsibilities:
- Scale lattice vertices and apply padding
- Drop collinear vertices
- Format path data and styled layer groups
- Write SVG files

Key classes:
- SvgWriter: Render and save identicons
"""

from identitrace.io.converter import outline_to_vertices, path_to_d
from identitrace.io.writer import SvgWriter

__all__ = [
    "SvgWriter",
    "outline_to_vertices",
    "path_to_d",
]
