"""SVG writer for identicons.

This module provides the SvgWriter class that serializes an identicon's
outline paths into a standalone SVG document: one styled group per drawn
layer (background first) holding one path per component.
"""

from pathlib import Path

import structlog

from identitrace.domain import Identicon, Layer, OutlinePath
from identitrace.exceptions import SvgWriteError
from identitrace.io.converter import outline_to_vertices, path_to_d

logger = structlog.get_logger("identitrace.io")

SVG_PREAMBLE = (
    '<svg version="1.1" width="20mm" height="20mm" viewBox="0 0 {length} {length}" '
    'preserveAspectRatio="xMidYMid meet" shape-rendering="crispEdges" '
    'xmlns="http://www.w3.org/2000/svg">\n'
)
SVG_GROUP = (
    '  <g style="stroke: {color}; stroke-width: 0; stroke-opacity: {opacity}; '
    'fill: {color}; fill-opacity: {opacity};">\n{content}  </g>\n'
)
SVG_PATH = '    <path d="{d}"/>\n'
SVG_END = "</svg>"


def svg_length(size: int, scale: int, padding: int) -> int:
    """Side length of the SVG viewBox."""
    return size * scale + 2 * padding


class SvgWriter:
    """Serializes identicons to SVG.

    Example:
        writer = SvgWriter(scale=20)
        svg = writer.render(identicon)
        writer.save(identicon, Path("avatar.svg"))
    """

    def __init__(self, scale: int = 20, merge_collinear: bool = True) -> None:
        """Initialize the writer.

        Args:
            scale: SVG units per grid cell
            merge_collinear: Drop vertices where an outline runs straight on
        """
        self.scale = scale
        self.merge_collinear = merge_collinear

    def path_element(self, path: OutlinePath, padding: int = 0) -> str:
        """Render one outline path as a ``<path>`` element."""
        vertices = outline_to_vertices(
            path,
            scale=self.scale,
            offset=padding,
            merge_collinear=self.merge_collinear,
        )
        return SVG_PATH.format(d=path_to_d(vertices))

    def group_element(
        self,
        paths: list[OutlinePath],
        color: str,
        opacity: float,
        padding: int = 0,
    ) -> str:
        """Render the paths of one layer as a styled ``<g>`` element."""
        content = "".join(self.path_element(p, padding) for p in paths)
        return SVG_GROUP.format(color=color, opacity=opacity, content=content)

    def render(self, identicon: Identicon) -> str:
        """Render an identicon as an SVG document string."""
        length = svg_length(identicon.size, self.scale, identicon.padding)
        parts = [SVG_PREAMBLE.format(length=length)]

        if identicon.bg_color is not None:
            parts.append(
                self.group_element(
                    identicon.paths_for(Layer.BACKGROUND),
                    identicon.bg_color,
                    identicon.opacity,
                    identicon.padding,
                )
            )

        parts.append(
            self.group_element(
                identicon.paths_for(Layer.FOREGROUND),
                identicon.fg_color,
                identicon.opacity,
                identicon.padding,
            )
        )
        parts.append(SVG_END)
        return "".join(parts)

    def save(self, identicon: Identicon, output_path: Path) -> None:
        """Render an identicon and write it to a file (UTF-8).

        Raises:
            SvgWriteError: If the file cannot be written
        """
        svg = self.render(identicon)
        try:
            output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise SvgWriteError(str(output_path), str(e)) from e

        logger.info("SVG saved", output=str(output_path), bytes=len(svg))
