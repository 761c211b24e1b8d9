"""Processing orchestration for the identicon pipeline.

This module coordinates the full workflow from text to SVG: grid derivation,
colour selection and outlining of every component of every drawn layer, with
optional parallel processing of components using ProcessPoolExecutor.

Key components:
- process_component: Top-level picklable function for parallel execution
- LayerProcessor: Outlines all components of one layer
- IdenticonGenerator: Main orchestrator class
- generate: One-call convenience wrapper returning the SVG document
"""

import time
import traceback
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from identitrace.config import (
    BackgroundMode,
    GeometryConfig,
    IdenticonConfig,
    IdentitraceSettings,
    ProcessingConfig,
    get_default_settings,
)
from identitrace.core.color import foreground_color, resolve_background
from identitrace.core.grid import hash_input, mark_present, square_grid
from identitrace.core.grouping import group_components
from identitrace.core.outliner import outline_component
from identitrace.domain import Component, Identicon, Layer, OccupancyGrid, OutlinePath
from identitrace.exceptions import LayerProcessingError
from identitrace.io import SvgWriter
from identitrace.utils import LoggingObserver, ProcessingLogger, ProcessingStats


def process_component(
    component_dict: dict[str, Any],
    geometry_dict: dict[str, Any],
) -> dict[str, Any]:
    """Outline a single component.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the component, computes its outline path, and returns the result.

    Args:
        component_dict: Serialized component (from Component.to_dict())
        geometry_dict: Serialized geometry configuration

    Returns:
        Dictionary containing either:
        - Success: {"path": path_dict, "loops": int, "bridges": int, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "component_index": int,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        component = Component.from_dict(component_dict)
        geometry = GeometryConfig(**geometry_dict)

        path = outline_component(component, split_pinches=geometry.split_pinch_vertices)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "path": path.to_dict(),
            "loops": path.loop_count,
            "bridges": len(path.bridge_lengths),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "component_index": component_dict.get("index", -1),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class LayerProcessor:
    """Outlines every component of a layer's occupancy grid.

    Components are outlined one after another, or in worker processes when
    parallel processing is enabled. Paths are always returned in component
    index order, whatever the completion order of the workers.
    """

    def __init__(
        self,
        geometry: GeometryConfig,
        processing: ProcessingConfig,
        processing_logger: ProcessingLogger,
        logger: structlog.stdlib.BoundLogger,
    ) -> None:
        self.geometry = geometry
        self.processing = processing
        self.processing_logger = processing_logger
        self.logger = logger

    def process(self, grid: OccupancyGrid, layer: Layer) -> list[OutlinePath]:
        """Outline all components of a grid.

        Args:
            grid: Occupancy grid of the layer
            layer: Layer the grid belongs to (for logging and errors)

        Returns:
            One outline path per component, ordered by component index

        Raises:
            LayerProcessingError: If any component cannot be outlined
        """
        components = group_components(grid.cells, grid.size)
        self.processing_logger.log_layer_summary(layer.value, len(components), len(grid.cells))

        if not components:
            return []

        if self.processing.parallel and len(components) > 1:
            return self._process_parallel(components, layer)
        return self._process_sequential(components, layer)

    def _process_sequential(self, components: list[Component], layer: Layer) -> list[OutlinePath]:
        paths: list[OutlinePath] = []

        for component in components:
            start_time = time.time()
            self.processing_logger.log_component_start(layer.value, component.index, len(component))
            observer = LoggingObserver(self.logger, layer=layer.value, component=component.index)

            try:
                path = outline_component(
                    component,
                    split_pinches=self.geometry.split_pinch_vertices,
                    observer=observer,
                )
            except Exception as e:
                self.processing_logger.log_component_error(
                    layer.value,
                    component.index,
                    error=str(e),
                    error_type=type(e).__name__,
                    traceback=traceback.format_exc(),
                )
                raise LayerProcessingError(layer.value, component.index, str(e)) from e

            self.processing_logger.log_component_complete(
                layer.value,
                component.index,
                loops=path.loop_count,
                bridges=len(path.bridge_lengths),
                edges=path.edge_count,
                duration_ms=(time.time() - start_time) * 1000,
            )
            paths.append(path)

        return paths

    def _process_parallel(self, components: list[Component], layer: Layer) -> list[OutlinePath]:
        geometry_dict = self.geometry.model_dump()
        results: dict[int, dict[str, Any]] = {}

        self.logger.info(
            "Starting parallel processing",
            layer=layer.value,
            component_count=len(components),
            max_workers=self.processing.max_workers,
        )

        with ProcessPoolExecutor(max_workers=self.processing.max_workers) as executor:
            pending_futures = {
                executor.submit(process_component, c.to_dict(), geometry_dict): c.index
                for c in components
            }

            for future in as_completed(pending_futures):
                results[pending_futures[future]] = future.result()

        paths: list[OutlinePath] = []
        failures: list[tuple[int, str]] = []

        for component in components:
            result = results[component.index]

            if "error" in result:
                self.processing_logger.log_component_error(
                    layer.value,
                    component.index,
                    error=result["error"],
                    error_type=result["error_type"],
                    traceback=result.get("traceback"),
                )
                failures.append((component.index, result["error"]))
                continue

            self.processing_logger.log_component_complete(
                layer.value,
                component.index,
                loops=result["loops"],
                bridges=result["bridges"],
                edges=len(result["path"]["edges"]),
                duration_ms=result.get("duration_ms", 0.0),
            )
            paths.append(OutlinePath.from_dict(result["path"]))

        if failures:
            index, reason = failures[0]
            raise LayerProcessingError(layer.value, index, reason)

        return paths


class IdenticonGenerator:
    """Orchestrates identicon generation.

    Manages the complete workflow:
    1. Hash the text and derive the foreground colour and occupancy grid
    2. Resolve the background colour (if any)
    3. Outline the components of each drawn layer
    4. Serialize the result to SVG

    Example:
        settings = IdentitraceSettings()
        generator = IdenticonGenerator(settings)
        svg = generator.render("hello")
    """

    def __init__(
        self,
        settings: IdentitraceSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the generator with configuration.

        Args:
            settings: Identitrace settings (defaults if None)
            logger: Logger to report to (the "identitrace" logger if None)
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.get_logger("identitrace")
        self.processing_logger = ProcessingLogger(self.logger)
        self.layer_processor = LayerProcessor(
            geometry=self.settings.geometry,
            processing=self.settings.processing,
            processing_logger=self.processing_logger,
            logger=self.logger,
        )
        self.writer = SvgWriter(
            scale=self.settings.identicon.scale,
            merge_collinear=self.settings.geometry.merge_collinear,
        )

    @property
    def stats(self) -> ProcessingStats:
        """Statistics accumulated over all runs of this generator."""
        return self.processing_logger.stats

    def build(self, text: str) -> Identicon:
        """Derive the identicon of a text, with outline paths for each drawn layer.

        Raises:
            InvalidGridSizeError: If the configured size is unsupported
            InvalidColorError: If the background setting is invalid
            LayerProcessingError: If a component cannot be outlined
        """
        config = self.settings.identicon
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        digest = hash_input(text, config.size)
        fg_color = foreground_color(digest)
        foreground = OccupancyGrid.from_flags(mark_present(square_grid(digest, config.size)), config.size)
        background = foreground.complement()
        bg_color = resolve_background(fg_color, config.background)

        self.logger.info(
            "Building identicon",
            size=config.size,
            fg_color=fg_color,
            bg_color=bg_color,
            filled=len(foreground.cells),
        )

        identicon = Identicon(
            text=text,
            size=config.size,
            fg_color=fg_color,
            bg_color=bg_color,
            opacity=config.opacity,
            padding=config.padding,
            foreground=foreground,
            background=background,
        )
        identicon.fg_paths = self.layer_processor.process(foreground, Layer.FOREGROUND)
        if identicon.has_background():
            identicon.bg_paths = self.layer_processor.process(background, Layer.BACKGROUND)

        stats.end_time = time.time()
        self.logger.info(
            "Identicon built",
            components=stats.component_count,
            loops=stats.loop_count,
            bridges=stats.bridge_count,
            duration_seconds=round(stats.duration_seconds, 4),
        )

        return identicon

    def render(self, text: str) -> str:
        """Derive the identicon of a text and serialize it to SVG."""
        return self.writer.render(self.build(text))


def generate(
    text: str,
    size: int = 5,
    background: BackgroundMode | str | None = None,
    opacity: float = 1.0,
    padding: int = 0,
) -> str:
    """Generate the SVG identicon of a text.

    Args:
        text: Input text
        size: Number of cells per grid side (4 to 10)
        background: None for a transparent background, a hex colour, or a
            BackgroundMode (or its name) for a colour derived from the foreground
        opacity: Fill opacity of both layers
        padding: Blank margin around the grid, in SVG units

    Returns:
        The SVG document

    Examples:
        >>> svg = generate("hello")
        >>> svg.startswith("<svg")
        True
    """
    settings = IdentitraceSettings(
        identicon=IdenticonConfig(
            size=size,
            background=background,
            opacity=opacity,
            padding=padding,
        )
    )
    return IdenticonGenerator(settings).render(text)
