"""Logging utilities for Identitrace."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from identitrace.domain import Edge, Loop, Vertex

_HANDLER_MARK = "_identitrace_handler"


@dataclass
class ProcessingStats:
    """Statistics from an outlining run."""

    component_count: int = 0
    loop_count: int = 0
    bridge_count: int = 0
    edge_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so that an SVG written to stdout stays
    clean. Calling this again replaces the handlers installed before.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("identitrace")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking outlining progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_component_start(self, layer: str, component_index: int, cell_count: int) -> None:
        """Log start of component processing."""
        self._logger.debug(
            "Outlining component",
            layer=layer,
            component=component_index,
            cells=cell_count,
        )

    def log_component_complete(
        self,
        layer: str,
        component_index: int,
        loops: int,
        bridges: int,
        edges: int,
        duration_ms: float,
    ) -> None:
        """Log successful component processing."""
        self._logger.info(
            "Component outlined",
            layer=layer,
            component=component_index,
            loops=loops,
            bridges=bridges,
            edges=edges,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.component_count += 1
        self._stats.loop_count += loops
        self._stats.bridge_count += bridges
        self._stats.edge_count += edges

    def log_component_error(
        self,
        layer: str,
        component_index: int,
        error: str,
        error_type: str,
        traceback: str | None = None,
    ) -> None:
        """Log component processing error."""
        self._logger.error(
            "Component outlining failed",
            layer=layer,
            component=component_index,
            error=error,
            error_type=error_type,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((f"{layer}:{component_index}", error))

    def log_layer_summary(self, layer: str, component_count: int, cell_count: int) -> None:
        """Log grouping results for a layer."""
        self._logger.debug(
            "Layer grouped",
            layer=layer,
            components=component_count,
            cells=cell_count,
        )

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats


class LoggingObserver:
    """Trace observer forwarding tracer and bridger events to a logger."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context: object) -> None:
        self._logger = logger.bind(**context) if context else logger

    def loop_started(self, seed: Edge) -> None:
        self._logger.debug("Loop started", seed=seed.to_list())

    def edge_appended(self, edge: Edge) -> None:
        pass

    def pinch_resolved(self, vertex: Vertex, chosen: Edge) -> None:
        self._logger.debug("Pinch vertex split", vertex=list(vertex), chosen=chosen.to_list())

    def loop_closed(self, loop: Loop) -> None:
        self._logger.debug("Loop closed", edges=len(loop), area=loop.signed_area())

    def bridge_built(self, source: Edge, target: Edge, length: int) -> None:
        self._logger.debug(
            "Bridge built",
            source=source.to_list(),
            target=target.to_list(),
            length=length,
        )
