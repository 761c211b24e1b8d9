"""Tests for logging utilities."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from identitrace.domain import Edge, Loop
from identitrace.utils import (
    LoggingObserver,
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)


@pytest.fixture
def restore_root_handlers() -> Iterator[None]:
    """Put back the root logger handlers replaced by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


class TestProcessingStats:
    """Tests for ProcessingStats."""

    def test_duration(self) -> None:
        """Test duration from start and end times."""
        stats = ProcessingStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unfinished(self) -> None:
        """Test that an unfinished run has no duration."""
        assert ProcessingStats(start_time=10.0).duration_seconds == 0.0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_output(self, tmp_path: Path, restore_root_handlers: None) -> None:
        """Test that events are written to the log file as JSON."""
        log_file = tmp_path / "identitrace.log"
        logger = configure_logging(log_file=log_file)
        logger.info("Component outlined", component=3)

        lines = log_file.read_text(encoding="utf-8").splitlines()
        event = json.loads(lines[-1].split(" | ", 3)[3])
        assert event["event"] == "Component outlined"
        assert event["component"] == 3
        assert event["level"] == "info"

    def test_reconfigure_replaces_handlers(self, restore_root_handlers: None) -> None:
        """Test that repeated configuration does not stack handlers."""
        configure_logging()
        count = len(logging.getLogger().handlers)
        configure_logging()
        assert len(logging.getLogger().handlers) == count

    def test_quiet(self, restore_root_handlers: None) -> None:
        """Test that quiet mode only lets errors through to the console."""
        configure_logging(console_level="DEBUG", quiet=True)
        console_handlers = [
            h for h in logging.getLogger().handlers
            if type(h) is logging.StreamHandler and getattr(h, "_identitrace_handler", False)
        ]
        assert [h.level for h in console_handlers] == [logging.ERROR]


class TestProcessingLogger:
    """Tests for ProcessingLogger."""

    def test_complete_updates_stats(self) -> None:
        """Test that completed components are counted."""
        mock_logger = Mock()
        processing_logger = ProcessingLogger(mock_logger)

        processing_logger.log_component_complete("foreground", 0, loops=2, bridges=1, edges=18, duration_ms=1.234)
        processing_logger.log_component_complete("foreground", 9, loops=1, bridges=0, edges=4, duration_ms=0.5)

        stats = processing_logger.stats
        assert stats.component_count == 2
        assert stats.loop_count == 3
        assert stats.bridge_count == 1
        assert stats.edge_count == 22
        mock_logger.info.assert_called_with(
            "Component outlined",
            layer="foreground",
            component=9,
            loops=1,
            bridges=0,
            edges=4,
            duration_ms=0.5,
        )

    def test_error_updates_stats(self) -> None:
        """Test that failures are recorded with their location."""
        mock_logger = Mock()
        processing_logger = ProcessingLogger(mock_logger)

        processing_logger.log_component_error("background", 4, error="boom", error_type="DegreeViolationError")

        assert processing_logger.stats.error_count == 1
        assert processing_logger.stats.errors == [("background:4", "boom")]
        mock_logger.error.assert_called_once()


class TestLoggingObserver:
    """Tests for LoggingObserver."""

    def test_binds_context(self) -> None:
        """Test that context is bound once and events are logged."""
        mock_logger = Mock()
        observer = LoggingObserver(mock_logger, layer="foreground", component=10)
        bound = mock_logger.bind.return_value

        mock_logger.bind.assert_called_once_with(layer="foreground", component=10)

        observer.bridge_built(Edge((0, 4), (0, 3)), Edge((1, 4), (1, 3)), 1)
        bound.debug.assert_called_once_with(
            "Bridge built",
            source=[[0, 4], [0, 3]],
            target=[[1, 4], [1, 3]],
            length=1,
        )

    def test_loop_closed(self) -> None:
        """Test that closed loops are logged with their area."""
        mock_logger = Mock()
        observer = LoggingObserver(mock_logger)
        loop = Loop(
            (
                Edge((0, 1), (0, 0)),
                Edge((0, 0), (1, 0)),
                Edge((1, 0), (1, 1)),
                Edge((1, 1), (0, 1)),
            )
        )

        observer.loop_closed(loop)

        mock_logger.bind.assert_not_called()
        mock_logger.debug.assert_called_once_with("Loop closed", edges=4, area=1.0)
