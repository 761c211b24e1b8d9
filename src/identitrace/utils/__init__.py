"""Utility functions for identitrace.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
- A trace observer that logs tracer and bridger events
"""

from identitrace.utils.logging import (
    LoggingObserver,
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "LoggingObserver",
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
