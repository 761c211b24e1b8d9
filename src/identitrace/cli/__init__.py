"""Command-line interface for identitrace.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG to stdout or to a file
- Background colour schemes
- Terminal preview of the occupancy grid
- Detailed error reporting
"""

from identitrace.cli.app import cli, main

__all__ = ["cli", "main"]
