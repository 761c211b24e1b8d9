"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library with
formatted messages and grid previews. Everything goes to stderr so that the
SVG document can be piped from stdout.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from identitrace.domain import Identicon
from identitrace.utils import ProcessingStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_CELL = "██"  # Filled grid cell


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Identitrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_identicon_info(identicon: Identicon) -> None:
    """Print colours and grid statistics of an identicon."""
    line = Text("  ")
    line.append(identicon.text, style="bold")
    console.print(line)

    bg = identicon.bg_color or "none"
    console.print(
        f"  {identicon.size}x{identicon.size} grid {SYM_DOT} "
        f"[{identicon.fg_color}]{identicon.fg_color}[/{identicon.fg_color}] on {bg} "
        f"{SYM_DOT} {len(identicon.foreground.cells)} filled cells"
    )


def print_grid(identicon: Identicon) -> None:
    """Print the occupancy grid as coloured blocks."""
    table = Table(show_header=False, show_edge=False, box=None, padding=0)
    for _ in range(identicon.size):
        table.add_column()

    for row in identicon.foreground.to_rows(filled="1", empty="0"):
        cells = []
        for c in row:
            if c == "1":
                cells.append(Text(SYM_CELL, style=identicon.fg_color))
            elif identicon.bg_color:
                cells.append(Text(SYM_CELL, style=identicon.bg_color))
            else:
                cells.append(Text("  "))
        table.add_row(*cells)

    console.print()
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str | None, file_size: str, stats: ProcessingStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None when written to stdout)
        file_size: Human-readable size of the document
        stats: Statistics of the run
    """
    time_str = _format_time(stats.duration_seconds)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path or "<stdout>", style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.component_count} components {SYM_DOT} {stats.loop_count} loops {SYM_DOT} "
        f"{stats.bridge_count} bridges {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
