"""CLI application entry point for identitrace.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from identitrace import __version__
from identitrace.cli.output import (
    console,
    print_error,
    print_grid,
    print_header,
    print_identicon_info,
    print_step,
    print_success,
)
from identitrace.config import (
    IdenticonConfig,
    IdentitraceSettings,
    LoggingConfig,
    ProcessingConfig,
)
from identitrace.core import IdenticonGenerator
from identitrace.exceptions import (
    ColorError,
    GridError,
    IdentitraceError,
    LayerProcessingError,
    SvgWriteError,
)
from identitrace.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="identitrace",
    help="Generate identicons as compact SVG outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Identitrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def identicon(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to derive the identicon from (e.g. an e-mail address)",
            show_default=False,
        ),
    ],
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Number of cells per grid side (4-10)",
            min=4,
            max=10,
        ),
    ] = 5,
    background: Annotated[
        str | None,
        typer.Option(
            "--background",
            "-b",
            help="Background: a hex colour or a scheme (basic|split1|split2); transparent if omitted",
        ),
    ] = None,
    opacity: Annotated[
        float,
        typer.Option(
            "--opacity",
            help="Fill opacity (0-1)",
            min=0.0,
            max=1.0,
        ),
    ] = 1.0,
    padding: Annotated[
        int,
        typer.Option(
            "--padding",
            help="Blank margin around the grid, in SVG units",
            min=0,
        ),
    ] = 0,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: write to stdout)",
        ),
    ] = None,
    show_grid: Annotated[
        bool,
        typer.Option(
            "--show-grid",
            help="Preview the occupancy grid in the terminal",
        ),
    ] = False,
    parallel: Annotated[
        bool,
        typer.Option(
            "--parallel",
            help="Outline components in worker processes",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate the identicon of TEXT as an SVG document.

    The grid is derived from a hash of the text and mirrored for symmetry;
    every connected region becomes a single SVG path, holes included.

    Example:
        identitrace alice@example.com -s 6 -b basic -o alice.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    # Header only when the SVG does not go to stdout
    show_status = output is not None and not quiet
    if show_status:
        print_header(__version__)

    settings = IdentitraceSettings(
        identicon=IdenticonConfig(
            size=size,
            background=background,
            opacity=opacity,
            padding=padding,
        ),
        processing=ProcessingConfig(
            parallel=parallel,
            max_workers=workers,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="INFO" if verbose else log_level.upper(),
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        generator = IdenticonGenerator(settings, logger=logger)

        if show_status:
            print_step("Building identicon")

        result = generator.build(text)

        if show_status:
            print_identicon_info(result)
        if show_grid and not quiet:
            print_grid(result)

        svg = generator.writer.render(result)

        if output is None:
            typer.echo(svg)
        else:
            generator.writer.save(result, output)

        if show_status:
            print_success(
                output_path=str(output),
                file_size=_format_size(len(svg.encode("utf-8"))),
                stats=generator.stats,
            )

    except GridError as e:
        print_error(f"Invalid grid: {e}")
        raise typer.Exit(code=1)
    except ColorError as e:
        print_error(f"Invalid colour: {e}", details="Use #rgb, #rrggbb, basic, split1 or split2")
        raise typer.Exit(code=1)
    except LayerProcessingError as e:
        print_error(f"Could not outline {e.layer} layer", details=e.reason)
        raise typer.Exit(code=1)
    except SvgWriteError as e:
        print_error(f"Could not save SVG: {e.reason}")
        raise typer.Exit(code=1)
    except IdentitraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g. "2 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    return f"{size_bytes / 1024:.0f} KB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
