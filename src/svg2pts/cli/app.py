"""CLI application entry point for svg2pts.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from svg2pts import __version__
from svg2pts.cli.output import (
    console,
    print_document_info,
    print_error,
    print_header,
    print_sampling_info,
    print_step,
    print_success,
)
from svg2pts.config import (
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    SamplingConfig,
    Svg2PtsSettings,
)
from svg2pts.core import PathProcessor
from svg2pts.exceptions import (
    DocumentLoadError,
    InvalidConfigurationError,
    OutputWriteError,
    Svg2PtsError,
)

# Create the Typer app
app = typer.Typer(
    name="svg2pts",
    help="Convert all visible paths in an SVG document to a list of points.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svg2pts[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_file: Annotated[
        Path | None,
        typer.Argument(
            metavar="INPUT",
            help="Input SVG file, stdin if not present",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Argument(
            metavar="OUTPUT",
            help="Output file, stdout if not present",
            show_default=False,
        ),
    ] = None,
    distance: Annotated[
        float,
        typer.Option(
            "--distance",
            "-d",
            help="Target distance between points in SVG user units. 0 disables normalization",
        ),
    ] = 0.0,
    accuracy: Annotated[
        float | None,
        typer.Option(
            "--accuracy",
            "-a",
            help="Bezier flattening tolerance (default: min(distance/25, 0.05), or 0.1 without distance)",
            show_default=False,
        ),
    ] = None,
    points: Annotated[
        int | None,
        typer.Option(
            "--points",
            "-p",
            help="Target total number of points; derives the distance",
            show_default=False,
        ),
    ] = None,
    flip_y: Annotated[
        bool,
        typer.Option(
            "--flip-y/--no-flip-y",
            help="Mirror y about the document height so output is y-up",
        ),
    ] = True,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes for path sampling",
            min=1,
        ),
    ] = 1,
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
            help="Print a summary on stderr",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report errors",
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
    """Convert all paths in an SVG document to a list of points.

    Paths with no stroke and no fill are ignored. Output is a sequence of
    points, one `X Y` pair per line.

    Example:
        svg2pts -d 0.5 drawing.svg drawing.pts
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    source = str(input_file) if input_file is not None else "<stdin>"
    target = str(output) if output is not None else "<stdout>"

    try:
        settings = _build_settings(
            distance=distance,
            accuracy=accuracy,
            points=points,
            flip_y=flip_y,
            workers=workers,
            log_file=log_file,
            log_level="ERROR" if quiet else log_level,
        )

        if verbose:
            print_header(__version__)
            print_step("Converting")

        svg_data = _read_input(input_file)
        processor = PathProcessor(settings)

        if output is None:
            stats = processor.process(
                svg_data, sys.stdout.buffer, source=source, target=target
            )
        else:
            try:
                sink = output.open("wb")
            except OSError as e:
                raise OutputWriteError(target, e.strerror or str(e)) from e
            with sink:
                stats = processor.process(svg_data, sink, source=source, target=target)

        if verbose:
            print_document_info(
                source=source,
                width=stats.width,
                height=stats.height,
                path_count=stats.paths_found,
            )
            print_sampling_info(stats.distance, stats.accuracy)
            print_success(
                output_path=target,
                total_time_s=stats.duration_seconds,
                paths=stats.paths_sampled,
                points=stats.points_written,
                skipped=stats.skipped_count,
            )

    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except Svg2PtsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _build_settings(
    distance: float,
    accuracy: float | None,
    points: int | None,
    flip_y: bool,
    workers: int,
    log_file: Path | None,
    log_level: str,
) -> Svg2PtsSettings:
    """Create settings from CLI arguments.

    Raises:
        InvalidConfigurationError: If any value is out of range
    """
    try:
        return Svg2PtsSettings(
            sampling=SamplingConfig(distance=distance, accuracy=accuracy, points=points),
            output=OutputConfig(flip_y=flip_y),
            processing=ProcessingConfig(max_workers=workers),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        raise InvalidConfigurationError(_describe_validation_error(e)) from e


def _describe_validation_error(error: ValidationError) -> str:
    """Turn the first pydantic error into a one-line message.

    Args:
        error: Validation error raised by a settings model

    Returns:
        Message such as "distance: Input should be greater than or equal to 0"
    """
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", str(error))
    return f"{field}: {message}" if field else message


def _read_input(input_file: Path | None) -> bytes:
    """Read the whole input document.

    Args:
        input_file: Path to read, or None for stdin

    Returns:
        Document bytes

    Raises:
        DocumentLoadError: If the input cannot be read
    """
    if input_file is None:
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            raise DocumentLoadError("<stdin>", e.strerror or str(e)) from e

    if not input_file.is_file():
        raise DocumentLoadError(str(input_file), "file does not exist or is not a file")

    try:
        return input_file.read_bytes()
    except OSError as e:
        raise DocumentLoadError(str(input_file), e.strerror or str(e)) from e


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
