"""Rich console output helpers for the CLI.

All console output goes to stderr; stdout is reserved for point data.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True, soft_wrap=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svg2pts[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(source: str, width: float, height: float, path_count: int) -> None:
    """Print document information.

    Args:
        source: Input file name or <stdin>
        width: Document frame width
        height: Document frame height
        path_count: Number of visible paths
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {width:g} {SYM_DOT} {height:g} frame {SYM_DOT} {path_count:,} paths")


def print_sampling_info(distance: float, accuracy: float) -> None:
    """Print the effective sampling parameters."""
    spacing = f"{distance:g} spacing" if distance > 0 else "no normalization"
    console.print(f"  {spacing} {SYM_DOT} {accuracy:g} accuracy")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    paths: int,
    points: int,
    skipped: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Output file name or <stdout>
        total_time_s: Total processing time in seconds
        paths: Number of paths written
        points: Number of points written
        skipped: Number of elements skipped
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(
        f"  {paths:,} paths {SYM_DOT} {points:,} points {SYM_DOT} {skipped:,} skipped"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text keeps brackets in messages from being read as markup
    console.print(Text.assemble((f"{SYM_ERR} Error:", "bold red"), " ", message))
    if details:
        console.print(Text.assemble("  ", details))
