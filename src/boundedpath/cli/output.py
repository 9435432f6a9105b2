"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for path processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]BoundedPath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_boundary_info(file_path: str, name: str, inner_count: int, outer_count: int) -> None:
    """Print boundary file information.

    Args:
        file_path: Path to the boundary file
        name: Path name
        inner_count: Number of inner boundary samples
        outer_count: Number of outer boundary samples
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(file_path)
    line1.append(f" ({name})")
    console.print(line1)
    console.print(f"  {inner_count:,} inner {SYM_DOT} {outer_count:,} outer samples")


def print_mesh_summary(vertices: int, triangles: int, centerline: int, flipped: int) -> None:
    """Print a table describing one triangulated path."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Vertices", f"{vertices:,}")
    table.add_row("Triangles", f"{triangles:,}")
    table.add_row("Centerline points", f"{centerline:,}")
    table.add_row("Re-wound triangles", f"{flipped:,}")
    console.print(table)


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


def print_processing_info(files: int, workers: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        files: Number of boundary files
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {files} files {SYM_DOT} {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    total_time_s: float,
    processed: int,
    triangles: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of paths processed
        triangles: Total number of triangles emitted
        errors: Number of errors encountered
        avg_time_ms: Average build time per path in milliseconds
        min_time_ms: Minimum build time per path in milliseconds
        max_time_ms: Maximum build time per path in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} paths {SYM_DOT} {triangles:,} triangles {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.1f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.1f}–{max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")


def print_errors(errors: list[tuple[str, str]]) -> None:
    """Print per-path error lines."""
    for name, message in errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(name, style="bold")
        line.append(f": {message}")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} Cancelling... waiting for in-progress paths")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of paths successfully processed before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} paths completed {SYM_DOT} {cancelled} tasks cancelled")
