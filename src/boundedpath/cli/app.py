"""CLI application entry point for boundedpath.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from boundedpath import __version__
from boundedpath.cli.output import (
    console,
    create_progress,
    print_boundary_info,
    print_cancellation_notice,
    print_cancellation_summary,
    print_error,
    print_errors,
    print_header,
    print_mesh_summary,
    print_processing_info,
    print_step,
    print_success,
)
from boundedpath.config import (
    BoundedPathSettings,
    ConversionConfig,
    LoggingConfig,
    ProcessingConfig,
    SamplingConfig,
    SmoothingConfig,
)
from boundedpath.core import BoundedPath, PathProcessor
from boundedpath.domain import Space
from boundedpath.exceptions import BoundaryLoadError, BoundedPathError, SampleCountError
from boundedpath.io import BoundaryReader, OutputFormat

# Create the Typer app
app = typer.Typer(
    name="boundedpath",
    help="Build triangulated ribbon meshes and centerlines between two closed boundaries.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]BoundedPath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Build triangulated ribbon meshes and centerlines between two closed boundaries."""


@app.command()
def build(
    input_files: Annotated[
        list[Path],
        typer.Argument(
            help="Boundary JSON files with 'inner' and 'outer' point lists",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Output directory (default: next to each input)",
        ),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (obj|json)",
        ),
    ] = "obj",
    space: Annotated[
        str,
        typer.Option(
            "--space",
            "-s",
            help="Centerline coordinate space (local|world)",
        ),
    ] = "local",
    min_samples: Annotated[
        int,
        typer.Option(
            "--min-samples",
            help="Minimum samples per boundary",
            min=2,
        ),
    ] = 10,
    no_smooth: Annotated[
        bool,
        typer.Option(
            "--no-smooth",
            help="Write the raw, unsmoothed centerline",
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
) -> None:
    """Build a ribbon mesh and smoothed centerline for each boundary file.

    Example:
        boundedpath build track.json

    This will create track-ribbon.obj containing the mesh and the centerline.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        output_format = OutputFormat(fmt.lower())
    except ValueError:
        print_error(f"Invalid format: {fmt}", details="Valid values: obj, json")
        raise typer.Exit(code=1)

    try:
        output_space = Space(space.lower())
    except ValueError:
        print_error(f"Invalid space: {space}", details="Valid values: local, world")
        raise typer.Exit(code=1)

    for input_file in input_files:
        if not input_file.is_file():
            print_error(
                f"Input file not found: {input_file}",
                details=f"The file '{input_file}' does not exist or is not a file.",
            )
            raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = BoundedPathSettings(
        sampling=SamplingConfig(min_samples=min_samples),
        smoothing=SmoothingConfig(enabled=not no_smooth),
        conversion=ConversionConfig(space=output_space),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    if not quiet:
        actual_workers = workers if workers else os.cpu_count() or 1
        print_step("Processing")
        print_processing_info(len(input_files), actual_workers, is_auto=(workers is None))

    processor = PathProcessor(settings)
    stats = None

    try:
        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Building {len(input_files)} paths",
                    total=len(input_files),
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(
                    input_paths=input_files,
                    output_dir=output_dir,
                    fmt=output_format,
                    max_workers=workers,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process(
                input_paths=input_files,
                output_dir=output_dir,
                fmt=output_format,
                max_workers=workers,
            )
    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice()
            print_cancellation_summary(
                processed=stats.processed_count if stats else 0,
                cancelled=stats.cancelled_count if stats else 0,
            )
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

    if not quiet:
        print_success(
            total_time_s=stats.duration_seconds,
            processed=stats.processed_count,
            triangles=stats.triangles_emitted,
            errors=stats.error_count,
            avg_time_ms=stats.avg_path_time_ms,
            min_time_ms=stats.min_path_time_ms,
            max_time_ms=stats.max_path_time_ms,
        )
        if verbose and stats.errors:
            print_errors(stats.errors)

    if stats.error_count > 0:
        raise typer.Exit(code=1)


@app.command()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Boundary JSON file",
            show_default=False,
        ),
    ],
    min_samples: Annotated[
        int,
        typer.Option(
            "--min-samples",
            help="Minimum samples per boundary",
            min=2,
        ),
    ] = 10,
) -> None:
    """Triangulate a boundary file and print mesh statistics without writing output."""
    if not input_file.is_file():
        print_error(f"Input file not found: {input_file}")
        raise typer.Exit(code=1)

    try:
        boundaries = BoundaryReader(input_file, SamplingConfig(min_samples=min_samples)).load()

        print_step("Loading boundaries")
        print_boundary_info(
            file_path=str(input_file),
            name=boundaries.name,
            inner_count=len(boundaries.inner),
            outer_count=len(boundaries.outer),
        )

        print_step("Triangulating")
        path = BoundedPath.from_boundaries(boundaries)
        print_mesh_summary(
            vertices=path.mesh.vertex_count,
            triangles=path.mesh.triangle_count,
            centerline=len(path.get_centerline()),
            flipped=path.flipped_count,
        )

    except SampleCountError as e:
        print_error(str(e), details="Lower --min-samples or resample the boundary.")
        raise typer.Exit(code=1)
    except BoundaryLoadError as e:
        print_error(f"Could not load boundaries: {e.reason}")
        raise typer.Exit(code=1)
    except BoundedPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
