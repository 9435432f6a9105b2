"""Path building and parallel processing orchestration.

This module ties the triangulator, smoother and space conversion together
behind the BoundedPath object, and coordinates multi-file runs with one
worker process per boundary file.

Key components:
- BoundedPath: Builds a ribbon mesh and smoothed centerline from two boundaries
- build_path: Top-level picklable function for parallel execution
- PathProcessor: Main orchestrator class for multi-file processing
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

import numpy as np
import numpy.typing as npt

from boundedpath.config import BoundedPathSettings
from boundedpath.core.smoother import CenterlineSmoother
from boundedpath.core.transform import as_matrix, identity_matrix, transform_points
from boundedpath.core.triangulator import RibbonTriangulator, TriangulationResult
from boundedpath.domain import Boundary, BoundarySet, Point, RibbonMesh, Space, Vertex
from boundedpath.exceptions import BoundedPathError
from boundedpath.io import BoundaryReader, MeshWriter, OutputFormat
from boundedpath.utils import ProcessingLogger, ProcessingStats, configure_logging


class BoundedPath:
    """A ribbon mesh and smoothed centerline between two boundaries.

    Every call to update_mesh() rebuilds both outputs from scratch; nothing
    is updated incrementally.

    Example:
        path = BoundedPath(local_to_world=translation_matrix(5.0, 0.0))
        mesh = path.update_mesh(inner, outer)
        world_centerline = path.get_centerline(Space.WORLD)
    """

    def __init__(
        self,
        settings: BoundedPathSettings | None = None,
        local_to_world: npt.ArrayLike | None = None,
    ) -> None:
        """Initialize an empty path.

        Args:
            settings: Smoothing, conversion and processing settings
            local_to_world: 4x4 matrix used for Space.WORLD output (identity if None)
        """
        self.settings = settings or BoundedPathSettings()
        self.local_to_world: npt.NDArray[np.float64] = (
            identity_matrix() if local_to_world is None else as_matrix(local_to_world)
        )
        self.triangulator = RibbonTriangulator()
        self.smoother = CenterlineSmoother(
            self.settings.smoothing,
            max_workers=self.settings.processing.thread_workers,
        )
        self._mesh: RibbonMesh | None = None
        self._centerline: list[Point] = []
        self._last_result: TriangulationResult | None = None

    @classmethod
    def from_boundaries(
        cls,
        boundaries: BoundarySet,
        settings: BoundedPathSettings | None = None,
    ) -> "BoundedPath":
        """Create a path and build it from a BoundarySet."""
        path = cls(settings=settings, local_to_world=boundaries.local_to_world)
        path.update_mesh(boundaries.inner, boundaries.outer)
        return path

    def update_mesh(
        self,
        inner: Boundary | Sequence[Vertex],
        outer: Boundary | Sequence[Vertex],
    ) -> RibbonMesh:
        """Rebuild the mesh and centerline from the given boundaries.

        Args:
            inner: Inner boundary (closed)
            outer: Outer boundary (closed)

        Returns:
            The new ribbon mesh

        Raises:
            InsufficientBoundaryError: If a boundary has fewer than 2 points
        """
        result = self.triangulator.triangulate(inner, outer)
        self._last_result = result
        self._mesh = result.mesh
        self._centerline = self.smoother.smooth(result.centerline)
        return result.mesh

    @property
    def mesh(self) -> RibbonMesh:
        """The current ribbon mesh.

        Raises:
            RuntimeError: If the mesh has not been built yet
        """
        if self._mesh is None:
            raise RuntimeError("Mesh not built. Call update_mesh() first.")
        return self._mesh

    @property
    def raw_centerline(self) -> list[Point]:
        """Unsmoothed centerline from the last triangulation."""
        if self._last_result is None:
            return []
        return list(self._last_result.centerline)

    @property
    def flipped_count(self) -> int:
        return self._last_result.flipped_count if self._last_result else 0

    def get_centerline(self, space: Space = Space.LOCAL) -> list[Point]:
        """Get the smoothed centerline.

        Args:
            space: Space of the returned points; WORLD applies local_to_world

        Returns:
            Centerline points in the requested space
        """
        if space is Space.LOCAL:
            return list(self._centerline)

        return transform_points(
            self._centerline,
            self.local_to_world,
            batch_size=self.settings.conversion.batch_size,
            max_workers=self.settings.processing.thread_workers,
        )


def build_path(
    boundaries_dict: dict[str, Any],
    settings_dict: dict[str, Any],
) -> dict[str, Any]:
    """Build one path's mesh and centerline.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        boundaries_dict: Serialized boundaries (from BoundarySet.to_dict())
        settings_dict: Serialized settings (logging excluded)

    Returns:
        Dictionary containing either:
        - Success: {"name", "mesh", "centerline", "space", "flipped", "duration_ms"}
        - Error: {"error": str, "path_name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        boundaries = BoundarySet.from_dict(boundaries_dict)
        settings = BoundedPathSettings.model_validate(settings_dict)

        path = BoundedPath.from_boundaries(boundaries, settings)
        space = settings.conversion.space
        centerline = path.get_centerline(space)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": boundaries.name,
            "mesh": path.mesh.to_dict(),
            "centerline": [p.to_dict() for p in centerline],
            "space": space.value,
            "flipped": path.flipped_count,
            "inner_count": len(boundaries.inner),
            "outer_count": len(boundaries.outer),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        tb = traceback.format_exc()
        return {
            "error": str(e),
            "path_name": boundaries_dict.get("name", "unknown"),
            "traceback": tb,
            "duration_ms": duration_ms,
        }


class PathProcessor:
    """Orchestrates parallel ribbon building for many boundary files.

    Manages the complete workflow:
    1. Load and validate boundary files
    2. Build each path in a worker process
    3. Collect results and update statistics
    4. Write meshes and centerlines

    Example:
        settings = BoundedPathSettings()
        processor = PathProcessor(settings)
        stats = processor.process(
            input_paths=[Path("track.json")],
            fmt=OutputFormat.OBJ,
            max_workers=4,
        )
    """

    def __init__(self, config: BoundedPathSettings) -> None:
        """Initialize path processor with configuration.

        Args:
            config: Settings for sampling, smoothing, conversion and processing
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        input_paths: list[Path],
        output_dir: Path | None = None,
        fmt: OutputFormat = OutputFormat.OBJ,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Process boundary files with parallel path building.

        Args:
            input_paths: Boundary files to process
            output_dir: Directory for outputs (each input's directory if None)
            fmt: Output format
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, path_name, success)
                for progress updates

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        stats = ProcessingStats()
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info(
            "Starting path processing",
            inputs=len(input_paths),
            format=fmt.value,
            max_workers=max_workers,
        )

        tasks: dict[str, tuple[Path, BoundarySet]] = {}
        for input_path in input_paths:
            try:
                boundaries = BoundaryReader(input_path, self.config.sampling).load()
            except (FileNotFoundError, BoundedPathError) as e:
                self.processing_logger.log_path_error(str(input_path), e)
                stats.error_count += 1
                stats.errors.append((str(input_path), str(e)))
                continue
            tasks[str(input_path)] = (input_path, boundaries)

        if tasks:
            self._build_paths_parallel(
                tasks=tasks,
                output_dir=output_dir,
                fmt=fmt,
                max_workers=max_workers,
                stats=stats,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No paths to process")

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            triangles=stats.triangles_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _build_paths_parallel(
        self,
        tasks: dict[str, tuple[Path, BoundarySet]],
        output_dir: Path | None,
        fmt: OutputFormat,
        max_workers: int | None,
        stats: ProcessingStats,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> None:
        """Build paths in parallel using ProcessPoolExecutor and write outputs.

        Args:
            tasks: Mapping of task key to (input path, loaded boundaries)
            output_dir: Directory for outputs
            fmt: Output format
            max_workers: Maximum worker processes
            stats: Statistics object to update
            progress_callback: Optional progress callback
        """
        settings_dict = self.config.model_dump(mode="json", exclude={"logging"})

        self.logger.info(
            "Starting parallel processing",
            path_count=len(tasks),
            max_workers=max_workers,
        )

        total = len(tasks)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], str] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for key, (_, boundaries) in tasks.items():
                self.processing_logger.log_path_start(boundaries.name)
                future = executor.submit(build_path, boundaries.to_dict(), settings_dict)
                pending_futures[future] = key

            try:
                for future in as_completed(pending_futures):
                    key = pending_futures.pop(future)
                    input_path, boundaries = tasks[key]
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            self.processing_logger.log_path_error(
                                path_name=result["path_name"],
                                error=Exception(result["error"]),
                                traceback=result.get("traceback"),
                            )
                            stats.error_count += 1
                            stats.errors.append((result["path_name"], result["error"]))
                        else:
                            self._write_result(result, input_path, output_dir, fmt)
                            success = True

                            mesh_triangles = len(result["mesh"]["triangles"]) // 3
                            stats.processed_count += 1
                            stats.triangles_emitted += mesh_triangles

                            self.processing_logger.log_triangulation(
                                path_name=result["name"],
                                inner_count=result["inner_count"],
                                outer_count=result["outer_count"],
                                flipped=result["flipped"],
                            )
                            duration_ms = result.get("duration_ms", 0.0)
                            self.processing_logger.log_path_complete(
                                path_name=result["name"],
                                triangles=mesh_triangles,
                                duration_ms=duration_ms,
                            )
                            stats.path_timings_ms.append(duration_ms)

                    except Exception as e:
                        # Executor-level or write error
                        tb = traceback.format_exc()
                        self.processing_logger.log_path_error(
                            path_name=boundaries.name,
                            error=e,
                            traceback=tb,
                        )
                        stats.error_count += 1
                        stats.errors.append((boundaries.name, str(e)))

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, boundaries.name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _write_result(
        self,
        result: dict[str, Any],
        input_path: Path,
        output_dir: Path | None,
        fmt: OutputFormat,
    ) -> Path:
        """Write one successful build result to disk."""
        output_path = MeshWriter.get_output_path(input_path, fmt, output_dir)
        writer = MeshWriter(output_path, fmt)
        writer.write(
            name=result["name"],
            mesh=RibbonMesh.from_dict(result["mesh"]),
            centerline=[Point.from_dict(p) for p in result["centerline"]],
            space=Space(result["space"]),
        )

        self.logger.info("Ribbon saved", output=str(output_path))
        return output_path
