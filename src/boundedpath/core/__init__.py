"""Core processing algorithms for boundedpath.

This module contains the core algorithms for:

- Geometry operations (closest point, point-in-triangle, segment intersection)
- Bounded index cursors for walking boundary regions
- Ribbon triangulation (vertex alignment, greedy side selection, winding fix)
- Centerline smoothing (5-tap Gaussian, circular)
- Coordinate-space conversion (4x4 affine)
- Batched parallel-for execution

All algorithms are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)
- Deterministic (parallel and sequential runs agree exactly)

Key functions:
- closest_point_index_2d: Index of nearest point in the XY plane
- point_in_triangle: Strictly exclusive barycentric containment test
- segments_intersect: Orientation-based segment intersection test
- triangulate: Build ribbon mesh and raw centerline
- smooth_centerline: Gaussian-smooth a closed centerline
- transform_points: Convert points with a 4x4 matrix
- parallel_for: Batched per-element execution

Key classes:
- IndexCursor: Clamped cursor over a half-open range
- RibbonTriangulator: Triangulates ribbons between boundaries
- CenterlineSmoother: Configured centerline smoothing
- BoundedPath: Mesh plus smoothed centerline for one pair of boundaries
- PathProcessor: Parallel multi-file processing
"""

from boundedpath.core.cursor import CursorPair, IndexCursor
from boundedpath.core.geometry import (
    closest_point_index_2d,
    is_back_face,
    midpoint,
    mod,
    point_in_triangle,
    segments_intersect,
    triangle_cross_2d,
)
from boundedpath.core.parallel import parallel_for
from boundedpath.core.processor import BoundedPath, PathProcessor, build_path
from boundedpath.core.smoother import (
    GAUSSIAN_KERNEL,
    CenterlineSmoother,
    smooth_centerline,
    smoothing_pass_count,
)
from boundedpath.core.transform import transform_points, translation_matrix, trs_matrix
from boundedpath.core.triangulator import (
    RibbonTriangulator,
    TriangulationResult,
    build_vertex_buffer,
    triangulate,
)

__all__ = [
    "GAUSSIAN_KERNEL",
    # Processor classes
    "BoundedPath",
    # Smoothing classes
    "CenterlineSmoother",
    # Cursor classes
    "CursorPair",
    "IndexCursor",
    "PathProcessor",
    # Triangulation classes
    "RibbonTriangulator",
    "TriangulationResult",
    "build_path",
    "build_vertex_buffer",
    # Geometry functions
    "closest_point_index_2d",
    "is_back_face",
    "midpoint",
    "mod",
    "parallel_for",
    "point_in_triangle",
    "segments_intersect",
    "smooth_centerline",
    "smoothing_pass_count",
    "transform_points",
    "translation_matrix",
    "triangle_cross_2d",
    "triangulate",
    "trs_matrix",
]
