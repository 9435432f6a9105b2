"""Coordinate-space conversion of centerline points.

A 4x4 affine matrix is applied to each 2D point as the homogeneous vector
(x, y, 0, 1). Every output point depends only on its own input point, so the
conversion runs as a batched parallel-for.
"""

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from boundedpath.core.parallel import parallel_for
from boundedpath.domain import Point
from boundedpath.exceptions import TransformError

SPACE_CONVERSION_BATCH_SIZE = 64


def as_matrix(matrix: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Validate and convert a 4x4 matrix-like value.

    Raises:
        TransformError: If the value is not a finite 4x4 matrix
    """
    try:
        array = np.asarray(matrix, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TransformError(f"Matrix is not numeric: {e}") from e

    if array.shape != (4, 4):
        raise TransformError(f"Expected a 4x4 matrix, got shape {array.shape}")
    if not np.all(np.isfinite(array)):
        raise TransformError("Matrix contains non-finite values")
    return array


def identity_matrix() -> npt.NDArray[np.float64]:
    return np.eye(4, dtype=np.float64)


def translation_matrix(x: float, y: float, z: float = 0.0) -> npt.NDArray[np.float64]:
    """Matrix translating by (x, y, z)."""
    matrix = np.eye(4, dtype=np.float64)
    matrix[:3, 3] = (x, y, z)
    return matrix


def scale_matrix(x: float, y: float, z: float = 1.0) -> npt.NDArray[np.float64]:
    """Matrix scaling each axis independently."""
    return np.diag((x, y, z, 1.0)).astype(np.float64)


def trs_matrix(
    translation: Sequence[float] = (0.0, 0.0, 0.0),
    rotation_z_degrees: float = 0.0,
    scale: Sequence[float] = (1.0, 1.0, 1.0),
) -> npt.NDArray[np.float64]:
    """Translate-rotate-scale matrix with rotation about the Z axis.

    Applied to a point in scale, rotate, translate order.
    """
    theta = np.radians(rotation_z_degrees)
    cos_t, sin_t = np.cos(theta), np.sin(theta)
    rotation = np.array(
        [
            [cos_t, -sin_t, 0.0, 0.0],
            [sin_t, cos_t, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return translation_matrix(*translation) @ rotation @ scale_matrix(*scale)


def transform_point(point: Point, matrix: npt.NDArray[np.float64]) -> Point:
    """Apply a 4x4 matrix to a single 2D point."""
    x, y = point.x, point.y
    out_x = matrix[0, 0] * x + matrix[0, 1] * y + matrix[0, 3]
    out_y = matrix[1, 0] * x + matrix[1, 1] * y + matrix[1, 3]
    w = matrix[3, 0] * x + matrix[3, 1] * y + matrix[3, 3]
    if w != 0.0 and w != 1.0:
        out_x /= w
        out_y /= w
    return Point(float(out_x), float(out_y))


def transform_points(
    points: list[Point],
    matrix: npt.ArrayLike,
    batch_size: int = SPACE_CONVERSION_BATCH_SIZE,
    max_workers: int | None = None,
) -> list[Point]:
    """Convert points into another coordinate space.

    Args:
        points: Points to convert
        matrix: 4x4 transformation matrix
        batch_size: Parallel-for batch hint
        max_workers: Thread count for the parallel-for

    Returns:
        New list of converted points in the same order

    Raises:
        TransformError: If matrix is not a valid 4x4 matrix
    """
    m = as_matrix(matrix)
    return parallel_for(len(points), lambda i: transform_point(points[i], m), batch_size, max_workers)
