"""Gaussian smoothing of closed centerlines.

The raw centerline produced by triangulation zig-zags between the two
boundaries. Smoothing convolves it with a fixed 5-tap Gaussian kernel,
treating the centerline as a circular buffer, and repeats the pass a
number of times proportional to its length.
"""

from boundedpath.config import SmoothingConfig
from boundedpath.core.geometry import mod
from boundedpath.core.parallel import parallel_for
from boundedpath.domain import Point

GAUSSIAN_KERNEL: tuple[float, float, float, float, float] = (0.021, 0.228, 0.502, 0.228, 0.021)

SMOOTHING_BATCH_SIZE = 32


def smoothing_pass_count(length: int, min_passes: int = 2, points_per_pass: int = 100) -> int:
    """Number of smoothing passes for a centerline of the given length.

    Examples:
        >>> smoothing_pass_count(50)
        2
        >>> smoothing_pass_count(1250)
        12
    """
    return max(min_passes, length // points_per_pass)


def smooth_pass(
    points: list[Point],
    batch_size: int = SMOOTHING_BATCH_SIZE,
    max_workers: int | None = None,
) -> list[Point]:
    """Apply the kernel once around a closed polyline.

    Reads only from ``points`` and returns a new list, so no sample sees
    another sample's smoothed value within the same pass.

    Args:
        points: Closed polyline to smooth
        batch_size: Parallel-for batch hint
        max_workers: Thread count for the parallel-for

    Returns:
        Smoothed copy of points
    """
    n = len(points)
    k0, k1, k2, k3, k4 = GAUSSIAN_KERNEL

    def smooth_sample(index: int) -> Point:
        p0 = points[mod(index - 2, n)]
        p1 = points[mod(index - 1, n)]
        p2 = points[index]
        p3 = points[mod(index + 1, n)]
        p4 = points[mod(index + 2, n)]
        return Point(
            k0 * p0.x + k1 * p1.x + k2 * p2.x + k3 * p3.x + k4 * p4.x,
            k0 * p0.y + k1 * p1.y + k2 * p2.y + k3 * p3.y + k4 * p4.y,
        )

    return parallel_for(n, smooth_sample, batch_size, max_workers)


def smooth_centerline(
    centerline: list[Point],
    batch_size: int = SMOOTHING_BATCH_SIZE,
    max_workers: int | None = None,
    min_passes: int = 2,
    points_per_pass: int = 100,
) -> list[Point]:
    """Smooth a closed centerline with repeated Gaussian passes.

    Each pass reads the full output of the previous one.

    Args:
        centerline: Raw centerline points
        batch_size: Parallel-for batch hint for each pass
        max_workers: Thread count for each pass
        min_passes: Lower bound on the number of passes
        points_per_pass: Centerline length that earns one extra pass

    Returns:
        New list of smoothed points, same length as centerline
    """
    if not centerline:
        return []

    passes = smoothing_pass_count(len(centerline), min_passes, points_per_pass)
    smoothed = list(centerline)
    for _ in range(passes):
        smoothed = smooth_pass(smoothed, batch_size, max_workers)

    return smoothed


class CenterlineSmoother:
    """Smooths centerlines according to a SmoothingConfig.

    Example:
        smoother = CenterlineSmoother(SmoothingConfig())
        smoothed = smoother.smooth(result.centerline)
    """

    def __init__(self, config: SmoothingConfig | None = None, max_workers: int | None = None) -> None:
        self.config = config or SmoothingConfig()
        self.max_workers = max_workers

    def pass_count(self, length: int) -> int:
        return smoothing_pass_count(length, self.config.min_passes, self.config.points_per_pass)

    def smooth(self, centerline: list[Point]) -> list[Point]:
        """Smooth the centerline, or copy it unchanged when smoothing is disabled."""
        if not self.config.enabled:
            return list(centerline)
        return smooth_centerline(
            centerline,
            batch_size=self.config.batch_size,
            max_workers=self.max_workers,
            min_passes=self.config.min_passes,
            points_per_pass=self.config.points_per_pass,
        )
