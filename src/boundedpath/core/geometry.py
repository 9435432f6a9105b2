"""Geometric operations for ribbon triangulation.

This module provides core mathematical utilities for:
- Closest point search (squared XY distance)
- Point-in-triangle testing (strictly exclusive barycentric test)
- Line segment intersection (orientation based)
- Triangle winding (shoelace cross product)
- Midpoints, modulo indexing and safe vector normalisation

All functions only look at the x and y coordinates of their inputs, so they
accept both Point and Vertex. All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from typing import Protocol

from boundedpath.domain import Point
from boundedpath.exceptions import EmptyPointSetError

# Vectors shorter than this normalise to zero
NORMALIZE_EPSILON = 1e-5


class XY(Protocol):
    """Anything with x and y coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


def closest_point_index_2d(points: Sequence[XY], target: XY) -> int:
    """Find the index of the point nearest to target in the XY plane.

    Z is ignored. Ties resolve to the first occurrence.

    Args:
        points: Points to search
        target: Point the result should be nearest to

    Returns:
        Index into points of the nearest point

    Raises:
        EmptyPointSetError: If points is empty

    Examples:
        >>> pts = [Point(0.0, 0.0), Point(10.0, 0.0), Point(0.0, 10.0)]
        >>> closest_point_index_2d(pts, Point(1.0, 1.0))
        0
    """
    if not points:
        raise EmptyPointSetError("closest_point_index_2d")

    def squared_distance(p: XY) -> float:
        return (p.x - target.x) * (p.x - target.x) + (p.y - target.y) * (p.y - target.y)

    closest = 0
    smallest = squared_distance(points[0])
    for i in range(1, len(points)):
        distance = squared_distance(points[i])
        if distance < smallest:
            closest = i
            smallest = distance

    return closest


def point_in_triangle(p: XY, a: XY, b: XY, c: XY) -> bool:
    """Determine whether p lies strictly inside triangle (a, b, c).

    Points on an edge or vertex are not inside. The barycentric
    coordinates u and v are rejected outside (0, 1], w outside (0, 1).
    Degenerate triangles contain nothing.

    Args:
        p: The point to check
        a: A vertex of the triangle
        b: A vertex of the triangle
        c: A vertex of the triangle

    Returns:
        True if p is strictly inside the triangle, False otherwise

    Examples:
        >>> a, b, c = Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 4.0)
        >>> point_in_triangle(Point(1.0, 1.0), a, b, c)
        True
        >>> point_in_triangle(Point(2.0, 0.0), a, b, c)  # On edge
        False
    """
    denom = (b.y - c.y) * (a.x - c.x) + (c.x - b.x) * (a.y - c.y)
    if denom == 0:
        return False

    u = ((b.y - c.y) * (p.x - c.x) + (c.x - b.x) * (p.y - c.y)) / denom
    if u <= 0 or u > 1:
        return False

    v = ((c.y - a.y) * (p.x - c.x) + (a.x - c.x) * (p.y - c.y)) / denom
    if v <= 0 or v > 1:
        return False

    w = 1 - u - v
    return 0 < w < 1


def orientation(p1: XY, p2: XY, p3: XY) -> int:
    """Classify the turn made by the ordered points p1, p2, p3.

    Returns:
        0 if collinear, 1 if clockwise, 2 if counter-clockwise
    """
    det = (p2.y - p1.y) * (p3.x - p2.x) - (p2.x - p1.x) * (p3.y - p2.y)

    if det == 0:
        return 0

    return 1 if det > 0 else 2


def _on_segment(point: XY, p1: XY, p2: XY) -> bool:
    """Check if point lies within the bounding box of segment (p1, p2)."""
    return (
        min(p1.x, p2.x) <= point.x <= max(p1.x, p2.x)
        and min(p1.y, p2.y) <= point.y <= max(p1.y, p2.y)
    )


def segments_intersect(u1: XY, u2: XY, v1: XY, v2: XY) -> bool:
    """Determine whether segments (u1, u2) and (v1, v2) intersect.

    Proper crossings count as intersecting. When an orientation is
    collinear, the result falls back to bounding-box checks of u1 against
    (v1, u2) and (v2, u2), and of v1 against (u1, v2) and (u2, v2). A
    collapsed second segment (v1 == v2) therefore always intersects.

    Args:
        u1: One end of the first segment
        u2: The other end of the first segment
        v1: One end of the second segment
        v2: The other end of the second segment

    Returns:
        True if the segments intersect, False otherwise

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
        >>> segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))
        False
    """
    o1 = orientation(u1, u2, v1)
    o2 = orientation(u1, u2, v2)
    o3 = orientation(v1, v2, u1)
    o4 = orientation(v1, v2, u2)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear fallbacks
    if o1 == 0 and _on_segment(u1, v1, u2):
        return True
    if o2 == 0 and _on_segment(u1, v2, u2):
        return True
    if o3 == 0 and _on_segment(v1, u1, v2):
        return True
    if o4 == 0 and _on_segment(v1, u2, v2):
        return True

    return False


def midpoint(p1: XY, p2: XY) -> Point:
    """Get the midpoint between two points in the XY plane."""
    return Point(0.5 * (p1.x + p2.x), 0.5 * (p1.y + p2.y))


def mod(a: int, b: int) -> int:
    """Mathematical modulo; non-negative for positive b.

    Examples:
        >>> mod(-1, 5)
        4
        >>> mod(7, 5)
        2
    """
    return a % b


def triangle_cross_2d(a: XY, b: XY, c: XY) -> float:
    """Twice the signed area of triangle (a, b, c) in the XY plane.

    Positive for counter-clockwise winding, negative for clockwise.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def is_back_face(a: XY, b: XY, c: XY) -> bool:
    """Check whether triangle (a, b, c) faces away under the mesh convention.

    Front-facing ribbon triangles wind clockwise in the XY plane.
    """
    return triangle_cross_2d(a, b, c) > 0


def normalized(dx: float, dy: float) -> tuple[float, float]:
    """Normalise a 2D vector, returning (0, 0) for near-zero vectors."""
    length = math.hypot(dx, dy)
    if not length > NORMALIZE_EPSILON:
        return 0.0, 0.0
    return dx / length, dy / length


def alignment(edge: tuple[float, float], hypotenuse: tuple[float, float]) -> float:
    """Dot product of the normalised edge and hypotenuse vectors.

    Values near 1 mean the two directions agree; smaller values mean a
    sharper turn between them.
    """
    ex, ey = normalized(*edge)
    hx, hy = normalized(*hypotenuse)
    return ex * hx + ey * hy
