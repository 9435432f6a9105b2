"""Ribbon triangulation between two closed boundaries.

The two boundaries are concatenated into one vertex buffer and walked with a
pair of bounded cursors. Each step advances one cursor, emitting a triangle
that spans both boundaries, so the triangle strip zig-zags from one side to
the other. A greedy local heuristic picks the side to advance so that
triangles stay well shaped when the boundaries are sampled at different
densities.

Key components:
- build_vertex_buffer: Align and concatenate two boundaries
- triangulate: Sequential cursor walk producing mesh and raw centerline
- RibbonTriangulator: Thin class wrapper used by the path builder
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from boundedpath.core.cursor import CursorPair, IndexCursor
from boundedpath.core.geometry import (
    alignment,
    closest_point_index_2d,
    is_back_face,
    midpoint,
    point_in_triangle,
    segments_intersect,
)
from boundedpath.domain import Boundary, Point, RibbonMesh, Triangle, Vertex
from boundedpath.exceptions import InsufficientBoundaryError

MIN_BOUNDARY_POINTS = 2


@dataclass
class TriangulationResult:
    """Outputs of a single triangulation.

    Attributes:
        mesh: Combined vertex buffer and triangle index buffer
        centerline: One raw (unsmoothed) centerline sample per triangle
        flipped_count: Number of triangles re-wound to face front
    """

    mesh: RibbonMesh
    centerline: list[Point]
    flipped_count: int = 0


def _boundary_points(boundary: Boundary | Sequence[Vertex], label: str) -> list[Vertex]:
    if isinstance(boundary, Boundary):
        points, label = boundary.points, boundary.kind.value
    else:
        points = list(boundary)

    if len(points) < MIN_BOUNDARY_POINTS:
        raise InsufficientBoundaryError(label, len(points), MIN_BOUNDARY_POINTS)
    return list(points)


def build_vertex_buffer(a: Sequence[Vertex], b: Sequence[Vertex]) -> list[Vertex]:
    """Concatenate two closed boundaries into one aligned vertex buffer.

    Assumes the first and last element of each boundary are identical.

    Args:
        a: Either the inner or outer boundary
        b: The other boundary

    Returns:
        All points of b, then a rotated to start at the point of a nearest
        to b[0] (without a's duplicated closing point), then that nearest
        point again to close the loop. Length is len(a) + len(b).
    """
    start = closest_point_index_2d(a, b[0])
    return [*b, *a[start : len(a) - 1], *a[:start], a[start]]


def _use_near_vertex(vertices: list[Vertex], cursors: CursorPair) -> bool:
    """Decide whether the next triangle advances the near or the far cursor."""
    near, far = cursors.near, cursors.far
    if far.is_at_max():
        return True

    near_vertex = vertices[near.value()]
    next_near = vertices[near.peek_add(1)]
    before_near = vertices[near.peek_sub(1)]
    far_vertex = vertices[far.value()]
    next_far = vertices[far.peek_add(1)]
    before_far = vertices[far.peek_sub(1)]

    near_alignment = alignment(
        (next_near.x - near_vertex.x, next_near.y - near_vertex.y),
        (next_near.x - far_vertex.x, next_near.y - far_vertex.y),
    )
    far_alignment = alignment(
        (next_far.x - far_vertex.x, next_far.y - far_vertex.y),
        (next_far.x - near_vertex.x, next_far.y - near_vertex.y),
    )

    if math.isnan(near_alignment) or math.isnan(far_alignment):
        return True

    if near_alignment < far_alignment:
        return not point_in_triangle(
            before_near, near_vertex, far_vertex, next_near
        ) and not segments_intersect(far_vertex, next_near, near_vertex, before_near)

    return point_in_triangle(
        before_far, near_vertex, far_vertex, next_far
    ) or segments_intersect(next_far, near_vertex, far_vertex, before_near)


def triangulate(
    a: Boundary | Sequence[Vertex],
    b: Boundary | Sequence[Vertex],
) -> TriangulationResult:
    """Triangulate the ribbon between two closed boundaries.

    Runs as a single ordered pass: each step depends on the cursor positions
    left by the previous one.

    Args:
        a: Either the inner or outer boundary (closed, at least 2 points)
        b: The other boundary (closed, at least 2 points)

    Returns:
        TriangulationResult with len(a) + len(b) vertices,
        len(a) + len(b) - 2 triangles and as many centerline samples

    Raises:
        InsufficientBoundaryError: If either boundary has fewer than 2 points
    """
    a_points = _boundary_points(a, "a")
    b_points = _boundary_points(b, "b")

    vertices = build_vertex_buffer(a_points, b_points)
    vertex_count = len(vertices)
    # b leads the buffer, so the near region covers b and the far region covers a
    start_of_second_boundary = len(b_points)

    cursors = CursorPair(
        near=IndexCursor(0, start_of_second_boundary),
        far=IndexCursor(start_of_second_boundary, vertex_count),
    )

    triangles: list[int] = []
    centerline: list[Point] = []
    flipped_count = 0

    for _ in range(vertex_count - 2):
        use_near = _use_near_vertex(vertices, cursors)
        near_index = cursors.near.value()
        far_index = cursors.far.value()
        advanced = (cursors.near if use_near else cursors.far).advance().value()

        triangle = Triangle(near_index, far_index, advanced)
        committed = triangle
        if is_back_face(vertices[triangle.a], vertices[triangle.b], vertices[triangle.c]):
            committed = triangle.flipped()
            flipped_count += 1
        triangles.extend(committed.as_tuple())

        # Midpoint of the edge spanning the boundaries after this step
        anchor = far_index if use_near else near_index
        centerline.append(midpoint(vertices[anchor], vertices[advanced]))

        if not use_near:
            cursors.swap()

    return TriangulationResult(
        mesh=RibbonMesh(vertices=vertices, triangles=triangles),
        centerline=centerline,
        flipped_count=flipped_count,
    )


class RibbonTriangulator:
    """Triangulates ribbons between pairs of boundaries.

    Stateless; every call builds fresh buffers and hands them to the caller.

    Example:
        triangulator = RibbonTriangulator()
        result = triangulator.triangulate(inner, outer)
        positions, indices = result.mesh.extract_buffers()
    """

    def triangulate(
        self,
        a: Boundary | Sequence[Vertex],
        b: Boundary | Sequence[Vertex],
    ) -> TriangulationResult:
        return triangulate(a, b)
