"""Ribbon mesh representation.

This module defines the triangulation outputs: triangles as index triples
into a vertex buffer, and the RibbonMesh artifact handed to callers.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from boundedpath.domain.vector import Vertex


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three indices into a vertex buffer.

    Attributes:
        a: First vertex index
        b: Second vertex index
        c: Third vertex index
    """

    a: int
    b: int
    c: int

    def flipped(self) -> "Triangle":
        """Return the triangle with opposite winding (a and b swapped)."""
        return Triangle(self.b, self.a, self.c)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)


@dataclass
class RibbonMesh:
    """Vertex buffer plus flat triangle index buffer.

    The triangle buffer has stride 3; each triple is one front-facing
    triangle. The mesh is owned by the caller once constructed.

    Attributes:
        vertices: Combined vertex buffer of both boundaries
        triangles: Flat triangle index list
    """

    vertices: list[Vertex]
    triangles: list[int]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    def iter_triangles(self) -> Iterator[Triangle]:
        """Iterate over triangles as index triples."""
        for i in range(0, len(self.triangles) - 2, 3):
            yield Triangle(self.triangles[i], self.triangles[i + 1], self.triangles[i + 2])

    def extract_buffers(self) -> tuple[list[tuple[float, float, float]], list[int]]:
        """Extract plain position and index buffers for a renderer.

        Returns:
            Tuple of (positions, indices) where positions are (x, y, z) tuples
            and indices is the flat triangle list
        """
        return [v.to_tuple() for v in self.vertices], list(self.triangles)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "vertices": [v.to_dict() for v in self.vertices],
            "triangles": list(self.triangles),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RibbonMesh":
        """Deserialize from dictionary."""
        return cls(
            vertices=[Vertex.from_dict(v) for v in data["vertices"]],
            triangles=list(data["triangles"]),
        )
