"""Domain models for boundedpath.

This module contains the core domain models representing boundaries, mesh
outputs and points. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of file format details

Key classes:
- Vertex: A 3D boundary/mesh point
- Point: A 2D centerline point
- Boundary: A closed boundary polyline
- BoundarySet: The inner and outer boundary of one path
- Triangle: Three indices into a vertex buffer
- RibbonMesh: Vertex buffer plus triangle index buffer
"""

from boundedpath.domain.boundary import Boundary, BoundaryKind, BoundarySet
from boundedpath.domain.mesh import RibbonMesh, Triangle
from boundedpath.domain.vector import Point, Space, Vertex

__all__: list[str] = [
    # Enums
    "BoundaryKind",
    "Space",
    # Core types
    "Point",
    "Vertex",
    "Boundary",
    "BoundarySet",
    "Triangle",
    "RibbonMesh",
]
