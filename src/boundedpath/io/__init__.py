"""Boundary and mesh I/O layer for boundedpath.

This module handles reading boundary files and writing triangulated
ribbon meshes. It provides a clean abstraction layer between file formats
and the domain models.

Key responsibilities:
- Load and validate JSON boundary files
- Enforce the boundary sample count floor
- Write meshes and centerlines as OBJ or JSON

Key classes:
- BoundaryReader: Load boundary files
- MeshWriter: Save meshes and centerlines
"""

from boundedpath.io.reader import BoundaryReader, read_boundaries
from boundedpath.io.writer import MeshWriter, OutputFormat

__all__ = [
    "BoundaryReader",
    "MeshWriter",
    "OutputFormat",
    "read_boundaries",
]
