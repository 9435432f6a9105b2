"""Core point types for boundary and centerline representation.

This module defines the fundamental point types used throughout boundedpath:
- Vertex: A 3D point on a boundary or in a mesh vertex buffer
- Point: A 2D point on a centerline
- Space: Enum for the coordinate space of returned points
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Space(str, Enum):
    """Coordinate space of centerline output.

    - LOCAL: The space the boundaries were supplied in
    - WORLD: Local space transformed by the path's local-to-world matrix
    """

    LOCAL = "local"
    WORLD = "world"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Vertex:
    """A point in 3D space.

    Boundaries are planar in practice (z is typically constant), and all
    geometric tests only look at x and y.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate
    """

    x: float
    y: float
    z: float = 0.0

    def xy(self) -> Point:
        """Project onto the XY plane."""
        return Point(self.x, self.y)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x, y, and z fields
        """
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, and optional z fields

        Returns:
            Vertex instance
        """
        return cls(x=data["x"], y=data["y"], z=data.get("z", 0.0))

    @classmethod
    def from_sequence(cls, values: "list[float] | tuple[float, ...]") -> "Vertex":
        """Build a vertex from an (x, y) or (x, y, z) sequence."""
        if len(values) == 2:
            return cls(float(values[0]), float(values[1]))
        return cls(float(values[0]), float(values[1]), float(values[2]))
