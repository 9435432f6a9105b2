"""Boundary representation.

A boundary is one of the two closed polylines (inner or outer) that bound a
ribbon. Boundaries arrive from a sampler as ordered point sequences whose
first and last samples coincide.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from boundedpath.domain.vector import Vertex


class BoundaryKind(str, Enum):
    """Which side of the ribbon a boundary bounds."""

    INNER = "inner"
    OUTER = "outer"


@dataclass
class Boundary:
    """An ordered, closed sequence of boundary samples.

    Attributes:
        points: Boundary samples, first and last expected to coincide
        kind: Which side of the ribbon this boundary bounds
    """

    points: list[Vertex]
    kind: BoundaryKind = BoundaryKind.INNER

    def __len__(self) -> int:
        return len(self.points)

    def is_closed(self, tolerance: float = 1e-9) -> bool:
        """Check whether the first and last samples coincide in XY.

        Args:
            tolerance: Maximum XY distance treated as coincident

        Returns:
            True if the boundary forms a closed loop
        """
        if len(self.points) < 2:
            return False
        first, last = self.points[0], self.points[-1]
        return abs(first.x - last.x) <= tolerance and abs(first.y - last.y) <= tolerance

    def close_loop(self) -> "Boundary":
        """Return a boundary whose last sample repeats the first.

        Already-closed boundaries are returned unchanged.
        """
        if not self.points or self.is_closed():
            return self
        return Boundary(points=[*self.points, self.points[0]], kind=self.kind)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "points": [p.to_dict() for p in self.points],
            "kind": self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Boundary":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a boundary

        Returns:
            Boundary instance
        """
        return cls(
            points=[Vertex.from_dict(p) for p in data["points"]],
            kind=BoundaryKind(data.get("kind", BoundaryKind.INNER.value)),
        )


@dataclass
class BoundarySet:
    """The two boundaries of one path, as supplied by a sampler.

    Attributes:
        name: Path name (used for logging and output naming)
        inner: Inner boundary
        outer: Outer boundary
        local_to_world: Optional 4x4 matrix (row-major nested lists)
    """

    name: str
    inner: Boundary
    outer: Boundary
    local_to_world: list[list[float]] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "name": self.name,
            "inner": self.inner.to_dict(),
            "outer": self.outer.to_dict(),
            "local_to_world": self.local_to_world,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoundarySet":
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            inner=Boundary.from_dict(data["inner"]),
            outer=Boundary.from_dict(data["outer"]),
            local_to_world=data.get("local_to_world"),
        )
