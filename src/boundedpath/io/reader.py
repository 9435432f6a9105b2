"""Boundary reader for loading boundary files.

A boundary file is a JSON document holding the inner and outer boundary
samples of one path:

    {
        "name": "track",
        "inner": [[x, y, z], ...],
        "outer": [[x, y], ...],
        "transform": [[...4 values...], ...4 rows...]
    }

Points may omit z (defaults to 0). "name" and "transform" are optional.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, ValidationError, field_validator

from boundedpath.config import SamplingConfig
from boundedpath.domain import Boundary, BoundaryKind, BoundarySet, Vertex
from boundedpath.exceptions import BoundaryLoadError, SampleCountError

Coordinates = Annotated[list[float], Field(min_length=2, max_length=3)]


class BoundaryFileModel(BaseModel):
    """Schema of a boundary file."""

    name: str | None = None
    inner: list[Coordinates]
    outer: list[Coordinates]
    transform: list[list[float]] | None = None

    @field_validator("transform")
    @classmethod
    def _check_transform_shape(cls, value: list[list[float]] | None) -> list[list[float]] | None:
        if value is not None and (len(value) != 4 or any(len(row) != 4 for row in value)):
            raise ValueError("transform must be a 4x4 matrix")
        return value


class BoundaryReader:
    """Loads boundary files into domain models.

    Example:
        reader = BoundaryReader(Path("track.json"))
        boundaries = reader.load()
        print(len(boundaries.inner), len(boundaries.outer))
    """

    def __init__(self, path: Path, sampling: SamplingConfig | None = None) -> None:
        """Initialize the boundary reader.

        Args:
            path: Path to the JSON boundary file
            sampling: Sample count policy (defaults to SamplingConfig())
        """
        self._path = path
        self._sampling = sampling or SamplingConfig()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> BoundarySet:
        """Load and validate the boundary file.

        Returns:
            BoundarySet with inner and outer boundaries

        Raises:
            FileNotFoundError: If the file does not exist
            BoundaryLoadError: If the file is not a valid boundary file
            SampleCountError: If a boundary has fewer samples than the floor
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Boundary file not found: {self._path}")

        try:
            model = BoundaryFileModel.model_validate_json(self._path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise BoundaryLoadError(str(self._path), _summarize_validation_error(e)) from e
        except OSError as e:
            raise BoundaryLoadError(str(self._path), str(e)) from e

        inner = self._to_boundary(model.inner, BoundaryKind.INNER)
        outer = self._to_boundary(model.outer, BoundaryKind.OUTER)

        return BoundarySet(
            name=model.name or self._path.stem,
            inner=inner,
            outer=outer,
            local_to_world=model.transform,
        )

    def _to_boundary(self, samples: list[list[float]], kind: BoundaryKind) -> Boundary:
        minimum = self._sampling.min_samples
        if len(samples) < minimum:
            raise SampleCountError(str(self._path), kind.value, len(samples), minimum)

        boundary = Boundary(points=[Vertex.from_sequence(s) for s in samples], kind=kind)
        if self._sampling.close_open_boundaries:
            boundary = boundary.close_loop()
        return boundary


def _summarize_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    return f"{location}: {first['msg']}"


def read_boundaries(path: Path, sampling: SamplingConfig | None = None) -> BoundarySet:
    """Load a boundary file (shorthand for BoundaryReader(path).load())."""
    return BoundaryReader(path, sampling).load()
