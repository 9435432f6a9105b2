"""Mesh writer for saving ribbon meshes and centerlines.

This module provides the MeshWriter class for writing a ribbon mesh and its
centerline either as a Wavefront OBJ file or as a JSON document.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from boundedpath.domain import Point, RibbonMesh, Space
from boundedpath.exceptions import BoundarySaveError


class OutputFormat(str, Enum):
    """Supported output formats."""

    OBJ = "obj"
    JSON = "json"


class RibbonDocument(BaseModel):
    """JSON output schema."""

    name: str
    space: Space
    vertices: list[tuple[float, float, float]]
    triangles: list[int]
    centerline: list[tuple[float, float]]


def format_obj(
    name: str,
    mesh: RibbonMesh,
    centerline: list[Point],
    space: Space = Space.LOCAL,
) -> str:
    """Render a mesh and centerline as Wavefront OBJ text.

    The mesh is written as object ``name`` in local space; the centerline
    follows as a closed polyline in object ``{name}_centerline`` with z = 0.
    A world-space centerline is written as ``{name}_centerline_world``.
    OBJ indices are 1-based and shared across objects.
    """
    lines = [f"o {name}"]
    lines.extend(f"v {v.x:.6f} {v.y:.6f} {v.z:.6f}" for v in mesh.vertices)
    lines.extend(f"f {t.a + 1} {t.b + 1} {t.c + 1}" for t in mesh.iter_triangles())

    if centerline:
        offset = mesh.vertex_count
        suffix = "_world" if space is Space.WORLD else ""
        lines.append(f"o {name}_centerline{suffix}")
        lines.extend(f"v {p.x:.6f} {p.y:.6f} 0.000000" for p in centerline)
        indices = [str(offset + i + 1) for i in range(len(centerline))]
        lines.append("l " + " ".join([*indices, indices[0]]))

    return "\n".join(lines) + "\n"


class MeshWriter:
    """Writes ribbon meshes and centerlines to disk.

    Example:
        writer = MeshWriter(Path("track-ribbon.obj"))
        writer.write("track", mesh, centerline)
    """

    def __init__(self, output_path: Path, fmt: OutputFormat | None = None) -> None:
        """Initialize the mesh writer.

        Args:
            output_path: Path where the output will be saved
            fmt: Output format (inferred from the extension if None)
        """
        self._output_path = output_path
        self._format = fmt or self.format_for(output_path)

    @property
    def output_format(self) -> OutputFormat:
        return self._format

    def write(
        self,
        name: str,
        mesh: RibbonMesh,
        centerline: list[Point],
        space: Space = Space.LOCAL,
    ) -> None:
        """Write the mesh and centerline.

        Args:
            name: Path name recorded in the output
            mesh: Triangulated ribbon mesh
            centerline: Centerline points
            space: Coordinate space the centerline is expressed in

        Raises:
            BoundarySaveError: If the file cannot be written
        """
        if self._format is OutputFormat.OBJ:
            text = format_obj(name, mesh, centerline, space)
        else:
            positions, indices = mesh.extract_buffers()
            document = RibbonDocument(
                name=name,
                space=space,
                vertices=positions,
                triangles=indices,
                centerline=[p.to_tuple() for p in centerline],
            )
            text = document.model_dump_json(indent=2)

        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise BoundarySaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def format_for(path: Path) -> OutputFormat:
        """Infer the output format from a file extension (defaults to OBJ)."""
        if path.suffix.lower() == ".json":
            return OutputFormat.JSON
        return OutputFormat.OBJ

    @staticmethod
    def get_output_path(
        input_path: Path,
        fmt: OutputFormat = OutputFormat.OBJ,
        output_dir: Path | None = None,
    ) -> Path:
        """Generate output path with the ribbon naming convention.

        Converts: track.json -> track-ribbon.obj
                  loops/oval.json -> loops/oval-ribbon.json (fmt=JSON)

        Args:
            input_path: Boundary file path
            fmt: Output format
            output_dir: Directory for the output (input's directory if None)

        Returns:
            Path with -ribbon suffix and the format's extension
        """
        parent = output_dir if output_dir is not None else input_path.parent
        return parent / f"{input_path.stem}-ribbon.{fmt.value}"
