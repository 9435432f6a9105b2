"""Unit tests for the boundary and mesh I/O layer.

Tests for BoundaryReader, MeshWriter and OBJ formatting.
"""

import json
from pathlib import Path

import pytest

from boundedpath.config import SamplingConfig
from boundedpath.domain import BoundaryKind, Point, RibbonMesh, Space, Vertex
from boundedpath.exceptions import (
    BoundaryFileError,
    BoundaryLoadError,
    BoundarySaveError,
    SampleCountError,
)
from boundedpath.io import BoundaryReader, MeshWriter, OutputFormat, read_boundaries
from boundedpath.io.writer import format_obj

INNER = [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0], [0, 0, 0]]
OUTER = [[-1, -1], [2, -1], [2, 2], [-1, 2], [-1, -1]]


def write_boundary_file(path: Path, **document) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def sampling() -> SamplingConfig:
    return SamplingConfig(min_samples=3)


@pytest.fixture
def mesh() -> RibbonMesh:
    return RibbonMesh(
        vertices=[Vertex(0, 0), Vertex(1, 0), Vertex(1, 1), Vertex(0, 1)],
        triangles=[0, 2, 1, 0, 3, 2],
    )


class TestBoundaryReader:
    """Tests for BoundaryReader class."""

    def test_init(self):
        """Test BoundaryReader initialization."""
        path = Path("track.json")
        reader = BoundaryReader(path)
        assert reader.path == path

    def test_load_nonexistent_file(self, tmp_path: Path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = BoundaryReader(tmp_path / "missing.json")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_load(self, tmp_path: Path, sampling: SamplingConfig):
        path = write_boundary_file(tmp_path / "track.json", name="loop", inner=INNER, outer=OUTER)

        boundaries = BoundaryReader(path, sampling).load()

        assert boundaries.name == "loop"
        assert len(boundaries.inner) == 5
        assert len(boundaries.outer) == 5
        assert boundaries.inner.kind == BoundaryKind.INNER
        assert boundaries.outer.kind == BoundaryKind.OUTER
        assert boundaries.outer.points[1] == Vertex(2.0, -1.0, 0.0)
        assert boundaries.local_to_world is None

    def test_name_defaults_to_stem(self, tmp_path: Path, sampling: SamplingConfig):
        path = write_boundary_file(tmp_path / "oval.json", inner=INNER, outer=OUTER)
        assert BoundaryReader(path, sampling).load().name == "oval"

    def test_closes_open_boundaries(self, tmp_path: Path, sampling: SamplingConfig):
        path = write_boundary_file(tmp_path / "open.json", inner=INNER[:-1], outer=OUTER[:-1])

        boundaries = BoundaryReader(path, sampling).load()

        assert len(boundaries.inner) == 5
        assert boundaries.inner.is_closed()
        assert boundaries.outer.is_closed()

    def test_keeps_open_boundaries_when_disabled(self, tmp_path: Path):
        path = write_boundary_file(tmp_path / "open.json", inner=INNER[:-1], outer=OUTER[:-1])
        sampling = SamplingConfig(min_samples=3, close_open_boundaries=False)

        boundaries = BoundaryReader(path, sampling).load()

        assert len(boundaries.inner) == 4
        assert not boundaries.inner.is_closed()

    def test_reads_transform(self, tmp_path: Path, sampling: SamplingConfig):
        transform = [[1, 0, 0, 5], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
        path = write_boundary_file(
            tmp_path / "t.json", inner=INNER, outer=OUTER, transform=transform
        )

        boundaries = BoundaryReader(path, sampling).load()

        assert boundaries.local_to_world == [[float(v) for v in row] for row in transform]

    def test_sample_floor(self, tmp_path: Path):
        path = write_boundary_file(tmp_path / "short.json", inner=INNER, outer=OUTER)

        with pytest.raises(SampleCountError) as exc_info:
            BoundaryReader(path, SamplingConfig(min_samples=10)).load()

        assert exc_info.value.kind == "inner"
        assert exc_info.value.count == 5
        assert exc_info.value.minimum == 10

    def test_default_sample_floor(self, tmp_path: Path):
        path = write_boundary_file(tmp_path / "short.json", inner=INNER, outer=OUTER)
        with pytest.raises(SampleCountError):
            BoundaryReader(path).load()

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(BoundaryLoadError) as exc_info:
            BoundaryReader(path).load()

        assert exc_info.value.path == str(path)

    def test_missing_boundary(self, tmp_path: Path):
        path = write_boundary_file(tmp_path / "half.json", inner=INNER)
        with pytest.raises(BoundaryLoadError, match="outer"):
            BoundaryReader(path).load()

    def test_bad_coordinates(self, tmp_path: Path):
        path = write_boundary_file(tmp_path / "bad.json", inner=[[0]] * 12, outer=OUTER)
        with pytest.raises(BoundaryLoadError):
            BoundaryReader(path).load()

    def test_bad_transform_shape(self, tmp_path: Path, sampling: SamplingConfig):
        path = write_boundary_file(
            tmp_path / "bad.json", inner=INNER, outer=OUTER, transform=[[1, 0], [0, 1]]
        )
        with pytest.raises(BoundaryLoadError, match="4x4"):
            BoundaryReader(path, sampling).load()

    def test_errors_share_base_class(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(BoundaryFileError):
            BoundaryReader(path).load()

    def test_read_boundaries(self, tmp_path: Path, sampling: SamplingConfig):
        path = write_boundary_file(tmp_path / "track.json", inner=INNER, outer=OUTER)
        assert read_boundaries(path, sampling).name == "track"


class TestFormatObj:
    """Tests for OBJ output."""

    def test_mesh_lines(self, mesh: RibbonMesh):
        text = format_obj("track", mesh, [])
        lines = text.splitlines()

        assert lines[0] == "o track"
        assert lines[1] == "v 0.000000 0.000000 0.000000"
        assert "f 1 3 2" in lines
        assert "f 1 4 3" in lines
        assert "o track_centerline" not in lines

    def test_centerline_object(self, mesh: RibbonMesh):
        centerline = [Point(0.5, 0.25), Point(0.75, 0.5), Point(0.5, 0.75)]
        lines = format_obj("track", mesh, centerline).splitlines()

        start = lines.index("o track_centerline")
        assert lines[start + 1] == "v 0.500000 0.250000 0.000000"
        assert lines[-1] == "l 5 6 7 5"

    def test_world_centerline_object_is_named_by_space(self, mesh: RibbonMesh):
        lines = format_obj("track", mesh, [Point(10.0, 10.0)], Space.WORLD).splitlines()

        assert "o track_centerline_world" in lines
        assert "o track_centerline" not in lines
        assert lines[0] == "o track"

    def test_ends_with_newline(self, mesh: RibbonMesh):
        assert format_obj("track", mesh, []).endswith("\n")


class TestMeshWriter:
    """Tests for MeshWriter class."""

    def test_format_for(self):
        assert MeshWriter.format_for(Path("a.json")) is OutputFormat.JSON
        assert MeshWriter.format_for(Path("a.OBJ")) is OutputFormat.OBJ
        assert MeshWriter.format_for(Path("a.txt")) is OutputFormat.OBJ

    def test_format_inferred_from_extension(self, tmp_path: Path):
        assert MeshWriter(tmp_path / "out.json").output_format is OutputFormat.JSON

    def test_get_output_path(self):
        """Test output path generation."""
        assert MeshWriter.get_output_path(Path("loops/oval.json")) == Path("loops/oval-ribbon.obj")
        assert MeshWriter.get_output_path(
            Path("loops/oval.json"), OutputFormat.JSON, Path("out")
        ) == Path("out/oval-ribbon.json")

    def test_write_obj(self, tmp_path: Path, mesh: RibbonMesh):
        output = tmp_path / "track-ribbon.obj"
        MeshWriter(output).write("track", mesh, [Point(0.5, 0.5)])

        text = output.read_text(encoding="utf-8")
        assert text.startswith("o track\n")
        assert "o track_centerline" in text

    def test_write_obj_world_space(self, tmp_path: Path, mesh: RibbonMesh):
        output = tmp_path / "track-ribbon.obj"
        MeshWriter(output).write("track", mesh, [Point(0.5, 0.5)], Space.WORLD)

        lines = output.read_text(encoding="utf-8").splitlines()
        assert "o track_centerline_world" in lines

    def test_write_json(self, tmp_path: Path, mesh: RibbonMesh):
        output = tmp_path / "track-ribbon.json"
        centerline = [Point(0.5, 0.25), Point(0.75, 0.5)]

        MeshWriter(output, OutputFormat.JSON).write("track", mesh, centerline, Space.WORLD)

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["name"] == "track"
        assert document["space"] == "world"
        assert document["vertices"][2] == [1.0, 1.0, 0.0]
        assert document["triangles"] == [0, 2, 1, 0, 3, 2]
        assert document["centerline"] == [[0.5, 0.25], [0.75, 0.5]]

    def test_creates_parent_directories(self, tmp_path: Path, mesh: RibbonMesh):
        output = tmp_path / "nested" / "dir" / "out.obj"
        MeshWriter(output).write("track", mesh, [])
        assert output.exists()

    def test_save_error(self, tmp_path: Path, mesh: RibbonMesh):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(BoundarySaveError):
            MeshWriter(blocker / "out.obj").write("track", mesh, [])
