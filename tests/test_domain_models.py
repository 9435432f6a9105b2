"""Tests for domain models to verify they work correctly."""

from dataclasses import fields

import pytest

from boundedpath.domain import (
    Boundary,
    BoundaryKind,
    BoundarySet,
    Point,
    RibbonMesh,
    Space,
    Triangle,
    Vertex,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(1.5, -2.5)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        assert len({Point(1.0, 2.0), Point(1.0, 2.0)}) == 1


class TestVertex:
    """Tests for Vertex class."""

    def test_vertex_default_z(self) -> None:
        assert Vertex(1.0, 2.0).z == 0.0

    def test_vertex_xy_projection(self) -> None:
        assert Vertex(1.0, 2.0, 3.0).xy() == Point(1.0, 2.0)

    def test_vertex_serialization(self) -> None:
        v1 = Vertex(1.0, 2.0, 3.0)
        assert Vertex.from_dict(v1.to_dict()) == v1

    def test_vertex_from_dict_without_z(self) -> None:
        assert Vertex.from_dict({"x": 1.0, "y": 2.0}) == Vertex(1.0, 2.0, 0.0)

    def test_vertex_from_sequence(self) -> None:
        assert Vertex.from_sequence([1, 2]) == Vertex(1.0, 2.0, 0.0)
        assert Vertex.from_sequence((1, 2, 3)) == Vertex(1.0, 2.0, 3.0)


class TestSpace:
    """Tests for Space enum."""

    def test_space_values(self) -> None:
        assert Space("local") is Space.LOCAL
        assert Space("world") is Space.WORLD


class TestBoundary:
    """Tests for Boundary class."""

    def test_boundary_creation(self) -> None:
        """Test basic boundary creation."""
        points = [Vertex(0, 0), Vertex(1, 0), Vertex(1, 1), Vertex(0, 0)]
        boundary = Boundary(points=points, kind=BoundaryKind.OUTER)
        assert len(boundary) == 4
        assert boundary.kind == BoundaryKind.OUTER

    def test_default_kind_is_inner(self) -> None:
        assert Boundary(points=[]).kind == BoundaryKind.INNER

    def test_is_closed(self) -> None:
        closed = Boundary(points=[Vertex(0, 0), Vertex(1, 0), Vertex(0, 0)])
        open_ = Boundary(points=[Vertex(0, 0), Vertex(1, 0), Vertex(1, 1)])
        assert closed.is_closed()
        assert not open_.is_closed()

    def test_is_closed_ignores_z(self) -> None:
        boundary = Boundary(points=[Vertex(0, 0, 0), Vertex(1, 0), Vertex(0, 0, 5)])
        assert boundary.is_closed()

    def test_single_point_is_not_closed(self) -> None:
        assert not Boundary(points=[Vertex(0, 0)]).is_closed()

    def test_close_loop_appends_first_point(self) -> None:
        boundary = Boundary(
            points=[Vertex(0, 0), Vertex(1, 0), Vertex(1, 1)],
            kind=BoundaryKind.OUTER,
        )
        closed = boundary.close_loop()
        assert len(closed) == 4
        assert closed.points[-1] == Vertex(0, 0)
        assert closed.kind == BoundaryKind.OUTER
        assert len(boundary) == 3

    def test_close_loop_keeps_closed_boundary(self) -> None:
        boundary = Boundary(points=[Vertex(0, 0), Vertex(1, 0), Vertex(0, 0)])
        assert boundary.close_loop() is boundary

    def test_boundary_fields(self) -> None:
        assert [f.name for f in fields(Boundary)] == ["points", "kind"]

    def test_boundary_serialization(self) -> None:
        """Test boundary serialization and deserialization."""
        boundary = Boundary(
            points=[Vertex(0, 0, 1), Vertex(1, 0, 1), Vertex(0, 0, 1)],
            kind=BoundaryKind.OUTER,
        )
        restored = Boundary.from_dict(boundary.to_dict())
        assert restored.points == boundary.points
        assert restored.kind == BoundaryKind.OUTER


class TestBoundarySet:
    """Tests for BoundarySet class."""

    def test_boundary_set_serialization(self) -> None:
        inner = Boundary(points=[Vertex(0, 0), Vertex(1, 0), Vertex(0, 0)])
        outer = Boundary(
            points=[Vertex(-1, -1), Vertex(2, -1), Vertex(-1, -1)],
            kind=BoundaryKind.OUTER,
        )
        matrix = [[1.0, 0.0, 0.0, 5.0], [0.0, 1.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]]
        boundaries = BoundarySet(name="track", inner=inner, outer=outer, local_to_world=matrix)

        restored = BoundarySet.from_dict(boundaries.to_dict())

        assert restored.name == "track"
        assert restored.inner.points == inner.points
        assert restored.outer.kind == BoundaryKind.OUTER
        assert restored.local_to_world == matrix

    def test_boundary_set_without_transform(self) -> None:
        inner = Boundary(points=[Vertex(0, 0), Vertex(0, 0)])
        outer = Boundary(points=[Vertex(1, 1), Vertex(1, 1)], kind=BoundaryKind.OUTER)
        data = BoundarySet(name="p", inner=inner, outer=outer).to_dict()
        del data["local_to_world"]
        assert BoundarySet.from_dict(data).local_to_world is None


class TestTriangle:
    """Tests for Triangle class."""

    def test_flipped_swaps_first_two(self) -> None:
        assert Triangle(1, 2, 3).flipped() == Triangle(2, 1, 3)

    def test_as_tuple(self) -> None:
        assert Triangle(4, 5, 6).as_tuple() == (4, 5, 6)


class TestRibbonMesh:
    """Tests for RibbonMesh class."""

    @pytest.fixture
    def mesh(self) -> RibbonMesh:
        return RibbonMesh(
            vertices=[Vertex(0, 0), Vertex(1, 0), Vertex(1, 1), Vertex(0, 1)],
            triangles=[0, 2, 1, 0, 3, 2],
        )

    def test_counts(self, mesh: RibbonMesh) -> None:
        assert mesh.vertex_count == 4
        assert mesh.triangle_count == 2

    def test_iter_triangles(self, mesh: RibbonMesh) -> None:
        assert list(mesh.iter_triangles()) == [Triangle(0, 2, 1), Triangle(0, 3, 2)]

    def test_extract_buffers(self, mesh: RibbonMesh) -> None:
        positions, indices = mesh.extract_buffers()
        assert positions[2] == (1.0, 1.0, 0.0)
        assert indices == [0, 2, 1, 0, 3, 2]

        indices.append(99)
        assert mesh.triangles == [0, 2, 1, 0, 3, 2]

    def test_mesh_serialization(self, mesh: RibbonMesh) -> None:
        restored = RibbonMesh.from_dict(mesh.to_dict())
        assert restored.vertices == mesh.vertices
        assert restored.triangles == mesh.triangles
