import pytest

from gridham.core.grid import GridGraph, Vertex, color, majority_color
from gridham.core.types import InvalidDimensions, InvalidInput


def test_invalid_dimensions():
    with pytest.raises(InvalidDimensions):
        GridGraph(0, 3)
    with pytest.raises(InvalidDimensions):
        GridGraph(3, -1)
    with pytest.raises(InvalidInput):
        GridGraph(2.5, 3)
    with pytest.raises(InvalidDimensions):
        GridGraph(True, 3)
    with pytest.raises(InvalidDimensions):
        GridGraph(3, False)


def test_vertices_row_major_and_restartable():
    grid = GridGraph(2, 3)
    first = list(grid.vertices())
    assert first == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert list(grid.vertices()) == first
    assert grid.size == 6


def test_neighbors(grid_4x4):
    assert grid_4x4.neighbors((0, 0)) == [Vertex(0, 1), Vertex(1, 0)]
    assert grid_4x4.neighbors((1, 1)) == [(0, 1), (1, 2), (2, 1), (1, 0)]
    assert grid_4x4.neighbors((3, 3)) == [(2, 3), (3, 2)]


def test_adjacent_and_contains(grid_4x4):
    assert grid_4x4.adjacent((0, 0), (0, 1))
    assert not grid_4x4.adjacent((0, 0), (1, 1))
    assert not grid_4x4.adjacent((3, 3), (3, 4))
    assert grid_4x4.contains((3, 3))
    assert not grid_4x4.contains((4, 0))
    assert not grid_4x4.contains((0, -1))


def test_require():
    grid = GridGraph(2, 2)
    assert grid.require((1, 0)) == Vertex(1, 0)
    with pytest.raises(InvalidInput):
        grid.require((2, 0))


def test_corners():
    assert GridGraph(3, 4).corners() == [(0, 0), (0, 3), (2, 0), (2, 3)]
    assert GridGraph(1, 3).corners() == [(0, 0), (0, 2)]
    assert GridGraph(1, 1).corners() == [(0, 0)]
    assert GridGraph(3, 3).is_corner((2, 2))
    assert not GridGraph(3, 3).is_corner((1, 2))


def test_color():
    assert color((0, 0)) == 0
    assert color((0, 1)) == 1
    assert color((3, 5)) == 0
    assert majority_color(3, 5) == 0
    assert majority_color(4, 5) is None


def test_vertex_ordering():
    assert sorted([Vertex(1, 0), Vertex(0, 2), Vertex(0, 1)]) == [(0, 1), (0, 2), (1, 0)]
    assert str(Vertex(2, 3)) == "(2,3)"
