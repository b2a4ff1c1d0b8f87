import numpy as np

from gridham.core.path import GridPath

SNAKE_2x3 = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0)]


def test_edge_matrices():
    path = GridPath(2, 3, SNAKE_2x3)
    assert path.H.shape == (2, 2)
    assert path.V.shape == (1, 3)
    assert path.has_edge((0, 0), (0, 1))
    assert path.has_edge((1, 2), (0, 2))
    assert not path.has_edge((0, 0), (1, 0))
    assert not path.has_edge((0, 0), (1, 1))
    assert path.edge_count() == 5


def test_validate_full_path():
    assert GridPath(2, 3, SNAKE_2x3).validate_full_path()
    assert not GridPath(2, 3, SNAKE_2x3[:-1]).validate_full_path()
    # diagonal step
    assert not GridPath(2, 2, [(0, 0), (1, 1), (0, 1), (1, 0)]).validate_full_path()
    # repeated vertex
    assert not GridPath(1, 3, [(0, 0), (0, 1), (0, 0)]).validate_full_path()
    # out of bounds
    assert not GridPath(1, 2, [(0, 1), (0, 2)]).validate_full_path()


def test_connects():
    path = GridPath(2, 3, SNAKE_2x3)
    assert path.connects((0, 0), (1, 0))
    assert not path.connects((1, 0), (0, 0))
    assert path.start == (0, 0)
    assert path.end == (1, 0)


def test_order_matrix():
    order = GridPath(2, 3, SNAKE_2x3).order_matrix()
    assert np.array_equal(order, np.array([[0, 1, 2], [5, 4, 3]]))
    partial = GridPath(2, 2, [(0, 0), (0, 1)]).order_matrix()
    assert partial[1, 0] == -1


def test_dict_round_trip():
    path = GridPath(2, 3, SNAKE_2x3)
    data = path.to_dict()
    assert data["start"] == [0, 0]
    assert data["end"] == [1, 0]
    assert GridPath.from_dict(data) == path


def test_sequence_protocol():
    path = GridPath(2, 3, SNAKE_2x3)
    assert len(path) == 6
    assert path[2] == (0, 2)
    assert list(path) == SNAKE_2x3
    assert path.as_list() == SNAKE_2x3
