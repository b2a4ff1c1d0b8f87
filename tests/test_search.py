from gridham.core.grid import GridGraph
from gridham.core.path import GridPath
from gridham.core.search import find_hamiltonian_path, has_hamiltonian_path


def test_finds_valid_path():
    grid = GridGraph(3, 4)
    path = find_hamiltonian_path(grid, (0, 0), (2, 0))
    assert path is not None
    assert GridPath(3, 4, path).connects((0, 0), (2, 0))


def test_no_path_for_color_incompatible():
    assert find_hamiltonian_path(GridGraph(3, 3), (0, 0), (0, 1)) is None


def test_no_path_across_interior_rung():
    assert not has_hamiltonian_path(GridGraph(4, 2), (1, 0), (1, 1))
    assert has_hamiltonian_path(GridGraph(4, 2), (0, 0), (0, 1))


def test_single_vertex():
    assert find_hamiltonian_path(GridGraph(1, 1), (0, 0), (0, 0)) == [(0, 0)]
    assert find_hamiltonian_path(GridGraph(1, 2), (0, 0), (0, 0)) is None


def test_deterministic():
    grid = GridGraph(4, 5)
    assert find_hamiltonian_path(grid, (0, 0), (3, 4)) == find_hamiltonian_path(grid, (0, 0), (3, 4))
