import pytest

from conftest import all_pairs, small_shapes
from gridham.core.grid import GridGraph
from gridham.core.search import has_hamiltonian_path
from gridham.core.types import ACCEPTABLE, COLOR_INCOMPATIBLE, ForbiddenKind, VerdictKind
from gridham.solver.acceptability import are_color_compatible, check_acceptable


def test_color_compatibility():
    assert are_color_compatible(GridGraph(3, 3), (0, 0), (2, 2))
    assert not are_color_compatible(GridGraph(3, 3), (0, 1), (1, 0))
    assert are_color_compatible(GridGraph(2, 3), (0, 0), (0, 1))
    assert not are_color_compatible(GridGraph(2, 3), (0, 0), (1, 1))


def test_color_incompatible_scenario():
    verdict = check_acceptable(GridGraph(3, 3), (0, 0), (0, 1))
    assert verdict == COLOR_INCOMPATIBLE
    assert not verdict.acceptable
    assert str(verdict) == "color_incompatible"


def test_degenerate_line():
    grid = GridGraph(5, 1)
    assert check_acceptable(grid, (0, 0), (4, 0)) == ACCEPTABLE
    verdict = check_acceptable(grid, (0, 0), (2, 0))
    assert verdict.kind is VerdictKind.FORBIDDEN
    assert verdict.forbidden is ForbiddenKind.DEGENERATE
    assert check_acceptable(GridGraph(1, 4), (0, 3), (0, 0)) == ACCEPTABLE
    assert check_acceptable(GridGraph(1, 4), (0, 1), (0, 0)).forbidden is ForbiddenKind.DEGENERATE


def test_width_2_interior_rung():
    verdict = check_acceptable(GridGraph(4, 2), (1, 0), (1, 1))
    assert verdict.forbidden is ForbiddenKind.WIDTH_2
    assert str(verdict) == "forbidden(width_2)"
    assert check_acceptable(GridGraph(4, 2), (0, 0), (0, 1)) == ACCEPTABLE
    assert check_acceptable(GridGraph(2, 5), (0, 2), (1, 2)).forbidden is ForbiddenKind.WIDTH_2
    assert check_acceptable(GridGraph(2, 5), (0, 4), (1, 4)) == ACCEPTABLE


def test_width_3():
    assert check_acceptable(GridGraph(4, 3), (0, 1), (1, 1)).forbidden is ForbiddenKind.WIDTH_3
    assert check_acceptable(GridGraph(4, 3), (1, 0), (2, 0)) == ACCEPTABLE
    assert check_acceptable(GridGraph(3, 4), (1, 0), (1, 1)).forbidden is ForbiddenKind.WIDTH_3
    # odd length has no forbidden configuration
    assert check_acceptable(GridGraph(5, 3), (0, 0), (2, 2)) == ACCEPTABLE


@pytest.mark.parametrize("n,m", list(small_shapes(16)))
def test_matches_exhaustive_search(n, m):
    grid = GridGraph(n, m)
    for v, w in all_pairs(n, m):
        expected = has_hamiltonian_path(grid, v, w)
        assert check_acceptable(grid, v, w).acceptable == expected, (n, m, v, w)


# every n, m <= 6 up to 30 cells, plus longer width-3 and width-4 grids
@pytest.mark.parametrize("n,m", [
    (6, 3), (3, 6), (4, 5), (5, 4), (5, 5), (6, 4), (4, 6), (5, 6), (6, 5),
    (7, 3), (8, 3), (3, 8), (10, 3), (7, 4),
])
def test_matches_exhaustive_search_larger(n, m):
    grid = GridGraph(n, m)
    for v, w in all_pairs(n, m):
        expected = has_hamiltonian_path(grid, v, w)
        assert check_acceptable(grid, v, w).acceptable == expected, (n, m, v, w)


def test_width_3_even_length_rule_fires():
    grid = GridGraph(6, 3)
    forbidden = [(v, w) for v, w in all_pairs(6, 3)
                 if check_acceptable(grid, v, w).forbidden is ForbiddenKind.WIDTH_3]
    assert forbidden
    for v, w in forbidden:
        assert not has_hamiltonian_path(grid, v, w)


def test_symmetric_in_endpoints():
    grid = GridGraph(4, 3)
    for v, w in all_pairs(4, 3):
        assert check_acceptable(grid, v, w) == check_acceptable(grid, w, v)
