import pytest

from conftest import all_pairs
from gridham.core.grid import GridGraph, Vertex
from gridham.core.path import GridPath
from gridham.core.types import NoPrimeTableEntry
from gridham.solver.acceptability import check_acceptable
from gridham.solver.primes import (
    PRIME_SHAPES,
    PRIME_TABLE,
    PrimeTable,
    acceptable_prime_keys,
    canonical_form,
    is_prime_shape,
    load_prime_paths,
    solve_prime,
)
from gridham.solver.problem import Problem


def test_prime_shapes():
    assert is_prime_shape(3, 3)
    assert is_prime_shape(1, 2)
    assert is_prime_shape(4, 5)
    assert is_prime_shape(5, 4)
    assert not is_prime_shape(4, 4)
    assert not is_prime_shape(1, 4)
    assert not is_prime_shape(5, 5)


def test_canonical_form_is_orientation_free():
    a, _, _ = canonical_form(Problem.of(2, 3, (0, 0), (0, 1)))
    b, _, _ = canonical_form(Problem.of(3, 2, (2, 1), (1, 1)))
    c, _, _ = canonical_form(Problem.of(2, 3, (0, 1), (0, 0)))
    assert a == b == c
    assert a[0] <= a[1]


def test_shipped_table_is_complete():
    assert PRIME_TABLE.missing() == []
    assert PRIME_TABLE.check_complete() == len(PRIME_TABLE)
    assert PRIME_TABLE.keys() == list(acceptable_prime_keys())


def test_shipped_entries_are_canonical_paths():
    for key in PRIME_TABLE.keys():
        n, m, v, w = key
        path = PRIME_TABLE.entry(key)
        assert GridPath(n, m, path).connects(v, w), key
        assert canonical_form(Problem.of(n, m, v, w))[0] == key


@pytest.mark.parametrize("n,m", PRIME_SHAPES + ((3, 2), (5, 4), (3, 1)))
def test_lookup_returns_valid_path(n, m):
    grid = GridGraph(n, m)
    for v, w in all_pairs(n, m):
        if not check_acceptable(grid, v, w).acceptable:
            continue
        for a, b in ((v, w), (w, v)):
            path = PRIME_TABLE.lookup(Problem(grid, a, b))
            assert GridPath(n, m, path).connects(a, b), (n, m, a, b)


def test_single_vertex_problem():
    assert solve_prime(Problem.of(1, 1, (0, 0), (0, 0))) == [(0, 0)]


def test_non_prime_shape_raises():
    with pytest.raises(NoPrimeTableEntry):
        PRIME_TABLE.lookup(Problem.of(4, 4, (0, 0), (0, 1)))


def test_unacceptable_prime_raises():
    with pytest.raises(NoPrimeTableEntry):
        PRIME_TABLE.lookup(Problem.of(3, 3, (0, 0), (0, 1)))


def test_table_is_read_only():
    before = len(PRIME_TABLE)
    PRIME_TABLE.lookup(Problem.of(4, 5, (0, 0), (3, 4)))
    assert len(PRIME_TABLE) == before
    with pytest.raises(TypeError):
        PRIME_TABLE._entries[(1, 1, Vertex(0, 0), Vertex(0, 0))] = ()


def test_empty_table_reports_missing():
    table = PrimeTable({})
    assert table.missing() == list(acceptable_prime_keys())
    with pytest.raises(NoPrimeTableEntry):
        table.check_complete()
    with pytest.raises(NoPrimeTableEntry):
        solve_prime(Problem.of(2, 2, (0, 0), (0, 1)), table)


def test_load_accepts_any_representative(tmp_path):
    # 3 x 2 path from (2, 1) to (1, 1) is stored under its 2 x 3 key
    path = tmp_path / "primes.yaml"
    path.write_text("- shape: [3, 2]\n  paths:\n    - [[2, 1], [2, 0], [1, 0], [0, 0], [0, 1], [1, 1]]\n",
                    encoding="utf-8")
    entries = load_prime_paths(str(path))
    key, _, _ = canonical_form(Problem.of(3, 2, (2, 1), (1, 1)))
    assert list(entries) == [key]
    table = PrimeTable(entries)
    out = table.lookup(Problem.of(3, 2, (2, 1), (1, 1)))
    assert GridPath(3, 2, out).connects((2, 1), (1, 1))


@pytest.mark.parametrize("text", [
    "- shape: [2, 2]\n  paths:\n    - [[0, 0], [1, 1], [1, 0], [0, 1]]\n",
    "- shape: [4, 4]\n  paths:\n    - [[0, 0]]\n",
    "- shape: [2, 2\n",
])
def test_load_rejects_bad_data(tmp_path, text):
    path = tmp_path / "primes.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(NoPrimeTableEntry):
        load_prime_paths(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(NoPrimeTableEntry):
        PrimeTable.from_file(str(tmp_path / "missing.yaml"))
