"""
Table of Hamiltonian paths for prime problems.

Prime shapes are the grids with both dimensions at most 3, plus 4 x 5 and
5 x 4. Entries are stored once per canonical problem: the smallest image of
(shape, v, w) under the eight grid symmetries and the endpoint swap, taken
over the orientations with n <= m. The paths ship as data in
`prime_paths.yaml` and are loaded once at import; the table is read-only.
"""

import logging
import os
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import yaml

from ..core import symmetry
from ..core.grid import GridGraph, Vertex
from ..core.path import GridPath
from ..core.types import NoPrimeTableEntry
from .acceptability import check_acceptable
from .problem import Problem

logger = logging.getLogger(__name__)

PRIME_PATHS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "prime_paths.yaml")

# (n, m, v, w) with n <= m
CanonicalKey = Tuple[int, int, Vertex, Vertex]

PRIME_SHAPES: Tuple[Tuple[int, int], ...] = (
    (1, 1), (1, 2), (1, 3),
    (2, 2), (2, 3),
    (3, 3),
    (4, 5),
)


def is_prime_shape(n: int, m: int) -> bool:
    return (n <= 3 and m <= 3) or {n, m} == {4, 5}


def canonical_form(problem: Problem) -> Tuple[CanonicalKey, str, bool]:
    """
    Canonical key of a problem and the way back to it.

    Returns:
        (key, transform, swapped): `transform` maps the problem onto the key's
        grid; `swapped` is True when the key's first endpoint is the image of w
    """
    best = None
    for name, (n, m), v, w in symmetry.images(problem.shape, problem.v, problem.w):
        if n > m:
            continue
        for swapped, (a, b) in ((False, (v, w)), (True, (w, v))):
            key = (n, m, a, b)
            if best is None or key < best[0]:
                best = (key, name, swapped)
    return best


def acceptable_prime_keys() -> Iterator[CanonicalKey]:
    """Canonical keys of every acceptable prime problem, each once, in sorted order."""
    keys = set()
    for n, m in PRIME_SHAPES:
        grid = GridGraph(n, m)
        cells = list(grid.vertices())
        for i, v in enumerate(cells):
            for w in cells[i:]:
                if v == w and grid.size != 1:
                    continue
                if not check_acceptable(grid, v, w).acceptable:
                    continue
                key, _, _ = canonical_form(Problem(grid, v, w))
                keys.add(key)
    return iter(sorted(keys))


def to_canonical(n: int, m: int, vertices: List[Vertex]) -> Tuple[CanonicalKey, Tuple[Vertex, ...]]:
    """Move a path of G(n, m) into the frame of its canonical key."""
    key, name, swapped = canonical_form(Problem(GridGraph(n, m), vertices[0], vertices[-1]))
    mapped = symmetry.apply_all(name, vertices, (n, m))
    if swapped:
        mapped.reverse()
    return key, tuple(mapped)


def load_prime_paths(path: str = PRIME_PATHS_FILE) -> Dict[CanonicalKey, Tuple[Vertex, ...]]:
    """
    Read prime paths from YAML.

    The file is a list of `{shape: [n, m], paths: [[[r, c], ...], ...]}`
    blocks. Each path is checked and moved into its canonical frame, so
    the file may hold any representative of a canonical problem.

    Raises:
        NoPrimeTableEntry: The file is missing, malformed or holds a path
            that is not Hamiltonian
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or []
    except (OSError, yaml.YAMLError) as e:
        raise NoPrimeTableEntry(f"Cannot load prime paths from {path}: {e}") from e

    entries: Dict[CanonicalKey, Tuple[Vertex, ...]] = {}
    for block in data:
        n, m = block["shape"]
        if not is_prime_shape(n, m):
            raise NoPrimeTableEntry(f"{n} x {m} in {path} is not a prime shape")
        for raw in block["paths"]:
            vertices = [Vertex(r, c) for r, c in raw]
            if not GridPath(n, m, vertices).connects(vertices[0], vertices[-1]):
                raise NoPrimeTableEntry(f"Not a Hamiltonian path of {n} x {m} in {path}: {raw}")
            key, canonical = to_canonical(n, m, vertices)
            entries.setdefault(key, canonical)
    return entries


class PrimeTable:
    """
    Read-only Hamiltonian paths for canonical prime problems.

    Entries hold the path in the canonical frame, from the key's first
    endpoint to its second.
    """

    def __init__(self, entries: Mapping[CanonicalKey, Tuple[Vertex, ...]]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_file(cls, path: str = PRIME_PATHS_FILE) -> "PrimeTable":
        table = cls(load_prime_paths(path))
        logger.debug("loaded %d prime paths from %s", len(table), path)
        return table

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CanonicalKey) -> bool:
        return key in self._entries

    def keys(self) -> List[CanonicalKey]:
        return sorted(self._entries)

    def entry(self, key: CanonicalKey) -> Optional[Tuple[Vertex, ...]]:
        return self._entries.get(key)

    def missing(self) -> List[CanonicalKey]:
        """Acceptable prime problems the table has no path for."""
        return [key for key in acceptable_prime_keys() if key not in self._entries]

    def check_complete(self) -> int:
        """
        Confirm that every acceptable prime problem has an entry.

        Returns:
            Number of stored paths

        Raises:
            NoPrimeTableEntry: Some acceptable prime problem has no path
        """
        missing = self.missing()
        if missing:
            raise NoPrimeTableEntry(f"{len(missing)} acceptable prime problems have no path, first {missing[0]}")
        return len(self)

    def lookup(self, problem: Problem) -> List[Vertex]:
        """
        Hamiltonian path of a prime problem, from problem.v to problem.w.

        Raises:
            NoPrimeTableEntry: The shape is not prime or the table has no path
        """
        if not is_prime_shape(problem.n, problem.m):
            raise NoPrimeTableEntry(f"{problem.grid} is not a prime shape")
        key, name, swapped = canonical_form(problem)
        path = self._entries.get(key)
        if path is None:
            raise NoPrimeTableEntry(f"No prime table entry for {problem}")
        path = list(reversed(path)) if swapped else list(path)
        return symmetry.apply_all(symmetry.inverse(name), path, key[:2])


PRIME_TABLE = PrimeTable.from_file()


def solve_prime(problem: Problem, table: Optional[PrimeTable] = None) -> List[Vertex]:
    if table is None:
        table = PRIME_TABLE
    return table.lookup(problem)
