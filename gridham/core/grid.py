"""
Grid model and color classification for rectangular grid graphs.

A grid graph G(n, m) has n rows and m columns. Vertex (row, col) is adjacent
to the vertices that differ by 1 in exactly one coordinate. Edges are never
stored; every query is answered from the coordinates.
"""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .types import InvalidDimensions, InvalidInput


class Vertex(NamedTuple):
    row: int
    col: int

    def __str__(self):
        return f"({self.row},{self.col})"


Point = Tuple[int, int]

# (drow, dcol) in the order neighbors are reported
DIRECTIONS: Tuple[Point, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def color(v: Point) -> int:
    """Bipartition color of a vertex, (row + col) mod 2."""
    return (v[0] + v[1]) % 2


def majority_color(n: int, m: int) -> Optional[int]:
    """
    Majority color of G(n, m).

    Returns:
        0 when n*m is odd (the corner color), None when both colors
        have the same cardinality.
    """
    return 0 if (n * m) % 2 == 1 else None


@dataclass(frozen=True)
class GridGraph:
    """
    Rectangular grid graph with n rows and m columns.

    Attributes:
        n: Number of rows
        m: Number of columns
    """
    n: int
    m: int

    def __post_init__(self):
        # bool is an int subclass
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in (self.n, self.m)):
            raise InvalidDimensions(f"Grid dimensions must be integers: {self.n!r}x{self.m!r}")
        if self.n < 1 or self.m < 1:
            raise InvalidDimensions(f"Grid dimensions must be positive: {self.n}x{self.m}")

    @property
    def size(self) -> int:
        return self.n * self.m

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n, self.m

    def contains(self, v: Point) -> bool:
        return 0 <= v[0] < self.n and 0 <= v[1] < self.m

    def require(self, v: Point) -> Vertex:
        """Return `v` as a Vertex, raising InvalidInput if it lies outside the grid."""
        if not self.contains(v):
            raise InvalidInput(f"Vertex {tuple(v)} out of bounds of {self.n} x {self.m}")
        return Vertex(*v)

    def adjacent(self, a: Point, b: Point) -> bool:
        if not (self.contains(a) and self.contains(b)):
            return False
        return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1

    def neighbors(self, v: Point) -> List[Vertex]:
        """Neighbors of v inside the grid (up, right, down, left)."""
        out = []
        for dr, dc in DIRECTIONS:
            r, c = v[0] + dr, v[1] + dc
            if 0 <= r < self.n and 0 <= c < self.m:
                out.append(Vertex(r, c))
        return out

    def vertices(self) -> Iterator[Vertex]:
        """Row-major iterator over all vertices; each call starts over."""
        for r in range(self.n):
            for c in range(self.m):
                yield Vertex(r, c)

    def corners(self) -> List[Vertex]:
        """Distinct corner vertices (fewer than four on thin grids)."""
        out = []
        for v in (Vertex(0, 0), Vertex(0, self.m - 1),
                  Vertex(self.n - 1, 0), Vertex(self.n - 1, self.m - 1)):
            if v not in out:
                out.append(v)
        return out

    def is_corner(self, v: Point) -> bool:
        return Vertex(*v) in self.corners()

    def __str__(self):
        return f"G({self.n},{self.m})"
