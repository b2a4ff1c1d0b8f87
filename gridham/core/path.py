"""
Hamiltonian path value type for grid graphs.

This module provides the GridPath class which stores a vertex order over
G(n, m) together with horizontal (H) and vertical (V) edge matrices.
"""

from typing import Any, Dict, Iterator, List, Sequence, Tuple

import numpy as np

from .grid import Point, Vertex


class GridPath:
    """
    A path over an n x m grid graph.

    The edges used by the path are kept in two boolean matrices:
    - H[r][c]: True if the path uses the edge (r, c) - (r, c+1)
    - V[r][c]: True if the path uses the edge (r, c) - (r+1, c)

    Attributes:
        n: Number of rows
        m: Number of columns
        vertices: Visit order, start to end
        H: Horizontal edge matrix, shape (n, m-1)
        V: Vertical edge matrix, shape (n-1, m)
    """

    def __init__(self, n: int, m: int, vertices: Sequence[Point]):
        self.n, self.m = n, m
        self.vertices: Tuple[Vertex, ...] = tuple(Vertex(*v) for v in vertices)
        self.H = np.zeros((n, max(m - 1, 0)), dtype=bool)
        self.V = np.zeros((max(n - 1, 0), m), dtype=bool)
        for a, b in zip(self.vertices, self.vertices[1:]):
            self.set_edge(a, b)

    # ---------- Edge Operations ----------

    def _in_bounds(self, p: Point) -> bool:
        return 0 <= p[0] < self.n and 0 <= p[1] < self.m

    def set_edge(self, p1: Point, p2: Point, v: bool = True):
        """Set or clear an edge between two adjacent in-bounds points."""
        if not (self._in_bounds(p1) and self._in_bounds(p2)):
            return
        r1, c1 = p1
        r2, c2 = p2
        if c1 == c2 and abs(r1 - r2) == 1:
            self.V[min(r1, r2), c1] = v
        elif r1 == r2 and abs(c1 - c2) == 1:
            self.H[r1, min(c1, c2)] = v

    def has_edge(self, p1: Point, p2: Point) -> bool:
        """Check if the path uses the edge between two points."""
        if not (self._in_bounds(p1) and self._in_bounds(p2)):
            return False
        r1, c1 = p1
        r2, c2 = p2
        if c1 == c2 and abs(r1 - r2) == 1:
            return bool(self.V[min(r1, r2), c1])
        if r1 == r2 and abs(c1 - c2) == 1:
            return bool(self.H[r1, min(c1, c2)])
        return False

    def edge_count(self) -> int:
        return int(self.H.sum() + self.V.sum())

    # ---------- Accessors ----------

    @property
    def start(self) -> Vertex:
        return self.vertices[0]

    @property
    def end(self) -> Vertex:
        return self.vertices[-1]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __getitem__(self, idx):
        return self.vertices[idx]

    def __eq__(self, other):
        if not isinstance(other, GridPath):
            return NotImplemented
        return (self.n, self.m, self.vertices) == (other.n, other.m, other.vertices)

    def __repr__(self):
        return f"GridPath({self.n}x{self.m}, {self.start} -> {self.end}, len={len(self)})"

    # ---------- Validation ----------

    def validate_full_path(self) -> bool:
        """Validate that the vertex order is a Hamiltonian path of the grid."""
        if len(self.vertices) != self.n * self.m:
            return False
        if not all(self._in_bounds(v) for v in self.vertices):
            return False
        if len(set(self.vertices)) != len(self.vertices):
            return False
        for (r1, c1), (r2, c2) in zip(self.vertices, self.vertices[1:]):
            if abs(r1 - r2) + abs(c1 - c2) != 1:
                return False
        return self.edge_count() == len(self.vertices) - 1

    def connects(self, v: Point, w: Point) -> bool:
        """True if this is a Hamiltonian path that starts at v and ends at w."""
        if not self.vertices:
            return False
        return self.start == tuple(v) and self.end == tuple(w) and self.validate_full_path()

    # ---------- Export ----------

    def order_matrix(self) -> np.ndarray:
        """
        Visit order as an n x m integer matrix.

        Returns:
            Array where entry [r, c] is the position of (r, c) in the path,
            or -1 for vertices the path does not visit.
        """
        order = np.full((self.n, self.m), -1, dtype=np.int64)
        for i, (r, c) in enumerate(self.vertices):
            order[r, c] = i
        return order

    def to_dict(self) -> Dict[str, Any]:
        """Convert path to dictionary for serialization."""
        return {
            "n": self.n,
            "m": self.m,
            "start": list(self.start),
            "end": list(self.end),
            "vertices": [list(v) for v in self.vertices],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridPath":
        return cls(data["n"], data["m"], [tuple(v) for v in data["vertices"]])

    def as_list(self) -> List[Vertex]:
        return list(self.vertices)
