"""
Hamiltonian path problem over a grid graph.
"""

from dataclasses import dataclass

from ..core.grid import GridGraph, Vertex
from ..core.types import InvalidInput


@dataclass(frozen=True)
class Problem:
    """
    A grid graph with two endpoints.

    The endpoints are an unordered pair for the existence question; once a
    path is built it runs from v to w. v == w is only allowed on a 1 x 1
    grid, which the reducer produces when a split isolates a single vertex.
    """
    grid: GridGraph
    v: Vertex
    w: Vertex

    def __post_init__(self):
        object.__setattr__(self, "v", self.grid.require(self.v))
        object.__setattr__(self, "w", self.grid.require(self.w))
        if self.v == self.w and self.grid.size != 1:
            raise InvalidInput(f"Endpoints must be distinct: {self.v} == {self.w}")

    @classmethod
    def of(cls, n: int, m: int, v, w) -> "Problem":
        return cls(GridGraph(n, m), Vertex(*v), Vertex(*w))

    @property
    def n(self) -> int:
        return self.grid.n

    @property
    def m(self) -> int:
        return self.grid.m

    @property
    def shape(self):
        return self.grid.shape

    def swapped(self) -> "Problem":
        return Problem(self.grid, self.w, self.v)

    def __str__(self):
        return f"{self.grid} {self.v}->{self.w}"
