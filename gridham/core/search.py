"""
Exhaustive Hamiltonian path search on small grid graphs.

Used to regenerate the prime table data and as an independent oracle when
verifying the engine. Runtime is exponential; keep grids small.
"""

from typing import List, Optional, Set

from .grid import GridGraph, Point, Vertex


def _viable(grid: GridGraph, visited: Set[Vertex], head: Vertex, end: Vertex, around: Vertex) -> bool:
    """
    Cheap dead-end test after the path moved away from `around`.

    Every unvisited neighbor of `around` still needs two free neighbors
    (one if it is the end vertex), where free means unvisited or the head.
    """
    for u in grid.neighbors(around):
        if u in visited:
            continue
        free = 0
        for x in grid.neighbors(u):
            if x not in visited or x == head:
                free += 1
        if free < (1 if u == end else 2):
            return False
    return True


def find_hamiltonian_path(grid: GridGraph, v: Point, w: Point) -> Optional[List[Vertex]]:
    """
    Search for a Hamiltonian path of `grid` from v to w.

    Neighbors are tried in a fixed order, so the result is deterministic.

    Args:
        grid: Grid graph to cover
        v: Start vertex
        w: End vertex

    Returns:
        The vertex order, or None when no such path exists
    """
    start, end = Vertex(*v), Vertex(*w)
    total = grid.size
    if start == end:
        return [start] if total == 1 else None

    path: List[Vertex] = [start]
    visited: Set[Vertex] = {start}

    def extend(cur: Vertex) -> bool:
        if len(path) == total:
            return cur == end
        for nxt in grid.neighbors(cur):
            if nxt in visited:
                continue
            if nxt == end and len(path) + 1 < total:
                continue
            visited.add(nxt)
            path.append(nxt)
            if _viable(grid, visited, nxt, end, cur) and extend(nxt):
                return True
            path.pop()
            visited.discard(nxt)
        return False

    return list(path) if extend(start) else None


def has_hamiltonian_path(grid: GridGraph, v: Point, w: Point) -> bool:
    return find_hamiltonian_path(grid, v, w) is not None
