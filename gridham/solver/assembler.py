"""
Replay a reduction trace into a Hamiltonian path of the root grid.
"""

from typing import Callable, Dict, List, Optional

from ..core.grid import Vertex
from ..core.types import AssemblyInvariantViolated
from .primes import PrimeTable, solve_prime
from .reducer import Prime, ReductionTrace, Side, Split, Strip


class _Region:
    """Rectangle of the root grid covered by a partial path."""

    def __init__(self, top: int, left: int, n: int, m: int):
        self.top, self.left, self.n, self.m = top, left, n, m

    @property
    def bottom(self) -> int:
        return self.top + self.n - 1

    @property
    def right(self) -> int:
        return self.left + self.m - 1

    def grow(self, side: Side, width: int):
        if side is Side.TOP:
            self.top -= width
        if side is Side.LEFT:
            self.left -= width
        if side in (Side.TOP, Side.BOTTOM):
            self.n += width
        else:
            self.m += width


def _line_builder(region: _Region, side: Side) -> Callable[[int, int], Vertex]:
    """Vertex at `depth` lines beyond the boundary facing `side`, at `along`."""
    if side is Side.TOP:
        return lambda depth, along: Vertex(region.top - depth, along)
    if side is Side.BOTTOM:
        return lambda depth, along: Vertex(region.bottom + depth, along)
    if side is Side.LEFT:
        return lambda depth, along: Vertex(along, region.left - depth)
    return lambda depth, along: Vertex(along, region.right + depth)


def extend(path: List[Vertex], region: _Region, side: Side) -> List[Vertex]:
    """
    Extend a path over `region` by the two lines beyond its `side` boundary.

    The first path edge lying on the boundary line is replaced by a detour
    that runs along the inner line to one end, back along the outer line and
    down the inner line again to the other end of the edge.
    """
    vertical = side in (Side.TOP, Side.BOTTOM)
    if vertical:
        fixed = region.top if side is Side.TOP else region.bottom
        lo, hi = region.left, region.right
    else:
        fixed = region.left if side is Side.LEFT else region.right
        lo, hi = region.top, region.bottom

    def on_line(x: Vertex) -> bool:
        return (x.row if vertical else x.col) == fixed

    def along(x: Vertex) -> int:
        return x.col if vertical else x.row

    at = _line_builder(region, side)
    for i in range(len(path) - 1):
        x, y = path[i], path[i + 1]
        if not (on_line(x) and on_line(y)):
            continue
        ax, ay = along(x), along(y)
        if ax < ay:
            detour = [at(1, a) for a in range(ax, lo - 1, -1)]
            detour += [at(2, a) for a in range(lo, hi + 1)]
            detour += [at(1, a) for a in range(hi, ay - 1, -1)]
        else:
            detour = [at(1, a) for a in range(ax, hi + 1)]
            detour += [at(2, a) for a in range(hi, lo - 1, -1)]
            detour += [at(1, a) for a in range(lo, ay + 1)]
        return path[:i + 1] + detour + path[i + 1:]

    raise AssemblyInvariantViolated(f"No path edge on the {side.value} boundary to extend")


def assemble(trace: ReductionTrace, table: Optional[PrimeTable] = None) -> List[Vertex]:
    """
    Build the root path of a reduction trace.

    Nodes are visited from the last created to the root, so every child path
    exists before its parent needs it.

    Args:
        trace: Output of `reduce`
        table: Prime table to use (module table by default)

    Returns:
        Vertex order from the root problem's v to its w
    """
    paths: Dict[int, List[Vertex]] = {}

    for node in reversed(trace.nodes):
        step = node.step
        if isinstance(step, Prime):
            paths[node.id] = [node.to_root(x) for x in solve_prime(node.problem, table)]
        elif isinstance(step, Strip):
            (child_id,) = node.children
            child = trace.nodes[child_id]
            path = paths.pop(child_id)
            region = _Region(child.origin.row, child.origin.col, child.problem.n, child.problem.m)
            for _ in range(step.width // 2):
                path = extend(path, region, step.side)
                region.grow(step.side, 2)
            paths[node.id] = path
        elif isinstance(step, Split):
            head = paths.pop(step.p_side)
            tail = paths.pop(step.w_side)
            paths[node.id] = head + tail[::-1]
        else:
            raise AssemblyInvariantViolated(f"Node {node.id} was never reduced")

    return paths[trace.root.id]
