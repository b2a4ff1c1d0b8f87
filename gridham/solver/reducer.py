"""
Strip/split reduction of an acceptable problem down to prime problems.

The reduction is kept in an arena: every node is a local Problem together
with the position of its top-left vertex in the root grid. Children are
referenced by node id and always have a larger id than their parent, so the
assembler can replay the trace by walking the arena backwards.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..core.grid import GridGraph, Vertex
from ..core.types import ReductionInvariantViolated
from .acceptability import check_acceptable
from .primes import is_prime_shape
from .problem import Problem

logger = logging.getLogger(__name__)


class Side(Enum):
    """Grid boundary a strip is taken from, in tie-break order."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Strip:
    """
    Even-width boundary strip removed from a node.

    Attributes:
        side: Boundary the strip was taken from
        width: Number of removed rows/columns (even)
        removed: (top-left, bottom-right) of the strip in root coordinates
    """
    side: Side
    width: int
    removed: Tuple[Vertex, Vertex]


@dataclass(frozen=True)
class Split:
    """
    Split along the edge pq, in root coordinates.

    The p side child solves (Gp, v, p); the w side child solves (Gq, w, q)
    and its path is walked backwards when the two halves are joined.
    """
    p: Vertex
    q: Vertex
    p_side: int
    w_side: int


@dataclass(frozen=True)
class Prime:
    """Leaf resolved by the prime table."""


Step = Union[Strip, Split, Prime]
PRIME = Prime()


@dataclass
class ReductionNode:
    id: int
    problem: Problem
    origin: Vertex
    step: Optional[Step] = None
    children: Tuple[int, ...] = ()

    def to_root(self, v: Vertex) -> Vertex:
        return Vertex(v.row + self.origin.row, v.col + self.origin.col)


@dataclass
class ReductionTrace:
    """Arena of reduction nodes; node 0 is the root problem."""
    nodes: List[ReductionNode] = field(default_factory=list)

    @property
    def root(self) -> ReductionNode:
        return self.nodes[0]

    def add(self, problem: Problem, origin: Vertex) -> int:
        node = ReductionNode(len(self.nodes), problem, origin)
        self.nodes.append(node)
        return node.id

    def steps(self) -> List[Step]:
        """Strip and split steps in the order they were applied."""
        return [node.step for node in self.nodes if not isinstance(node.step, Prime)]

    def primes(self) -> List[ReductionNode]:
        return [node for node in self.nodes if isinstance(node.step, Prime)]

    def __len__(self) -> int:
        return len(self.nodes)


# ---------- Strip ----------

def _strip_room(problem: Problem, side: Side) -> int:
    """Rows/columns between the side and the nearest endpoint."""
    v, w = problem.v, problem.w
    if side is Side.TOP:
        return min(v.row, w.row)
    if side is Side.BOTTOM:
        return problem.n - 1 - max(v.row, w.row)
    if side is Side.LEFT:
        return min(v.col, w.col)
    return problem.m - 1 - max(v.col, w.col)


def _stripped(problem: Problem, side: Side, width: int) -> Tuple[Problem, Vertex]:
    """
    Problem left after removing `width` lines from `side`.

    Returns:
        (reduced problem, offset of its top-left vertex in the parent)
    """
    n, m = problem.shape
    v, w = problem.v, problem.w
    if side is Side.TOP:
        dr, dc, shape = width, 0, (n - width, m)
    elif side is Side.BOTTOM:
        dr, dc, shape = 0, 0, (n - width, m)
    elif side is Side.LEFT:
        dr, dc, shape = 0, width, (n, m - width)
    else:
        dr, dc, shape = 0, 0, (n, m - width)
    reduced = Problem(GridGraph(*shape), Vertex(v.row - dr, v.col - dc), Vertex(w.row - dr, w.col - dc))
    return reduced, Vertex(dr, dc)


def _boundary_line(problem: Problem, side: Side) -> Tuple[int, int]:
    """
    Line of `problem` that faces `side`.

    Returns:
        (axis, index): axis 0 for a row, 1 for a column
    """
    if side is Side.TOP:
        return 0, 0
    if side is Side.BOTTOM:
        return 0, problem.n - 1
    if side is Side.LEFT:
        return 1, 0
    return 1, problem.m - 1


def is_extendable(problem: Problem, side: Side) -> bool:
    """
    True if every Hamiltonian path of `problem` uses an edge of the boundary
    line facing `side`, so a 2-wide serpentine can be spliced in there.
    """
    axis, index = _boundary_line(problem, side)
    length = problem.m if axis == 0 else problem.n
    if length < 2:
        return False
    if length >= 3 or problem.grid.size == 2:
        return True
    on_line = sum(1 for x in (problem.v, problem.w) if x[axis] == index)
    return on_line < 2


def _strip_candidates(problem: Problem) -> List[Tuple[Side, int]]:
    candidates = []
    for order, side in enumerate(Side):
        room = _strip_room(problem, side)
        for width in range(2, room + 1, 2):
            candidates.append((-width, order, side))
    candidates.sort(key=lambda c: (c[0], c[1]))
    return [(side, -neg) for neg, _, side in candidates]


def find_strip(problem: Problem) -> Optional[Tuple[Side, int, Problem, Vertex]]:
    """
    Largest even boundary strip whose removal keeps the problem acceptable.

    Returns:
        (side, width, reduced problem, offset) or None
    """
    for side, width in _strip_candidates(problem):
        reduced, offset = _stripped(problem, side, width)
        if not check_acceptable(reduced.grid, reduced.v, reduced.w).acceptable:
            continue
        if not is_extendable(reduced, side):
            continue
        return side, width, reduced, offset
    return None


def _removed_range(node: ReductionNode, side: Side, width: int) -> Tuple[Vertex, Vertex]:
    n, m = node.problem.shape
    if side is Side.TOP:
        lo, hi = Vertex(0, 0), Vertex(width - 1, m - 1)
    elif side is Side.BOTTOM:
        lo, hi = Vertex(n - width, 0), Vertex(n - 1, m - 1)
    elif side is Side.LEFT:
        lo, hi = Vertex(0, 0), Vertex(n - 1, width - 1)
    else:
        lo, hi = Vertex(0, m - width), Vertex(n - 1, m - 1)
    return node.to_root(lo), node.to_root(hi)


# ---------- Split ----------

def _split_candidates(problem: Problem) -> List[Tuple[Vertex, Vertex]]:
    """
    Edges pq crossing a straight cut that separates v from w, p on v's side.

    Sorted by distance from the edge midpoint to the midpoint of v and w,
    then by p and q.
    """
    v, w = problem.v, problem.w
    n, m = problem.shape
    edges = []
    if v.row != w.row:
        step = 1 if v.row < w.row else -1
        for r in range(v.row, w.row, step):
            for c in range(m):
                edges.append((Vertex(r, c), Vertex(r + step, c)))
    if v.col != w.col:
        step = 1 if v.col < w.col else -1
        for c in range(v.col, w.col, step):
            for r in range(n):
                edges.append((Vertex(r, c), Vertex(r, c + step)))

    mr, mc = v.row + w.row, v.col + w.col

    def key(edge):
        p, q = edge
        dist = (p.row + q.row - mr) ** 2 + (p.col + q.col - mc) ** 2
        return dist, p.row, p.col, q.row, q.col

    edges.sort(key=key)
    return edges


def _halves(problem: Problem, p: Vertex, q: Vertex):
    """
    Grids on either side of the cut between p and q.

    Returns:
        ((grid_p, offset_p), (grid_q, offset_q)), offsets relative to the parent
    """
    n, m = problem.shape
    if p.col == q.col:
        if p.row < q.row:
            return (GridGraph(p.row + 1, m), Vertex(0, 0)), (GridGraph(n - q.row, m), Vertex(q.row, 0))
        return (GridGraph(n - p.row, m), Vertex(p.row, 0)), (GridGraph(q.row + 1, m), Vertex(0, 0))
    if p.col < q.col:
        return (GridGraph(n, p.col + 1), Vertex(0, 0)), (GridGraph(n, m - q.col), Vertex(0, q.col))
    return (GridGraph(n, m - p.col), Vertex(0, p.col)), (GridGraph(n, q.col + 1), Vertex(0, 0))


def _local(v: Vertex, offset: Vertex) -> Vertex:
    return Vertex(v.row - offset.row, v.col - offset.col)


def _half_acceptable(grid: GridGraph, a: Vertex, b: Vertex) -> bool:
    if a == b:
        return grid.size == 1
    return check_acceptable(grid, a, b).acceptable


def find_split(problem: Problem) -> Optional[Tuple[Vertex, Vertex, Problem, Vertex, Problem, Vertex]]:
    """
    First edge pq whose cut leaves (Gp, v, p) and (Gq, w, q) acceptable.

    Returns:
        (p, q, p side problem, its offset, w side problem, its offset) or None
    """
    for p, q in _split_candidates(problem):
        (grid_p, off_p), (grid_q, off_q) = _halves(problem, p, q)
        v, lp = _local(problem.v, off_p), _local(p, off_p)
        w, lq = _local(problem.w, off_q), _local(q, off_q)
        if not _half_acceptable(grid_p, v, lp):
            continue
        if not _half_acceptable(grid_q, w, lq):
            continue
        return p, q, Problem(grid_p, v, lp), off_p, Problem(grid_q, w, lq), off_q
    return None


# ---------- Reduction ----------

def reduce(problem: Problem) -> ReductionTrace:
    """
    Decompose an acceptable problem until only prime problems remain.

    Args:
        problem: Acceptable problem; callers check acceptability first

    Returns:
        ReductionTrace whose root node holds `problem`

    Raises:
        ReductionInvariantViolated: A non-prime node could be neither
            stripped nor split
    """
    trace = ReductionTrace()
    pending = [trace.add(problem, Vertex(0, 0))]

    while pending:
        node = trace.nodes[pending.pop()]
        local = node.problem

        if is_prime_shape(local.n, local.m):
            node.step = PRIME
            continue

        strip = find_strip(local)
        if strip is not None:
            side, width, reduced, offset = strip
            node.step = Strip(side, width, _removed_range(node, side, width))
            child = trace.add(reduced, node.to_root(offset))
            node.children = (child,)
            pending.append(child)
            logger.debug("node %d %s: strip %s width %d", node.id, local, side.value, width)
            continue

        split = find_split(local)
        if split is not None:
            p, q, p_problem, off_p, w_problem, off_q = split
            p_side = trace.add(p_problem, node.to_root(off_p))
            w_side = trace.add(w_problem, node.to_root(off_q))
            node.step = Split(node.to_root(p), node.to_root(q), p_side, w_side)
            node.children = (p_side, w_side)
            pending.extend((w_side, p_side))
            logger.debug("node %d %s: split at %s-%s", node.id, local, p, q)
            continue

        raise ReductionInvariantViolated(f"No strip or split applies to acceptable problem {local}")

    return trace
