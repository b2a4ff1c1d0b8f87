"""
Acceptability check for Hamiltonian path problems on rectangular grids.

A problem (G(n, m), v, w) has a Hamiltonian path from v to w iff it is
color compatible and belongs to none of three forbidden families:

- degenerate: n = 1 or m = 1 and {v, w} are not the two ends of the line
- width 2: v and w sit across an interior rung of G(n, 2)
- width 3: G(n, 3) with n even and v, w in the configuration described in
  `_forbidden_width_3`
"""

from ..core import symmetry
from ..core.grid import GridGraph, Point, Vertex, color
from ..core.types import (
    ACCEPTABLE,
    COLOR_INCOMPATIBLE,
    ForbiddenKind,
    Verdict,
    forbidden,
)
from .problem import Problem


def are_color_compatible(grid: GridGraph, v: Point, w: Point) -> bool:
    """
    Parity condition every Hamiltonian path must satisfy.

    On an odd grid both endpoints carry the majority (corner) color 0; on an
    even grid they carry different colors.
    """
    if grid.size % 2 == 1:
        return color(v) == 0 and color(w) == 0
    return color(v) != color(w)


def _forbidden_degenerate(grid: GridGraph, v: Vertex, w: Vertex) -> bool:
    ends = {Vertex(0, 0), Vertex(grid.n - 1, grid.m - 1)}
    return {v, w} != ends


def _forbidden_width_2(grid: GridGraph, v: Vertex, w: Vertex) -> bool:
    # Orient as G(n, 2): the rungs are (k, 0) - (k, 1)
    if grid.m != 2:
        v, w = Vertex(v.col, v.row), Vertex(w.col, w.row)
        length = grid.m
    else:
        length = grid.n
    return v.row == w.row and v.col != w.col and 0 < v.row < length - 1


def _forbidden_width_3(grid: GridGraph, v: Vertex, w: Vertex) -> bool:
    """
    Width-3 family, normalized to G(L, 3) with the long axis along rows.

    With L even, let v' = (x1, y1) be the endpoint closer to row 0 and
    w' = (x2, y2) the other. The problem is forbidden iff v' is colored
    differently from the corners of row 0 and either x1 < x2 - 1, or v' is
    in the middle column and x1 < x2.
    """
    shape = grid.shape
    if grid.m != 3:
        shape, v, w = symmetry.image_shape('transpose', shape), \
            symmetry.apply('transpose', v, shape), symmetry.apply('transpose', w, shape)
    length = shape[0]
    if length % 2 == 1:
        return False
    if v.row > w.row:
        v, w = w, v
    x1, y1 = v
    x2, _ = w
    if color(v) == color((0, 0)):
        return False
    return x1 < x2 - 1 or (y1 == 1 and x1 < x2)


def check_acceptable(grid: GridGraph, v: Point, w: Point) -> Verdict:
    """
    Decide whether (grid, v, w) has a Hamiltonian path from v to w.

    Args:
        grid: Grid graph
        v, w: Endpoints inside the grid

    Returns:
        ACCEPTABLE, COLOR_INCOMPATIBLE or a FORBIDDEN verdict tagged with
        the family that matched
    """
    v, w = grid.require(v), grid.require(w)
    if not are_color_compatible(grid, v, w):
        return COLOR_INCOMPATIBLE
    if grid.n == 1 or grid.m == 1:
        if _forbidden_degenerate(grid, v, w):
            return forbidden(ForbiddenKind.DEGENERATE)
        return ACCEPTABLE
    if grid.n == 2 or grid.m == 2:
        if _forbidden_width_2(grid, v, w):
            return forbidden(ForbiddenKind.WIDTH_2)
        return ACCEPTABLE
    if grid.n == 3 or grid.m == 3:
        if _forbidden_width_3(grid, v, w):
            return forbidden(ForbiddenKind.WIDTH_3)
    return ACCEPTABLE


def is_acceptable(problem: Problem) -> bool:
    return check_acceptable(problem.grid, problem.v, problem.w).acceptable
