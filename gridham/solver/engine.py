"""
Public operations: decide and construct Hamiltonian paths in G(n, m).
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..core.grid import GridGraph, Vertex
from ..core.path import GridPath
from ..core.types import (
    AssemblyInvariantViolated,
    InternalInvariantError,
    InvalidInput,
    Verdict,
)
from .acceptability import check_acceptable
from .assembler import assemble
from .primes import PRIME_TABLE
from .problem import Problem
from .reducer import reduce

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of `construct`.

    Attributes:
        verdict: ACCEPTABLE when a path was built, otherwise the reason
            no path exists
        path: The Hamiltonian path from v to w, or None
    """
    verdict: Verdict
    path: Optional[GridPath] = None

    @property
    def found(self) -> bool:
        return self.path is not None


def _as_vertex(v: Any, name: str) -> Vertex:
    if not isinstance(v, (tuple, list)) or len(v) != 2:
        raise InvalidInput(f"{name} must be a (row, col) pair, got {v!r}")
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in v):
        raise InvalidInput(f"{name} coordinates must be integers, got {v!r}")
    return Vertex(*v)


def make_problem(n: int, m: int, v: Sequence[int], w: Sequence[int]) -> Problem:
    """
    Validate raw input and build the Problem.

    Raises:
        InvalidInput: Bad dimensions, endpoints outside the grid or v == w
    """
    grid = GridGraph(n, m)
    v, w = _as_vertex(v, "v"), _as_vertex(w, "w")
    if v == w:
        raise InvalidInput(f"Endpoints must be distinct: {v} == {w}")
    return Problem(grid, v, w)


def check(n: int, m: int, v: Sequence[int], w: Sequence[int]) -> Verdict:
    """Acceptability verdict for (G(n, m), v, w)."""
    problem = make_problem(n, m, v, w)
    verdict = check_acceptable(problem.grid, problem.v, problem.w)
    logger.debug("%s: %s", problem, verdict)
    return verdict


def exists(n: int, m: int, v: Sequence[int], w: Sequence[int]) -> bool:
    """True iff G(n, m) has a Hamiltonian path from v to w."""
    return check(n, m, v, w).acceptable


def construct(n: int, m: int, v: Sequence[int], w: Sequence[int], config=None) -> SolveResult:
    """
    Build a Hamiltonian path of G(n, m) from v to w.

    Args:
        n, m: Grid dimensions
        v, w: Distinct endpoints as (row, col)
        config: Optional SolverConfig

    Returns:
        SolveResult with the path, or with the verdict explaining why there
        is none

    Raises:
        InvalidInput: Malformed input
        InternalInvariantError: A defect in the reduction, the prime table
            or the assembly
    """
    validate = True if config is None else config.validate_paths
    if config is not None and config.check_primes:
        PRIME_TABLE.check_complete()

    problem = make_problem(n, m, v, w)
    verdict = check_acceptable(problem.grid, problem.v, problem.w)
    logger.debug("%s: %s", problem, verdict)
    if not verdict.acceptable:
        return SolveResult(verdict)

    try:
        trace = reduce(problem)
        path = GridPath(n, m, assemble(trace))
        if validate and not path.connects(problem.v, problem.w):
            raise AssemblyInvariantViolated(f"Assembled path for {problem} is not a Hamiltonian path")
    except InternalInvariantError as e:
        logger.error("Internal error solving %s: %s", problem, e)
        raise

    logger.debug("%s: %d reduction nodes, %d primes", problem, len(trace), len(trace.primes()))
    return SolveResult(verdict, path)
