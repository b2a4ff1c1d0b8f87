"""
Solver module: acceptability, reduction, prime table and assembly.

- acceptability: color compatibility and the forbidden families
- reducer: strip/split decomposition into a reduction trace
- primes: read-only table of prime problem paths, shipped as YAML data
- assembler: replays a trace into the final path
- engine: exists / check / construct
"""

from .acceptability import are_color_compatible, check_acceptable, is_acceptable
from .assembler import assemble
from .engine import SolveResult, check, construct, exists, make_problem
from .primes import PRIME_TABLE, PrimeTable, is_prime_shape, solve_prime
from .problem import Problem
from .reducer import ReductionNode, ReductionTrace, Side, Split, Strip, reduce

__all__ = [
    "are_color_compatible",
    "check_acceptable",
    "is_acceptable",
    "assemble",
    "SolveResult",
    "check",
    "construct",
    "exists",
    "make_problem",
    "PRIME_TABLE",
    "PrimeTable",
    "is_prime_shape",
    "solve_prime",
    "Problem",
    "ReductionNode",
    "ReductionTrace",
    "Side",
    "Split",
    "Strip",
    "reduce",
]
