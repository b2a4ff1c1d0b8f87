"""
gridham: Hamiltonian paths in rectangular grid graphs.

- core: grid model, symmetries, path type, exhaustive search, errors
- solver: acceptability check, strip/split reduction, prime table, assembly
- pipeline: YAML configuration and the brute-force verification run
"""

from .core import GridGraph, GridPath, Vertex, Verdict, VerdictKind, ForbiddenKind
from .core.types import GridError, InternalInvariantError, InvalidInput
from .solver import SolveResult, check, construct, exists

__version__ = "0.1.0"

__all__ = [
    "GridGraph",
    "GridPath",
    "Vertex",
    "Verdict",
    "VerdictKind",
    "ForbiddenKind",
    "GridError",
    "InternalInvariantError",
    "InvalidInput",
    "SolveResult",
    "check",
    "construct",
    "exists",
]
