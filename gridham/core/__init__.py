"""
Core module containing fundamental data structures and operations.

- grid: Vertex, GridGraph and the color classifier
- symmetry: the eight rotations/reflections of a rectangular grid
- path: GridPath value type with edge matrices and validation
- search: exhaustive Hamiltonian path search for small grids
- types: verdicts and the error taxonomy
"""

from .grid import GridGraph, Vertex, color, majority_color
from .path import GridPath
from .search import find_hamiltonian_path, has_hamiltonian_path
from .types import (
    ACCEPTABLE,
    COLOR_INCOMPATIBLE,
    AssemblyInvariantViolated,
    ConfigError,
    ForbiddenKind,
    GridError,
    InternalInvariantError,
    InvalidDimensions,
    InvalidInput,
    NoPrimeTableEntry,
    ReductionInvariantViolated,
    Verdict,
    VerdictKind,
)

__all__ = [
    "GridGraph",
    "Vertex",
    "color",
    "majority_color",
    "GridPath",
    "find_hamiltonian_path",
    "has_hamiltonian_path",
    "ACCEPTABLE",
    "COLOR_INCOMPATIBLE",
    "AssemblyInvariantViolated",
    "ConfigError",
    "ForbiddenKind",
    "GridError",
    "InternalInvariantError",
    "InvalidDimensions",
    "InvalidInput",
    "NoPrimeTableEntry",
    "ReductionInvariantViolated",
    "Verdict",
    "VerdictKind",
]
