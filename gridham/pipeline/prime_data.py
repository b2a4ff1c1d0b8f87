"""
Regenerate and check the shipped prime path data.

The solver never searches at run time. This module rebuilds
`gridham/solver/prime_paths.yaml` from exhaustive search and reports how the
shipped table compares with what the acceptability rules require.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..core.grid import GridGraph
from ..core.search import find_hamiltonian_path
from ..core.types import NoPrimeTableEntry
from ..solver.primes import PRIME_SHAPES, CanonicalKey, PrimeTable, acceptable_prime_keys

logger = logging.getLogger(__name__)

HEADER = """\
# Hamiltonian paths for the canonical prime problems.
#
# One path per canonical problem: the smallest image of (shape, v, w) under
# the eight grid symmetries and the endpoint swap, with rows <= columns.
# Each path runs from v to w. Problems without a path have no entry.
#
# Regenerate with:
#   gridham primes --write gridham/solver/prime_paths.yaml
"""


@dataclass
class PrimeReport:
    """Coverage of a prime table against the acceptable prime problems."""
    entries: int = 0
    required: int = 0
    missing: List[CanonicalKey] = field(default_factory=list)
    extra: List[CanonicalKey] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.extra


def generate_prime_paths() -> Dict[CanonicalKey, Tuple]:
    """
    Search a path for every acceptable canonical prime problem.

    Raises:
        NoPrimeTableEntry: An acceptable problem has no path, which means the
            acceptability rules and the search disagree
    """
    entries = {}
    for key in acceptable_prime_keys():
        n, m, v, w = key
        path = find_hamiltonian_path(GridGraph(n, m), v, w)
        if path is None:
            raise NoPrimeTableEntry(f"Acceptable prime problem {key} has no Hamiltonian path")
        entries[key] = tuple(path)
    logger.info("generated %d prime paths", len(entries))
    return entries


def format_prime_paths(entries: Dict[CanonicalKey, Tuple]) -> str:
    lines = [HEADER]
    for n, m in PRIME_SHAPES:
        paths = [entries[key] for key in sorted(entries) if key[:2] == (n, m)]
        if not paths:
            continue
        lines.append(f"- shape: [{n}, {m}]")
        lines.append("  paths:")
        for path in paths:
            lines.append("    - [" + ", ".join(f"[{r}, {c}]" for r, c in path) + "]")
    return "\n".join(lines) + "\n"


def write_prime_paths(path: str) -> int:
    """Regenerate the prime path data into `path`; returns the number of entries."""
    entries = generate_prime_paths()
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_prime_paths(entries))
    logger.info("wrote %s", path)
    return len(entries)


def check_prime_table(table: PrimeTable) -> PrimeReport:
    required = list(acceptable_prime_keys())
    wanted = set(required)
    return PrimeReport(
        entries=len(table),
        required=len(required),
        missing=[key for key in required if key not in table],
        extra=[key for key in table.keys() if key not in wanted],
    )
