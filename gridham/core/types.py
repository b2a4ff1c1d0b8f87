"""
Shared types for the grid Hamiltonian path engine.
Separated to avoid circular imports between core and solver modules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VerdictKind(Enum):
    """Outcome of the acceptability check."""
    ACCEPTABLE = "acceptable"
    COLOR_INCOMPATIBLE = "color_incompatible"
    FORBIDDEN = "forbidden"


class ForbiddenKind(Enum):
    """Forbidden families of color-compatible problems."""
    DEGENERATE = "degenerate"   # n = 1 or m = 1
    WIDTH_2 = "width_2"         # endpoints across an interior rung
    WIDTH_3 = "width_3"         # G(n, 3), n even


@dataclass(frozen=True)
class Verdict:
    """Acceptability verdict; `forbidden` is set only for FORBIDDEN."""
    kind: VerdictKind
    forbidden: Optional[ForbiddenKind] = None

    @property
    def acceptable(self) -> bool:
        return self.kind is VerdictKind.ACCEPTABLE

    def __str__(self):
        if self.forbidden is not None:
            return f"forbidden({self.forbidden.value})"
        return self.kind.value


ACCEPTABLE = Verdict(VerdictKind.ACCEPTABLE)
COLOR_INCOMPATIBLE = Verdict(VerdictKind.COLOR_INCOMPATIBLE)


def forbidden(kind: ForbiddenKind) -> Verdict:
    return Verdict(VerdictKind.FORBIDDEN, kind)


# ---------- Errors ----------

class GridError(Exception):
    """Base class for every error raised by gridham."""


class InvalidInput(GridError, ValueError):
    """Malformed grid dimensions or endpoints (caller error)."""


class InvalidDimensions(InvalidInput):
    """Grid with fewer than one row or column."""


class ConfigError(GridError, ValueError):
    """Malformed configuration file."""


class InternalInvariantError(GridError, AssertionError):
    """A defect in the reduction, the prime table or the assembly."""


class ReductionInvariantViolated(InternalInvariantError):
    """An acceptable, non-prime problem could be neither stripped nor split."""


class NoPrimeTableEntry(InternalInvariantError):
    """The prime table holds no path for the requested problem."""


class AssemblyInvariantViolated(InternalInvariantError):
    """The assembled path is not a Hamiltonian path between the endpoints."""
