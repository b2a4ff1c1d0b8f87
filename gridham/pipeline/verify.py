"""
Verification run: compare the engine against exhaustive search.

Every task is checked three ways: the verdict from the acceptability
check, the existence answer from exhaustive search (optional), and the
validity of the path built by `construct`.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.grid import GridGraph
from ..core.search import has_hamiltonian_path
from ..core.types import GridError
from ..solver.engine import construct
from .config import GlobalConfig
from .tasks import VerifyTask, generate_tasks, get_task_summary

logger = logging.getLogger(__name__)


@dataclass
class VerifyResult:
    """Result of a single task."""
    task_id: str
    verdict: str
    acceptable: bool
    brute_force: Optional[bool] = None
    path_valid: Optional[bool] = None
    runtime_sec: float = 0.0
    error: Optional[str] = None

    @property
    def agrees(self) -> bool:
        """Engine and exhaustive search give the same answer (True if unchecked)."""
        return self.brute_force is None or self.brute_force == self.acceptable

    @property
    def success(self) -> bool:
        return self.error is None and self.agrees and self.path_valid is not False


@dataclass
class VerifySummary:
    total: int = 0
    acceptable: int = 0
    disagreements: List[str] = field(default_factory=list)
    invalid_paths: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    by_grid: dict = field(default_factory=dict)
    runtime_sec: float = 0.0

    @property
    def ok(self) -> bool:
        return not (self.disagreements or self.invalid_paths or self.errors)


def run_task(task: VerifyTask, brute_force: bool = True, solver_cfg=None) -> VerifyResult:
    """
    Check one problem.

    Args:
        task: Problem to check
        brute_force: Also decide existence by exhaustive search
        solver_cfg: SolverConfig passed to `construct`

    Returns:
        VerifyResult; internal errors are recorded, not raised
    """
    start = time.time()
    result = VerifyResult(task.task_id, verdict="", acceptable=False)
    try:
        solved = construct(task.n, task.m, task.v, task.w, solver_cfg)
        result.verdict = str(solved.verdict)
        result.acceptable = solved.verdict.acceptable
        if solved.found:
            result.path_valid = solved.path.connects(task.v, task.w)
        if brute_force:
            result.brute_force = has_hamiltonian_path(GridGraph(task.n, task.m), task.v, task.w)
    except GridError as e:
        logger.error("Task %s failed: %s", task.task_id, e)
        result.error = f"{type(e).__name__}: {e}"
    result.runtime_sec = time.time() - start
    return result


def run_verification(
    cfg: GlobalConfig,
    callback: Optional[Callable[[VerifyResult], None]] = None,
) -> VerifySummary:
    """
    Run every task generated from `cfg.verify`, sequentially.

    Args:
        cfg: Loaded configuration
        callback: Called with each VerifyResult as it completes

    Returns:
        VerifySummary with totals and the ids of failing tasks
    """
    tasks = generate_tasks(cfg.verify)
    task_summary = get_task_summary(tasks)
    logger.info("Verifying %d tasks over %d grids", task_summary["total"], len(task_summary["by_grid"]))

    summary = VerifySummary(by_grid=task_summary["by_grid"])
    start = time.time()
    for task in tasks:
        result = run_task(task, cfg.verify.brute_force, cfg.solver)
        summary.total += 1
        if result.acceptable:
            summary.acceptable += 1
        if result.error is not None:
            summary.errors.append(task.task_id)
        if not result.agrees:
            logger.warning("Task %s: verdict %s but exhaustive search says %s",
                           task.task_id, result.verdict, result.brute_force)
            summary.disagreements.append(task.task_id)
        if result.path_valid is False:
            summary.invalid_paths.append(task.task_id)
        if callback:
            callback(result)
    summary.runtime_sec = time.time() - start
    return summary
