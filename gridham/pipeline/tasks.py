"""
Task generator for the verify pipeline.

Generates one VerifyTask per grid and unordered endpoint pair.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from ..core.grid import GridGraph, Vertex
from .config import VerifyConfig


@dataclass(frozen=True)
class VerifyTask:
    """A single (G(n, m), v, w) problem to check."""
    task_id: str
    n: int
    m: int
    v: Vertex
    w: Vertex

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task_id": self.task_id,
            "n": self.n,
            "m": self.m,
            "v": list(self.v),
            "w": list(self.w),
        }


def generate_tasks(verify_cfg: VerifyConfig) -> List[VerifyTask]:
    """
    Generate all tasks within the configured bounds.

    Each task is a unique combination of:
    - Grid size (n <= max_rows, m <= max_cols, n*m <= max_cells)
    - Unordered pair of distinct vertices

    Returns:
        List of VerifyTask objects, grids in (n, m) order
    """
    tasks: List[VerifyTask] = []

    for n in range(1, verify_cfg.max_rows + 1):
        for m in range(1, verify_cfg.max_cols + 1):
            if n * m > verify_cfg.max_cells:
                continue
            cells = list(GridGraph(n, m).vertices())
            for i, v in enumerate(cells):
                for w in cells[i + 1:]:
                    task_id = f"{n}x{m}_{v.row}.{v.col}_{w.row}.{w.col}"
                    tasks.append(VerifyTask(task_id, n, m, v, w))

    return tasks


def get_task_summary(tasks: List[VerifyTask]) -> dict:
    """
    Get summary statistics for task list.

    Returns:
        Dictionary with the total and the task count per grid
    """
    by_grid: Dict[str, int] = {}
    for task in tasks:
        grid_key = f"{task.n}x{task.m}"
        by_grid[grid_key] = by_grid.get(grid_key, 0) + 1

    return {
        "total": len(tasks),
        "by_grid": by_grid,
    }
