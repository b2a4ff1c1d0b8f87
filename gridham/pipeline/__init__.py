"""
Pipeline module: YAML configuration, the verification run and the prime
path data tooling.
"""

from .config import (
    GlobalConfig,
    SolverConfig,
    VerifyConfig,
    load_config,
    load_yaml,
    parse_config,
)
from .prime_data import PrimeReport, check_prime_table, generate_prime_paths, write_prime_paths
from .tasks import VerifyTask, generate_tasks, get_task_summary
from .verify import VerifyResult, VerifySummary, run_task, run_verification

__all__ = [
    "GlobalConfig",
    "SolverConfig",
    "VerifyConfig",
    "load_config",
    "load_yaml",
    "parse_config",
    "PrimeReport",
    "check_prime_table",
    "generate_prime_paths",
    "write_prime_paths",
    "VerifyTask",
    "generate_tasks",
    "get_task_summary",
    "VerifyResult",
    "VerifySummary",
    "run_task",
    "run_verification",
]
