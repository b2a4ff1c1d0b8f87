"""
Configuration loading and data classes for the solver and the verify run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from ..core.types import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SolverConfig:
    """Engine options."""
    validate_paths: bool = True  # check every assembled path before returning it
    check_primes: bool = False  # confirm the prime table covers every acceptable prime before solving


@dataclass
class VerifyConfig:
    """Bounds of the exhaustive verification run."""
    max_rows: int = 4
    max_cols: int = 4
    max_cells: int = 16
    brute_force: bool = True


@dataclass
class GlobalConfig:
    solver: SolverConfig = field(default_factory=SolverConfig)
    verify: VerifyConfig = field(default_factory=VerifyConfig)
    log_level: str = "WARNING"


def load_yaml(path: str) -> Dict[str, Any]:
    """Load a YAML file; an empty file yields an empty dict."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value


def _typed(data: Dict[str, Any], key: str, kind: type, default):
    value = data.get(key, default)
    # bool is an int subclass; keep them apart
    if isinstance(value, bool) != (kind is bool) or not isinstance(value, kind):
        raise ConfigError(f"'{key}' must be {kind.__name__}, got {value!r}")
    return value


def positive(key: str, value: Any) -> int:
    """Return `value` if it is a positive int, raising ConfigError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be int, got {value!r}")
    if value < 1:
        raise ConfigError(f"'{key}' must be positive, got {value}")
    return value


def _positive(data: Dict[str, Any], key: str, default: int) -> int:
    return positive(key, _typed(data, key, int, default))


def parse_solver_config(data: Optional[Dict[str, Any]]) -> SolverConfig:
    """Parse solver options from dictionary."""
    if data is None:
        return SolverConfig()
    return SolverConfig(
        validate_paths=_typed(data, "validate_paths", bool, True),
        check_primes=_typed(data, "check_primes", bool, False),
    )


def parse_verify_config(data: Optional[Dict[str, Any]]) -> VerifyConfig:
    """Parse verify bounds from dictionary."""
    if data is None:
        return VerifyConfig()
    return VerifyConfig(
        max_rows=_positive(data, "max_rows", 4),
        max_cols=_positive(data, "max_cols", 4),
        max_cells=_positive(data, "max_cells", 16),
        brute_force=_typed(data, "brute_force", bool, True),
    )


def parse_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ConfigError(f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return value.upper()


def parse_config(data: Dict[str, Any]) -> GlobalConfig:
    return GlobalConfig(
        solver=parse_solver_config(_section(data, "solver")),
        verify=parse_verify_config(_section(data, "verify")),
        log_level=parse_log_level(data.get("log_level", "WARNING")),
    )


def load_config(path: Optional[str] = None) -> GlobalConfig:
    """
    Load configuration from YAML.

    Args:
        path: YAML file; None gives the defaults

    Returns:
        GlobalConfig with defaults filled in for missing keys
    """
    if path is None:
        return GlobalConfig()
    return parse_config(load_yaml(path))
