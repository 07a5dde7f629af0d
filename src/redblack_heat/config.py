# ------------------------------------------------------------
# Simulation parameters
# ------------------------------------------------------------

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .stencil import STRATEGIES

WORKERS_ENV = "REDBLACK_HEAT_WORKERS"
LOG_LEVEL_ENV = "REDBLACK_HEAT_LOG_LEVEL"

DEFAULT_ALPHA = 0.2
DEFAULT_TOLERANCE = 0.001


def resolve_workers(requested: Optional[int] = None) -> int:
    """
    Number of sweep workers.

    An explicit request wins, then the REDBLACK_HEAT_WORKERS environment
    variable, then the hardware parallelism reported by os.cpu_count().
    """
    if requested is None:
        env = os.environ.get(WORKERS_ENV, "").strip()
        if env:
            try:
                requested = int(env)
            except ValueError:
                raise ValueError(f"{WORKERS_ENV} must be an integer, got {env!r}") from None
        else:
            requested = os.cpu_count() or 1

    if requested < 1:
        raise ValueError("Worker count must be at least 1.")
    return requested


def resolve_log_level(default: int = logging.WARNING) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


@dataclass
class SimulationConfig:
    width: int
    height: int
    steps: int
    output: Optional[str] = None

    alpha: float = DEFAULT_ALPHA
    tolerance: float = DEFAULT_TOLERANCE  # stop once delta < tolerance

    # None: resolved once when the simulation starts
    workers: Optional[int] = None
    strategy: str = "blocks"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Sizes must be positive integers")
        if self.steps < 0:
            raise ValueError("Steps must be non-negative")
        if self.workers is not None and self.workers < 1:
            raise ValueError("Worker count must be at least 1.")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown partitioning strategy: {self.strategy!r}")
