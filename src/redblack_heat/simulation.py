# ------------------------------------------------------------
# Simulation driver
# ------------------------------------------------------------
# States:
#   INIT -> RUNNING -> (CONVERGED | EXHAUSTED) -> DONE
#
# Loop (step n = 0, 1, ...):
#   1. snapshot current into previous
#   2. red/black sweep with offset n % 2
#   3. delta = mean |previous - current|
#   4. stop when delta < tolerance; n is reported, not n + 1
# ------------------------------------------------------------

from __future__ import annotations

import enum
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .config import SimulationConfig, resolve_workers
from .convergence import compute_delta
from .grid import Grid, allocate_grid, initialize
from .stencil import sweep

logger = logging.getLogger(__name__)

Exporter = Callable[[str, int, int, np.ndarray], None]
Reporter = Callable[["SimulationResult"], None]


class SimulationState(enum.Enum):
    INIT = "init"
    RUNNING = "running"
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    DONE = "done"


@dataclass
class SimulationResult:
    steps: int
    delta: float
    outcome: SimulationState  # CONVERGED or EXHAUSTED
    grid: Grid
    history: List[float] = field(default_factory=list)  # delta after each sweep
    state: SimulationState = SimulationState.DONE

    @property
    def converged(self) -> bool:
        return self.outcome is SimulationState.CONVERGED


def run_simulation(
    config: SimulationConfig,
    exporter: Optional[Exporter] = None,
    reporter: Optional[Reporter] = None,
) -> SimulationResult:
    """
    Run the relaxation until convergence or until the step budget is spent.

    On DONE the reporter, if any, receives the result first. Then, if
    `config.output` is set and an exporter is given, the exporter is
    called once with (output, width, height, data).
    """
    state = SimulationState.INIT
    width, height = config.width, config.height
    workers = resolve_workers(config.workers)

    logger.info(
        "INIT: %dx%d grid, %d steps, alpha=%g, tolerance=%g, %d worker(s), %s partitioning",
        width, height, config.steps, config.alpha, config.tolerance, workers, config.strategy,
    )

    current = allocate_grid(width, height)
    previous = allocate_grid(width, height)
    initialize(current)

    delta = 0.0
    history: List[float] = []
    n = 0

    pool = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None
    try:
        state = SimulationState.RUNNING
        while n < config.steps:
            previous.copy_from(current)
            sweep(current, n % 2, config.alpha, workers=workers, executor=pool, strategy=config.strategy)
            delta = compute_delta(current, previous, workers=workers, executor=pool)
            history.append(delta)
            logger.debug("step %d: delta=%g", n, delta)

            if delta < config.tolerance:
                state = SimulationState.CONVERGED
                break
            n += 1
    finally:
        if pool is not None:
            pool.shutdown(wait=True)

    if state is SimulationState.RUNNING:
        state = SimulationState.EXHAUSTED

    logger.info("%s after %d iterations, delta=%g", state.name, n, delta)

    result = SimulationResult(
        steps=n, delta=delta, outcome=state, grid=current, history=history, state=SimulationState.DONE,
    )

    if reporter is not None:
        reporter(result)

    if config.output is not None and exporter is not None:
        exporter(config.output, width, height, current.data)
        logger.info("Saved grid image: %s", config.output)

    return result
