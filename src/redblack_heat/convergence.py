# ------------------------------------------------------------
# Convergence monitor: mean absolute change between two snapshots
# ------------------------------------------------------------
#   delta = sum_{x,y} |prev[x,y] - T[x,y]| / (W*H)
#
# The sum runs over the whole grid, boundaries included. Each worker
# reduces its own column range into a local partial sum; the partial
# sums are combined once, after every worker has finished.
# ------------------------------------------------------------

from __future__ import annotations

from concurrent.futures import Executor
from typing import Optional

import numpy as np

from .grid import Grid
from .stencil import partition_columns


def _partial_sum(T: np.ndarray, P: np.ndarray, x0: int, x1: int) -> float:
    return float(np.abs(P[:, x0:x1] - T[:, x0:x1]).sum())


def compute_delta(
    current: Grid,
    previous: Grid,
    workers: int = 1,
    executor: Optional[Executor] = None,
) -> float:
    """Mean absolute difference between `current` and `previous`."""
    if (current.width, current.height) != (previous.width, previous.height):
        raise ValueError("Delta error: grid sizes do not match.")

    T = current.view()
    P = previous.view()
    ranges = [r for r in partition_columns(0, current.width, workers) if r[1] > r[0]]

    if executor is None or len(ranges) <= 1:
        partials = [_partial_sum(T, P, x0, x1) for x0, x1 in ranges]
    else:
        futures = [executor.submit(_partial_sum, T, P, x0, x1) for x0, x1 in ranges]
        partials = [f.result() for f in futures]

    return sum(partials) / float(current.width * current.height)
