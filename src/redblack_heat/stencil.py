# ------------------------------------------------------------
# Five-point stencil and red/black (checkerboard) sweep
# ------------------------------------------------------------
# Update:
#   T[x,y] <- alpha * ( T[x,y] + T[x-1,y] + T[x+1,y] + T[x,y-1] + T[x,y+1] )
#
# Coloring:
#   A sweep with a given offset touches only interior cells with
#       (x + offset) % 2 == (y - 1) % 2
#   Every neighbour of such a cell has the other color, so nothing read
#   during a sweep is written during that sweep. Workers that own
#   disjoint column ranges can therefore share one buffer without locks.
# ------------------------------------------------------------

from __future__ import annotations

from concurrent.futures import Executor
from typing import List, Optional, Tuple

import numpy as np

from .grid import Grid, idx

STRATEGIES = ("blocks", "auto")

# Chunks handed to each worker by the "auto" strategy
AUTO_CHUNKS_PER_WORKER = 4

ColumnRange = Tuple[int, int]


def stencil(data: np.ndarray, width: int, x: int, y: int, alpha: float) -> float:
    """
    Next value of interior cell (x, y).

    The cell itself takes part in the sum with the same weight as its
    four neighbours, so alpha = 0.2 is a plain 5-point average.
    """
    assert 1 <= x <= width - 2 and 1 <= y <= data.size // width - 2, "stencil outside interior"
    return alpha * (
        data[idx(x, y, width)]
        + data[idx(x - 1, y, width)]
        + data[idx(x + 1, y, width)]
        + data[idx(x, y - 1, width)]
        + data[idx(x, y + 1, width)]
    )


def partition_columns(start: int, stop: int, parts: int) -> List[ColumnRange]:
    """
    Split columns [start, stop) into `parts` contiguous, disjoint ranges.

    Every range has the same width except the last, which runs to `stop`
    and absorbs the remainder. When there are fewer columns than parts the
    leading ranges are empty.
    """
    if parts < 1:
        raise ValueError("Column partition needs at least one part.")
    if stop <= start:
        return []

    block = (stop - start) // parts
    ranges = []
    for p in range(parts):
        x0 = start + p * block
        x1 = stop if p == parts - 1 else x0 + block
        ranges.append((x0, x1))
    return ranges


def _column_ranges(width: int, workers: int, strategy: str) -> List[ColumnRange]:
    if strategy == "blocks":
        parts = workers
    elif strategy == "auto":
        parts = workers * AUTO_CHUNKS_PER_WORKER
    else:
        raise ValueError(f"Unknown partitioning strategy: {strategy!r}")
    return [r for r in partition_columns(1, width - 1, parts) if r[1] > r[0]]


def _sweep_columns(T: np.ndarray, x0: int, x1: int, offset: int, alpha: float) -> None:
    """Update one color inside columns [x0, x1) of the (H, W) view T."""
    height = T.shape[0]

    # Columns with (x + offset) even start at row 1, the others at row 2
    even_first = x0 + ((x0 + offset) % 2)
    odd_first = x0 + 1 - ((x0 + offset) % 2)

    for c0, r0 in ((even_first, 1), (odd_first, 2)):
        if c0 >= x1 or r0 >= height - 1:
            continue

        rows = slice(r0, height - 1, 2)
        cols = slice(c0, x1, 2)

        T[rows, cols] = alpha * (
            T[rows, cols]
            + T[rows, c0 - 1:x1 - 1:2]
            + T[rows, c0 + 1:x1 + 1:2]
            + T[r0 - 1:height - 2:2, cols]
            + T[r0 + 1:height:2, cols]
        )


def sweep(
    grid: Grid,
    offset: int,
    alpha: float,
    workers: int = 1,
    executor: Optional[Executor] = None,
    strategy: str = "blocks",
) -> None:
    """
    Apply the stencil in place to one color of the interior.

    Parameters
    ----------
    grid : Grid
        temperature grid, mutated in place
    offset : int
        0 or 1; alternate between calls so two sweeps cover the interior
    alpha : float
        stencil weight
    workers : int
        number of workers the columns are partitioned over
    executor : Executor, optional
        pool running the column ranges; ranges run inline when None
    strategy : str
        "blocks" (one contiguous range per worker) or "auto"
        (smaller chunks balanced by the pool)
    """
    if offset not in (0, 1):
        raise ValueError("Sweep offset must be 0 or 1.")
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown partitioning strategy: {strategy!r}")
    if grid.width < 3 or grid.height < 3:
        return

    T = grid.view()
    ranges = _column_ranges(grid.width, workers, strategy)

    if executor is None or len(ranges) <= 1:
        for x0, x1 in ranges:
            _sweep_columns(T, x0, x1, offset, alpha)
        return

    futures = [executor.submit(_sweep_columns, T, x0, x1, offset, alpha) for x0, x1 in ranges]
    # Barrier: the sweep ends only when every range is written
    for f in futures:
        f.result()


def sweep_reference(grid: Grid, offset: int, alpha: float) -> None:
    """Cell-by-cell version of `sweep`, kept as the readable definition."""
    width, height = grid.width, grid.height
    for x in range(1, width - 1):
        for y in range(1 + (x + offset) % 2, height - 1, 2):
            grid.data[idx(x, y, width)] = stencil(grid.data, width, x, y, alpha)
