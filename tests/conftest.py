"""Shared fixtures for the heat diffusion tests."""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from redblack_heat import allocate_grid, initialize


@pytest.fixture
def pool():
    """Four-thread pool for the partitioned sweep and reduction."""
    with ThreadPoolExecutor(max_workers=4) as executor:
        yield executor


@pytest.fixture
def make_grid():
    """Boundary-initialized grid, optionally with a random interior."""

    def _make(width, height, seed=None):
        grid = allocate_grid(width, height)
        initialize(grid)
        if seed is not None and width > 2 and height > 2:
            rng = np.random.default_rng(seed)
            grid.view()[1:-1, 1:-1] = rng.uniform(-100.0, 100.0, size=(height - 2, width - 2))
        return grid

    return _make
