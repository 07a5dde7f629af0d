"""Tests for the convergence monitor."""

import numpy as np
import pytest

from redblack_heat import allocate_grid, compute_delta, sweep


def test_identical_grids_have_zero_delta(make_grid) -> None:
    a = make_grid(6, 5)
    b = make_grid(6, 5)
    assert compute_delta(a, b) == 0.0


def test_delta_averages_over_whole_grid(make_grid) -> None:
    previous = make_grid(4, 4)
    current = make_grid(4, 4)
    current.view()[1, 1] = 8.0
    current.view()[2, 2] = -8.0
    assert compute_delta(current, previous) == pytest.approx(16.0 / 16)


def test_delta_after_first_sweep_on_four_by_four(make_grid) -> None:
    previous = make_grid(4, 4)
    current = make_grid(4, 4)
    sweep(current, 0, 0.2)
    assert compute_delta(current, previous) == pytest.approx((109.26 + 50.63) / 16)


@pytest.mark.parametrize("workers", [2, 3, 4, 50])
def test_partial_sums_match_single_worker(make_grid, pool, workers) -> None:
    previous = make_grid(23, 11, seed=1)
    current = make_grid(23, 11, seed=2)

    serial = compute_delta(current, previous)
    parallel = compute_delta(current, previous, workers=workers, executor=pool)

    assert parallel >= 0.0
    assert parallel == pytest.approx(serial, rel=1e-12)


def test_delta_rejects_mismatched_grids() -> None:
    with pytest.raises(ValueError):
        compute_delta(allocate_grid(3, 4), allocate_grid(4, 3))


def test_delta_is_python_float(make_grid) -> None:
    value = compute_delta(make_grid(3, 3), make_grid(3, 3))
    assert isinstance(value, float)
    assert not isinstance(value, np.ndarray)
