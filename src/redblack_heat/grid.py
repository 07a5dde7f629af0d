# ------------------------------------------------------------
# Temperature grid storage and Dirichlet boundary setup
# ------------------------------------------------------------
# Storage:
#   - flat row-major NumPy buffer of length W*H
#   - cell (x, y) lives at index y*W + x
#
# Boundary (fixed, never touched by the stencil):
#   - top row    (y = 0)   :  20.0
#   - bottom row (y = H-1) : -273.15
#   - left/right columns   : -273.15 (written last, so corners end here)
# ------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

T_TOP = 20.0
T_COLD = -273.15


class GridAllocationError(MemoryError):
    """Raised when the temperature buffers cannot be allocated."""

    def __init__(self, width: int, height: int, reason: str = "") -> None:
        self.width = width
        self.height = height
        msg = f"Unable to allocate a {width}x{height} temperature grid"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


def idx(x: int, y: int, width: int) -> int:
    """
    Flatten 2D indexing (x, y) into a 1D array index.

    Parameters
    ----------
    x : int
        column index
    y : int
        row index
    width : int
        number of columns

    Returns
    -------
    int
        flattened index into a 1D array of length width*height
    """
    return y * width + x


@dataclass
class Grid:
    width: int
    height: int
    data: np.ndarray

    def view(self) -> np.ndarray:
        """(height, width) view of the flat buffer; view[y, x] == data[idx(x, y, width)]."""
        return self.data.reshape(self.height, self.width)

    def at(self, x: int, y: int) -> float:
        return float(self.data[idx(x, y, self.width)])

    def copy_from(self, other: "Grid") -> None:
        """Full snapshot copy of another grid of identical size."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError("Grid copy error: sizes do not match.")
        np.copyto(self.data, other.data)


def allocate_grid(width: int, height: int, dtype=np.float64) -> Grid:
    """Allocate a zero-filled grid, failing loudly if the buffer cannot be created."""
    if width <= 0 or height <= 0:
        raise ValueError("Grid sizes must be positive integers.")
    try:
        data = np.zeros(width * height, dtype=dtype)
    except MemoryError as exc:
        raise GridAllocationError(width, height) from exc
    except (ValueError, OverflowError) as exc:
        # numpy rejects sizes that can never fit ("array is too big")
        raise GridAllocationError(width, height, str(exc)) from exc
    return Grid(width=width, height=height, data=data)


def write_borders(grid: Grid) -> None:
    """Stamp the fixed edge temperatures: rows first, then columns."""
    T = grid.view()

    T[0, :] = T_TOP
    T[grid.height - 1, :] = T_COLD

    T[:, 0] = T_COLD
    T[:, grid.width - 1] = T_COLD


def initialize(grid: Grid) -> None:
    """Zero every cell, then apply the boundary values."""
    grid.data.fill(0.0)
    write_borders(grid)
