"""Steady-state 2D heat diffusion with a red/black (checkerboard) relaxation."""

from .config import SimulationConfig, resolve_workers
from .convergence import compute_delta
from .grid import Grid, GridAllocationError, allocate_grid, idx, initialize, write_borders
from .simulation import SimulationResult, SimulationState, run_simulation
from .stencil import partition_columns, stencil, sweep, sweep_reference

__all__ = [
    "Grid",
    "GridAllocationError",
    "SimulationConfig",
    "SimulationResult",
    "SimulationState",
    "allocate_grid",
    "compute_delta",
    "idx",
    "initialize",
    "partition_columns",
    "resolve_workers",
    "run_simulation",
    "stencil",
    "sweep",
    "sweep_reference",
    "write_borders",
]
