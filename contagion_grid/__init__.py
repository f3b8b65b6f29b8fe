"""Stochastic cellular-automaton model of epidemic spread on a 2-D grid."""

from contagion_grid.domain.grid import CellRecord, CellState, Grid, OutOfBoundsError
from contagion_grid.simulation.engine import RunResult, run_model, run_simulation, seed_grid
from contagion_grid.simulation.step import apply_tick

__all__ = [
    "CellRecord",
    "CellState",
    "Grid",
    "OutOfBoundsError",
    "RunResult",
    "apply_tick",
    "run_model",
    "run_simulation",
    "seed_grid",
]
