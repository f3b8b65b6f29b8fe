"""Simulation engine: proposal phases, tick driver, and run loop."""

from contagion_grid.simulation.engine import RunResult, run_model, run_simulation, seed_grid
from contagion_grid.simulation.phases import infection_phase, movement_phase
from contagion_grid.simulation.step import apply_tick

__all__ = [
    "RunResult",
    "apply_tick",
    "infection_phase",
    "movement_phase",
    "run_model",
    "run_simulation",
    "seed_grid",
]
