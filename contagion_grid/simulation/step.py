"""Single-tick state transition combining the movement and infection phases."""

from __future__ import annotations

import itertools
import logging
from random import Random

from contagion_grid.domain.grid import CellState, Grid, OutOfBoundsError
from contagion_grid.simulation.phases import infection_phase, movement_phase

logger = logging.getLogger(__name__)


def apply_tick(grid: Grid, rng: Random) -> Grid:
    """Advance *grid* by one tick and return the next grid.

    Both phases read the tick-start *grid*; proposals are written only into a
    clone once both have finished, so no phase sees a same-tick infection.
    The input grid is left untouched.
    """
    next_grid = grid.clone()
    moved = movement_phase(grid, rng)
    infected = infection_phase(grid, rng)

    for row, col in itertools.chain(moved, infected):
        try:
            next_grid.set(row, col, CellState.INFECTED)
        except OutOfBoundsError:
            logger.warning("Unable to update cell (%s, %s): outside grid", row, col)

    logger.debug("Tick proposals: %d from movement, %d from infection", len(moved), len(infected))
    return next_grid
