"""Per-tick proposal phases: population movement and infection pressure.

Both phases only read the grid they are given and return the coordinates
they would infect. Neither writes to the grid.
"""

from __future__ import annotations

import logging
from random import Random

from contagion_grid.config.constants import (
    INFECTION_MAX_RADIUS,
    INFECTION_THRESHOLD_RANGE,
    MOVE_PROBABILITY,
)
from contagion_grid.domain.grid import CellState, Grid, OutOfBoundsError
from contagion_grid.domain.infection import infection_index
from contagion_grid.domain.neighborhood import Direction, neighbor_coords

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


def movement_phase(
    grid: Grid, rng: Random, move_probability: float = MOVE_PROBABILITY
) -> list[Coord]:
    """Propose neighbors reached by infected population moving out of its cell.

    Every infected cell draws once per compass direction; a draw below
    *move_probability* proposes that neighbor unless it is off-grid or already
    infected. The result may contain duplicates.
    """
    proposals: list[Coord] = []
    for row, col in grid.infected_cells():
        for direction in Direction:
            if rng.random() >= move_probability:
                continue
            target = neighbor_coords(direction, row, col)
            try:
                if grid.get(*target) != CellState.INFECTED:
                    proposals.append(target)
            except OutOfBoundsError:
                logger.debug(
                    "Unable to infect (%s, %s) neighbor %s: outside grid",
                    row,
                    col,
                    direction.name,
                )
    return proposals


def infection_phase(
    grid: Grid,
    rng: Random,
    max_radius: int = INFECTION_MAX_RADIUS,
    threshold_range: int = INFECTION_THRESHOLD_RANGE,
) -> list[Coord]:
    """Propose susceptible cells whose infection index reaches a random threshold.

    Each susceptible cell draws its own integer threshold from
    ``range(threshold_range)``; a threshold of zero infects even with no
    infected neighbors.
    """
    proposals: list[Coord] = []
    for row in range(grid.height):
        for col in range(grid.width):
            if grid.get(row, col) == CellState.INFECTED:
                continue
            index = infection_index(grid, row, col, max_radius)
            threshold = rng.randrange(threshold_range)
            if index >= threshold:
                proposals.append((row, col))
    return proposals
