"""Distance-weighted infection pressure over extended Moore neighborhoods."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from contagion_grid.domain.grid import CellState, Grid
from contagion_grid.domain.neighborhood import Offset, moore_offsets, ring

logger = logging.getLogger(__name__)


def _count_infected(grid: Grid, row: int, col: int, offsets: Iterable[Offset]) -> int:
    """Count infected cells at ``(row, col) + offset``; off-grid cells count zero."""
    infected, skipped = grid.count_around(row, col, offsets, CellState.INFECTED)
    if skipped:
        logger.debug("Skipped %d off-grid neighbors of (%s, %s)", skipped, row, col)
    return infected


def count_infected_in_ring(grid: Grid, row: int, col: int, radius: int) -> int:
    """Number of infected cells at Chebyshev distance exactly *radius*."""
    return _count_infected(grid, row, col, ring(radius))


def count_infected_within(grid: Grid, row: int, col: int, radius: int) -> int:
    """Number of infected cells within Chebyshev distance *radius* (origin excluded)."""
    return _count_infected(grid, row, col, moore_offsets(radius))


def infection_index(grid: Grid, row: int, col: int, max_radius: int) -> float:
    """Distance-decayed infection pressure on ``(row, col)``.

    Sums, for ``r = 1..max_radius``, the infected cells first reached at
    radius ``r`` divided by ``r``. Each infected cell is counted once, at its
    own Chebyshev distance, so closer cells weigh more.
    """
    if max_radius < 1:
        raise ValueError("max_radius must be >= 1")
    index = 0.0
    for radius in range(1, max_radius + 1):
        new_infected = count_infected_in_ring(grid, row, col, radius)
        if new_infected:
            index += new_infected / radius
    return index
