"""Domain layer: grid model, neighborhoods, and infection pressure."""

from contagion_grid.domain.grid import CellRecord, CellState, Grid, OutOfBoundsError
from contagion_grid.domain.infection import (
    count_infected_in_ring,
    count_infected_within,
    infection_index,
)
from contagion_grid.domain.neighborhood import (
    Direction,
    InvalidDirectionError,
    moore_offsets,
    neighbor_coords,
    ring,
)

__all__ = [
    "CellRecord",
    "CellState",
    "Direction",
    "Grid",
    "InvalidDirectionError",
    "OutOfBoundsError",
    "count_infected_in_ring",
    "count_infected_within",
    "infection_index",
    "moore_offsets",
    "neighbor_coords",
    "ring",
]
