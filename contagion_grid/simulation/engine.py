"""Run loop: build and seed the initial grid, then apply ticks sequentially."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from random import Random

from contagion_grid.config.constants import DEFAULT_SEED_CELLS
from contagion_grid.config.types import ModelConfig
from contagion_grid.domain.grid import CellState, Grid, OutOfBoundsError
from contagion_grid.simulation.step import apply_tick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Final grid of one run plus its per-tick infected totals."""

    config: ModelConfig
    grid: Grid
    infected_counts: tuple[int, ...]
    """Infected cell count after seeding (index 0) and after each tick."""

    @property
    def initial_infected(self) -> int:
        return self.infected_counts[0]

    @property
    def final_infected(self) -> int:
        return self.infected_counts[-1]


def seed_grid(grid: Grid, seed_cells: Iterable[tuple[int, int]] = DEFAULT_SEED_CELLS) -> Grid:
    """Mark each seed coordinate infected; off-grid seeds are skipped."""
    applied = 0
    for row, col in seed_cells:
        try:
            grid.set(row, col, CellState.INFECTED)
        except OutOfBoundsError:
            logger.warning("Unable to seed cell (%s, %s): outside grid", row, col)
            continue
        applied += 1
    logger.debug("Seeded %d cells", applied)
    return grid


def run_simulation(config: ModelConfig, rng: Random | None = None) -> RunResult:
    """Seed a fresh grid and apply ``config.runs`` ticks in order.

    *rng* defaults to ``Random(config.sim_seed)``.
    """
    if rng is None:
        rng = Random(config.sim_seed)
    grid = seed_grid(Grid(config.height, config.width), config.seed_cells)
    counts = [grid.count(CellState.INFECTED)]
    for _ in range(config.runs):
        grid = apply_tick(grid, rng)
        counts.append(grid.count(CellState.INFECTED))
    logger.info(
        "Completed %d ticks on %dx%d grid: %d -> %d infected",
        config.runs,
        config.height,
        config.width,
        counts[0],
        counts[-1],
    )
    return RunResult(config=config, grid=grid, infected_counts=tuple(counts))


def run_model(
    runs: int,
    height: int,
    width: int,
    seed_cells: Iterable[tuple[int, int]] = DEFAULT_SEED_CELLS,
    rng: Random | None = None,
    sim_seed: int | None = None,
) -> Grid:
    """Run the model for *runs* ticks and return the final grid.

    Raises ``ValueError`` for non-positive dimensions or a negative run count
    before any tick executes.
    """
    config = ModelConfig(
        height=height,
        width=width,
        runs=runs,
        seed_cells=tuple(
            tuple(cell) if isinstance(cell, (list, tuple)) else cell for cell in seed_cells
        ),
        sim_seed=sim_seed,
    )
    return run_simulation(config, rng=rng).grid
