"""Configuration dataclasses for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass

from contagion_grid.config.constants import (
    DEFAULT_RUNS,
    DEFAULT_SEED_CELLS,
    GRID_HEIGHT,
    GRID_WIDTH,
)

__all__ = ["ModelConfig", "validate_dimensions"]


def validate_dimensions(height: int, width: int) -> None:
    """Raise ``ValueError`` unless both grid dimensions are positive integers."""
    for name, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"{name} must be >= 1")


@dataclass(frozen=True)
class ModelConfig:
    """Structural parameters of one simulation run.

    Seed cells that fall outside the grid are accepted here; the seeder skips
    them at run time.
    """

    height: int = GRID_HEIGHT
    width: int = GRID_WIDTH
    runs: int = DEFAULT_RUNS
    seed_cells: tuple[tuple[int, int], ...] = DEFAULT_SEED_CELLS
    sim_seed: int | None = None

    def __post_init__(self) -> None:
        validate_dimensions(self.height, self.width)
        if isinstance(self.runs, bool) or not isinstance(self.runs, int):
            raise ValueError(f"runs must be an integer, got {self.runs!r}")
        if self.runs < 0:
            raise ValueError("runs must be >= 0")
        if not isinstance(self.seed_cells, tuple):
            raise ValueError("seed_cells must be a tuple of (row, col) pairs")
        for cell in self.seed_cells:
            if not isinstance(cell, tuple) or len(cell) != 2 or not all(
                isinstance(v, int) and not isinstance(v, bool) for v in cell
            ):
                raise ValueError(f"seed cells must be (row, col) integer pairs, got {cell!r}")
        if self.sim_seed is not None and (
            isinstance(self.sim_seed, bool) or not isinstance(self.sim_seed, int)
        ):
            raise ValueError("sim_seed must be an integer or None")
