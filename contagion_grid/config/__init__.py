"""Configuration layer: model constants and typed config dataclasses."""

from contagion_grid.config.constants import (
    DEFAULT_OUTPUT,
    DEFAULT_RUNS,
    DEFAULT_SEED_CELLS,
    GRID_HEIGHT,
    GRID_WIDTH,
    INFECTION_MAX_RADIUS,
    INFECTION_THRESHOLD_RANGE,
    MOVE_PROBABILITY,
)
from contagion_grid.config.types import ModelConfig, validate_dimensions

__all__ = [
    "DEFAULT_OUTPUT",
    "DEFAULT_RUNS",
    "DEFAULT_SEED_CELLS",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "INFECTION_MAX_RADIUS",
    "INFECTION_THRESHOLD_RANGE",
    "MOVE_PROBABILITY",
    "ModelConfig",
    "validate_dimensions",
]
