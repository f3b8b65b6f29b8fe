"""Centralized model constants for the epidemic grid simulation.

All fixed model parameters live here. Consuming modules should import from
this module rather than defining their own inline literals.
"""

from __future__ import annotations

GRID_HEIGHT = 46
"""Default grid height in cells (rows)."""

GRID_WIDTH = 69
"""Default grid width in cells (columns)."""

DEFAULT_RUNS = 0
"""Default number of ticks applied after seeding."""

MOVE_PROBABILITY = 0.03
"""Per-direction probability that an infected cell leaks into a neighbor.

Approximates 0.25 * (1 / 8): a quarter of the population moves, split evenly
over the eight compass directions. Kept at 0.03 rather than 0.03125.
"""

INFECTION_THRESHOLD_RANGE = 25
"""Infection thresholds are drawn uniformly from ``range(INFECTION_THRESHOLD_RANGE)``."""

INFECTION_MAX_RADIUS = 10
"""Outermost ring radius contributing to the infection index."""

DEFAULT_SEED_CELLS: tuple[tuple[int, int], ...] = (
    (22, 41),
    (24, 58),
    (25, 42),
    (25, 43),
    (26, 40),
    (27, 63),
    (27, 67),
    (28, 33),
    (29, 60),
    (30, 41),
    (30, 52),
    (31, 29),
    (31, 54),
    (32, 44),
    (32, 52),
    (33, 53),
    (35, 37),
    (36, 34),
    (37, 35),
    (38, 27),
    (40, 30),
    (41, 29),
    (41, 30),
    (42, 32),
    (42, 33),
    (42, 35),
    (43, 25),
    (43, 27),
    (43, 31),
    (44, 26),
    (45, 23),
)
"""Initial outbreak cluster as ``(row, col)`` pairs on the default 46x69 grid."""

DEFAULT_OUTPUT = "data/modeloutput.csv"
"""Default export path for the final grid snapshot."""
