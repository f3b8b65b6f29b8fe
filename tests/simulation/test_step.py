"""Tests for contagion_grid.simulation.step module."""

from __future__ import annotations

import logging
from random import Random

import pytest

from contagion_grid.domain.grid import CellState, Grid
from contagion_grid.simulation import step as step_module
from contagion_grid.simulation.step import apply_tick


def _grid_with(height: int, width: int, cells: list[tuple[int, int]]) -> Grid:
    grid = Grid(height, width)
    for row, col in cells:
        grid.set(row, col, CellState.INFECTED)
    return grid


def test_deterministic_under_identical_draws() -> None:
    first = _grid_with(8, 9, [(4, 4), (0, 8)])
    second = first.clone()
    assert apply_tick(first, Random(7)) == apply_tick(second, Random(7))


def test_deterministic_under_scripted_draws(scripted_rng) -> None:
    grid = _grid_with(5, 5, [(2, 2)])
    draws = [0.0, 0.5, 0.01, 0.9, 0.9, 0.0, 0.9, 0.02]
    thresholds = [3, 0, 24, 1] * 6
    a = apply_tick(grid, scripted_rng(uniforms=draws, thresholds=thresholds))
    b = apply_tick(grid.clone(), scripted_rng(uniforms=draws, thresholds=thresholds))
    assert a == b


def test_infection_is_never_reverted() -> None:
    rng = Random(11)
    grid = _grid_with(7, 7, [(3, 3), (0, 0)])
    for _ in range(5):
        before = set(grid.infected_cells())
        grid = apply_tick(grid, rng)
        assert before <= set(grid.infected_cells())


def test_input_grid_is_not_mutated(scripted_rng) -> None:
    grid = _grid_with(3, 3, [(1, 1)])
    before = grid.clone()
    result = apply_tick(grid, scripted_rng(uniform_default=0.0, threshold_default=0))
    assert grid == before
    assert result.count(CellState.INFECTED) == 9


def test_phases_only_see_tick_start_state(scripted_rng) -> None:
    # Movement infects (0, 1) this tick. Had the infection phase seen that
    # write, (0, 2) would have index 1.5 and beat its threshold of 1.
    grid = _grid_with(1, 3, [(0, 0)])
    rng = scripted_rng(uniforms=[0.99, 0.99, 0.0], thresholds=[24, 1])
    result = apply_tick(grid, rng)
    assert result.infected_cells() == [(0, 0), (0, 1)]


def test_same_cell_from_both_phases_is_infected_once(scripted_rng) -> None:
    grid = _grid_with(1, 3, [(0, 0)])
    rng = scripted_rng(uniforms=[0.99, 0.99, 0.0], thresholds=[1, 24])
    result = apply_tick(grid, rng)
    assert result.get(0, 1) == CellState.INFECTED
    assert result.count(CellState.INFECTED) == 2


def test_out_of_bounds_merge_write_is_skipped(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(step_module, "movement_phase", lambda grid, rng: [(-1, 0), (9, 9)])
    monkeypatch.setattr(step_module, "infection_phase", lambda grid, rng: [(1, 1)])
    grid = Grid(2, 2)
    with caplog.at_level(logging.WARNING, logger="contagion_grid.simulation.step"):
        result = apply_tick(grid, Random(0))
    assert result.infected_cells() == [(1, 1)]
    assert sum("Unable to update cell" in r.getMessage() for r in caplog.records) == 2


def test_fully_infected_boundary_completes() -> None:
    grid = Grid(4, 6)
    for col in range(6):
        grid.set(0, col, CellState.INFECTED)
        grid.set(3, col, CellState.INFECTED)
    for row in range(4):
        grid.set(row, 0, CellState.INFECTED)
        grid.set(row, 5, CellState.INFECTED)
    result = apply_tick(grid, Random(5))
    assert result.shape == (4, 6)
    assert set(grid.infected_cells()) <= set(result.infected_cells())
