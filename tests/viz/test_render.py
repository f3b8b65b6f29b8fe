"""Tests for contagion_grid.viz.render module."""

from __future__ import annotations

import importlib
from pathlib import Path
from unittest.mock import patch

import matplotlib
import pytest

matplotlib.use("Agg")

from contagion_grid.domain.grid import CellState, Grid  # noqa: E402
from contagion_grid.viz import render  # noqa: E402
from contagion_grid.viz.render import render_grid, render_infection_curve  # noqa: E402

PNG_MAGIC = b"\x89PNG"


def test_render_grid_writes_png(tmp_path: Path) -> None:
    grid = Grid(6, 9)
    grid.set(3, 4, CellState.INFECTED)
    out = render_grid(grid, tmp_path / "plots" / "grid.png")
    assert out.exists()
    assert out.read_bytes()[:4] == PNG_MAGIC


def test_render_grid_without_lines(tmp_path: Path) -> None:
    out = render_grid(Grid(3, 3), tmp_path / "grid.png", title="Empty", grid_lines=False)
    assert out.stat().st_size > 0


def test_render_infection_curve(tmp_path: Path) -> None:
    out = render_infection_curve([1, 3, 7, 12], tmp_path / "curve.png", total_cells=64)
    assert out.read_bytes()[:4] == PNG_MAGIC


def test_render_infection_curve_rejects_empty(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        render_infection_curve([], tmp_path / "curve.png")


def test_import_leaves_backend_unchanged() -> None:
    with patch("matplotlib.use") as mock_use:
        importlib.reload(render)
    mock_use.assert_not_called()
