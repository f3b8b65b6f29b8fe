"""Matplotlib renderers for the final grid and the infection curve."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from contagion_grid.domain.grid import CellState, Grid

STATE_COLORS: dict[CellState, str] = {
    CellState.SUSCEPTIBLE: "#e8eef4",
    CellState.INFECTED: "#c0392b",
}
GRID_LINE_COLOR = "#ffffff"


def _state_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete two-colour colormap indexed by state code."""
    cmap = ListedColormap([STATE_COLORS[state] for state in CellState])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _build_state_legend_handles() -> list[Patch]:
    return [
        Patch(facecolor=STATE_COLORS[state], edgecolor="gray", label=state.name.title())
        for state in CellState
    ]


def _draw_cell_grid(ax: plt.Axes, cells: np.ndarray, grid_lines: bool) -> None:
    cmap, norm = _state_cmap()
    ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    if grid_lines:
        h, w = cells.shape
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.3)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.3)
    ax.set_xticks([])
    ax.set_yticks([])


def render_grid(
    grid: Grid,
    output_path: Path,
    title: str | None = None,
    grid_lines: bool = True,
) -> Path:
    """Save a PNG of *grid* with susceptible and infected cells coloured."""
    fig, ax = plt.subplots(figsize=(max(4.0, grid.width / 8), max(3.0, grid.height / 8)))
    _draw_cell_grid(ax, grid.to_array(), grid_lines)
    infected = grid.count(CellState.INFECTED)
    ax.set_title(title or f"Infected {infected} / {grid.height * grid.width}")
    ax.legend(
        handles=_build_state_legend_handles(),
        loc="upper left",
        bbox_to_anchor=(1.01, 1.0),
        frameon=False,
    )
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path


def render_infection_curve(
    infected_counts: Sequence[int],
    output_path: Path,
    total_cells: int | None = None,
) -> Path:
    """Plot infected cells per tick; with *total_cells*, plot the infected fraction."""
    if not infected_counts:
        raise ValueError("infected_counts must not be empty")
    values = np.asarray(infected_counts, dtype=float)
    ylabel = "Infected cells"
    if total_cells:
        values = values / total_cells
        ylabel = "Infected fraction"

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(np.arange(len(values)), values, color=STATE_COLORS[CellState.INFECTED], linewidth=1.8)
    ax.set_xlabel("Tick")
    ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
