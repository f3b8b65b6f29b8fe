"""Visualization: matplotlib renders of simulation output."""

from contagion_grid.viz.render import render_grid, render_infection_curve

__all__ = ["render_grid", "render_infection_curve"]
