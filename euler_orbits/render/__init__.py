"""Plotting of simulation output."""

from euler_orbits.render.plots import plot_trajectories, plot_distances

__all__ = ["plot_trajectories", "plot_distances"]
