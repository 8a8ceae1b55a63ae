"""Static matplotlib charts of simulated orbits."""

from typing import Dict, Sequence, Tuple

import numpy as np
from matplotlib.figure import Figure

from euler_orbits.physics.simulator import StepRecord

SECONDS_PER_DAY = 86400.0


def _columns(records: Sequence[StepRecord]) -> np.ndarray:
    """Records as an (n, 6) array, columns in StepRecord field order."""
    return np.array(records, dtype=np.float64).reshape(-1, len(StepRecord._fields))


def plot_trajectories(
    records: Sequence[StepRecord],
    output_path: str,
    title: str = "Trajectories",
    labels: Tuple[str, str] = ("Body 0", "Body 1"),
    figsize: Tuple[int, int] = (8, 8),
    dpi: int = 100,
) -> Figure:
    """Draw the paths of bodies 0 and 1 and save the figure.

    Args:
        records: Step records from one run
        output_path: Image path (format taken from the suffix)
        title: Figure title
        labels: Legend labels for bodies 0 and 1

    Returns:
        The saved figure
    """
    data = _columns(records)
    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.subplots()
    ax.set_aspect('equal')
    ax.plot(data[:, 1], data[:, 2], label=labels[0], linewidth=1.0)
    ax.plot(data[:, 3], data[:, 4], label=labels[1], linewidth=0.5)
    ax.set_xlabel('x (m)')
    ax.set_ylabel('y (m)')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.savefig(output_path)
    return fig


def plot_distances(
    runs: Dict[str, Sequence[StepRecord]],
    output_path: str,
    title: str = "Distance between bodies",
    figsize: Tuple[int, int] = (10, 5),
    dpi: int = 100,
) -> Figure:
    """Overlay body 0-1 distance against elapsed days for several runs.

    Args:
        runs: Records keyed by legend label, e.g. ``{"naive": ..., "symplectic": ...}``
        output_path: Image path

    Returns:
        The saved figure
    """
    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.subplots()
    for label, records in runs.items():
        data = _columns(records)
        ax.plot(data[:, 0] / SECONDS_PER_DAY, data[:, 5], label=label)
    ax.set_xlabel('time (days)')
    ax.set_ylabel('distance (m)')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.savefig(output_path)
    return fig
