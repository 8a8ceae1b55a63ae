"""Body state container for the orbit simulator."""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from euler_orbits.physics.body import Body
from euler_orbits.physics.force_calculator import ForceCalculator


class NBodySystem:
    """Gravitational system of point bodies.

    Holds names, masses and the (n, 2) position/velocity arrays that the
    integrators work on.
    """

    def __init__(self, G: float, force_calculator: Optional[ForceCalculator] = None):
        """Initialize N-body system.

        Args:
            G: Gravitational constant
            force_calculator: Force summation strategy (default: direct pairwise)
        """
        self.G = float(G)
        self.force_calculator = force_calculator or ForceCalculator()
        self.names: List[str] = []
        self.positions = None
        self.velocities = None
        self.masses = None
        self.n_bodies = 0

    def initialize(self, bodies: Sequence[Body]):
        """Copy body state into arrays. The caller's bodies are not referenced afterwards."""
        self.names = [body.name for body in bodies]
        self.positions = np.array([body.position for body in bodies], dtype=np.float64)
        self.velocities = np.array([body.velocity for body in bodies], dtype=np.float64)
        self.masses = np.array([body.mass for body in bodies], dtype=np.float64)
        self.n_bodies = len(self.names)

    def compute_forces(self) -> np.ndarray:
        """Compute net gravitational forces from the current positions.

        Returns:
            Forces array (n, 2)
        """
        return self.force_calculator.compute_forces(self.positions, self.masses, self.G)

    def get_state(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Get copies of (positions, velocities, masses)."""
        return self.positions.copy(), self.velocities.copy(), self.masses.copy()

    def set_state(self, positions, velocities):
        """Replace positions and velocities. Masses never change."""
        self.positions = np.asarray(positions, dtype=np.float64)
        self.velocities = np.asarray(velocities, dtype=np.float64)

    def to_bodies(self, forces: Optional[np.ndarray] = None) -> List[Body]:
        """Build Body snapshots of the current state."""
        bodies = []
        for i, name in enumerate(self.names):
            bodies.append(Body(
                name=name,
                mass=self.masses[i],
                position=self.positions[i].copy(),
                velocity=self.velocities[i].copy(),
                force=forces[i].copy() if forces is not None else None,
            ))
        return bodies
