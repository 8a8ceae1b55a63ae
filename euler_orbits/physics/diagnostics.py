"""Conserved-quantity diagnostics for point-mass systems."""

from typing import Tuple

import numpy as np


class Diagnostics:
    """Energy and momentum of an unsoftened Newtonian system.

    These are read-only measurements; the simulation loop never calls them.
    """

    def __init__(self, G: float):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant (must match the force law)
        """
        self.G = G

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        U = -G * Σ_{i<j} m_i * m_j / r_ij

        Args:
            positions: Positions (n, 2)
            velocities: Velocities (n, 2)
            masses: Masses (n,)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64)
        n = len(masses)

        # Kinetic energy: K = 0.5 * Σ m_i * v_i^2
        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)

        U = 0.0
        for i in range(n):
            for j in range(i + 1, n):
                r = np.linalg.norm(positions[j] - positions[i])
                U -= self.G * masses[i] * masses[j] / r

        return float(K), float(U), float(K + U)

    def compute_linear_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum Σ m_i v_i, shape (2,)."""
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64)
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def compute_angular_momentum(self, positions, velocities, masses) -> float:
        """Total angular momentum L_z about the origin."""
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64)
        L_z = np.sum(masses * (positions[:, 0] * velocities[:, 1] -
                               positions[:, 1] * velocities[:, 0]))
        return float(L_z)

    def compute_center_of_mass(self, positions, velocities, masses) -> Tuple[np.ndarray, np.ndarray]:
        """Barycenter position and velocity."""
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64)
        total_mass = np.sum(masses)
        com = np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
        com_v = np.sum(masses[:, np.newaxis] * velocities, axis=0) / total_mass
        return com, com_v
