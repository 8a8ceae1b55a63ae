"""Pairwise Newtonian gravity.

Forces are accumulated over all unordered pairs (i, j) with i < j, visited in
increasing lexical order. The order is fixed so that runs with more than two
bodies sum contributions identically every time.
"""

import numpy as np

from euler_orbits.physics.errors import DegenerateStateError


class ForceCalculator:
    """Direct O(n^2) gravitational force summation."""

    def compute_forces(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        """Compute the net gravitational force on every body.

        For each pair the force on i points toward j with magnitude
        G * m_i * m_j / r^2, and j receives the exact negation.

        Args:
            positions: Positions, shape (n, 2)
            masses: Masses, shape (n,)
            G: Gravitational constant

        Returns:
            New array of net forces, shape (n, 2)

        Raises:
            DegenerateStateError: If two bodies share a position
        """
        n = positions.shape[0]
        forces = np.zeros_like(positions, dtype=np.float64)

        for i in range(n):
            for j in range(i + 1, n):
                # Displacement from i to j
                r_diff = positions[j] - positions[i]
                distance_sq = np.dot(r_diff, r_diff)
                if distance_sq == 0.0:
                    raise DegenerateStateError(
                        f"Bodies {i} and {j} are coincident at {positions[i].tolist()}",
                        pair=(i, j),
                    )
                direction = r_diff * (1.0 / np.sqrt(distance_sq))
                magnitude = G * (masses[i] * masses[j]) / distance_sq

                pair_force = direction * magnitude
                forces[i] += pair_force
                forces[j] -= pair_force

        return forces
