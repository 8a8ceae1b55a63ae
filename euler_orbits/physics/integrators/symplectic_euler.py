"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple

import numpy as np

from euler_orbits.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Semi-implicit Euler method.

    Same cost and order as explicit Euler, but the position update uses the
    velocity that was just computed. The map is symplectic, so orbital
    energy oscillates around its initial value instead of drifting.
    """

    @property
    def name(self) -> str:
        return "symplectic"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Symplectic Euler step: v_new = v + a*dt, r_new = r + v_new*dt."""
        accelerations = self.accelerations(forces, masses)

        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt

        return new_positions, new_velocities
