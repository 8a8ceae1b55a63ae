"""Explicit (naive) Euler integrator."""

from typing import Tuple

import numpy as np

from euler_orbits.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Explicit Euler method.

    Position advances with the velocity from the start of the step, so the
    position and velocity updates are decoupled. On orbits this pumps energy
    into the system every step and the bodies spiral apart.
    """

    @property
    def name(self) -> str:
        return "naive"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Euler step: v_new = v + a*dt, r_new = r + v*dt."""
        accelerations = self.accelerations(forces, masses)

        new_velocities = velocities + accelerations * dt

        # Old velocity
        new_positions = positions + velocities * dt

        return new_positions, new_velocities
