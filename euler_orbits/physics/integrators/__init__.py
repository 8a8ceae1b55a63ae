"""Numerical integrators for the orbit simulator."""

from euler_orbits.physics.integrators.base import Integrator, IntegrationMethod
from euler_orbits.physics.integrators.euler import EulerIntegrator
from euler_orbits.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

_INTEGRATORS = {
    IntegrationMethod.NAIVE: EulerIntegrator,
    IntegrationMethod.SYMPLECTIC: SymplecticEulerIntegrator,
}


def get_integrator(method) -> Integrator:
    """Get an integrator instance for a method token or IntegrationMethod."""
    return _INTEGRATORS[IntegrationMethod.from_token(method)]()


__all__ = [
    "Integrator",
    "IntegrationMethod",
    "EulerIntegrator",
    "SymplecticEulerIntegrator",
    "get_integrator",
]
