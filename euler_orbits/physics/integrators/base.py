"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

import numpy as np

from euler_orbits.physics.errors import InvalidConfigError


class IntegrationMethod(Enum):
    """Supported Euler variants."""
    NAIVE = "naive"
    SYMPLECTIC = "symplectic"

    @classmethod
    def from_token(cls, token) -> "IntegrationMethod":
        """Resolve a method token such as ``"naive"`` or ``"symplectic"``.

        Raises:
            InvalidConfigError: If the token is missing or unrecognized
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            for method in cls:
                if method.value == token:
                    return method
        choices = ", ".join(method.value for method in cls)
        raise InvalidConfigError(f"Unknown integration method {token!r}. Choose one of: {choices}")


class Integrator(ABC):
    """Abstract interface for numerical integrators."""

    @abstractmethod
    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        masses: np.ndarray,
        forces: np.ndarray,
        dt: float,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.

        Inputs are never modified in place.

        Args:
            positions: Current positions (n, 2)
            velocities: Current velocities (n, 2)
            masses: Masses (n,)
            forces: Net forces computed from ``positions`` (n, 2)
            dt: Time step

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass

    @staticmethod
    def accelerations(forces: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """a = F / m, row by row."""
        return forces / masses[:, np.newaxis]
