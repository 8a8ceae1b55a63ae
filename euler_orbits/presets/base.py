"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List

from euler_orbits.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.

        Returns:
            Fresh list of bodies; the first two are the ones reported per step
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
