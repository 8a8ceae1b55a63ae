"""Point-mass body model."""

from dataclasses import dataclass, field

import numpy as np


def _vector(value=None) -> np.ndarray:
    if value is None:
        return np.zeros(2, dtype=np.float64)
    return np.array(value, dtype=np.float64).reshape(2)


@dataclass
class Body:
    """A massive point body moving in the plane.

    Attributes:
        name: Label used in output only
        mass: Mass in kilograms (must be strictly positive)
        position: Position vector in meters, shape (2,)
        velocity: Velocity vector in m/s, shape (2,)
        force: Net force in newtons from the last force computation. Only
            meaningful between force computation and integration of a step.
    """
    name: str
    mass: float
    position: np.ndarray = field(default_factory=_vector)
    velocity: np.ndarray = field(default_factory=_vector)
    force: np.ndarray = field(default_factory=_vector)

    def __post_init__(self):
        self.mass = float(self.mass)
        self.position = _vector(self.position)
        self.velocity = _vector(self.velocity)
        self.force = _vector(self.force)

    def copy(self) -> "Body":
        return Body(
            name=self.name,
            mass=self.mass,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            force=self.force.copy(),
        )
