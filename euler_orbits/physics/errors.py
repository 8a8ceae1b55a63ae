"""Exceptions raised by the orbit simulator."""

from typing import Optional, Tuple


class SimulationError(Exception):
    """Base class for simulation failures."""


class InvalidConfigError(SimulationError, ValueError):
    """Raised when bodies or configuration are rejected at initialization."""


class DegenerateStateError(SimulationError, ArithmeticError):
    """Raised when two bodies occupy the same position during force computation.

    The direction of the force between coincident bodies is undefined, so the
    step is abandoned before any state is mutated.
    """

    def __init__(self, message: str, pair: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.pair = pair
