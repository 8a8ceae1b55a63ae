"""Physics engine for the orbit simulator."""

from euler_orbits.physics.body import Body
from euler_orbits.physics.errors import DegenerateStateError, InvalidConfigError, SimulationError
from euler_orbits.physics.nbody import NBodySystem
from euler_orbits.physics.simulator import Simulator, SimulatorState, StepRecord

__all__ = [
    "Body",
    "NBodySystem",
    "Simulator",
    "SimulatorState",
    "StepRecord",
    "SimulationError",
    "InvalidConfigError",
    "DegenerateStateError",
]
