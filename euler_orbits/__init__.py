"""
Euler Orbits - naive vs symplectic Euler on the Earth-Moon orbit.

Features:
- Pairwise Newtonian gravity for any number of point bodies in 2D
- Explicit and semi-implicit (symplectic) Euler integrators
- Tab-separated per-step records through an injected sink
- Energy and momentum diagnostics
- Matplotlib trajectory and distance plots
- CLI interface
"""

__version__ = "0.1.0"

from euler_orbits.physics.body import Body
from euler_orbits.physics.errors import DegenerateStateError, InvalidConfigError, SimulationError
from euler_orbits.physics.integrators import IntegrationMethod
from euler_orbits.physics.simulator import Simulator, StepRecord
from euler_orbits.utils.config import SimulationConfig

__all__ = [
    "Body",
    "Simulator",
    "StepRecord",
    "SimulationConfig",
    "IntegrationMethod",
    "SimulationError",
    "InvalidConfigError",
    "DegenerateStateError",
]
