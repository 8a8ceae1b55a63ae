"""Main simulator controller."""

import math
import numbers
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Sequence

import numpy as np

from euler_orbits.physics.body import Body
from euler_orbits.physics.diagnostics import Diagnostics
from euler_orbits.physics.errors import InvalidConfigError
from euler_orbits.physics.integrators import Integrator, IntegrationMethod, get_integrator
from euler_orbits.physics.nbody import NBodySystem
from euler_orbits.utils.config import SimulationConfig


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class StepRecord(NamedTuple):
    """One output sample, emitted after each step."""
    elapsed: float
    body0_x: float
    body0_y: float
    body1_x: float
    body1_y: float
    distance: float


class SimulatorState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RUNNING = "running"
    DONE = "done"


class Simulator:
    """Main simulation controller.

    Advances a fixed set of bodies with a fixed time step and reports the
    first two bodies' positions and separation after every step.

    A simulator is single-use: once ``step_count`` steps have been taken it
    is DONE, and a new run needs a new instance.

    All arithmetic is float64 with no clamping. Apart from the coincident
    body check, non-finite values are not guarded against and propagate
    through later steps.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        on_record: Optional[Callable[[StepRecord], None]] = None,
    ):
        """Initialize simulator.

        Args:
            config: Time step, step count, G and method (default: reference run)
            on_record: Sink called with each StepRecord
        """
        self.config = config or SimulationConfig()
        self.on_record = on_record

        self.system: Optional[NBodySystem] = None
        self.integrator: Optional[Integrator] = None
        self.method: Optional[IntegrationMethod] = None
        self.dt = 0.0
        self.step_count = 0

        self.state = SimulatorState.UNINITIALIZED
        self.step_index = 0
        self.time = 0.0
        # Net forces from the most recent step; stale once that step is integrated
        self.forces: Optional[np.ndarray] = None

    def initialize(self, bodies: Sequence[Body]):
        """Validate configuration and load initial bodies.

        Args:
            bodies: Ordered initial bodies. Bodies 0 and 1 are the ones reported.

        Raises:
            InvalidConfigError: Fewer than two bodies, a non-positive mass,
                a non-positive or non-numeric time step, a negative or
                non-integral step count, a non-numeric G or an unknown method
        """
        if self.state is not SimulatorState.UNINITIALIZED:
            raise RuntimeError("Simulator already initialized; create a new instance to rerun")

        bodies = list(bodies)
        if len(bodies) < 2:
            raise InvalidConfigError(f"At least 2 bodies are required, got {len(bodies)}")
        for body in bodies:
            if not (math.isfinite(body.mass) and body.mass > 0.0):
                raise InvalidConfigError(f"Body {body.name!r} has non-positive mass {body.mass}")

        time_step = self.config.time_step
        if not _is_real(time_step) or not (math.isfinite(time_step) and time_step > 0.0):
            raise InvalidConfigError(f"time_step must be a positive number, got {time_step!r}")
        step_count = self.config.step_count
        if not _is_integer(step_count) or step_count < 0:
            raise InvalidConfigError(f"step_count must be a non-negative integer, got {step_count!r}")
        G = self.config.gravitational_constant
        if not _is_real(G) or not math.isfinite(G):
            raise InvalidConfigError(f"gravitational_constant must be a finite number, got {G!r}")
        dt = float(time_step)
        step_count = int(step_count)

        # Resolved once; never re-checked per step
        self.method = self.config.resolve_method()
        self.integrator = get_integrator(self.method)
        self.dt = dt
        self.step_count = step_count

        self.system = NBodySystem(G)
        self.system.initialize(bodies)

        self.step_index = 0
        self.time = 0.0
        self.state = SimulatorState.READY if step_count > 0 else SimulatorState.DONE

    def step(self) -> StepRecord:
        """Advance the simulation by one time step.

        Forces for every body are computed from the pre-step positions
        before any position or velocity is replaced.

        Returns:
            The StepRecord emitted for this step

        Raises:
            DegenerateStateError: Two bodies are coincident; nothing is mutated
            RuntimeError: Not initialized, or the run is already complete
        """
        if self.state is SimulatorState.UNINITIALIZED:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")
        if self.state is SimulatorState.DONE:
            raise RuntimeError(f"Simulation complete after {self.step_count} steps")

        forces = self.system.compute_forces()
        new_positions, new_velocities = self.integrator.step(
            self.system.positions,
            self.system.velocities,
            self.system.masses,
            forces,
            self.dt,
        )
        self.forces = forces
        self.system.set_state(new_positions, new_velocities)

        record = self._make_record(self.step_index * self.dt)

        self.step_index += 1
        self.time = self.step_index * self.dt
        self.state = SimulatorState.DONE if self.step_index >= self.step_count else SimulatorState.RUNNING

        if self.on_record:
            self.on_record(record)
        return record

    def _make_record(self, elapsed: float) -> StepRecord:
        p0 = self.system.positions[0]
        p1 = self.system.positions[1]
        r_diff = p0 - p1
        distance = np.sqrt(np.dot(r_diff, r_diff))
        return StepRecord(
            float(elapsed),
            float(p0[0]), float(p0[1]),
            float(p1[0]), float(p1[1]),
            float(distance),
        )

    def run(self) -> int:
        """Run all configured steps.

        Returns:
            Number of records emitted (always ``step_count``)
        """
        if self.state is SimulatorState.UNINITIALIZED:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")
        if self.state is not SimulatorState.READY and self.step_count > 0:
            raise RuntimeError("run() must start from a freshly initialized simulator")

        emitted = 0
        for _ in range(self.step_count):
            self.step()
            emitted += 1
        return emitted

    def get_bodies(self) -> List[Body]:
        """Snapshots of the current bodies, with the last computed forces."""
        return self.system.to_bodies(self.forces)

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_index)
        """
        pos, vel, mass = self.system.get_state()
        return pos, vel, mass, self.time, self.step_index

    def _diagnostics(self) -> Diagnostics:
        return Diagnostics(self.system.G)

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        return self._diagnostics().compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )[2]

    def get_kinetic_energy(self) -> float:
        return self._diagnostics().compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )[0]

    def get_potential_energy(self) -> float:
        return self._diagnostics().compute_energies(
            self.system.positions, self.system.velocities, self.system.masses
        )[1]

    def get_linear_momentum(self) -> np.ndarray:
        return self._diagnostics().compute_linear_momentum(self.system.velocities, self.system.masses)

    def get_angular_momentum(self) -> float:
        return self._diagnostics().compute_angular_momentum(
            self.system.positions, self.system.velocities, self.system.masses
        )
