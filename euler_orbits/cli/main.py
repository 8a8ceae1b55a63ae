"""CLI main entry point."""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from euler_orbits.io.record_writer import RecordWriter
from euler_orbits.io.state_io import save_state
from euler_orbits.physics.diagnostics import Diagnostics
from euler_orbits.physics.errors import DegenerateStateError, InvalidConfigError
from euler_orbits.physics.integrators import IntegrationMethod
from euler_orbits.physics.simulator import Simulator, StepRecord
from euler_orbits.presets import PRESETS, get_preset
from euler_orbits.utils.config import SimulationConfig, load_config


def report(message: str = ""):
    """Status output goes to stderr; stdout carries only records."""
    print(message, file=sys.stderr)


def build_config(args) -> SimulationConfig:
    """Config file (if any) overridden by command-line values."""
    config = load_config(args.config) if args.config else SimulationConfig()
    overrides = {'method': args.method}
    if args.preset is not None:
        overrides['preset'] = args.preset
    if args.dt is not None:
        overrides['time_step'] = args.dt
    if args.steps is not None:
        overrides['step_count'] = args.steps
    if args.G is not None:
        overrides['gravitational_constant'] = args.G
    return replace(config, **overrides)


def print_summary(label: str, sim: Simulator):
    diagnostics = Diagnostics(sim.system.G)
    pos, vel, mass, elapsed, steps = sim.get_state()
    K, U, E = diagnostics.compute_energies(pos, vel, mass)
    p = diagnostics.compute_linear_momentum(vel, mass)
    L = diagnostics.compute_angular_momentum(pos, vel, mass)
    distance = float(((pos[0] - pos[1]) ** 2).sum() ** 0.5)
    report(f"[{label}] step={steps} t={elapsed:.0f}s K={K:.6e} U={U:.6e} E={E:.6e} "
           f"p=({p[0]:.6e}, {p[1]:.6e}) Lz={L:.6e} d01={distance:.6e}")


def prepare(config: SimulationConfig) -> Simulator:
    """Build and initialize a simulator from a config.

    All validation happens here, before any record is produced.
    """
    try:
        preset = get_preset(config.preset)
    except ValueError as e:
        raise InvalidConfigError(str(e)) from e
    sim = Simulator(config)
    sim.initialize(preset.generate())
    return sim


def execute(sim: Simulator, on_record, summary: bool = False):
    sim.on_record = on_record
    if summary:
        report(f"Running {sim.config.preset} with {sim.integrator.name} Euler: "
               f"dt={sim.dt}s, steps={sim.step_count}, bodies={sim.system.n_bodies}")
        print_summary("initial", sim)
    sim.run()
    if summary:
        print_summary("final", sim)


def run_comparison(config: SimulationConfig, prefix: str, summary: bool = False) -> int:
    """Run both methods from the same initial conditions and plot their distances."""
    from euler_orbits.render.plots import plot_distances

    sims = {method.value: prepare(replace(config, method=method)) for method in IntegrationMethod}
    runs = {}
    for label, sim in sims.items():
        records: List[StepRecord] = []
        execute(sim, records.append, summary=summary)
        runs[label] = records

    output_path = f"{prefix}_distances.png"
    plot_distances(runs, output_path, title=f"{config.preset}: naive vs symplectic Euler")
    report(f"Distance plot saved to {output_path}")
    return 0


def run_simulation(args) -> int:
    """Run a simulation and stream records."""
    config = build_config(args)

    if args.compare:
        return run_comparison(config, args.compare, summary=args.summary)

    sim = prepare(config)

    records: List[StepRecord] = []
    stream = open(args.output, 'w') if args.output else sys.stdout
    writer = RecordWriter(stream)

    def emit(record: StepRecord):
        writer(record)
        if args.plot:
            records.append(record)

    try:
        execute(sim, emit, summary=args.summary)
    finally:
        if stream is sys.stdout:
            stream.flush()
        else:
            stream.close()

    if args.save_state:
        save_state(sim.get_bodies(), args.save_state, metadata={
            'time': sim.time,
            'steps': sim.step_index,
            'preset': config.preset,
            'method': sim.method.value,
        })
        report(f"State saved to {args.save_state}")

    if args.plot:
        from euler_orbits.render.plots import plot_trajectories

        output_path = f"{args.plot}_trajectories.png"
        names = [body.name for body in sim.get_bodies()[:2]]
        plot_trajectories(records, output_path, title=f"{sim.method.value} Euler", labels=tuple(names))
        report(f"Trajectory plot saved to {output_path}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="euler-orbits",
        description="Integrate the Earth-Moon orbit with naive or symplectic Euler and "
                    "print tab-separated records: time, x0, y0, x1, y1, distance",
    )
    parser.add_argument('method', choices=[method.value for method in IntegrationMethod],
                        help='Integration method')

    # Simulation parameters
    parser.add_argument('--preset', type=str, default=None, choices=list(PRESETS.keys()),
                        help='Initial conditions (default: earth_moon)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step in seconds (default: 3600)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of steps (default: 8760, one year of hours)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 6.674e-11)')
    parser.add_argument('--config', type=str, default=None,
                        help='Load configuration from a .json or .yaml file')

    # Output
    parser.add_argument('--output', type=str, default=None,
                        help='Write records to this file instead of stdout')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final bodies to a .json or .npz file')
    parser.add_argument('--plot', type=str, default=None, metavar='PREFIX',
                        help='Save a trajectory plot to PREFIX_trajectories.png')
    parser.add_argument('--compare', type=str, default=None, metavar='PREFIX',
                        help='Run both methods and save PREFIX_distances.png instead of printing records. '
                             'METHOD is ignored; cannot be combined with --output, --plot or --save-state')
    parser.add_argument('--summary', action='store_true',
                        help='Print energy and momentum before and after the run to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.compare:
        conflicting = [flag for flag, value in (('--output', args.output), ('--plot', args.plot),
                                                ('--save-state', args.save_state)) if value]
        if conflicting:
            parser.error(f"--compare cannot be combined with {', '.join(conflicting)}")

    try:
        return run_simulation(args)
    except InvalidConfigError as e:
        report(f"Invalid configuration: {e}")
        return 1
    except DegenerateStateError as e:
        report(f"Simulation failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
