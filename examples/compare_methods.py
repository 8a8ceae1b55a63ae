"""Run both Euler variants on the Earth-Moon system and compare the outcome."""

from euler_orbits import Simulator, SimulationConfig
from euler_orbits.physics.integrators import IntegrationMethod
from euler_orbits.presets import EarthMoon
from euler_orbits.render import plot_distances, plot_trajectories


def main():
    """Simulate one year with each method and plot the results."""
    runs = {}
    for method in IntegrationMethod:
        records = []
        sim = Simulator(SimulationConfig(method=method), on_record=records.append)
        sim.initialize(EarthMoon().generate())

        print(f"[{method.value}] initial energy: {sim.get_energy():.6e} J")
        sim.run()
        print(f"[{method.value}] final energy:   {sim.get_energy():.6e} J")
        print(f"[{method.value}] final distance: {records[-1].distance:.6e} m")

        plot_trajectories(records, f"trajectories_{method.value}.png",
                          title=f"{method.value} Euler", labels=("Earth", "Moon"))
        runs[method.value] = records

    plot_distances(runs, "distances.png")
    print("Plots written: trajectories_naive.png, trajectories_symplectic.png, distances.png")


if __name__ == "__main__":
    main()
