"""Basic example of driving the N-body simulator from an external loop."""

import numpy as np
from nbody_sim import Simulator, SimulationConfig


def main():
    """Run a small random-cube simulation and read its buffers."""
    config = SimulationConfig(n_particles=500, dt=0.001, seed=42)

    # Random cube initial conditions, accelerations seeded
    sim = Simulator.create(config)

    masses = sim.masses_view()  # stays valid for the whole run

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")

    for step in range(500):
        sim.step()
        if step % 100 == 0:
            # Position buffers expire on every step; fetch a fresh one
            positions = np.asarray(sim.positions_view())
            com = np.sum(masses.array[:, np.newaxis] * positions, axis=0) / np.sum(masses.array)
            print(f"Step {step}: Time={sim.time:.3f}, Energy={sim.get_energy():.6f}, "
                  f"COM=({com[0]:.4f}, {com[1]:.4f}, {com[2]:.4f}), Speed={sim.total_speed():.4f}")

    print(f"Final energy: {sim.get_energy():.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
