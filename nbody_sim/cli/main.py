"""CLI main entry point."""

import argparse
import sys
from dataclasses import replace
from nbody_sim.physics.simulator import Simulator
from nbody_sim.utils.config import SimulationConfig, load_config, save_config


def build_config(args) -> SimulationConfig:
    """Config file values, overridden by any explicit command-line option."""
    config = load_config(args.config) if args.config else SimulationConfig()

    overrides = {}
    if args.particles is not None:
        overrides['n_particles'] = args.particles
    if args.dt is not None:
        overrides['dt'] = args.dt
    if args.G is not None:
        overrides['G'] = args.G
    if args.softening is not None:
        overrides['softening'] = args.softening
    if args.seed is not None:
        overrides['seed'] = args.seed

    return replace(config, **overrides) if overrides else config


def run_simulation(args, out=None):
    """Run a simulation and print a diagnostic table."""
    out = out if out is not None else sys.stdout
    config = build_config(args)

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Config saved to {args.save_config}", file=out)

    sim = Simulator.create(config)

    print(f"Running simulation: {config.n_particles} particles, {args.steps} steps", file=out)
    print(f"Integrator: {sim.integrator.name}, dt: {config.dt}, G: {config.G}, "
          f"softening: {config.softening}, seed: {config.seed}", file=out)

    K0, U0, E0 = sim.diagnostics.compute_energies(
        sim.system.positions,
        sim.system.velocities,
        sim.system.masses
    )

    print(f"{'Step':<8} {'Time':<10} {'K':<12} {'U':<12} {'E':<12} {'dE/E0':<10} {'Speed':<12}", file=out)
    print("-" * 80, file=out)
    print(f"{0:<8} {0.0:<10.4f} {K0:<12.6f} {U0:<12.6f} {E0:<12.6f} {0.0:<10.4f}% {sim.total_speed():<12.6f}",
          file=out)

    for step in range(1, args.steps + 1):
        sim.step()

        if step % args.debug_every == 0 or step == args.steps:
            K, U, E = sim.diagnostics.compute_energies(
                sim.system.positions,
                sim.system.velocities,
                sim.system.masses
            )
            dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
            print(f"{step:<8} {sim.time:<10.4f} {K:<12.6f} {U:<12.6f} {E:<12.6f} {dE:<10.4f}% "
                  f"{sim.total_speed():<12.6f}", file=out)

    if args.dump:
        sim.debug_dump(out)

    print("Simulation complete!", file=out)
    return sim


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="N-body Simulator - direct-summation gravity with leapfrog")

    # Simulation parameters
    parser.add_argument('--config', type=str, default=None,
                        help='Load configuration from a .json or .yaml file')
    parser.add_argument('--particles', type=int, default=None,
                        help='Number of particles (default: 1000)')
    parser.add_argument('--steps', type=int, default=100,
                        help='Number of simulation steps')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.001)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 1.0)')
    parser.add_argument('--softening', type=float, default=None,
                        help='Additive softening on r^2 (default: 0.001)')
    parser.add_argument('--debug-every', type=int, default=10,
                        help='Print diagnostics every N steps')

    # Output
    parser.add_argument('--dump', action='store_true',
                        help='Print final particle positions')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Write the effective configuration to a .json or .yaml file')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    args = parser.parse_args(argv)

    if args.steps < 0:
        parser.error("--steps must be >= 0")
    if args.debug_every < 1:
        parser.error("--debug-every must be >= 1")

    try:
        run_simulation(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
