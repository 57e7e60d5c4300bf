"""Main simulator controller."""

from typing import Optional, Callable, TextIO
import sys
import warnings
import numpy as np
from nbody_sim.physics.particle_system import ParticleSystem
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.presets.base import Preset
from nbody_sim.presets.random_cube import RandomCube
from nbody_sim.io.buffers import BufferView, export_positions, export_masses
from nbody_sim.utils.config import SimulationConfig


class Simulator:
    """Main simulation controller.

    Owns one ParticleSystem and advances it with a fixed time step. The
    caller drives the loop: create once, step as often as needed, and
    re-acquire position buffers after every step.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        integrator: Optional[Integrator] = None
    ):
        """Initialize simulator.

        Args:
            config: Simulation constants (default: SimulationConfig())
            integrator: Integrator to use (default: leapfrog)
        """
        self.config = config or SimulationConfig()
        self.integrator = integrator or LeapfrogIntegrator()
        self.force_calculator = ForceCalculator(G=self.config.G, softening=self.config.softening)
        self.diagnostics = Diagnostics(G=self.config.G, softening=self.config.softening)

        self.system: Optional[ParticleSystem] = None
        self.time = 0.0
        self.step_count = 0

        # Callbacks
        self.on_step_callback: Optional[Callable] = None

    @property
    def dt(self) -> float:
        return self.config.dt

    @classmethod
    def create(
        cls,
        config: Optional[SimulationConfig] = None,
        preset: Optional[Preset] = None,
        integrator: Optional[Integrator] = None
    ) -> "Simulator":
        """Build a simulator with freshly generated initial conditions.

        Args:
            config: Simulation constants
            preset: Initial-condition generator (default: RandomCube with
                config.n_particles and config.seed)
            integrator: Integrator to use

        Returns:
            Initialized Simulator
        """
        sim = cls(config, integrator)
        if preset is None:
            preset = RandomCube(n_particles=sim.config.n_particles, seed=sim.config.seed)
        positions, velocities, masses = preset.generate()
        sim.initialize(positions, velocities, masses)
        return sim

    def initialize(self, positions, velocities, masses):
        """Initialize particle state and seed the accelerations.

        Args:
            positions: Initial positions (n, 3)
            velocities: Initial velocities (n, 3)
            masses: Particle masses (n,)
        """
        positions = np.array(positions, dtype=np.float64)
        velocities = np.array(velocities, dtype=np.float64)
        masses = np.array(masses, dtype=np.float64)

        if masses.ndim != 1 or positions.shape != (masses.shape[0], 3):
            raise ValueError(
                f"expected positions (n, 3) and masses (n,), got {positions.shape} and {masses.shape}"
            )

        n = masses.shape[0]
        if n != self.config.n_particles:
            warnings.warn(
                f"config.n_particles={self.config.n_particles} differs from the "
                f"{n} particles supplied; using the supplied arrays",
                UserWarning,
            )

        accelerations = self.force_calculator.compute_acceleration(positions, masses)
        self.system = ParticleSystem(positions, velocities, accelerations, masses)
        self.time = 0.0
        self.step_count = 0

    def _require_system(self) -> ParticleSystem:
        if self.system is None:
            raise RuntimeError("Simulator is not initialized; call create() or initialize() first")
        return self.system

    def step(self):
        """Advance the system by one time step."""
        system = self._require_system()

        new_positions, new_velocities, new_accelerations = self.integrator.step(
            system.positions,
            system.velocities,
            system.accelerations,
            system.masses,
            self.dt,
            self.force_calculator,
        )
        system.replace_state(new_positions, new_velocities, new_accelerations)

        self.time += self.dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def positions_view(self) -> BufferView:
        """Read-only (n, 3) positions; stale after the next step()."""
        return export_positions(self._require_system())

    def masses_view(self) -> BufferView:
        """Read-only (n,) masses; valid for the lifetime of the system."""
        return export_masses(self._require_system())

    def debug_dump(self, sink: Optional[TextIO] = None):
        """Print every particle's position triple, one per line.

        Args:
            sink: Text stream to write to (default: sys.stdout)
        """
        system = self._require_system()
        out = sink if sink is not None else sys.stdout
        for x, y, z in system.positions:
            print(x, y, z, file=out)

    def total_speed(self) -> float:
        """Sum of per-particle speed magnitudes (diagnostic only)."""
        return self.diagnostics.compute_total_speed(self._require_system().velocities)

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count) with copied arrays
        """
        system = self._require_system()
        return (
            system.positions.copy(),
            system.velocities.copy(),
            system.masses.copy(),
            self.time,
            self.step_count,
        )

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        system = self._require_system()
        _, _, E = self.diagnostics.compute_energies(system.positions, system.velocities, system.masses)
        return E

    def get_kinetic_energy(self) -> float:
        """Get current kinetic energy."""
        system = self._require_system()
        return self.diagnostics.compute_kinetic_energy(system.velocities, system.masses)

    def get_potential_energy(self) -> float:
        """Get current potential energy."""
        system = self._require_system()
        return self.diagnostics.compute_potential_energy(system.positions, system.masses)
