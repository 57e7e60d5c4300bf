"""
N-body Simulator - direct-summation gravity kernel with a leapfrog integrator.

Features:
- O(N^2) pairwise forces with additive softening
- Kick-drift-kick leapfrog time stepping
- Random cube initial conditions with per-particle velocity centering
- Read-only, zero-copy position/mass buffers for external renderers
- JSON/YAML configuration and a CLI
"""

__version__ = "0.1.0"

from nbody_sim.physics.simulator import Simulator
from nbody_sim.physics.particle_system import ParticleSystem
from nbody_sim.io.buffers import BufferView, StaleBufferError
from nbody_sim.utils.config import SimulationConfig


def create(config: SimulationConfig = None, preset=None) -> Simulator:
    """Create a randomly initialized simulator (see Simulator.create)."""
    return Simulator.create(config, preset=preset)


__all__ = [
    "Simulator",
    "ParticleSystem",
    "BufferView",
    "StaleBufferError",
    "SimulationConfig",
    "create",
]
