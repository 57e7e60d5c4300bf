"""Physics engine for N-body simulations."""

from nbody_sim.physics.particle_system import ParticleSystem
from nbody_sim.physics.force_calculator import ForceCalculator, compute_acceleration
from nbody_sim.physics.simulator import Simulator

__all__ = ["ParticleSystem", "ForceCalculator", "compute_acceleration", "Simulator"]
