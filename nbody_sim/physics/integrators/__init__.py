"""Numerical integrators for N-body simulations."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator

__all__ = ["Integrator", "LeapfrogIntegrator"]
