"""Leapfrog integrator in kick-drift-kick form (symplectic, O(h²) accuracy)."""

from typing import Tuple
from nbody_sim.physics.integrators.base import Integrator


class LeapfrogIntegrator(Integrator):
    """Kick-drift-kick leapfrog.

    One step:
    1. v_half = v + a_old * dt/2
    2. x_new = x + v_half * dt
    3. a_new = a(x_new)
    4. v_new = v_half + a_new * dt/2

    The phases run in exactly this order with a single force evaluation
    per step; a_old is the acceleration carried over from the previous step.
    """

    @property
    def name(self) -> str:
        return "leapfrog"

    @property
    def order(self) -> int:
        return 2

    def step(self, positions, velocities, accelerations, masses, dt: float, force_calculator) -> Tuple:
        half_dt = dt / 2.0

        # 1/2 kick
        v_half = velocities + accelerations * half_dt

        # Drift, then forces at the new positions
        new_positions = positions + v_half * dt
        new_accelerations = force_calculator.compute_acceleration(new_positions, masses)

        # 2/2 kick
        new_velocities = v_half + new_accelerations * half_dt

        return new_positions, new_velocities, new_accelerations
