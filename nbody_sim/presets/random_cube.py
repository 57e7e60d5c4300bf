"""Uniform random cube preset."""

import numpy as np
from typing import Tuple
from nbody_sim.presets.base import Preset


def center_momentum(velocities, masses) -> np.ndarray:
    """Subtract a per-particle drift from every velocity axis.

    For each particle i:
        drift_i = (vx_i + vy_i + vz_i) * m_i / 3 / mean(m)
    and drift_i is removed from all three components of v_i. This only
    roughly damps bulk motion; it is not a total-momentum projection.

    Args:
        velocities: Array of shape (n, 3)
        masses: Array of shape (n,)

    Returns:
        New array of corrected velocities (n, 3)
    """
    velocities = np.asarray(velocities, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)

    mean_mass = np.mean(masses)
    velocity_sum = velocities[:, 0] + velocities[:, 1] + velocities[:, 2]
    drift = (velocity_sum * masses / 3.0) / mean_mass

    return velocities - drift[:, np.newaxis]


class RandomCube(Preset):
    """Particles scattered uniformly through a cube with small random velocities."""

    def __init__(
        self,
        n_particles: int = 1000,
        seed: int = None,
        mass_range: Tuple[float, float] = (0.1, 1.0),
        position_range: Tuple[float, float] = (-1.0, 1.0),
        velocity_range: Tuple[float, float] = (-0.25, 0.25)
    ):
        """Initialize random cube preset.

        Args:
            n_particles: Number of particles
            seed: Random seed
            mass_range: Half-open [low, high) interval for masses, low > 0
            position_range: Half-open interval for each position coordinate
            velocity_range: Half-open interval for each velocity coordinate
        """
        super().__init__(n_particles, seed)
        for label, (low, high) in (
            ("mass_range", mass_range),
            ("position_range", position_range),
            ("velocity_range", velocity_range),
        ):
            if not low < high:
                raise ValueError(f"{label} must satisfy low < high, got ({low}, {high})")
        if mass_range[0] <= 0.0:
            raise ValueError(f"mass_range must be strictly positive, got {mass_range}")

        self.mass_range = mass_range
        self.position_range = position_range
        self.velocity_range = velocity_range

    @property
    def name(self) -> str:
        return "random_cube"

    def sample(self) -> Tuple:
        """Draw raw masses, positions and velocities (no centering).

        Returns:
            Tuple of (positions, velocities, masses)
        """
        n = self.n_particles
        rng = np.random.default_rng(self.seed)

        masses = rng.uniform(self.mass_range[0], self.mass_range[1], n)
        positions = rng.uniform(self.position_range[0], self.position_range[1], (n, 3))
        velocities = rng.uniform(self.velocity_range[0], self.velocity_range[1], (n, 3))

        return positions, velocities, masses

    def generate(self) -> Tuple:
        """Generate random cube initial conditions with centered velocities."""
        positions, velocities, masses = self.sample()
        velocities = center_momentum(velocities, masses)
        return positions, velocities, masses
