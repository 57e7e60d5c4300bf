"""Diagnostics for N-body simulations."""

import numpy as np
from typing import Tuple


class Diagnostics:
    """Compute energy and momentum diagnostics matching the force law."""

    def __init__(self, G: float = 1.0, softening: float = 0.001):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            softening: Additive softening on r^2 (must match force calculation)
        """
        self.G = G
        self.softening = softening

    def compute_total_speed(self, velocities) -> float:
        """Sum of per-particle speed magnitudes."""
        velocities_np = np.asarray(velocities, dtype=np.float64)
        return float(np.sum(np.sqrt(np.sum(velocities_np ** 2, axis=1))))

    def compute_kinetic_energy(self, velocities, masses) -> float:
        """K = 0.5 * Σ m_i * v_i^2"""
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        v_sq = np.sum(velocities_np ** 2, axis=1)
        return float(0.5 * np.sum(masses_np * v_sq))

    def compute_potential_energy(self, positions, masses) -> float:
        """Softened pair potential consistent with the force law.

        U = -G * Σ_{i<j} m_i * m_j / sqrt(r_ij^2 + softening)
        """
        positions_np = np.asarray(positions, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        n = len(masses_np)
        if n < 2:
            return 0.0

        i_idx, j_idx = np.triu_indices(n, k=1)
        r_diff = positions_np[j_idx] - positions_np[i_idx]
        r_sq = np.sum(r_diff ** 2, axis=1)
        r_soft = np.sqrt(r_sq + self.softening)
        U = -self.G * np.sum(masses_np[i_idx] * masses_np[j_idx] / r_soft)
        return float(U)

    def compute_energies(
        self,
        positions,
        velocities,
        masses
    ) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Args:
            positions: Particle positions (n, 3)
            velocities: Particle velocities (n, 3)
            masses: Particle masses (n,)

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.compute_kinetic_energy(velocities, masses)
        U = self.compute_potential_energy(positions, masses)
        return K, U, K + U

    def compute_total_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum vector Σ m_i * v_i."""
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses_np[:, np.newaxis] * velocities_np, axis=0)

    def compute_center_of_mass(self, positions, masses) -> np.ndarray:
        positions_np = np.asarray(positions, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        total_mass = np.sum(masses_np)
        return np.sum(masses_np[:, np.newaxis] * positions_np, axis=0) / total_mass
