"""Particle state container for the N-body kernel."""

import numpy as np


class ParticleSystem:
    """Fixed-size set of point masses.

    Holds positions, velocities, accelerations and masses as C-contiguous
    float64 arrays. The particle count is fixed at construction. Every
    committed step swaps positions, velocities and accelerations for new
    arrays together and bumps ``generation``; masses never change.
    """

    def __init__(self, positions, velocities, accelerations, masses):
        """Initialize particle state.

        Args:
            positions: Array of shape (n, 3)
            velocities: Array of shape (n, 3)
            accelerations: Array of shape (n, 3), consistent with positions/masses
            masses: Array of shape (n,), all strictly positive

        Raises:
            ValueError: If shapes disagree or a mass is not positive
        """
        masses = np.ascontiguousarray(masses, dtype=np.float64)
        if masses.ndim != 1:
            raise ValueError("masses must have shape (n,)")
        if not np.all(masses > 0.0):
            raise ValueError("all masses must be > 0")

        self.n_particles = masses.shape[0]
        self.masses = masses
        self.positions = self._as_vectors(positions, "positions")
        self.velocities = self._as_vectors(velocities, "velocities")
        self.accelerations = self._as_vectors(accelerations, "accelerations")
        self.generation = 0

    def _as_vectors(self, data, label: str) -> np.ndarray:
        array = np.ascontiguousarray(data, dtype=np.float64)
        if array.shape != (self.n_particles, 3):
            raise ValueError(
                f"{label} must have shape ({self.n_particles}, 3), got {array.shape}"
            )
        return array

    def replace_state(self, positions, velocities, accelerations):
        """Commit a full step: new positions, velocities and accelerations at once.

        The previous arrays are left untouched so any buffer handed out
        before the call keeps its old contents.
        """
        new_positions = self._as_vectors(positions, "positions")
        new_velocities = self._as_vectors(velocities, "velocities")
        new_accelerations = self._as_vectors(accelerations, "accelerations")

        self.positions = new_positions
        self.velocities = new_velocities
        self.accelerations = new_accelerations
        self.generation += 1

    def copy(self) -> "ParticleSystem":
        clone = ParticleSystem(
            self.positions.copy(),
            self.velocities.copy(),
            self.accelerations.copy(),
            self.masses.copy(),
        )
        clone.generation = self.generation
        return clone

    def __len__(self) -> int:
        return self.n_particles

    def __repr__(self) -> str:
        return f"ParticleSystem(n_particles={self.n_particles}, generation={self.generation})"
