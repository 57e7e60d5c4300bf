"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import Tuple


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, n_particles: int = 1000, seed: int = None):
        """Initialize preset.

        Args:
            n_particles: Number of particles
            seed: Random seed for reproducibility
        """
        if n_particles < 1:
            raise ValueError(f"n_particles must be >= 1, got {n_particles}")
        self.n_particles = n_particles
        self.seed = seed

    @abstractmethod
    def generate(self) -> Tuple:
        """Generate initial conditions.

        Returns:
            Tuple of (positions, velocities, masses)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
