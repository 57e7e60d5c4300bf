"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple


class Integrator(ABC):
    """Abstract interface for fixed-step integrators."""

    @abstractmethod
    def step(self, positions, velocities, accelerations, masses, dt: float, force_calculator) -> Tuple:
        """Perform one integration step without mutating the inputs.

        Args:
            positions: Current positions (n, 3)
            velocities: Current velocities (n, 3)
            accelerations: Accelerations at the current positions (n, 3)
            masses: Particle masses (n,)
            dt: Time step
            force_calculator: Object exposing compute_acceleration(positions, masses)

        Returns:
            Tuple of (new_positions, new_velocities, new_accelerations)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
