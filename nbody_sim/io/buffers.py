"""Read-only, zero-copy buffer views for external renderers.

A view shares memory with the particle system it came from. Position views
are tied to the system's generation counter: once a step has been committed
the view is stale and must be re-acquired. Mass views never expire since
masses are fixed for the lifetime of a system.
"""

from typing import Optional, Tuple
import numpy as np
from nbody_sim.physics.particle_system import ParticleSystem


class StaleBufferError(RuntimeError):
    """Raised when a buffer view is read after its owner stepped forward."""


class BufferView:
    """Read-only view over one of a ParticleSystem's arrays."""

    def __init__(self, owner: ParticleSystem, array: np.ndarray, generation: Optional[int] = None):
        """Initialize buffer view.

        Args:
            owner: Particle system the array belongs to
            array: Array to expose (not copied)
            generation: Owner generation the view is valid for; None never expires
        """
        view = array.view()
        view.flags.writeable = False
        self._owner = owner
        self._array = view
        self._generation = generation

    @property
    def generation(self) -> Optional[int]:
        return self._generation

    @property
    def is_valid(self) -> bool:
        return self._generation is None or self._generation == self._owner.generation

    @property
    def array(self) -> np.ndarray:
        """The underlying read-only array.

        Raises:
            StaleBufferError: If the owner has committed a step since the view was taken
        """
        if not self.is_valid:
            raise StaleBufferError(
                f"buffer taken at generation {self._generation} is stale "
                f"(system is at generation {self._owner.generation}); re-acquire it"
            )
        return self._array

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._array.shape

    def to_memoryview(self) -> memoryview:
        """Raw buffer-protocol access (row-major float64)."""
        return memoryview(self.array)

    def __array__(self, dtype=None, copy=None):
        array = self.array
        if copy:
            return np.array(array, dtype=dtype, copy=True)
        return np.asarray(array, dtype=dtype)

    def __len__(self) -> int:
        return self._array.shape[0]

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else "stale"
        return f"BufferView(shape={self._array.shape}, generation={self._generation}, {state})"


def export_positions(system: ParticleSystem) -> BufferView:
    """(n, 3) position buffer; invalidated by the next committed step."""
    return BufferView(system, system.positions, generation=system.generation)


def export_masses(system: ParticleSystem) -> BufferView:
    """(n,) mass buffer; valid for the lifetime of the system."""
    return BufferView(system, system.masses)
