"""Direct-summation gravity with additive softening.

Every ordered pair (i, j) is evaluated explicitly, O(N^2) in time and memory.
The softening constant is added to the squared separation, so the
inverse-cube factor stays finite for coincident particles and on the
diagonal, where the zero displacement makes the self term vanish.
"""

from typing import Tuple
import numpy as np


def _displacements(positions: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Per-axis (n, n) displacement matrices, d[i, j] = pos[j] - pos[i]."""
    x = positions[:, 0:1]
    y = positions[:, 1:2]
    z = positions[:, 2:3]
    return x.T - x, y.T - y, z.T - z


def _inverse_cube(dx: np.ndarray, dy: np.ndarray, dz: np.ndarray, softening: float) -> np.ndarray:
    r_sq = dx ** 2 + dy ** 2 + dz ** 2 + softening
    return r_sq ** -1.5


def compute_acceleration(
    positions,
    masses,
    G: float = 1.0,
    softening: float = 0.001
) -> np.ndarray:
    """Compute gravitational acceleration on every particle.

    a_i = G * sum_j m_j * (r_j - r_i) / (|r_j - r_i|^2 + softening)^(3/2)

    Args:
        positions: Array of shape (n, 3)
        masses: Array of shape (n,)
        G: Gravitational constant
        softening: Additive term on the squared separation (must be > 0)

    Returns:
        Accelerations of shape (n, 3)
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)

    dx, dy, dz = _displacements(positions)
    inv_r3 = _inverse_cube(dx, dy, dz, softening)

    ax = (G * (dx * inv_r3)).dot(masses)
    ay = (G * (dy * inv_r3)).dot(masses)
    az = (G * (dz * inv_r3)).dot(masses)

    return np.stack([ax, ay, az], axis=1)


def pairwise_forces(
    positions,
    masses,
    G: float = 1.0,
    softening: float = 0.001
) -> np.ndarray:
    """Force on particle i exerted by particle j, for every ordered pair.

    Returns:
        Array of shape (n, n, 3); entry [i, j] is the force on i from j and
        equals minus entry [j, i].
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)

    dx, dy, dz = _displacements(positions)
    inv_r3 = _inverse_cube(dx, dy, dz, softening)
    magnitude = G * np.outer(masses, masses) * inv_r3

    return np.stack([magnitude * dx, magnitude * dy, magnitude * dz], axis=2)


class ForceCalculator:
    """Binds G and softening for repeated acceleration evaluation."""

    def __init__(self, G: float = 1.0, softening: float = 0.001):
        """Initialize force calculator.

        Args:
            G: Gravitational constant
            softening: Additive softening on r^2

        Raises:
            ValueError: If softening is not strictly positive
        """
        if softening <= 0.0:
            raise ValueError(f"softening must be > 0, got {softening}")
        self.G = float(G)
        self.softening = float(softening)

    def compute_acceleration(self, positions, masses) -> np.ndarray:
        """Accelerations of shape (n, 3) at the given positions."""
        return compute_acceleration(positions, masses, G=self.G, softening=self.softening)

    def __repr__(self) -> str:
        return f"ForceCalculator(G={self.G}, softening={self.softening})"
