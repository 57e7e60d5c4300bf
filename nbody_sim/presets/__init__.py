"""Preset scenario generators for N-body simulations."""

from nbody_sim.presets.base import Preset
from nbody_sim.presets.random_cube import RandomCube, center_momentum

__all__ = ["Preset", "RandomCube", "center_momentum"]
