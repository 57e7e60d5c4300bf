"""Buffer export for external consumers."""

from nbody_sim.io.buffers import BufferView, StaleBufferError, export_positions, export_masses

__all__ = ["BufferView", "StaleBufferError", "export_positions", "export_masses"]
