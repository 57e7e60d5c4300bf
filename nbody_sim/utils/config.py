"""Configuration management."""

import json
import numbers
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class SimulationConfig:
    """Simulation configuration (immutable; derive variants with dataclasses.replace)."""
    # Simulation parameters
    n_particles: int = 1000
    dt: float = 0.001
    G: float = 1.0
    softening: float = 0.001

    # Reproducibility
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.n_particles, bool) or not isinstance(self.n_particles, numbers.Integral):
            raise ValueError(f"n_particles must be an integer, got {self.n_particles!r}")
        if self.n_particles < 1:
            raise ValueError(f"n_particles must be >= 1, got {self.n_particles}")
        if self.dt <= 0.0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.softening <= 0.0:
            raise ValueError(f"softening must be > 0, got {self.softening}")


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return SimulationConfig(**data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
