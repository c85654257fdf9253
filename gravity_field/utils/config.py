"""Configuration management."""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class Config:
    """Simulation configuration."""
    # Physics
    gravitational_strength: float = 0.81
    dt: float = 1.0 / 60
    substeps: int = 5
    frames: int = 600

    # Scene
    preset: str = "binary"
    preset_params: Dict[str, Any] = field(default_factory=dict)
    n_bodies: int = 3
    grid_count: int = 40

    # Field-line look
    field_min_length: float = 0.005
    field_length_range: float = 0.045
    field_log_divisor: float = 3.0

    # Rendering and export
    render: bool = False
    export_gif: bool = False
    output_path: str = "output"
    fps: int = 30
    gif_every: int = 1

    seed: Optional[int] = None
    log_level: str = "INFO"

    def validate(self):
        """Raise ValueError if any parameter has the wrong type or is out of range."""
        for name in _INT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass but never a valid count
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in _FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.log_level, str) or not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if not isinstance(self.preset, str):
            raise ValueError(f"preset must be a name, got {self.preset!r}")

        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.substeps < 1:
            raise ValueError(f"substeps must be at least 1, got {self.substeps}")
        if self.grid_count < 1:
            raise ValueError(f"grid_count must be at least 1, got {self.grid_count}")
        if self.gravitational_strength < 0:
            raise ValueError(f"gravitational_strength must be non-negative, got {self.gravitational_strength}")
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")
        if self.gif_every < 1:
            raise ValueError(f"gif_every must be at least 1, got {self.gif_every}")
        if self.frames < 0:
            raise ValueError(f"frames must be non-negative, got {self.frames}")
        if self.n_bodies < 0:
            raise ValueError(f"n_bodies must be non-negative, got {self.n_bodies}")
        if self.field_log_divisor <= 0:
            raise ValueError(f"field_log_divisor must be positive, got {self.field_log_divisor}")


_INT_FIELDS = ("substeps", "frames", "n_bodies", "grid_count", "fps", "gif_every")
_FLOAT_FIELDS = ("gravitational_strength", "dt", "field_min_length", "field_length_range", "field_log_divisor")


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        Config object
    """
    config_path = Path(config_path)
    if not _is_yaml(config_path) and config_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json, .yaml or .yml")

    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    if not _is_yaml(output_path) and output_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json, .yaml or .yml")
    data = asdict(config)

    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
