"""Preset scenes and the field-line grid."""

from typing import Any, Optional

from gravity_field.presets.base import Preset
from gravity_field.presets.binary import BinaryPreset
from gravity_field.presets.cluster import ClusterPreset
from gravity_field.presets.field_grid import make_vector_field
from gravity_field.presets.orbit import OrbitPreset

PRESETS = {
    'binary': BinaryPreset,
    'orbit': OrbitPreset,
    'cluster': ClusterPreset,
}


def get_preset(name: str, model: Optional[Any] = None, seed: Optional[int] = None, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(model=model, seed=seed, **kwargs)


__all__ = [
    "Preset",
    "BinaryPreset",
    "OrbitPreset",
    "ClusterPreset",
    "PRESETS",
    "get_preset",
    "make_vector_field",
]
