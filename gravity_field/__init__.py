"""
Gravity Field - 2D Newtonian gravity with a live force-field visualization.

Features:
- Pairwise inverse-square gravity with sub-stepped semi-implicit Euler
- Force-field sampling on a regular grid of field lines
- Preset scenes (binary, orbit, cluster)
- matplotlib rendering and GIF export
- CLI with JSON/YAML configuration
"""

__version__ = "0.1.0"

from gravity_field.physics.body import Body, create_body, create_sample_point
from gravity_field.physics.simulator import GravitySimulator
from gravity_field.physics.vector_field import FieldScale, VectorFieldSampler

__all__ = [
    "Body",
    "create_body",
    "create_sample_point",
    "GravitySimulator",
    "FieldScale",
    "VectorFieldSampler",
]
