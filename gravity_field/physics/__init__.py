"""Physics core: bodies, gravity integration and field sampling."""

from gravity_field.physics.body import Body, Transform2D, RigidBody2D, create_body, create_sample_point
from gravity_field.physics.simulator import GravitySimulator
from gravity_field.physics.vector_field import FieldScale, VectorFieldSampler

__all__ = [
    "Body",
    "Transform2D",
    "RigidBody2D",
    "create_body",
    "create_sample_point",
    "GravitySimulator",
    "FieldScale",
    "VectorFieldSampler",
]
