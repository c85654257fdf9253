"""Body and transform value types shared by physics and rendering."""

import itertools
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import numpy as np

# Sample points act as unit-mass test particles; compute_force does not divide the
# target mass back out, so the field only reads mass-independent at mass 1.
SAMPLE_POINT_MASS = 1.0
SAMPLE_POINT_SCALE = 0.005

_id_counter = itertools.count()


def vec2(values: Sequence[float] = (0.0, 0.0)) -> np.ndarray:
    """Return a fresh float64 array of shape (2,)."""
    return np.array(values, dtype=np.float64).reshape(2)


@dataclass
class Transform2D:
    """Position and orientation of an object in the plane."""
    translation: np.ndarray = field(default_factory=vec2)
    scale: np.ndarray = field(default_factory=lambda: vec2((1.0, 1.0)))
    rotation: float = 0.0

    def mat2(self) -> np.ndarray:
        """Return rotation @ diag(scale) as a 2x2 matrix."""
        s = np.sin(self.rotation)
        c = np.cos(self.rotation)
        rot = np.array([[c, -s], [s, c]])
        return rot @ np.diag(self.scale)


@dataclass
class RigidBody2D:
    velocity: np.ndarray = field(default_factory=vec2)
    mass: float = 1.0


@dataclass(eq=False)
class Body:
    """A point mass with render attributes.

    ``position`` reads the transform's translation, so the physics writes
    straight into what the renderer reads. Assigning copies the value in,
    so two bodies never share a vector.
    """
    transform: Transform2D = field(default_factory=Transform2D)
    rigid_body: RigidBody2D = field(default_factory=RigidBody2D)
    color: np.ndarray = field(default_factory=lambda: np.ones(3))
    model: Optional[Any] = None
    id: int = field(default_factory=lambda: next(_id_counter))

    @property
    def position(self) -> np.ndarray:
        return self.transform.translation

    @position.setter
    def position(self, value):
        self.transform.translation = vec2(value)

    @property
    def velocity(self) -> np.ndarray:
        return self.rigid_body.velocity

    @velocity.setter
    def velocity(self, value):
        self.rigid_body.velocity = vec2(value)

    @property
    def mass(self) -> float:
        return self.rigid_body.mass

    @mass.setter
    def mass(self, value: float):
        self.rigid_body.mass = float(value)


def create_body(
    position: Sequence[float],
    velocity: Sequence[float] = (0.0, 0.0),
    mass: float = 1.0,
    color: Sequence[float] = (1.0, 1.0, 1.0),
    scale: float = 0.05,
    model: Optional[Any] = None,
) -> Body:
    """Create a body, copying all vector inputs.

    Args:
        position: Initial position (x, y)
        velocity: Initial velocity (vx, vy)
        mass: Body mass, must be positive
        color: RGB color in [0, 1]
        scale: Uniform render scale
        model: Opaque shape handle used by the renderer
    """
    return Body(
        transform=Transform2D(translation=vec2(position), scale=vec2((scale, scale))),
        rigid_body=RigidBody2D(velocity=vec2(velocity), mass=float(mass)),
        color=np.array(color, dtype=np.float64),
        model=model,
    )


def create_sample_point(
    position: Sequence[float],
    color: Sequence[float] = (1.0, 1.0, 1.0),
    model: Optional[Any] = None,
) -> Body:
    """Create a massless field sample point (unit mass, see SAMPLE_POINT_MASS)."""
    return create_body(
        position,
        mass=SAMPLE_POINT_MASS,
        color=color,
        scale=SAMPLE_POINT_SCALE,
        model=model,
    )
