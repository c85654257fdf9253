"""Triangle-list shape models referenced by bodies and sample points."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from gravity_field.physics.body import Body


@dataclass(frozen=True)
class Shape:
    """A named triangle list in model space, vertices of shape (3k, 2)."""
    name: str
    vertices: np.ndarray

    @property
    def triangles(self) -> np.ndarray:
        return self.vertices.reshape(-1, 3, 2)


def square_shape(offset: Sequence[float] = (0.0, 0.0)) -> Shape:
    """Unit square centred on ``offset``.

    Field lines use offset (0.5, 0) so that rotation pivots at the line's
    start rather than its middle.
    """
    vertices = np.array([
        [-0.5, -0.5],
        [0.5, 0.5],
        [-0.5, 0.5],
        [-0.5, -0.5],
        [0.5, -0.5],
        [0.5, 0.5],
    ])
    return Shape("square", vertices + np.asarray(offset, dtype=np.float64))


def circle_shape(num_sides: int = 64) -> Shape:
    """Unit circle as a triangle fan around the origin."""
    angles = np.arange(num_sides) * 2.0 * np.pi / num_sides
    rim = np.stack([np.cos(angles), np.sin(angles)], axis=1)
    nxt = np.roll(rim, -1, axis=0)
    center = np.zeros_like(rim)
    vertices = np.stack([rim, nxt, center], axis=1).reshape(-1, 2)
    return Shape("circle", vertices)


def transformed_vertices(body: Body) -> np.ndarray:
    """World-space vertices of ``body.model`` under the body's transform."""
    m = body.transform.mat2()
    return body.model.vertices @ m.T + body.transform.translation
