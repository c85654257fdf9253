"""Force-field visualization on a set of sample points."""

import math
from dataclasses import dataclass
from typing import List, Protocol

import numpy as np

from gravity_field.physics.body import Body


class ForceLaw(Protocol):
    def compute_force(self, source: Body, target: Body) -> np.ndarray:
        """Return the force ``source`` exerts on ``target``."""


@dataclass(frozen=True)
class FieldScale:
    """Visual constants mapping force magnitude to field-line length.

    Lengths fall in [min_length, min_length + length_range]; the log curve
    saturates once ln(|F| + 1) reaches log_divisor.
    """
    min_length: float = 0.005
    length_range: float = 0.045
    log_divisor: float = 3.0


def field_line_length(magnitude: float, scale: FieldScale = FieldScale()) -> float:
    """Saturating log mapping from force magnitude to line length."""
    t = np.clip(np.log(magnitude + 1.0) / scale.log_divisor, 0.0, 1.0)
    return float(scale.min_length + scale.length_range * t)


class VectorFieldSampler:
    """Orients and stretches each sample point along the net force it feels.

    The sampler reuses the simulator's force law verbatim, so the accumulated
    vector is proportional to the sample point's own mass. Sample points are
    expected to carry unit mass (see ``create_sample_point``).
    """

    def __init__(self, scale: FieldScale = FieldScale()):
        self.scale = scale

    def update(self, simulator: ForceLaw, bodies: List[Body], sample_points: List[Body]):
        """Write rotation and x-scale of every sample point.

        Args:
            simulator: Anything exposing ``compute_force(source, target)``
            bodies: Field sources (read only)
            sample_points: Probes whose transforms are updated in place
        """
        for point in sample_points:
            direction = np.zeros(2)
            for body in bodies:
                direction += simulator.compute_force(body, point)

            point.transform.scale[0] = field_line_length(np.linalg.norm(direction), self.scale)
            point.transform.rotation = math.atan2(direction[1], direction[0])
