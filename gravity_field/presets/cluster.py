"""Random cluster preset."""

from typing import Any, List, Optional

import numpy as np

from gravity_field.physics.body import Body, create_body
from gravity_field.presets.base import Preset


class ClusterPreset(Preset):
    """Bodies scattered at rest inside a disc."""

    def __init__(
        self,
        model: Optional[Any] = None,
        seed: Optional[int] = None,
        n_bodies: int = 3,
        radius: float = 0.7,
        min_mass: float = 0.5,
        max_mass: float = 1.5
    ):
        """Initialize cluster preset.

        Args:
            model: Shape handle attached to every body
            seed: Random seed
            n_bodies: Number of bodies
            radius: Radius of the disc bodies are placed in
            min_mass: Lower bound of the uniform mass distribution
            max_mass: Upper bound of the uniform mass distribution
        """
        super().__init__(model, seed)
        self.n_bodies = n_bodies
        self.radius = radius
        self.min_mass = min_mass
        self.max_mass = max_mass

    @property
    def name(self) -> str:
        return "cluster"

    def generate(self) -> List[Body]:
        rng = np.random.default_rng(self.seed)

        # sqrt keeps the areal density uniform
        r = self.radius * np.sqrt(rng.uniform(0.0, 1.0, self.n_bodies))
        theta = rng.uniform(0.0, 2.0 * np.pi, self.n_bodies)
        masses = rng.uniform(self.min_mass, self.max_mass, self.n_bodies)
        colors = rng.uniform(0.3, 1.0, (self.n_bodies, 3))

        bodies = []
        for i in range(self.n_bodies):
            position = (r[i] * np.cos(theta[i]), r[i] * np.sin(theta[i]))
            # Heavier bodies are drawn larger
            scale = 0.03 + 0.02 * masses[i] / self.max_mass
            bodies.append(create_body(
                position, mass=masses[i], color=colors[i], scale=scale, model=self.model
            ))
        return bodies
