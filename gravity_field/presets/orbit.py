"""Central mass with a satellite on a circular orbit."""

from typing import Any, List, Optional

import numpy as np

from gravity_field.physics.body import Body, create_body
from gravity_field.presets.base import Preset


class OrbitPreset(Preset):
    """Heavy body at the origin and a light satellite on a circular orbit."""

    def __init__(
        self,
        model: Optional[Any] = None,
        seed: Optional[int] = None,
        gravitational_strength: float = 0.81,
        central_mass: float = 10.0,
        satellite_mass: float = 0.1,
        radius: float = 0.5
    ):
        """Initialize orbit preset.

        Args:
            model: Shape handle attached to the bodies
            seed: Unused, kept for a uniform preset signature
            gravitational_strength: G used to derive the circular velocity
            central_mass: Mass of the body at the origin
            satellite_mass: Mass of the orbiting body
            radius: Orbital radius
        """
        super().__init__(model, seed)
        self.gravitational_strength = gravitational_strength
        self.central_mass = central_mass
        self.satellite_mass = satellite_mass
        self.radius = radius

    @property
    def name(self) -> str:
        return "orbit"

    def generate(self) -> List[Body]:
        v_circ = np.sqrt(self.gravitational_strength * self.central_mass / self.radius)

        # Give the centre the opposite momentum so the pair does not drift.
        v_center = -v_circ * self.satellite_mass / self.central_mass

        center = create_body(
            (0.0, 0.0), velocity=(0.0, v_center), mass=self.central_mass,
            color=(1.0, 0.8, 0.2), scale=0.08, model=self.model
        )
        satellite = create_body(
            (self.radius, 0.0), velocity=(0.0, v_circ), mass=self.satellite_mass,
            color=(0.2, 0.6, 1.0), scale=0.03, model=self.model
        )
        return [center, satellite]
