"""Two bodies passing each other in opposite directions."""

from typing import List

from gravity_field.physics.body import Body, create_body
from gravity_field.presets.base import Preset

RED = (1.0, 0.0, 0.0)
BLUE = (0.0, 0.0, 1.0)


class BinaryPreset(Preset):
    """Red and blue unit masses on crossing paths."""

    @property
    def name(self) -> str:
        return "binary"

    def generate(self) -> List[Body]:
        red = create_body((0.5, 0.5), velocity=(-0.5, 0.0), color=RED, scale=0.05, model=self.model)
        blue = create_body((-0.45, -0.25), velocity=(0.5, 0.0), color=BLUE, scale=0.05, model=self.model)
        return [red, blue]
