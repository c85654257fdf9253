"""Host loop tying physics, field sampling and rendering together."""

import logging
from typing import Callable, Optional

from gravity_field.io.gif_exporter import GIFExporter
from gravity_field.physics.simulator import GravitySimulator
from gravity_field.physics.vector_field import FieldScale, VectorFieldSampler
from gravity_field.presets import get_preset, make_vector_field
from gravity_field.render.base import Renderer
from gravity_field.render.shapes import circle_shape, square_shape
from gravity_field.utils.config import Config

logger = logging.getLogger(__name__)


class FieldApp:
    """Owns the bodies and field samples and advances them frame by frame.

    Each frame runs the physics update, then the field sampling, then the
    renderer, strictly in that order: the field must reflect this frame's
    positions.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        renderer: Optional[Renderer] = None,
        gif_exporter: Optional[GIFExporter] = None
    ):
        """Initialize app.

        Args:
            config: Simulation configuration (defaults used if None)
            renderer: Optional render collaborator
            gif_exporter: Optional exporter fed with captured frames; needs a renderer
        """
        self.config = config or Config()
        self.config.validate()
        self.renderer = renderer
        self.gif_exporter = gif_exporter

        self.simulator = GravitySimulator(self.config.gravitational_strength)
        self.sampler = VectorFieldSampler(FieldScale(
            min_length=self.config.field_min_length,
            length_range=self.config.field_length_range,
            log_divisor=self.config.field_log_divisor,
        ))

        self.body_model = circle_shape(64)
        # Offset so field lines rotate about their start point
        self.line_model = square_shape((0.5, 0.0))

        preset = get_preset(
            self.config.preset,
            model=self.body_model,
            seed=self.config.seed,
            **self._preset_kwargs()
        )
        self.preset_name = preset.name
        self.bodies = preset.generate()
        self.vector_field = make_vector_field(self.config.grid_count, model=self.line_model)
        self.sampler.update(self.simulator, self.bodies, self.vector_field)

        self.time = 0.0
        self.frame_count = 0
        self.paused = False
        self.on_frame_callback: Optional[Callable] = None

        logger.info(
            "Scene '%s': %d bodies, %d field samples, G=%g, dt=%g, substeps=%d",
            self.preset_name, len(self.bodies), len(self.vector_field),
            self.config.gravitational_strength, self.config.dt, self.config.substeps
        )

    def _preset_kwargs(self) -> dict:
        kwargs = dict(self.config.preset_params)
        name = self.config.preset.lower()
        if name == 'cluster':
            kwargs.setdefault('n_bodies', self.config.n_bodies)
        elif name == 'orbit':
            kwargs.setdefault('gravitational_strength', self.config.gravitational_strength)
        return kwargs

    def step_frame(self):
        """Advance one frame: physics, field sampling, then rendering."""
        if self.paused:
            return

        self.simulator.update(self.bodies, self.config.dt, self.config.substeps)
        self.sampler.update(self.simulator, self.bodies, self.vector_field)

        if self.renderer is not None:
            drawn = self.renderer.render(self.bodies, self.vector_field)
            # A closed or rate-limited window has nothing new to capture
            if drawn and self.gif_exporter is not None and self.gif_exporter.wants_frame(self.frame_count):
                self.gif_exporter.add_frame(self.renderer.capture_frame())

        self.time += self.config.dt
        self.frame_count += 1

        if self.on_frame_callback:
            self.on_frame_callback(self)

    def run(self, n_frames: int):
        """Run the loop for ``n_frames`` frames.

        Args:
            n_frames: Number of frames to advance
        """
        for _ in range(n_frames):
            if self.paused:
                logger.info("Paused at frame %d", self.frame_count)
                return
            self.step_frame()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def close(self):
        """Release the renderer."""
        if self.renderer is not None:
            self.renderer.close()
