"""2D renderer using matplotlib."""

import time
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure

from gravity_field.physics.body import Body
from gravity_field.render.base import Renderer
from gravity_field.render.shapes import transformed_vertices


def _collect_triangles(objects: List[Body]) -> Tuple[np.ndarray, np.ndarray]:
    """Flatten the transformed models of ``objects`` into triangles and colors."""
    triangles = []
    colors = []
    for obj in objects:
        if obj.model is None:
            continue
        tris = transformed_vertices(obj).reshape(-1, 3, 2)
        triangles.append(tris)
        colors.append(np.repeat(np.clip(obj.color, 0.0, 1.0)[np.newaxis, :], len(tris), axis=0))
    if not triangles:
        return np.zeros((0, 3, 2)), np.zeros((0, 3))
    return np.concatenate(triangles), np.concatenate(colors)


class Renderer2D(Renderer):
    """Draws every object's model as filled triangles in the [-1, 1] square."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        interactive: bool = True,
        target_fps: float = 60.0,
        background: str = 'black'
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            interactive: Show a window and limit the frame rate; False renders off-screen
            target_fps: Maximum redraw rate when interactive
            background: Axes background color
        """
        self.figsize = figsize
        self.dpi = dpi
        self.interactive = interactive
        self.background = background

        self.fig: Optional[Figure] = None
        self.ax = None
        self.field_collection: Optional[PolyCollection] = None
        self.body_collection: Optional[PolyCollection] = None
        self.initialized = False
        self.window_closed = False

        self.frame_time = 1.0 / target_fps
        self.last_render_time = 0.0

    def _initialize(self):
        """Initialize plot if not already done."""
        if self.initialized:
            return
        if self.interactive:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        else:
            # No pyplot state: the figure is never shown and needs no closing hook
            self.fig = Figure(figsize=self.figsize, dpi=self.dpi)
            FigureCanvasAgg(self.fig)
            self.ax = self.fig.add_subplot(111)
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self.ax.set_facecolor(self.background)
        self.ax.set_xlim(-1.0, 1.0)
        self.ax.set_ylim(-1.0, 1.0)
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()
        self.fig.patch.set_facecolor(self.background)

        # Field lines are drawn over the bodies
        self.body_collection = PolyCollection([], linewidths=0, zorder=1)
        self.field_collection = PolyCollection([], linewidths=0, zorder=2)
        self.ax.add_collection(self.body_collection)
        self.ax.add_collection(self.field_collection)

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not self.interactive:
            return True
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.window_closed = True
            self.fig = None
            self.ax = None
            return False
        return True

    @property
    def is_open(self) -> bool:
        """False once the user has closed the window."""
        if self.window_closed:
            return False
        return not self.initialized or self._is_figure_open()

    def render(self, bodies: List[Body], sample_points: List[Body]) -> bool:
        """Render current frame.

        Returns:
            True if the frame was drawn; False when it was skipped by the
            frame-rate limit or the window has been closed
        """
        if not self.is_open:
            return False

        if self.interactive:
            current_time = time.time()
            if self.initialized and (current_time - self.last_render_time) < self.frame_time:
                return False
            self.last_render_time = current_time

        self._initialize()

        for collection, objects in ((self.field_collection, sample_points), (self.body_collection, bodies)):
            triangles, colors = _collect_triangles(objects)
            collection.set_verts(triangles)
            if len(colors):
                collection.set_facecolor(colors)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)
        return True

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return np.ascontiguousarray(rgba[:, :, :3])

    def clear(self):
        """Clear the renderer."""
        if self.field_collection is not None:
            self.field_collection.set_verts([])
            self.body_collection.set_verts([])

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            if self.interactive:
                plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.field_collection = None
            self.body_collection = None
            self.initialized = False
