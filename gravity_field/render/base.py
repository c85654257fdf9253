"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from gravity_field.physics.body import Body


class Renderer(ABC):
    """Abstract base class for renderers.

    Renderers only read transforms, colors and models; they are called
    after the frame's physics and field updates have returned.
    """

    @abstractmethod
    def render(self, bodies: List[Body], sample_points: List[Body]) -> bool:
        """Render current frame.

        Args:
            bodies: Simulated bodies
            sample_points: Field-line sample points, drawn over the bodies

        Returns:
            True if a frame was drawn and can be captured
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
