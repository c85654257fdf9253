"""Animated GIF export of rendered frames."""

import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

logger = logging.getLogger(__name__)


class GIFExporter:
    """Collects every ``every``-th rendered frame and writes a looping GIF.

    Playback runs in simulation real time: each kept frame is shown for
    ``every / fps`` seconds, where ``fps`` is the rate frames are produced at.
    """

    def __init__(self, output_path: str, fps: int = 30, every: int = 1, max_frames: Optional[int] = None):
        """Initialize GIF exporter.

        Args:
            output_path: Output file path (.gif)
            fps: Rate at which the host loop produces frames
            every: Keep one frame out of this many
            max_frames: Stop collecting after this many frames (None = unlimited)
        """
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self.output_path = output_path
        self.fps = fps
        self.every = every
        self.max_frames = max_frames
        self.frames: List[np.ndarray] = []

    @property
    def duration(self) -> float:
        """Display time of one exported frame in seconds."""
        return self.every / self.fps

    def __len__(self) -> int:
        return len(self.frames)

    def wants_frame(self, frame_index: int) -> bool:
        """Whether the frame with this index should be captured at all."""
        if self.max_frames is not None and len(self.frames) >= self.max_frames:
            return False
        return frame_index % self.every == 0

    def add_frame(self, frame: np.ndarray):
        """Queue a copy of ``frame``.

        Args:
            frame: (H, W, 3) or (H, W, 4) image, uint8 or float in [0, 1].
                Alpha is dropped; all frames must share one size.
        """
        frame = np.asarray(frame)
        if frame.ndim != 3 or frame.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got shape {frame.shape}")
        frame = frame[:, :, :3]

        if frame.dtype != np.uint8:
            frame = np.round(np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)

        if self.frames and frame.shape != self.frames[0].shape:
            raise ValueError(f"Frame size {frame.shape} differs from the first frame {self.frames[0].shape}")

        self.frames.append(np.array(frame, copy=True))

    def export(self) -> Path:
        """Write all queued frames to the GIF file and return its path."""
        if not self.frames:
            raise ValueError("No frames to export")

        try:
            import imageio.v2 as imageio
        except ImportError:
            raise ImportError(
                "GIF export requires imageio. Install with: pip install gravity-field[export]"
            )

        path = Path(self.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        imageio.mimsave(path, self.frames, duration=self.duration, loop=0)
        logger.info("Wrote %d frames to %s", len(self.frames), path)
        return path
