"""Base class for preset scenes."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from gravity_field.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenes."""

    def __init__(self, model: Optional[Any] = None, seed: Optional[int] = None):
        """Initialize preset.

        Args:
            model: Shape handle attached to every generated body
            seed: Random seed for reproducibility
        """
        self.model = model
        self.seed = seed

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate the initial bodies."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
