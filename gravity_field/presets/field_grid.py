"""Regular grid of field-line sample points covering [-1, 1]^2."""

from typing import Any, List, Optional

from gravity_field.physics.body import Body, create_sample_point


def make_vector_field(grid_count: int = 40, model: Optional[Any] = None) -> List[Body]:
    """Create ``grid_count**2`` sample points at cell centres.

    Args:
        grid_count: Number of cells per axis
        model: Shape handle for the field lines

    Returns:
        Sample points ordered with the x index outermost
    """
    points = []
    for i in range(grid_count):
        for j in range(grid_count):
            x = -1.0 + (i + 0.5) * 2.0 / grid_count
            y = -1.0 + (j + 0.5) * 2.0 / grid_count
            points.append(create_sample_point((x, y), model=model))
    return points
