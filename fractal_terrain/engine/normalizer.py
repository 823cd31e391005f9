"""
Rescale float heightmaps into 8-bit grids.
"""

import numpy as np

from .grid import Grid


def normalize(grid: Grid) -> Grid:
    """
    Affinely rescale samples to [0, 255] using the observed min and max.

    Args:
        grid: Grid of float samples (left untouched)

    Returns:
        New uint8 Grid of the same side length. A grid whose samples are
        all equal maps to all zeros.
    """

    values = grid.samples
    min_value = values.min()
    max_value = values.max()

    result = Grid(grid.side_length, dtype=np.uint8)
    value_range = max_value - min_value
    if value_range == 0:
        return result

    scaled = (values - min_value) / value_range * 255.0
    result.samples[:] = np.clip(scaled, 0.0, 255.0).astype(np.uint8)
    return result
