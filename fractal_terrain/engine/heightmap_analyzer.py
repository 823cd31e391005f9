"""
Summary statistics for generated heightmaps.
"""

import numpy as np
from typing import Dict, Any

from .grid import Grid


def terrain_statistics(grid: Grid) -> Dict[str, Any]:
    """Calculate elevation statistics and a mean-gradient roughness figure."""

    heightmap = grid.as_array().astype(np.float64)

    # np.gradient needs at least two samples per axis
    if grid.side_length > 1:
        grad_y, grad_x = np.gradient(heightmap)
        roughness = float(np.mean(np.abs(grad_x)) + np.mean(np.abs(grad_y)))
    else:
        roughness = 0.0

    return {
        "shape": list(heightmap.shape),
        "min_height": float(heightmap.min()),
        "max_height": float(heightmap.max()),
        "mean_height": float(heightmap.mean()),
        "std_height": float(heightmap.std()),
        "height_range": float(heightmap.max() - heightmap.min()),
        "roughness": roughness,
    }
