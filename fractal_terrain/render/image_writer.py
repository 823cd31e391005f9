"""
Write heightmap grids to image files.
"""

import numpy as np
from pathlib import Path
from PIL import Image

from ..engine.grid import Grid
from ..engine.normalizer import normalize

FORMATS = ("png", "png16", "npy")


def to_image(grid: Grid) -> Image.Image:
    """Grayscale Pillow image (mode L); non-uint8 grids are normalized first."""

    if grid.dtype != np.uint8:
        grid = normalize(grid)
    return Image.fromarray(grid.as_array())


def save_heightmap(grid: Grid, output_path, format: str = "png") -> Path:
    """
    Save heightmap to file.

    Args:
        grid: Heightmap grid, raw floats or already normalized
        output_path: Output file path
        format: File format ("png", "png16", "npy")

    Returns:
        Path that was written
    """

    if format not in FORMATS:
        raise ValueError(f"Unsupported format: {format}")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if format == "png":
        to_image(grid).save(output_path, format="PNG")

    elif format == "png16":
        heightmap = grid.as_array().astype(np.float64)
        # Normalize to [0, 65535] for 16-bit PNG; flat maps stay at zero
        heightmap_16bit = np.zeros(heightmap.shape, dtype=np.uint16)
        value_range = heightmap.max() - heightmap.min()
        if value_range > 0:
            normalized = (heightmap - heightmap.min()) / value_range
            heightmap_16bit[:] = np.clip(normalized * 65535.0, 0.0, 65535.0).astype(np.uint16)
        Image.fromarray(heightmap_16bit).save(output_path, format="PNG")

    else:
        # np.save appends .npy unless the path already ends with it
        with open(output_path, "wb") as f:
            np.save(f, grid.as_array())

    return output_path
