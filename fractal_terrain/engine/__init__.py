"""
Diamond-square heightmap engine.

This package provides:
- Grid: square sample buffer with bounds-checked access
- DiamondSquare: midpoint-displacement generator over a Grid
- normalize: rescaling of float heightmaps into 8-bit grids
"""

from .grid import Grid
from .diamond_square import (
    DiamondSquare, construct, sample, square_sample, diamond_sample, side_length_for
)
from .normalizer import normalize
from .heightmap_analyzer import terrain_statistics

__all__ = [
    "Grid",
    "DiamondSquare",
    "construct",
    "sample",
    "square_sample",
    "diamond_sample",
    "side_length_for",
    "normalize",
    "terrain_statistics",
]
