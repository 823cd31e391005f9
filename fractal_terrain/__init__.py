"""
Fractal terrain: diamond-square heightmap generation.

Generates tileable heightmaps with midpoint displacement and rescales
them into 8-bit grids ready for image output.
"""

from .engine import Grid, DiamondSquare, construct, normalize
from .procgen import ParameterSpec, GENERATION_PARAMS

__all__ = [
    "Grid",
    "DiamondSquare",
    "construct",
    "normalize",
    "ParameterSpec",
    "GENERATION_PARAMS",
]
