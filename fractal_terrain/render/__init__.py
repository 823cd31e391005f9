"""
Image output for generated heightmaps.
"""

from .image_writer import to_image, save_heightmap, FORMATS

__all__ = ["to_image", "save_heightmap", "FORMATS"]
