"""
Generation parameters and their valid ranges.
"""

from .grammar import ParameterSpec, GENERATION_PARAMS

__all__ = ["ParameterSpec", "GENERATION_PARAMS"]
