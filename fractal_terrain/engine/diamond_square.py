"""
Diamond-square heightmap generator.

Seeds the four corners of a (2^detail + 1) sided grid, then walks down
through halving feature sizes. Each level fills cell centres (square step)
and then edge midpoints (diamond step), adding a random displacement that
shrinks with the feature size. Neighbour lookups wrap around the grid
edges, so the result tiles seamlessly.
"""

import numpy as np
from typing import Dict, Optional

from .grid import Grid
from ..procgen.grammar import GENERATION_PARAMS


def side_length_for(detail: int) -> int:
    """Grid side length for a detail level: 2^detail + 1."""

    if isinstance(detail, bool) or int(detail) != detail:
        raise ValueError(f"Detail level must be an integer, got {detail!r}")
    detail = int(detail)
    if detail < 0:
        raise ValueError(f"Detail level must be non-negative, got {detail}")
    return 2 ** detail + 1


def sample(grid: Grid, x: int, y: int) -> float:
    """Read (x, y) with toroidal wraparound."""

    size = grid.side_length
    # Python's % already returns a non-negative result for a positive modulus
    return grid.get(x % size, y % size)


def square_sample(grid: Grid, x: int, y: int, displacement: float, half: int) -> None:
    """Set (x, y) to the mean of its four diagonal corners plus displacement."""

    # a   b
    #   x
    # c   d
    a = sample(grid, x - half, y - half)
    b = sample(grid, x + half, y - half)
    c = sample(grid, x - half, y + half)
    d = sample(grid, x + half, y + half)
    grid.set(x, y, (a + b + c + d) / 4.0 + displacement)


def diamond_sample(grid: Grid, x: int, y: int, displacement: float, half: int) -> None:
    """Set (x, y) to the mean of its four orthogonal neighbours plus displacement."""

    #   a
    # b x c
    #   d
    a = sample(grid, x, y - half)
    b = sample(grid, x - half, y)
    c = sample(grid, x + half, y)
    d = sample(grid, x, y + half)
    grid.set(x, y, (a + b + c + d) / 4.0 + displacement)


class DiamondSquare:
    """
    Midpoint-displacement heightmap generator.

    Args:
        parameters: Optional overrides for ``roughness`` and ``seed_value``;
            values are clamped to the ranges in ``GENERATION_PARAMS``.
        random_source: Any object with a ``random()`` method returning
            floats in [0, 1). Defaults to a numpy Generator.
        seed: Seed for the default numpy Generator. Ignored when
            ``random_source`` is given.
    """

    def __init__(
        self,
        parameters: Optional[Dict[str, float]] = None,
        random_source=None,
        seed: Optional[int] = None
    ):
        params = GENERATION_PARAMS.extract_params(parameters)
        self.roughness = params["roughness"]
        self.seed_value = params["seed_value"]

        if random_source is None:
            random_source = np.random.default_rng(seed)
        self.random_source = random_source

    def construct(self, detail: int) -> Grid:
        """
        Generate a heightmap.

        Args:
            detail: Non-negative detail level; the grid side is 2^detail + 1

        Returns:
            Grid of float64 samples, every cell written
        """

        grid = Grid(side_length_for(detail))
        last = grid.side_length - 1

        for x in (0, last):
            for y in (0, last):
                grid.set(x, y, self.seed_value)

        feature_size = last
        while feature_size // 2 >= 1:
            self.square_step(grid, feature_size)
            self.diamond_step(grid, feature_size)
            feature_size //= 2

        return grid

    def square_step(self, grid: Grid, feature_size: int) -> None:
        """Fill the centre of every feature_size cell."""

        half = feature_size // 2
        last = grid.side_length - 1
        for y in range(half, last, feature_size):
            for x in range(half, last, feature_size):
                square_sample(grid, x, y, self._displacement(half), half)

    def diamond_step(self, grid: Grid, feature_size: int) -> None:
        """Fill the midpoint of every edge between already-set points."""

        half = feature_size // 2
        last = grid.side_length - 1
        for y in range(0, last + 1, half):
            for x in range((y + half) % feature_size, last + 1, feature_size):
                diamond_sample(grid, x, y, self._displacement(half), half)

    def _displacement(self, half: int) -> float:
        # Uniform in [-1, 1), scaled down with the feature size
        value = float(self.random_source.random())
        return (2.0 * value - 1.0) * self.roughness * half


def construct(
    detail: int,
    parameters: Optional[Dict[str, float]] = None,
    random_source=None,
    seed: Optional[int] = None
) -> Grid:
    """Generate a heightmap with a one-off DiamondSquare generator."""

    generator = DiamondSquare(parameters=parameters, random_source=random_source, seed=seed)
    return generator.construct(detail)
