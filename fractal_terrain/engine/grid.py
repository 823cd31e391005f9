"""
Square sample grid backing every heightmap.

Samples live in one contiguous numpy array; coordinate (x, y) maps to
index x + y * side_length.
"""

import numpy as np
from typing import Iterator, Sequence, Tuple


class Grid:
    """
    Fixed-size square buffer of numeric samples.

    Access is bounds-checked: wraparound is the caller's job, so
    out-of-range coordinates raise instead of silently using numpy's
    negative indexing.
    """

    def __init__(self, side_length: int, dtype=np.float64):
        side_length = int(side_length)
        if side_length < 1:
            raise ValueError(f"Grid side length must be at least 1, got {side_length}")

        self._side_length = side_length
        self.samples = np.zeros(side_length * side_length, dtype=dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]], dtype=np.float64) -> "Grid":
        """Build a grid from row-major nested sequences, rows[y][x]."""

        array = np.asarray(rows, dtype=dtype)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Rows must form a square table, got shape {array.shape}")

        grid = cls(array.shape[0], dtype=dtype)
        grid.samples[:] = array.reshape(-1)
        return grid

    @property
    def side_length(self) -> int:
        return self._side_length

    @property
    def dtype(self):
        return self.samples.dtype

    def _index(self, x: int, y: int) -> int:
        size = self._side_length
        if not (0 <= x < size and 0 <= y < size):
            raise IndexError(f"Coordinate ({x}, {y}) outside grid of side {size}")
        return x + y * size

    def get(self, x: int, y: int):
        return self.samples[self._index(x, y)]

    def set(self, x: int, y: int, value) -> None:
        self.samples[self._index(x, y)] = value

    def enumerate(self) -> Iterator[Tuple[int, int]]:
        """
        Yield every (x, y) in row-major order; each call starts a new pass.

        For whole-grid visitors that walk coordinates rather than storage;
        bulk numeric passes such as normalize() read ``samples`` directly.
        """

        size = self._side_length
        for y in range(size):
            for x in range(size):
                yield x, y

    def as_array(self) -> np.ndarray:
        """Copy of the samples shaped (side_length, side_length), indexed [y, x]."""
        return self.samples.reshape(self._side_length, self._side_length).copy()

    def __repr__(self) -> str:
        return f"Grid(side_length={self._side_length}, dtype={self.samples.dtype})"
