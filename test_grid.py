"""
Tests for the square sample grid.
"""

import numpy as np
import pytest

from fractal_terrain.engine import Grid


def test_grid_starts_zeroed():
    """New grids hold side_length^2 zero samples."""

    grid = Grid(5)

    assert grid.side_length == 5
    assert grid.samples.shape == (25,)
    assert grid.dtype == np.float64
    assert all(grid.get(x, y) == 0.0 for x, y in grid.enumerate())


def test_zero_side_length_rejected():
    with pytest.raises(ValueError):
        Grid(0)
    with pytest.raises(ValueError):
        Grid(-3)


def test_set_and_get_use_row_major_index():
    """(x, y) lives at x + y * side_length."""

    grid = Grid(3)
    grid.set(2, 1, 7.5)

    assert grid.get(2, 1) == 7.5
    assert grid.samples[2 + 1 * 3] == 7.5
    assert grid.get(1, 2) == 0.0


def test_out_of_range_access_raises():
    """Negative indices must not fall through to numpy's wraparound."""

    grid = Grid(3)

    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
        with pytest.raises(IndexError):
            grid.get(x, y)
        with pytest.raises(IndexError):
            grid.set(x, y, 1.0)


def test_enumerate_is_row_major_and_restartable():
    grid = Grid(3)

    first = list(grid.enumerate())
    second = list(grid.enumerate())

    assert first == second, "Two passes should visit the same coordinates in the same order"
    assert len(first) == 9
    assert len(set(first)) == 9
    assert first[:4] == [(0, 0), (1, 0), (2, 0), (0, 1)]


def test_from_rows_and_as_array():
    rows = [[0, 0, 10], [10, 12, 0], [0, 0, 10]]
    grid = Grid.from_rows(rows)

    assert grid.side_length == 3
    assert grid.get(2, 0) == 10
    assert grid.get(0, 1) == 10
    assert grid.get(1, 1) == 12
    np.testing.assert_array_equal(grid.as_array(), np.array(rows, dtype=np.float64))

    # as_array hands back a copy
    array = grid.as_array()
    array[0, 0] = 99
    assert grid.get(0, 0) == 0


def test_from_rows_rejects_non_square():
    with pytest.raises(ValueError):
        Grid.from_rows([[1, 2, 3], [4, 5, 6]])


def test_uint8_grid():
    grid = Grid(2, dtype=np.uint8)
    grid.set(1, 1, 255)

    assert grid.dtype == np.uint8
    assert grid.get(1, 1) == 255
