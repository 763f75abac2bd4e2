import numpy as np
import pytest
from core.quadrants import shift_quadrants


def test_shift_is_involution_on_even_grid():
    grid = np.arange(6 * 8).reshape(6, 8)
    once = shift_quadrants(grid)
    assert not np.array_equal(once, grid)
    assert np.array_equal(shift_quadrants(once), grid)


def test_shift_swaps_diagonal_quadrants():
    grid = np.zeros((4, 4), dtype=int)
    grid[:2, :2] = 0
    grid[:2, 2:] = 1
    grid[2:, :2] = 2
    grid[2:, 2:] = 3
    out = shift_quadrants(grid)
    assert np.all(out[:2, :2] == 3)
    assert np.all(out[:2, 2:] == 2)
    assert np.all(out[2:, :2] == 1)
    assert np.all(out[2:, 2:] == 0)


def test_shift_matches_numpy_fftshift_for_even_dims():
    grid = np.random.rand(8, 12)
    assert np.array_equal(shift_quadrants(grid), np.fft.fftshift(grid))


def test_shift_moves_dc_to_center():
    grid = np.zeros((10, 6))
    grid[0, 0] = 1.0
    out = shift_quadrants(grid)
    assert out[5, 3] == 1.0
    assert out.sum() == 1.0


def test_odd_dims_are_cropped():
    grid = np.arange(7 * 9).reshape(7, 9)
    out = shift_quadrants(grid)
    assert out.shape == (6, 8)
    assert np.array_equal(shift_quadrants(out), grid[:6, :8])


def test_input_untouched():
    grid = np.arange(16.0).reshape(4, 4)
    before = grid.copy()
    out = shift_quadrants(grid)
    out[0, 0] = -1
    assert np.array_equal(grid, before)


def test_multichannel_planes_carried_along():
    grid = np.random.rand(4, 6, 2)
    out = shift_quadrants(grid)
    assert out.shape == (4, 6, 2)
    assert np.array_equal(out[..., 0], shift_quadrants(grid[..., 0]))
    assert np.array_equal(out[..., 1], shift_quadrants(grid[..., 1]))


def test_single_row_swaps_halves():
    grid = np.arange(6).reshape(1, 6)
    out = shift_quadrants(grid)
    assert np.array_equal(out, [[3, 4, 5, 0, 1, 2]])


def test_single_column_swaps_halves():
    grid = np.arange(5).reshape(5, 1)
    out = shift_quadrants(grid)
    assert out.shape == (4, 1)
    assert np.array_equal(out.ravel(), [2, 3, 0, 1])


def test_single_cell():
    out = shift_quadrants(np.array([[7.0]]))
    assert np.array_equal(out, [[7.0]])


def test_rejects_1d():
    with pytest.raises(ValueError):
        shift_quadrants(np.arange(4))
