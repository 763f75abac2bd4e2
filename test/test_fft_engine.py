import numpy as np
import pytest
from core.errors import InvalidInput
from core.fft_engine import (
    forward_transform, inverse_transform, split_planes, log_magnitude, phase_angle,
    normalize_minmax, to_display_dtype,
)


def _as_complex(F):
    return F[..., 0].astype(np.float64) + 1j * F[..., 1].astype(np.float64)


def test_forward_input_validation():
    with pytest.raises(InvalidInput):
        forward_transform(np.zeros((16, 16, 3)))
    with pytest.raises(InvalidInput):
        forward_transform(np.zeros((0, 4)))


def test_forward_layout_and_dtype():
    img = np.random.rand(12, 10)
    F = forward_transform(img)
    assert F.shape == (12, 10, 2)
    assert F.dtype == np.float32


def test_forward_matches_numpy_fft2():
    img = np.random.rand(16, 20)
    F = forward_transform(img)
    assert np.allclose(_as_complex(F), np.fft.fft2(img), rtol=1e-4, atol=1e-3)


def test_forward_does_not_modify_input():
    img = (np.random.rand(8, 8) * 255).astype(np.uint8)
    before = img.copy()
    forward_transform(img)
    assert np.array_equal(img, before)


def test_forward_parseval_unnormalized():
    img = np.random.rand(32, 24)
    F = _as_complex(forward_transform(img))
    energy_freq = np.sum(np.abs(F) ** 2)
    energy_space = img.size * np.sum(img.astype(np.float32).astype(np.float64) ** 2)
    assert np.isclose(energy_freq, energy_space, rtol=1e-4)


def test_forward_dc_is_sum():
    img = np.random.rand(10, 6)
    F = forward_transform(img)
    assert np.isclose(F[0, 0, 0], img.sum(), rtol=1e-5)
    assert abs(F[0, 0, 1]) < 1e-4


def test_inverse_is_unscaled():
    img = np.random.rand(8, 12)
    back = inverse_transform(forward_transform(img))
    real, imag = split_planes(back)
    assert np.allclose(real / img.size, img, atol=1e-5)
    assert np.max(np.abs(imag)) / img.size < 1e-5


def test_inverse_does_not_modify_input():
    F = forward_transform(np.random.rand(8, 8))
    before = F.copy()
    inverse_transform(F)
    assert np.array_equal(F, before)


def test_inverse_input_validation():
    with pytest.raises(InvalidInput):
        inverse_transform(np.zeros((8, 8)))
    with pytest.raises(InvalidInput):
        inverse_transform(np.zeros((8, 8, 3)))


def test_log_magnitude_basic():
    F = np.zeros((4, 4, 2), dtype=np.float32)
    F[0, 0] = (3.0, 4.0)
    mag = log_magnitude(F)
    assert mag.shape == (4, 4)
    assert np.isclose(mag[0, 0], np.log(6.0), rtol=1e-5)
    assert np.all(mag[1:, :] == 0)


def test_log_magnitude_non_negative():
    F = forward_transform(np.random.rand(32, 32))
    assert np.all(log_magnitude(F) >= 0)


def test_phase_of_positive_dc_is_zero():
    F = forward_transform(np.ones((8, 8)))
    assert phase_angle(F)[0, 0] == pytest.approx(0.0, abs=1e-3)


def test_normalize_formula():
    grid = np.array([[2.0, 4.0], [6.0, 10.0]])
    out = normalize_minmax(grid, 0, 255)
    assert np.allclose(out, [[0.0, 63.75], [127.5, 255.0]])


def test_normalize_custom_range():
    grid = np.array([[-1.0, 0.0, 1.0]])
    out = normalize_minmax(grid, 10, 20)
    assert np.allclose(out, [[10.0, 15.0, 20.0]])


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
@pytest.mark.parametrize("scale", [1e-6, 1.0, 1e6])
def test_normalize_within_bounds(seed, scale):
    rng = np.random.default_rng(seed)
    grid = (rng.standard_normal((17, 23)) - 0.3) * scale
    out = normalize_minmax(grid, 0, 255)
    assert out.min() >= 0.0 and out.max() <= 255.0
    assert out.min() == 0.0
    assert out.max() == pytest.approx(255.0)


def test_normalize_constant_is_midpoint():
    out = normalize_minmax(np.full((3, 5), 42.0), 0, 255)
    assert np.all(out == 127.5)
    out = normalize_minmax(np.zeros((2, 2)), -1, 1)
    assert np.all(out == 0.0)


def test_normalize_flat_rtol():
    grid = np.full((4, 4), 1000.0)
    grid[0, 0] += 1e-6
    assert np.all(normalize_minmax(grid, 0, 255, flat_rtol=1e-6) == 127.5)
    assert normalize_minmax(grid, 0, 255).max() == 255.0


def test_normalize_rejects_bad_input():
    with pytest.raises(InvalidInput):
        normalize_minmax(np.zeros((0, 3)))
    with pytest.raises(InvalidInput):
        normalize_minmax(np.array([[1.0, np.nan]]))
    with pytest.raises(InvalidInput):
        normalize_minmax(np.ones((2, 2)), 255, 0)


def test_to_display_dtype_rounds_and_clips():
    arr = np.array([-3.0, 0.4, 127.5, 254.6, 300.0])
    out = to_display_dtype(arr, np.uint8, 0, 255)
    assert out.dtype == np.uint8
    assert out.tolist() == [0, 0, 128, 255, 255]
    out_f = to_display_dtype(arr, np.float32, 0, 255)
    assert out_f.dtype == np.float32
    assert out_f[2] == 127.5
