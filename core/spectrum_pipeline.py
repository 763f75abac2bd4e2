"""
core/spectrum_pipeline.py

Spectrum visualization and reconstruction pipeline for grayscale images.
Implements the canonical OpenCV DFT demo flow:
  1) pad to optimal DFT size (zeros at bottom/right)
  2) forward DFT (float32 real plane + zero imaginary plane)
  3) magnitude -> log(1 + m)
  4) quadrant reorder (DC to centre, odd axes cropped)
  5) min-max normalize to the display range
  6) inverse DFT -> real plane -> min-max normalize -> display dtype

API:
- pad_for_transform(sample_grid)
- forward_transform(padded_grid)
- compute_display_magnitude(complex_grid, target_min=0, target_max=255, dtype=np.uint8)
- inverse_transform_and_reconstruct(complex_grid, target_min=0, target_max=255, dtype=np.uint8, original_shape=None)
- run_spectrum_pipeline(sample_grid, crop_to_input=False, return_intermediates=False)

Normalization convention: neither the forward nor the inverse transform is scaled.
The H*W factor picked up by a round trip is removed by the min-max rescale for display,
so reconstructions match the input in relative terms, not in absolute sample values.

If return_intermediates=True, run_spectrum_pipeline returns (magnitude, restored, intermediates)
where intermediates contains keys: 'padded', 'complex', 'log_magnitude', 'shifted'.
"""

from typing import Any, Optional, Tuple
import warnings
import numpy as np

from . import config
from .errors import InvalidInput
from .fft_engine import (
    forward_transform,
    inverse_transform,
    log_magnitude,
    normalize_minmax,
    split_planes,
    to_display_dtype,
)
from .padding import pad_for_transform
from .quadrants import shift_quadrants

__all__ = [
    "pad_for_transform",
    "forward_transform",
    "compute_display_magnitude",
    "inverse_transform_and_reconstruct",
    "run_spectrum_pipeline",
]


def _display_from_shifted(shifted, target_min, target_max, dtype):
    scaled = normalize_minmax(shifted, target_min, target_max)
    return to_display_dtype(scaled, dtype, target_min, target_max)


def compute_display_magnitude(
    complex_grid: np.ndarray,
    target_min: float = config.DISPLAY_MIN,
    target_max: float = config.DISPLAY_MAX,
    dtype=config.DISPLAY_DTYPE,
) -> np.ndarray:
    """
    Turn a complex grid into a displayable log-magnitude spectrum.

    Parameters
    ----------
    complex_grid : np.ndarray
        (H, W, 2) output of forward_transform.
    target_min, target_max : float
        Display range of the result.
    dtype :
        Output sample type. Integer types are rounded half-to-even.

    Returns
    -------
    np.ndarray
        Array of shape (H & -2, W & -2) with the DC term at the centre.
        An all-zero complex grid gives the range midpoint everywhere.
    """
    return _display_from_shifted(shift_quadrants(log_magnitude(complex_grid)), target_min, target_max, dtype)


def _check_imag_residual(real: np.ndarray, imag: np.ndarray, tol: float) -> None:
    span = float(real.max() - real.min())
    residual = float(np.max(np.abs(imag)))
    scale = max(span, float(np.max(np.abs(real))), 1.0)
    if residual / scale > tol:
        warnings.warn(
            f"Inverse DFT has non-negligible imaginary component (max abs = {residual:.6g}, "
            f"relative = {residual / scale:.3g}). Using the real plane only.",
            RuntimeWarning,
        )


def inverse_transform_and_reconstruct(
    complex_grid: np.ndarray,
    target_min: float = config.DISPLAY_MIN,
    target_max: float = config.DISPLAY_MAX,
    dtype=config.DISPLAY_DTYPE,
    original_shape: Optional[Tuple[int, int]] = None,
) -> np.ndarray:
    """
    Reconstruct a displayable grayscale grid from a complex grid.

    The inverse DFT is taken without scaling, the real plane is kept, optionally
    cropped back to `original_shape` (the size before padding), min-max normalized
    into the display range and cast to `dtype`. The complex grid is not modified.
    """
    restored = inverse_transform(complex_grid)
    real, imag = split_planes(restored)
    _check_imag_residual(real, imag, config.IMAG_RESIDUAL_TOL)

    if original_shape is not None:
        rows, cols = int(original_shape[0]), int(original_shape[1])
        if rows < 1 or cols < 1 or rows > real.shape[0] or cols > real.shape[1]:
            raise InvalidInput(
                f"original_shape {original_shape} does not fit inside the {real.shape} grid."
            )
        real = real[:rows, :cols]

    scaled = normalize_minmax(real, target_min, target_max, flat_rtol=config.FLAT_RTOL)
    return to_display_dtype(scaled, dtype, target_min, target_max)


def run_spectrum_pipeline(
    sample_grid: np.ndarray,
    *,
    crop_to_input: bool = False,
    return_intermediates: bool = False,
) -> Any:
    """
    Run the whole pipeline on one grayscale grid.

    Returns (magnitude, restored) or (magnitude, restored, intermediates) when
    return_intermediates=True. With crop_to_input=True the reconstruction is cut
    back to the size of `sample_grid`.
    """
    padded = pad_for_transform(sample_grid)
    F = forward_transform(padded)
    log_mag = log_magnitude(F)
    shifted = shift_quadrants(log_mag)
    magnitude = _display_from_shifted(shifted, config.DISPLAY_MIN, config.DISPLAY_MAX, config.DISPLAY_DTYPE)
    restored = inverse_transform_and_reconstruct(
        F, original_shape=np.shape(sample_grid) if crop_to_input else None
    )

    if return_intermediates:
        intermediates = {
            "padded": padded,
            "complex": F,
            "log_magnitude": log_mag,
            "shifted": shifted,
        }
        return magnitude, restored, intermediates

    return magnitude, restored
