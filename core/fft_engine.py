'''
FFT engine helpers built on OpenCV.

Complex grids use the OpenCV two-plane layout: an (H, W, 2) float32 array with
the real part in plane 0 and the imaginary part in plane 1.

Functions:
- forward_transform: 2D DFT of a real grid (unnormalized), returns a complex grid
- inverse_transform: inverse 2D DFT of a complex grid (unscaled), returns a complex grid
- split_planes: (real, imag) views of a complex grid
- log_magnitude: log(1 + |F|) for visualization
- phase_angle: per-cell phase in radians
- normalize_minmax: min-max rescale into a target range
- to_display_dtype: clip and cast to the display sample type
'''

import numpy as np
import cv2
from typing import Tuple

from .config import WORKING_DTYPE
from .errors import InvalidInput


def _validate_complex_grid(complex_grid: np.ndarray) -> np.ndarray:
    arr = np.asarray(complex_grid)
    if arr.ndim != 3 or arr.shape[2] != 2:
        raise InvalidInput("Expected a complex grid of shape (H, W, 2).")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidInput("Complex grid has a zero-sized axis.")
    return np.ascontiguousarray(arr, dtype=WORKING_DTYPE)


def forward_transform(padded_grid: np.ndarray) -> np.ndarray:
    """
    Compute the 2D DFT of a real grid.
    The grid is converted to float32 and merged with an all-zero imaginary plane;
    the caller's array is never written to. No scaling is applied, so
    sum(|F|^2) == H * W * sum(x^2).
    """
    grid = np.asarray(padded_grid)
    if grid.ndim != 2:
        raise InvalidInput("forward_transform expects a 2D grid.")
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        raise InvalidInput("forward_transform got a zero-sized grid.")
    real = grid.astype(WORKING_DTYPE)
    planes = [real, np.zeros_like(real)]
    complex_grid = cv2.merge(planes)
    complex_grid = cv2.dft(complex_grid)
    # cv2 drops the channel axis for single-element grids
    return complex_grid.reshape(real.shape + (2,))


def inverse_transform(complex_grid: np.ndarray) -> np.ndarray:
    """
    Inverse 2D DFT without the 1/(H*W) factor. Returns a new complex grid.
    """
    src = _validate_complex_grid(complex_grid)
    restored = cv2.idft(src)
    return restored.reshape(src.shape)


def split_planes(complex_grid: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Split a complex grid into its (real, imag) planes."""
    src = _validate_complex_grid(complex_grid)
    return src[..., 0], src[..., 1]


def log_magnitude(complex_grid: np.ndarray) -> np.ndarray:
    """
    Return log(1 + sqrt(re^2 + im^2)) per cell.
    Adding 1 keeps zero-magnitude cells at 0 instead of -inf.
    """
    real, imag = split_planes(complex_grid)
    mag = cv2.magnitude(np.ascontiguousarray(real), np.ascontiguousarray(imag))
    mag = mag.reshape(real.shape)
    mag += 1.0
    return np.log(mag)


def phase_angle(complex_grid: np.ndarray) -> np.ndarray:
    """Per-cell phase in radians, range [0, 2*pi)."""
    real, imag = split_planes(complex_grid)
    phase = cv2.phase(np.ascontiguousarray(real), np.ascontiguousarray(imag))
    return phase.reshape(real.shape)


def normalize_minmax(
    grid: np.ndarray,
    target_min: float = 0.0,
    target_max: float = 255.0,
    flat_rtol: float = 0.0,
) -> np.ndarray:
    """
    Linearly rescale a real grid into [target_min, target_max] using its own min and max:

        out = (x - min) * (target_max - target_min) / (max - min) + target_min

    Parameters
    ----------
    grid : np.ndarray
        Finite real values, any shape, at least one element.
    target_min, target_max : float
        Output range. target_max must be >= target_min.
    flat_rtol : float
        A grid whose range (max - min) is <= flat_rtol * max(|min|, |max|) is treated as
        constant. With the default 0.0 only an exactly constant grid qualifies.

    Returns
    -------
    np.ndarray
        float64 array of the same shape. Constant grids map to (target_min + target_max) / 2.
    """
    a = np.asarray(grid, dtype=np.float64)
    if a.size == 0:
        raise InvalidInput("Cannot normalize an empty grid.")
    if not np.all(np.isfinite(a)):
        raise InvalidInput("Cannot normalize a grid containing NaN or inf.")
    tmin, tmax = float(target_min), float(target_max)
    if tmax < tmin:
        raise InvalidInput(f"target_max ({tmax}) must be >= target_min ({tmin}).")

    vmin = float(a.min())
    vmax = float(a.max())
    span = vmax - vmin
    scale = max(abs(vmin), abs(vmax))
    if span == 0.0 or span <= flat_rtol * scale:
        return np.full(a.shape, (tmin + tmax) / 2.0, dtype=np.float64)

    out = (a - vmin) * ((tmax - tmin) / span) + tmin
    # rounding can push the extremes a hair past the target range
    return np.clip(out, tmin, tmax)


def to_display_dtype(arr: np.ndarray, dtype, vmin: float, vmax: float) -> np.ndarray:
    """
    Clip arr to [vmin, vmax] and cast to dtype (rounded for integer dtypes).
    """
    out = np.clip(arr, vmin, vmax)
    if np.issubdtype(dtype, np.integer):
        return np.rint(out).astype(dtype)
    return out.astype(dtype)
