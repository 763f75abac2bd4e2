"""
core/padding.py

Optimal DFT sizing and zero padding.

Functions:
- optimal_dft_size(n): smallest N >= n that factors into 2, 3 and 5 only (cv2.getOptimalDFTSize)
- optimal_dft_shape(shape): the same rule applied to each axis independently
- pad_for_transform(sample_grid): zero-pad bottom/right edges up to the optimal shape
"""

from typing import Tuple
import numpy as np
import cv2

from .errors import InvalidInput

# depths cv2.copyMakeBorder accepts; anything else is promoted to float64
_BORDER_DTYPES = (np.uint8, np.int8, np.uint16, np.int16, np.int32, np.float32, np.float64)


def optimal_dft_size(n: int) -> int:
    """Return the smallest size >= n for which the DFT is efficient."""
    n = int(n)
    if n < 1:
        raise InvalidInput(f"DFT size must be >= 1, got {n}.")
    return int(cv2.getOptimalDFTSize(n))


def optimal_dft_shape(shape: Tuple[int, int]) -> Tuple[int, int]:
    rows, cols = shape
    return optimal_dft_size(rows), optimal_dft_size(cols)


def _validate_sample_grid(sample_grid) -> np.ndarray:
    grid = np.asarray(sample_grid)
    if grid.ndim != 2:
        raise InvalidInput(f"Expected a 2D grayscale grid, got array with ndim={grid.ndim}.")
    rows, cols = grid.shape
    if rows == 0 or cols == 0:
        raise InvalidInput(f"Cannot pad a degenerate {rows}x{cols} grid.")
    return grid


def pad_for_transform(sample_grid: np.ndarray) -> np.ndarray:
    """
    Pad a grayscale grid with zeros at the bottom and right edges so that each
    dimension becomes an optimal DFT size.

    Parameters
    ----------
    sample_grid : np.ndarray
        2D array (H, W) of intensity samples. H and W must be >= 1.

    Returns
    -------
    np.ndarray
        New array of shape (H', W') with H' = optimal_dft_size(H), W' = optimal_dft_size(W).
        The original samples keep their (row, col) positions; all added cells are 0.
        The dtype is preserved unless OpenCV cannot border it (then float64).

    Raises
    ------
    InvalidInput
        If the grid is not 2D or has a zero-sized axis.
    """
    grid = _validate_sample_grid(sample_grid)
    if grid.dtype not in _BORDER_DTYPES:
        grid = grid.astype(np.float64)
    # copyMakeBorder wants a contiguous buffer
    grid = np.ascontiguousarray(grid)

    rows, cols = grid.shape
    opt_rows, opt_cols = optimal_dft_shape((rows, cols))
    padded = cv2.copyMakeBorder(
        grid, 0, opt_rows - rows, 0, opt_cols - cols,
        cv2.BORDER_CONSTANT, value=0,
    )
    return padded
