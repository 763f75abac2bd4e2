"""
core/quadrants.py

Quadrant reordering of frequency-domain grids.

A plain DFT puts the zero-frequency (DC) term at the top-left corner. Swapping
the quadrants diagonally (top-left <-> bottom-right, top-right <-> bottom-left)
moves it to the centre, which is how spectra are usually looked at.

Layout after cropping to even size (H, W), with cy = H // 2, cx = W // 2:

    +----+----+        +----+----+
    | Q0 | Q1 |        | Q3 | Q2 |
    +----+----+  --->  +----+----+
    | Q2 | Q3 |        | Q1 | Q0 |
    +----+----+        +----+----+
"""

import numpy as np

from .errors import InvalidInput


def _even_extent(n: int) -> int:
    # drop the last row/column of odd axes; a length-1 axis cannot be split and is kept
    even = n & -2
    return even if even > 0 else n


def _swap(a: np.ndarray, b: np.ndarray, tmp: np.ndarray) -> None:
    np.copyto(tmp, a)
    np.copyto(a, b)
    np.copyto(b, tmp)


def shift_quadrants(grid: np.ndarray) -> np.ndarray:
    """
    Return a copy of `grid` with its four quadrants swapped diagonally.

    Odd axes are cropped by one row/column before splitting, so the result has the
    cropped (even) shape. Applying the function twice to an even-sized grid returns
    the original grid. Extra trailing axes (e.g. the real/imag planes of a complex
    grid) are carried along.

    An axis of length 1 cannot be split; it is kept whole and only the halves along
    the other axis are swapped.
    """
    a = np.asarray(grid)
    if a.ndim < 2:
        raise InvalidInput("shift_quadrants expects an array with at least 2 dimensions.")
    rows = _even_extent(a.shape[0])
    cols = _even_extent(a.shape[1])
    out = np.array(a[:rows, :cols], copy=True)
    if out.size == 0:
        return out

    cy, cx = rows // 2, cols // 2

    if cy == 0 and cx == 0:
        return out
    if cy == 0:
        tmp = np.empty_like(out[:, :cx])
        _swap(out[:, :cx], out[:, cx:], tmp)
        return out
    if cx == 0:
        tmp = np.empty_like(out[:cy, :])
        _swap(out[:cy, :], out[cy:, :], tmp)
        return out

    q0 = out[:cy, :cx]
    q1 = out[:cy, cx:]
    q2 = out[cy:, :cx]
    q3 = out[cy:, cx:]

    # one quadrant-sized buffer is enough: Q0/Q3 and Q1/Q2 are disjoint
    tmp = np.empty_like(q0)
    _swap(q0, q3, tmp)
    _swap(q1, q2, tmp)
    return out
