# io_utils/image_handler.py
"""
Image read/write helpers using Pillow.

Functions:
- read_grayscale(path) -> (numpy uint8 array (H x W), meta)
- save_image(path, array) -> writes a grayscale image
"""

from PIL import Image
import os
import numpy as np
from typing import Tuple


def read_grayscale(path: str) -> Tuple[np.ndarray, dict]:
    """
    Read an image from `path` and return (array, meta).
    - Any source mode (RGB, RGBA, P, I;16, ...) is converted to 8-bit luminance ("L").
    - Meta contains the source mode, size and whether an alpha channel was dropped.
    Raises FileNotFoundError, or PIL.UnidentifiedImageError for unsupported formats.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"No such image file: {path}")
    with Image.open(path) as img:
        mode = img.mode
        has_alpha = mode in ("RGBA", "LA", "PA") or ("transparency" in img.info)
        size = img.size
        gray = img.convert("L")
        arr = np.asarray(gray).copy()
    meta = {"mode": mode, "size": size, "has_alpha": has_alpha}
    return arr, meta


def save_image(path: str, array: np.ndarray):
    """
    Save a 2D grayscale array to `path`.
    Casts floats to uint8 by clipping to 0..255.
    """
    if array.ndim != 2:
        raise ValueError("save_image expects an HxW grayscale array.")

    if np.issubdtype(array.dtype, np.floating):
        arr = np.rint(np.clip(array, 0.0, 255.0)).astype(np.uint8)
    else:
        arr = np.clip(array, 0, 255).astype(np.uint8)

    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    Image.fromarray(arr).save(path)
    return path
