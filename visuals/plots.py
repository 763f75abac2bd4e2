"""
visuals/plots.py

Plotting and export utilities for spectra and reconstructions.

APIs:
- plot_magnitude_spectrum(complex_grid, out_path=None)
- plot_phase_spectrum(complex_grid, out_path=None)
- compare_and_save(original, spectrum, restored, out_path=None, titles=None)

Notes:
- Spectrum/phase exports are raw PNGs written with Pillow (no Matplotlib involved).
- compare_and_save uses matplotlib. If out_path is None, it returns the Figure object.
"""

from typing import Optional, Sequence
import os
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image

from core.fft_engine import phase_angle, to_display_dtype
from core.quadrants import shift_quadrants
from core.spectrum_pipeline import compute_display_magnitude


# Helper to ensure outdir exists
def _ensure_outdir(out_path: Optional[str]):
    if out_path is None:
        return None
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    return out_path


def _save_raw_array_image(out_path: str, arr: np.ndarray) -> str:
    """Save a 2D array that is already in 0..255 as an 8-bit grayscale PNG."""
    _ensure_outdir(out_path)
    img_arr = to_display_dtype(np.asarray(arr), np.uint8, 0, 255)
    Image.fromarray(img_arr).save(out_path)
    return out_path


def plot_magnitude_spectrum(
    complex_grid: np.ndarray,
    out_path: Optional[str] = None,
):
    """
    Centred log-magnitude spectrum.
    If out_path is given -> write a raw PNG and return the path.
    Otherwise return the uint8 display array.
    """
    mag = compute_display_magnitude(complex_grid)
    if out_path is not None:
        return _save_raw_array_image(out_path, mag)
    return mag


def plot_phase_spectrum(
    complex_grid: np.ndarray,
    out_path: Optional[str] = None,
):
    """
    Centred phase spectrum, 0..2*pi mapped linearly to 0..255.
    If out_path is given -> write a raw PNG and return the path.
    Otherwise return the uint8 display array.
    """
    phase = shift_quadrants(phase_angle(complex_grid))
    phase_vis = to_display_dtype(phase * (255.0 / (2.0 * np.pi)), np.uint8, 0, 255)
    if out_path is not None:
        return _save_raw_array_image(out_path, phase_vis)
    return phase_vis


def compare_and_save(
    original: np.ndarray,
    spectrum: np.ndarray,
    restored: Optional[np.ndarray] = None,
    out_path: Optional[str] = None,
    titles: Optional[Sequence[str]] = None,
):
    """
    Original | Spectrum | Restored (restored panel omitted when None).
    """
    panels = [original, spectrum] + ([restored] if restored is not None else [])
    if titles is None:
        titles = ["Original", "Magnitude Spectrum", "Antitransformed"]

    fig, axs = plt.subplots(1, len(panels), figsize=(6 * len(panels), 6))
    for ax, img, title in zip(axs, panels, titles):
        ax.imshow(img, cmap="gray", interpolation="nearest")
        ax.set_title(title)
        ax.axis("off")

    if out_path:
        _ensure_outdir(out_path)
        fig.savefig(out_path, dpi=150, bbox_inches="tight", pad_inches=0.05)
        plt.close(fig)
        return out_path
    return fig
