# visuals/__init__.py
"""
Visual helpers for the Fourier spectrum demo.
Provides plotting and export utilities used by the GUI and scripts.
"""
from .plots import (
    plot_magnitude_spectrum,
    plot_phase_spectrum,
    compare_and_save,
)
__all__ = [
    "plot_magnitude_spectrum",
    "plot_phase_spectrum",
    "compare_and_save",
]
