"""
Core package init for the Fourier spectrum demo.
Exposes public modules for import in tests, GUI and scripts.
"""
from .errors import InvalidInput

__all__ = ["config", "errors", "padding", "fft_engine", "quadrants", "spectrum_pipeline", "InvalidInput"]
