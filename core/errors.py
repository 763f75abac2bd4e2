"""
core/errors.py

Error types raised by the spectrum pipeline.
"""


class InvalidInput(ValueError):
    """Raised for degenerate or malformed grids (zero-sized axes, wrong rank, empty data)."""
