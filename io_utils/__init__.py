# io_utils/__init__.py
"""
I/O helpers package for the Fourier spectrum demo.
"""
from .image_handler import read_grayscale, save_image
from .file_utils import make_result_filename, save_parameters_txt

__all__ = [
    "read_grayscale",
    "save_image",
    "make_result_filename",
    "save_parameters_txt",
]
