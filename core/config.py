"""
Default settings shared by the core pipeline, the GUI and the scripts.
"""
import numpy as np

# display range used for the spectrum and the reconstruction
DISPLAY_MIN = 0.0
DISPLAY_MAX = 255.0
DISPLAY_DTYPE = np.uint8

# OpenCV works on CV_32F planes for the complex image
WORKING_DTYPE = np.float32

# a reconstructed grid whose range is below FLAT_RTOL * scale is treated as constant
FLAT_RTOL = 1e-5

# max |imag| / real range tolerated after the inverse transform before warning
IMAG_RESIDUAL_TOL = 1e-3

# previews are fitted to this width, aspect ratio preserved
PREVIEW_FIT_WIDTH = 250
