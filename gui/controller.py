"""
Presentation state for the Fourier demo window.

The controller owns everything the view needs between button presses: the loaded
image, the complex grid produced by the transform, the display images and which
actions are currently allowed. It has no Tk dependency so it can be driven from
tests and scripts.
"""
import os
from typing import Callable, Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from core.padding import pad_for_transform
from core.spectrum_pipeline import (
    compute_display_magnitude,
    forward_transform,
    inverse_transform_and_reconstruct,
)
from io_utils.file_utils import make_result_filename, save_parameters_txt
from io_utils.image_handler import read_grayscale, save_image


class FourierController:
    def __init__(self, log: Callable[[str], None] = print):
        self.log = log
        self.image_path: Optional[str] = None
        self.image: Optional[np.ndarray] = None
        self.padded: Optional[np.ndarray] = None
        self.complex_image: Optional[np.ndarray] = None
        self.magnitude: Optional[np.ndarray] = None
        self.restored: Optional[np.ndarray] = None
        self.transform_enabled = False
        self.antitransform_enabled = False

    @property
    def has_results(self) -> bool:
        return self.magnitude is not None

    def load_image(self, path: str) -> bool:
        """
        Load `path` as grayscale. On failure the previous state is kept and False is returned.
        On success any previous transform results are discarded.
        """
        try:
            arr, meta = read_grayscale(path)
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError) as e:
            self.log(f"Could not load {path}: {e}")
            return False

        self.image_path = path
        self.image = arr
        self.padded = None
        self.complex_image = None
        self.magnitude = None
        self.restored = None
        self.transform_enabled = True
        self.antitransform_enabled = False
        self.log(f"Loaded: {os.path.basename(path)} shape={arr.shape} source mode={meta['mode']}")
        return True

    def transform(self) -> np.ndarray:
        """Forward DFT of the loaded image; returns the display magnitude."""
        if not self.transform_enabled or self.image is None:
            raise RuntimeError("Load an image before applying the DFT.")

        padded = pad_for_transform(self.image)
        complex_image = forward_transform(padded)
        magnitude = compute_display_magnitude(complex_image)

        self.padded = padded
        self.complex_image = complex_image
        self.magnitude = magnitude
        self.transform_enabled = False
        self.antitransform_enabled = True
        self.log(f"DFT done: padded {self.image.shape} -> {padded.shape}, spectrum {magnitude.shape}")
        return magnitude

    def antitransform(self) -> np.ndarray:
        """Inverse DFT of the stored complex image; returns the restored 8-bit image."""
        if not self.antitransform_enabled or self.complex_image is None:
            raise RuntimeError("Apply the DFT before the inverse DFT.")

        restored = inverse_transform_and_reconstruct(self.complex_image)
        self.restored = restored
        self.antitransform_enabled = False
        self.log(f"Inverse DFT done: restored {restored.shape}")
        return restored

    def export_results(self, outdir: str, projname: str = "fourier") -> dict:
        """
        Write the spectrum (and the restored image, if computed) plus a parameters.txt to `outdir`.
        Returns a dict of written paths.
        """
        if not self.has_results:
            raise RuntimeError("Nothing to export. Apply the DFT first.")

        input_path = self.image_path or "image"
        paths = {
            "spectrum": save_image(
                make_result_filename(projname, input_path, "magnitude", outdir=outdir), self.magnitude
            )
        }
        if self.restored is not None:
            paths["restored"] = save_image(
                make_result_filename(projname, input_path, "antitransformed", outdir=outdir), self.restored
            )
        paths["parameters"] = save_parameters_txt(outdir, {
            "input_path": input_path,
            "input_shape": self.image.shape,
            "padded_shape": self.padded.shape,
            "spectrum_shape": self.magnitude.shape,
            "restored": self.restored is not None,
        })
        self.log(f"Saved results -> {outdir}")
        return paths
