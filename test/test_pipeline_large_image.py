# test/test_pipeline_large_image.py
import numpy as np
from core.spectrum_pipeline import run_spectrum_pipeline


def test_large_pipeline():
    img = (np.random.rand(509, 517) * 255).astype(np.uint8)
    magnitude, restored, inter = run_spectrum_pipeline(img, crop_to_input=True, return_intermediates=True)
    assert inter["padded"].shape == (512, 540)
    assert magnitude.shape == (512, 540)
    assert magnitude.dtype == np.uint8
    assert restored.shape == img.shape
    assert restored.dtype == np.uint8
