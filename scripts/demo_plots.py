"""
A small demo script that runs the spectrum pipeline on a sample image (if present)
and writes the visualization outputs into results/demo_plots/.
Run from project root:
python -m scripts.demo_plots
"""

import os
from core.spectrum_pipeline import run_spectrum_pipeline
from visuals.plots import plot_magnitude_spectrum, compare_and_save
from io_utils.image_handler import read_grayscale, save_image

OUTDIR = "results/demo_plots"


def demo_from_file(input_path: str, outdir: str = OUTDIR):
    os.makedirs(outdir, exist_ok=True)
    img, _ = read_grayscale(input_path)

    magnitude, restored, inter = run_spectrum_pipeline(img, crop_to_input=True, return_intermediates=True)

    plot_magnitude_spectrum(inter["complex"], out_path=os.path.join(outdir, "fft_spectrum.png"))
    save_image(os.path.join(outdir, "antitransformed.png"), restored)
    compare_and_save(img, magnitude, restored, out_path=os.path.join(outdir, "comparison.png"))
    print("Demo outputs written to:", outdir)
    return outdir


if __name__ == "__main__":
    # try typical sample names; pick first existing
    candidates = ["data/sample1.png", "data/sample2_color.jpg", "data/sample3_checkerboard.tif"]
    found = next((c for c in candidates if os.path.exists(c)), None)
    if found is None:
        print("No sample image found in data/. Place one of sample1.png, sample2_color.jpg, sample3_checkerboard.tif and re-run.")
    else:
        demo_from_file(found)
