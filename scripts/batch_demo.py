"""
Batch-run the spectrum pipeline across multiple images.

Saves per-image outputs and a CSV log with diagnostics:
- input_path, input_shape, padded_shape, spectrum_path, phase_path, restored_path,
  max_imag_restored, spectrum_peak_row, spectrum_peak_col

Usage (from project root):
python -m scripts.batch_demo

Edit the IMAGES list below to point to your files if needed.
"""

import os
import csv
from datetime import datetime
import numpy as np

from io_utils.image_handler import read_grayscale, save_image
from core.padding import pad_for_transform
from core.fft_engine import forward_transform, inverse_transform, split_planes
from core.spectrum_pipeline import compute_display_magnitude, inverse_transform_and_reconstruct
from visuals.plots import plot_magnitude_spectrum, plot_phase_spectrum

# CONFIG: list image paths (the data/ directory in the project) you want to process (edit as needed)
IMAGES = [
    "data/sample1.png",
    "data/Checkerboard_1.tif",
]

# Crop reconstructions back to the pre-padding size
CROP_TO_INPUT = True

# Output directory for this run
timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
OUTDIR = os.path.join("results", f"batch_demo_{timestamp}")

csv_fields = [
    "input_path", "input_shape", "padded_shape", "spectrum_path", "phase_path",
    "restored_path", "max_imag_restored", "spectrum_peak_row", "spectrum_peak_col",
]


def process_one_image(img_path, outdir=OUTDIR):
    img, _ = read_grayscale(img_path)
    base = os.path.splitext(os.path.basename(img_path))[0]
    run_dir = os.path.join(outdir, base)
    os.makedirs(run_dir, exist_ok=True)

    padded = pad_for_transform(img)
    F = forward_transform(padded)
    magnitude = compute_display_magnitude(F)
    restored = inverse_transform_and_reconstruct(F, original_shape=img.shape if CROP_TO_INPUT else None)

    # residual imaginary part of the unscaled inverse, relative to the padded area
    _, imag = split_planes(inverse_transform(F))
    max_imag = float(np.max(np.abs(imag))) / padded.size

    peak_row, peak_col = np.unravel_index(int(np.argmax(magnitude)), magnitude.shape)

    spectrum_path = plot_magnitude_spectrum(F, out_path=os.path.join(run_dir, "fft_spectrum.png"))
    phase_path = plot_phase_spectrum(F, out_path=os.path.join(run_dir, "phase_spectrum.png"))
    restored_path = save_image(os.path.join(run_dir, f"{base}_antitransformed.png"), restored)

    return {
        "input_path": img_path,
        "input_shape": "x".join(map(str, img.shape)),
        "padded_shape": "x".join(map(str, padded.shape)),
        "spectrum_path": spectrum_path,
        "phase_path": phase_path,
        "restored_path": restored_path,
        "max_imag_restored": max_imag,
        "spectrum_peak_row": int(peak_row),
        "spectrum_peak_col": int(peak_col),
    }


def main():
    os.makedirs(OUTDIR, exist_ok=True)
    csv_path = os.path.join(OUTDIR, "results.csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as csvf:
        writer = csv.DictWriter(csvf, fieldnames=csv_fields)
        writer.writeheader()

        for img in IMAGES:
            if not os.path.exists(img):
                print("Skipping missing:", img)
                continue
            print("Processing:", img)
            rec = process_one_image(img)
            writer.writerow(rec)
            csvf.flush()
            print(" -> done. padded:", rec["padded_shape"], "max_imag:", rec["max_imag_restored"])

    print("Batch done. Results in:", OUTDIR, "CSV:", csv_path)


if __name__ == "__main__":
    main()
