import numpy as np
from PIL import Image, ImageTk

from core.config import PREVIEW_FIT_WIDTH


def fit_to_width(arr, width=PREVIEW_FIT_WIDTH):
    """Resize a grayscale numpy array to `width` pixels wide, preserving the aspect ratio."""
    img = Image.fromarray(np.uint8(arr))
    w, h = img.size
    new_h = max(1, int(round(h * width / float(w))))
    return img.resize((width, new_h), Image.BILINEAR)


def np_to_tkimage(arr, width=PREVIEW_FIT_WIDTH):
    """Convert a numpy grayscale array to a fitted PhotoImage for tkinter."""
    return ImageTk.PhotoImage(fit_to_width(arr, width))
