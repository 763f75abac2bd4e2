import os
from tkinter import filedialog, messagebox


# ----------------------
# Logging helper
# ----------------------
def _safe_log(app, *args, **kwargs):
    """Try to write to app.log if present, otherwise print to stdout."""
    msg = " ".join(str(a) for a in args) if args else kwargs.get("msg", "")
    try:
        if hasattr(app, "log") and callable(getattr(app, "log")):
            app.log(msg)
        else:
            print(msg)
    except Exception:
        print(msg)


# ----------------------
# Callbacks
# ----------------------
def open_image_callback(app):
    """Handle file selection, load the image as grayscale and reset the other previews."""
    path = filedialog.askopenfilename(
        title="Select Image",
        filetypes=[("Image Files", "*.png *.jpg *.jpeg *.tif *.tiff *.bmp *.gif *.avif"), ("All Files", "*.*")]
    )
    if not path:
        return

    ctrl = app.controller
    if not ctrl.load_image(path):
        messagebox.showwarning("Open Image", f"Could not read:\n{path}")
        return

    app.image_path.set(path)
    app.show_original(ctrl.image)
    app.clear_results()
    app.sync_buttons()


def transform_callback(app):
    """Apply the DFT to the loaded image and show the centred magnitude spectrum."""
    ctrl = app.controller
    if not ctrl.transform_enabled:
        messagebox.showwarning("No Image", "Please open an image first.")
        return

    try:
        magnitude = ctrl.transform()
    except Exception as e:
        _safe_log(app, f"DFT error: {e}")
        messagebox.showerror("Processing Error", f"DFT failed:\n{e}")
        return

    app.show_spectrum(magnitude)
    app.sync_buttons()


def antitransform_callback(app):
    """Apply the inverse DFT and show the reconstructed image."""
    ctrl = app.controller
    if not ctrl.antitransform_enabled:
        messagebox.showwarning("No Spectrum", "Apply the DFT first.")
        return

    try:
        restored = ctrl.antitransform()
    except Exception as e:
        _safe_log(app, f"Inverse DFT error: {e}")
        messagebox.showerror("Processing Error", f"Inverse DFT failed:\n{e}")
        return

    app.show_restored(restored)
    app.sync_buttons()


def save_output_callback(app):
    """Write the spectrum, restored image and parameters to a chosen directory."""
    ctrl = app.controller
    if not ctrl.has_results:
        messagebox.showwarning("No Output", "There is nothing to save. Apply the DFT first.")
        return

    outdir = filedialog.askdirectory(title="Save Results To", initialdir=os.path.abspath("results"))
    if not outdir:
        _safe_log(app, "Save cancelled.")
        return

    try:
        paths = ctrl.export_results(outdir)
    except Exception as e:
        _safe_log(app, f"Save failed: {e}")
        messagebox.showerror("Save Error", f"Saving failed:\n{e}")
        return

    messagebox.showinfo("Saved", "\n".join(paths.values()))
