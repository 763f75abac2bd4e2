import ttkbootstrap as ttk
from ttkbootstrap.constants import *
from tkinter import StringVar
from tkinter.scrolledtext import ScrolledText

from .callbacks import open_image_callback, transform_callback, antitransform_callback, save_output_callback
from .controller import FourierController
from .utils import np_to_tkimage


class FourierApp(ttk.Window):
    def __init__(self, title="Fourier Transform", themename="cyborg"):
        super().__init__(themename=themename)
        self.title(title)
        self.geometry("1000x560")

        # Data
        self.controller = FourierController(log=self.log)
        self.image_path = StringVar()
        # PhotoImage references must outlive the labels showing them
        self._tkimages = {}

        # Build UI
        self._build_layout()
        self.sync_buttons()

    def log(self, msg: str):
        """
        GUI logger: append message to the ScrolledText log_box if available,
        otherwise print to stdout. Keeps GUI from crashing if log_box isn't ready.
        """
        try:
            if getattr(self, "log_box", None) is not None:
                self.log_box.insert("end", str(msg) + "\n")
                self.log_box.see("end")
                return
        except Exception:
            pass
        print(str(msg))

    # --- Layout ---
    def _build_layout(self):
        # Left control panel
        control = ttk.Frame(self)
        control.pack(side=LEFT, fill=Y, padx=10, pady=10)

        ttk.Button(control, text="Load Image", bootstyle=PRIMARY,
                   command=lambda: open_image_callback(self)).pack(fill=X, pady=3)
        self.transform_button = ttk.Button(control, text="Apply transformation", bootstyle=SUCCESS,
                                           command=lambda: transform_callback(self))
        self.transform_button.pack(fill=X, pady=3)
        self.antitransform_button = ttk.Button(control, text="Apply anti transformation", bootstyle=SUCCESS,
                                               command=lambda: antitransform_callback(self))
        self.antitransform_button.pack(fill=X, pady=3)
        self.save_button = ttk.Button(control, text="Save Results", bootstyle=INFO,
                                      command=lambda: save_output_callback(self))
        self.save_button.pack(fill=X, pady=3)

        ttk.Separator(control).pack(fill=X, pady=5)
        ttk.Label(control, textvariable=self.image_path, wraplength=200).pack(anchor=W)
        ttk.Label(control, text="Logs:").pack(anchor=W)
        self.log_box = ScrolledText(control, height=15, width=32, wrap="word")
        self.log_box.configure(font=("Helvetica", 10))
        self.log_box.pack(fill=BOTH, expand=True, pady=5)

        # Right display area: original | spectrum | antitransformed
        display = ttk.Frame(self)
        display.pack(side=LEFT, fill=BOTH, expand=True, padx=(8, 12), pady=8)

        def _make_preview(parent, caption):
            col = ttk.Frame(parent)
            col.pack(side=LEFT, fill=Y, padx=6, anchor=N)
            ttk.Label(col, text=caption).pack(anchor=W)
            # sized by the fitted PhotoImage it shows
            view = ttk.Label(col)
            view.pack(anchor=N, pady=4)
            return view

        self.original_view = _make_preview(display, "Original")
        self.transformed_view = _make_preview(display, "Magnitude spectrum")
        self.antitransformed_view = _make_preview(display, "Antitransformed")

    # --- State sync ---
    def sync_buttons(self):
        ctrl = self.controller
        self.transform_button.configure(state=NORMAL if ctrl.transform_enabled else DISABLED)
        self.antitransform_button.configure(state=NORMAL if ctrl.antitransform_enabled else DISABLED)
        self.save_button.configure(state=NORMAL if ctrl.has_results else DISABLED)

    # --- Previews ---
    def _show(self, view, key, arr):
        tkimg = np_to_tkimage(arr)
        self._tkimages[key] = tkimg
        view.configure(image=tkimg)

    def _clear(self, view, key):
        self._tkimages.pop(key, None)
        view.configure(image="")

    def show_original(self, arr):
        self._show(self.original_view, "original", arr)

    def show_spectrum(self, arr):
        self._show(self.transformed_view, "spectrum", arr)

    def show_restored(self, arr):
        self._show(self.antitransformed_view, "restored", arr)

    def clear_results(self):
        self._clear(self.transformed_view, "spectrum")
        self._clear(self.antitransformed_view, "restored")


def launch_app():
    app = FourierApp()
    app.mainloop()
