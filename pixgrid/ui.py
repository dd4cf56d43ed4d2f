"""Minimal Tkinter viewer with live preview for pixgrid.

Provides a desktop UI to:
- Open an image or a JSON pixel array (starts on the bundled sample)
- Pick the grid size and the blur range
- Toggle the blur on and off
- Save the rendered grid

Extraction and rendering run on a worker thread; the finished frame is
handed back to the Tk thread and swapped onto the canvas in one step.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np
from PIL import Image, ImageTk

import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from .config import GRID_SIZES, MAX_BLUR_DISTANCE, GridOptions
from .extract import load_pixels
from .pixel import Pixel
from .render import render_options
from .sources import DEFAULT_RESOURCE, DataSource, PackageSource, source_for_path
from .utils.loader import save_image

logger = logging.getLogger(__name__)

CANVAS_SIDE = 600


def _to_pil(arr: np.ndarray) -> Image.Image:
    return Image.fromarray(arr)


def cell_size_for(size: int, side: int = CANVAS_SIDE) -> int:
    """Largest square cell that fits ``size`` cells in ``side`` pixels."""
    return max(1, side // max(size, 1))


@dataclass
class UIState:
    source: DataSource
    name: str
    pixels: Optional[list[Pixel]] = None
    pixels_size: int = 0  # grid size the pixels were extracted at
    last_frame: Optional[np.ndarray] = None
    debounce_ms: int = 150
    generation: int = 0  # bumped per request; stale results are dropped
    worker: Optional[threading.Thread] = None


class App:
    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.root.title("pixgrid")
        self.state = UIState(source=PackageSource(), name=DEFAULT_RESOURCE)

        defaults = GridOptions()
        self.var_size = tk.IntVar(value=defaults.size)
        self.var_blur = tk.IntVar(value=defaults.blur_distance)
        self.var_blurred = tk.BooleanVar(value=defaults.blurred)

        self._build_ui()
        self._pending_update: Optional[str] = None
        self._preview_imgtk: Optional[ImageTk.PhotoImage] = None
        self._trigger_update()

    def _build_ui(self) -> None:
        frm = ttk.Frame(self.root, padding=8)
        frm.grid(row=0, column=0, sticky="nsew")
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)

        top = ttk.Frame(frm)
        top.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        top.columnconfigure(6, weight=1)

        ttk.Button(top, text="Open…", command=self.on_open).grid(row=0, column=0, padx=(0, 8))

        ttk.Label(top, text="Image Size").grid(row=0, column=1)
        cb_size = ttk.Combobox(top, values=list(GRID_SIZES), textvariable=self.var_size, width=5, state="readonly")
        cb_size.grid(row=0, column=2, padx=(4, 12))
        cb_size.bind("<<ComboboxSelected>>", lambda e: self.on_params_changed())

        self.lbl_blur = ttk.Label(top, text=self._blur_label())
        self.lbl_blur.grid(row=0, column=3)
        s_blur = ttk.Scale(
            top,
            from_=0,
            to=MAX_BLUR_DISTANCE,
            orient="horizontal",
            length=200,
            command=self.on_blur_moved,
        )
        s_blur.set(self.var_blur.get())
        s_blur.grid(row=0, column=4, padx=(4, 12))

        self.btn_toggle = ttk.Button(top, text=self._toggle_label(), command=self.on_toggle_blur)
        self.btn_toggle.grid(row=0, column=5, padx=(0, 12))

        ttk.Button(top, text="Save…", command=self.on_save).grid(row=0, column=7)

        self.canvas = tk.Canvas(frm, bg="#222", width=CANVAS_SIDE, height=CANVAS_SIDE)
        self.canvas.grid(row=1, column=0, sticky="nsew")
        frm.rowconfigure(1, weight=1)
        frm.columnconfigure(0, weight=1)

    def _blur_label(self) -> str:
        return f"Blur Range: {self.var_blur.get()}"

    def _toggle_label(self) -> str:
        return "Blur off" if self.var_blurred.get() else "Blur on"

    def options(self) -> GridOptions:
        size = int(self.var_size.get())
        return replace(
            GridOptions(),
            size=size,
            blur_distance=int(self.var_blur.get()),
            blurred=bool(self.var_blurred.get()),
            cell_size=cell_size_for(size),
        )

    def on_open(self) -> None:
        path = filedialog.askopenfilename(title="Open image or pixel JSON")
        if not path:
            return
        self.state.source, self.state.name = source_for_path(path)
        self.state.pixels = None
        self._trigger_update()

    def on_save(self) -> None:
        if self.state.last_frame is None:
            messagebox.showinfo("Nothing to save", "No grid has been rendered yet.")
            return
        out = filedialog.asksaveasfilename(defaultextension=".png", filetypes=[("PNG", ".png"), ("All", "*.*")])
        if not out:
            return
        try:
            save_image(self.state.last_frame, out)
        except (OSError, ValueError) as e:
            messagebox.showerror("Save failed", str(e))
            return
        messagebox.showinfo("Saved", f"Wrote {out}")

    def on_blur_moved(self, value: str) -> None:
        d = int(round(float(value)))
        if d == self.var_blur.get():
            return
        self.var_blur.set(d)
        self.lbl_blur.configure(text=self._blur_label())
        self._trigger_update()

    def on_toggle_blur(self) -> None:
        self.var_blurred.set(not self.var_blurred.get())
        self.btn_toggle.configure(text=self._toggle_label())
        self._trigger_update()

    def on_params_changed(self) -> None:
        # A new grid size needs a fresh extraction
        if int(self.var_size.get()) != self.state.pixels_size:
            self.state.pixels = None
        self._trigger_update()

    def _trigger_update(self) -> None:
        # Debounce UI changes to avoid recomputing too frequently
        if self._pending_update is not None:
            self.root.after_cancel(self._pending_update)
        self._pending_update = self.root.after(self.state.debounce_ms, self._start_worker)  # type: ignore

    def _start_worker(self) -> None:
        self._pending_update = None
        self.state.generation += 1
        options = self.options()
        self.state.worker = threading.Thread(
            target=self._compute_preview,
            args=(self.state.generation, options, self.state.source, self.state.name, self.state.pixels),
            daemon=True,
        )
        self.state.worker.start()

    def _compute_preview(
        self,
        generation: int,
        options: GridOptions,
        source: DataSource,
        name: str,
        pixels: Optional[list[Pixel]],
    ) -> None:
        if pixels is None:
            pixels = load_pixels(source, name, size=options.size, resample=options.resample)
        if not pixels:
            self.root.after(0, lambda: self._show_error(generation, f"No image loaded from {name}"))
            return
        try:
            frame = render_options(pixels, options)
        except ValueError as e:
            msg = str(e)
            self.root.after(0, lambda m=msg: self._show_error(generation, m))
            return
        self.root.after(0, lambda: self._apply_result(generation, options.size, pixels, frame))

    def _apply_result(self, generation: int, size: int, pixels: list[Pixel], frame: np.ndarray) -> None:
        if generation != self.state.generation:
            logger.debug("Dropping stale frame %d", generation)
            return
        self.state.pixels = pixels
        self.state.pixels_size = size
        self.state.last_frame = frame
        imgtk = ImageTk.PhotoImage(_to_pil(frame))
        self._update_canvas(imgtk)

    def _update_canvas(self, imgtk: ImageTk.PhotoImage) -> None:
        self._preview_imgtk = imgtk  # keep reference to prevent GC
        self.canvas.delete("all")
        w = self.canvas.winfo_width()
        h = self.canvas.winfo_height()
        iw = imgtk.width()
        ih = imgtk.height()
        x = max(0, (w - iw) // 2)
        y = max(0, (h - ih) // 2)
        self.canvas.create_image(x, y, anchor="nw", image=imgtk)

    def _show_error(self, generation: int, msg: str) -> None:
        if generation != self.state.generation:
            logger.debug("Dropping stale error %d: %s", generation, msg)
            return
        self.canvas.delete("all")
        self.canvas.create_text(10, 10, anchor="nw", fill="#fff", text=f"Error: {msg}")


def run_ui() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    root = tk.Tk()
    App(root)
    root.minsize(640, 680)
    root.mainloop()


if __name__ == "__main__":  # pragma: no cover
    run_ui()
