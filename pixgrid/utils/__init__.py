"""Utility functions for pixgrid.

Modules:
- loader: Decode/save Pillow <-> NumPy conversion utilities.
- resize: Nearest-neighbor resize to an arbitrary size.
- upscale: Draw row-major grid colors as solid square cells.
"""
from .loader import decode_image, save_image
from .upscale import draw_cells
from .resize import resize_nearest

__all__ = [
    "decode_image",
    "save_image",
    "draw_cells",
    "resize_nearest",
]
