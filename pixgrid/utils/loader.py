"""Image decoding and saving utilities using Pillow, with NumPy arrays.

All grid processing happens on NumPy arrays or Pixel lists. These helpers
only convert between Pillow images and NumPy ``uint8`` arrays for IO.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError

Array = np.ndarray


def decode_image(data: bytes) -> Image.Image:
    """Decode raw bytes into a loaded RGBA Pillow image.

    Parameters
    ----------
    data : bytes
        Encoded image in any format Pillow can read.

    Returns
    -------
    PIL.Image.Image
        Image in ``RGBA`` mode.

    Raises
    ------
    DecodeError
        If Pillow cannot identify or fully decode the data.
    """
    if not data:
        raise DecodeError("no image data")
    try:
        with Image.open(io.BytesIO(data)) as im:
            im.load()
            return im.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        raise DecodeError(f"cannot decode image: {e}") from e


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGB NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 3), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")

    p = Path(path)
    im = Image.fromarray(arr)
    im.save(p)
