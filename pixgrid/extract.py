"""Pixel extraction: source image -> fixed-size grid of RGB samples.

Pipeline: decode bytes with Pillow, resize to exactly ``width x height``,
then walk the RGBA buffer in raster order emitting one :class:`Pixel` per
cell. Fully transparent samples become black.
"""
from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Literal, Union

import numpy as np
from PIL import Image

from .errors import DecodeError, ResourceNotFound
from .jsonio import load_pixels_json
from .pixel import Pixel
from .sources import DataSource
from .utils.loader import decode_image
from .utils.resize import resize_nearest

logger = logging.getLogger(__name__)

Array = np.ndarray
Resample = Literal["bilinear", "nearest"]
RESAMPLE_MODES = ("bilinear", "nearest")

Size = Union[int, tuple[int, int]]


def _as_wh(size: Size) -> tuple[int, int]:
    if isinstance(size, int):
        return size, size
    w, h = size
    return int(w), int(h)


def rasterize(data: bytes, width: int, height: int, resample: Resample = "bilinear") -> Array:
    """Decode ``data`` and resize it to an RGBA buffer of ``width x height``.

    Parameters
    ----------
    data : bytes
        Encoded image bytes.
    width, height : int
        Target grid dimensions (>=1).
    resample : str
        "bilinear" (Pillow filter) or "nearest" (NumPy sampling).

    Returns
    -------
    np.ndarray
        Array of shape (height, width, 4), dtype=uint8.
    """
    if width < 1 or height < 1:
        raise ValueError("width and height must be >= 1")
    if resample not in RESAMPLE_MODES:
        raise ValueError(f"Unknown resample mode: {resample}")

    im = decode_image(data)
    if resample == "nearest":
        return resize_nearest(np.array(im, dtype=np.uint8), height, width)
    if im.size != (width, height):
        im = im.resize((width, height), resample=Image.BILINEAR)
    return np.array(im, dtype=np.uint8)


def extract_pixels(rgba: Array, premultiplied: bool = True) -> list[Pixel]:
    """Read a raster into Pixels, top-left first, row by row.

    Parameters
    ----------
    rgba : np.ndarray
        Array of shape (H, W, 4) or (H, W, 3), dtype=uint8. RGB input is
        treated as fully opaque.
    premultiplied : bool
        Scale color channels by alpha before reading them, i.e. composite
        over black.

    Returns
    -------
    list[Pixel]
        ``H * W`` pixels with ``index = y * W + x``.
    """
    if not isinstance(rgba, np.ndarray) or rgba.ndim != 3 or rgba.shape[2] not in (3, 4):
        raise ValueError("rgba must have shape (H, W, 4) or (H, W, 3)")

    H, W, C = rgba.shape
    rgb = rgba[:, :, :3].astype(np.int64)
    if C == 4:
        alpha = rgba[:, :, 3].astype(np.int64)
        if premultiplied:
            rgb = (rgb * alpha[:, :, None] + 127) // 255
        # Fully transparent -> black, whatever the stored color
        rgb[alpha == 0] = 0

    flat = rgb.reshape(H * W, 3).tolist()
    return [Pixel(i, r, g, b) for i, (r, g, b) in enumerate(flat)]


def convert_image_to_pixels(
    source: DataSource,
    name: str,
    size: Size = (100, 100),
    resample: Resample = "bilinear",
) -> list[Pixel]:
    """Load ``name`` from ``source`` and extract a ``size`` grid.

    Missing resources and undecodable images are logged and yield an empty
    list.
    """
    width, height = _as_wh(size)
    try:
        data = source.load_bytes(name)
        rgba = rasterize(data, width, height, resample=resample)
    except (ResourceNotFound, DecodeError) as e:
        logger.warning("No image for %r: %s", name, e)
        return []
    pixels = extract_pixels(rgba)
    logger.debug("Extracted %d pixels from %r at %dx%d", len(pixels), name, width, height)
    return pixels


def load_pixels(
    source: DataSource,
    name: str,
    size: int = 100,
    resample: Resample = "bilinear",
) -> list[Pixel]:
    """Load a square grid from either a JSON pixel array or an image."""
    if PurePath(name).suffix.lower() == ".json":
        try:
            return load_pixels_json(source, name, size=size)
        except (ResourceNotFound, DecodeError) as e:
            logger.warning("No pixels for %r: %s", name, e)
            return []
    return convert_image_to_pixels(source, name, size=size, resample=resample)


__all__ = [
    "RESAMPLE_MODES",
    "rasterize",
    "extract_pixels",
    "convert_image_to_pixels",
    "load_pixels",
]
