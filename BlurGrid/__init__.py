from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from pixgrid.pixel import Pixel, normalize_color  # noqa: F401
from pixgrid.errors import PixGridError, ResourceNotFound, DecodeError  # noqa: F401
from pixgrid.sources import DirectorySource, PackageSource, MemorySource  # noqa: F401
from pixgrid.extract import rasterize, extract_pixels, convert_image_to_pixels, load_pixels  # noqa: F401
from pixgrid.jsonio import decode_pixels, encode_pixels  # noqa: F401
from pixgrid.blur import surrounding_pixels, blurred_color, blur_pixel, blur_grid  # noqa: F401
from pixgrid.render import render_grid  # noqa: F401
from pixgrid.config import GridOptions  # noqa: F401

__all__ = [
    "Pixel",
    "normalize_color",
    "PixGridError",
    "ResourceNotFound",
    "DecodeError",
    "DirectorySource",
    "PackageSource",
    "MemorySource",
    "rasterize",
    "extract_pixels",
    "convert_image_to_pixels",
    "load_pixels",
    "decode_pixels",
    "encode_pixels",
    "surrounding_pixels",
    "blurred_color",
    "blur_pixel",
    "blur_grid",
    "render_grid",
    "GridOptions",
]
