"""JSON pixel arrays.

The format is a flat array of ``{"r": int, "g": int, "b": int}`` objects in
row-major order; the position in the array is the pixel index. Encoded
output also carries ``"index"``, which decoding ignores.
"""
from __future__ import annotations

import json
from typing import Iterable, Optional, Union

from .errors import DecodeError
from .pixel import Pixel
from .sources import DataSource


def _channel(entry: dict, key: str, position: int) -> int:
    v = entry.get(key)
    # bool is an int subclass; reject it explicitly
    if not isinstance(v, int) or isinstance(v, bool):
        raise DecodeError(f"entry {position}: {key!r} must be an integer")
    if not 0 <= v <= 255:
        raise DecodeError(f"entry {position}: {key!r} out of range 0..255: {v}")
    return v


def decode_pixels(text: Union[str, bytes], size: Optional[int] = None) -> list[Pixel]:
    """Parse a JSON pixel array.

    Parameters
    ----------
    text : str | bytes
        JSON document.
    size : int | None
        Grid side. When given, the array must hold exactly ``size * size``
        entries.

    Raises
    ------
    DecodeError
        On malformed JSON, bad entries or a length mismatch.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise DecodeError(f"malformed JSON: {e}") from e
    if not isinstance(data, list):
        raise DecodeError("expected a JSON array of pixels")
    if size is not None and len(data) != size * size:
        raise DecodeError(f"expected {size * size} pixels for a {size}x{size} grid, got {len(data)}")

    pixels = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise DecodeError(f"entry {i}: expected an object")
        pixels.append(Pixel(i, _channel(entry, "r", i), _channel(entry, "g", i), _channel(entry, "b", i)))
    return pixels


def encode_pixels(pixels: Iterable[Pixel], indent: Optional[int] = None) -> str:
    return json.dumps(
        [{"index": p.index, "r": p.r, "g": p.g, "b": p.b} for p in pixels],
        indent=indent,
    )


def load_pixels_json(source: DataSource, name: str, size: Optional[int] = None) -> list[Pixel]:
    """Read and decode a JSON pixel array from a data source."""
    return decode_pixels(source.load_bytes(name), size=size)


__all__ = ["decode_pixels", "encode_pixels", "load_pixels_json"]
