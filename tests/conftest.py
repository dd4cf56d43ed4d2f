from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from pixgrid.pixel import Pixel


def encode_png(arr: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_bytes():
    return encode_png


@pytest.fixture
def gradient_rgba() -> np.ndarray:
    """32x32 opaque RGBA gradient."""
    y, x = np.mgrid[0:32, 0:32]
    arr = np.zeros((32, 32, 4), dtype=np.uint8)
    arr[:, :, 0] = x * 8
    arr[:, :, 1] = y * 8
    arr[:, :, 2] = 128
    arr[:, :, 3] = 255
    return arr


@pytest.fixture
def four_pixels() -> list[Pixel]:
    return [
        Pixel(0, 255, 0, 0),
        Pixel(1, 0, 255, 0),
        Pixel(2, 0, 0, 255),
        Pixel(3, 255, 255, 0),
    ]


@pytest.fixture
def uniform_grid():
    def make(size: int, rgb=(10, 120, 230)) -> list[Pixel]:
        return [Pixel(i, *rgb) for i in range(size * size)]

    return make
