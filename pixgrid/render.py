"""Render a pixel grid as an image of solid colored squares."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .blur import blur_grid
from .config import GridOptions
from .pixel import Pixel
from .utils.upscale import draw_cells

Array = np.ndarray


def to_unit_array(pixels: Sequence[Pixel]) -> Array:
    """Normalized colors as an (n, 3) float64 array."""
    if not pixels:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array([p.rgb for p in pixels], dtype=np.float64) / 255.0


def to_uint8(colors: Array) -> Array:
    return np.clip(np.rint(colors * 255.0), 0, 255).astype(np.uint8)


def grid_colors(
    pixels: Sequence[Pixel],
    columns: int,
    rows: int,
    blurred: bool = False,
    blur_distance: int = 0,
    weight: float = 0.03,
) -> Array:
    if blurred:
        return blur_grid(pixels, columns, rows, blur_distance, weight)
    return to_unit_array(pixels)


def render_grid(
    pixels: Sequence[Pixel],
    columns: int,
    rows: int,
    cell_size: int = 8,
    blurred: bool = False,
    blur_distance: int = 0,
    weight: float = 0.03,
) -> Array:
    """Draw each pixel as a ``cell_size x cell_size`` square.

    Parameters
    ----------
    pixels : sequence of Pixel
        Exactly ``columns * rows`` pixels in row-major order.
    columns, rows : int
        Grid dimensions.
    cell_size : int
        Side of each square in output pixels (>=1).
    blurred : bool
        Apply the neighborhood blur before drawing.
    blur_distance, weight
        Blur parameters, used when ``blurred`` is set.

    Returns
    -------
    np.ndarray
        Image of shape (rows * cell_size, columns * cell_size, 3), uint8.
    """
    if columns < 1 or rows < 1:
        raise ValueError("columns and rows must be >= 1")
    if len(pixels) != columns * rows:
        raise ValueError(f"expected {columns * rows} pixels for a {columns}x{rows} grid, got {len(pixels)}")

    colors = grid_colors(pixels, columns, rows, blurred, blur_distance, weight)
    return draw_cells(to_uint8(colors), columns, rows, cell_size)


def render_options(pixels: Sequence[Pixel], options: GridOptions) -> Array:
    return render_grid(
        pixels,
        options.size,
        options.size,
        cell_size=options.cell_size,
        blurred=options.blurred,
        blur_distance=options.blur_distance,
        weight=options.weight,
    )


__all__ = ["to_unit_array", "to_uint8", "grid_colors", "render_grid", "render_options"]
