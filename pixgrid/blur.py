"""Neighborhood blur over a pixel grid.

Each cell is replaced by a weighted average of its own normalized color
(weight 1) and every cell within a square window of half-width
``blur_distance`` (weight ``weight`` each). Neighbors that fall outside the
grid are skipped rather than clamped or wrapped, so edge and corner cells
average over fewer samples.

The whole-grid pass uses a Numba-compiled kernel; the per-pixel functions
are plain Python and follow the same rules.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np
from numba import njit

from .pixel import Pixel

Array = np.ndarray


def _check_params(columns: int, rows: int, blur_distance: int, weight: float) -> None:
    if columns < 1 or rows < 1:
        raise ValueError("columns and rows must be >= 1")
    if blur_distance < 0:
        raise ValueError("blur_distance must be >= 0")
    if weight < 0:
        raise ValueError("weight must be >= 0")


def surrounding_pixels(
    pixels: Sequence[Pixel],
    pixel: Pixel,
    columns: int,
    rows: int,
    blur_distance: int,
) -> list[Pixel]:
    """Return the in-bounds neighbors of ``pixel`` within ``blur_distance``.

    The window is scanned row by row. The pixel itself is excluded.
    """
    if columns < 1 or rows < 1:
        raise ValueError("columns and rows must be >= 1")
    if blur_distance < 0:
        raise ValueError("blur_distance must be >= 0")

    col = pixel.index % columns
    row = pixel.index // columns
    n = len(pixels)
    neighbors = []
    for dy in range(-blur_distance, blur_distance + 1):
        for dx in range(-blur_distance, blur_distance + 1):
            if dx == 0 and dy == 0:
                continue
            new_col = col + dx
            new_row = row + dy
            if 0 <= new_col < columns and 0 <= new_row < rows:
                neighbor_index = new_row * columns + new_col
                if neighbor_index < n:
                    neighbors.append(pixels[neighbor_index])
    return neighbors


def blurred_color(pixel: Pixel, neighbors: Sequence[Pixel], weight: float) -> tuple[float, float, float]:
    """Weighted average of ``pixel`` (weight 1) and ``neighbors``.

    Returns
    -------
    tuple[float, float, float]
        Normalized (r, g, b) in 0..1.
    """
    if weight < 0:
        raise ValueError("weight must be >= 0")
    r_total, g_total, b_total = pixel.color
    total_weight = 1.0
    for neighbor in neighbors:
        nr, ng, nb = neighbor.color
        r_total += nr * weight
        g_total += ng * weight
        b_total += nb * weight
        total_weight += weight
    return (r_total / total_weight, g_total / total_weight, b_total / total_weight)


def blur_pixel(
    pixels: Sequence[Pixel],
    pixel: Pixel,
    columns: int,
    rows: int,
    blur_distance: int,
    weight: float,
) -> tuple[float, float, float]:
    """Blended color of a single grid cell."""
    _check_params(columns, rows, blur_distance, weight)
    return blurred_color(pixel, surrounding_pixels(pixels, pixel, columns, rows, blur_distance), weight)


@njit(cache=True)
def _blur_impl(
    colors: np.ndarray,
    indices: np.ndarray,
    out: np.ndarray,
    columns: int,
    rows: int,
    blur_distance: int,
    weight: float,
) -> None:
    n = colors.shape[0]
    for i in range(n):
        col = indices[i] % columns
        row = indices[i] // columns
        r = colors[i, 0]
        g = colors[i, 1]
        b = colors[i, 2]
        total = 1.0
        for dy in range(-blur_distance, blur_distance + 1):
            for dx in range(-blur_distance, blur_distance + 1):
                if dx == 0 and dy == 0:
                    continue
                nc = col + dx
                nr = row + dy
                if 0 <= nc < columns and 0 <= nr < rows:
                    j = nr * columns + nc
                    if j < n:
                        r += colors[j, 0] * weight
                        g += colors[j, 1] * weight
                        b += colors[j, 2] * weight
                        total += weight
        out[i, 0] = r / total
        out[i, 1] = g / total
        out[i, 2] = b / total


def blur_grid(
    pixels: Sequence[Pixel],
    columns: int,
    rows: int,
    blur_distance: int,
    weight: float,
) -> Array:
    """Blur every pixel of a grid at once.

    Parameters
    ----------
    pixels : sequence of Pixel
        Grid in row-major order.
    columns, rows : int
        Grid dimensions.
    blur_distance : int
        Window half-width (>=0).
    weight : float
        Per-neighbor weight (>=0).

    Returns
    -------
    np.ndarray
        Array of shape (len(pixels), 3), dtype=float64, values in 0..1.
    """
    _check_params(columns, rows, blur_distance, weight)
    n = len(pixels)
    out = np.empty((n, 3), dtype=np.float64)
    if n == 0:
        return out
    colors = np.array([p.rgb for p in pixels], dtype=np.float64) / 255.0
    indices = np.array([p.index for p in pixels], dtype=np.int64)
    _blur_impl(colors, indices, out, int(columns), int(rows), int(blur_distance), float(weight))
    return out


__all__ = ["surrounding_pixels", "blurred_color", "blur_pixel", "blur_grid"]
