"""Draw a flat list of grid colors as solid square cells."""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def draw_cells(colors: Array, columns: int, rows: int, cell_size: int) -> Array:
    """Lay out row-major cell colors and blow each one up to a square.

    Parameters
    ----------
    colors : np.ndarray
        Array of shape (columns * rows, 3), dtype=uint8, one color per cell
        in row-major order.
    columns, rows : int
        Grid dimensions (>=1).
    cell_size : int
        Side of each square in output pixels (>=1).

    Returns
    -------
    np.ndarray
        Image of shape (rows * cell_size, columns * cell_size, 3), uint8.
    """
    if not isinstance(colors, np.ndarray) or colors.ndim != 2 or colors.shape[1] != 3:
        raise ValueError("colors must have shape (N, 3)")
    if columns < 1 or rows < 1:
        raise ValueError("columns and rows must be >= 1")
    if colors.shape[0] != columns * rows:
        raise ValueError(f"expected {columns * rows} colors for a {columns}x{rows} grid, got {colors.shape[0]}")
    if cell_size < 1:
        raise ValueError("cell_size must be >= 1")

    grid = colors.astype(np.uint8, copy=False).reshape(rows, columns, 3)
    # Broadcast each cell over a cell_size x cell_size block
    block = np.broadcast_to(
        grid[:, None, :, None, :],
        (rows, cell_size, columns, cell_size, 3),
    )
    return block.reshape(rows * cell_size, columns * cell_size, 3).copy()
