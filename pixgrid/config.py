"""Grid and blur settings shared by the CLI and the viewer."""
from __future__ import annotations

from dataclasses import dataclass

from .extract import RESAMPLE_MODES

GRID_SIZES = (50, 100, 150, 200)
MAX_GRID_SIZE = 200
MAX_BLUR_DISTANCE = 30


@dataclass(frozen=True)
class GridOptions:
    size: int = 100
    blur_distance: int = 5
    weight: float = 0.03
    blurred: bool = True
    cell_size: int = 8
    resample: str = "bilinear"

    def validate(self) -> None:
        """Raise ValueError for out-of-range settings."""
        if not 1 <= self.size <= MAX_GRID_SIZE:
            raise ValueError(f"size must be in 1..{MAX_GRID_SIZE}")
        if self.blur_distance < 0:
            raise ValueError("blur_distance must be >= 0")
        if self.weight < 0:
            raise ValueError("weight must be >= 0")
        if self.cell_size < 1:
            raise ValueError("cell_size must be >= 1")
        if self.resample not in RESAMPLE_MODES:
            raise ValueError(f"Unknown resample mode: {self.resample}")


__all__ = ["GRID_SIZES", "MAX_GRID_SIZE", "MAX_BLUR_DISTANCE", "GridOptions"]
