"""Pixel value type.

A :class:`Pixel` is one cell of a ``columns x rows`` grid: an 8-bit RGB
triple plus its row-major ``index`` (``index = row * columns + col``).
"""
from __future__ import annotations

from dataclasses import dataclass


def normalize_color(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Map 0..255 channel values to the unit interval."""
    return (r / 255.0, g / 255.0, b / 255.0)


@dataclass(frozen=True)
class Pixel:
    index: int
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("index must be >= 0")
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not 0 <= v <= 255:
                raise ValueError(f"{name} must be in 0..255, got {v}")

    @property
    def color(self) -> tuple[float, float, float]:
        """Normalized ``(r, g, b)`` in 0..1."""
        return normalize_color(self.r, self.g, self.b)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


__all__ = ["Pixel", "normalize_color"]
