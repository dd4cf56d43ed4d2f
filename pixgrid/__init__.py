"""pixgrid: downsample images to a grid of colored squares, with an optional neighborhood blur."""
from __future__ import annotations

__version__ = "0.1.0"
