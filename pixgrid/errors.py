"""Error types raised while loading pixel grids.

Both kinds are non-fatal for the loading entry points in
:mod:`pixgrid.extract`, which log them and return an empty pixel list.
"""
from __future__ import annotations


class PixGridError(Exception):
    """Base class for pixgrid errors."""


class ResourceNotFound(PixGridError, FileNotFoundError):
    """A data source has no entry under the requested name."""


class DecodeError(PixGridError, ValueError):
    """Source bytes could not be decoded as an image or a JSON pixel array."""


__all__ = ["PixGridError", "ResourceNotFound", "DecodeError"]
