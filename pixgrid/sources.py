"""Data sources: where image and pixel bytes come from.

Anything with a ``load_bytes(name) -> bytes`` method can feed the
extractor. Missing names raise :class:`~pixgrid.errors.ResourceNotFound`.
"""
from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Mapping, Protocol, Union

from .errors import ResourceNotFound

DEFAULT_RESOURCE = "sample.ppm"


class DataSource(Protocol):
    def load_bytes(self, name: str) -> bytes:
        ...


class DirectorySource:
    """Files below a root directory."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def load_bytes(self, name: str) -> bytes:
        p = self.root / name
        if not p.is_file():
            raise ResourceNotFound(f"No such file: {p}")
        return p.read_bytes()

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.root)!r})"


class PackageSource:
    """Resources bundled inside an importable package."""

    def __init__(self, package: str = "pixgrid.resources") -> None:
        self.package = package

    def load_bytes(self, name: str) -> bytes:
        res = resources.files(self.package).joinpath(name)
        if not res.is_file():
            raise ResourceNotFound(f"No bundled resource {name!r} in {self.package}")
        return res.read_bytes()

    def __repr__(self) -> str:
        return f"PackageSource({self.package!r})"


class MemorySource:
    """In-memory name -> bytes mapping."""

    def __init__(self, entries: Mapping[str, bytes] | None = None) -> None:
        self.entries = dict(entries or {})

    def load_bytes(self, name: str) -> bytes:
        try:
            return self.entries[name]
        except KeyError:
            raise ResourceNotFound(f"No entry named {name!r}") from None


def source_for_path(path: Union[str, Path]) -> tuple[DirectorySource, str]:
    """Split a file path into a directory source and the file name."""
    p = Path(path)
    return DirectorySource(p.parent), p.name


__all__ = [
    "DEFAULT_RESOURCE",
    "DataSource",
    "DirectorySource",
    "PackageSource",
    "MemorySource",
    "source_for_path",
]
