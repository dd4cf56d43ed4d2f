import pytest

from pixgrid.errors import ResourceNotFound
from pixgrid.sources import (
    DEFAULT_RESOURCE,
    DirectorySource,
    MemorySource,
    PackageSource,
    source_for_path,
)


def test_directory_source(tmp_path):
    (tmp_path / "a.bin").write_bytes(b"abc")
    src = DirectorySource(tmp_path)
    assert src.load_bytes("a.bin") == b"abc"
    with pytest.raises(ResourceNotFound):
        src.load_bytes("missing.bin")


def test_missing_is_also_file_not_found():
    with pytest.raises(FileNotFoundError):
        MemorySource().load_bytes("x")


def test_package_source_has_sample():
    data = PackageSource().load_bytes(DEFAULT_RESOURCE)
    assert data.startswith(b"P3")
    with pytest.raises(ResourceNotFound):
        PackageSource().load_bytes("nothing-here.png")


def test_source_for_path(tmp_path):
    p = tmp_path / "pic.png"
    p.write_bytes(b"data")
    src, name = source_for_path(p)
    assert name == "pic.png"
    assert src.load_bytes(name) == b"data"
