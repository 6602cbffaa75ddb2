import asyncio
import pytest
from pathlib import Path

from petcli.domain.models.common import FilePath
from petcli.infrastructure.filesystem.local_fs import LocalFileSystem


@pytest.fixture
def file_system():
    return LocalFileSystem()


def test_read_file(file_system: LocalFileSystem, write_data_file):
    path = write_data_file("Rex,5,Labrador\nsecond line\n")
    content = asyncio.run(file_system.read_file(FilePath(str(path))))
    assert content == "Rex,5,Labrador\nsecond line\n"


def test_read_missing_file(file_system: LocalFileSystem, tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="File not found"):
        asyncio.run(file_system.read_file(FilePath(str(tmp_path / "nope.txt"))))


def test_read_directory_is_not_found(file_system: LocalFileSystem, tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        asyncio.run(file_system.read_file(FilePath(str(tmp_path))))


def test_undecodable_file_raises_ioerror(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("Réx,5,Labrador".encode("latin-1"))
    with pytest.raises(IOError, match="Failed to read file"):
        asyncio.run(LocalFileSystem(encoding="utf-8").read_file(FilePath(str(path))))


def test_custom_encoding(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("Réx,5,Labrador".encode("latin-1"))
    content = asyncio.run(LocalFileSystem(encoding="latin-1").read_file(FilePath(str(path))))
    assert content == "Réx,5,Labrador"
