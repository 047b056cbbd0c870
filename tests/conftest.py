"""
Pytest configuration and fixtures for AlbumIndex tests.
"""
import pytest
import tempfile
import shutil
import zipfile
from io import BytesIO
from pathlib import Path
from PIL import Image

from albumindex import PipelineConfig


def make_image_bytes(size=(800, 600), color="blue", fmt="JPEG") -> bytes:
    """Encode a solid-color image."""
    buffer = BytesIO()
    mode = "RGBA" if fmt == "PNG" else "RGB"
    Image.new(mode, size, color=color).save(buffer, fmt)
    return buffer.getvalue()


def make_zip(path: Path, entries: dict) -> Path:
    """
    Create a zip archive.

    Args:
        path: Archive path
        entries: Mapping of entry name -> bytes, or None for a directory entry
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries.items():
            if data is None:
                zf.writestr(zipfile.ZipInfo(name if name.endswith("/") else name + "/"), b"")
            else:
                zf.writestr(name, data)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="albumindex_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def config(temp_dir) -> PipelineConfig:
    """Pipeline configuration with every root inside the temp dir."""
    return PipelineConfig.from_root(temp_dir / "repo", temp_dir / "index.json")


@pytest.fixture
def album_archive(config) -> Path:
    """An archive holding one album with two images, a note and a folder entry."""
    return make_zip(config.downloads_dir / "trip.zip", {
        "Trip2020/": None,
        "Trip2020/beach.jpg": make_image_bytes((3000, 2000), "yellow"),
        "Trip2020/tower.png": make_image_bytes((2000, 3000), "red", "PNG"),
        "Trip2020/notes.txt": b"not an image",
    })


@pytest.fixture
def album_dir(temp_dir) -> Path:
    """A raw album directory with three images and a text file."""
    album = temp_dir / "raw" / "Holiday"
    album.mkdir(parents=True)

    (album / "img_2.jpg").write_bytes(make_image_bytes((3000, 2000), "green"))
    (album / "img_10.jpg").write_bytes(make_image_bytes((800, 600), "blue"))
    (album / "img_1.png").write_bytes(make_image_bytes((2000, 3000), "red", "PNG"))
    (album / "notes.txt").write_text("not an image")

    return album
