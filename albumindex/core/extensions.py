"""
Centralized media file extensions.

Used by: archive materializer, album normalizer
"""
from pathlib import Path

IMAGE_EXTENSIONS = {
    '.jpg', '.jpeg', '.png', '.heic', '.webp', '.gif', '.tiff', '.bmp',
}

ARCHIVE_EXTENSIONS = {
    '.zip',
}


def is_image(path) -> bool:
    """Check if path has a recognized image extension."""
    return Path(path).suffix.lower() in IMAGE_EXTENSIONS


def is_archive(path) -> bool:
    """Check if path is an archive file."""
    return Path(path).suffix.lower() in ARCHIVE_EXTENSIONS
