"""
Filesystem helpers for publishing results atomically.

A result only appears under its final name once it is complete, so
existence of a path can safely be taken as "work is done".
"""
from pathlib import Path
import logging
import os
import re
import shutil

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*]')

PARTIAL_SUFFIX = ".partial"


def sanitize_filename(name: str) -> str:
    """Replace filesystem-unsafe characters with '_' and trim whitespace."""
    return _UNSAFE_CHARS.sub("_", name).strip()


def partial_path(path: Path) -> Path:
    """Hidden sibling used while path is being written."""
    return path.with_name(f".{path.name}{PARTIAL_SUFFIX}")


def atomic_write_bytes(path: Path, data: bytes) -> Path:
    """Write data to path via a temporary sibling and an atomic rename."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = partial_path(path)
    try:
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return path


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> Path:
    return atomic_write_bytes(path, text.encode(encoding))


def publish_directory(staging: Path, target: Path) -> int:
    """
    Move the files of a staging directory into target.

    A missing target is published with a single rename. An existing target
    has its files replaced one by one. The staging directory is removed.

    Returns:
        Number of files published
    """
    files = [f for f in staging.iterdir() if f.is_file()]

    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
        os.replace(staging, target)
        return len(files)

    for f in files:
        os.replace(f, target / f.name)
    shutil.rmtree(staging, ignore_errors=True)
    return len(files)


def discard(path: Path) -> None:
    """Remove a leftover partial file or directory, if any."""
    if path.is_dir():
        logger.debug(f"Removing stale staging directory: {path}")
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()
