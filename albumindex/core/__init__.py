"""
Core module - Interfaces, data types and filesystem helpers for albumindex.
"""
from .interfaces import (
    # Type aliases
    Catalog,

    # Data classes
    ImageDimensions,
    ArchiveEntry,
    ExtractionResult,
    MaterializeReport,
    AlbumResult,
    RunSummary,

    # Abstract interfaces
    IArchiveReader,
    IImageTranscoder,
    IMaterializer,
    INormalizer,
    ICatalogStore,

    iter_catalog_paths,
)
from .extensions import IMAGE_EXTENSIONS, ARCHIVE_EXTENSIONS, is_image, is_archive
from .files import sanitize_filename, atomic_write_bytes, atomic_write_text

__all__ = [
    "Catalog",

    "ImageDimensions",
    "ArchiveEntry",
    "ExtractionResult",
    "MaterializeReport",
    "AlbumResult",
    "RunSummary",

    "IArchiveReader",
    "IImageTranscoder",
    "IMaterializer",
    "INormalizer",
    "ICatalogStore",

    "iter_catalog_paths",

    "IMAGE_EXTENSIONS",
    "ARCHIVE_EXTENSIONS",
    "is_image",
    "is_archive",

    "sanitize_filename",
    "atomic_write_bytes",
    "atomic_write_text",
]
