"""
AlbumIndex - Incremental processing of downloaded photo album archives.

Turns a growing directory of album archives into a normalized,
deduplicated media index:
- Archive extraction into per-album image directories
- Image normalization (downscale + WEBP re-encode)
- Catalog merging without duplicates across repeated runs

Every stage skips work whose result already exists, so interrupted
runs can simply be started again.

Example usage:
    from albumindex import AlbumPipeline, PipelineConfig

    config = PipelineConfig.from_root(Path("timeliner_repo"), force_reprocess=False)
    summary = AlbumPipeline(config).run()
    print(f"Added {summary.new_paths} photos to {summary.total_albums} albums")

    # Individual stages
    from albumindex.catalog import merge_catalog

    merged = merge_catalog({"A": ["p1"]}, {"A": ["p1", "p2"]}).catalog
"""

from .pipeline import AlbumPipeline, PipelineConfig
from .core.interfaces import (
    Catalog,
    ImageDimensions,
    ArchiveEntry,
    ExtractionResult,
    MaterializeReport,
    AlbumResult,
    RunSummary,
)
from .archive import ZipArchiveReader, ArchiveMaterializer, MaterializerConfig, detect_album_name
from .image import ImageTranscoder, TranscodeConfig, AlbumNormalizer, NormalizerConfig
from .catalog import JsonCatalogStore, MergeResult, merge_catalog
from .core.extensions import (
    IMAGE_EXTENSIONS,
    ARCHIVE_EXTENSIONS,
    is_image,
    is_archive,
)
from .core.files import sanitize_filename

__version__ = "1.0.0"

__all__ = [
    # Main facade
    "AlbumPipeline",
    "PipelineConfig",

    # Core types
    "Catalog",
    "ImageDimensions",
    "ArchiveEntry",
    "ExtractionResult",
    "MaterializeReport",
    "AlbumResult",
    "RunSummary",

    # Archives
    "ZipArchiveReader",
    "ArchiveMaterializer",
    "MaterializerConfig",
    "detect_album_name",

    # Images
    "ImageTranscoder",
    "TranscodeConfig",
    "AlbumNormalizer",
    "NormalizerConfig",

    # Catalog
    "JsonCatalogStore",
    "MergeResult",
    "merge_catalog",

    # Extensions
    "IMAGE_EXTENSIONS",
    "ARCHIVE_EXTENSIONS",
    "is_image",
    "is_archive",
    "sanitize_filename",
]
