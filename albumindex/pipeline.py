"""
AlbumPipeline - Main facade for processing downloaded album archives.
Orchestrates extraction, normalization and catalog merging.
Follows Facade Pattern for simplified API.
"""
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass, field
import logging

from natsort import natsorted

from .core.interfaces import (
    Catalog,
    ICatalogStore,
    IMaterializer,
    INormalizer,
    RunSummary,
    iter_catalog_paths,
)
from .archive.materializer import ArchiveMaterializer, MaterializerConfig
from .image.normalizer import AlbumNormalizer, NormalizerConfig
from .image.transcoder import ImageTranscoder, TranscodeConfig
from .catalog.store import JsonCatalogStore
from .catalog.merger import merge_catalog

logger = logging.getLogger(__name__)

DEFAULT_ROOT = Path("timeliner_repo")
DEFAULT_INDEX_FILE = Path("index.json")


@dataclass
class PipelineConfig:
    """Configuration for a pipeline run."""
    downloads_dir: Path
    extracted_dir: Path
    processed_dir: Path
    index_file: Path
    force_extract: bool = False
    force_reprocess: bool = False
    transcode: TranscodeConfig = field(default_factory=TranscodeConfig)

    def __post_init__(self):
        self.downloads_dir = Path(self.downloads_dir)
        self.extracted_dir = Path(self.extracted_dir)
        self.processed_dir = Path(self.processed_dir)
        self.index_file = Path(self.index_file)

    @classmethod
    def from_root(cls, root: Path = DEFAULT_ROOT, index_file: Path = DEFAULT_INDEX_FILE, **kwargs) -> "PipelineConfig":
        """Build the standard directory layout under root."""
        root = Path(root)
        return cls(
            downloads_dir=root / "downloaded_albums",
            extracted_dir=root / "extracted_albums",
            processed_dir=root / "processed" / "downloaded",
            index_file=index_file,
            **kwargs,
        )


class AlbumPipeline:
    """
    Main facade for one incremental run over downloaded albums.

    Every stage skips work whose result already exists, so repeated or
    interrupted runs converge on the same catalog.

    Example:
        pipeline = AlbumPipeline(PipelineConfig.from_root(Path("timeliner_repo")))
        summary = pipeline.run()
        print(f"{summary.total_albums} albums, {summary.total_paths} photos")
    """

    def __init__(
        self,
        config: PipelineConfig,
        materializer: Optional[IMaterializer] = None,
        normalizer: Optional[INormalizer] = None,
        store: Optional[ICatalogStore] = None,
    ):
        self.config = config

        self.materializer = materializer or ArchiveMaterializer(MaterializerConfig(
            extracted_dir=config.extracted_dir,
            force_extract=config.force_extract,
        ))
        self.normalizer = normalizer or AlbumNormalizer(
            NormalizerConfig(
                processed_dir=config.processed_dir,
                force_reprocess=config.force_reprocess,
                output_extension=config.transcode.output_extension,
            ),
            ImageTranscoder(config.transcode),
        )
        self.store = store or JsonCatalogStore(config.index_file)

    def run(self) -> RunSummary:
        """
        Run extraction, normalization and merging once.

        Returns:
            RunSummary with counts for this run and the final catalog

        Raises:
            OSError: If the final catalog cannot be written
        """
        logger.info("Starting download processing...")
        if self.config.force_reprocess:
            logger.info("Force reprocess mode: will reprocess all images")
        if self.config.force_extract:
            logger.info("Force extract mode: will re-extract all archives")

        self._ensure_directories()
        existing = self.store.load()
        summary = RunSummary()

        report = self.materializer.materialize_all(self.config.downloads_dir)
        summary.archives_extracted = report.extracted_archives
        summary.archives_skipped = report.skipped_archives
        summary.archives_failed = len(report.failed)

        albums = self.list_albums()
        summary.albums_found = len(albums)
        if not albums:
            logger.info("No extracted albums found to process")
            summary.total_albums = len(existing)
            summary.total_paths = sum(1 for _ in iter_catalog_paths(existing))
            return summary

        logger.info(f"Processing {len(albums)} album(s) from extracted files...")
        discovered = self._normalize_albums(albums, summary)

        merge = merge_catalog(existing, discovered)
        logger.info("Writing updated catalog...")
        self.store.save(merge.catalog)

        summary.total_albums = len(merge.catalog)
        summary.total_paths = sum(1 for _ in iter_catalog_paths(merge.catalog))
        summary.new_albums = len(merge.new_albums)
        summary.new_paths = merge.new_paths
        summary.albums_discovered = len(discovered)
        summary.paths_discovered = sum(1 for _ in iter_catalog_paths(discovered))

        self._log_summary(summary)
        return summary

    def list_albums(self) -> List[Path]:
        """Album directories under the extraction root, in natural order."""
        root = self.config.extracted_dir
        if not root.is_dir():
            return []
        return natsorted(
            [d for d in root.iterdir() if d.is_dir()],
            key=lambda p: p.name,
        )

    def _ensure_directories(self) -> None:
        for directory in (self.config.downloads_dir, self.config.extracted_dir, self.config.processed_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def _normalize_albums(self, albums: List[Path], summary: RunSummary) -> Catalog:
        discovered: Catalog = {}

        for album_dir in albums:
            album = album_dir.name
            logger.info(f"Processing album: {album}")

            try:
                result = self.normalizer.normalize_album(album_dir, album)
            except Exception as e:
                logger.error(f"Error processing {album}: {e}")
                summary.albums_failed += 1
                continue

            summary.images_processed += result.processed
            summary.images_skipped += result.skipped
            summary.images_failed += result.failed

            if result.paths:
                discovered[album] = result.paths

        return discovered

    def _log_summary(self, summary: RunSummary) -> None:
        logger.info("Processing complete!")
        logger.info(f"  Total albums: {summary.total_albums}")
        logger.info(f"  Total photos: {summary.total_paths}")
        logger.info(f"  New albums added: {summary.new_albums}")
        logger.info(f"  New photos added: {summary.new_paths}")
        if summary.archives_failed or summary.albums_failed or summary.images_failed:
            logger.warning(
                f"Completed with failures: {summary.archives_failed} archive(s), "
                f"{summary.albums_failed} album(s), {summary.images_failed} image(s)"
            )
