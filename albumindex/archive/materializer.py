"""
Archive materialization.
Turns each source archive into a flat directory of raw album images.
"""
from pathlib import Path
from typing import Iterable, List, Optional
from dataclasses import dataclass
import logging

from natsort import natsorted

from ..core.interfaces import (
    IArchiveReader,
    IMaterializer,
    ArchiveEntry,
    ExtractionResult,
    MaterializeReport,
)
from ..core.extensions import IMAGE_EXTENSIONS
from ..core.files import discard, publish_directory
from .zipreader import ZipArchiveReader

logger = logging.getLogger(__name__)

_UNUSABLE_SEGMENTS = {"", ".", ".."}


@dataclass
class MaterializerConfig:
    """Configuration for archive materialization."""
    extracted_dir: Path
    force_extract: bool = False
    staging_dir: Optional[Path] = None

    def __post_init__(self):
        self.extracted_dir = Path(self.extracted_dir)
        if self.staging_dir is None:
            self.staging_dir = self.extracted_dir.parent / f".{self.extracted_dir.name}.staging"
        self.staging_dir = Path(self.staging_dir)


def detect_album_name(entries: Iterable[ArchiveEntry], archive_path: Path) -> str:
    """
    Determine the album an archive belongs to.

    Uses the leading path segment of the first entry that has one,
    falling back to the archive's file name without extension.
    """
    for entry in entries:
        segment = entry.leading_segment
        if segment not in _UNUSABLE_SEGMENTS:
            return segment
    return Path(archive_path).stem


class ArchiveMaterializer(IMaterializer):
    """
    Extracts image entries of archives into per-album directories.

    Existence of an album directory marks its archive as extracted.
    Directories are staged under a separate staging root and renamed
    into place only when every image has been written.
    """

    def __init__(self, config: MaterializerConfig, reader: Optional[IArchiveReader] = None):
        self.config = config
        self.reader = reader or ZipArchiveReader()

    def album_dir(self, album: str) -> Path:
        return self.config.extracted_dir / album

    def materialize(self, archive_path: Path) -> ExtractionResult:
        """
        Extract one archive into its album directory.

        Args:
            archive_path: Path to the source archive

        Returns:
            ExtractionResult with the album name and extracted image count

        Raises:
            Exception: Whatever the archive reader raises for a malformed archive
        """
        archive_path = Path(archive_path)

        with self.reader.open(archive_path) as entries:
            album = detect_album_name(entries, archive_path)
            target = self.album_dir(album)

            if target.exists() and not self.config.force_extract:
                logger.info(f"Already extracted: {album}")
                return ExtractionResult(archive=archive_path, album=album, skipped=True)

            logger.info(f"Extracting: {archive_path.name} -> {album}")
            result = ExtractionResult(archive=archive_path, album=album)
            staging = self.config.staging_dir / album
            discard(staging)

            try:
                self._extract_entries(entries, staging, result)
                if result.extracted:
                    publish_directory(staging, target)
            finally:
                if staging.exists():
                    discard(staging)

        logger.info(f"Extracted {result.extracted} images")
        return result

    def _extract_entries(self, entries: List[ArchiveEntry], staging: Path, result: ExtractionResult) -> None:
        written = set()

        for entry in entries:
            if entry.is_dir:
                continue
            if entry.suffix not in IMAGE_EXTENSIONS:
                continue

            name = entry.base_name
            if name in written:
                result.collisions += 1
                logger.warning(f"Duplicate image name in {result.album}, overwriting: {entry.name}")

            staging.mkdir(parents=True, exist_ok=True)
            (staging / name).write_bytes(entry.read())
            written.add(name)

        result.extracted = len(written)

    def find_archives(self, source_dir: Path) -> List[Path]:
        """List archives in source_dir in natural order."""
        return natsorted(
            [
                f for f in Path(source_dir).iterdir()
                if f.is_file() and self.reader.supports(f)
            ],
            key=lambda p: p.name,
        )

    def materialize_all(self, source_dir: Path) -> MaterializeReport:
        """
        Extract every archive in source_dir.

        A failing archive is logged and recorded; the remaining
        archives are still processed.
        """
        source_dir = Path(source_dir)
        report = MaterializeReport()

        if not source_dir.is_dir():
            logger.info(f"No archive directory at {source_dir}")
            return report

        archives = self.find_archives(source_dir)
        if not archives:
            return report

        logger.info(f"Found {len(archives)} archive(s)")
        self.config.extracted_dir.mkdir(parents=True, exist_ok=True)

        for archive_path in archives:
            try:
                report.results.append(self.materialize(archive_path))
            except Exception as e:
                logger.error(f"Failed to extract {archive_path.name}: {e}")
                report.failed.append(archive_path)

        return report
