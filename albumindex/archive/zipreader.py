"""
Zip archive reading.
Independent of extraction policy - only exposes entries.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List
import logging
import zipfile

from ..core.interfaces import IArchiveReader, ArchiveEntry
from ..core.extensions import is_archive

logger = logging.getLogger(__name__)


class ZipArchiveReader(IArchiveReader):
    """
    Reads zip archives entry by entry.

    Entries are returned in container order. Entry data is read lazily,
    so a corrupt member only fails when its bytes are requested.
    """

    def supports(self, path: Path) -> bool:
        return is_archive(path)

    @contextmanager
    def open(self, path: Path) -> Iterator[List[ArchiveEntry]]:
        """
        Open a zip archive.

        Raises:
            zipfile.BadZipFile: If the archive is malformed
            OSError: If the archive cannot be read
        """
        with zipfile.ZipFile(path) as zf:
            logger.debug(f"Opened {Path(path).name}: {len(zf.infolist())} entries")
            yield [self._to_entry(zf, info) for info in zf.infolist()]

    @staticmethod
    def _to_entry(zf: zipfile.ZipFile, info: zipfile.ZipInfo) -> ArchiveEntry:
        return ArchiveEntry(
            name=info.filename,
            is_dir=info.is_dir(),
            read=lambda: zf.read(info),
        )
