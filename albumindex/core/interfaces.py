"""
Abstract interfaces following Interface Segregation Principle (SOLID).
Defines contracts and data types shared by all albumindex components.
"""
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Callable, ContextManager, Dict, Iterator, List
from dataclasses import dataclass, field


Catalog = Dict[str, List[str]]


@dataclass
class ImageDimensions:
    """Represents image dimensions with utility properties."""
    width: int
    height: int

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width


@dataclass
class ArchiveEntry:
    """
    One entry of an archive container.

    Attributes:
        name: Path of the entry inside the archive, '/'-separated
        is_dir: Whether the entry is a directory
        read: Accessor returning the entry's raw bytes
    """
    name: str
    is_dir: bool
    read: Callable[[], bytes] = field(repr=False, compare=False)

    @property
    def leading_segment(self) -> str:
        return self.name.split("/")[0]

    @property
    def base_name(self) -> str:
        return PurePosixPath(self.name).name

    @property
    def suffix(self) -> str:
        return PurePosixPath(self.name).suffix.lower()


@dataclass
class ExtractionResult:
    """Outcome of materializing a single archive."""
    archive: Path
    album: str
    extracted: int = 0
    skipped: bool = False
    collisions: int = 0


@dataclass
class MaterializeReport:
    """Aggregate counts for one pass over the archive source directory."""
    results: List[ExtractionResult] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

    @property
    def extracted_archives(self) -> int:
        return sum(1 for r in self.results if not r.skipped)

    @property
    def skipped_archives(self) -> int:
        return sum(1 for r in self.results if r.skipped)


@dataclass
class AlbumResult:
    """Normalized output paths of one album, in processing order."""
    album: str
    paths: List[str] = field(default_factory=list)
    processed: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class RunSummary:
    """Counts reported at the end of a pipeline run."""
    total_albums: int = 0
    total_paths: int = 0
    new_albums: int = 0
    new_paths: int = 0
    albums_found: int = 0
    albums_discovered: int = 0
    paths_discovered: int = 0
    albums_failed: int = 0
    archives_extracted: int = 0
    archives_skipped: int = 0
    archives_failed: int = 0
    images_processed: int = 0
    images_skipped: int = 0
    images_failed: int = 0


class IArchiveReader(ABC):
    """Interface for reading archive containers."""

    @abstractmethod
    def supports(self, path: Path) -> bool:
        """Check if the reader can open this archive."""
        pass

    @abstractmethod
    def open(self, path: Path) -> ContextManager[List[ArchiveEntry]]:
        """Open archive and expose its entries in container order."""
        pass


class IImageTranscoder(ABC):
    """Interface for image metadata, resizing and re-encoding."""

    @abstractmethod
    def read_dimensions(self, data: bytes) -> ImageDimensions:
        """Read pixel dimensions from raw image bytes."""
        pass

    @abstractmethod
    def target_size(self, dimensions: ImageDimensions) -> ImageDimensions:
        """Compute the resize target for an image of the given size."""
        pass

    @abstractmethod
    def transcode(self, data: bytes) -> bytes:
        """Resize and re-encode raw image bytes to the output format."""
        pass


class IMaterializer(ABC):
    """Interface for turning archives into album directories."""

    @abstractmethod
    def materialize(self, archive_path: Path) -> ExtractionResult:
        """Extract one archive into its album directory."""
        pass

    @abstractmethod
    def materialize_all(self, source_dir: Path) -> MaterializeReport:
        """Extract every archive found in source_dir."""
        pass


class INormalizer(ABC):
    """Interface for normalizing the images of an album directory."""

    @abstractmethod
    def normalize_album(self, album_dir: Path, album: str) -> AlbumResult:
        """Produce normalized outputs for every image in album_dir."""
        pass


class ICatalogStore(ABC):
    """Interface for the persisted album catalog."""

    @abstractmethod
    def load(self) -> Catalog:
        """Load catalog, returning an empty one if absent or unreadable."""
        pass

    @abstractmethod
    def save(self, catalog: Catalog) -> None:
        """Persist the whole catalog."""
        pass


def iter_catalog_paths(catalog: Catalog) -> Iterator[str]:
    """Yield every path of every album in catalog order."""
    for paths in catalog.values():
        yield from paths
