"""
Album normalization.
Produces one resized, re-encoded output per source image of an album.
"""
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass
import logging

from natsort import natsorted

from ..core.interfaces import INormalizer, IImageTranscoder, AlbumResult
from ..core.extensions import is_image
from ..core.files import atomic_write_bytes, sanitize_filename
from .transcoder import ImageTranscoder

logger = logging.getLogger(__name__)


@dataclass
class NormalizerConfig:
    """Configuration for album normalization."""
    processed_dir: Path
    force_reprocess: bool = False
    output_extension: str = ".webp"
    progress_every: int = 10

    def __post_init__(self):
        self.processed_dir = Path(self.processed_dir)


class AlbumNormalizer(INormalizer):
    """
    Normalizes every image of an album directory.

    An existing output file counts as already normalized, unless
    reprocessing is forced. Outputs are written atomically.
    """

    def __init__(self, config: NormalizerConfig, transcoder: Optional[IImageTranscoder] = None):
        self.config = config
        self.transcoder = transcoder or ImageTranscoder()

    def album_output_dir(self, album: str) -> Path:
        return self.config.processed_dir / sanitize_filename(album)

    def output_path(self, album: str, source: Path) -> Path:
        """Output path for a source image: <album dir>/<stem><output ext>."""
        return self.album_output_dir(album) / f"{Path(source).stem}{self.config.output_extension}"

    def get_images(self, album_dir: Path) -> List[Path]:
        """Get recognized images of the album in natural order."""
        images = [
            f for f in Path(album_dir).iterdir()
            if f.is_file() and is_image(f)
        ]
        return natsorted(images, key=lambda p: p.name)

    def normalize_album(self, album_dir: Path, album: str) -> AlbumResult:
        """
        Normalize all images of an album.

        Args:
            album_dir: Directory holding the raw album images
            album: Album name, used for the output directory

        Returns:
            AlbumResult listing reused and newly written outputs in order

        Raises:
            OSError: If the album directory cannot be listed
        """
        result = AlbumResult(album=album)

        for image_path in self.get_images(album_dir):
            output_path = self.output_path(album, image_path)

            if output_path.exists() and not self.config.force_reprocess:
                result.paths.append(str(output_path))
                result.skipped += 1
                continue

            try:
                data = self.transcoder.transcode(image_path.read_bytes())
                atomic_write_bytes(output_path, data)
            except Exception as e:
                logger.error(f"Failed to process {album}/{image_path.name}: {e}")
                result.failed += 1
                continue

            result.paths.append(str(output_path))
            result.processed += 1

            if result.processed % self.config.progress_every == 0:
                logger.debug(f"Processed {result.processed} images...")

        logger.info(
            f"Processed {result.processed} images, skipped {result.skipped}"
            + (f", failed {result.failed}" if result.failed else "")
        )
        return result
