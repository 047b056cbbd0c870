"""
Image transcoding operations.
Reads metadata, downscales and re-encodes raw image bytes with Pillow.
"""
from io import BytesIO
from dataclasses import dataclass
from typing import Optional
from PIL import Image
from pillow_heif import register_heif_opener
import logging

from ..core.interfaces import IImageTranscoder, ImageDimensions

logger = logging.getLogger(__name__)

register_heif_opener()
Image.MAX_IMAGE_PIXELS = 1_000_000_000


@dataclass
class TranscodeConfig:
    """Configuration for normalized output images."""
    max_width: int = 1920
    max_height: int = 1080
    output_format: str = "WEBP"
    output_extension: str = ".webp"
    quality: int = 90

    def __post_init__(self):
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(f"Invalid size limits: {self.max_width}x{self.max_height}")
        if not 1 <= self.quality <= 100:
            raise ValueError(f"Quality must be between 1 and 100, got {self.quality}")
        if not self.output_extension.startswith("."):
            self.output_extension = f".{self.output_extension}"


class ImageTranscoder(IImageTranscoder):
    """
    Normalizes images to a bounded size and a single output format.

    Landscape and square images are bounded by width, portrait images
    by height. Images are only ever scaled down.
    """

    def __init__(self, config: Optional[TranscodeConfig] = None):
        self.config = config or TranscodeConfig()

    def read_dimensions(self, data: bytes) -> ImageDimensions:
        with Image.open(BytesIO(data)) as img:
            return ImageDimensions(img.width, img.height)

    def target_size(self, dimensions: ImageDimensions) -> ImageDimensions:
        """Compute the resize target, never enlarging."""
        w, h = dimensions.width, dimensions.height

        if w <= 0 or h <= 0:
            return dimensions

        if not dimensions.is_portrait:
            if w <= self.config.max_width:
                return dimensions
            new_w = self.config.max_width
            new_h = max(1, round(h * new_w / w))
        else:
            if h <= self.config.max_height:
                return dimensions
            new_h = self.config.max_height
            new_w = max(1, round(w * new_h / h))

        return ImageDimensions(new_w, new_h)

    def transcode(self, data: bytes) -> bytes:
        """
        Resize and re-encode an image.

        Args:
            data: Raw bytes of the source image

        Returns:
            Encoded bytes in the configured output format

        Raises:
            PIL.UnidentifiedImageError: If the bytes are not a readable image
            OSError: If decoding or encoding fails
        """
        dims = self.read_dimensions(data)
        target = self.target_size(dims)

        with Image.open(BytesIO(data)) as img:
            if (target.width, target.height) != (dims.width, dims.height):
                logger.debug(f"Resizing {dims.width}x{dims.height} -> {target.width}x{target.height}")
                out = img.resize((target.width, target.height), Image.Resampling.LANCZOS)
            else:
                out = img.copy()

        out = self._prepare_for_output(out)
        buffer = BytesIO()
        out.save(buffer, format=self.config.output_format, quality=self.config.quality)
        return buffer.getvalue()

    def _prepare_for_output(self, img: Image.Image) -> Image.Image:
        """Convert image to a mode the output encoder accepts."""
        if img.mode in ("RGB", "RGBA"):
            return img
        if img.mode in ("LA", "PA") or (img.mode == "P" and "transparency" in img.info):
            return img.convert("RGBA")
        return img.convert("RGB")
