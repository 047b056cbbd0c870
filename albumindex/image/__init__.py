"""
Image processing module for albumindex.
"""
from .transcoder import ImageTranscoder, TranscodeConfig
from .normalizer import AlbumNormalizer, NormalizerConfig

__all__ = [
    'ImageTranscoder',
    'TranscodeConfig',
    'AlbumNormalizer',
    'NormalizerConfig',
]
