"""
Archive reading and materialization module.
"""
from .zipreader import ZipArchiveReader
from .materializer import ArchiveMaterializer, MaterializerConfig, detect_album_name

__all__ = ['ZipArchiveReader', 'ArchiveMaterializer', 'MaterializerConfig', 'detect_album_name']
