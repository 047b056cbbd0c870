"""
Command Line Interface for processing downloaded album archives.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .image.transcoder import TranscodeConfig
from .pipeline import AlbumPipeline, PipelineConfig, DEFAULT_ROOT, DEFAULT_INDEX_FILE


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('albumindex')


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='albumindex',
        description='Extract downloaded album archives, normalize their images and update the index',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normal run (skip already processed)
  albumindex

  # Force reprocess all images
  albumindex --force

  # Force re-extract archives
  albumindex --extract
"""
    )

    parser.add_argument('--root', type=Path, default=DEFAULT_ROOT,
                        help=f'Repository root holding the album directories (default: {DEFAULT_ROOT})')
    parser.add_argument('--index', type=Path, default=DEFAULT_INDEX_FILE,
                        help=f'Catalog file (default: {DEFAULT_INDEX_FILE})')
    parser.add_argument('--downloads', type=Path, help='Archive source directory (default: <root>/downloaded_albums)')
    parser.add_argument('--extracted', type=Path, help='Extraction root (default: <root>/extracted_albums)')
    parser.add_argument('--processed', type=Path, help='Normalized output root (default: <root>/processed/downloaded)')
    parser.add_argument('-f', '--force', action='store_true', help='Force reprocess all images')
    parser.add_argument('-e', '--extract', action='store_true', help='Force re-extract all archives')
    parser.add_argument('-q', '--quality', type=int, default=TranscodeConfig.quality,
                        help=f'Output quality (default: {TranscodeConfig.quality})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    return parser


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Build pipeline configuration from parsed arguments."""
    config = PipelineConfig.from_root(
        args.root,
        args.index,
        force_extract=args.extract,
        force_reprocess=args.force,
        transcode=TranscodeConfig(quality=args.quality),
    )

    if args.downloads:
        config.downloads_dir = args.downloads
    if args.extracted:
        config.extracted_dir = args.extracted
    if args.processed:
        config.processed_dir = args.processed

    return config


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    logger = setup_logging(parsed_args.verbose)

    try:
        config = build_config(parsed_args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        AlbumPipeline(config).run()
    except Exception as e:
        logger.error(f"Processing failed: {e}")
        return 1

    return 0
