"""Tests for CLI module."""

import json
from pathlib import Path
from unittest.mock import patch

from albumindex.cli import create_parser, build_config, main

from conftest import make_image_bytes, make_zip


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.root == Path("timeliner_repo")
        assert args.index == Path("index.json")
        assert args.force is False
        assert args.extract is False
        assert args.quality == 90
        assert args.verbose is False

    def test_short_flags(self):
        args = create_parser().parse_args(['-f', '-e', '-v', '-q', '75'])

        assert args.force is True
        assert args.extract is True
        assert args.verbose is True
        assert args.quality == 75


class TestBuildConfig:
    """Tests for configuration building."""

    def test_flags_map_to_config(self):
        args = create_parser().parse_args(['--root', 'r', '--force', '--extract'])

        config = build_config(args)

        assert config.downloads_dir == Path('r/downloaded_albums')
        assert config.force_reprocess is True
        assert config.force_extract is True

    def test_directory_overrides(self):
        args = create_parser().parse_args(['--downloads', 'in', '--extracted', 'ex', '--processed', 'out'])

        config = build_config(args)

        assert config.downloads_dir == Path('in')
        assert config.extracted_dir == Path('ex')
        assert config.processed_dir == Path('out')


class TestMain:
    """Tests for main entry point."""

    def test_run_success(self, temp_dir):
        root = temp_dir / "repo"
        index = temp_dir / "index.json"
        make_zip(root / "downloaded_albums" / "a.zip", {"Album/a.jpg": make_image_bytes()})

        result = main(['--root', str(root), '--index', str(index)])

        assert result == 0
        assert list(json.loads(index.read_text())) == ["Album"]

    def test_invalid_quality(self, temp_dir):
        result = main(['--root', str(temp_dir), '-q', '0'])

        assert result == 1

    def test_run_failure_returns_nonzero(self, temp_dir):
        with patch('albumindex.cli.AlbumPipeline') as pipeline:
            pipeline.return_value.run.side_effect = OSError("disk full")

            result = main(['--root', str(temp_dir)])

        assert result == 1
