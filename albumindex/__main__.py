"""
Entry point for running albumindex as a module.

Usage:
    python -m albumindex [--force] [--extract]
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
