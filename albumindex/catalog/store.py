"""
Persisted catalog of album name -> normalized output paths.
"""
from pathlib import Path
import json
import logging

from ..core.interfaces import ICatalogStore, Catalog
from ..core.files import atomic_write_text

logger = logging.getLogger(__name__)


def is_valid_catalog(data) -> bool:
    """Check the top-level shape: object of album name -> list of path strings."""
    if not isinstance(data, dict):
        return False
    for album, paths in data.items():
        if not isinstance(album, str) or not isinstance(paths, list):
            return False
        if not all(isinstance(p, str) for p in paths):
            return False
    return True


class JsonCatalogStore(ICatalogStore):
    """
    Catalog stored as a single JSON file.

    The whole file is read into memory and rewritten on every save.
    Saves go through a temporary file and an atomic rename, so an
    interrupted write never leaves a truncated catalog behind.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Catalog:
        """
        Load the catalog.

        Returns:
            The stored catalog, or an empty one if the file is missing,
            unreadable or malformed
        """
        if not self.path.exists():
            logger.debug(f"No catalog at {self.path}, starting empty")
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not parse existing catalog {self.path}, starting fresh: {e}")
            return {}

        if not is_valid_catalog(data):
            logger.warning(f"Catalog {self.path} has unexpected structure, starting fresh")
            return {}

        logger.info(f"Loaded existing catalog with {len(data)} albums")
        return data

    def save(self, catalog: Catalog) -> None:
        """Write the whole catalog. Errors propagate to the caller."""
        atomic_write_text(self.path, json.dumps(catalog, indent=2, ensure_ascii=False))
        logger.debug(f"Wrote catalog with {len(catalog)} albums to {self.path}")
