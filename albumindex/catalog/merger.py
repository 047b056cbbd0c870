"""
Merging newly discovered album outputs into the catalog.
"""
from dataclasses import dataclass, field
from typing import List

from ..core.interfaces import Catalog


@dataclass
class MergeResult:
    """Merged catalog plus what the merge actually added."""
    catalog: Catalog
    new_albums: List[str] = field(default_factory=list)
    new_paths: int = 0


def merge_catalog(existing: Catalog, discovered: Catalog) -> MergeResult:
    """
    Merge discovered album outputs into an existing catalog.

    Existing entries keep their order and new paths are appended in
    discovery order. A path is appended only if the album's merged list
    does not already hold it. Duplicates already present in existing
    are left untouched. Neither argument is mutated.

    Example:
        >>> merge_catalog({"A": ["p1"]}, {"A": ["p1", "p2"], "B": ["p3"]}).catalog
        {'A': ['p1', 'p2'], 'B': ['p3']}
    """
    merged: Catalog = {album: list(paths) for album, paths in existing.items()}
    result = MergeResult(catalog=merged)

    for album, paths in discovered.items():
        if album not in merged:
            merged[album] = []
            result.new_albums.append(album)

        album_paths = merged[album]
        seen = set(album_paths)
        for path in paths:
            if path in seen:
                continue
            album_paths.append(path)
            seen.add(path)
            result.new_paths += 1

    return result
