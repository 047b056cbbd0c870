"""
Catalog persistence and merging module.
"""
from .store import JsonCatalogStore, is_valid_catalog
from .merger import MergeResult, merge_catalog

__all__ = ['JsonCatalogStore', 'is_valid_catalog', 'MergeResult', 'merge_catalog']
