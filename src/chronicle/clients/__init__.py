"""
Data source clients for Chronicle.
"""

from .snapshot import CatalogSnapshot, SnapshotLoader

__all__ = [
    'CatalogSnapshot',
    'SnapshotLoader',
]
