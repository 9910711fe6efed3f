"""
Core services for Chronicle.
"""

from .era_classifier import EraClassifier, EraBoundary, classify_era, standard_milestones
from .era_partitioner import EraPartitioner, EraBucket, partition_eras
from .image_resolver import build_cover_index, resolve_image
from .tree_builder import TreeBuilder, build_tree
from .navigation import ArchiveBrowser, NavigationState, Layout
from .archive_view import ArchiveListing, SortState, SortOrder
from .report_service import ReportService

__all__ = [
    'EraClassifier',
    'EraBoundary',
    'classify_era',
    'standard_milestones',
    'EraPartitioner',
    'EraBucket',
    'partition_eras',
    'build_cover_index',
    'resolve_image',
    'TreeBuilder',
    'build_tree',
    'ArchiveBrowser',
    'NavigationState',
    'Layout',
    'ArchiveListing',
    'SortState',
    'SortOrder',
    'ReportService',
]
