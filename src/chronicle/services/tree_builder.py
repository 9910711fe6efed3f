"""
Grouping tree builder for the archive browser.

The tree has four levels below the root:

    era -> status (Released / Unreleased / Sessions) -> session group -> item

Only the Sessions bucket has the session group level; Released and
Unreleased hold their items directly. A search query filters items by title
before anything is grouped, so folders that end up empty never appear.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set
import logging

from ..core.config import ARCHIVE_CONFIG
from ..core.exceptions import CatalogInputError
from ..core.validation import ensure_sequence
from ..models.milestones import Milestone
from ..models.tree import GroupingTree, NodeKind, TreeNode, TreePath
from ..models.work import Work
from ..utils.date_utils import format_date
from ..utils.string_utils import base_title, matches_query
from .era_classifier import EraClassifier
from .era_partitioner import EraBucket, EraPartitioner
from .image_resolver import CoverIndex, resolve_image

logger = logging.getLogger(__name__)

RELEASED, UNRELEASED, SESSIONS = ARCHIVE_CONFIG["STATUS_BUCKETS"]


def newest_first(works: Iterable[Work]) -> List[Work]:
    """Newest first, undated works last, ties in input order."""
    return sorted(
        works,
        key=lambda w: (w.instant is not None, w.instant or datetime.min),
        reverse=True,
    )


def status_of(work: Work) -> str:
    """Status bucket a work belongs to."""
    if work.is_session:
        return SESSIONS
    return RELEASED if work.released else UNRELEASED


class TreeBuilder:
    """Builds GroupingTree instances from catalog snapshots."""

    def __init__(self, classifier: Optional[EraClassifier] = None):
        self.classifier = classifier or EraClassifier()
        self.partitioner = EraPartitioner(self.classifier)

    def build(
        self,
        works: Iterable[Work],
        milestones: Iterable[Milestone],
        cover_index: Optional[CoverIndex] = None,
        search_query: Optional[str] = ""
    ) -> GroupingTree:
        """
        Build the grouping tree.

        Args:
            works: Works to browse
            milestones: Full milestone set
            cover_index: Work id -> milestone cover (see build_cover_index)
            search_query: Case-insensitive title filter; empty means no filter

        Returns:
            GroupingTree with era nodes sorted by label and, when searching,
            every path that has to be open for the matches to be visible
        """
        if search_query is None:
            search_query = ""
        if not isinstance(search_query, str):
            raise CatalogInputError(f"search_query must be a string, got {type(search_query).__name__}")

        works = ensure_sequence(works, "works")
        matching = [w for w in works if matches_query(w.title, search_query)]

        era_nodes = [
            self._build_era(bucket, cover_index or {})
            for bucket in self.partitioner.partition(matching, milestones)
        ]
        # Folder listing order, not chronology
        era_nodes.sort(key=lambda node: node.key)

        root = TreeNode(
            key="",
            kind=NodeKind.ROOT,
            count=sum(node.count for node in era_nodes),
            children=era_nodes,
        )
        forced = self.forced_expansion_paths(root) if search_query else frozenset()

        logger.debug(
            f"Built tree: {root.count} of {len(works)} works in {len(era_nodes)} eras"
            + (f" for query {search_query!r}" if search_query else "")
        )
        return GroupingTree(root=root, query=search_query, forced_expansion_paths=forced)

    def _build_era(self, bucket: EraBucket, cover_index: CoverIndex) -> TreeNode:
        by_status: Dict[str, List[Work]] = {RELEASED: [], UNRELEASED: [], SESSIONS: []}
        for work in bucket.works:
            by_status[status_of(work)].append(work)

        status_nodes = []
        for status in (RELEASED, UNRELEASED):
            if by_status[status]:
                items = self._items(by_status[status], cover_index)
                status_nodes.append(TreeNode(status, NodeKind.STATUS, count=len(items), children=items))

        if by_status[SESSIONS]:
            groups = self._session_groups(by_status[SESSIONS], cover_index)
            status_nodes.append(TreeNode(
                SESSIONS,
                NodeKind.STATUS,
                count=sum(group.count for group in groups),
                children=groups,
            ))

        instants = [w.instant for w in bucket.works if w.instant is not None]
        date_range = None
        if instants:
            date_range = (format_date(min(instants)), format_date(max(instants)))

        return TreeNode(
            key=bucket.name,
            kind=NodeKind.ERA,
            count=sum(node.count for node in status_nodes),
            date_range=date_range,
            children=status_nodes,
        )

    def _session_groups(self, works: List[Work], cover_index: CoverIndex) -> List[TreeNode]:
        grouped: Dict[str, List[Work]] = {}
        for work in works:
            grouped.setdefault(base_title(work.title), []).append(work)

        groups = []
        for key in sorted(grouped):
            items = self._items(grouped[key], cover_index)
            groups.append(TreeNode(key, NodeKind.SESSION_GROUP, count=len(items), children=items))
        return groups

    def _items(self, works: List[Work], cover_index: CoverIndex) -> List[TreeNode]:
        return [
            TreeNode(
                key=str(work.id),
                kind=NodeKind.ITEM,
                count=1,
                work=work,
                display_image=resolve_image(work, cover_index),
            )
            for work in newest_first(works)
        ]

    @staticmethod
    def forced_expansion_paths(root: TreeNode) -> frozenset:
        """Every folder path leading to a leaf, root path included."""
        paths: Set[TreePath] = set()

        def walk(node: TreeNode, path: TreePath):
            if not any(True for _ in node.iter_leaves()):
                return
            paths.add(path)
            for child in node.folders:
                walk(child, path + (child.key,))

        walk(root, ())
        return frozenset(paths)


def build_tree(
    works: Iterable[Work],
    milestones: Iterable[Milestone],
    cover_index: Optional[CoverIndex] = None,
    search_query: Optional[str] = "",
    classifier: Optional[EraClassifier] = None
) -> GroupingTree:
    """Convenience wrapper around TreeBuilder.build()."""
    return TreeBuilder(classifier).build(works, milestones, cover_index, search_query)
