"""
Navigation and search state for the archive browser.

NavigationState is an immutable value with pure transition functions;
ArchiveBrowser owns the current state together with the latest tree and
the expansion sets, and rebuilds the tree whenever its inputs change.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple, Union
import logging

from ..core.config import DISPLAY_CONFIG
from ..core.exceptions import CatalogInputError, NavigationError
from ..core.validation import ensure_sequence
from ..models.milestones import Milestone, MilestoneTrack
from ..models.tree import GroupingTree, TreeNode, TreePath
from ..models.work import Work
from .image_resolver import build_cover_index
from .tree_builder import TreeBuilder

logger = logging.getLogger(__name__)

ROOT_LABEL = "Archive"


class Layout(str, Enum):
    """How a listing is shown. Has no effect on grouping."""
    LIST = "list"
    GRID = "grid"


@dataclass(frozen=True)
class NavigationState:
    """Current folder path, search query and layout."""
    path: TreePath = ()
    search_query: str = ""
    layout: Layout = Layout.LIST


def enter(state: NavigationState, tree: GroupingTree, key: str) -> NavigationState:
    """Descend into the child folder ``key``; unknown keys leave the state alone."""
    node = tree.resolve(state.path)
    if node is None or node.child(key) is None:
        return state
    return replace(state, path=state.path + (key,))


def back(state: NavigationState) -> NavigationState:
    """Go up one level. At the root this does nothing."""
    if not state.path:
        return state
    return replace(state, path=state.path[:-1])


def go_to(state: NavigationState, index: int) -> NavigationState:
    """
    Breadcrumb jump: keep the first ``index`` path elements.

    Raises:
        CatalogInputError: If index is not an integer
        NavigationError: If index is negative
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise CatalogInputError(f"index must be an integer, got {type(index).__name__}")
    if index < 0:
        raise NavigationError(f"index must be >= 0, got {index}")
    return replace(state, path=state.path[:index])


def with_query(state: NavigationState, query: Optional[str]) -> NavigationState:
    if query is None:
        query = ""
    if not isinstance(query, str):
        raise CatalogInputError(f"query must be a string, got {type(query).__name__}")
    return replace(state, search_query=query)


def with_layout(state: NavigationState, layout: Union[Layout, str]) -> NavigationState:
    """Raises ValueError for anything other than list or grid."""
    return replace(state, layout=Layout(layout))


def clamp_path(state: NavigationState, tree: GroupingTree) -> NavigationState:
    """Cut the path back to its deepest prefix that still exists in the tree."""
    prefix = tree.valid_prefix(state.path)
    if prefix == state.path:
        return state
    logger.debug(f"Path {'/'.join(state.path)!r} no longer exists, clamped to {'/'.join(prefix)!r}")
    return replace(state, path=prefix)


class ArchiveBrowser:
    """Stateful controller driving the archive browser."""

    def __init__(
        self,
        works: Iterable[Work] = (),
        milestones: Iterable[Milestone] = (),
        tracks: Iterable[MilestoneTrack] = (),
        builder: Optional[TreeBuilder] = None,
        layout: Union[Layout, str, None] = None
    ):
        self.builder = builder or TreeBuilder()
        self.state = NavigationState(layout=Layout(layout or DISPLAY_CONFIG["DEFAULT_LAYOUT"]))
        self._manual_expanded: Set[TreePath] = set()
        self._search_expanded: Set[TreePath] = set()
        self.tree: Optional[GroupingTree] = None
        self.load_snapshot(works, milestones, tracks)

    @property
    def path(self) -> TreePath:
        return self.state.path

    @property
    def search_query(self) -> str:
        return self.state.search_query

    @property
    def layout(self) -> Layout:
        return self.state.layout

    def load_snapshot(
        self,
        works: Iterable[Work],
        milestones: Iterable[Milestone],
        tracks: Iterable[MilestoneTrack] = ()
    ):
        """Replace the catalog snapshot and rebuild the tree."""
        self.works = ensure_sequence(works, "works")
        self.milestones = ensure_sequence(milestones, "milestones")
        self.tracks = ensure_sequence(tracks, "tracks")
        self.cover_index = build_cover_index(self.tracks, self.milestones)
        self._rebuild()
        if self.search_query:
            self._search_expanded = set(self.tree.forced_expansion_paths)

    def _rebuild(self):
        self.tree = self.builder.build(
            self.works,
            self.milestones,
            self.cover_index,
            self.state.search_query,
        )
        self.state = clamp_path(self.state, self.tree)

    # Navigation

    def enter(self, key: str) -> TreePath:
        self.state = enter(self.state, self.tree, key)
        return self.path

    def back(self) -> TreePath:
        self.state = back(self.state)
        return self.path

    def go_to(self, index: int) -> TreePath:
        self.state = go_to(self.state, index)
        return self.path

    # Search and layout

    def set_query(self, query: Optional[str]) -> GroupingTree:
        """
        Replace the search query and rebuild the tree.

        A non-empty query replaces the active expansion set with the paths
        the search forces open. Clearing the query brings back whatever the
        user had expanded by hand before searching.
        """
        self.state = with_query(self.state, query)
        self._rebuild()
        if self.search_query:
            self._search_expanded = set(self.tree.forced_expansion_paths)
        else:
            self._search_expanded = set()
        return self.tree

    def set_layout(self, layout: Union[Layout, str]) -> Layout:
        self.state = with_layout(self.state, layout)
        return self.layout

    def toggle_layout(self) -> Layout:
        return self.set_layout(Layout.GRID if self.layout == Layout.LIST else Layout.LIST)

    # Expansion

    @property
    def expanded_paths(self) -> FrozenSet[TreePath]:
        if self.search_query:
            return frozenset(self._search_expanded)
        return frozenset(self._manual_expanded)

    def is_expanded(self, path: Sequence[str]) -> bool:
        return tuple(path) in self.expanded_paths

    def toggle_expanded(self, path: Sequence[str]) -> bool:
        """
        Open or close a folder by hand.

        While a search is active the toggle applies to the search expansion
        only; the manual set is kept untouched for when the search is cleared.

        Returns:
            True if the folder is now expanded
        """
        target = self._search_expanded if self.search_query else self._manual_expanded
        key = tuple(path)
        if key in target:
            target.discard(key)
            return False
        target.add(key)
        return True

    # Derived views

    def current_node(self) -> TreeNode:
        self.state = clamp_path(self.state, self.tree)
        return self.tree.resolve(self.path)

    def visible_nodes(self) -> List[TreeNode]:
        """Children of the current folder, clamping a path that went stale."""
        return list(self.current_node().children)

    def breadcrumbs(self) -> List[Tuple[int, str]]:
        """(go_to index, label) pairs from the root down to the current folder."""
        crumbs = [(0, ROOT_LABEL)]
        crumbs += [(depth + 1, key) for depth, key in enumerate(self.path)]
        return crumbs
