"""
Grouping tree models for the archive browser.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from .work import Work

TreePath = Tuple[str, ...]


class NodeKind(str, Enum):
    """Levels of the grouping tree."""
    ROOT = "root"
    ERA = "era"
    STATUS = "status"
    SESSION_GROUP = "session_group"
    ITEM = "item"


@dataclass
class TreeNode:
    """
    A folder or leaf of the grouping tree.

    Folders carry children; leaves (kind ITEM) carry the work and its
    resolved display image. ``count`` is the number of leaves underneath,
    a leaf counting as one.
    """
    key: str
    kind: NodeKind
    count: int = 0
    date_range: Optional[Tuple[str, str]] = None
    children: List["TreeNode"] = field(default_factory=list)
    work: Optional[Work] = None
    display_image: Optional[str] = None

    @property
    def is_folder(self) -> bool:
        return self.kind != NodeKind.ITEM

    @property
    def items(self) -> List["TreeNode"]:
        """Leaf children of this node."""
        return [child for child in self.children if child.kind == NodeKind.ITEM]

    @property
    def folders(self) -> List["TreeNode"]:
        """Folder children of this node."""
        return [child for child in self.children if child.is_folder]

    def child(self, key: str) -> Optional["TreeNode"]:
        """Folder child with the given key, if any."""
        for candidate in self.children:
            if candidate.is_folder and candidate.key == key:
                return candidate
        return None

    def iter_leaves(self) -> Iterator["TreeNode"]:
        if self.kind == NodeKind.ITEM:
            yield self
            return
        for child in self.children:
            yield from child.iter_leaves()


@dataclass
class GroupingTree:
    """The built tree plus the paths a search forces open."""
    root: TreeNode
    query: str = ""
    forced_expansion_paths: FrozenSet[TreePath] = frozenset()

    @property
    def eras(self) -> List[TreeNode]:
        return self.root.children

    def resolve(self, path: Sequence[str]) -> Optional[TreeNode]:
        """Folder at the given path, or None if any step is missing."""
        node = self.root
        for key in path:
            node = node.child(key)
            if node is None:
                return None
        return node

    def valid_prefix(self, path: Sequence[str]) -> TreePath:
        """Deepest prefix of path that still resolves to a folder."""
        node = self.root
        prefix: List[str] = []
        for key in path:
            node = node.child(key)
            if node is None:
                break
            prefix.append(key)
        return tuple(prefix)

    def leaves(self) -> List[TreeNode]:
        return list(self.root.iter_leaves())

    def leaf_ids(self) -> List:
        return [leaf.work.id for leaf in self.root.iter_leaves()]
