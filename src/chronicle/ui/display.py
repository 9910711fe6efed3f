"""
Display management for Chronicle CLI with Rich components.
"""

from typing import FrozenSet, List, Optional, Sequence, Tuple
from rich.console import Console
from rich.markup import escape

from ..models.tree import GroupingTree, TreeNode, TreePath
from ..models.work import Work
from ..services.era_partitioner import EraBucket
from ..services.navigation import Layout
from .formatters import DisplayFormatters
from .styling import Styling


class DisplayManager:
    """Manages display of eras, the archive tree and exports using Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.formatters = DisplayFormatters(self.console)
        self.styling = Styling(self.console)

    def display_header(self, title: str, subtitle: Optional[str] = None):
        self.console.print()
        self.console.print(self.formatters.create_header_panel(title, subtitle))

    def display_eras(self, buckets: List[EraBucket]):
        """Display era buckets in a table."""
        self.formatters.display_eras(buckets)

    def display_tree(self, tree: GroupingTree, expanded: Optional[FrozenSet[TreePath]] = None, start: TreePath = ()):
        """Display the archive tree."""
        self.formatters.display_tree(tree, expanded, start)

    def display_breadcrumbs(self, crumbs: Sequence[Tuple[int, str]]):
        self.formatters.display_breadcrumbs(crumbs)

    def display_listing(self, nodes: List[TreeNode], layout: Layout = Layout.LIST, query: str = ""):
        """Display one folder of the archive tree."""
        self.formatters.display_listing(nodes, layout, query)

    def display_archive(self, works: List[Work], title: str, query: str = ""):
        """Display a flat archive listing."""
        self.formatters.display_archive(works, title, query)

    def display_report(self, text: str):
        self.formatters.display_report(text)

    def display_error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")
