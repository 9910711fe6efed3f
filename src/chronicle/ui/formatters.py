"""
Display Formatters Module
Handles formatting of era tables, the archive tree, folder listings and reports.
"""

from typing import FrozenSet, List, Optional, Sequence, Tuple

from rich import box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..core.config import DISPLAY_CONFIG
from ..models.tree import GroupingTree, NodeKind, TreeNode, TreePath
from ..models.work import Work
from ..services.era_partitioner import EraBucket
from ..services.navigation import Layout, ROOT_LABEL
from ..utils.date_utils import format_date
from .styling import Styling

KIND_ICONS = {
    NodeKind.ERA: "🗂",
    NodeKind.STATUS: "📁",
    NodeKind.SESSION_GROUP: "🎙",
    NodeKind.ITEM: "🎵",
}


class DisplayFormatters:
    """Formatters for displaying catalog structures."""

    def __init__(self, console: Console):
        self.console = console
        self.styling = Styling(console)

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )

    def format_count(self, count: int) -> str:
        return f"{count} song{'s' if count != 1 else ''}"

    def node_label(self, node: TreeNode, query: str = "") -> Text:
        """One-line label for a tree node."""
        icon = KIND_ICONS.get(node.kind, "")
        if node.kind == NodeKind.ITEM:
            label = Text(f"{icon} ")
            label.append_text(self.styling.highlight(node.work.title, query))
            label.append(f"  {format_date(node.work.instant)}", style="dim")
            if node.display_image:
                label.append("  🖼", style="dim")
            return label

        label = Text(f"{icon} {node.key}", style="bold")
        label.append(f"  {self.format_count(node.count)}", style="dim")
        if node.date_range:
            first, last = node.date_range
            label.append(f"  {first} - {last}", style="dim cyan")
        return label

    def display_eras(self, buckets: List[EraBucket]):
        """Display era buckets in chronological order."""
        if not buckets:
            self.console.print("[bold red]✗[/bold red] The catalog is empty.")
            return

        table = Table(box=box.ROUNDED, border_style="cyan", show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="bold white")
        table.add_column("Era", style="bold")
        table.add_column("Songs", justify="right")
        table.add_column("First", style="dim")
        table.add_column("Last", style="dim")

        for number, bucket in enumerate(buckets, start=1):
            dated = [w for w in bucket.works if w.instant is not None]
            first = format_date(dated[0].instant) if dated else "-"
            last = format_date(dated[-1].instant) if dated else "-"
            table.add_row(str(number), bucket.name, str(len(bucket)), first, last)

        self.console.print(table)

    def display_tree(
        self,
        tree: GroupingTree,
        expanded: Optional[FrozenSet[TreePath]] = None,
        start: TreePath = ()
    ):
        """
        Render the grouping tree.

        Args:
            tree: Tree to render
            expanded: Folder paths to open; None opens everything
            start: Path of the folder to render from
        """
        node = tree.resolve(start)
        if node is None or not node.children:
            if tree.query:
                self.console.print(f"[bold red]✗[/bold red] No songs match {tree.query!r}.")
            else:
                self.console.print("[bold red]✗[/bold red] Nothing to show here.")
            return

        title = " / ".join((ROOT_LABEL,) + tuple(start))
        rendered = Tree(Text(f"{title}  ", style="bold cyan").append(self.format_count(node.count), style="dim"))
        self._add_children(rendered, node, tuple(start), expanded, tree.query)
        self.console.print(rendered)

    def _add_children(self, branch: Tree, node: TreeNode, path: TreePath, expanded, query: str):
        for child in node.children:
            sub_branch = branch.add(self.node_label(child, query))
            if not child.is_folder:
                continue
            child_path = path + (child.key,)
            if expanded is None or child_path in expanded:
                self._add_children(sub_branch, child, child_path, expanded, query)

    def display_breadcrumbs(self, crumbs: Sequence[Tuple[int, str]]):
        text = Text()
        for position, (_, label) in enumerate(crumbs):
            if position:
                text.append(" › ", style="dim")
            text.append(label, style="bold cyan" if position == len(crumbs) - 1 else "cyan")
        self.console.print(text)

    def display_listing(self, nodes: List[TreeNode], layout: Layout = Layout.LIST, query: str = ""):
        """Display the contents of one folder as a list or a grid."""
        if not nodes:
            self.console.print("[dim]This folder is empty.[/dim]")
            return

        if layout == Layout.GRID:
            cards = [
                Panel(self.node_label(node, query), box=box.ROUNDED, border_style="dim", expand=True)
                for node in nodes
            ]
            self.console.print(Columns(cards, equal=True, expand=True))
            return

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
        table.add_column("Name")
        table.add_column("Date", style="dim")
        table.add_column("Image", style="dim")
        for node in nodes:
            if node.kind == NodeKind.ITEM:
                date = format_date(node.work.instant)
                image = node.display_image or "-"
            else:
                date = " - ".join(node.date_range) if node.date_range else self.format_count(node.count)
                image = ""
            table.add_row(self.node_label(node, query), date, image)
        self.console.print(table)

    def display_archive(self, works: List[Work], title: str, query: str = ""):
        """Display a flat archive listing."""
        self.console.print()
        self.console.print(self.create_header_panel(f"📚 {title.upper()}", self.format_count(len(works))))

        if not works:
            self.console.print("[dim italic]No files found matching your search.[/dim italic]")
            return

        table = Table(box=box.ROUNDED, border_style="cyan", show_header=True, header_style="bold cyan")
        table.add_column("Name", style="bold")
        table.add_column("Date", style="dim")
        table.add_column("Description", overflow="ellipsis", max_width=40)
        table.add_column("Status")
        for work in works:
            table.add_row(
                self.styling.highlight(work.title, query),
                format_date(work.instant),
                work.description or "-",
                work.sub_category or "",
            )
        self.console.print(table)

    def display_report(self, text: str):
        """Print export text verbatim so it can be copied."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
