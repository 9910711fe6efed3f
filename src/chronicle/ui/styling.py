"""
Styling utilities for Chronicle CLI.
Provides dimmed text for technical messages and status markers.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text


class Styling:
    """Styling utilities for CLI output."""

    def __init__(self, console: Console):
        self.console = console

    @staticmethod
    def dim(text: str) -> str:
        """Apply dimmed styling to text (for logs, technical messages, paths)."""
        return f"[dim]{escape(text)}[/dim]"

    @staticmethod
    def dim_yellow(text: str) -> str:
        """Apply dimmed yellow styling (for warnings)."""
        return f"[dim yellow]{text}[/dim yellow]"

    @staticmethod
    def highlight(text: str, query: str) -> Text:
        """Plain text with the first case-insensitive match of query in bold yellow."""
        rendered = Text(text)
        if query:
            start = text.lower().find(query.lower())
            if start >= 0:
                rendered.stylize("bold yellow", start, start + len(query))
        return rendered

    def log_info(self, message: str, icon: str = "ℹ"):
        self.console.print(f"[dim blue]{icon}[/dim blue] {self.dim(message)}")

    def log_warning(self, message: str, icon: str = "⚠"):
        self.console.print(f"{self.dim_yellow(icon)} {self.dim(message)}")

