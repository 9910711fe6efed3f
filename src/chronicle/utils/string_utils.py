"""
String utility functions for session grouping and title search.
"""

from typing import Optional

from ..core.config import ARCHIVE_CONFIG


def base_title(title: Optional[str], placeholder: Optional[str] = None) -> str:
    """
    Compute the session group key for a title.

    Everything from the first " (" onward is dropped and the remainder is
    trimmed, so "Night Drive (Alt Mix)" and "Night Drive (Demo)" share the
    key "Night Drive". If nothing is left the trimmed title itself is used,
    and a blank title falls back to the placeholder.

    Args:
        title: Work title
        placeholder: Key for blank titles (defaults to ARCHIVE_CONFIG)

    Returns:
        Non-empty group key
    """
    placeholder = placeholder or ARCHIVE_CONFIG["SESSION_PLACEHOLDER"]
    if not title or not title.strip():
        return placeholder

    marker = ARCHIVE_CONFIG["SESSION_SUFFIX_MARKER"]
    base = title.split(marker, 1)[0].strip()
    return base or title.strip()


def matches_query(title: Optional[str], query: Optional[str]) -> bool:
    """
    Case-insensitive substring match of a search query against a title.

    An empty query matches everything.
    """
    if not query:
        return True
    return query.casefold() in (title or "").casefold()


def title_sort_key(title: Optional[str]) -> str:
    """Sort key for titles: case-folded and whitespace-collapsed."""
    if not title:
        return ""
    return " ".join(title.casefold().split())
