"""
Utility modules for Chronicle.
"""

from .date_utils import parse_instant, format_date
from .string_utils import base_title, matches_query, title_sort_key

__all__ = [
    'parse_instant',
    'format_date',
    'base_title',
    'matches_query',
    'title_sort_key',
]
