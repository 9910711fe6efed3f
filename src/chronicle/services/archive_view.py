"""
Flat archive listing: one category of works, filtered by sub-category and
title search, sorted by title or date.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Union
import logging

from ..core.config import ARCHIVE_CONFIG
from ..core.validation import ensure_sequence
from ..models.work import Work, WorkCategory
from ..utils.string_utils import matches_query, title_sort_key

logger = logging.getLogger(__name__)

FILTER_ALL = ARCHIVE_CONFIG["FILTER_ALL"]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction."""
    field: str = ARCHIVE_CONFIG["DEFAULT_SORT_FIELD"]
    order: SortOrder = SortOrder(ARCHIVE_CONFIG["DEFAULT_SORT_ORDER"])

    def toggled(self, field: str) -> "SortState":
        """Same column flips direction; a new column starts descending."""
        if field == self.field:
            flipped = SortOrder.ASC if self.order == SortOrder.DESC else SortOrder.DESC
            return replace(self, order=flipped)
        return SortState(field=field, order=SortOrder.DESC)


def _coerce_category(category: Union[WorkCategory, str]) -> WorkCategory:
    if isinstance(category, WorkCategory):
        return category
    for member in WorkCategory:
        if str(category).strip().lower() in (member.value.lower(), member.name.lower()):
            return member
    raise ValueError(f"Unknown category: {category!r}")


def _sort_value(work: Work, field: str):
    if field == "title":
        return title_sort_key(work.title) or None
    return work.instant


class ArchiveListing:
    """The archive page for one category. Session works are never listed here."""

    def __init__(self, works: Iterable[Work], category: Union[WorkCategory, str] = WorkCategory.FULL):
        self.category = _coerce_category(category)
        self.works = [
            w for w in ensure_sequence(works, "works")
            if w.category == self.category.value and not w.is_session
        ]
        self.reset()

    @property
    def sub_categories(self) -> List[str]:
        return list(ARCHIVE_CONFIG["SUB_CATEGORIES"].get(self.category.value, []))

    def reset(self):
        """Back to all sub-categories, no search, newest first."""
        self.sub_category_filter = FILTER_ALL
        self.search_query = ""
        self.sort = SortState()

    def set_filter(self, sub_category: Optional[str]):
        """
        Restrict the listing to one sub-category.

        Raises:
            ValueError: If the sub-category is not offered for this category
        """
        sub_category = sub_category or FILTER_ALL
        if sub_category != FILTER_ALL and sub_category not in self.sub_categories:
            raise ValueError(
                f"{sub_category!r} is not a {self.category.value} sub-category; "
                f"choose from: {', '.join([FILTER_ALL] + self.sub_categories)}"
            )
        self.sub_category_filter = sub_category

    def set_query(self, query: Optional[str]):
        self.search_query = query or ""

    def toggle_sort(self, field: str) -> SortState:
        if field not in ARCHIVE_CONFIG["SORT_FIELDS"]:
            raise ValueError(f"Cannot sort by {field!r}; choose from: {', '.join(ARCHIVE_CONFIG['SORT_FIELDS'])}")
        self.sort = self.sort.toggled(field)
        return self.sort

    def set_sort(self, field: str, order: Union[SortOrder, str]) -> SortState:
        if field not in ARCHIVE_CONFIG["SORT_FIELDS"]:
            raise ValueError(f"Cannot sort by {field!r}; choose from: {', '.join(ARCHIVE_CONFIG['SORT_FIELDS'])}")
        self.sort = SortState(field=field, order=SortOrder(order))
        return self.sort

    def results(self) -> List[Work]:
        """
        Filtered and sorted works.

        Records without a value for the sort column go last whichever way
        the column is sorted.
        """
        visible = [
            w for w in self.works
            if (self.sub_category_filter == FILTER_ALL or w.sub_category == self.sub_category_filter)
            and matches_query(w.title, self.search_query)
        ]

        present = [w for w in visible if _sort_value(w, self.sort.field) is not None]
        missing = [w for w in visible if _sort_value(w, self.sort.field) is None]
        present.sort(
            key=lambda w: _sort_value(w, self.sort.field),
            reverse=self.sort.order == SortOrder.DESC,
        )
        return present + missing
