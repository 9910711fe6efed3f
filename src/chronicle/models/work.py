"""
Work (song record) data models.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class WorkCategory(str, Enum):
    """Top-level catalog categories."""
    FULL = "Full"
    WRITTEN = "Written"


class SubCategory:
    """Well-known release-status sub-categories. The field itself is free-form."""
    RELEASED = "Released"
    UNRELEASED = "Unreleased"
    DEMOS = "Demos"
    SESSIONS = "Sessions"


@dataclass
class Work:
    """A catalogued creative item (song or lyric entry)."""
    id: Any
    title: str
    date_written: Optional[str] = None
    created_at: Optional[str] = None
    category: Optional[str] = WorkCategory.FULL.value
    sub_category: Optional[str] = None
    is_released: Optional[bool] = None
    parent_id: Any = None
    image_url: Optional[str] = None
    alternate_names: List[str] = field(default_factory=list)
    producer: Optional[str] = None
    description: Optional[str] = None
    lyrics: Optional[str] = None

    def __post_init__(self):
        """Normalise loosely-typed fields coming from the data store."""
        if self.title is None:
            self.title = ""
        if isinstance(self.category, WorkCategory):
            self.category = self.category.value
        if self.alternate_names is None:
            self.alternate_names = []

    @property
    def instant(self) -> Optional[datetime]:
        """Written date, falling back to the record creation timestamp."""
        # Import here to avoid circular imports
        from ..utils.date_utils import parse_instant

        written = parse_instant(self.date_written)
        if written is not None:
            return written
        return parse_instant(self.created_at)

    @property
    def is_session(self) -> bool:
        return self.sub_category == SubCategory.SESSIONS

    @property
    def released(self) -> bool:
        """Release flag, or the Released sub-category when the flag is absent."""
        if self.is_released is not None:
            return bool(self.is_released)
        return self.sub_category == SubCategory.RELEASED

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Work":
        """
        Build a Work from a data store row.

        Args:
            data: Row dictionary (songs table columns)

        Returns:
            Work instance
        """
        alternate_names = data.get("alternate_names") or data.get("alt_names") or []
        if isinstance(alternate_names, str):
            alternate_names = [name.strip() for name in alternate_names.split(",") if name.strip()]

        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            date_written=data.get("date_written"),
            created_at=data.get("created_at"),
            category=data.get("category") or WorkCategory.FULL.value,
            sub_category=data.get("sub_category"),
            is_released=data.get("is_released"),
            parent_id=data.get("parent_id"),
            image_url=data.get("image_url"),
            alternate_names=list(alternate_names),
            producer=data.get("producer"),
            description=data.get("description"),
            lyrics=data.get("lyrics"),
        )
