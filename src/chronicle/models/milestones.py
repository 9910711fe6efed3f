"""
Milestone (album release) and milestone track models.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class MilestoneType(str, Enum):
    """Milestone types. Only standard milestones define era boundaries."""
    STANDARD = "standard"
    DELUXE = "deluxe"
    ANNIVERSARY = "anniversary"


@dataclass
class Milestone:
    """A dated release event (album)."""
    id: Any
    name: str
    release_date: Optional[str] = None
    milestone_type: Optional[str] = MilestoneType.STANDARD.value
    cover_image_url: Optional[str] = None
    parent_milestone_id: Any = None
    status: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.milestone_type, MilestoneType):
            self.milestone_type = self.milestone_type.value

    @property
    def is_standard(self) -> bool:
        """Missing type counts as standard; deluxe and anniversary editions do not."""
        return not self.milestone_type or self.milestone_type == MilestoneType.STANDARD.value

    @property
    def release_instant(self) -> Optional[datetime]:
        # Import here to avoid circular imports
        from ..utils.date_utils import parse_instant
        return parse_instant(self.release_date)

    @property
    def era_label(self) -> str:
        return f"{self.name} Era"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Milestone":
        """Build a Milestone from a data store row (albums table columns)."""
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            release_date=data.get("release_date"),
            milestone_type=data.get("milestone_type") or data.get("album_type"),
            cover_image_url=data.get("cover_image_url"),
            parent_milestone_id=data.get("parent_milestone_id") or data.get("parent_album_id"),
            status=data.get("status"),
        )


@dataclass
class MilestoneTrack:
    """Association of a work with a milestone at a tracklist position."""
    work_id: Any
    milestone_id: Any
    position: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MilestoneTrack":
        """Build a MilestoneTrack from a data store row (album_tracks columns)."""
        position = data.get("position", data.get("track_number"))
        return cls(
            work_id=data.get("work_id", data.get("song_id")),
            milestone_id=data.get("milestone_id", data.get("album_id")),
            position=position,
        )
