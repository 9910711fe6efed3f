"""
Display image resolution: a work shown inside an album uses the album cover.
"""

from typing import Any, Dict, Iterable, Optional
import logging

from ..core.validation import ensure_sequence
from ..models.milestones import Milestone, MilestoneTrack
from ..models.work import Work

logger = logging.getLogger(__name__)

CoverIndex = Dict[Any, Optional[str]]


def build_cover_index(
    tracks: Iterable[MilestoneTrack],
    milestones: Iterable[Milestone]
) -> CoverIndex:
    """
    Index work id -> cover image of the milestone the work appears on.

    A work should sit on at most one milestone. If the data says otherwise
    the last association seen wins. Tracks that point at unknown milestones
    are skipped.

    Args:
        tracks: Milestone track associations
        milestones: Milestones referenced by the tracks

    Returns:
        Mapping of work id to cover reference (None when the milestone has no cover)
    """
    covers = {m.id: m.cover_image_url for m in ensure_sequence(milestones, "milestones")}
    index: CoverIndex = {}
    for track in ensure_sequence(tracks, "tracks"):
        if track.milestone_id not in covers:
            logger.debug(f"Track for work {track.work_id!r} references unknown milestone {track.milestone_id!r}")
            continue
        index[track.work_id] = covers[track.milestone_id]
    return index


def resolve_image(work: Work, cover_index: Optional[CoverIndex]) -> Optional[str]:
    """
    Image that represents a work.

    Args:
        work: The work to display
        cover_index: Output of build_cover_index()

    Returns:
        Milestone cover, else the work's own image, else None
    """
    if work is None:
        return None
    cover = (cover_index or {}).get(work.id)
    if cover:
        return cover
    return work.image_url or None
