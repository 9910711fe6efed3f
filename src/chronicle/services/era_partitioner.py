"""
Era partitioning: split a whole catalog into ordered era buckets.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
import logging

from ..core.validation import ensure_sequence
from ..models.milestones import Milestone, MilestoneTrack
from ..models.work import Work
from .era_classifier import EraClassifier, EARLY_ERA, POST_EARLY_ERA, UNKNOWN_ERA

logger = logging.getLogger(__name__)


@dataclass
class EraBucket:
    """Works of one era, oldest first."""
    name: str
    works: List[Work] = field(default_factory=list)
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    milestone_by_work: Dict[Any, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.works)


def chronological_key(work: Work):
    """Oldest first; undated works after everything else."""
    instant = work.instant
    return (instant is None, instant or datetime.min)


def milestone_names_by_work(
    tracks: Iterable[MilestoneTrack],
    milestones: Iterable[Milestone]
) -> Dict[Any, str]:
    """
    Map each work id to the name of the milestone it appears on.

    The first association seen for a work wins. Associations pointing at
    unknown milestones are ignored.
    """
    names = {m.id: m.name for m in ensure_sequence(milestones, "milestones")}
    mapping: Dict[Any, str] = {}
    for track in ensure_sequence(tracks, "tracks"):
        if track.work_id in mapping or track.milestone_id not in names:
            continue
        mapping[track.work_id] = names[track.milestone_id]
    return mapping


class EraPartitioner:
    """Groups works by era label and orders the resulting buckets."""

    def __init__(self, classifier: Optional[EraClassifier] = None):
        self.classifier = classifier or EraClassifier()

    def partition(
        self,
        works: Iterable[Work],
        milestones: Iterable[Milestone],
        tracks: Optional[Iterable[MilestoneTrack]] = None
    ) -> List[EraBucket]:
        """
        Partition works into ordered era buckets.

        Buckets come out as Early Era, the milestone eras in chronological
        order, Post Early Era, and finally Unknown Era for works with no
        usable date. Empty buckets are left out.

        Args:
            works: Works to partition
            milestones: Full milestone set
            tracks: Optional milestone tracks; when given, each bucket maps
                its works to the milestone they appear on

        Returns:
            List of non-empty EraBucket
        """
        works = ensure_sequence(works, "works")
        milestones = ensure_sequence(milestones, "milestones")
        boundaries = self.classifier.boundaries(milestones)

        buckets: Dict[str, EraBucket] = {}
        for boundary in boundaries:
            # Two milestones sharing a name share one era
            if boundary.label not in buckets:
                buckets[boundary.label] = EraBucket(boundary.label, start=boundary.start, end=boundary.end)
        buckets.setdefault(UNKNOWN_ERA, EraBucket(UNKNOWN_ERA))

        for work in works:
            instant = work.instant
            if instant is None:
                logger.warning(f"Work {work.id!r} ({work.title!r}) has no written or created date")
            label = self.classifier.classify_instant(instant, boundaries)
            buckets[label].works.append(work)

        ordered_labels = [EARLY_ERA]
        ordered_labels += [
            label for label in buckets
            if label not in (EARLY_ERA, POST_EARLY_ERA, UNKNOWN_ERA)
        ]
        ordered_labels += [POST_EARLY_ERA, UNKNOWN_ERA]

        names_by_work = milestone_names_by_work(tracks, milestones) if tracks is not None else {}

        result = []
        for label in ordered_labels:
            bucket = buckets.get(label)
            if bucket is None or not bucket.works:
                continue
            bucket.works.sort(key=chronological_key)
            if names_by_work:
                bucket.milestone_by_work = {
                    w.id: names_by_work[w.id] for w in bucket.works if w.id in names_by_work
                }
            result.append(bucket)

        logger.debug(f"Partitioned {len(works)} works into {len(result)} eras")
        return result


def partition_eras(
    works: Iterable[Work],
    milestones: Iterable[Milestone],
    tracks: Optional[Iterable[MilestoneTrack]] = None,
    classifier: Optional[EraClassifier] = None
) -> List[EraBucket]:
    """Convenience wrapper around EraPartitioner.partition()."""
    return EraPartitioner(classifier).partition(works, milestones, tracks)
