"""
Era classification.

Every work falls into exactly one era. Works written on or before the early
era cutoff are "Early Era". After the cutoff, standard milestones (albums)
split time into consecutive eras: the first milestone claims everything
from the day after the cutoff, each later milestone starts at its own
release date, and the last era never ends. Without standard milestones
everything after the cutoff is "Post Early Era".
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Union
import logging

from ..core.config import ERA_CONFIG
from ..core.exceptions import CatalogInputError, ConfigurationError
from ..core.validation import ensure_sequence
from ..models.milestones import Milestone
from ..models.work import Work
from ..utils.date_utils import parse_instant

logger = logging.getLogger(__name__)

EARLY_ERA = ERA_CONFIG["EARLY_ERA_LABEL"]
POST_EARLY_ERA = ERA_CONFIG["POST_EARLY_ERA_LABEL"]
UNKNOWN_ERA = ERA_CONFIG["UNKNOWN_ERA_LABEL"]


@dataclass(frozen=True)
class EraBoundary:
    """A named era interval. Open ends are None."""
    label: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    start_inclusive: bool = True
    end_inclusive: bool = False

    def contains(self, instant: datetime) -> bool:
        if self.start is not None:
            if self.start_inclusive and instant < self.start:
                return False
            if not self.start_inclusive and instant <= self.start:
                return False
        if self.end is not None:
            if self.end_inclusive and instant > self.end:
                return False
            if not self.end_inclusive and instant >= self.end:
                return False
        return True


def standard_milestones(milestones: Iterable[Milestone]) -> List[Milestone]:
    """
    Standard milestones ordered by release date, oldest first.

    Deluxe and anniversary editions are dropped. Ties keep input order.
    Standard milestones without a usable release date cannot bound an era
    and are skipped with a warning.
    """
    dated = []
    for milestone in ensure_sequence(milestones, "milestones"):
        if not milestone.is_standard:
            continue
        if milestone.release_instant is None:
            logger.warning(
                f"Milestone {milestone.name!r} has no valid release date; ignoring it for era boundaries"
            )
            continue
        dated.append(milestone)
    return sorted(dated, key=lambda m: m.release_instant)


def _coerce_instant(value: Union[str, datetime, None], default: str, name: str) -> datetime:
    instant = parse_instant(value if value is not None else default)
    if instant is None:
        raise ConfigurationError(f"{name} is not a valid date: {value!r}")
    return instant


class EraClassifier:
    """Assigns works to eras given a cutoff and a set of milestones."""

    def __init__(
        self,
        cutoff: Union[str, datetime, None] = None,
        first_era_start: Union[str, datetime, None] = None
    ):
        """
        Args:
            cutoff: Last instant of the Early Era (inclusive)
            first_era_start: Lower bound of the first milestone era; anything
                after the cutoff but before it still belongs to that era
        """
        self.cutoff = _coerce_instant(cutoff, ERA_CONFIG["EARLY_ERA_CUTOFF"], "cutoff")
        self.first_era_start = _coerce_instant(
            first_era_start, ERA_CONFIG["FIRST_ERA_START"], "first_era_start"
        )

    def boundaries(self, milestones: Iterable[Milestone]) -> List[EraBoundary]:
        """
        Ordered era intervals, Early Era first.

        Args:
            milestones: Full milestone set (filtered to standard internally)

        Returns:
            List of EraBoundary in chronological order
        """
        ordered = standard_milestones(milestones)
        eras = [EraBoundary(EARLY_ERA, end=self.cutoff, end_inclusive=True)]

        if not ordered:
            eras.append(EraBoundary(POST_EARLY_ERA, start=self.cutoff, start_inclusive=False))
            return eras

        for index, milestone in enumerate(ordered):
            if milestone.era_label in (EARLY_ERA, POST_EARLY_ERA, UNKNOWN_ERA):
                logger.warning(
                    f"Milestone {milestone.name!r} produces the reserved label {milestone.era_label!r}; "
                    f"its works will be listed under that era"
                )
            end = ordered[index + 1].release_instant if index + 1 < len(ordered) else None
            if index == 0:
                eras.append(self._first_era(milestone, end))
            else:
                eras.append(EraBoundary(milestone.era_label, start=milestone.release_instant, end=end))
        return eras

    def _first_era(self, milestone: Milestone, end: Optional[datetime]) -> EraBoundary:
        # Starts right after the cutoff; the gap up to first_era_start belongs here
        if self.first_era_start > self.cutoff:
            return EraBoundary(milestone.era_label, start=self.cutoff, end=end, start_inclusive=False)
        return EraBoundary(milestone.era_label, start=self.first_era_start, end=end)

    def boundary_for(
        self,
        instant: datetime,
        boundaries: List[EraBoundary]
    ) -> Optional[EraBoundary]:
        """First era interval containing the instant, or None."""
        for boundary in boundaries:
            if boundary.contains(instant):
                return boundary
        return None

    def classify_instant(self, instant: Optional[datetime], boundaries: List[EraBoundary]) -> str:
        """Era label for an instant against precomputed boundaries."""
        if instant is None:
            return UNKNOWN_ERA
        boundary = self.boundary_for(instant, boundaries)
        if boundary is None:
            logger.debug(f"No era interval contains {instant.isoformat()}")
            return UNKNOWN_ERA
        return boundary.label

    def classify(self, work: Work, milestones: Iterable[Milestone]) -> str:
        """
        Era label for a single work.

        A work without any resolvable date violates the caller's contract;
        it is reported and labelled "Unknown Era" instead of raising.

        Args:
            work: The work to classify
            milestones: Full milestone set

        Returns:
            Era label such as "Early Era" or "<album> Era"
        """
        if work is None:
            raise CatalogInputError("classify() needs a work, got None")

        instant = work.instant
        if instant is None:
            logger.warning(f"Work {work.id!r} ({work.title!r}) has no written or created date")
            return UNKNOWN_ERA
        return self.classify_instant(instant, self.boundaries(milestones))


def classify_era(
    work: Work,
    milestones: Iterable[Milestone],
    cutoff: Union[str, datetime, None] = None,
    first_era_start: Union[str, datetime, None] = None
) -> str:
    """Convenience wrapper around EraClassifier.classify()."""
    return EraClassifier(cutoff, first_era_start).classify(work, milestones)
