"""
Parent/derivative relations between works (sessions and alternates of an original).
"""

from typing import Any, Dict, Iterable, List, Optional
import logging

from ..core.validation import ensure_sequence
from ..models.work import Work

logger = logging.getLogger(__name__)


def index_by_id(works: Iterable[Work]) -> Dict[Any, Work]:
    """Work id -> work. The first work with a given id wins."""
    index: Dict[Any, Work] = {}
    for work in ensure_sequence(works, "works"):
        index.setdefault(work.id, work)
    return index


def find_parent(work: Work, works_by_id: Dict[Any, Work]) -> Optional[Work]:
    """
    The original a derivative work points at.

    A parent_id that matches no work is not an error; the work simply has
    no navigable parent.
    """
    if work is None or work.parent_id is None:
        return None
    parent = works_by_id.get(work.parent_id)
    if parent is None:
        logger.debug(f"Work {work.id!r} points at missing parent {work.parent_id!r}")
    return parent


def sessions_by_parent(works: Iterable[Work]) -> Dict[Any, List[Work]]:
    """Parent id -> session works derived from it, in input order."""
    mapping: Dict[Any, List[Work]] = {}
    for work in ensure_sequence(works, "works"):
        if work.is_session and work.parent_id is not None:
            mapping.setdefault(work.parent_id, []).append(work)
    return mapping
