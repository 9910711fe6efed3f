"""
Plain-text catalog exports: the era-based song list and the lyrics backup.
"""

from typing import Iterable, List, Optional

from ..core.config import REPORT_CONFIG
from ..core.logger import get_logger
from ..core.validation import ensure_sequence
from ..models.milestones import Milestone, MilestoneTrack
from ..models.work import Work, WorkCategory, SubCategory
from ..utils.date_utils import format_date
from .era_classifier import EraClassifier
from .era_partitioner import EraPartitioner
from .lineage import sessions_by_parent

logger = get_logger(__name__)


class ReportService:
    """Builds the text exports offered on the settings page."""

    def __init__(self, classifier: Optional[EraClassifier] = None):
        self.partitioner = EraPartitioner(classifier)

    def era_list(
        self,
        works: Iterable[Work],
        milestones: Iterable[Milestone],
        tracks: Optional[Iterable[MilestoneTrack]] = None
    ) -> str:
        """
        Era-based list of complete songs.

        Opens with the complete-song and session totals, then one heading
        per era with its songs numbered oldest first. Songs that have
        sessions get a session marker; with tracks supplied, songs that sit
        on an album are tagged with its name.

        Args:
            works: Whole catalog (sessions included, for the totals and markers)
            milestones: Full milestone set
            tracks: Optional milestone tracks for album tags

        Returns:
            Markdown-flavoured text
        """
        works = ensure_sequence(works, "works")
        complete = [
            w for w in works
            if w.category == WorkCategory.FULL.value and not w.is_session
        ]
        sessions = [w for w in works if w.is_session]
        session_parents = sessions_by_parent(works)

        lines: List[str] = [
            f"**Total Complete Songs: {len(complete)}**",
            f"**Total Sessions: {len(sessions)}**",
            "",
        ]

        for bucket in self.partitioner.partition(complete, milestones, tracks):
            lines.append(f"# {bucket.name}")
            for number, work in enumerate(bucket.works, start=1):
                producer = f" `prod. {work.producer}`" if work.producer else ""
                album = bucket.milestone_by_work.get(work.id)
                album_tag = f" [{album}]" if album else ""
                session = REPORT_CONFIG["SESSION_MARKER"] if session_parents.get(work.id) else ""
                lines.append(
                    f"{number}. **{work.title}**{producer} ({format_date(work.instant)}){album_tag}{session}"
                )
            lines.append("")

        logger.debug(f"Era list covers {len(complete)} songs and {len(sessions)} sessions")
        return "\n".join(lines).strip()

    def lyrics_backup(self, works: Iterable[Work]) -> str:
        """
        Lyrics of every complete song and session, one numbered block each.

        Args:
            works: Whole catalog, in the order the blocks should appear

        Returns:
            Plain text backup
        """
        backup = [
            w for w in ensure_sequence(works, "works")
            if w.category == WorkCategory.FULL.value or w.sub_category == SubCategory.SESSIONS
        ]

        blocks = []
        for number, work in enumerate(backup, start=1):
            block = [
                f"{number}.",
                f"Title: {work.title}",
                f"Date: {format_date(work.instant)}",
                f"Category: {work.sub_category or work.category}",
            ]
            if work.parent_id is not None:
                block.append(f"Parent ID: {work.parent_id}")
            block.append("-")
            block.append(work.lyrics or REPORT_CONFIG["NO_LYRICS"])
            block.append("")
            block.append(REPORT_CONFIG["BLOCK_SEPARATOR"])
            block.append("")
            blocks.append("\n".join(block))

        return "\n".join(blocks).strip()
