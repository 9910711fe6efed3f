"""
Catalog snapshot client.

Reads a JSON export of the data store into model objects. The document
looks like::

    {
        "works": [...],
        "milestones": [...],
        "milestone_tracks": [...]
    }

The store's own table names (songs, albums, album_tracks) are accepted too.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from ..core.exceptions import SnapshotError
from ..core.logger import get_logger
from ..models.milestones import Milestone, MilestoneTrack
from ..models.work import Work

logger = get_logger(__name__)

SECTION_ALIASES = {
    "works": ("works", "songs"),
    "milestones": ("milestones", "albums"),
    "tracks": ("milestone_tracks", "album_tracks", "tracks"),
}


@dataclass
class CatalogSnapshot:
    """Immutable-by-convention view of the catalog at one point in time."""
    works: List[Work] = field(default_factory=list)
    milestones: List[Milestone] = field(default_factory=list)
    tracks: List[MilestoneTrack] = field(default_factory=list)


class SnapshotLoader:
    """Loads CatalogSnapshot instances from JSON files or parsed documents."""

    def load(self, path: Union[str, Path]) -> CatalogSnapshot:
        """
        Load a snapshot file.

        Args:
            path: Path to the JSON export

        Returns:
            CatalogSnapshot

        Raises:
            SnapshotError: If the file cannot be read or is not a snapshot document
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError as e:
            raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Snapshot {path} is not valid JSON: {e}") from e

        snapshot = self.from_document(document)
        logger.info(
            f"Loaded {len(snapshot.works)} works, {len(snapshot.milestones)} milestones "
            f"and {len(snapshot.tracks)} tracks from {path}"
        )
        return snapshot

    def from_document(self, document: Any) -> CatalogSnapshot:
        """Build a snapshot from an already parsed JSON document."""
        if not isinstance(document, dict):
            raise SnapshotError(f"Snapshot must be a JSON object, got {type(document).__name__}")

        return CatalogSnapshot(
            works=[Work.from_dict(row) for row in self._section(document, "works")],
            milestones=[Milestone.from_dict(row) for row in self._section(document, "milestones")],
            tracks=[MilestoneTrack.from_dict(row) for row in self._section(document, "tracks")],
        )

    @staticmethod
    def _section(document: Dict[str, Any], name: str) -> List[Dict[str, Any]]:
        for alias in SECTION_ALIASES[name]:
            if alias in document:
                rows = document[alias]
                break
        else:
            return []

        if rows is None:
            return []
        if not isinstance(rows, list):
            raise SnapshotError(f"Snapshot section {name!r} must be a list, got {type(rows).__name__}")
        for position, row in enumerate(rows):
            if not isinstance(row, dict):
                raise SnapshotError(f"Snapshot section {name!r} entry {position} is not an object")
        return rows
