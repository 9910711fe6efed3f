"""
Pytest configuration and shared fixtures.
"""

import json
import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chronicle.models.work import Work
from chronicle.models.milestones import Milestone, MilestoneTrack


def make_work(id, title, date_written=None, **kwargs) -> Work:
    """Build a Full work with sensible defaults."""
    kwargs.setdefault("category", "Full")
    kwargs.setdefault("sub_category", "Unreleased")
    return Work(id=id, title=title, date_written=date_written, **kwargs)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_milestones():
    """Two standard albums plus a deluxe edition of the first."""
    return [
        Milestone(id="m-beta", name="Beta", release_date="2026-02-15", milestone_type="standard"),
        Milestone(id="m-alpha", name="Alpha", release_date="2025-12-01", milestone_type="standard",
                  cover_image_url="alpha.png", status="Released"),
        Milestone(id="m-alpha-dlx", name="Alpha (Deluxe)", release_date="2026-01-10",
                  milestone_type="deluxe", parent_milestone_id="m-alpha", cover_image_url="alpha-dlx.png"),
    ]


@pytest.fixture
def sample_works():
    """A small catalog spanning the Early, Alpha and Beta eras."""
    return [
        make_work(1, "Old Song", "2025-11-10", sub_category="Released", is_released=True, producer="Kay"),
        make_work(2, "Claimed", "2025-11-25"),
        make_work(3, "Alpha Single", "2025-12-10", sub_category="Released", is_released=True,
                  image_url="single.png", lyrics="la la la"),
        make_work(4, "Night Drive (Alt Mix)", "2025-12-20", sub_category="Sessions", parent_id=3),
        make_work(5, "Night Drive (Demo)", "2025-12-05", sub_category="Sessions", parent_id=3),
        make_work(6, "Solo", "2026-01-05", sub_category="Sessions"),
        make_work(7, "Beta Song", "2026-03-01", image_url="beta-song.png"),
        make_work(8, "No Date Yet", None, created_at="2026-03-05T10:00:00+00:00", sub_category="Demos"),
        make_work(9, "Poem", "2025-10-01", category="Written", sub_category=None),
    ]


@pytest.fixture
def sample_tracks():
    """Alpha Single sits on Alpha; its deluxe edition repeats it."""
    return [
        MilestoneTrack(work_id=3, milestone_id="m-alpha", position=1),
        MilestoneTrack(work_id=3, milestone_id="m-alpha-dlx", position=1),
        MilestoneTrack(work_id=2, milestone_id="m-alpha-dlx", position=2),
    ]


@pytest.fixture
def snapshot_document():
    """Snapshot document using the data store's table names."""
    return {
        "songs": [
            {"id": 1, "title": "Old Song", "date_written": "2025-11-10", "category": "Full",
             "sub_category": "Released", "is_released": True},
            {"id": 2, "title": "Claimed", "date_written": "2025-11-25", "category": "Full",
             "sub_category": "Unreleased"},
            {"id": 3, "title": "Night Drive (Demo)", "date_written": "2025-12-05", "category": "Full",
             "sub_category": "Sessions", "parent_id": 2},
        ],
        "albums": [
            {"id": "a1", "name": "Alpha", "release_date": "2025-12-01", "album_type": "standard",
             "cover_image_url": "alpha.png"},
            {"id": "a2", "name": "Alpha (Deluxe)", "release_date": "2026-01-10", "album_type": "deluxe",
             "parent_album_id": "a1"},
        ],
        "album_tracks": [
            {"song_id": 2, "album_id": "a1", "track_number": 1},
        ],
    }


@pytest.fixture
def snapshot_file(temp_dir: Path, snapshot_document) -> Path:
    """Snapshot document written to disk."""
    path = temp_dir / "catalog.json"
    path.write_text(json.dumps(snapshot_document), encoding="utf-8")
    return path
