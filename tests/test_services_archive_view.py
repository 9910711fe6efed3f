"""
Tests for the flat archive listing.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chronicle.models.work import WorkCategory
from chronicle.services.archive_view import ArchiveListing, SortOrder, SortState
from conftest import make_work


def result_ids(listing):
    return [w.id for w in listing.results()]


class TestSortState:
    """Tests for SortState toggling."""

    def test_default(self):
        state = SortState()
        assert state.field == "date_written"
        assert state.order == SortOrder.DESC

    def test_same_field_flips(self):
        assert SortState().toggled("date_written").order == SortOrder.ASC

    def test_new_field_starts_descending(self):
        state = SortState(field="date_written", order=SortOrder.ASC).toggled("title")
        assert state == SortState(field="title", order=SortOrder.DESC)


class TestArchiveListing:
    """Tests for ArchiveListing."""

    def test_full_category_excludes_sessions_and_written(self, sample_works):
        """Test the default newest-first listing."""
        listing = ArchiveListing(sample_works)
        assert result_ids(listing) == [8, 7, 3, 2, 1]

    def test_written_category(self, sample_works):
        listing = ArchiveListing(sample_works, "written")
        assert listing.category == WorkCategory.WRITTEN
        assert result_ids(listing) == [9]
        assert listing.sub_categories == []

    def test_unknown_category(self, sample_works):
        with pytest.raises(ValueError):
            ArchiveListing(sample_works, "Poetry")

    def test_filter_by_sub_category(self, sample_works):
        """Test sub-category filtering."""
        listing = ArchiveListing(sample_works)
        listing.set_filter("Released")
        assert result_ids(listing) == [3, 1]

        listing.set_filter("Demos")
        assert result_ids(listing) == [8]

        listing.set_filter(None)
        assert len(listing.results()) == 5

    def test_invalid_filter(self, sample_works):
        """Test that sub-categories must belong to the category."""
        with pytest.raises(ValueError):
            ArchiveListing(sample_works, WorkCategory.WRITTEN).set_filter("Demos")
        with pytest.raises(ValueError):
            ArchiveListing(sample_works).set_filter("Sessions")

    def test_search(self, sample_works):
        listing = ArchiveListing(sample_works)
        listing.set_query("SONG")
        assert result_ids(listing) == [7, 1]

    def test_sort_by_title(self, sample_works):
        """Test alphabetical sorting both ways."""
        listing = ArchiveListing(sample_works)
        listing.set_sort("title", "asc")
        assert result_ids(listing) == [3, 7, 2, 8, 1]

        listing.toggle_sort("title")
        assert result_ids(listing) == [1, 8, 2, 7, 3]

    def test_toggle_date_sort(self, sample_works):
        listing = ArchiveListing(sample_works)
        assert listing.toggle_sort("date_written").order == SortOrder.ASC
        assert result_ids(listing) == [1, 2, 3, 7, 8]

    def test_invalid_sort_field(self, sample_works):
        listing = ArchiveListing(sample_works)
        with pytest.raises(ValueError):
            listing.toggle_sort("producer")
        with pytest.raises(ValueError):
            listing.set_sort("producer", "asc")

    def test_missing_values_sort_last(self):
        """Test that undated records stay at the bottom in both directions."""
        works = [
            make_work(1, "Undated", None),
            make_work(2, "Old", "2025-01-01"),
            make_work(3, "New", "2026-01-01"),
        ]
        listing = ArchiveListing(works)
        assert result_ids(listing) == [3, 2, 1]

        listing.set_sort("date_written", "asc")
        assert result_ids(listing) == [2, 3, 1]

    def test_reset(self, sample_works):
        """Test returning to the default view."""
        listing = ArchiveListing(sample_works)
        listing.set_filter("Released")
        listing.set_query("alpha")
        listing.set_sort("title", "asc")

        listing.reset()

        assert listing.sub_category_filter == "All"
        assert listing.search_query == ""
        assert listing.sort == SortState()
