"""
Tests for archive navigation, search and layout state.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chronicle.core.exceptions import CatalogInputError, NavigationError
from chronicle.services.navigation import (
    ArchiveBrowser,
    Layout,
    NavigationState,
    back,
    go_to,
    with_layout,
    with_query,
)


@pytest.fixture
def browser(sample_works, sample_milestones, sample_tracks):
    return ArchiveBrowser(sample_works, sample_milestones, sample_tracks)


class TestNavigationState:
    """Tests for the pure state transitions."""

    def test_back_at_root_is_noop(self):
        state = NavigationState()
        assert back(state) is state

    def test_back_drops_last_key(self):
        state = NavigationState(path=("Alpha Era", "Sessions"))
        assert back(state).path == ("Alpha Era",)

    def test_go_to_truncates(self):
        """Test breadcrumb jumps."""
        state = NavigationState(path=("Alpha Era", "Sessions", "Solo"))
        assert go_to(state, 0).path == ()
        assert go_to(state, 2).path == ("Alpha Era", "Sessions")

    def test_go_to_past_depth_is_noop(self):
        state = NavigationState(path=("Alpha Era",))
        assert go_to(state, 5).path == ("Alpha Era",)

    def test_go_to_negative_raises(self):
        """Test that negative indices are refused."""
        with pytest.raises(NavigationError):
            go_to(NavigationState(), -1)
        with pytest.raises(ValueError):
            go_to(NavigationState(), -1)

    def test_go_to_non_integer_raises(self):
        with pytest.raises(CatalogInputError):
            go_to(NavigationState(), "1")
        with pytest.raises(CatalogInputError):
            go_to(NavigationState(), True)

    def test_with_query(self):
        assert with_query(NavigationState(), None).search_query == ""
        with pytest.raises(CatalogInputError):
            with_query(NavigationState(), ["night"])

    def test_with_layout(self):
        """Test layout parsing."""
        assert with_layout(NavigationState(), "grid").layout == Layout.GRID
        with pytest.raises(ValueError):
            with_layout(NavigationState(), "tiles")


class TestArchiveBrowserNavigation:
    """Tests for moving around the tree."""

    def test_starts_at_root(self, browser):
        assert browser.path == ()
        assert [node.key for node in browser.visible_nodes()] == ["Alpha Era", "Beta Era", "Early Era"]

    def test_enter_descends(self, browser):
        """Test entering folders level by level."""
        assert browser.enter("Alpha Era") == ("Alpha Era",)
        assert browser.enter("Sessions") == ("Alpha Era", "Sessions")
        assert browser.enter("Night Drive") == ("Alpha Era", "Sessions", "Night Drive")
        assert [node.work.id for node in browser.visible_nodes()] == [4, 5]

    def test_enter_unknown_key_is_noop(self, browser):
        """Test that missing folders and leaves cannot be entered."""
        browser.enter("Alpha Era")
        assert browser.enter("Nope") == ("Alpha Era",)
        browser.enter("Released")
        assert browser.enter("3") == ("Alpha Era", "Released")

    def test_back_and_go_to(self, browser):
        browser.enter("Alpha Era")
        browser.enter("Sessions")
        assert browser.back() == ("Alpha Era",)
        assert browser.go_to(0) == ()
        assert browser.back() == ()

    def test_breadcrumbs(self, browser):
        """Test breadcrumb labels and jump indices."""
        browser.enter("Alpha Era")
        browser.enter("Sessions")
        assert browser.breadcrumbs() == [(0, "Archive"), (1, "Alpha Era"), (2, "Sessions")]

        index, _ = browser.breadcrumbs()[1]
        assert browser.go_to(index) == ("Alpha Era",)

    def test_current_node(self, browser):
        browser.enter("Beta Era")
        assert browser.current_node().key == "Beta Era"


class TestArchiveBrowserSearch:
    """Tests for search, clamping and expansion."""

    def test_search_clamps_stale_path(self, browser):
        """Test that a path the search removed is cut back."""
        for key in ("Alpha Era", "Sessions", "Solo"):
            browser.enter(key)

        browser.set_query("night")

        assert browser.path == ("Alpha Era", "Sessions")
        assert [node.key for node in browser.visible_nodes()] == ["Night Drive"]

    def test_search_clamps_to_root(self, browser):
        browser.enter("Early Era")
        browser.set_query("night")
        assert browser.path == ()

    def test_search_forces_expansion(self, browser):
        """Test that matches are visible without manual expansion."""
        tree = browser.set_query("beta")

        assert browser.expanded_paths == tree.forced_expansion_paths
        assert browser.is_expanded(["Beta Era", "Unreleased"]) is True

    def test_clearing_search_restores_manual_expansion(self, browser):
        """Test that hand-opened folders survive a search."""
        assert browser.toggle_expanded(["Early Era"]) is True

        browser.set_query("night")
        assert browser.is_expanded(["Early Era"]) is False
        assert browser.toggle_expanded(["Alpha Era"]) is False

        browser.set_query("")
        assert browser.expanded_paths == frozenset({("Early Era",)})

    def test_toggle_expanded_twice_closes(self, browser):
        assert browser.toggle_expanded(["Beta Era"]) is True
        assert browser.toggle_expanded(["Beta Era"]) is False
        assert browser.expanded_paths == frozenset()

    def test_reload_clamps_path(self, browser, sample_works, sample_milestones):
        """Test that a new snapshot without the current folder moves up."""
        browser.enter("Alpha Era")
        browser.enter("Sessions")

        remaining = [w for w in sample_works if not w.is_session]
        browser.load_snapshot(remaining, sample_milestones)

        assert browser.path == ("Alpha Era",)


class TestArchiveBrowserLayout:
    """Tests for the list / grid switch."""

    def test_default_layout(self, browser):
        assert browser.layout == Layout.LIST

    def test_toggle_layout(self, browser):
        """Test that layout flips without touching the tree."""
        tree = browser.tree
        assert browser.toggle_layout() == Layout.GRID
        assert browser.toggle_layout() == Layout.LIST
        assert browser.tree is tree

    def test_layout_from_constructor(self, sample_works, sample_milestones):
        browser = ArchiveBrowser(sample_works, sample_milestones, layout="grid")
        assert browser.layout == Layout.GRID
