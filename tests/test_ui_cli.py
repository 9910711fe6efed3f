"""
Tests for the command-line interface.
"""

import json
import pytest
import sys
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chronicle.main import main
from chronicle.ui.cli import ChronicleCLI
from chronicle.ui.display import DisplayManager


@pytest.fixture
def console():
    return Console(record=True, width=140, color_system=None)


@pytest.fixture
def cli(console):
    return ChronicleCLI(display_manager=DisplayManager(console))


class TestParser:
    """Tests for argument parsing."""

    def test_tree_arguments(self, cli):
        args = cli.create_parser().parse_args(
            ["tree", "catalog.json", "--query", "night", "--path", "Alpha Era", "Sessions", "--layout", "grid"]
        )
        assert args.mode == "tree"
        assert args.query == "night"
        assert args.path == ["Alpha Era", "Sessions"]
        assert args.layout == "grid"

    def test_archive_defaults(self, cli):
        args = cli.create_parser().parse_args(["archive", "catalog.json"])
        assert args.category == "full"
        assert args.filter == "All"
        assert args.sort == "date_written"
        assert args.order == "desc"

    def test_mode_is_required(self, cli):
        with pytest.raises(SystemExit):
            cli.create_parser().parse_args([])


class TestCommands:
    """Tests for running each mode against a snapshot file."""

    def test_eras(self, cli, console, snapshot_file):
        assert cli.run(["eras", str(snapshot_file)]) == 0
        output = console.export_text()
        assert "Early Era" in output
        assert "Alpha Era" in output

    def test_tree(self, cli, console, snapshot_file):
        assert cli.run(["tree", str(snapshot_file)]) == 0
        output = console.export_text()
        assert "Archive" in output
        assert "Night Drive" in output

    def test_tree_with_path(self, cli, console, snapshot_file):
        """Test opening a folder and listing its contents."""
        assert cli.run(["tree", str(snapshot_file), "--path", "Alpha Era", "Sessions"]) == 0
        output = console.export_text()
        assert "Archive › Alpha Era › Sessions" in output
        assert "Night Drive" in output

    def test_tree_with_unknown_path(self, cli, console, snapshot_file):
        assert cli.run(["tree", str(snapshot_file), "--path", "Nowhere"]) == 0
        assert "No folder named 'Nowhere'" in console.export_text()

    def test_tree_search_without_matches(self, cli, console, snapshot_file):
        assert cli.run(["tree", str(snapshot_file), "--query", "zzz"]) == 0
        assert "No songs match 'zzz'" in console.export_text()

    def test_report(self, cli, console, snapshot_file):
        assert cli.run(["report", str(snapshot_file)]) == 0
        output = console.export_text()
        assert "**Total Complete Songs: 2**" in output
        assert "[Alpha]" in output

    def test_lyrics_report(self, cli, console, snapshot_file):
        assert cli.run(["report", str(snapshot_file), "--lyrics"]) == 0
        assert "Title: Night Drive (Demo)" in console.export_text()

    def test_archive(self, cli, console, snapshot_file):
        assert cli.run(["archive", str(snapshot_file), "--filter", "Released"]) == 0
        output = console.export_text()
        assert "Old Song" in output
        assert "Claimed" not in output

    def test_archive_invalid_filter(self, cli, console, snapshot_file):
        """Test that a bad sub-category is an error, not a crash."""
        assert cli.run(["archive", str(snapshot_file), "--filter", "Bogus"]) == 1
        assert "Bogus" in console.export_text()

    def test_archive_shows_parsed_date(self, cli, console, temp_dir):
        """Test that a work with a broken written date shows its creation date."""
        path = temp_dir / "dates.json"
        path.write_text(json.dumps({"songs": [
            {"id": 1, "title": "Song", "date_written": "someday", "created_at": "2026-03-05T10:00:00Z"},
        ]}), encoding="utf-8")

        assert cli.run(["archive", str(path)]) == 0
        output = console.export_text()
        assert "03/05/2026" in output
        assert "Unknown Date" not in output

    def test_missing_snapshot(self, cli, console, temp_dir):
        assert cli.run(["eras", str(temp_dir / "missing.json")]) == 1
        assert "Cannot read snapshot" in console.export_text()


class TestMain:
    """Tests for the entry point."""

    def test_main_returns_exit_code(self, snapshot_file):
        with patch("chronicle.main.ChronicleCLI") as mock_cli:
            mock_cli.return_value.run.return_value = 0
            assert main(["eras", str(snapshot_file)]) == 0
            mock_cli.return_value.run.assert_called_once_with(["eras", str(snapshot_file)])
