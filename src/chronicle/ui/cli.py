"""
Chronicle CLI Module
Command-line front end for browsing a catalog snapshot.
"""

import argparse
from typing import List, Optional

from ..clients.snapshot import CatalogSnapshot, SnapshotLoader
from ..core.config import ARCHIVE_CONFIG, DISPLAY_CONFIG, PROJECT_DESCRIPTION, PROJECT_NAME, PROJECT_VERSION
from ..core.exceptions import ChronicleError
from ..core.logger import get_logger
from ..services.archive_view import ArchiveListing
from ..services.era_partitioner import EraPartitioner
from ..services.navigation import ArchiveBrowser
from ..services.report_service import ReportService
from .display import DisplayManager

logger = get_logger(__name__)


class ChronicleCLI:
    """Main CLI class for the Chronicle catalog tool."""

    def __init__(self, display_manager: Optional[DisplayManager] = None, loader: Optional[SnapshotLoader] = None):
        self.display_manager = display_manager or DisplayManager()
        self.loader = loader or SnapshotLoader()
        self.partitioner = EraPartitioner()
        self.report_service = ReportService()

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} v{PROJECT_VERSION} - {PROJECT_DESCRIPTION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s eras catalog.json
  %(prog)s tree catalog.json --query "night drive"
  %(prog)s tree catalog.json --path "Alpha Era" Sessions --layout grid
  %(prog)s report catalog.json --lyrics
  %(prog)s archive catalog.json --filter Released --sort title --order asc
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )

        eras_parser = subparsers.add_parser('eras', help='List eras with song counts and date ranges')
        eras_parser.add_argument('snapshot', help='Path to a catalog snapshot (JSON)')

        tree_parser = subparsers.add_parser('tree', help='Browse the archive tree')
        self._add_tree_args(tree_parser)

        report_parser = subparsers.add_parser('report', help='Print the era list or the lyrics backup')
        report_parser.add_argument('snapshot', help='Path to a catalog snapshot (JSON)')
        report_parser.add_argument(
            '--lyrics',
            action='store_true',
            help='Print the lyrics backup instead of the era list'
        )

        archive_parser = subparsers.add_parser('archive', help='Flat, sortable archive listing')
        self._add_archive_args(archive_parser)

        return parser

    def _add_tree_args(self, parser: argparse.ArgumentParser):
        """Add arguments for tree mode."""
        parser.add_argument('snapshot', help='Path to a catalog snapshot (JSON)')
        parser.add_argument(
            '--query', '-q',
            default='',
            help='Only show songs whose title contains this text'
        )
        parser.add_argument(
            '--path', '-p',
            nargs='+',
            default=[],
            help='Folder keys to open, e.g. "Alpha Era" Sessions'
        )
        parser.add_argument(
            '--layout', '-l',
            choices=DISPLAY_CONFIG["LAYOUTS"],
            default=DISPLAY_CONFIG["DEFAULT_LAYOUT"],
            help='Listing layout when --path is given (default: list)'
        )

    def _add_archive_args(self, parser: argparse.ArgumentParser):
        """Add arguments for archive mode."""
        parser.add_argument('snapshot', help='Path to a catalog snapshot (JSON)')
        parser.add_argument(
            '--category', '-c',
            choices=['full', 'written'],
            default='full',
            help='Catalog category (default: full)'
        )
        parser.add_argument(
            '--filter', '-f',
            default=ARCHIVE_CONFIG["FILTER_ALL"],
            help='Sub-category filter, e.g. Released (default: All)'
        )
        parser.add_argument(
            '--search', '-s',
            default='',
            help='Title search'
        )
        parser.add_argument(
            '--sort',
            choices=ARCHIVE_CONFIG["SORT_FIELDS"],
            default=ARCHIVE_CONFIG["DEFAULT_SORT_FIELD"],
            help='Sort column (default: date_written)'
        )
        parser.add_argument(
            '--order',
            choices=['asc', 'desc'],
            default=ARCHIVE_CONFIG["DEFAULT_SORT_ORDER"],
            help='Sort direction (default: desc)'
        )

    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments. Returns the process exit code."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        try:
            snapshot = self.loader.load(parsed_args.snapshot)

            if parsed_args.mode == 'eras':
                self.handle_eras(snapshot)
            elif parsed_args.mode == 'tree':
                self.handle_tree(snapshot, parsed_args.query, parsed_args.path, parsed_args.layout)
            elif parsed_args.mode == 'report':
                self.handle_report(snapshot, parsed_args.lyrics)
            elif parsed_args.mode == 'archive':
                self.handle_archive(
                    snapshot,
                    category=parsed_args.category,
                    sub_category=parsed_args.filter,
                    search=parsed_args.search,
                    sort_field=parsed_args.sort,
                    sort_order=parsed_args.order
                )
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
        except (ChronicleError, ValueError) as e:
            logger.debug(f"{parsed_args.mode} failed: {e}")
            self.display_manager.display_error(str(e))
            return 1
        return 0

    def handle_eras(self, snapshot: CatalogSnapshot):
        buckets = self.partitioner.partition(snapshot.works, snapshot.milestones)
        self.display_manager.display_header("🗂 ERAS", f"{len(snapshot.works)} works")
        self.display_manager.display_eras(buckets)

    def handle_tree(self, snapshot: CatalogSnapshot, query: str, path: List[str], layout: str):
        browser = ArchiveBrowser(snapshot.works, snapshot.milestones, snapshot.tracks, layout=layout)
        if query:
            browser.set_query(query)
            self.display_manager.styling.log_info(f"{browser.tree.root.count} of {len(snapshot.works)} songs match {query!r}")

        for key in path:
            depth = len(browser.path)
            browser.enter(key)
            if len(browser.path) == depth:
                self.display_manager.styling.log_warning(f"No folder named {key!r} here; staying at {'/'.join(browser.path) or 'root'}")
                break

        if browser.path:
            self.display_manager.display_breadcrumbs(browser.breadcrumbs())
            self.display_manager.display_listing(browser.visible_nodes(), browser.layout, browser.search_query)
        else:
            expanded = browser.expanded_paths if query else None
            self.display_manager.display_tree(browser.tree, expanded)

    def handle_report(self, snapshot: CatalogSnapshot, lyrics: bool = False):
        if lyrics:
            text = self.report_service.lyrics_backup(snapshot.works)
        else:
            text = self.report_service.era_list(snapshot.works, snapshot.milestones, snapshot.tracks)
        self.display_manager.display_report(text)

    def handle_archive(
        self,
        snapshot: CatalogSnapshot,
        category: str,
        sub_category: str,
        search: str,
        sort_field: str,
        sort_order: str
    ):
        listing = ArchiveListing(snapshot.works, category)
        listing.set_filter(sub_category)
        listing.set_query(search)
        listing.set_sort(sort_field, sort_order)
        title = "Full Songs" if listing.category.value == "Full" else "Written Works"
        self.display_manager.display_archive(listing.results(), title, search)
