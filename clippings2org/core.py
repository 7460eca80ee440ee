"""Core functionality for clippings2org application."""

import logging
from datetime import datetime
from pathlib import Path

from .config import get_clippings_file_path, get_render_options
from .grouping import GroupedClippings, group_entries
from .models import ConversionResult, ConversionStats
from .parser import ClippingsParser
from .renderer import RenderOptions, render

logger = logging.getLogger(__name__)


def convert_text(text: str, options: RenderOptions | None = None) -> str:
    """Convert raw clippings text into an Org outline.

    Raises:
        MalformedRecordError: If a record's boundaries can't be located
    """
    grouped = group_entries(ClippingsParser(text).iter_entries())
    return render(grouped, options)


class Clippings2Org:
    """Main application class for clippings2org."""

    def __init__(self, clippings_file: str | Path, options: RenderOptions | None = None):
        """Initialize the application."""
        self.clippings_file = Path(clippings_file)
        self.options = options or RenderOptions()
        logger.info("Clippings2Org initialized for %s with options: %s", self.clippings_file, self.options)

    def process(self) -> ConversionResult:
        """Parse, group and render the clippings file.

        Raises:
            MissingSourceError: If the clippings file can't be read
            MalformedRecordError: If a record's boundaries can't be located
        """
        logger.info("Starting conversion of clippings file: %s", self.clippings_file)
        start_time = datetime.now()

        parser = ClippingsParser.from_file(self.clippings_file)
        grouped = group_entries(parser.iter_entries())
        document = render(grouped, self.options)
        stats = self._collect_stats(grouped)

        duration = datetime.now() - start_time
        logger.info("Conversion finished in %.2f seconds. Results: %s", duration.total_seconds(), stats)
        return ConversionResult(document=document, stats=stats)

    @staticmethod
    def _collect_stats(grouped: GroupedClippings) -> ConversionStats:
        stats = ConversionStats(titles=len(grouped))
        for _, entries in grouped.items():
            for entry in entries:
                stats.total_entries += 1
                if entry.is_highlight:
                    stats.highlights += 1
                else:
                    stats.bookmarks += 1
        return stats


def convert_configured() -> ConversionResult:
    """Convert the configured clippings file with the configured options."""
    app = Clippings2Org(get_clippings_file_path(), get_render_options())
    return app.process()
