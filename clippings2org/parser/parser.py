import logging
import re
from collections.abc import Iterator
from pathlib import Path

from ..exceptions import MalformedRecordError, MissingSourceError
from .models import ClippingEntry

# Initialize logger for this module
logger = logging.getLogger(__name__)

DELIMITER = "=========="


class ClippingsParser:
    """Cursor-based parser for Kindle 'My Clippings.txt' exports.

    The parser walks the raw text one record at a time. Each call to
    :meth:`parse_next` takes a character offset, reads the record that starts
    there and returns the entry together with the offset of the next record.
    """

    # Preview length limit for log messages
    TITLE_PREVIEW_LENGTH = 80

    # Regular expressions for the metadata block of a record
    HIGHLIGHT_RE = re.compile(r"Highlight")
    HEADER_RE = re.compile(r"- ([^|\n]*)\|")
    PAGE_RE = re.compile(r"\b[Pp]age (\d+(?:-\d+)?)")
    LOCATION_RE = re.compile(r"(?:\bLoc\.|\b[Ll]ocation) (\d+(?:-\d+)?)")
    DATE_RE = re.compile(r"Added on ([^\r\n]*)")

    def __init__(self, text: str):
        """Initialize the parser with the full clippings text.

        Args:
            text: Content of a 'My Clippings.txt' export
        """
        self.text = text
        logger.debug("Initializing ClippingsParser with %d characters of input.", len(text))

    @classmethod
    def from_file(cls, clippings_file: str | Path) -> "ClippingsParser":
        """Create a parser for the contents of a clippings file.

        Args:
            clippings_file: Path to the 'My Clippings.txt' file

        Raises:
            MissingSourceError: If the file does not exist or can't be read
        """
        path = Path(clippings_file)
        if not path.is_file():
            logger.error("Clippings file not found: %s", path)
            raise MissingSourceError(f"Clippings file not found: {path}")

        try:
            with open(path, encoding="utf-8-sig") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read clippings file %s", path, exc_info=True)
            raise MissingSourceError(f"Could not read clippings file: {path}") from e

        logger.debug("Successfully read %d characters from %s", len(content), path)
        return cls(content)

    def parse_next(self, cursor: int = 0) -> tuple[ClippingEntry, int] | None:
        """Parse the record starting at ``cursor``.

        Args:
            cursor: Offset of the first character of an unparsed record

        Returns:
            Tuple of (entry, next_cursor), or None when no further delimiter exists

        Raises:
            MalformedRecordError: If the record's title line is the delimiter itself
        """
        start = cursor
        delimiter_at = self.text.find(DELIMITER, start)
        if delimiter_at == -1:
            logger.debug("No delimiter after offset %d, end of input.", start)
            return None

        title, title_end = self._read_title(start)
        if title == DELIMITER:
            logger.error("Record at offset %d has no title line; lost track of record boundaries.", start)
            raise MalformedRecordError(
                f"Could not locate the content or quoted text of the record at offset {start}", offset=start
            )

        body = self.text[title_end:delimiter_at] if title_end < delimiter_at else ""
        metadata, content = self._split_body(body.splitlines())

        is_highlight = self.HIGHLIGHT_RE.search(metadata) is not None
        entry = ClippingEntry(
            title=title,
            is_highlight=is_highlight,
            header=self._search(self.HEADER_RE, metadata),
            page=self._search(self.PAGE_RE, metadata),
            location=self._search(self.LOCATION_RE, metadata),
            date=self._search(self.DATE_RE, metadata),
            content=content,
        )

        if is_highlight and not content:
            logger.warning("Highlight at offset %d ('%s') has metadata but no content.", start, self._preview(title))
        logger.debug("Parsed record at offset %d: %s", start, entry)

        return entry, self._skip_delimiter_line(delimiter_at)

    def iter_entries(self) -> Iterator[ClippingEntry]:
        """Yield every entry of the input, in order."""
        cursor = 0
        while True:
            result = self.parse_next(cursor)
            if result is None:
                return
            entry, cursor = result
            yield entry

    def parse(self) -> list[ClippingEntry]:
        """Parse the whole input and return the list of entries.

        Returns:
            List of ClippingEntry objects in input order
        """
        logger.info("Starting to parse %d characters of clippings.", len(self.text))
        entries = list(self.iter_entries())
        bookmarks = sum(1 for entry in entries if entry.is_bookmark)
        logger.info(
            "Parsing complete. Parsed: %d, Highlights: %d, Bookmarks: %d",
            len(entries),
            len(entries) - bookmarks,
            bookmarks,
        )
        return entries

    def _read_title(self, start: int) -> tuple[str, int]:
        """Return the title line at ``start`` and the offset just past it."""
        line_end = self.text.find("\n", start)
        if line_end == -1:
            line_end = len(self.text)
        title = self.text[start:line_end].strip()
        if title.startswith("\ufeff"):
            logger.debug("Removing BOM from title line.")
            title = title[1:].strip()
        return title, line_end + 1

    def _split_body(self, lines: list[str]) -> tuple[str, str]:
        """Split the lines between title and delimiter into metadata and content.

        Metadata runs up to the first blank line and everything after it is
        content. Without a blank separator, only the last line is content.
        """
        for index, line in enumerate(lines):
            if not line.strip():
                return "\n".join(lines[:index]), "\n".join(lines[index + 1 :]).strip()
        if len(lines) > 1:
            return "\n".join(lines[:-1]), lines[-1].strip()
        return "\n".join(lines), ""

    def _skip_delimiter_line(self, delimiter_at: int) -> int:
        newline_at = self.text.find("\n", delimiter_at + len(DELIMITER))
        if newline_at == -1:
            return len(self.text)
        return newline_at + 1

    @staticmethod
    def _search(pattern: re.Pattern, text: str) -> str | None:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
        return None

    def _preview(self, text: str) -> str:
        if len(text) > self.TITLE_PREVIEW_LENGTH:
            return text[: self.TITLE_PREVIEW_LENGTH] + "..."
        return text
