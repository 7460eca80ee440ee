"""Grouping of parsed clippings by source title."""

import logging
from collections.abc import Iterable, Iterator

from .parser.models import ClippingEntry, EntryFields

logger = logging.getLogger(__name__)


class GroupedClippings:
    """Ordered mapping from a source title to the entries clipped from it.

    Titles keep the order in which they were first seen and each title's
    entries keep the order in which they were appended. There is no removal.
    """

    def __init__(self):
        self._groups: dict[str, list[EntryFields]] = {}

    def append(self, title: str, entry_fields: EntryFields) -> None:
        """Append ``entry_fields`` to the slot for ``title``, creating the slot if needed."""
        slot = self._groups.get(title)
        if slot is None:
            logger.debug("New title slot: '%s'", title)
            slot = self._groups[title] = []
        slot.append(entry_fields)

    def add_entry(self, entry: ClippingEntry) -> None:
        self.append(entry.title, entry.entry_fields())

    def titles(self) -> list[str]:
        return list(self._groups)

    def entries(self, title: str) -> list[EntryFields]:
        """Return a copy of the entries recorded for ``title``."""
        return list(self._groups[title])

    def items(self) -> Iterator[tuple[str, list[EntryFields]]]:
        for title, entries in self._groups.items():
            yield title, list(entries)

    def entry_count(self) -> int:
        return sum(len(entries) for entries in self._groups.values())

    def __contains__(self, title: object) -> bool:
        return title in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"GroupedClippings(titles={len(self)}, entries={self.entry_count()})"


def group_entries(entries: Iterable[ClippingEntry]) -> GroupedClippings:
    """Build a GroupedClippings from entries in parse order."""
    grouped = GroupedClippings()
    for entry in entries:
        grouped.add_entry(entry)
    logger.info("Grouped %d entries under %d titles.", grouped.entry_count(), len(grouped))
    return grouped
