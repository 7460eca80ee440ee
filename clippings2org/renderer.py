"""Rendering of grouped clippings as an Org-mode outline."""

import logging

from pydantic import BaseModel, Field

from .grouping import GroupedClippings
from .parser.models import EntryFields

logger = logging.getLogger(__name__)

TITLE_HEADING = "*"
ENTRY_HEADING = "**"
PDF_LINK_TYPE = "pdfview"


class RenderOptions(BaseModel):
    """Toggles controlling what the outline includes."""

    include_pdf_links: bool = Field(default=False, description="Emit a PDF link line for each page-bearing entry")
    include_pdf_folder: str = Field(default="", description="Folder prefix used when building PDF links")
    include_date: bool = Field(default=False, description="Emit a property drawer holding the entry's date")


def render(collection: GroupedClippings, options: RenderOptions | None = None) -> str:
    """Render ``collection`` as an Org outline.

    Args:
        collection: Entries grouped by source title
        options: Rendering toggles; defaults to all extras disabled

    Returns:
        The outline text, empty when the collection is empty
    """
    options = options or RenderOptions()
    lines: list[str] = []

    for title, entries in collection.items():
        lines.append(f"{TITLE_HEADING} {title}")
        for entry in entries:
            lines.extend(_render_entry(title, entry, options))

    logger.debug("Rendered %d titles into %d lines.", len(collection), len(lines))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _render_entry(title: str, entry: EntryFields, options: RenderOptions) -> list[str]:
    if entry.is_bookmark:
        lines = [f"{ENTRY_HEADING} {entry.content}"]
    else:
        lines = [f"{ENTRY_HEADING} {format_position(entry)}"]
        if options.include_date and entry.date:
            lines.extend(format_properties({"DATE": entry.date}))
        if entry.content:
            lines.append(entry.content)

    if options.include_pdf_links and entry.page:
        lines.append(format_pdf_link(options.include_pdf_folder, title, entry.page))
    return lines


def format_position(entry: EntryFields) -> str:
    """Return the heading text for a highlight, e.g. ``"Page 12 Loc. 345-346 "``."""
    text = ""
    if entry.page:
        text += f"Page {entry.page} "
    if entry.location:
        text += f"Loc. {entry.location} "
    return text


def format_properties(properties: dict[str, str]) -> list[str]:
    lines = [":PROPERTIES:"]
    for key, value in properties.items():
        lines.append(f":{key}: {value}")
    lines.append(":END:")
    return lines


def format_pdf_link(folder: str, title: str, page: str) -> str:
    """Build an Org link to ``page`` of ``<folder><title>.pdf``.

    Page ranges link to their first page.
    """
    first_page = page.split("-")[0]
    return f"[[{PDF_LINK_TYPE}:{folder}{title}.pdf::{first_page}][{title}, page {page}]]"
