"""Tests for the Org outline renderer."""

import pytest

from clippings2org.grouping import GroupedClippings, group_entries
from clippings2org.parser import ClippingEntry, EntryFields
from clippings2org.renderer import RenderOptions, format_pdf_link, format_position, render

DATE = "Thursday, March 21, 2013 4:02:10 PM"


@pytest.fixture
def report():
    """Fixture providing a collection with one highlight and one bookmark."""
    return group_entries(
        [
            ClippingEntry(
                title="Report", is_highlight=True, page="12", location="345-346", date=DATE, content="Key finding"
            ),
            ClippingEntry(title="Report", is_highlight=False, page="7", content="Chapter two"),
        ]
    )


def heading_lines(document, level):
    prefix = "*" * level + " "
    return [line for line in document.splitlines() if line.startswith(prefix)]


def test_empty_collection_renders_empty_document():
    assert render(GroupedClippings()) == ""


def test_default_rendering(report):
    assert render(report) == "* Report\n** Page 12 Loc. 345-346 \nKey finding\n** Chapter two\n"


def test_heading_contains_page_then_location(report):
    document = render(report)
    assert "** Page 12 Loc. 345-346 \n" in document


def test_heading_with_location_only():
    entry = EntryFields(is_highlight=True, location="784-785", content="text")
    assert format_position(entry) == "Loc. 784-785 "


def test_heading_with_page_only():
    entry = EntryFields(is_highlight=True, page="7", content="text")
    assert format_position(entry) == "Page 7 "


def test_bookmark_renders_content_as_heading():
    grouped = group_entries([ClippingEntry(title="Book", is_highlight=False, content="Saved spot")])
    document = render(grouped, RenderOptions(include_date=True))
    assert document == "* Book\n** Saved spot\n"
    assert "Page" not in document
    assert "Loc." not in document


def test_date_property_drawer_follows_heading(report):
    document = render(report, RenderOptions(include_date=True))
    lines = document.splitlines()
    heading_index = lines.index("** Page 12 Loc. 345-346 ")
    assert lines[heading_index + 1 : heading_index + 4] == [":PROPERTIES:", f":DATE: {DATE}", ":END:"]
    assert lines[heading_index + 4] == "Key finding"


def test_date_omitted_when_disabled(report):
    assert ":PROPERTIES:" not in render(report, RenderOptions(include_date=False))


def test_date_omitted_when_entry_has_none():
    grouped = group_entries([ClippingEntry(title="Book", is_highlight=True, page="1", content="text")])
    assert ":PROPERTIES:" not in render(grouped, RenderOptions(include_date=True))


def test_pdf_links_for_page_bearing_entries(report):
    options = RenderOptions(include_pdf_links=True, include_pdf_folder="/pdfs/")
    document = render(report, options)
    assert "[[pdfview:/pdfs/Report.pdf::12][Report, page 12]]" in document
    # Bookmarks get a link too when they carry a page
    assert document.endswith("** Chapter two\n[[pdfview:/pdfs/Report.pdf::7][Report, page 7]]\n")


def test_pdf_link_skipped_without_page():
    grouped = group_entries([ClippingEntry(title="Book", is_highlight=True, location="5", content="text")])
    document = render(grouped, RenderOptions(include_pdf_links=True, include_pdf_folder="/pdfs/"))
    assert "pdfview" not in document


def test_pdf_links_disabled_by_default(report):
    assert "pdfview" not in render(report, RenderOptions(include_pdf_folder="/pdfs/"))


def test_pdf_link_for_page_range_targets_first_page():
    assert format_pdf_link("/pdfs/", "Report", "207-208") == "[[pdfview:/pdfs/Report.pdf::207][Report, page 207-208]]"


def test_one_top_level_heading_per_title():
    grouped = group_entries(
        [
            ClippingEntry(title=title, is_highlight=True, page="1", content=str(i))
            for i, title in enumerate(["A", "B", "A", "C", "B"])
        ]
    )
    document = render(grouped)
    assert heading_lines(document, 1) == ["* A", "* B", "* C"]
    assert len(heading_lines(document, 2)) == 5


def test_entries_under_title_in_input_order():
    grouped = group_entries(
        [
            ClippingEntry(title="A", is_highlight=True, content="first"),
            ClippingEntry(title="B", is_highlight=True, content="other"),
            ClippingEntry(title="A", is_highlight=True, content="second"),
        ]
    )
    assert render(grouped).startswith("* A\n** \nfirst\n** \nsecond\n* B\n")


def test_multiline_content_is_rendered_as_body():
    grouped = group_entries([ClippingEntry(title="A", is_highlight=True, page="2", content="line one\nline two")])
    assert render(grouped) == "* A\n** Page 2 \nline one\nline two\n"
