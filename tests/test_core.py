"""Tests for the core clippings2org functionality."""

from pathlib import Path
from unittest.mock import patch

import pytest

from clippings2org.core import Clippings2Org, convert_configured, convert_text
from clippings2org.exceptions import MalformedRecordError, MissingSourceError
from clippings2org.renderer import RenderOptions

EXPECTED_TITLES = 3
EXPECTED_ENTRIES = 5
EXPECTED_HIGHLIGHTS = 4
EXPECTED_BOOKMARKS = 1


@pytest.fixture
def sample_clippings_path():
    return Path(__file__).parent / "fixtures" / "clippings_sample.txt"


def test_process_sample_file(sample_clippings_path):
    """Test the full parse, group and render run over the sample file."""
    result = Clippings2Org(sample_clippings_path).process()

    assert result.stats.titles == EXPECTED_TITLES
    assert result.stats.total_entries == EXPECTED_ENTRIES
    assert result.stats.highlights == EXPECTED_HIGHLIGHTS
    assert result.stats.bookmarks == EXPECTED_BOOKMARKS

    top_level = [line for line in result.document.splitlines() if line.startswith("* ")]
    assert top_level == ["* Report", "* The Selfish Gene (Richard Dawkins)", "* Fahrenheit 451 (Ray Bradbury)"]


def test_process_groups_entries_under_first_title(sample_clippings_path):
    document = Clippings2Org(sample_clippings_path).process().document
    report_section = document.split("* The Selfish Gene")[0]
    assert report_section == (
        "* Report\n"
        "** Page 12 Loc. 345-346 \n"
        "Numbers do not lie, but they do mislead.\n"
        "** \n"
        "** Page 7 \n"
        "The second paragraph starts here\n"
        "and carries on over a second line.\n"
    )


def test_process_with_all_options(sample_clippings_path):
    options = RenderOptions(include_date=True, include_pdf_links=True, include_pdf_folder="/pdfs/")
    document = Clippings2Org(sample_clippings_path, options).process().document

    assert ":DATE: Thursday, March 21, 2013 4:02:10 PM" in document
    assert "[[pdfview:/pdfs/Report.pdf::7][Report, page 7]]" in document
    assert "[[pdfview:/pdfs/The Selfish Gene (Richard Dawkins).pdf::92]" in document


def test_process_missing_file(tmp_path):
    with pytest.raises(MissingSourceError):
        Clippings2Org(tmp_path / "missing.txt").process()


def test_process_malformed_file(tmp_path):
    clippings = tmp_path / "My Clippings.txt"
    clippings.write_text("==========\nBook\n- Highlight\n\ntext\n==========\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError):
        Clippings2Org(clippings).process()


def test_convert_text_empty():
    assert convert_text("") == ""


def test_convert_text_malformed_produces_no_output():
    text = "Book\n- Highlight on Page 1\n\ntext\n==========\n==========\n"
    with pytest.raises(MalformedRecordError):
        convert_text(text)


def test_convert_configured(sample_clippings_path):
    options = RenderOptions(include_date=True)
    with (
        patch("clippings2org.core.get_clippings_file_path", return_value=sample_clippings_path),
        patch("clippings2org.core.get_render_options", return_value=options),
    ):
        result = convert_configured()

    assert result.stats.titles == EXPECTED_TITLES
    assert ":PROPERTIES:" in result.document
