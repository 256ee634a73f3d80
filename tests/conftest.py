"""Shared fixtures for klipbook tests."""

from datetime import datetime

import pytest

from klipbook.models.entry import ClippingType, Entry

SAMPLE_CLIPPINGS = """\ufeffBook A (Author One)
- Your Highlight on Location 100-102 | Added on Wednesday, January 1, 2020 10:00:00 AM

First highlight in book A
==========
Book A (Author One)
- Your Note on Location 50 | Added on Saturday, February 1, 2020 09:30:00 PM

A note on book A
==========
Book B (Author Two)
- Your Highlight on page 7 | Location 80-81 | Added on Monday, March 15, 2021 8:15:00 AM

Only highlight in book B
==========
Book B (Author Two)
- Your Bookmark on Location 90 | Added on Tuesday, March 16, 2021 8:15:00 AM


==========
"""


def make_entry(
    title: str = "Book",
    location: int = 1,
    added_on: datetime = datetime(2020, 1, 1),
    type: ClippingType = ClippingType.HIGHLIGHT,
    author: str = "Author",
    text: str = "text",
    page: str | None = None,
) -> Entry:
    """Build an Entry with sensible defaults."""
    return Entry(
        title=title,
        author=author,
        location=location,
        page=page,
        added_on=added_on,
        text=text,
        type=type,
    )


@pytest.fixture
def sample_text():
    """Four-record export: two books, one bookmark."""
    return SAMPLE_CLIPPINGS


@pytest.fixture
def clippings_file(tmp_path):
    """Sample export written to disk."""
    path = tmp_path / "My Clippings.txt"
    path.write_text(SAMPLE_CLIPPINGS, encoding="utf-8")
    return path


@pytest.fixture
def entry_factory():
    """Factory for Entry objects, see make_entry."""
    return make_entry
