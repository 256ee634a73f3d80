"""Group extracted entries into an ordered library of books."""

import logging
from collections.abc import Iterable, Sequence
from operator import attrgetter

from klipbook.config import ConfigError
from klipbook.models.entry import ClippingType, Entry
from klipbook.models.library import Book, Clipping

log = logging.getLogger(__name__)


def book_from_entries(entries: Sequence[Entry]) -> Book:
    """Build a Book from the non-empty entries sharing one title.

    Clippings are ordered by location. Title and author come from the first
    entry after that sort; last_update is the latest added_on of the group.
    """
    by_location = sorted(entries, key=attrgetter("location"))
    first = by_location[0]

    return Book(
        title=first.title,
        author=first.author,
        last_update=max(entry.added_on for entry in by_location),
        clippings=tuple(
            Clipping(
                location=entry.location,
                page=entry.page,
                text=entry.text,
                type=entry.type,
            )
            for entry in by_location
        ),
    )


def group_by_title(entries: Iterable[Entry]) -> dict[str, list[Entry]]:
    """Group non-bookmark entries by exact title, groups in title order."""
    groups: dict[str, list[Entry]] = {}
    for entry in sorted(entries, key=attrgetter("title")):
        if entry.type is ClippingType.BOOKMARK:
            continue
        groups.setdefault(entry.title, []).append(entry)
    return groups


def build_books(entries: Iterable[Entry], max_books: int) -> tuple[Book, ...]:
    """Aggregate entries into books, most recently updated first.

    Bookmarks are dropped before grouping, so a title with only bookmarks
    produces no book. Books with the same last_update keep title order.

    Args:
        entries: Entries in any order
        max_books: Maximum number of books to return

    Returns:
        At most max_books books, sorted by last_update descending

    Raises:
        ConfigError: If max_books is negative
    """
    if max_books < 0:
        raise ConfigError(f"Number of books must be >= 0, got {max_books}")

    books = [book_from_entries(group) for group in group_by_title(entries).values()]
    books.sort(key=attrgetter("last_update"), reverse=True)

    log.debug("Built %d books, keeping %d", len(books), min(len(books), max_books))
    return tuple(books[:max_books])
