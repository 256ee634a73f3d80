"""Render books to standalone HTML pages."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from klipbook.models.entry import ClippingType
from klipbook.models.library import Book, Clipping

log = logging.getLogger(__name__)

INDEX_FILE = "index.html"

# Leaves room for ".html" and a collision suffix under the 255-byte name limit
MAX_SLUG_BYTES = 200

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title></title>
<style>
body { font-family: Georgia, serif; max-width: 42em; margin: 2em auto; color: #222; }
.meta { color: #777; font-size: 0.85em; }
.clipping { margin: 1.5em 0; }
.note blockquote { border-left: 3px solid #c90; padding-left: 1em; font-style: italic; }
blockquote { margin: 0.3em 0; white-space: pre-wrap; }
</style>
</head>
<body></body>
</html>"""


@dataclass
class PrintReport:
    """Files touched by an HtmlPrinter run."""

    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def book_file_name(book: Book) -> str:
    """Filesystem-safe file name for a book page."""
    clean = re.sub(r"[^\w\s-]", "", book.title_and_author).strip()
    clean = re.sub(r"[-\s]+", "_", clean)
    clean = clean.encode("utf-8")[:MAX_SLUG_BYTES].decode("utf-8", errors="ignore")
    return f"{clean or 'untitled'}.html"


def _new_page(title: str) -> BeautifulSoup:
    soup = BeautifulSoup(PAGE_TEMPLATE, "lxml")
    soup.title.string = title
    return soup


def _add_text(
    soup: BeautifulSoup, parent: Tag, name: str, text: str, css_class: str | None = None
) -> Tag:
    tag = soup.new_tag(name)
    tag.string = text
    if css_class:
        tag["class"] = css_class
    parent.append(tag)
    return tag


def _clipping_label(clipping: Clipping) -> str:
    parts = [clipping.type.value.title()]
    if clipping.page:
        parts.append(f"page {clipping.page}")
    if clipping.location:
        parts.append(f"location {clipping.location}")
    return " | ".join(parts)


class HtmlPrinter:
    """Write one HTML page per book plus an index page."""

    def __init__(self, output_dir: Path, force: bool = False):
        """Initialize HTML printer.

        Args:
            output_dir: Directory to write pages into, created if missing
            force: Overwrite existing pages instead of skipping them
        """
        self.output_dir = output_dir
        self.force = force

    def render_book(self, book: Book) -> str:
        """Return the HTML page for a single book."""
        soup = _new_page(book.title_and_author)
        body = soup.body

        _add_text(soup, body, "h1", book.title)
        if book.author:
            _add_text(soup, body, "h2", book.author)
        _add_text(
            soup,
            body,
            "p",
            f"{len(book.clippings)} clippings, last updated "
            f"{book.last_update:%Y-%m-%d %H:%M}",
            "meta",
        )

        for clipping in book.clippings:
            container = soup.new_tag("div")
            container["class"] = ["clipping", clipping.type.value]
            _add_text(soup, container, "p", _clipping_label(clipping), "meta")
            if clipping.text:
                _add_text(soup, container, "blockquote", clipping.text)
            body.append(container)

        return soup.prettify()

    def render_index(self, books: Sequence[Book], file_names: Sequence[str]) -> str:
        """Return the index page linking every book page."""
        soup = _new_page("Clippings")
        body = soup.body

        _add_text(soup, body, "h1", "Clippings")
        listing = soup.new_tag("ul")
        for book, file_name in zip(books, file_names):
            item = soup.new_tag("li")
            link = soup.new_tag("a", href=file_name)
            link.string = book.title_and_author
            item.append(link)
            highlights = sum(1 for c in book.clippings if c.type is ClippingType.HIGHLIGHT)
            notes = len(book.clippings) - highlights
            _add_text(soup, item, "span", f" ({highlights} highlights, {notes} notes)", "meta")
            listing.append(item)
        body.append(listing)

        return soup.prettify()

    def _write(self, path: Path, content: str, report: PrintReport) -> None:
        if path.exists() and not self.force:
            log.warning("Skipping existing file %s", path)
            report.skipped.append(path)
            return
        path.write_text(content, encoding="utf-8")
        report.written.append(path)

    def print_books(self, books: Sequence[Book]) -> PrintReport:
        """Write all book pages and the index.

        Existing files are left untouched (and reported as skipped) unless
        force is set.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        report = PrintReport()

        file_names: list[str] = []
        used: set[str] = {INDEX_FILE}
        for book in books:
            file_name = book_file_name(book)
            # Distinct titles can collapse to the same slug
            suffix = 2
            while file_name in used:
                file_name = f"{book_file_name(book)[:-5]}_{suffix}.html"
                suffix += 1
            used.add(file_name)
            file_names.append(file_name)

            self._write(self.output_dir / file_name, self.render_book(book), report)

        self._write(
            self.output_dir / INDEX_FILE, self.render_index(books, file_names), report
        )
        return report
