"""Tests for HTML output."""

from datetime import datetime

import pytest

from klipbook.core.html_printer import INDEX_FILE, HtmlPrinter, book_file_name
from klipbook.models.entry import ClippingType
from klipbook.models.library import Book, Clipping


def make_book(title="Dune", author="Frank Herbert", clippings=()):
    return Book(
        title=title,
        author=author,
        last_update=datetime(2021, 6, 1, 12, 0),
        clippings=clippings,
    )


@pytest.fixture
def dune():
    return make_book(
        clippings=(
            Clipping(location=10, text="Fear is the mind-killer.", type=ClippingType.HIGHLIGHT),
            Clipping(location=12, page="9", text="<remember this>", type=ClippingType.NOTE),
        )
    )


class TestBookFileName:
    """Tests for page file names."""

    def test_title_and_author(self, dune):
        assert book_file_name(dune) == "Dune_by_Frank_Herbert.html"

    def test_strips_unsafe_characters(self):
        book = make_book(title="What/If? A: Story", author="")
        assert book_file_name(book) == "WhatIf_A_Story.html"

    def test_empty_slug(self):
        assert book_file_name(make_book(title="???", author="")) == "untitled.html"

    def test_long_non_ascii_title_fits_file_name_limit(self):
        name = book_file_name(make_book(title="漢" * 100, author="Auth"))

        assert name.startswith("漢")
        assert name.endswith(".html")
        assert len(name.encode("utf-8")) <= 255


class TestRender:
    """Tests for page content."""

    def test_book_page_contains_clippings(self, tmp_path, dune):
        html = HtmlPrinter(tmp_path).render_book(dune)

        assert "<!DOCTYPE html>" in html
        assert "Dune by Frank Herbert" in html
        assert "Fear is the mind-killer." in html
        assert "page 9" in html

    def test_text_is_escaped(self, tmp_path, dune):
        html = HtmlPrinter(tmp_path).render_book(dune)

        assert "&lt;remember this&gt;" in html
        assert "<remember this>" not in html

    def test_clippings_keep_order(self, tmp_path, dune):
        html = HtmlPrinter(tmp_path).render_book(dune)
        assert html.index("Fear is the mind-killer.") < html.index("&lt;remember this&gt;")

    def test_index_links_books(self, tmp_path, dune):
        html = HtmlPrinter(tmp_path).render_index([dune], ["dune.html"])

        assert 'href="dune.html"' in html
        assert "1 highlights, 1 notes" in html


class TestPrintBooks:
    """Tests for writing pages to disk."""

    def test_writes_page_per_book_and_index(self, tmp_path, dune):
        output_dir = tmp_path / "html"
        report = HtmlPrinter(output_dir).print_books([dune, make_book(title="Emma", author="")])

        assert (output_dir / "Dune_by_Frank_Herbert.html").exists()
        assert (output_dir / "Emma.html").exists()
        assert (output_dir / INDEX_FILE).exists()
        assert len(report.written) == 3
        assert report.skipped == []

    def test_existing_files_are_skipped_without_force(self, tmp_path, dune):
        existing = tmp_path / "Dune_by_Frank_Herbert.html"
        existing.write_text("mine")

        report = HtmlPrinter(tmp_path).print_books([dune])

        assert existing.read_text() == "mine"
        assert report.skipped == [existing]
        assert report.written == [tmp_path / INDEX_FILE]

    def test_existing_files_overwritten_with_force(self, tmp_path, dune):
        existing = tmp_path / "Dune_by_Frank_Herbert.html"
        existing.write_text("mine")

        report = HtmlPrinter(tmp_path, force=True).print_books([dune])

        assert "Fear is the mind-killer." in existing.read_text()
        assert report.skipped == []

    def test_colliding_slugs_get_distinct_files(self, tmp_path):
        books = [make_book(title="A?", author=""), make_book(title="A!", author="")]
        report = HtmlPrinter(tmp_path).print_books(books)

        names = sorted(p.name for p in report.written)
        assert names == ["A.html", "A_2.html", INDEX_FILE]

    def test_long_non_ascii_title_is_written_with_index(self, tmp_path):
        books = [make_book(title="Short", author="Auth"), make_book(title="漢" * 100, author="Auth")]
        report = HtmlPrinter(tmp_path).print_books(books)

        assert len(report.written) == 3
        assert (tmp_path / INDEX_FILE).exists()
        assert all(len(p.name.encode("utf-8")) <= 255 for p in report.written)

    def test_book_named_index_does_not_clobber_index(self, tmp_path):
        report = HtmlPrinter(tmp_path).print_books([make_book(title="index", author="")])

        assert sorted(p.name for p in report.written) == ["index.html", "index_2.html"]
