"""Shared loading step for all commands."""

from rich.console import Console

from klipbook.config import ExportConfig
from klipbook.core.book_aggregator import build_books
from klipbook.core.entry_extractor import extract_entries
from klipbook.models.library import Book


def load_books(config: ExportConfig, console: Console, quiet: bool = False) -> tuple[Book, ...]:
    """Read the clippings export and build the library once for a run.

    The export is decoded as UTF-8, the encoding Kindle devices write,
    whatever the platform default is.

    Raises:
        ParseError: If the export is malformed and skip_malformed is not set
        ConfigError: If max_books is negative
    """
    raw_text = config.input_path.read_text(encoding="utf-8")

    result = extract_entries(raw_text, skip_malformed=config.skip_malformed)
    if result.warnings and not quiet:
        console.print(
            f"[yellow]⚠ Skipped {len(result.warnings)} malformed record(s)[/]"
        )

    return build_books(result.entries, config.max_books)
