"""List command implementation."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from klipbook.commands.common import load_books
from klipbook.config import ExportConfig
from klipbook.models.library import Book


def display_books(books: Sequence[Book], console: Console) -> None:
    """Display books as a table, most recently updated first."""
    table = Table(title="Books", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Author", style="green")
    table.add_column("Clippings", justify="right", style="yellow")
    table.add_column("Last update", style="dim")

    for i, book in enumerate(books, start=1):
        table.add_row(
            str(i),
            book.title,
            book.author or "—",
            str(len(book.clippings)),
            f"{book.last_update:%Y-%m-%d %H:%M}",
        )

    console.print(table)


def execute_list(config: ExportConfig, console: Console) -> None:
    """Execute the list command."""
    books = load_books(config, console)

    if not books:
        console.print("[yellow]No books found[/]")
        return

    display_books(books, console)
