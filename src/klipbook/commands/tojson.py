"""Tojson command implementation."""

from rich.console import Console
from rich.markup import escape

from klipbook.commands.common import load_books
from klipbook.config import ExportConfig
from klipbook.core.json_writer import JsonWriter


def execute_tojson(config: ExportConfig, console: Console, quiet: bool = False) -> None:
    """Execute the tojson command."""
    books = load_books(config, console, quiet=quiet)

    writer = JsonWriter(config.output_path, force=config.force)
    output_path = writer.write(books)

    if not quiet:
        console.print(f"[green]Wrote {len(books)} book(s) to {escape(str(output_path))}[/]")
