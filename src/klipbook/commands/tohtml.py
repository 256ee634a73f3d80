"""Tohtml command implementation."""

from rich.console import Console
from rich.markup import escape

from klipbook.commands.common import load_books
from klipbook.config import ExportConfig
from klipbook.core.html_printer import HtmlPrinter


def execute_tohtml(config: ExportConfig, console: Console, quiet: bool = False) -> None:
    """Execute the tohtml command."""
    books = load_books(config, console, quiet=quiet)

    if not quiet:
        console.print(f"Using output directory: {escape(str(config.output_path))}")

    printer = HtmlPrinter(config.output_path, force=config.force)
    report = printer.print_books(books)

    if quiet:
        return

    for path in report.written:
        console.print(f"[green]Wrote[/] {escape(path.name)}")
    for path in report.skipped:
        console.print(
            f"[yellow]Skipping[/] {escape(path.name)} [dim](exists, use --force to overwrite)[/]"
        )
