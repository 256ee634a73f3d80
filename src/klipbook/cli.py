"""Main CLI application."""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from klipbook.config import DEFAULT_MAX_BOOKS, ConfigError, ExportConfig
from klipbook.core.entry_extractor import ParseError
from klipbook.logger import setup_logging

app = typer.Typer(
    name="klipbook",
    help="Turn a Kindle 'My Clippings.txt' export into per-book HTML or JSON.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

InputOption = Annotated[
    Path,
    typer.Option(
        "--input",
        "-i",
        help="Path to the Kindle clippings file (My Clippings.txt)",
    ),
]
NumberOption = Annotated[
    int,
    typer.Option(
        "--number",
        "-n",
        help="Maximum number of books, most recently updated first",
    ),
]
SkipMalformedOption = Annotated[
    bool,
    typer.Option(
        "--skip-malformed",
        help="Skip malformed records with a warning instead of failing",
    ),
]
ForceOption = Annotated[
    bool,
    typer.Option(
        "--force",
        "-f",
        help="Overwrite existing output files",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
]


@app.callback()
def main() -> None:
    """Turn a Kindle 'My Clippings.txt' export into per-book HTML or JSON."""
    setup_logging()


def _run(
    command: Callable[..., None], config: ExportConfig, output_is_dir: bool, **kwargs: bool
) -> None:
    """Validate config and run a command, mapping failures to exit code 1."""
    try:
        config.validate(output_is_dir=output_is_dir)
        command(config=config, console=console, **kwargs)
    except ParseError as e:
        console.print(f"[red]Error parsing clippings: record {e.position}: {escape(e.message)}[/]")
        console.print(f"[dim]{escape(e.record)}[/]")
        raise typer.Exit(1)
    except (ConfigError, OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command("list")
def list_books(
    input_path: InputOption,
    number: NumberOption = DEFAULT_MAX_BOOKS,
    skip_malformed: SkipMalformedOption = False,
) -> None:
    """List the books found in a clippings file."""
    from klipbook.commands.list_books import execute_list

    config = ExportConfig(
        input_path=input_path,
        max_books=number,
        skip_malformed=skip_malformed,
    )
    _run(execute_list, config, output_is_dir=True)


@app.command()
def tojson(
    input_path: InputOption,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output JSON file",
        ),
    ],
    number: NumberOption = DEFAULT_MAX_BOOKS,
    force: ForceOption = False,
    skip_malformed: SkipMalformedOption = False,
    quiet: QuietOption = False,
) -> None:
    """Write books and their clippings to a single JSON file."""
    from klipbook.commands.tojson import execute_tojson

    config = ExportConfig(
        input_path=input_path,
        max_books=number,
        output_path=output,
        force=force,
        skip_malformed=skip_malformed,
    )
    _run(execute_tojson, config, output_is_dir=False, quiet=quiet)


@app.command()
def tohtml(
    input_path: InputOption,
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory to write one HTML page per book into",
        ),
    ] = Path("."),
    number: NumberOption = DEFAULT_MAX_BOOKS,
    force: ForceOption = False,
    skip_malformed: SkipMalformedOption = False,
    quiet: QuietOption = False,
) -> None:
    """Write one HTML page per book plus an index page."""
    from klipbook.commands.tohtml import execute_tohtml

    config = ExportConfig(
        input_path=input_path,
        max_books=number,
        output_path=output_dir,
        force=force,
        skip_malformed=skip_malformed,
    )
    _run(execute_tohtml, config, output_is_dir=True, quiet=quiet)


if __name__ == "__main__":
    app()
