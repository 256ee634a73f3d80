"""Write a library of books to a single JSON document."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter

from klipbook.models.library import Book

BOOKS_ADAPTER = TypeAdapter(list[Book])


class JsonWriter:
    """Serialize books to a JSON array, one object per book."""

    def __init__(self, output_path: Path, force: bool = False):
        """Initialize JSON writer.

        Args:
            output_path: File to write
            force: Overwrite output_path if it already exists
        """
        self.output_path = output_path
        self.force = force

    def render(self, books: Sequence[Book]) -> str:
        """Return the JSON document for books."""
        return BOOKS_ADAPTER.dump_json(list(books), indent=2).decode("utf-8")

    def write(self, books: Sequence[Book]) -> Path:
        """Write books to output_path.

        Raises:
            FileExistsError: If the file exists and force is not set
        """
        if self.output_path.exists() and not self.force:
            raise FileExistsError(
                f"Output file already exists: {self.output_path} (use --force to overwrite)"
            )

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(self.render(books), encoding="utf-8")
        return self.output_path
