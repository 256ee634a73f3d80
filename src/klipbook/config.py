"""Run configuration shared by the export commands."""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MAX_BOOKS = 10


class ConfigError(ValueError):
    """Invalid command configuration, detected before any parsing happens."""


@dataclass
class ExportConfig:
    """Configuration for a single export run."""

    input_path: Path
    max_books: int = DEFAULT_MAX_BOOKS
    output_path: Path = field(default_factory=lambda: Path("."))
    force: bool = False
    skip_malformed: bool = False

    def validate(self, output_is_dir: bool) -> None:
        """Check the configuration, raising ConfigError on the first problem.

        Args:
            output_is_dir: True when output_path names a directory to write
                into (HTML), False when it names a single file (JSON)
        """
        if self.max_books < 0:
            raise ConfigError(f"Number of books must be >= 0, got {self.max_books}")

        if not self.input_path.is_file():
            raise ConfigError(f"Input file not found: {self.input_path}")

        if output_is_dir:
            if self.output_path.exists() and not self.output_path.is_dir():
                raise ConfigError(
                    f"Output directory is an existing file: {self.output_path}"
                )
        elif self.output_path.is_dir():
            raise ConfigError(f"Output file is a directory: {self.output_path}")
