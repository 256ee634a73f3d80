"""Split a Kindle clippings export into structured entries."""

import logging
import re
from datetime import datetime

from pydantic import BaseModel, Field

from klipbook.models.entry import ClippingType, Entry

log = logging.getLogger(__name__)

RECORD_DELIMITER = "=========="

# "Title (Author)" - the last parenthesised group is the author
TITLE_PATTERN = re.compile(r"^(?P<title>.+?)\s*\((?P<author>[^()]*)\)\s*$")

# Covers current and older device variants, e.g.
#   - Your Highlight on page 12 | Location 100-102 | Added on ...
#   - Your Bookmark on Location 5 | Added on ...
#   - Highlight Loc. 1234-36 | Added on ...
METADATA_PATTERN = re.compile(
    r"^-\s*(?:Your\s+)?(?P<type>Highlight|Note|Bookmark)\b"
    r"(?:\s+(?:on|at))?"
    r"(?:\s*page\s+(?P<page>[\w-]+)\s*\|?)?"
    r"(?:\s*loc(?:ation|\.)\s*(?P<location>\d+)(?:-\d+)?\s*\|?)?"
    r"\s*Added on\s+(?P<added_on>.+?)\s*$",
    re.IGNORECASE,
)

# Device timestamps, newest format first
DATE_FORMATS = (
    "%A, %B %d, %Y %I:%M:%S %p",  # Sunday, September 12, 2010 11:33:27 PM
    "%A, %d %B %Y %H:%M:%S",  # Thursday, 4 October 2012 21:44:56
    "%A, %B %d, %Y, %I:%M %p",  # Thursday, October 04, 2012, 09:44 PM
)


class ParseError(ValueError):
    """A record in the export does not match the clippings grammar."""

    def __init__(self, message: str, position: int, record: str):
        self.message = message
        self.position = position
        self.record = record
        super().__init__(f"Record {position}: {message}\n{record}")


class ExtractionResult(BaseModel):
    """Entries extracted from an export, in file order."""

    entries: list[Entry]
    warnings: list[str] = Field(default_factory=list)


def parse_title_line(line: str) -> tuple[str, str]:
    """Split a title line into (title, author). Author is "" when absent."""
    line = line.strip()
    match = TITLE_PATTERN.match(line)
    if match and match.group("title"):
        return match.group("title"), match.group("author").strip()
    return line, ""


def parse_added_on(value: str) -> datetime:
    """Parse a device timestamp.

    Raises:
        ValueError: If the value matches none of DATE_FORMATS
    """
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date: {value!r}")


def parse_record(record: str, position: int) -> Entry:
    """Parse one delimiter-separated record into an Entry.

    Args:
        record: Raw record text, already stripped
        position: 1-based position of the record in the export

    Raises:
        ParseError: If the title or metadata line is missing or malformed
    """
    lines = record.splitlines()

    if len(lines) < 2:
        raise ParseError("missing metadata line", position, record)

    title, author = parse_title_line(lines[0])
    if not title:
        raise ParseError("missing title", position, record)

    match = METADATA_PATTERN.match(lines[1].strip())
    if not match:
        raise ParseError(f"malformed metadata line: {lines[1]!r}", position, record)

    try:
        added_on = parse_added_on(match.group("added_on"))
    except ValueError as e:
        raise ParseError(str(e), position, record) from e

    # Page-only records (PDFs and some periodicals) carry no location
    location = match.group("location")

    return Entry(
        title=title,
        author=author,
        location=int(location) if location else 0,
        page=match.group("page"),
        added_on=added_on,
        text="\n".join(lines[2:]).strip(),
        type=ClippingType(match.group("type").lower()),
    )


def split_records(raw_text: str) -> list[str]:
    """Split an export into non-empty, stripped record blocks."""
    raw_text = raw_text.lstrip("\ufeff").strip()
    records = []
    for block in raw_text.split(RECORD_DELIMITER):
        # A BOM can also lead individual records in concatenated exports
        block = block.strip().lstrip("\ufeff")
        if block:
            records.append(block)
    return records


def extract_entries(raw_text: str, skip_malformed: bool = False) -> ExtractionResult:
    """Extract every entry from the text of a clippings export.

    Args:
        raw_text: Full decoded export text
        skip_malformed: Skip malformed records with a warning instead of
            aborting the whole extraction

    Returns:
        ExtractionResult with entries in file order

    Raises:
        ParseError: On the first malformed record, unless skip_malformed
    """
    entries: list[Entry] = []
    warnings: list[str] = []

    for position, record in enumerate(split_records(raw_text), start=1):
        try:
            entries.append(parse_record(record, position))
        except ParseError as e:
            if not skip_malformed:
                raise
            log.warning("Skipping record %d: %s", e.position, e.message)
            warnings.append(f"Skipped record {e.position}: {e.message}")

    log.debug("Extracted %d entries (%d skipped)", len(entries), len(warnings))
    return ExtractionResult(entries=entries, warnings=warnings)
