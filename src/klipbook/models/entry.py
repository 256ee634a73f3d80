"""Data models for raw clippings entries."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ClippingType(str, Enum):
    """Kind of record found in a clippings export."""

    HIGHLIGHT = "highlight"
    NOTE = "note"
    BOOKMARK = "bookmark"


class Entry(BaseModel):
    """Single parsed record, before grouping into books."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str = ""
    location: int
    page: str | None = None
    added_on: datetime
    text: str = ""
    type: ClippingType
