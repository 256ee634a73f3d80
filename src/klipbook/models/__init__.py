"""Data models."""

from klipbook.models.entry import ClippingType, Entry
from klipbook.models.library import Book, Clipping

__all__ = [
    # Entry models
    "ClippingType",
    "Entry",
    # Library models
    "Clipping",
    "Book",
]
