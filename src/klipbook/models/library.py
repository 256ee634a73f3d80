"""Data models for the aggregated library handed to renderers."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from klipbook.models.entry import ClippingType


class Clipping(BaseModel):
    """Highlight or note belonging to a book."""

    model_config = ConfigDict(frozen=True)

    location: int
    page: str | None = None
    text: str = ""
    type: ClippingType


class Book(BaseModel):
    """All clippings sharing a title, ordered by location."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str = ""
    last_update: datetime
    clippings: tuple[Clipping, ...] = ()

    @property
    def title_and_author(self) -> str:
        if self.author:
            return f"{self.title} by {self.author}"
        return self.title
