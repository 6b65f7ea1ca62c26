"""Page chunk and fetch response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Items cached for one page, tagged with that page number."""

    items: tuple[Any, ...] = ()
    page: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        """True when the page came back without items."""
        return not self.items


class FetchResponse(BaseModel):
    """Successful payload of a single page fetch.

    Attributes:
        items: Items of the requested page, in server order
        total_count: Server-reported number of items across all pages
        extra_data: Out-of-band payload returned alongside the items
    """

    items: tuple[Any, ...] = ()
    total_count: int = Field(..., ge=0)
    extra_data: Any | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
