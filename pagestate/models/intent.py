"""Fetch intents and completion messages exchanged with the transport."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.status import Failed, FetchStatus, Succeeded
from .chunk import FetchResponse


class FetchPurpose(str, Enum):
    """Why a page is being fetched, relative to the current page."""

    CURRENT = "current"
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class FetchIntent:
    """Request to fetch one page.

    Attributes:
        request_context: Caller data threaded into the fetch command
        page: Page number to fetch (1-based)
        per_page: Number of items requested per page
        purpose: Position of the page relative to the current page
    """

    request_context: Any
    page: int
    per_page: int
    purpose: FetchPurpose = FetchPurpose.CURRENT


@dataclass(frozen=True)
class FetchCompletion:
    """Outcome of a fetch, tagged with the page it was issued for."""

    page: int
    result: FetchStatus[FetchResponse]

    @classmethod
    def success(cls, page: int, response: FetchResponse) -> FetchCompletion:
        """Create a successful completion."""
        return cls(page=page, result=Succeeded(response))

    @classmethod
    def failure(cls, page: int, error: Any) -> FetchCompletion:
        """Create a failed completion."""
        return cls(page=page, result=Failed(error))
