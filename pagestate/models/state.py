"""Pagination state aggregate.

Architecture:
    ``PaginationState`` is the single value the whole library revolves around.
    It bundles the page cache with the navigation position and the last
    server-reported totals. Every operation returns a new instance; nothing
    updates a state in place.

Design Decisions:
    - Frozen dataclass with a read-only cache view: snapshots can be shared
      freely between the driver, subscribers and tests
    - ``total_pages == 0`` means "not yet bounded", which navigation treats
      differently from a known page count
    - Accessors only project the current page; other cached pages are reached
      through ``cache`` or ``status_of``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from ..core.config import DEFAULT_PER_PAGE
from ..core.exceptions import ValidationError
from ..core.status import NOT_ASKED, Failed, FetchStatus, Pending, Succeeded
from .chunk import Chunk


def total_pages(total_count: int, per_page: int) -> int:
    """Number of pages needed for ``total_count`` items, 0 when there are none."""
    if per_page < 1:
        raise ValidationError("per_page must be >= 1")
    if total_count <= 0:
        return 0
    return -(-total_count // per_page)


@dataclass(frozen=True)
class PaginationState:
    """Snapshot of a paginated resource as seen by the client.

    Attributes:
        request_context: Caller data threaded into every fetch
        current_page: Page being viewed (1-based)
        per_page: Items requested per page
        total_count: Server-reported item count, 0 before the first success
        extra_data: Last out-of-band payload returned by a successful fetch
        cache: Fetch status per requested page number
    """

    request_context: Any = None
    current_page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    total_count: int = 0
    extra_data: Any | None = None
    cache: Mapping[int, FetchStatus[Chunk]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValidationError(f"current_page must be >= 1, got {self.current_page}")
        if self.per_page < 1:
            raise ValidationError(f"per_page must be >= 1, got {self.per_page}")
        if self.total_count < 0:
            raise ValidationError(f"total_count must be >= 0, got {self.total_count}")
        object.__setattr__(self, "cache", MappingProxyType(dict(self.cache)))

    # ----------------------
    # Derived values
    # ----------------------
    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count, self.per_page)

    @property
    def status(self) -> FetchStatus[Chunk]:
        """Raw status of the current page (``NotAsked`` when never requested)."""
        return self.status_of(self.current_page)

    def status_of(self, page: int) -> FetchStatus[Chunk]:
        return self.cache.get(page, NOT_ASKED)

    def has_entry(self, page: int) -> bool:
        """True when the page was ever requested, whatever its outcome."""
        return page in self.cache

    @property
    def items(self) -> tuple[Any, ...]:
        """Items of the current page, empty unless it was fetched successfully."""
        status = self.cache.get(self.current_page)
        if isinstance(status, Succeeded):
            return status.value.items
        return ()

    @property
    def error(self) -> Any | None:
        """Error of the current page when its fetch failed."""
        status = self.cache.get(self.current_page)
        if isinstance(status, Failed):
            return status.error
        return None

    @property
    def is_empty(self) -> bool:
        """Current page was fetched and holds no items."""
        status = self.cache.get(self.current_page)
        return isinstance(status, Succeeded) and not status.value.items

    @property
    def is_loading(self) -> bool:
        """Current page is in flight or has not been requested yet."""
        status = self.cache.get(self.current_page)
        return status is None or isinstance(status, Pending)

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 1

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.total_pages

    # ----------------------
    # Functional updates
    # ----------------------
    def with_page(self, page: int) -> PaginationState:
        return replace(self, current_page=page)

    def with_statuses(self, statuses: Mapping[int, FetchStatus[Chunk]]) -> PaginationState:
        """Return a copy whose cache has ``statuses`` written over it."""
        cache = dict(self.cache)
        cache.update(statuses)
        return replace(self, cache=cache)

    def with_status(self, page: int, status: FetchStatus[Chunk]) -> PaginationState:
        return self.with_statuses({page: status})
