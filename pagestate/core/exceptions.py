"""Custom exception hierarchy."""

from __future__ import annotations


class PagingError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(PagingError):
    """Invalid argument passed to a state constructor or operation."""

    pass


class FetchError(PagingError):
    """A page fetch failed in the transport layer."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        page: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.page = page


class RateLimitError(FetchError):
    """Remote API rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60, page: int | None = None) -> None:
        super().__init__(message, status_code=429, page=page)
        self.retry_after = retry_after


class ResourceClosedError(PagingError):
    """Operation attempted on a closed PagedResource."""

    pass
