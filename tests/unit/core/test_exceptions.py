"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from pagestate.core import (
    FetchError,
    PagingError,
    RateLimitError,
    ResourceClosedError,
    ValidationError,
)


def test_rate_limit_error_with_retry_after():
    """Test RateLimitError with retry_after (meaningful behavior)."""
    error = RateLimitError("rate limit", retry_after=120, page=3)
    assert error.status_code == 429
    assert error.retry_after == 120
    assert error.page == 3
    assert isinstance(error, FetchError)
    assert isinstance(error, PagingError)


def test_fetch_error_with_status_code():
    """Test FetchError with status_code (meaningful behavior)."""
    error = FetchError("error", status_code=500)
    assert str(error) == "error"
    assert error.status_code == 500
    assert error.page is None
    assert isinstance(error, PagingError)


def test_validation_and_closed_errors_share_base():
    """Every library error can be caught through PagingError."""
    assert issubclass(ValidationError, PagingError)
    assert issubclass(ResourceClosedError, PagingError)
