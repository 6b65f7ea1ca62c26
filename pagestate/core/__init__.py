"""Core components."""

from .config import (
    DEFAULT_END_COUNT,
    DEFAULT_MIDDLE_COUNT,
    DEFAULT_PER_PAGE,
    DEFAULT_TIMEOUT,
    PagerConfig,
)
from .exceptions import (
    FetchError,
    PagingError,
    RateLimitError,
    ResourceClosedError,
    ValidationError,
)
from .status import (
    NOT_ASKED,
    PENDING,
    Failed,
    FetchStatus,
    FetchStatusKind,
    NotAsked,
    Pending,
    Succeeded,
)

__all__ = [
    # Config
    "DEFAULT_END_COUNT",
    "DEFAULT_MIDDLE_COUNT",
    "DEFAULT_PER_PAGE",
    "DEFAULT_TIMEOUT",
    "PagerConfig",
    # Exceptions
    "PagingError",
    "ValidationError",
    "FetchError",
    "RateLimitError",
    "ResourceClosedError",
    # Fetch status
    "FetchStatus",
    "FetchStatusKind",
    "NotAsked",
    "Pending",
    "Succeeded",
    "Failed",
    "NOT_ASKED",
    "PENDING",
]
