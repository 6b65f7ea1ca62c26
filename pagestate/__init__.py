"""pagestate - Client-side page cache and navigation for paginated APIs."""

from .clients import PagedResource
from .core import (
    NOT_ASKED,
    PENDING,
    Failed,
    FetchError,
    FetchStatus,
    FetchStatusKind,
    NotAsked,
    PagerConfig,
    PagingError,
    Pending,
    RateLimitError,
    ResourceClosedError,
    Succeeded,
    ValidationError,
)
from .models import (
    Chunk,
    FetchCompletion,
    FetchIntent,
    FetchPurpose,
    FetchResponse,
    PaginationState,
    Transition,
    total_pages,
)
from .pager import PagerEntry, PagerEntryKind, PagerSlot, build_pager, compute_sections
from .runtime import (
    FetchOrchestrator,
    ReconciliationEngine,
    compute_fetch_plan,
    initial,
    jump_to,
    move_next,
    move_previous,
    reconcile,
    update_items_per_page,
    update_request_context,
)
from .utils import HTTPClient, HTTPFetchConfig, http_fetch_command

__version__ = "0.1.0"

__all__ = [
    # Fetch status
    "FetchStatus",
    "FetchStatusKind",
    "NotAsked",
    "Pending",
    "Succeeded",
    "Failed",
    "NOT_ASKED",
    "PENDING",
    # Models
    "Chunk",
    "FetchResponse",
    "FetchIntent",
    "FetchPurpose",
    "FetchCompletion",
    "PaginationState",
    "Transition",
    "total_pages",
    # State machine
    "initial",
    "move_next",
    "move_previous",
    "jump_to",
    "update_request_context",
    "update_items_per_page",
    "reconcile",
    "compute_fetch_plan",
    "FetchOrchestrator",
    "ReconciliationEngine",
    # Pager
    "PagerConfig",
    "PagerSlot",
    "PagerEntry",
    "PagerEntryKind",
    "compute_sections",
    "build_pager",
    # Clients
    "PagedResource",
    "HTTPClient",
    "HTTPFetchConfig",
    "http_fetch_command",
    # Exceptions
    "PagingError",
    "ValidationError",
    "FetchError",
    "RateLimitError",
    "ResourceClosedError",
]
