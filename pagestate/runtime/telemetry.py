"""Structured logging for pagination operations.

This module provides telemetry hooks for the state machine and the fetch
driver, emitting structured logs for observability.
"""

from __future__ import annotations

import logging
from typing import Any

from ..models.intent import FetchIntent

logger = logging.getLogger(__name__)


def log_fetch_plan(
    *,
    current_page: int,
    total_pages: int,
    intents: tuple[FetchIntent, ...],
) -> None:
    """Log the pages selected by an orchestrator run.

    Args:
        current_page: Page being viewed when the plan was computed
        total_pages: Known page count (0 when not yet bounded)
        intents: Fetch intents produced by the plan
    """
    logger.debug(
        "fetch_plan_created",
        extra={
            "current_page": current_page,
            "total_pages": total_pages,
            "pages": [intent.page for intent in intents],
            "purposes": [intent.purpose.value for intent in intents],
        },
    )


def log_navigation(
    *,
    operation: str,
    from_page: int,
    to_page: int,
    accepted: bool,
) -> None:
    """Log a navigation request.

    Args:
        operation: Navigation operation name (e.g., "move_next", "jump_to")
        from_page: Current page before the request
        to_page: Requested target page
        accepted: Whether the current page actually changed
    """
    logger.debug(
        "navigation",
        extra={
            "operation": operation,
            "from_page": from_page,
            "to_page": to_page,
            "accepted": accepted,
        },
    )


def log_fetch_completed(
    *,
    page: int,
    items: int,
    total_count: int,
    latency_ms: float | None = None,
) -> None:
    """Log a successful page fetch.

    Args:
        page: Page number the fetch was issued for
        items: Number of items returned
        total_count: Server-reported total item count
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.info(
        "page_fetch_completed",
        extra={
            "page": page,
            "items": items,
            "total_count": total_count,
            "latency_ms": latency_ms,
        },
    )


def log_fetch_error(
    *,
    page: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        page: Page number the fetch was issued for
        error_type: Type of error (e.g., "FetchError", "ClientConnectorError")
        error_message: Error message
    """
    logger.error(
        "page_fetch_error",
        extra={
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_corrective_jump(*, page: int, total_pages: int) -> None:
    """Log a jump forced by the current page falling out of range."""
    logger.info(
        "corrective_jump",
        extra={
            "page": page,
            "total_pages": total_pages,
        },
    )


def log_cache_reset(*, reason: str, previous: Any, current: Any) -> None:
    """Log a full cache reset.

    Args:
        reason: What changed ("request_context" or "per_page")
        previous: Value before the change
        current: Value after the change
    """
    logger.info(
        "cache_reset",
        extra={
            "reason": reason,
            "previous": repr(previous),
            "current": repr(current),
        },
    )
