"""Navigation operations over a pagination state.

Every operation takes the latest snapshot and returns a ``Transition``: the
new state plus the fetches it needs. Rejected navigation is not an error;
the page simply stays where it was and ``Transition.accepted`` is False.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from ..core.config import DEFAULT_PER_PAGE
from ..core.exceptions import ValidationError
from ..models.state import PaginationState
from ..models.transition import Transition
from .orchestrator import run_orchestrator
from .telemetry import log_cache_reset, log_navigation


def initial(
    request_context: Any = None,
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
) -> Transition:
    """Create a fresh state and plan its first fetches.

    Args:
        request_context: Caller data threaded into every fetch
        page: Page to start on (1-based)
        per_page: Items per page

    Returns:
        Transition holding the new state and its fetch intents

    Raises:
        ValidationError: If ``page`` or ``per_page`` is below 1
    """
    state = PaginationState(
        request_context=request_context,
        current_page=page,
        per_page=per_page,
    )
    return run_orchestrator(state)


def _move(state: PaginationState, target: int, operation: str) -> Transition:
    # Only move onto pages that have at least been requested.
    accepted = target >= 1 and state.has_entry(target)
    log_navigation(
        operation=operation,
        from_page=state.current_page,
        to_page=target,
        accepted=accepted,
    )
    moved = state.with_page(target) if accepted else state
    return run_orchestrator(moved, accepted=accepted)


def move_next(state: PaginationState) -> Transition:
    """Advance one page if the next page has a cache entry."""
    return _move(state, state.current_page + 1, "move_next")


def move_previous(state: PaginationState) -> Transition:
    """Go back one page if the previous page has a cache entry."""
    return _move(state, state.current_page - 1, "move_previous")


def can_jump_to(state: PaginationState, page: int) -> bool:
    """Whether ``jump_to(state, page)`` would change the current page.

    Any positive page is accepted while the cache is empty, since the page
    count is unknown until a fetch succeeds. A state built by ``initial``
    is never empty: its first pages are already marked pending, so jumps
    are rejected until a response has set the page count.
    """
    if page <= 0:
        return False
    if not state.cache:
        return True
    return page <= state.total_pages


def jump_to(state: PaginationState, page: int) -> Transition:
    """Jump to ``page`` when it is within the known page range."""
    accepted = can_jump_to(state, page)
    log_navigation(
        operation="jump_to",
        from_page=state.current_page,
        to_page=page,
        accepted=accepted,
    )
    moved = state.with_page(page) if accepted else state
    return run_orchestrator(moved, accepted=accepted)


def _reset(state: PaginationState, request_context: Any, per_page: int) -> Transition:
    transition = initial(request_context, page=1, per_page=per_page)
    # Keep showing the previous extra data until the new first page arrives.
    kept = replace(transition.state, extra_data=state.extra_data)
    return Transition(state=kept, intents=transition.intents)


def update_request_context(state: PaginationState, request_context: Any) -> Transition:
    """Switch to a new request context, dropping every cached page.

    Equal contexts leave the state untouched.
    """
    if request_context == state.request_context:
        return Transition(state=state)
    log_cache_reset(
        reason="request_context",
        previous=state.request_context,
        current=request_context,
    )
    return _reset(state, request_context, state.per_page)


def update_items_per_page(state: PaginationState, per_page: int) -> Transition:
    """Switch to a new page size, dropping every cached page.

    The same page size leaves the state untouched.

    Raises:
        ValidationError: If ``per_page`` is below 1
    """
    if per_page == state.per_page:
        return Transition(state=state)
    if per_page < 1:
        raise ValidationError(f"per_page must be >= 1, got {per_page}")
    log_cache_reset(reason="per_page", previous=state.per_page, current=per_page)
    return _reset(state, state.request_context, per_page)
