"""Fetch planning for the current page and its neighbours.

This module decides which pages need a request issued. It only looks at
the current page and the pages directly before and after it, so at most
three fetches are outstanding per run.
"""

from __future__ import annotations

from typing import Any

from ..core.status import PENDING, FetchStatus, Succeeded
from ..models.chunk import Chunk
from ..models.intent import FetchIntent, FetchPurpose
from ..models.state import PaginationState
from ..models.transition import Transition
from .telemetry import log_fetch_plan


def needs_fetch(status: FetchStatus[Chunk] | None) -> bool:
    """Whether a page with this cache entry should be (re)fetched.

    Missing pages and empty chunks are fetched. Pending and failed pages are
    left alone, and so are chunks that hold items.
    """
    if status is None:
        return True
    return isinstance(status, Succeeded) and not status.value.items


def candidate_pages(state: PaginationState) -> list[tuple[int, FetchPurpose]]:
    """Pages eligible for fetching, current page first."""
    page = state.current_page
    bound = state.total_pages
    candidates = [(page, FetchPurpose.CURRENT)]
    if page > 1:
        candidates.append((page - 1, FetchPurpose.PREVIOUS))
    if bound == 0 or page < bound:
        candidates.append((page + 1, FetchPurpose.NEXT))
    return candidates


def compute_fetch_plan(state: PaginationState) -> tuple[FetchIntent, ...]:
    """Compute fetch intents for the pages around ``state.current_page``.

    Args:
        state: Snapshot to plan against

    Returns:
        One intent per page that needs fetching, in candidate order
    """
    return tuple(
        FetchIntent(
            request_context=state.request_context,
            page=page,
            per_page=state.per_page,
            purpose=purpose,
        )
        for page, purpose in candidate_pages(state)
        if needs_fetch(state.cache.get(page))
    )


class FetchOrchestrator:
    """Turns a state snapshot into fetch intents.

    Running the orchestrator marks every planned page as ``Pending`` in the
    returned state, so a later run against that state never plans the same
    page again while it is in flight.
    """

    def plan(self, state: PaginationState) -> tuple[FetchIntent, ...]:
        return compute_fetch_plan(state)

    def run(self, state: PaginationState, *, accepted: bool = True) -> Transition:
        """Plan fetches for ``state`` and record them as pending.

        Args:
            state: Snapshot to plan against
            accepted: Passed through to the resulting transition

        Returns:
            Transition with pending entries written; the input state object
            itself when nothing needs fetching
        """
        intents = self.plan(state)
        if not intents:
            return Transition(state=state, accepted=accepted)

        log_fetch_plan(
            current_page=state.current_page,
            total_pages=state.total_pages,
            intents=intents,
        )
        pending: dict[int, Any] = {intent.page: PENDING for intent in intents}
        return Transition(state=state.with_statuses(pending), intents=intents, accepted=accepted)


_default_orchestrator = FetchOrchestrator()


def run_orchestrator(state: PaginationState, *, accepted: bool = True) -> Transition:
    """Run the default orchestrator against ``state``."""
    return _default_orchestrator.run(state, accepted=accepted)
