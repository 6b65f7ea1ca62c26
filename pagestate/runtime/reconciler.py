"""Merging completed fetches back into the pagination state.

Completions are written into the cache by page number no matter where the
user has navigated since the fetch was issued. A result for a page that is
no longer visible stays cached and is used if that page becomes current
again.

When a successful fetch of the current page comes back empty while the
server still reports items, the current page has fallen off the end (the
total shrank underneath it) and the reconciler jumps to the new last page.
"""

from __future__ import annotations

from dataclasses import replace

from ..core.status import Failed, Succeeded
from ..models.chunk import Chunk
from ..models.intent import FetchCompletion
from ..models.state import PaginationState
from ..models.transition import Transition
from .navigation import jump_to
from .telemetry import log_corrective_jump


def reconcile(state: PaginationState, completion: FetchCompletion) -> Transition:
    """Apply a fetch completion to ``state``.

    Args:
        state: Latest snapshot
        completion: Page-tagged fetch outcome

    Returns:
        Transition with the merged state; carries intents only when a
        corrective jump was needed
    """
    page = completion.page
    result = completion.result

    if isinstance(result, Failed):
        return Transition(state=state.with_status(page, result))

    if isinstance(result, Succeeded):
        response = result.value
        chunk = Chunk(items=response.items, page=page)
        updated = replace(
            state.with_status(page, Succeeded(chunk)),
            total_count=response.total_count,
            extra_data=response.extra_data,
        )
        last_page = updated.total_pages
        if chunk.is_empty and last_page > 0 and page == updated.current_page:
            log_corrective_jump(page=page, total_pages=last_page)
            return jump_to(updated, last_page)
        return Transition(state=updated)

    # Pending or NotAsked echoed back by the transport
    return Transition(state=state.with_status(page, result))


class ReconciliationEngine:
    """Object form of ``reconcile`` for callers that inject collaborators."""

    def apply(self, state: PaginationState, completion: FetchCompletion) -> Transition:
        return reconcile(state, completion)
