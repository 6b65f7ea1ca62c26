"""Pagination state machine.

Architecture:
    The runtime consists of:
    - orchestrator.py: decides which of the current/previous/next pages to fetch
    - navigation.py: initial state and navigation operations
    - reconciler.py: merges fetch completions and corrects out-of-range pages
    - telemetry.py: structured logging

Every public function here is a synchronous, pure transition from one
``PaginationState`` to a ``Transition``. Running fetches is left to the
caller (see ``pagestate.clients.PagedResource``).
"""

from __future__ import annotations

from .navigation import (
    can_jump_to,
    initial,
    jump_to,
    move_next,
    move_previous,
    update_items_per_page,
    update_request_context,
)
from .orchestrator import (
    FetchOrchestrator,
    candidate_pages,
    compute_fetch_plan,
    needs_fetch,
    run_orchestrator,
)
from .reconciler import ReconciliationEngine, reconcile

__all__ = [
    "FetchOrchestrator",
    "ReconciliationEngine",
    "can_jump_to",
    "candidate_pages",
    "compute_fetch_plan",
    "initial",
    "jump_to",
    "move_next",
    "move_previous",
    "needs_fetch",
    "reconcile",
    "run_orchestrator",
    "update_items_per_page",
    "update_request_context",
]
