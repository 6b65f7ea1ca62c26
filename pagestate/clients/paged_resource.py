"""Async driver that runs fetches for a pagination state.

PagedResource owns the latest ``PaginationState`` for one paginated API
resource and turns fetch intents into asyncio tasks:

- navigation methods apply the pure transitions synchronously and return the
  new snapshot right away
- every intent runs the caller's fetch command in its own task; at most three
  are issued per transition and they complete in any order
- completions are posted to a queue drained by a single consumer task, which
  is the only place fetch results are merged into the state
- subscribers receive every new snapshot (sync or async callbacks)

Notes:
- In-flight fetches are never cancelled by navigation. Their results are
  cached under their page number and used if that page becomes current.
- Changing the request context or page size starts a new cache generation.
  Completions issued under an older generation are dropped, since their
  items belong to a different query.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from collections.abc import Awaitable, Callable
from contextlib import suppress
from time import perf_counter
from typing import Any

from ..core.config import DEFAULT_PER_PAGE
from ..core.exceptions import ResourceClosedError
from ..models.chunk import FetchResponse
from ..models.intent import FetchCompletion, FetchIntent
from ..models.state import PaginationState
from ..models.transition import Transition
from ..runtime import navigation
from ..runtime.reconciler import ReconciliationEngine
from ..runtime.telemetry import log_fetch_completed, log_fetch_error
from ..utils.http import FetchCommand

logger = logging.getLogger(__name__)

StateCallback = Callable[[PaginationState], Awaitable[None]] | Callable[[PaginationState], None]


class PagedResource:
    """Client-side page cache for one paginated resource."""

    def __init__(
        self,
        fetch: FetchCommand,
        *,
        request_context: Any = None,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        self._fetch = fetch
        self._reconciler = ReconciliationEngine()

        boot = navigation.initial(request_context, page=page, per_page=per_page)
        self._state: PaginationState = boot.state
        # Intents produced before start() runs
        self._deferred: list[FetchIntent] = list(boot.intents)

        # Bumped on every cache reset; completions carry the generation they
        # were issued under.
        self._generation = 0
        self._inbox: asyncio.Queue[tuple[int, FetchCompletion]] = asyncio.Queue()
        self._fetch_tasks: set[asyncio.Task] = set()
        self._pump_task: asyncio.Task | None = None
        self._running = False
        self._closed = False

        self._subs: dict[str, StateCallback] = {}

    # ----------------------
    # Lifecycle
    # ----------------------
    async def start(self) -> None:
        """Start the completion consumer and issue the initial fetches."""
        self._ensure_open()
        if self._running:
            return
        self._running = True
        self._pump_task = asyncio.create_task(self._pump())
        deferred, self._deferred = self._deferred, []
        self._dispatch(deferred)

    async def close(self) -> None:
        """Cancel outstanding fetches and stop consuming completions."""
        if self._closed:
            return
        self._closed = True
        self._running = False
        tasks = list(self._fetch_tasks)
        if self._pump_task is not None:
            tasks.append(self._pump_task)
        for task in tasks:
            task.cancel()
        for task in tasks:
            with suppress(asyncio.CancelledError):
                await task
        self._fetch_tasks.clear()
        self._pump_task = None

    async def wait_idle(self) -> None:
        """Wait until no fetch is outstanding and every completion is merged."""
        self._ensure_open()
        if not self._running:
            raise RuntimeError("PagedResource not started")
        while True:
            running = [task for task in self._fetch_tasks if not task.done()]
            if running:
                await asyncio.gather(*running, return_exceptions=True)
            await self._inbox.join()
            if not self.in_flight and self._inbox.empty():
                return

    async def __aenter__(self) -> PagedResource:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ----------------------
    # State access
    # ----------------------
    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def in_flight(self) -> int:
        """Number of fetches currently running."""
        return sum(1 for task in self._fetch_tasks if not task.done())

    # ----------------------
    # Navigation
    # ----------------------
    def move_next(self) -> PaginationState:
        return self._apply(navigation.move_next(self._state))

    def move_previous(self) -> PaginationState:
        return self._apply(navigation.move_previous(self._state))

    def jump_to(self, page: int) -> PaginationState:
        return self._apply(navigation.jump_to(self._state, page))

    def update_request_context(self, request_context: Any) -> PaginationState:
        transition = navigation.update_request_context(self._state, request_context)
        return self._apply(transition, reset=transition.state is not self._state)

    def update_items_per_page(self, per_page: int) -> PaginationState:
        transition = navigation.update_items_per_page(self._state, per_page)
        return self._apply(transition, reset=transition.state is not self._state)

    # ----------------------
    # Subscriptions
    # ----------------------
    def subscribe(self, callback: StateCallback) -> str:
        """Receive every new state snapshot.

        Returns a subscription_id to later unsubscribe.
        """
        sub_id = uuid.uuid4().hex
        self._subs[sub_id] = callback
        return sub_id

    def unsubscribe(self, subscription_id: str) -> None:
        self._subs.pop(subscription_id, None)

    # ----------------------
    # Internals
    # ----------------------
    def _ensure_open(self) -> None:
        if self._closed:
            raise ResourceClosedError("PagedResource is closed")

    def _apply(self, transition: Transition, *, reset: bool = False) -> PaginationState:
        self._ensure_open()
        if reset:
            self._generation += 1
            self._deferred = []
        changed = transition.state is not self._state
        self._state = transition.state
        if self._running:
            self._dispatch(transition.intents)
        else:
            self._deferred.extend(transition.intents)
        if changed:
            self._notify(self._state)
        return self._state

    def _dispatch(self, intents: tuple[FetchIntent, ...] | list[FetchIntent]) -> None:
        for intent in intents:
            task = asyncio.create_task(self._run_fetch(intent, self._generation))
            self._fetch_tasks.add(task)
            task.add_done_callback(self._fetch_tasks.discard)

    async def _run_fetch(self, intent: FetchIntent, generation: int) -> None:
        started = perf_counter()
        try:
            raw = await self._fetch(intent.request_context, intent.page, intent.per_page)
            # Plain {items, total_count[, extra_data]} records are accepted too
            response = FetchResponse.model_validate(raw)
            log_fetch_completed(
                page=intent.page,
                items=len(response.items),
                total_count=response.total_count,
                latency_ms=(perf_counter() - started) * 1000.0,
            )
            completion = FetchCompletion.success(intent.page, response)
        except Exception as e:
            log_fetch_error(
                page=intent.page,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            completion = FetchCompletion.failure(intent.page, e)
        await self._inbox.put((generation, completion))

    async def _pump(self) -> None:
        while True:
            generation, completion = await self._inbox.get()
            try:
                if generation != self._generation:
                    logger.debug(
                        "stale_completion_dropped",
                        extra={"page": completion.page, "generation": generation},
                    )
                    continue
                self._apply(self._reconciler.apply(self._state, completion))
            finally:
                self._inbox.task_done()

    def _notify(self, state: PaginationState) -> None:
        for callback in list(self._subs.values()):
            if inspect.iscoroutinefunction(callback):
                try:
                    loop = asyncio.get_running_loop()
                except RuntimeError:
                    # No loop yet (navigation before start); nothing to schedule on
                    continue
                loop.create_task(callback(state))
                continue
            try:
                callback(state)
            except Exception:
                logger.exception("state_subscriber_error")
