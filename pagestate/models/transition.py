"""Result type shared by every state transition."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .intent import FetchIntent
from .state import PaginationState


@dataclass(frozen=True)
class Transition:
    """New state plus the fetches it requires.

    Attributes:
        state: Snapshot produced by the transition
        intents: Fetches to issue, in candidate order (current, previous, next)
        accepted: False when a navigation request was rejected and the page
            was left where it was
    """

    state: PaginationState
    intents: tuple[FetchIntent, ...] = ()
    accepted: bool = True

    def __iter__(self) -> Iterator[Any]:
        # Allows ``state, intents = move_next(state)``
        yield self.state
        yield self.intents

    @property
    def pages(self) -> tuple[int, ...]:
        """Page numbers of the intents."""
        return tuple(intent.page for intent in self.intents)
