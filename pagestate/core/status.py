"""Fetch lifecycle status for a single page.

Architecture:
    A page moves through ``NotAsked -> Pending -> Succeeded | Failed``. Each
    variant is its own frozen dataclass so consumers branch on the concrete
    type (or on the shared ``kind`` tag) instead of probing nullable fields.
    ``FetchStatus`` is the union of the four variants.

Design Decisions:
    - Frozen dataclasses: statuses are stored in an immutable cache and
      compared structurally, so writing the same result twice is a no-op
    - Generic payload: ``Succeeded`` carries a ``Chunk`` in the page cache and
      a ``FetchResponse`` in completion messages
    - Singletons for the payload-free variants keep equality and identity
      aligned (``NOT_ASKED``, ``PENDING``)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class FetchStatusKind(str, Enum):
    """Tag shared by every fetch status variant."""

    NOT_ASKED = "not_asked"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class NotAsked:
    """The page has not been requested."""

    kind: FetchStatusKind = field(default=FetchStatusKind.NOT_ASKED, init=False)


@dataclass(frozen=True)
class Pending:
    """A fetch for the page has been issued and not yet completed."""

    kind: FetchStatusKind = field(default=FetchStatusKind.PENDING, init=False)


@dataclass(frozen=True)
class Succeeded(Generic[T]):
    """The fetch completed with a value."""

    value: T
    kind: FetchStatusKind = field(default=FetchStatusKind.SUCCEEDED, init=False)


@dataclass(frozen=True)
class Failed:
    """The fetch completed with an error.

    Exceptions do not compare by value, so two ``Failed`` instances are equal
    only when they wrap the same error object.
    """

    error: Any
    kind: FetchStatusKind = field(default=FetchStatusKind.FAILED, init=False)


FetchStatus = Union[NotAsked, Pending, Succeeded[T], Failed]

NOT_ASKED = NotAsked()
PENDING = Pending()
