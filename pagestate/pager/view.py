"""Pager view model built on top of the section computation.

Produces a flat list of entries (previous/next controls, page links and
ellipsis markers) that a UI layer can render without knowing anything about
sections. Link attributes come from a caller-supplied function.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.config import PagerConfig
from ..models.state import PaginationState
from .sections import compute_sections

LinkAttributes = Callable[[int], Sequence[Any]]


class PagerEntryKind(str, Enum):
    """Kinds of entries in a pager."""

    PREVIOUS = "previous"
    PAGE = "page"
    ELLIPSIS = "ellipsis"
    NEXT = "next"


@dataclass(frozen=True)
class PagerEntry:
    """One renderable pager element.

    Attributes:
        kind: Entry kind
        page: Target page (None for ellipsis markers)
        is_current: True for the link to the current page
        disabled: True for controls that cannot be followed
        attributes: Rendering attributes from the link-attribute generator
    """

    kind: PagerEntryKind
    page: int | None = None
    is_current: bool = False
    disabled: bool = False
    attributes: tuple[Any, ...] = ()


def build_pager(
    state: PaginationState,
    link_attributes: LinkAttributes | None = None,
    config: PagerConfig | None = None,
) -> tuple[PagerEntry, ...]:
    """Build pager entries for ``state``.

    Args:
        state: Pagination state to render
        link_attributes: Function returning rendering attributes for a page
        config: Section sizes (defaults to ``PagerConfig()``)

    Returns:
        Previous control, page links with ellipsis markers between sections,
        next control
    """
    config = config or PagerConfig()

    def attrs(page: int) -> tuple[Any, ...]:
        return tuple(link_attributes(page)) if link_attributes else ()

    unbounded = state.total_pages == 0
    entries: list[PagerEntry] = []

    previous_page = state.current_page - 1
    prev_disabled = unbounded or state.is_first_page
    entries.append(
        PagerEntry(
            kind=PagerEntryKind.PREVIOUS,
            page=previous_page,
            disabled=prev_disabled,
            attributes=() if prev_disabled else attrs(previous_page),
        )
    )

    for index, section in enumerate(
        compute_sections(config.end_count, config.middle_count, state)
    ):
        if index:
            entries.append(PagerEntry(kind=PagerEntryKind.ELLIPSIS))
        for slot in section:
            entries.append(
                PagerEntry(
                    kind=PagerEntryKind.PAGE,
                    page=slot.page,
                    is_current=slot.is_current,
                    attributes=attrs(slot.page),
                )
            )

    next_page = state.current_page + 1
    next_disabled = unbounded or state.current_page >= state.total_pages
    entries.append(
        PagerEntry(
            kind=PagerEntryKind.NEXT,
            page=next_page,
            disabled=next_disabled,
            attributes=() if next_disabled else attrs(next_page),
        )
    )
    return tuple(entries)
