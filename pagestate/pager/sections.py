"""Compact page-number lists for pager widgets.

A long pager shows a few pages at each end and a window around the current
page, with an ellipsis between runs. This module computes those runs
("sections"); inserting the ellipsis markers is up to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.config import PagerConfig
from ..models.state import PaginationState


@dataclass(frozen=True)
class PagerSlot:
    """A page number to display and whether it is the current page."""

    page: int
    is_current: bool = False


Section = tuple[PagerSlot, ...]


def _run(first: int, last: int, current: int) -> Section:
    return tuple(PagerSlot(page=page, is_current=page == current) for page in range(first, last + 1))


def sections_for(
    end_count: int,
    middle_count: int,
    total_pages: int,
    current_page: int,
) -> tuple[Section, ...]:
    """Split pages ``1..total_pages`` into display sections.

    Args:
        end_count: Pages always shown at the start and at the end
        middle_count: Pages shown on each side of the current page
        total_pages: Number of pages
        current_page: Page being viewed

    Returns:
        One section when the pager is short, otherwise two or three

    Raises:
        ValidationError: If ``end_count`` or ``middle_count`` is negative
    """
    config = PagerConfig(end_count=end_count, middle_count=middle_count)

    t = total_pages
    c = current_page

    if t < config.split_threshold:
        return (_run(1, t, c),)

    past_start = c > end_count + middle_count + 1
    if past_start and c < t - end_count - middle_count:
        return (
            _run(1, end_count, c),
            _run(c - middle_count, c + middle_count, c),
            _run(t - end_count + 1, t, c),
        )
    if past_start:
        return (
            _run(1, end_count, c),
            _run(t - end_count - middle_count, t, c),
        )
    return (
        _run(1, end_count + middle_count + 1, c),
        _run(t - end_count + 1, t, c),
    )


def compute_sections(
    end_count: int,
    middle_count: int,
    state: PaginationState,
) -> tuple[Section, ...]:
    """Pager sections for the current page of ``state``."""
    return sections_for(end_count, middle_count, state.total_pages, state.current_page)
