"""Pager segmentation and view model."""

from .sections import PagerSlot, Section, compute_sections, sections_for
from .view import LinkAttributes, PagerEntry, PagerEntryKind, build_pager

__all__ = [
    "LinkAttributes",
    "PagerEntry",
    "PagerEntryKind",
    "PagerSlot",
    "Section",
    "build_pager",
    "compute_sections",
    "sections_for",
]
