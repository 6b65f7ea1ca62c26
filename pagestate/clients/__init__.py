"""Async clients driving the pagination state machine."""

from .paged_resource import PagedResource, StateCallback

__all__ = ["PagedResource", "StateCallback"]
