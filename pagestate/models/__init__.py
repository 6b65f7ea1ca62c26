"""Data models for paginated resource state.

Architecture:
    This module exports the value types passed between the state machine,
    the fetch driver and callers. Chunk and FetchResponse are frozen Pydantic
    v2 models (validated at the transport boundary); the state aggregate and
    the messages around it are frozen dataclasses.

Model Categories:
    - Payloads: Chunk, FetchResponse
    - State: PaginationState, total_pages
    - Messages: FetchIntent, FetchPurpose, FetchCompletion, Transition
"""

from .chunk import Chunk, FetchResponse
from .intent import FetchCompletion, FetchIntent, FetchPurpose
from .state import PaginationState, total_pages
from .transition import Transition

__all__ = [
    "Chunk",
    "FetchCompletion",
    "FetchIntent",
    "FetchPurpose",
    "FetchResponse",
    "PaginationState",
    "Transition",
    "total_pages",
]
