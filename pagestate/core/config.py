"""Library defaults and small configuration objects.

Centralizes the numbers that callers usually leave alone so the state
machine and pager code can stay free of magic constants.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ValidationError

DEFAULT_PER_PAGE = 20

# Pager segmentation: pages pinned at each end, and pages shown on either
# side of the current page.
DEFAULT_END_COUNT = 2
DEFAULT_MIDDLE_COUNT = 2

# Seconds; only used by the HTTP fetch command.
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class PagerConfig:
    """Pager segmentation settings.

    Attributes:
        end_count: Number of pages always shown at the start and at the end
        middle_count: Number of pages shown on each side of the current page
    """

    end_count: int = DEFAULT_END_COUNT
    middle_count: int = DEFAULT_MIDDLE_COUNT

    def __post_init__(self) -> None:
        """Validate pager configuration."""
        if self.end_count < 0:
            raise ValidationError("PagerConfig end_count must be >= 0")
        if self.middle_count < 0:
            raise ValidationError("PagerConfig middle_count must be >= 0")

    @property
    def split_threshold(self) -> int:
        """Smallest page total at which the pager starts splitting sections."""
        return 2 * self.end_count + 2 * self.middle_count + 3
