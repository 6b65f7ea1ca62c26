"""Unit tests for configuration defaults."""

import pytest

from pagestate.core import DEFAULT_END_COUNT, DEFAULT_MIDDLE_COUNT, PagerConfig, ValidationError


class TestPagerConfig:
    """Test PagerConfig validation."""

    def test_defaults(self):
        """Defaults come from the module constants."""
        config = PagerConfig()
        assert config.end_count == DEFAULT_END_COUNT
        assert config.middle_count == DEFAULT_MIDDLE_COUNT

    def test_split_threshold(self):
        """Threshold is 2*end + 2*middle + 3."""
        assert PagerConfig(end_count=2, middle_count=2).split_threshold == 11
        assert PagerConfig(end_count=1, middle_count=0).split_threshold == 5

    @pytest.mark.parametrize("kwargs", [{"end_count": -1}, {"middle_count": -1}])
    def test_negative_counts_rejected(self, kwargs):
        """Negative section sizes are invalid."""
        with pytest.raises(ValidationError):
            PagerConfig(**kwargs)
