"""Unit tests for the fetch status variants."""

from pagestate.core import (
    NOT_ASKED,
    PENDING,
    Failed,
    FetchStatusKind,
    NotAsked,
    Pending,
    Succeeded,
)


class TestFetchStatus:
    """Test FetchStatus variants."""

    def test_kind_tags(self):
        """Each variant carries its own kind tag."""
        assert NOT_ASKED.kind == FetchStatusKind.NOT_ASKED
        assert PENDING.kind == FetchStatusKind.PENDING
        assert Succeeded(1).kind == FetchStatusKind.SUCCEEDED
        assert Failed("boom").kind == FetchStatusKind.FAILED

    def test_payload_free_variants_compare_equal(self):
        """Fresh instances equal the module singletons."""
        assert NotAsked() == NOT_ASKED
        assert Pending() == PENDING
        assert Pending() != NotAsked()

    def test_succeeded_compares_by_value(self):
        """Succeeded equality follows its payload."""
        assert Succeeded((1, 2)) == Succeeded((1, 2))
        assert Succeeded((1, 2)) != Succeeded((1,))

    def test_failed_compares_by_error_identity(self):
        """Failed wraps exceptions, which compare by identity."""
        error = RuntimeError("boom")
        assert Failed(error) == Failed(error)
        assert Failed(error) != Failed(RuntimeError("boom"))
