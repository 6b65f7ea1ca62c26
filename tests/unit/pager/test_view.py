"""Unit tests for the pager view model."""

from pagestate.core import PagerConfig
from pagestate.models import PaginationState
from pagestate.pager import PagerEntryKind, build_pager


def kinds(entries):
    return [entry.kind for entry in entries]


class TestBuildPager:
    """Test build_pager entries."""

    def test_short_pager(self):
        state = PaginationState(current_page=2, per_page=10, total_count=30)
        entries = build_pager(state)
        assert kinds(entries) == [
            PagerEntryKind.PREVIOUS,
            PagerEntryKind.PAGE,
            PagerEntryKind.PAGE,
            PagerEntryKind.PAGE,
            PagerEntryKind.NEXT,
        ]
        assert [e.page for e in entries] == [1, 1, 2, 3, 3]
        assert [e.is_current for e in entries[1:-1]] == [False, True, False]
        assert not entries[0].disabled
        assert not entries[-1].disabled

    def test_ellipsis_between_sections(self):
        state = PaginationState(current_page=11, per_page=1, total_count=50)
        entries = build_pager(state, config=PagerConfig(end_count=2, middle_count=2))
        layout = [e.page if e.kind == PagerEntryKind.PAGE else e.kind.value for e in entries]
        assert layout == [
            "previous",
            1,
            2,
            "ellipsis",
            9,
            10,
            11,
            12,
            13,
            "ellipsis",
            49,
            50,
            "next",
        ]

    def test_controls_disabled_at_edges(self):
        first = build_pager(PaginationState(current_page=1, per_page=10, total_count=30))
        assert first[0].disabled
        assert not first[-1].disabled
        last = build_pager(PaginationState(current_page=3, per_page=10, total_count=30))
        assert not last[0].disabled
        assert last[-1].disabled

    def test_unknown_total_disables_controls(self):
        entries = build_pager(PaginationState(current_page=1))
        assert kinds(entries) == [PagerEntryKind.PREVIOUS, PagerEntryKind.NEXT]
        assert all(entry.disabled for entry in entries)

    def test_link_attributes_called_per_page(self):
        calls = []

        def link_attributes(page):
            calls.append(page)
            return [("href", f"?page={page}")]

        state = PaginationState(current_page=2, per_page=10, total_count=30)
        entries = build_pager(state, link_attributes)
        assert entries[2].attributes == (("href", "?page=2"),)
        assert entries[0].attributes == (("href", "?page=1"),)
        assert sorted(set(calls)) == [1, 2, 3]

    def test_disabled_controls_have_no_attributes(self):
        state = PaginationState(current_page=1, per_page=10, total_count=10)
        entries = build_pager(state, lambda page: ["attr"])
        assert entries[0].attributes == ()
        assert entries[-1].attributes == ()
        assert entries[1].attributes == ("attr",)
