"""Unit tests for navigation operations."""

from __future__ import annotations

import pytest

from pagestate.core import PENDING, Failed, Succeeded, ValidationError
from pagestate.models import Chunk, PaginationState
from pagestate.runtime import (
    can_jump_to,
    compute_fetch_plan,
    initial,
    jump_to,
    move_next,
    move_previous,
    update_items_per_page,
    update_request_context,
)


def filled(page: int, n: int = 10) -> Succeeded:
    return Succeeded(Chunk(items=tuple(range(n)), page=page))


def loaded_state(current_page: int = 1, total_count: int = 100, per_page: int = 10, **kwargs):
    """State with the current page and its neighbours already fetched."""
    pages = {current_page - 1, current_page, current_page + 1}
    cache = {p: filled(p) for p in pages if 1 <= p <= -(-total_count // per_page)}
    return PaginationState(
        current_page=current_page,
        per_page=per_page,
        total_count=total_count,
        cache=cache,
        **kwargs,
    )


class TestInitial:
    """Test initial state construction."""

    def test_initial_state_and_intents(self):
        state, intents = initial({"q": "x"}, page=1, per_page=25)
        assert state.current_page == 1
        assert state.per_page == 25
        assert state.total_count == 0
        assert state.request_context == {"q": "x"}
        assert [i.page for i in intents] == [1, 2]
        assert all(i.per_page == 25 for i in intents)

    def test_initial_on_later_page(self):
        transition = initial(None, page=4, per_page=10)
        assert transition.pages == (4, 3, 5)

    def test_initial_rejects_bad_arguments(self):
        with pytest.raises(ValidationError):
            initial(None, page=0, per_page=10)
        with pytest.raises(ValidationError):
            initial(None, page=1, per_page=0)


class TestMoves:
    """Test move_next and move_previous."""

    def test_move_next_onto_cached_page(self):
        state = loaded_state(current_page=3)
        transition = move_next(state)
        assert transition.accepted
        assert transition.state.current_page == 4
        # Page 5 becomes the new next neighbour
        assert transition.pages == (5,)
        assert transition.state.cache[5] == PENDING

    def test_move_next_onto_pending_page(self):
        state, _ = initial(None, page=1, per_page=10)
        moved = move_next(state)
        assert moved.state.current_page == 2
        assert moved.pages == (3,)

    def test_move_next_onto_failed_page(self):
        state = PaginationState(
            current_page=1,
            per_page=10,
            total_count=30,
            cache={1: filled(1), 2: Failed(RuntimeError("x"))},
        )
        transition = move_next(state)
        assert transition.state.current_page == 2
        # Failed current page is not retried; only page 3 is new
        assert transition.pages == (3,)

    def test_move_next_rejected_leaves_state_unchanged(self):
        """A reachable state missing the target stays the same object."""
        state = PaginationState(
            current_page=2,
            per_page=10,
            total_count=20,
            cache={1: filled(1), 2: filled(2)},
        )
        transition = move_next(state)
        assert transition.accepted is False
        assert transition.state is state
        assert transition.intents == ()

    def test_move_previous(self):
        state = loaded_state(current_page=5)
        transition = move_previous(state)
        assert transition.state.current_page == 4
        assert transition.pages == (3,)

    def test_move_previous_from_first_page(self):
        state = loaded_state(current_page=1)
        transition = move_previous(state)
        assert transition.accepted is False
        assert transition.state is state

    def test_moves_keep_request_context(self):
        state = loaded_state(current_page=3, request_context={"q": "a"})
        transition = move_next(state)
        assert all(i.request_context == {"q": "a"} for i in transition.intents)


class TestJumpTo:
    """Test jump_to bounds."""

    @pytest.mark.parametrize("target", [1, 5, 99, 1000])
    def test_empty_cache_accepts_any_positive_page(self, target):
        transition = jump_to(PaginationState(), target)
        assert transition.accepted
        assert transition.state.current_page == target

    @pytest.mark.parametrize("target", [0, -1])
    def test_empty_cache_rejects_non_positive_page(self, target):
        state = PaginationState()
        transition = jump_to(state, target)
        assert transition.accepted is False
        assert transition.state.current_page == 1

    def test_rejected_before_first_response(self):
        """initial() marks pages pending, so the cache is no longer empty."""
        state = initial(None, page=1, per_page=10).state
        assert not can_jump_to(state, 5)
        transition = jump_to(state, 5)
        assert transition.accepted is False
        assert transition.state is state

    @pytest.mark.parametrize("target", [0, -3, 11, 50])
    def test_rejects_out_of_range_with_cache(self, target):
        state = loaded_state(current_page=3)
        transition = jump_to(state, target)
        assert transition.accepted is False
        assert transition.state is state
        assert transition.intents == ()

    def test_accepts_in_range_and_prefetches(self):
        state = loaded_state(current_page=3)
        transition = jump_to(state, 8)
        assert transition.state.current_page == 8
        assert transition.pages == (8, 7, 9)

    def test_jump_to_last_page(self):
        state = loaded_state(current_page=3)
        transition = jump_to(state, 10)
        assert transition.state.current_page == 10
        assert transition.pages == (10, 9)

    def test_rejected_jump_still_refreshes_empty_neighbours(self):
        state = PaginationState(
            current_page=2,
            per_page=10,
            total_count=30,
            cache={1: filled(1), 2: filled(2), 3: Succeeded(Chunk(items=(), page=3))},
        )
        transition = jump_to(state, 9)
        assert transition.accepted is False
        assert transition.state.current_page == 2
        assert transition.pages == (3,)


class TestResets:
    """Test update_request_context and update_items_per_page."""

    def test_same_per_page_is_noop(self):
        state = loaded_state(current_page=3)
        transition = update_items_per_page(state, state.per_page)
        assert transition.state is state
        assert transition.intents == ()

    def test_same_context_is_noop(self):
        state = loaded_state(request_context={"q": "a"})
        transition = update_request_context(state, {"q": "a"})
        assert transition.state is state
        assert transition.intents == ()

    def test_per_page_change_resets_cache(self):
        state = loaded_state(current_page=3, extra_data={"facets": 1})
        transition = update_items_per_page(state, 50)
        new_state = transition.state
        assert new_state.per_page == 50
        assert new_state.current_page == 1
        assert new_state.total_count == 0
        assert set(new_state.cache) == {1, 2}
        assert transition.pages == (1, 2)
        # extra data is carried over until the next success
        assert new_state.extra_data == {"facets": 1}

    def test_context_change_resets_cache(self):
        state = PaginationState(
            request_context={"q": "a"},
            current_page=2,
            per_page=10,
            total_count=30,
            extra_data="old",
            cache={1: filled(1), 2: Failed(RuntimeError("x")), 3: filled(3)},
        )
        transition = update_request_context(state, {"q": "b"})
        assert transition.state.request_context == {"q": "b"}
        assert transition.state.per_page == 10
        assert transition.state.current_page == 1
        assert transition.state.extra_data == "old"
        # Failed page 2 is cleared and requested again
        assert transition.pages == (1, 2)
        assert all(i.request_context == {"q": "b"} for i in transition.intents)

    def test_invalid_per_page_rejected(self):
        with pytest.raises(ValidationError):
            update_items_per_page(loaded_state(), 0)


class TestPlanAfterTransitions:
    """No intent is issued for pending, failed or filled pages after a transition."""

    def test_no_duplicate_intents(self):
        state, _ = initial(None, page=1, per_page=10)
        for op in (move_next, move_next, move_previous):
            state = op(state).state
            for intent in compute_fetch_plan(state):
                entry = state.cache.get(intent.page)
                assert entry is None or (
                    isinstance(entry, Succeeded) and not entry.value.items
                )
