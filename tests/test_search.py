from __future__ import annotations

import itertools

from statesearch.core.filters import id_filter, no_filter
from statesearch.core.frontiers import FIFOQueue
from statesearch.core.search import find, search


def chain(n):
    """0 -> 1 -> ... -> n-1"""
    def expand(s, emit):
        if s + 1 < n:
            emit(s + 1)
    return expand


def test_search_yields_accepted_states_in_pop_order():
    assert list(search(FIFOQueue(), 0, chain(5), no_filter)) == [0, 1, 2, 3, 4]


def test_filter_sees_start_state():
    seen = []

    def reject_all(s):
        seen.append(s)
        return False

    assert list(search(FIFOQueue(), 0, chain(5), reject_all)) == []
    assert seen == [0]


def test_rejected_states_are_not_expanded():
    expanded = []

    def expand(s, emit):
        expanded.append(s)
        if s < 6:
            emit(s + 1)
            emit(s + 2)

    out = list(search(FIFOQueue(), 0, expand, lambda s: s % 2 == 0))
    assert out == [0, 2, 4, 6]
    assert all(s % 2 == 0 for s in expanded)


def test_search_is_lazy_and_expands_before_yield():
    log = []

    def expand(s, emit):
        log.append(("expand", s))
        emit(s + 1)

    states = search(FIFOQueue(), 0, expand, no_filter)
    assert log == []
    assert next(states) == 0
    assert log == [("expand", 0)]
    assert next(states) == 1
    assert log == [("expand", 0), ("expand", 1)]


def test_stopping_early_bounds_an_infinite_space():
    def expand(s, emit):
        emit(s + 1)

    first = list(itertools.islice(search(FIFOQueue(), 0, expand, no_filter), 4))
    assert first == [0, 1, 2, 3]


def test_dedup_terminates_on_a_cycle():
    def expand(s, emit):
        emit((s + 1) % 3)

    assert list(search(FIFOQueue(), 0, expand, id_filter())) == [0, 1, 2]


def test_find_returns_first_match_or_default():
    def expand(s, emit):
        emit(s + 1)

    assert find(search(FIFOQueue(), 0, expand, no_filter), lambda s: s * s > 50) == 8
    assert find(iter([1, 2, 3]), lambda s: s > 5) is None
    assert find(iter([1, 2, 3]), lambda s: s > 5, default=-1) == -1
