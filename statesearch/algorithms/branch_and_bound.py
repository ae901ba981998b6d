# statesearch/algorithms/branch_and_bound.py
# Branch-and-bound optimisation on top of dijkstra: states are explored in
# objective order, so good answers turn up early and tighten the pruning.
from __future__ import annotations
import copy
import functools
from typing import Any, Callable

from .ucs import dijkstra
from ..core.search import Expand, Filter


@functools.total_ordering
class _Reverse:
    """Inverts the ordering of any comparable value."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return self.value == other.value

    def __lt__(self, other):
        return other.value < self.value

    def __repr__(self):
        return f"_Reverse({self.value!r})"


def branch_and_bound_min(
    start: Any,
    expand: Expand,
    filter: Filter,
    cost: Callable[[Any], Any],
    bound: Callable[[Any], Any],
    clone: Callable[[Any], Any] = copy.deepcopy,
) -> Any:
    """
    Search for a lowest-cost state.

    cost(state) evaluates a state; bound(state) must be a lower bound on the
    cost of every state reachable from it, state included. Returns a clone of
    the best state found (a clone of start if nothing beats it).
    """
    best_state = clone(start)
    best_cost = cost(best_state)

    def prune(state) -> bool:
        nonlocal best_state, best_cost
        if not filter(state):
            return False
        c = cost(state)
        if c < best_cost:
            best_cost = c
            best_state = clone(state)
        # Nothing below this state can do better than bound(state).
        return bound(state) < best_cost

    for _ in dijkstra(start, expand, prune, cost):
        pass
    return best_state


def branch_and_bound_max(
    start: Any,
    expand: Expand,
    filter: Filter,
    score: Callable[[Any], Any],
    bound: Callable[[Any], Any],
    clone: Callable[[Any], Any] = copy.deepcopy,
) -> Any:
    """
    Search for a highest-score state. bound(state) is an upper bound on the
    score of every state reachable from state.
    """
    return branch_and_bound_min(
        start,
        expand,
        filter,
        lambda s: _Reverse(score(s)),
        lambda s: _Reverse(bound(s)),
        clone=clone,
    )


def branch_and_bound(
    start: Any,
    expand: Expand,
    filter: Filter,
    cost: Callable[[Any], Any],
    bound: Callable[[Any], Any],
) -> Any:
    """Lowest attainable cost, without the state that attains it."""
    return cost(branch_and_bound_min(start, expand, filter, cost, bound))
