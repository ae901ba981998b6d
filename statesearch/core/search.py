# statesearch/core/search.py
# The generic driver every traversal in algorithms/ is built on.
from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Optional

from .frontiers import Frontier

# expand(state, emit) calls emit(successor) zero or more times.
Expand = Callable[[Any, Callable[[Any], None]], None]
Filter = Callable[[Any], bool]


def search(frontier: Frontier, start: Any, expand: Expand, filter: Filter) -> Iterator[Any]:
    """
    Lazily produce accepted states in frontier-pop order.

    Every popped state (start included) goes through `filter` first. Rejected
    states are dropped; accepted ones are expanded into the frontier and then
    yielded. Nothing past the last state pulled by the caller is explored.
    """
    frontier.push(start)
    while frontier:
        state = frontier.pop()
        if not filter(state):
            continue
        expand(state, frontier.push)
        yield state


def find(states: Iterable[Any], goal: Callable[[Any], bool], default: Optional[Any] = None) -> Any:
    """First state satisfying goal, or default once the sequence runs out."""
    for s in states:
        if goal(s):
            return s
    return default
