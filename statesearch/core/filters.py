# statesearch/core/filters.py
# Filters decide whether a popped state gets expanded. A filter that rejects a
# state drops it: it is neither expanded nor produced.
from __future__ import annotations
from typing import Any, Callable, Hashable, Set


def no_filter(state: Any) -> bool:
    """Accepts every state."""
    return True


class HashFilter:
    """
    Accepts a state only the first time its key is seen.

    Owns its visited set, so a fresh instance is needed for every traversal.
    """
    def __init__(self, key: Callable[[Any], Hashable]):
        self.key = key
        self.visited: Set[Hashable] = set()

    def __call__(self, state: Any) -> bool:
        k = self.key(state)
        if k in self.visited:
            return False
        self.visited.add(k)
        return True

    def __len__(self) -> int:
        return len(self.visited)


def hash_filter(key: Callable[[Any], Hashable]) -> HashFilter:
    """Prunes any state whose key(state) has already been accepted."""
    return HashFilter(key)


def id_filter() -> HashFilter:
    """Prunes any state equal to one already accepted."""
    return HashFilter(lambda s: s)
