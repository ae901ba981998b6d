# statesearch/algorithms/dfs.py
# Depth-first traversal: the same driver with a LIFO stack as frontier.
from __future__ import annotations
from typing import Any, Iterator
from ..core.filters import no_filter
from ..core.frontiers import LIFOStack
from ..core.search import Expand, Filter, search

def depth_first(start: Any, expand: Expand, filter: Filter = no_filter) -> Iterator[Any]:
    return search(LIFOStack(), start, expand, filter)
