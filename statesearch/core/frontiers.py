# statesearch/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Callable, Protocol


class Frontier(Protocol):
    """Pending states. pop() raises IndexError when empty."""
    def push(self, x: Any) -> None: ...
    def pop(self) -> Any: ...
    def __len__(self) -> int: ...


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)

class LIFOStack:
    def __init__(self):
        self.q = []
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)


class _CostEntry:
    """Heap entry ordered by cost alone; the state is never compared."""
    __slots__ = ("cost", "state")

    def __init__(self, cost, state):
        self.cost = cost
        self.state = state

    def __lt__(self, other: "_CostEntry") -> bool:
        return self.cost < other.cost


class CostQueue:
    """
    Min-heap by cost(x). The cost is computed once, when x is pushed.
    Equal costs pop in whatever order the heap yields them.
    """
    def __init__(self, cost: Callable[[Any], Any]):
        self.cost = cost
        self.h: list[_CostEntry] = []
    def push(self, x):
        heapq.heappush(self.h, _CostEntry(self.cost(x), x))
    def pop(self):
        if not self.h:
            raise IndexError("pop from an empty CostQueue")
        return heapq.heappop(self.h).state
    def __len__(self): return len(self.h)
