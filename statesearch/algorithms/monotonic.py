# statesearch/algorithms/monotonic.py
# Threshold search for predicates that are false below some value and true
# from it upwards.
from __future__ import annotations
from typing import Callable


def binary(low: int, high: int, pred: Callable[[int], bool]) -> int:
    """
    Smallest value in (low, high] where pred is true, given pred(low) is
    false and pred(high) is true.
    """
    if pred(low):
        raise AssertionError(f"binary: pred({low!r}) must be false")
    if not pred(high):
        raise AssertionError(f"binary: pred({high!r}) must be true")
    while high - low > 1:
        mid = (high + low) // 2
        if pred(mid):
            high = mid
        else:
            low = mid
    return high


def exponential(low: int, pred: Callable[[int], bool]) -> int:
    """
    Smallest value above low where pred is true, with no upper bound known.
    Probes low+1, low+3, low+7, ... then bisects the last window.
    """
    if pred(low):
        raise AssertionError(f"exponential: pred({low!r}) must be false")
    size = 1
    while not pred(low + size):
        low = low + size
        size *= 2
    return binary(low, low + size, pred)
