"""Binary search over a sorted sequence."""

from __future__ import annotations

from typing import Optional, Sequence


def binary_search(
    values: Sequence[int], key: int, low: int = 0, high: Optional[int] = None
) -> int:
    """Index of key in values[low:high], searched by halving, or -1.

    The search stops as soon as the range narrows to a single position
    without checking it.
    """
    if high is None:
        high = len(values) - 1
    while low < high:
        mid = (low + high) // 2
        found = values[mid]
        if found == key:
            return mid
        if found > key:
            high = mid - 1
        else:
            low = mid + 1
    return -1