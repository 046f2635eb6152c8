"""Array exercises: runs, majorities, rotation and products."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from operator import xor
from typing import MutableSequence, Sequence


def _longest_run(ordered_unique: Sequence[int]) -> int:
    best = count = 1
    for prev, value in zip(ordered_unique, ordered_unique[1:]):
        count = count + 1 if value == prev + 1 else 1
        best = max(best, count)
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among nums."""
    if not nums:
        return 0
    return _longest_run(sorted(set(nums)))


def longest_consecutive_sorted(nums: Sequence[int]) -> int:
    """Same as :func:`longest_consecutive`, skipping repeats in a sorted copy."""
    if not nums:
        return 0
    ordered = sorted(nums)
    best = count = 1
    for prev, value in zip(ordered, ordered[1:]):
        if value == prev:
            continue
        count = count + 1 if value == prev + 1 else 1
        best = max(best, count)
    return best


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of some element greater than its neighbours."""
    n = len(nums)
    if n <= 1 or nums[0] > nums[1]:
        return 0
    if nums[n - 1] > nums[n - 2]:
        return n - 1
    i = 1
    while i < n - 1:
        if nums[i - 1] > nums[i]:
            i += 2
        elif nums[i + 1] > nums[i]:
            i += 1
        else:
            return i
    return 0


def majority_element(nums: Sequence[int]) -> int:
    """The value held by more than half of nums, found by cancelling pairs."""
    if not nums:
        return 0
    values: list[int | None] = list(nums)
    i, j = 0, 1
    while j < len(values):
        while values[i] is None:
            i += 1
        if values[i] != values[j]:
            values[i] = values[j] = None
            i += 1
        j += 1
    return next((v for v in values if v is not None), nums[0])


def majority_element_counting(nums: Sequence[int]) -> int:
    """The first value to reach the highest count; 0 if nums is empty."""
    if not nums:
        return 0
    counts: Counter[int] = Counter()
    best_count = 0
    result = nums[0]
    for value in nums:
        counts[value] += 1
        if counts[value] > best_count:
            best_count = counts[value]
            result = value
    return result


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate nums right by k places in place."""
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The k-th largest value, counted from 1; -1 if nums is empty."""
    if not nums:
        return -1
    if k < 1 or k > len(nums):
        raise IndexError("k is out of range")
    return sorted(nums, reverse=True)[k - 1]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values."""
    zeros = sum(1 for x in nums if x == 0)
    if zeros > 1:
        return [0] * len(nums)
    nonzero_product = 1
    for x in nums:
        if x != 0:
            nonzero_product *= x
    total = 0 if zeros else nonzero_product
    return [nonzero_product if x == 0 else total // x for x in nums]