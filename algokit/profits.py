"""Exercises on prices, sums and products over sequences."""

from __future__ import annotations

from itertools import accumulate, pairwise
from operator import mul
from typing import Sequence


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first num_rows rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for n in range(num_rows):
        if n == 0:
            rows.append([1])
        else:
            rows.append([1] + [a + b for a, b in pairwise(rows[-1])] + [1])
    return rows


def max_profit_once(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a single sell; 0 if none."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None:
            lowest = price
            continue
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_once_brute(prices: Sequence[int]) -> int:
    """Same answer as :func:`max_profit_once`, by trying every pair of days."""
    best = 0
    for sell_day, sell in enumerate(prices):
        for buy in prices[:sell_day]:
            best = max(best, sell - buy)
    return best


def max_profit_many(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades are allowed."""
    return sum(max(0, after - before) for before, after in pairwise(prices))


def _check_stations(gas: Sequence[int], cost: Sequence[int]) -> None:
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Station from which a full loop can be driven, or -1.

    The start is the station after the one where the running balance is lowest.
    """
    _check_stations(gas, cost)
    if not gas:
        raise ValueError("there must be at least one station")
    balance = 0
    lowest: int | None = None
    start = 0
    for i, (fuel, spend) in enumerate(zip(gas, cost)):
        balance += fuel - spend
        if lowest is None or balance < lowest:
            lowest = balance
            start = i
    return -1 if balance < 0 else (start + 1) % len(gas)


def can_complete_circuit_scan(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Station from which a full loop can be driven, found by trying each start."""
    _check_stations(gas, cost)
    n = len(gas)
    for i in range(n):
        tank = gas[i] - cost[i]
        if tank < 0:
            continue
        for step in range(1, n + 1):
            index = (i + step) % n
            tank += gas[index] - cost[index]
            if tank < 0:
                break
        if tank >= 0:
            return i
    return -1


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a contiguous run, by trying every start; 0 if empty."""
    if not nums:
        return 0
    best = nums[0]
    for start in range(len(nums)):
        best = max(best, max(accumulate(nums[start:], mul)))
    return best


def max_product_dp(nums: Sequence[int]) -> int:
    """Largest product of a contiguous run, tracking running max and min."""
    if not nums:
        return 0
    high = low = best = nums[0]
    for value in nums[1:]:
        candidates = (value, high * value, low * value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values taken without taking two neighbours."""
    before, current = 0, 0
    for value in nums:
        before, current = current, max(before + value, current)
    return current