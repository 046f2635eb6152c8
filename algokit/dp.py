"""Classic dynamic-programming exercises."""

from __future__ import annotations

from typing import Sequence

# Stamp count reported when a total cannot be made up.
UNREACHABLE = 1000


def seats(n: int) -> int:
    """Count rows of n boys and girls in which every girl sits next to another girl."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 1
    # (ending in boy, ending in girl) for lengths i-2 and i-1
    boy2, girl2 = 1, 0
    boy1, girl1 = 1, 1
    for _ in range(3, n + 1):
        boy, girl = boy1 + girl1, boy2 + girl1
        boy2, girl2, boy1, girl1 = boy1, girl1, boy, girl
    return boy1 + girl1


def stamps(total: int, values: Sequence[int]) -> int:
    """Fewest stamps (each used once) that add up to total, or UNREACHABLE."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(v < 0 for v in values):
        raise ValueError("stamp values must not be negative")
    best = [UNREACHABLE] * (total + 1)
    best[0] = 0
    for value in values:
        for amount in range(total, value - 1, -1):
            best[amount] = min(best[amount], best[amount - value] + 1)
    return best[total]


def fruit(weights: Sequence[int]) -> int:
    """Smallest weight difference when splitting the fruits into two piles."""
    total = sum(weights)
    half = total // 2
    reach = [0] * (half + 1)
    for weight in weights:
        for cap in range(half, weight - 1, -1):
            reach[cap] = max(reach[cap], reach[cap - weight] + weight)
    return total - 2 * reach[half]


def boat(a: int, b: int, cargo: Sequence[int]) -> bool:
    """Whether two boats of capacities a and b can carry the cargo.

    The smaller boat is filled as far as possible; the rest must weigh
    strictly less than the larger boat's capacity.
    """
    total = sum(cargo)
    small, big = min(a, b), max(a, b)
    reach = [0] * (small + 1)
    for weight in cargo:
        for cap in range(small, weight - 1, -1):
            reach[cap] = max(reach[cap], reach[cap - weight] + weight)
    return total - reach[small] < big


def job_plan(jobs: Sequence[Sequence[int]]) -> int:
    """Best total pay from jobs given as ``[start, end, pay]``, one at a time."""
    ordered = sorted(jobs, key=lambda job: job[0])
    best = [0] * (len(ordered) + 1)
    for i, (start, _end, pay) in enumerate(ordered, start=1):
        prior = next(
            (k for k in range(i - 1, 0, -1) if ordered[k - 1][1] <= start), 0
        )
        best[i] = max(best[prior] + pay, best[i - 1])
    return best[-1]


def missile(heights: Sequence[int]) -> int:
    """Most missiles one interceptor can hit with non-increasing heights."""
    if not heights:
        return 0
    best = [1] + [0] * (len(heights) - 1)
    result = 1
    for i, height in enumerate(heights):
        for j in range(i):
            if heights[j] >= height and best[j] >= best[i]:
                best[i] = best[j] + 1
                result = max(result, best[i])
    return result


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence ending at the last value."""
    if not values:
        return 0
    best = [1] * len(values)
    for i, value in enumerate(values):
        for j in range(i):
            if value > values[j] and best[j] >= best[i]:
                best[i] = best[j] + 1
    return best[-1]


def stack_sequences(n: int) -> int:
    """Number of valid push/pop sequences made of n operations."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n % 2 == 1:
        return 0
    half = n // 2
    table = [[1] + [0] * half for _ in range(half + 1)]
    for pushes in range(1, half + 1):
        for pops in range(1, pushes + 1):
            if pushes == pops:
                table[pushes][pops] = table[pushes][pops - 1]
            else:
                table[pushes][pops] = table[pushes - 1][pops] + table[pushes][pops - 1]
    return table[half][half]