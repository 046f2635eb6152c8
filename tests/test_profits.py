from itertools import combinations

import pytest

from algokit.profits import (
    can_complete_circuit,
    can_complete_circuit_scan,
    max_product,
    max_product_dp,
    max_profit_many,
    max_profit_once,
    max_profit_once_brute,
    pascal_triangle,
    rob,
)


def test_pascal_triangle_shape_and_sums():
    rows = pascal_triangle(5)
    assert [len(row) for row in rows] == [1, 2, 3, 4, 5]
    for n, row in enumerate(rows):
        assert sum(row) == 2**n
        assert row == row[::-1]
        assert row[0] == row[-1] == 1


def test_pascal_triangle_inner_values_add_up():
    rows = pascal_triangle(8)
    for prev, row in zip(rows, rows[1:]):
        for i in range(1, len(row) - 1):
            assert row[i] == prev[i - 1] + prev[i]


def test_pascal_triangle_empty():
    assert pascal_triangle(0) == []


@pytest.mark.parametrize(
    "prices, expected",
    [([7, 1, 5, 3, 6, 4], 5), ([7, 6, 4, 3, 1], 0)],
)
def test_max_profit_once_source_cases(prices, expected):
    assert max_profit_once(prices) == expected
    assert max_profit_once_brute(prices) == expected


def test_max_profit_once_empty():
    assert max_profit_once([]) == 0
    assert max_profit_once_brute([]) == 0


@pytest.mark.parametrize(
    "prices",
    [[3, 8, 1, 9, 2], [5], [1, 1, 1], [9, 2, 4, 1, 7, 3, 10]],
)
def test_max_profit_once_agrees_with_brute(prices):
    assert max_profit_once(prices) == max_profit_once_brute(prices)


@pytest.mark.parametrize(
    "prices, expected",
    [
        ([7, 1, 5, 3, 6, 4], 7),
        ([1, 2, 3, 4, 5], 4),
        ([7, 6, 4, 3, 1], 0),
        ([1, 2], 1),
    ],
)
def test_max_profit_many_source_cases(prices, expected):
    assert max_profit_many(prices) == expected


def test_max_profit_many_at_least_single_trade():
    prices = [3, 8, 1, 9, 2, 6]
    assert max_profit_many(prices) >= max_profit_once(prices)


@pytest.mark.parametrize(
    "gas, cost, expected",
    [
        ([1, 2, 3, 4, 5], [3, 4, 5, 1, 2], 3),
        ([2, 3, 4], [3, 4, 3], -1),
        ([2], [2], 0),
    ],
)
def test_can_complete_circuit_source_cases(gas, cost, expected):
    assert can_complete_circuit(gas, cost) == expected
    assert can_complete_circuit_scan(gas, cost) == expected


def test_can_complete_circuit_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        can_complete_circuit([1, 2], [1])
    with pytest.raises(ValueError):
        can_complete_circuit_scan([1, 2], [1])


def test_can_complete_circuit_rejects_no_stations():
    with pytest.raises(ValueError):
        can_complete_circuit([], [])


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 3, -2, 4], 6), ([-2, 0, -1], 0), ([-3, 0, 1, -2], 1)],
)
def test_max_product_source_cases(nums, expected):
    assert max_product(nums) == expected
    assert max_product_dp(nums) == expected


def test_max_product_empty():
    assert max_product([]) == 0
    assert max_product_dp([]) == 0


@pytest.mark.parametrize(
    "nums", [[-2, 3, -4], [0, 2], [-1], [2, -5, -2, -4, 3], [-2, -3, 0, -1, -6]]
)
def test_max_product_methods_agree(nums):
    assert max_product(nums) == max_product_dp(nums)


@pytest.mark.parametrize(
    "nums, expected", [([1, 2, 3, 1], 4), ([2, 7, 9, 3, 1], 12)]
)
def test_rob_source_cases(nums, expected):
    assert rob(nums) == expected


def test_rob_empty_and_single():
    assert rob([]) == 0
    assert rob([7]) == 7


def test_rob_matches_exhaustive_choice():
    nums = [4, 1, 2, 7, 5, 3, 1]
    best = 0
    for size in range(len(nums) + 1):
        for picked in combinations(range(len(nums)), size):
            if all(b - a > 1 for a, b in zip(picked, picked[1:])):
                best = max(best, sum(nums[i] for i in picked))
    assert rob(nums) == best