import math
from collections import Counter

import pytest

from algokit.arrays import (
    contains_duplicate,
    find_kth_largest,
    find_peak_element,
    longest_consecutive,
    longest_consecutive_sorted,
    majority_element,
    majority_element_counting,
    product_except_self,
    rotate,
    single_number,
)


@pytest.mark.parametrize(
    "nums, expected",
    [([0], 1), ([1, 2, 0, 1], 3), ([100, 4, 200, 1, 3, 2], 4)],
)
def test_longest_consecutive_source_cases(nums, expected):
    assert longest_consecutive(nums) == expected
    assert longest_consecutive_sorted(nums) == expected


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0
    assert longest_consecutive_sorted([]) == 0


def test_longest_consecutive_sorted_leaves_input_alone():
    nums = [5, 3, 4]
    longest_consecutive_sorted(nums)
    assert nums == [5, 3, 4]


@pytest.mark.parametrize("nums, expected", [([2, 2, 1], 1), ([4, 1, 2, 1, 2], 4)])
def test_single_number_source_cases(nums, expected):
    assert single_number(nums) == expected


@pytest.mark.parametrize(
    "nums", [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [5, 4, 3], [1, 2, 3], [7], [3, 1, 4, 1, 5]]
)
def test_find_peak_element_returns_a_peak(nums):
    i = find_peak_element(nums)
    assert 0 <= i < len(nums)
    if i > 0:
        assert nums[i] > nums[i - 1]
    if i < len(nums) - 1:
        assert nums[i] > nums[i + 1]


@pytest.mark.parametrize(
    "nums", [[1, 2, 1, 4, 1, 6, 1], [2, 2, 1, 1, 1, 2, 2], [3, 3, 4], [9]]
)
def test_majority_element_finds_the_majority(nums):
    value, count = Counter(nums).most_common(1)[0]
    assert count > len(nums) // 2
    assert majority_element(nums) == value
    assert majority_element_counting(nums) == value


def test_majority_element_source_case():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_empty():
    assert majority_element([]) == 0
    assert majority_element_counting([]) == 0


def test_majority_element_leaves_input_alone():
    nums = [1, 2, 1]
    majority_element(nums)
    assert nums == [1, 2, 1]


def test_rotate_by_one_moves_last_to_front():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 1)
    assert nums[0] == 7
    assert nums[1:] == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("k", [0, 2, 3, 7, 9])
def test_rotate_round_trip(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    assert sorted(nums) == original
    rotate(nums, len(nums) - k % len(nums))
    assert nums == original


def test_rotate_two_places_keeps_order():
    nums = [-1, -100, 3, 99]
    rotate(nums, 2)
    assert nums == [3, 99, -1, -100]


def test_rotate_empty_raises():
    with pytest.raises(ValueError):
        rotate([], 3)


def test_find_kth_largest_source_case():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5


def test_find_kth_largest_extremes():
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6]
    assert find_kth_largest(nums, 1) == max(nums)
    assert find_kth_largest(nums, len(nums)) == min(nums)


def test_find_kth_largest_empty_and_out_of_range():
    assert find_kth_largest([], 1) == -1
    with pytest.raises(IndexError):
        find_kth_largest([1, 2], 3)


def test_contains_duplicate():
    assert contains_duplicate([1, 1, 1, 3, 3, 4, 3, 2, 4, 2]) is True
    assert contains_duplicate([1, 2, 3]) is False
    assert contains_duplicate([]) is False


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [-2, 3, 5, -1], [7]])
def test_product_except_self_without_zeros(nums):
    result = product_except_self(nums)
    total = math.prod(nums)
    assert [r * x for r, x in zip(result, nums)] == [total] * len(nums)


def test_product_except_self_with_one_zero():
    nums = [1, 0]
    assert product_except_self(nums) == [0, 1]
    result = product_except_self([2, 0, 3])
    assert result[1] == 2 * 3
    assert result[0] == result[2] == 0


def test_product_except_self_with_two_zeros():
    assert product_except_self([0, 4, 0]) == [0, 0, 0]