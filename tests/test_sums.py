import math
from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from algobox.sums import (
    four_sum,
    max_product,
    max_profit,
    max_subarray,
    subarray_sum_count,
    three_sum,
    two_sum,
)

small_ints = st.integers(min_value=-6, max_value=6)


def _slices(nums):
    return [nums[i:j] for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)]


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == (0, 1)


def test_two_sum_without_pair():
    assert two_sum([1, 2, 4], 100) is None


@given(st.data())
def test_two_sum_finds_valid_pair(data):
    nums = data.draw(st.lists(small_ints, min_size=2, max_size=12))
    i, j = data.draw(
        st.tuples(st.integers(0, len(nums) - 1), st.integers(0, len(nums) - 1)).filter(
            lambda p: p[0] != p[1]
        )
    )
    target = nums[i] + nums[j]
    result = two_sum(nums, target)
    assert result is not None
    a, b = result
    assert a < b
    assert nums[a] + nums[b] == target


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@given(st.lists(small_ints, max_size=10))
def test_three_sum_matches_all_combinations(nums):
    original = list(nums)
    result = three_sum(nums)
    assert nums == original
    expected = {tuple(sorted(c)) for c in combinations(nums, 3) if sum(c) == 0}
    assert {tuple(t) for t in result} == expected
    assert len(result) == len(expected)
    assert result == sorted(result)


@given(st.lists(small_ints, max_size=9), st.integers(-10, 10))
def test_four_sum_matches_all_combinations(nums, target):
    result = four_sum(nums, target)
    expected = {tuple(sorted(c)) for c in combinations(nums, 4) if sum(c) == target}
    assert {tuple(q) for q in result} == expected
    assert len(result) == len(expected)
    assert all(q == sorted(q) for q in result)


def test_four_sum_large_values():
    big = 10**9
    result = four_sum([big, big, big, big], 4 * big)
    assert result == [[big, big, big, big]]


def test_subarray_sum_count_example():
    assert subarray_sum_count([1, 1, 1], 2) == 2


@given(st.lists(small_ints, max_size=12), st.integers(-10, 10))
def test_subarray_sum_count_counts_slices(nums, k):
    assert subarray_sum_count(nums, k) == sum(1 for s in _slices(nums) if sum(s) == k)


@given(st.lists(small_ints, min_size=1, max_size=12))
def test_max_subarray_is_best_slice(nums):
    sums = [sum(s) for s in _slices(nums)]
    result = max_subarray(nums)
    assert result in sums
    assert all(result >= s for s in sums)
    assert result >= max(nums)


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


@given(st.lists(small_ints, min_size=1, max_size=10))
def test_max_product_is_best_slice(nums):
    products = [math.prod(s) for s in _slices(nums)]
    result = max_product(nums)
    assert result in products
    assert all(result >= p for p in products)


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


@given(st.lists(st.integers(0, 50), min_size=1, max_size=12))
def test_max_profit_sorted_prices(prices):
    assert max_profit(sorted(prices)) == max(prices) - min(prices)
    assert max_profit(sorted(prices, reverse=True)) == max_profit([])


@given(st.lists(st.integers(0, 50), max_size=12))
def test_max_profit_is_best_trade(prices):
    gains = [b - a for a, b in combinations(prices, 2)]
    result = max_profit(prices)
    assert result >= 0
    assert all(result >= g for g in gains)
    assert result == max([0, *gains])