import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.searching import (
    binary_search,
    find_min_rotated,
    find_peak,
    min_eating_speed,
    search_insert,
    search_range,
    search_rotated,
    search_rotated_with_duplicates,
    single_non_duplicate,
)

_ints = st.integers(min_value=-100, max_value=100)


@st.composite
def _rotated_unique(draw, min_size=0):
    values = sorted(draw(st.lists(_ints, unique=True, min_size=min_size, max_size=30)))
    k = draw(st.integers(min_value=0, max_value=max(len(values) - 1, 0)))
    return values[k:] + values[:k]


@st.composite
def _rotated_with_repeats(draw):
    values = sorted(draw(st.lists(st.integers(min_value=-10, max_value=10), max_size=30)))
    k = draw(st.integers(min_value=0, max_value=max(len(values) - 1, 0)))
    return values[k:] + values[:k]


@given(_rotated_unique(), _ints)
def test_search_rotated_finds_index(nums, target):
    expected = nums.index(target) if target in nums else -1
    assert search_rotated(nums, target) == expected


@given(_rotated_with_repeats(), st.integers(min_value=-12, max_value=12))
def test_search_rotated_with_duplicates_membership(nums, target):
    assert search_rotated_with_duplicates(nums, target) == (target in nums)


@given(st.lists(st.integers(min_value=-10, max_value=10), max_size=30), st.integers(min_value=-12, max_value=12))
def test_search_range_bounds(values, target):
    nums = sorted(values)
    first, last = search_range(nums, target)
    if target in nums:
        assert first == nums.index(target)
        assert last == len(nums) - 1 - nums[::-1].index(target)
    else:
        assert (first, last) == (-1, -1)


@given(st.lists(_ints, max_size=30), _ints)
def test_search_insert_partitions(values, target):
    nums = sorted(values)
    i = search_insert(nums, target)
    assert all(x < target for x in nums[:i])
    assert all(x >= target for x in nums[i:])


@given(_rotated_unique(min_size=1))
def test_find_min_rotated(nums):
    assert find_min_rotated(nums) == min(nums)


def test_find_min_rotated_empty_raises():
    with pytest.raises(ValueError):
        find_min_rotated([])


@given(st.lists(_ints, min_size=1, max_size=30).filter(lambda xs: all(a != b for a, b in zip(xs, xs[1:]))))
def test_find_peak_is_local_maximum(nums):
    i = find_peak(nums)
    assert 0 <= i < len(nums)
    if i > 0:
        assert nums[i] > nums[i - 1]
    if i < len(nums) - 1:
        assert nums[i] > nums[i + 1]


def test_find_peak_empty_raises():
    with pytest.raises(ValueError):
        find_peak([])


@given(st.lists(_ints, unique=True, min_size=1, max_size=20), st.data())
def test_single_non_duplicate(values, data):
    values.sort()
    single = data.draw(st.sampled_from(values))
    nums = sorted([v for v in values if v != single] * 2 + [single])
    assert single_non_duplicate(nums) == single


def test_single_non_duplicate_empty_raises():
    with pytest.raises(ValueError):
        single_non_duplicate([])


@given(st.lists(_ints, unique=True, max_size=30), _ints)
def test_binary_search_unique(values, target):
    nums = sorted(values)
    expected = nums.index(target) if target in nums else -1
    assert binary_search(nums, target) == expected


def test_binary_search_prefers_first_index():
    assert binary_search([5, 5, 5], 5) == 0


@given(st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=20), st.data())
def test_min_eating_speed_is_minimal(piles, data):
    h = data.draw(st.integers(min_value=len(piles), max_value=len(piles) * 5))
    speed = min_eating_speed(piles, h)

    def hours(k):
        return sum(math.ceil(p / k) for p in piles)

    assert 1 <= speed <= max(piles)
    assert hours(speed) <= h
    if speed > 1:
        assert hours(speed - 1) > h


def test_min_eating_speed_no_piles():
    assert min_eating_speed([], 3) == 1