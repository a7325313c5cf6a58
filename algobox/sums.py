"""Sums and products over subsequences of integers."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, Iterator, Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Indices of two values adding up to ``target``, or ``None`` if there are none."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return (partner, index)
        seen[value] = index
    return None


def _pairs_summing(values: Sequence[int], start: int, goal: int) -> Iterator[tuple[int, int]]:
    """Distinct pairs from sorted ``values[start:]`` whose sum is ``goal``."""
    left, right = start, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == goal:
            yield values[left], values[right]
            while left < right and values[left] == values[left + 1]:
                left += 1
            while left < right and values[right] == values[right - 1]:
                right -= 1
            left += 1
            right -= 1
        elif total < goal:
            left += 1
        else:
            right -= 1


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct sorted triples of values summing to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i in range(len(values) - 2):
        first = values[i]
        if i > 0 and first == values[i - 1]:
            continue
        result.extend([first, b, c] for b, c in _pairs_summing(values, i + 1, -first))
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruples of values summing to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            goal = target - values[i] - values[j]
            result.extend(
                [values[i], values[j], c, d]
                for c, d in _pairs_summing(values, j + 1, goal)
            )
    return result


def subarray_sum_count(nums: Iterable[int], k: int) -> int:
    """Number of contiguous runs of ``nums`` whose sum is ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += prefix_counts[running - k]
        prefix_counts[running] += 1
    return count


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("empty sequence has no subarray")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("empty sequence has no subarray")
    high = low = best = nums[0]
    for value in nums[1:]:
        if value < 0:
            high, low = low, high
        low = min(value, low * value)
        high = max(value, high * value)
        best = max(best, high)
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from buying once and selling later; 0 if no gain is possible."""
    lowest = math.inf
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best