"""In-place and counting algorithms over integer lists."""

from __future__ import annotations

from collections import Counter
from heapq import merge
from itertools import chain, groupby, pairwise
from typing import Iterable, Sequence


def remove_duplicates(nums: list[int]) -> int:
    """Compact sorted ``nums`` so its first k items are distinct; return k."""
    if not nums:
        return 0
    k = 0
    for value in nums[1:]:
        if value != nums[k]:
            k += 1
            nums[k] = value
    return k + 1


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` into its next lexicographic permutation, wrapping around."""
    i = len(nums) - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i >= 0:
        j = len(nums) - 1
        while nums[j] <= nums[i]:
            j -= 1
        nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1 :] = nums[i + 1 :][::-1]


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place; any other value leaves it unchanged."""
    counts = Counter(nums)
    if set(counts) - {0, 1, 2}:
        return
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """The value held by more than half of ``nums``, or 0 if there is none."""
    candidate = 0
    count = 0
    for value in nums:
        if value == candidate:
            count += 1
        elif count == 0:
            candidate = value
            count = 1
        else:
            count -= 1
    if sum(1 for value in nums if value == candidate) > len(nums) // 2:
        return candidate
    return 0


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k :] + nums[: len(nums) - k]


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values held by more than a third of ``nums``."""
    first, second = 0, 1
    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    counts = Counter(nums)
    limit = len(nums) // 3
    return [candidate for candidate in (first, second) if counts[candidate] > limit]


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of 1s in ``nums``."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        raise ValueError("empty sequence")
    drops = sum(1 for a, b in pairwise(nums) if b < a)
    if nums[-1] > nums[0]:
        drops += 1
    return drops <= 1


def rearrange_by_sign(nums: Iterable[int]) -> list[int]:
    """Alternate non-negative and negative values, keeping each group's order."""
    values = list(nums)
    positives = [value for value in values if value >= 0]
    negatives = [value for value in values if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("needs as many non-negative as negative values")
    return list(chain.from_iterable(zip(positives, negatives)))