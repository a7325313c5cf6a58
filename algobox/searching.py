"""Binary searches over sorted and rotated sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in sorted ``nums``, or ``(-1, -1)``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index at which ``target`` sits or would be inserted in sorted ``nums``."""
    return bisect_left(nums, target)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("empty sequence has no minimum")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def find_peak(nums: Sequence[int]) -> int:
    """Index of an element greater than its neighbours."""
    if not nums:
        raise ValueError("empty sequence has no peak")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] < nums[mid + 1]:
            left = mid + 1
        else:
            right = mid
    return left


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value that appears once in a sorted sequence of pairs."""
    if not nums:
        raise ValueError("empty sequence has no single element")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        mid -= mid % 2
        if nums[mid] == nums[mid + 1]:
            left = mid + 2
        else:
            right = mid
    return nums[left]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1; index 0 wins when it matches."""
    if not nums:
        return -1
    if nums[0] == target:
        return 0
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if target < nums[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Smallest eating speed that finishes all ``piles`` within ``h`` hours."""
    low, high = 1, max(piles, default=0)
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            high = mid - 1
        else:
            low = mid + 1
    return low