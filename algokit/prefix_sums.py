"""Algorithms built on running (prefix) sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


class RangeSumQuery:
    """Answers sums over ranges of a fixed sequence in constant time."""

    def __init__(self, nums: Iterable[int]) -> None:
        self._prefix = tuple(accumulate(nums, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of the items at positions ``left`` to ``right`` inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError(
                f"range [{left}, {right}] is not within 0..{len(self) - 1}"
            )
        return self._prefix[right + 1] - self._prefix[left]


def sum_odd_length_subarrays(arr: Sequence[int]) -> int:
    """Return the total of the sums of all contiguous subarrays of odd length."""
    prefix = list(accumulate(arr, initial=0))
    size = len(arr)
    return sum(
        prefix[end] - prefix[end - length]
        for length in range(1, size + 1, 2)
        for end in range(length, size + 1)
    )


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count the non-empty contiguous subarrays whose sum equals ``k``."""
    seen: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count


def number_of_subarrays(nums: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays holding exactly ``k`` odd numbers.

    ``k`` must be at least 1.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    seen: Counter[int] = Counter({0: 1})
    odd = 0
    count = 0
    for value in nums:
        odd += value % 2
        seen[odd] += 1
        count += seen[odd - k]
    return count