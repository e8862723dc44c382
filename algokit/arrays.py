"""Array algorithms: pair sums, permutations, intervals, voting and compaction."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import groupby


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, with ``nums[i] + nums[j] == target``.

    The pair with the smallest ``j`` is chosen; among equal values at earlier
    positions the latest index is used. Returns None when no pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    pivot = len(nums) - 2
    while pivot >= 0 and nums[pivot] >= nums[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        # The suffix is non-increasing: the rightmost larger value is the smallest.
        swap = len(nums) - 1
        while nums[swap] <= nums[pivot]:
            swap -= 1
        nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = sorted(nums[pivot + 1 :])


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, row lists kept in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals.

    Intervals are taken in input order; each one absorbs every collected
    interval it overlaps, and the merged interval moves to the end.
    """
    merged: list[list[int]] = []
    for interval in intervals:
        start, end = interval
        kept: list[list[int]] = []
        for other in merged:
            if end < other[0] or other[1] < start:
                kept.append(other)
            else:
                start = min(start, other[0])
                end = max(end, other[1])
        kept.append([start, end])
        merged = kept
    return merged


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        longest = max(longest, length)
    return longest


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once where every other value appears twice."""
    if not nums:
        raise ValueError("nums must not be empty")
    ordered = iter(sorted(nums))
    for value in ordered:
        if next(ordered, None) != value:
            return value
    raise ValueError("every value appears twice")


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occurring more than ``len(nums) // 2`` times."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    votes = 1
    for value in nums[1:]:
        if votes == 0:
            candidate = value
            votes = 1
        elif value == candidate:
            votes += 1
        else:
            votes -= 1
    return candidate


def majority_elements_third(nums: Sequence[int]) -> list[int]:
    """Return the elements occurring more than ``len(nums) // 3`` times."""
    if not nums:
        return []
    first = second = nums[0]
    first_votes = second_votes = 0
    for value in nums:
        if value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        elif first_votes == 0:
            first, first_votes = value, 1
        elif second_votes == 0:
            second, second_votes = value, 1
        else:
            first_votes -= 1
            second_votes -= 1

    first_count = sum(1 for value in nums if value == first)
    second_count = sum(1 for value in nums if value == second and value != first)
    threshold = len(nums) // 3
    result = []
    if first_count > threshold:
        result.append(first)
    if second_count > threshold:
        result.append(second)
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its first ``k`` items are its distinct values.

    Returns ``k``; items past ``k`` are left as they are.
    """
    if not nums:
        return 0
    count = 1
    for value in list(nums[1:]):
        if value != nums[count - 1]:
            nums[count] = value
            count += 1
    return count


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeroes to the end in place, keeping the order of the others."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the items not equal to ``val`` to the front in order; return their count.

    Items past the returned count are left as they are.
    """
    count = 0
    for value in list(nums):
        if value != val:
            nums[count] = value
            count += 1
    return count