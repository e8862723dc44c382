"""Search-based algorithms: grid search, topological order and heaps."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Sequence

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))
_UGLY_FACTORS = (2, 3, 5)


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent, unreused cells."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def search(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in used or board[row][col] != word[index]:
            return False
        used.add((row, col))
        found = any(search(row + dr, col + dc, index + 1) for dr, dc in _STEPS)
        used.discard((row, col))
        return found

    return any(search(row, col, 0) for row in range(rows) for col in range(cols))


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken given ``[course, prerequisite]`` pairs."""
    in_degree = [0] * num_courses
    dependants: dict[int, list[int]] = defaultdict(list)
    for course, required in prerequisites:
        for number in (course, required):
            if not 0 <= number < num_courses:
                raise ValueError(f"course {number} is outside 0..{num_courses - 1}")
        in_degree[course] += 1
        dependants[required].append(course)

    ready = deque(course for course, degree in enumerate(in_degree) if degree == 0)
    taken = 0
    while ready:
        course = ready.popleft()
        taken += 1
        for dependant in dependants[course]:
            in_degree[dependant] -= 1
            if in_degree[dependant] == 0:
                ready.append(dependant)
    return taken == num_courses


def nth_ugly_number(n: int) -> int:
    """Return the n-th positive number whose prime factors are only 2, 3 and 5."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    heap = [1]
    seen = {1}
    for _ in range(n):
        current = heapq.heappop(heap)
        for factor in _UGLY_FACTORS:
            candidate = current * factor
            if candidate not in seen:
                seen.add(candidate)
                heapq.heappush(heap, candidate)
    return current


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[tuple[int, int]]:
    """Return up to ``k`` pairs ``(a, b)`` with the smallest sums, from sorted inputs."""
    if not nums1 or not nums2:
        return []
    heap = [(nums1[0] + value, 0, j) for j, value in enumerate(nums2)]
    heapq.heapify(heap)
    pairs: list[tuple[int, int]] = []
    while heap and len(pairs) < k:
        _, i, j = heapq.heappop(heap)
        pairs.append((nums1[i], nums2[j]))
        if i + 1 < len(nums1):
            heapq.heappush(heap, (nums1[i + 1] + nums2[j], i + 1, j))
    return pairs