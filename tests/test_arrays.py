from copy import deepcopy
from itertools import permutations

import pytest

from algokit.arrays import (
    find_max_consecutive_ones,
    longest_consecutive,
    majority_element,
    majority_elements_third,
    merge_intervals,
    move_zeroes,
    next_permutation,
    remove_duplicates,
    remove_element,
    rotate,
    single_number,
    two_sum,
)


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == (0, 1)


@pytest.mark.parametrize(
    "nums, target",
    [([3, 2, 4], 6), ([3, 3], 6), ([-1, -2, -3, -4, -5], -8), ([0, 4, 3, 0], 0)],
)
def test_two_sum_finds_valid_pair(nums, target):
    result = two_sum(nums, target)
    assert result is not None
    i, j = result
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) is None
    assert two_sum([], 0) is None


@pytest.mark.parametrize(
    "start", [(1, 2, 3), (1, 1, 5), (3, 1, 2, 4), (2, 2, 1, 1)]
)
def test_next_permutation_follows_lexicographic_order(start):
    ordered = sorted(set(permutations(start)))
    position = ordered.index(start)
    nums = list(start)
    next_permutation(nums)
    assert tuple(nums) == ordered[(position + 1) % len(ordered)]


def test_next_permutation_wraps_to_ascending():
    nums = [5, 4, 3, 1]
    next_permutation(nums)
    assert nums == sorted(nums)


def test_next_permutation_cycles_through_all():
    nums = [1, 2, 2, 3]
    seen = set()
    for _ in range(12):
        seen.add(tuple(nums))
        next_permutation(nums)
    assert seen == set(permutations([1, 2, 2, 3]))
    assert nums == [1, 2, 2, 3]


def test_rotate_maps_cells_clockwise():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    original = deepcopy(matrix)
    rows = [id(row) for row in matrix]
    rotate(matrix)
    n = len(original)
    for i in range(n):
        for j in range(n):
            assert matrix[j][n - 1 - i] == original[i][j]
    assert [id(row) for row in matrix] == rows


def test_rotate_four_times_is_identity():
    matrix = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]
    original = deepcopy(matrix)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


def test_merge_intervals_source_example():
    assert merge_intervals([[2, 3], [5, 5], [2, 2], [3, 4], [3, 4]]) == [
        [5, 5],
        [2, 4],
    ]


def _covered(intervals):
    return {x for start, end in intervals for x in range(start, end + 1)}


@pytest.mark.parametrize(
    "intervals",
    [
        [[1, 3], [2, 6], [8, 10], [15, 18]],
        [[1, 4], [4, 5]],
        [[2, 3], [4, 5], [6, 7], [8, 9], [1, 10]],
        [[1, 4], [1, 4]],
    ],
)
def test_merge_intervals_invariants(intervals):
    merged = merge_intervals(intervals)
    assert _covered(merged) == _covered(intervals)
    ordered = sorted(merged)
    for (_, end), (start, _) in zip(ordered, ordered[1:]):
        assert end < start


def test_merge_intervals_touching_merge():
    assert merge_intervals([[1, 4], [4, 5]]) == [[1, 5]]


def test_longest_consecutive_source_example():
    assert longest_consecutive([0, 0, -1]) == 2


@pytest.mark.parametrize(
    "nums", [[100, 4, 200, 1, 3, 2], [0, 3, 7, 2, 5, 8, 4, 6, 0, 1], [], [7]]
)
def test_longest_consecutive_matches_brute_force(nums):
    values = set(nums)
    best = 0
    for value in values:
        length = 0
        while value + length in values:
            length += 1
        best = max(best, length)
    assert longest_consecutive(nums) == best


@pytest.mark.parametrize("nums", [[2, 2, 1], [4, 1, 2, 1, 2], [1], [9, 3, 3]])
def test_single_number(nums):
    result = single_number(nums)
    assert nums.count(result) == 1
    assert all(nums.count(v) == 2 for v in nums if v != result)


def test_single_number_empty():
    with pytest.raises(ValueError):
        single_number([])


def test_majority_element_source_example():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_invariant():
    nums = [3, 2, 3]
    result = majority_element(nums)
    assert nums.count(result) > len(nums) // 2


def test_majority_element_empty():
    with pytest.raises(ValueError):
        majority_element([])


def test_majority_elements_third_source_example():
    assert majority_elements_third([3, 2, 3]) == [3]


@pytest.mark.parametrize(
    "nums", [[1], [1, 2], [1, 1, 1], [2, 2, 1, 3, 1, 1, 2], [1, 2, 3, 4], []]
)
def test_majority_elements_third_matches_counts(nums):
    expected = {v for v in nums if nums.count(v) > len(nums) // 3}
    result = majority_elements_third(nums)
    assert set(result) == expected
    assert len(result) == len(expected)


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    k = remove_duplicates(nums)
    assert nums[:k] == sorted(set(nums))
    assert k == len(set(nums))


def test_remove_duplicates_edge_cases():
    assert remove_duplicates([]) == 0
    nums = [5]
    assert remove_duplicates(nums) == 1
    assert nums == [5]


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_all_zero():
    nums = [0, 0]
    move_zeroes(nums)
    assert nums == [0, 0]


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 1, 0, 1, 1, 1], 3), ([1, 0, 1, 1, 0, 1], 2), ([], 0), ([0, 0], 0)],
)
def test_find_max_consecutive_ones(nums, expected):
    assert find_max_consecutive_ones(nums) == expected


@pytest.mark.parametrize(
    "nums, val", [([3, 2, 2, 3], 3), ([0, 1, 2, 2, 3, 0, 4, 2], 2), ([], 1), ([4], 4)]
)
def test_remove_element(nums, val):
    kept = [v for v in nums if v != val]
    data = list(nums)
    k = remove_element(data, val)
    assert k == len(kept)
    assert data[:k] == kept
    assert len(data) == len(nums)