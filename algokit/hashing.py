"""Hash-based algorithms on strings and integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group strings that are anagrams of one another.

    Groups appear in the order of their first member, and members keep
    their input order.
    """
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into a sequence of words from ``word_dict``."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words
            for start in reversed(range(end))
        )
    return reachable[len(s)]


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in ``nums2`` order."""
    remaining = set(nums1)
    common: list[int] = []
    for value in nums2:
        if value in remaining:
            common.append(value)
            remaining.discard(value)
    return common


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be cut out of the letters of ``magazine``."""
    available = Counter(magazine)
    return all(available[ch] >= needed for ch, needed in Counter(ransom_note).items())


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def longest_palindrome(s: str) -> int:
    """Return the length of the longest palindrome buildable from ``s``."""
    length = sum(count // 2 * 2 for count in Counter(s).values())
    return length + 1 if length < len(s) else length


def find_shortest_subarray(nums: Sequence[int]) -> int:
    """Return the shortest span holding as many copies of some value as the
    most frequent value has.
    """
    first: dict[int, int] = {}
    last: dict[int, int] = {}
    counts: Counter[int] = Counter()
    for index, value in enumerate(nums):
        first.setdefault(value, index)
        last[value] = index
        counts[value] += 1
    if not counts:
        return 0
    degree = max(counts.values())
    return min(
        last[value] - first[value] + 1
        for value, count in counts.items()
        if count == degree
    )


def next_greater_element(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value to its right
    in ``nums2``, or -1 if there is none.

    Values of ``nums2`` are expected to be distinct; every value of ``nums1``
    must occur in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    result: list[int] = []
    for value in nums1:
        if value not in greater:
            raise ValueError(f"{value} does not occur in nums2")
        result.append(greater[value])
    return result