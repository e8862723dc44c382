"""Binary tree node and algorithms on binary (search) trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


_MISSING = object()


def num_trees(n: int) -> int:
    """Count the structurally distinct binary search trees on keys 1..n."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    counts = [1] * 2 + [0] * max(n - 1, 0)
    for size in range(2, n + 1):
        # Each key j as root: (j - 1) keys on the left, (size - j) on the right.
        counts[size] = sum(
            counts[root - 1] * counts[size - root] for root in range(1, size + 1)
        )
    return counts[n]


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a strict binary search tree."""

    def within(node: TreeNode | None, low: int | None, high: int | None) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (
            high is not None and node.val >= high
        ):
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, None, None)


def _preorder(node: TreeNode | None, mirrored: bool) -> Iterator[TreeNode | None]:
    """Yield nodes in preorder, empty children included as None."""
    yield node
    if node is None:
        return
    first, second = (node.right, node.left) if mirrored else (node.left, node.right)
    yield from _preorder(first, mirrored)
    yield from _preorder(second, mirrored)


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    pairs = zip_longest(
        _preorder(root.left, False), _preorder(root.right, True), fillvalue=_MISSING
    )
    for left, right in pairs:
        if left is _MISSING or right is _MISSING:
            return False
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
    return True