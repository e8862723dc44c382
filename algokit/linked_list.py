"""Singly linked list node and the classic algorithms that work on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists; return the reversed sum."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end (1 is the last node)."""
    nodes = list(_nodes(head))
    length = len(nodes)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    if n == length:
        return nodes[0].next
    nodes[length - n - 1].next = nodes[length - n].next
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    if head is None or head.next is None:
        return False
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list in place by rewriting node values; return the same head."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(-1, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node whose value equals ``val``."""
    dummy = ListNode(-1, head)
    behind = dummy
    while behind.next is not None:
        if behind.next.val == val:
            behind.next = behind.next.next
        else:
            behind = behind.next
    return dummy.next


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties favour ``list1``."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val > list2.val:
            tail.next = list2
            list2 = list2.next
        else:
            tail.next = list1
            list1 = list1.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Put nodes at odd positions first, then those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by copying its successor into it."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` to ``right``."""
    if left < 1:
        raise ValueError(f"left must be at least 1, got {left}")
    dummy = ListNode(0, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
        if prev is None:
            raise ValueError(f"left {left} is past the end of the list")
    current = prev.next
    for _ in range(right - left):
        if current is None or current.next is None:
            raise ValueError(f"right {right} is past the end of the list")
        moved = current.next
        current.next = moved.next
        moved.next = prev.next
        prev.next = moved
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """In a sorted list, keep one node of each run of equal values."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """In a sorted list, drop every value that occurs more than once."""
    dummy = ListNode(-1, head)
    current = dummy
    while current.next is not None and current.next.next is not None:
        if current.next.val == current.next.next.val:
            duplicate = current.next.val
            while current.next is not None and current.next.val == duplicate:
                current.next = current.next.next
        else:
            current = current.next
    return dummy.next