"""Singly linked list nodes and the classic in-place list operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import pairwise, zip_longest


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare and hash by identity."""

    val: int = 0
    next: ListNode | None = field(default=None)

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def remove_zero_sum_sublists(head: ListNode | None) -> ListNode | None:
    """Repeatedly drop runs of consecutive nodes whose values sum to zero."""
    root = ListNode(0, head)
    seen: dict[int, ListNode] = {0: root}
    total = 0
    node = head
    while node is not None:
        total += node.val
        prev = seen.get(total)
        if prev is not None:
            start = prev.next
            running = total
            while start is not node:
                running += start.val
                seen.pop(running, None)
                start = start.next
            prev.next = node.next
        else:
            seen[total] = node
        node = node.next
    return root.next


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` ever revisits a node."""
    visited: set[ListNode] = set()
    node = head
    while node is not None:
        if node in visited:
            return True
        visited.add(node)
        node = node.next
    return False


def reorder_list(head: ListNode | None) -> None:
    """Relink L0, L1, ..., Ln in place into L0, Ln, L1, Ln-1, ..."""
    nodes = list(_nodes(head))
    if len(nodes) < 2:
        return
    half = (len(nodes) + 1) // 2
    front, back = nodes[:half], reversed(nodes[half:])
    order = [node for pair in zip_longest(front, back) for node in pair if node is not None]
    for current, following in pairwise(order):
        current.next = following
    order[-1].next = None


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the n-th node counted from the end and return the new head."""
    nodes = list(_nodes(head))
    length = len(nodes)
    if length == 1:
        return None
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    if n == length:
        return head.next
    prev = nodes[length - n - 1]
    prev.next = prev.next.next
    return head


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node holding ``val`` and return the new head."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev: ListNode | None = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def delete_node(node: ListNode) -> None:
    """Delete ``node`` from its list by taking over its successor's contents."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for even lengths, the second of the two middles."""
    nodes = list(_nodes(head))
    if not nodes:
        return None
    return nodes[len(nodes) // 2]


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` to ``right`` in place."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= left <= right <= length:
        raise ValueError(f"invalid range {left}..{right} for a list of length {length}")
    dummy = ListNode(-1, head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    first = before.next
    prev: ListNode | None = before
    node = first
    for _ in range(right - left + 1):
        node.next, prev, node = prev, node, node.next
    first.next = node
    before.next = prev
    return dummy.next