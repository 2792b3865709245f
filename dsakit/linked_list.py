"""Singly linked lists and the classic algorithms on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list; nodes compare by identity."""

    data: Any
    next: Node | None = None


def from_iterable(values: Iterable) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _nodes(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def iter_values(head: Node | None) -> Iterator:
    """Yield the values from ``head`` to the end (never ends on a cyclic list)."""
    for node in _nodes(head):
        yield node.data


def format_list(head: Node | None) -> str:
    """Return the values of the list separated by single spaces."""
    return " ".join(str(value) for value in iter_values(head))


def has_cycle(head: Node | None) -> bool:
    """Return True if following ``next`` from ``head`` loops (Floyd)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def get_intersection(a: Node | None, b: Node | None) -> Node | None:
    """Return the first node shared by two lists, or None."""
    len_a = sum(1 for _ in _nodes(a))
    len_b = sum(1 for _ in _nodes(b))
    for _ in range(len_a - len_b):
        a = a.next
    for _ in range(len_b - len_a):
        b = b.next
    while a is not None and b is not None:
        if a is b:
            return a
        a, b = a.next, b.next
    return None


def merge_sorted(l1: Node | None, l2: Node | None) -> Node | None:
    """Splice two ascending lists into one ascending list and return its head.

    On equal values the node from ``l2`` comes first.
    """
    dummy = Node(None)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.data < l2.data:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def remove_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Unlink the ``n``-th node counted from the end (1 is the last) and return the head."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    dummy = Node(None, head)
    lead: Node | None = dummy
    trail = dummy
    for _ in range(n + 1):
        lead = lead.next
    while lead is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return dummy.next


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous: Node | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous