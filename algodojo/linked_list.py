"""Singly linked lists and the classic algorithms that operate on them.

A list is represented by its head node, or ``None`` for the empty list.
Functions that restructure a list return the (possibly new) head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _nodes(self))


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    current = head
    while current is not None:
        yield current
        current = current.next


def _node_at(head: Optional[Node], index: int) -> Optional[Node]:
    """Return the node at a zero-based index, or None if the list is too short."""
    for position, node in enumerate(_nodes(head)):
        if position == index:
            return node
    return None


def from_iterable(values: Iterable[Any]) -> Optional[Node]:
    """Build a linked list holding the given values in order."""
    dummy = Node(None)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[Node]) -> list[Any]:
    """Return the values of an acyclic list as a Python list."""
    return [node.value for node in _nodes(head)]


def is_palindrome(head: Optional[Node]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    if head is None or head.next is None:
        return True
    first_half: list[Any] = []
    slow: Optional[Node] = head
    fast: Optional[Node] = head
    while fast is not None and fast.next is not None:
        first_half.append(slow.value)
        slow = slow.next
        fast = fast.next.next
    if fast is not None:
        slow = slow.next
    for node in _nodes(slow):
        if node.value != first_half.pop():
            return False
    return True


def remove_nth_from_end(head: Optional[Node], n: int) -> Optional[Node]:
    """Remove the n-th node counted from the end (1 is the last node).

    If n exceeds the length of the list, the list is returned unchanged.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = Node(None, head)
    lead: Optional[Node] = dummy
    for _ in range(n):
        if lead is None:
            return head
        lead = lead.next
    if lead is None:
        return head
    trail = dummy
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return dummy.next


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return its new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def add_lists(head1: Optional[Node], head2: Optional[Node]) -> Optional[Node]:
    """Add two numbers stored as digit lists, least significant digit first.

    The sum is returned with its most significant digit first.
    """
    dummy = Node(0)
    tail = dummy
    carry = 0
    first, second = head1, head2
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.value
            first = first.next
        if second is not None:
            total += second.value
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = Node(digit)
        tail = tail.next
    return reverse(dummy.next)


def link_tail(head: Optional[Node], position: int) -> Optional[Node]:
    """Point the last node back at the node at a one-based position.

    Position 0, or an empty list, leaves the list unchanged.
    """
    if head is None or position == 0:
        return head
    target = _node_at(head, position - 1) if position > 0 else None
    if target is None:
        raise IndexError(f"position {position} is outside the list")
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = target
    return head


def has_cycle(head: Optional[Node]) -> bool:
    """Detect a cycle with the tortoise-and-hare walk."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def delete_head(head: Optional[Node]) -> Optional[Node]:
    """Drop the first node and return the new head."""
    return None if head is None else head.next


def insert_at(head: Optional[Node], index: int, value: Any) -> Optional[Node]:
    """Insert a value so that it ends up at the given zero-based index.

    An index past the end of the list leaves the list unchanged.
    """
    if index < 0:
        raise IndexError("index must not be negative")
    if index == 0:
        return Node(value, head)
    before = _node_at(head, index - 1)
    if before is not None:
        before.next = Node(value, before.next)
    return head


def delete_at(head: Optional[Node], index: int) -> Optional[Node]:
    """Remove the node at the given zero-based index.

    An index past the end of the list leaves the list unchanged.
    """
    if index < 0:
        raise IndexError("index must not be negative")
    if head is None:
        return None
    if index == 0:
        return head.next
    before = _node_at(head, index - 1)
    if before is not None and before.next is not None:
        before.next = before.next.next
    return head


def delete_at_end(head: Optional[Node]) -> Optional[Node]:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    current = head
    while current.next.next is not None:
        current = current.next
    current.next = None
    return head


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def move_even_positions_reversed(head: Optional[Node]) -> Optional[Node]:
    """Keep odd positions in order, then append even positions in reverse.

    Positions are counted from 1.
    """
    if head is None or head.next is None:
        return head
    odd = head
    even = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = reverse(even_head)
    return head


def contains(head: Optional[Node], item: Any) -> bool:
    """Tell whether any node holds the given value."""
    return any(node.value == item for node in _nodes(head))