"""Singly linked list with segment moves to the front or the back."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    val: int
    next: Optional[Node] = field(default=None, repr=False)


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a linked list from ``values`` and return its head."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def _iter_nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: Optional[Node]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _iter_nodes(head)]


def _link(nodes: list[Node]) -> Optional[Node]:
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    if not nodes:
        return None
    nodes[-1].next = None
    return nodes[0]


def _segment(count: int, start: int, end: int) -> tuple[int, int]:
    """Slice bounds of positions start..end (1-based), clipped to the list."""
    stop = end if start <= end <= count else count
    return start - 1, stop


def move_to_front(head: Optional[Node], start: int, end: int) -> Optional[Node]:
    """Move positions ``start``..``end`` (1-based) to the front; return the head.

    A segment that already begins the list, or starts past its end, leaves
    the list unchanged. An ``end`` outside the list runs to the last node.
    """
    nodes = list(_iter_nodes(head))
    if not 2 <= start <= len(nodes):
        return head
    first, stop = _segment(len(nodes), start, end)
    return _link(nodes[first:stop] + nodes[:first] + nodes[stop:])


def move_to_back(head: Optional[Node], start: int, end: int) -> Optional[Node]:
    """Move positions ``start``..``end`` (1-based) to the back; return the head.

    A segment starting outside the list leaves it unchanged. An ``end``
    outside the list runs to the last node.
    """
    nodes = list(_iter_nodes(head))
    if not 1 <= start <= len(nodes):
        return head
    first, stop = _segment(len(nodes), start, end)
    return _link(nodes[:first] + nodes[stop:] + nodes[first:stop])


def end_difference(head: Optional[Node]) -> int:
    """Absolute difference between the first and last values."""
    if head is None:
        raise ValueError("list is empty")
    last = head
    for last in _iter_nodes(head):
        pass
    return abs(head.val - last.val)