"""Stacks and queues built on lists, linked nodes and on each other."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional

DEFAULT_CAPACITY = 100


class ArrayStack:
    """Stack with a fixed capacity, stored in a list."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) >= self._capacity:
            raise OverflowError("No more space in stack")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("No element to pop")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class ArrayQueue:
    """Queue stored in a fixed number of slots.

    Slots are never reused, so the capacity limits the total number of
    pushes over the queue's lifetime, not just the elements held at once.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    def push(self, value: int) -> None:
        if len(self._slots) >= self._capacity:
            raise OverflowError("Queue overflow")
        self._slots.append(value)

    def pop(self) -> int:
        if self.empty():
            raise IndexError("No elements in queue")
        value = self._slots[self._front]
        self._front += 1
        return value

    def peek(self) -> int:
        if self.empty():
            raise IndexError("No elements in queue")
        return self._slots[self._front]

    def empty(self) -> bool:
        return self._front >= len(self._slots)

    def __len__(self) -> int:
        return len(self._slots) - self._front


@dataclass(slots=True)
class _QueueNode:
    value: int
    next: Optional[_QueueNode] = None


class LinkedQueue:
    """Queue made of singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_QueueNode] = None
        self._tail: Optional[_QueueNode] = None
        self._size = 0

    def push(self, value: int) -> None:
        node = _QueueNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        if self._head is None:
            raise IndexError("Empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> int:
        if self._head is None:
            raise IndexError("Empty queue")
        return self._head.value

    def empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """Queue on two stacks, keeping the front on top; pushing is costly."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def push(self, value: int) -> None:
        buffer: list[int] = []
        while self._stack:
            buffer.append(self._stack.pop())
        buffer.append(value)
        while buffer:
            self._stack.append(buffer.pop())

    def pop(self) -> int:
        if not self._stack:
            raise IndexError("empty queue")
        return self._stack.pop()

    def peek(self) -> int:
        if not self._stack:
            raise IndexError("empty queue")
        return self._stack[-1]

    def empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)


class RecursiveStackQueue:
    """Queue on a single stack; popping reaches the bottom by recursion."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def push(self, value: int) -> None:
        self._stack.append(value)

    def pop(self) -> int:
        if not self._stack:
            raise IndexError("empty queue")
        top = self._stack.pop()
        if not self._stack:
            return top
        item = self.pop()
        self._stack.append(top)
        return item

    def empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)


class PushCostlyStack:
    """Stack on two queues that reorders on every push."""

    def __init__(self) -> None:
        self._primary: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, value: int) -> None:
        self._spare.append(value)
        while self._primary:
            self._spare.append(self._primary.popleft())
        self._primary, self._spare = self._spare, self._primary

    def pop(self) -> int:
        if not self._primary:
            raise IndexError("Empty stack")
        return self._primary.popleft()

    def top(self) -> int:
        if not self._primary:
            raise IndexError("Empty stack")
        return self._primary[0]

    def empty(self) -> bool:
        return not self._primary

    def __len__(self) -> int:
        return len(self._primary)


class PopCostlyStack:
    """Stack on two queues that reorders on every pop."""

    def __init__(self) -> None:
        self._primary: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, value: int) -> None:
        self._primary.append(value)

    def pop(self) -> int:
        if not self._primary:
            raise IndexError("Empty stack")
        while len(self._primary) > 1:
            self._spare.append(self._primary.popleft())
        value = self._primary.popleft()
        self._primary, self._spare = self._spare, self._primary
        return value

    def top(self) -> int:
        if not self._primary:
            raise IndexError("Empty stack")
        return self._primary[-1]

    def empty(self) -> bool:
        return not self._primary

    def __len__(self) -> int:
        return len(self._primary)