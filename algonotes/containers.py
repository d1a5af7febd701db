"""Stack, queue and growable array containers."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_STACK_CAPACITY = 100


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class ArrayStack(Generic[T]):
    """Stack with a fixed maximum number of elements."""

    def __init__(self, capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        if self.is_full():
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> T:
        if self.is_empty():
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        return reversed(self._items)


class LinkedStack(Generic[T]):
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next


class LinkedQueue(Generic[T]):
    """FIFO queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node[T]] = None
        self._rear: Optional[_Node[T]] = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        if self._front is None:
            raise IndexError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> T:
        if self._front is None:
            raise IndexError("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next


class Vector(Generic[T]):
    """Growable array that doubles its capacity when full."""

    def __init__(self) -> None:
        self._capacity = 1
        self._slots: list[Any] = [None] * self._capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def _grow(self) -> None:
        self._capacity *= 2
        self._slots = self._slots[: self._size] + [None] * (self._capacity - self._size)

    def push_back(self, value: T) -> None:
        if self._size == self._capacity:
            self._grow()
        self._slots[self._size] = value
        self._size += 1

    def pop_back(self) -> None:
        """Drop the last element; does nothing when empty."""
        if self._size > 0:
            self._size -= 1
            self._slots[self._size] = None

    def __getitem__(self, index: int) -> T:
        position = operator.index(index)
        if not 0 <= position < self._size:
            raise IndexError("Index out of range")
        return self._slots[position]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[: self._size])

    def is_empty(self) -> bool:
        return self._size == 0