"""Array-backed binary min-heap with explicit capacity bookkeeping."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


def parent_index(index: int) -> int:
    """Index of the parent slot; the root is its own parent."""
    if index < 0:
        raise ValueError("index must not be negative")
    return (index - 1) // 2 if index > 0 else 0


def left_child_index(index: int) -> int:
    """Index of the left child slot; the right child follows it."""
    if index < 0:
        raise ValueError("index must not be negative")
    return 2 * index + 1


class MinHeap(Generic[T]):
    """Min-heap whose capacity doubles when full and halves when under half used."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._nodes: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, value: T) -> None:
        if len(self._nodes) == self._capacity:
            self._capacity *= 2
        self._nodes.append(value)
        current = len(self._nodes) - 1
        while current > 0:
            parent = parent_index(current)
            if not self._nodes[current] < self._nodes[parent]:  # type: ignore[operator]
                break
            self._swap(current, parent)
            current = parent

    def delete_min(self) -> T:
        """Remove and return the smallest element."""
        if not self._nodes:
            raise IndexError("delete from an empty heap")
        root = self._nodes[0]
        last = self._nodes.pop()
        if self._nodes:
            self._nodes[0] = last
            self._sift_down(0)
        if len(self._nodes) < self._capacity // 2:
            self._capacity //= 2
        return root

    def _sift_down(self, parent: int) -> None:
        size = len(self._nodes)
        while True:
            left = left_child_index(parent)
            if left >= size:
                return
            right = left + 1
            child = left
            if right < size and self._nodes[left] > self._nodes[right]:  # type: ignore[operator]
                child = right
            if not self._nodes[child] < self._nodes[parent]:  # type: ignore[operator]
                return
            self._swap(child, parent)
            parent = child

    def _swap(self, first: int, second: int) -> None:
        nodes = self._nodes
        nodes[first], nodes[second] = nodes[second], nodes[first]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in storage order."""
        return iter(list(self._nodes))