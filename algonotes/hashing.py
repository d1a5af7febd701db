"""Hash functions and two simple hash tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

V = TypeVar("V")


def _check_size(table_size: int) -> None:
    if table_size < 1:
        raise ValueError("table size must be positive")


def division_hash(key: int, table_size: int) -> int:
    """Division method: the key's remainder modulo the table size."""
    _check_size(table_size)
    return key % table_size


def shift_hash(key: str, table_size: int) -> int:
    """Fold a string by adding each character to the value shifted left by three bits."""
    _check_size(table_size)
    value = 0
    for char in key:
        value += (value << 3) + ord(char)
    return value % table_size


class DirectHashTable(Generic[V]):
    """Open table with one slot per hash; a colliding key replaces the previous one."""

    def __init__(self, table_size: int) -> None:
        _check_size(table_size)
        self.table_size = table_size
        self._slots: list[Optional[tuple[int, V]]] = [None] * table_size

    def set(self, key: int, value: V) -> None:
        self._slots[division_hash(key, self.table_size)] = (key, value)

    def get(self, key: int) -> V:
        slot = self._slots[division_hash(key, self.table_size)]
        if slot is None or slot[0] != key:
            raise KeyError(key)
        return slot[1]


@dataclass
class _Entry(Generic[V]):
    key: str
    value: V
    next: Optional["_Entry[V]"] = None


class ChainedHashTable(Generic[V]):
    """Hash table that resolves collisions with linked chains, newest first."""

    def __init__(self, table_size: int) -> None:
        _check_size(table_size)
        self.table_size = table_size
        self._chains: list[Optional[_Entry[V]]] = [None] * table_size
        self._size = 0

    def _find(self, key: str) -> Optional[_Entry[V]]:
        entry = self._chains[shift_hash(key, self.table_size)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def set(self, key: str, value: V) -> None:
        existing = self._find(key)
        if existing is not None:
            existing.value = value
            return
        index = shift_hash(key, self.table_size)
        self._chains[index] = _Entry(key, value, self._chains[index])
        self._size += 1

    def get(self, key: str) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __len__(self) -> int:
        return self._size