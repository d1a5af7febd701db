"""Small puzzle solutions over sequences, strings and records."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from math import prod
from typing import TypeVar

T = TypeVar("T")


def running_medians(numbers: Iterable[int]) -> list[int]:
    """Median of every odd-length prefix of numbers."""
    lower: list[int] = []  # max-heap through negation
    upper: list[int] = []
    medians: list[int] = []
    for count, number in enumerate(numbers, start=1):
        if not lower or number <= -lower[0]:
            heapq.heappush(lower, -number)
        else:
            heapq.heappush(upper, number)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        if count % 2:
            medians.append(-lower[0])
    return medians


def remove_typo(position: int, word: str) -> str:
    """Drop the character at the 1-based position."""
    if not 1 <= position <= len(word):
        raise IndexError("position out of range")
    return word[: position - 1] + word[position:]


def countdown(n: int) -> list[int]:
    """Numbers from n down to 1."""
    return list(range(n, 0, -1))


def min_decrements(scores: Iterable[int]) -> int:
    """Fewest unit decrements that make the scores strictly increasing."""
    levels = list(scores)
    total = 0
    for i in range(len(levels) - 1, 0, -1):
        if levels[i - 1] >= levels[i]:
            total += levels[i - 1] - levels[i] + 1
            levels[i - 1] = levels[i] - 1
    return total


def frequency_sort(numbers: Iterable[T]) -> list[T]:
    """Group equal values, most frequent first, ties by first appearance."""
    counts = Counter(numbers)
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [value for value, count in ordered for _ in range(count)]


def is_right_triangle(a: int, b: int, c: int) -> bool:
    """Whether the three side lengths satisfy the Pythagorean relation."""
    x, y, z = sorted((a, b, c))
    return x * x + y * y == z * z


def parking_walk(positions: Iterable[int]) -> int:
    """Distance of a round trip covering every store position."""
    stores = list(positions)
    if not stores:
        raise ValueError("at least one position is required")
    return (max(stores) - min(stores)) * 2


def apply_ac(commands: str, values: Sequence[T]) -> list[T]:
    """Apply R (reverse) and D (drop first) commands; raise ValueError on dropping from empty."""
    items: deque[T] = deque(values)
    reversed_ = False
    for command in commands:
        if command == "R":
            reversed_ = not reversed_
        elif command == "D":
            if not items:
                raise ValueError("error")
            if reversed_:
                items.pop()
            else:
                items.popleft()
    return list(reversed(items)) if reversed_ else list(items)


def still_in_office(log: Iterable[tuple[str, str]]) -> list[str]:
    """Names whose last record is an entry, in reverse lexicographic order."""
    status: dict[str, str] = {}
    for name, action in log:
        if action in ("enter", "leave"):
            status[name] = action
    return sorted((name for name, action in status.items() if action == "enter"), reverse=True)


def is_vps(text: str) -> bool:
    """Whether text is a correctly nested parenthesis string."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
        else:
            return False
    return depth == 0


def outfit_combinations(items: Iterable[tuple[str, str]]) -> int:
    """Number of non-empty outfits wearing at most one item per category."""
    per_category = Counter(category for _, category in items)
    return prod(count + 1 for count in per_category.values()) - 1