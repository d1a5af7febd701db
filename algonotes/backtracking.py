"""Exhaustive search over subsets and sequences of small ranges."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations, permutations, product


def count_subset_sums(numbers: Iterable[int], target: int) -> int:
    """Number of non-empty subsequences whose elements add up to target."""
    values = list(numbers)
    return sum(
        1
        for size in range(1, len(values) + 1)
        for chosen in combinations(values, size)
        if sum(chosen) == target
    )


def _check(n: int, m: int) -> None:
    if n < 0 or m < 0:
        raise ValueError("n and m must not be negative")


def permutations_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Length-m sequences of distinct numbers from 1..n, in lexicographic order."""
    _check(n, m)
    return list(permutations(range(1, n + 1), m))


def combinations_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Strictly increasing length-m sequences from 1..n, in lexicographic order."""
    _check(n, m)
    return list(combinations(range(1, n + 1), m))


def products_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Length-m sequences from 1..n with repetition, in lexicographic order."""
    _check(n, m)
    return list(product(range(1, n + 1), repeat=m))