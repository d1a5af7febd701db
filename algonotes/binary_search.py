"""Binary search over indices and over answer values."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a binary search: where the target was found and how many probes it took."""

    index: int | None
    probes: int

    @property
    def found(self) -> bool:
        return self.index is not None


def binary_search(values: Sequence[int], target: int) -> SearchResult:
    """Search a sorted sequence for target, counting the midpoints examined."""
    left, right = 0, len(values) - 1
    probes = 0
    while left <= right:
        mid = (left + right) // 2
        probes += 1
        if values[mid] == target:
            return SearchResult(mid, probes)
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return SearchResult(None, probes)


def max_budget_cap(requests: Iterable[int], total: int) -> int:
    """Largest cap such that the sum of min(request, cap) does not exceed total."""
    amounts = list(requests)
    if not amounts:
        raise ValueError("at least one request is required")
    left, right = 0, max(amounts)
    answer = 0
    while left <= right:
        mid = (left + right) // 2
        if sum(min(amount, mid) for amount in amounts) <= total:
            answer = mid
            left = mid + 1
        else:
            right = mid - 1
    return answer


def contains_each(numbers: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For every query, whether it occurs among numbers."""
    ordered = sorted(numbers)

    def present(query: int) -> bool:
        at = bisect_left(ordered, query)
        return at < len(ordered) and ordered[at] == query

    return [present(query) for query in queries]


def max_cut_height(heights: Iterable[int], needed: int) -> int:
    """Highest saw height that still yields at least `needed` wood, or 0 if none does."""
    trees = list(heights)
    if not trees:
        raise ValueError("at least one tree is required")
    left, right = 1, max(trees)
    answer = 0
    while left <= right:
        mid = (left + right) // 2
        wood = sum(tree - mid for tree in trees if tree > mid)
        if wood < needed:
            right = mid - 1
        else:
            answer = max(answer, mid)
            left = mid + 1
    return answer