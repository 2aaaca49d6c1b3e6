"""
Shaker (cocktail) sort: bidirectional bubble sort over shrinking bounds.

Each round runs a forward pass that carries the largest unsorted element to
the right bound, then a backward pass that carries the smallest one to the
left bound. A forward pass without swaps means the remaining range is already
ordered, so the sort stops there.
"""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.abstract import DEFAULT_COMPARATOR, AbstractSortStrategy, Comparator, T


def shaker_sort(items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
    """
    Sort ``items`` in place.

    Only strict violations (``comp(right, left)``) cause a swap, which keeps
    equivalent elements in their original relative order.
    """
    left = 0
    right = len(items) - 1

    while left < right:
        swapped = False
        for i in range(left, right):
            if comp(items[i + 1], items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        right -= 1
        if not swapped:
            break

        for i in range(right, left, -1):
            if comp(items[i], items[i - 1]):
                items[i], items[i - 1] = items[i - 1], items[i]
        left += 1


class ShakerSortStrategy(AbstractSortStrategy):
    name: str = "shaker_sort"
    description: str = "Cocktail shaker sort with early exit on a clean forward pass (stable, O(N^2))."
    output_dir_name: str = "shaker"
    quadratic: bool = True

    def sort(self, items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
        shaker_sort(items, comp)


__all__ = ["ShakerSortStrategy", "shaker_sort"]
