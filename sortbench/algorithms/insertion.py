"""
Insertion sort: shift each element left past every strictly greater neighbour.

Quadratic in the worst case, so the harness only feeds it the small datasets.
Stable, since elements only move across strictly greater ones.
"""

from __future__ import annotations

from typing import MutableSequence

from sortbench.algorithms.abstract import DEFAULT_COMPARATOR, AbstractSortStrategy, Comparator, T


def insertion_sort(items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
    """
    Sort ``items`` in place with adjacent swaps.

    For every position ``i`` in ``1..N-1`` the element at ``i`` is swapped
    leftward while it compares less than its left neighbour.
    """
    for i in range(1, len(items)):
        j = i
        while j > 0 and comp(items[j], items[j - 1]):
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


class InsertionSortStrategy(AbstractSortStrategy):
    name: str = "insertion_sort"
    description: str = "Insertion sort with adjacent swaps (stable, O(N^2))."
    output_dir_name: str = "insertion"
    quadratic: bool = True

    def sort(self, items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
        insertion_sort(items, comp)


__all__ = ["InsertionSortStrategy", "insertion_sort"]
