"""
Merge sort and the two-way merge primitive it is built on.

`merge` combines two adjacent sorted ranges of one backing sequence through a
scratch buffer; `merge_sort` halves the range recursively and allocates a
single buffer of size N that every merge call reuses.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional

from sortbench.algorithms.abstract import DEFAULT_COMPARATOR, AbstractSortStrategy, Comparator, T


def merge(
    items: MutableSequence[T],
    l_first: int,
    l_last: int,
    r_first: int,
    r_last: int,
    comp: Comparator = DEFAULT_COMPARATOR,
    buffer: Optional[List[T]] = None,
) -> None:
    """
    Merge the sorted ranges ``[l_first, l_last)`` and ``[r_first, r_last)``.

    The ranges must be adjacent (``l_last == r_first``). On ties the element
    from the left range is taken first, so the merge is stable. The merged
    run is copied back over ``[l_first, r_last)``.

    Parameters
    ----------
    items : MutableSequence
        Backing sequence holding both ranges.
    l_first, l_last, r_first, r_last : int
        Half-open bounds of the left and right runs.
    comp : Comparator
        Strict "less" relation.
    buffer : list, optional
        Scratch space with at least ``r_last - l_first`` slots. A fresh list is
        used when omitted.

    Raises
    ------
    ValueError
        If the ranges are inverted, out of bounds or not adjacent.
    """
    if not (0 <= l_first <= l_last == r_first <= r_last <= len(items)):
        raise ValueError(
            f"merge expects adjacent ranges within bounds, got "
            f"[{l_first}, {l_last}) and [{r_first}, {r_last}) for length {len(items)}"
        )

    total = r_last - l_first
    if buffer is None:
        buffer = [None] * total  # type: ignore[list-item]
    elif len(buffer) < total:
        raise ValueError(f"merge buffer too small: need {total}, got {len(buffer)}")

    i, j, k = l_first, r_first, 0
    while i < l_last and j < r_last:
        if comp(items[j], items[i]):
            buffer[k] = items[j]
            j += 1
        else:
            buffer[k] = items[i]
            i += 1
        k += 1

    while i < l_last:
        buffer[k] = items[i]
        i += 1
        k += 1

    while j < r_last:
        buffer[k] = items[j]
        j += 1
        k += 1

    for k in range(total):
        items[l_first + k] = buffer[k]


def _merge_sort_range(
    items: MutableSequence[T], first: int, last: int, comp: Comparator, buffer: List[T]
) -> None:
    if last - first <= 1:
        return

    mid = first + (last - first) // 2
    _merge_sort_range(items, first, mid, comp, buffer)
    _merge_sort_range(items, mid, last, comp, buffer)
    merge(items, first, mid, mid, last, comp, buffer)


def merge_sort(items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
    """Sort ``items`` in place with top-down merge sort (stable, O(N log N))."""
    n = len(items)
    if n <= 1:
        return
    buffer: List[T] = [None] * n  # type: ignore[list-item]
    _merge_sort_range(items, 0, n, comp, buffer)


class MergeSortStrategy(AbstractSortStrategy):
    name: str = "merge_sort"
    description: str = "Top-down merge sort with a shared scratch buffer (stable, O(N log N))."
    output_dir_name: str = "merge"
    quadratic: bool = False

    def sort(self, items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
        merge_sort(items, comp)


__all__ = ["MergeSortStrategy", "merge", "merge_sort"]
