"""
Baseline strategy: Python's built-in Timsort driven by the same comparator.

Intended as the reference point the hand-written algorithms are compared
against. The boolean "less" comparator is lifted to a three-way one for
`functools.cmp_to_key`.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, MutableSequence

from sortbench.algorithms.abstract import DEFAULT_COMPARATOR, AbstractSortStrategy, Comparator, T


def _three_way(comp: Comparator) -> Callable[[Any, Any], int]:
    def cmp(a: Any, b: Any) -> int:
        if comp(a, b):
            return -1
        if comp(b, a):
            return 1
        return 0

    return cmp


def builtin_sort(items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
    """Sort ``items`` in place with the interpreter's general-purpose sort."""
    if len(items) <= 1:
        return
    key = cmp_to_key(_three_way(comp))
    if isinstance(items, list):
        items.sort(key=key)
    else:
        for i, value in enumerate(sorted(items, key=key)):
            items[i] = value


class BuiltinSortStrategy(AbstractSortStrategy):
    name: str = "builtin_sort"
    description: str = "list.sort (Timsort) with the record comparator as baseline."
    output_dir_name: str = "sort"
    quadratic: bool = False

    def sort(self, items: MutableSequence[T], comp: Comparator = DEFAULT_COMPARATOR) -> None:
        builtin_sort(items, comp)


__all__ = ["BuiltinSortStrategy", "builtin_sort"]
