"""
Algorithms package for sortbench.

This module re-exports the abstract interfaces and the concrete sorting
strategies so downstream code can import from `sortbench.algorithms` directly.
"""

from sortbench.algorithms.abstract import (
    DEFAULT_COMPARATOR,
    AbstractSortStrategy,
    Comparator,
    SortStrategy,
)
from sortbench.algorithms.builtin import BuiltinSortStrategy, builtin_sort
from sortbench.algorithms.insertion import InsertionSortStrategy, insertion_sort
from sortbench.algorithms.merge import MergeSortStrategy, merge, merge_sort
from sortbench.algorithms.shaker import ShakerSortStrategy, shaker_sort

__all__ = [
    # Abstracts
    "AbstractSortStrategy",
    "Comparator",
    "DEFAULT_COMPARATOR",
    "SortStrategy",
    # Concrete strategies
    "BuiltinSortStrategy",
    "InsertionSortStrategy",
    "MergeSortStrategy",
    "ShakerSortStrategy",
    # Plain functions
    "builtin_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "shaker_sort",
]
