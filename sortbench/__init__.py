"""
sortbench - Benchmarking suite for sorting strategies over record datasets.

This package times and compares four ways of ordering person records by
(unit, full name, salary):

- Insertion sort
- Shaker (cocktail) sort
- Merge sort
- Python's built-in sort as a baseline

Each algorithm is run over a sequence of growing CSV datasets; the harness
collects (size, elapsed seconds) series, writes the sorted datasets, and hands
the series to the reporting layer.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sortbench.algorithms import (
    AbstractSortStrategy,
    Comparator,
    SortStrategy,
    builtin_sort,
    insertion_sort,
    merge,
    merge_sort,
    shaker_sort,
)
from sortbench.config import Settings, get_settings
from sortbench.domain.models import Record, compare_records, record_less
from sortbench.orchestrator import (
    RunConfig,
    SeriesResult,
    available_algorithms,
    measure_series,
    run_benchmarks,
)
from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, profile_block

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "compare_records",
    "record_less",
    # Algorithms
    "AbstractSortStrategy",
    "Comparator",
    "SortStrategy",
    "builtin_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "shaker_sort",
    # Orchestration
    "RunConfig",
    "SeriesResult",
    "available_algorithms",
    "measure_series",
    "run_benchmarks",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]
