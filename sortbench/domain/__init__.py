"""
Domain package for sortbench.

Exports the record model and its ordering used across algorithms and the
benchmark harness. Keep this package focused on data definitions.
"""

from sortbench.domain.models import OrderingKey, Record, compare_records, record_less

__all__ = [
    "OrderingKey",
    "Record",
    "compare_records",
    "record_less",
]
