"""
Domain models for sortbench.

Defines the person record stored in the benchmark datasets and the single
ordering rule every sorting algorithm relies on. Records are ordered by
``(unit, full_name, salary)``; the four relational operators are all derived
from :func:`compare_records` so they can never disagree.
"""
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field

OrderingKey = Tuple[str, str, int]


class Record(BaseModel):
    """
    Representation of a single dataset line (``full_name,job,unit,salary``).
    """

    full_name: str = Field(..., description="Identifier of the person.")
    job: str = Field(..., description="Role held by the person.")
    unit: str = Field(..., description="Group / unit the person belongs to.")
    salary: int = Field(..., description="Numeric compensation.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def ordering_key(self) -> OrderingKey:
        return (self.unit, self.full_name, self.salary)

    def __lt__(self, other: Record) -> bool:
        return compare_records(self, other) < 0

    def __gt__(self, other: Record) -> bool:
        return compare_records(self, other) > 0

    def __le__(self, other: Record) -> bool:
        return compare_records(self, other) <= 0

    def __ge__(self, other: Record) -> bool:
        return compare_records(self, other) >= 0

    def as_row(self) -> list[str]:
        """Field values in dataset column order."""
        return [self.full_name, self.job, self.unit, str(self.salary)]


def compare_records(a: Record, b: Record) -> int:
    """
    Three-way comparison of two records by ``(unit, full_name, salary)``.

    Returns -1, 0 or 1. A result of 0 means the records are equivalent for
    ordering purposes, even if their ``job`` fields differ.
    """
    ka = a.ordering_key
    kb = b.ordering_key
    if ka < kb:
        return -1
    if kb < ka:
        return 1
    return 0


def record_less(a: Record, b: Record) -> bool:
    """Default comparator handed to the sorting algorithms."""
    return compare_records(a, b) < 0


__all__ = ["OrderingKey", "Record", "compare_records", "record_less"]
