from __future__ import annotations

import pytest

from sortbench.algorithms.merge import merge
from sortbench.domain.models import Record, record_less


def test_merge_combines_adjacent_sorted_runs() -> None:
    items = [1, 4, 7, 9, 2, 3, 8]

    merge(items, 0, 4, 4, 7)

    assert items == [1, 2, 3, 4, 7, 8, 9]


def test_merge_only_touches_the_given_window() -> None:
    items = [99, 5, 6, 1, 2, -1]

    merge(items, 1, 3, 3, 5)

    assert items == [99, 1, 2, 5, 6, -1]


def test_merge_prefers_left_run_on_ties() -> None:
    left = [Record(full_name="A", job=f"left-{i}", unit="U1", salary=1) for i in range(2)]
    right = [Record(full_name="A", job=f"right-{i}", unit="U1", salary=1) for i in range(2)]
    items = left + right

    merge(items, 0, 2, 2, 4, record_less)

    assert [r.job for r in items] == ["left-0", "left-1", "right-0", "right-1"]


@pytest.mark.parametrize(
    "items, bounds",
    [
        ([], (0, 0, 0, 0)),
        ([3, 1], (0, 0, 0, 2)),
        ([3, 1], (0, 2, 2, 2)),
    ],
    ids=["both-empty", "left-empty", "right-empty"],
)
def test_merge_with_empty_runs_is_length_preserving(items, bounds) -> None:
    original = list(items)

    merge(items, *bounds)

    assert items == original


def test_merge_reuses_a_caller_supplied_buffer() -> None:
    buffer = [None] * 10
    items = [5, 6, 1, 2]

    merge(items, 0, 2, 2, 4, buffer=buffer)

    assert items == [1, 2, 5, 6]
    assert buffer[:4] == [1, 2, 5, 6]


def test_merge_rejects_small_buffer() -> None:
    with pytest.raises(ValueError, match="buffer too small"):
        merge([2, 1], 0, 1, 1, 2, buffer=[None])


@pytest.mark.parametrize(
    "bounds",
    [(0, 2, 3, 4), (2, 1, 1, 4), (0, 2, 2, 9), (-1, 2, 2, 4)],
    ids=["gap", "inverted", "past-end", "negative"],
)
def test_merge_rejects_invalid_ranges(bounds) -> None:
    with pytest.raises(ValueError, match="adjacent ranges"):
        merge([1, 2, 3, 4], *bounds)
