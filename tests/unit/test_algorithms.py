from __future__ import annotations

import array
import random
from collections import Counter

import pytest

from sortbench.algorithms import (
    BuiltinSortStrategy,
    InsertionSortStrategy,
    MergeSortStrategy,
    ShakerSortStrategy,
    SortStrategy,
    builtin_sort,
    insertion_sort,
    merge_sort,
    shaker_sort,
)
from sortbench.domain.models import compare_records, record_less

ALL_SORTS = [insertion_sort, shaker_sort, merge_sort, builtin_sort]
STABLE_SORTS = [insertion_sort, shaker_sort, merge_sort]
SORT_IDS = ["insertion", "shaker", "merge", "builtin"]
STABLE_IDS = ["insertion", "shaker", "merge"]


class _CountingLess:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, a, b) -> bool:
        self.calls += 1
        return a < b


@pytest.mark.parametrize("sort", ALL_SORTS, ids=SORT_IDS)
@pytest.mark.parametrize("size", [2, 3, 17, 64, 101])
def test_sorts_integers_like_builtin_sorted(sort, size) -> None:
    rng = random.Random(size)
    values = [rng.randint(-50, 50) for _ in range(size)]
    expected = sorted(values)

    sort(values)

    assert values == expected


@pytest.mark.parametrize("sort", ALL_SORTS, ids=SORT_IDS)
def test_sorts_records_into_a_permutation_of_the_input(sort, record_factory) -> None:
    records = record_factory(150, seed=3)
    before = Counter(records)

    sort(records, record_less)

    assert Counter(records) == before
    assert all(compare_records(a, b) <= 0 for a, b in zip(records, records[1:]))


@pytest.mark.parametrize("sort", ALL_SORTS, ids=SORT_IDS)
def test_sorting_a_sorted_sequence_is_idempotent(sort, record_factory) -> None:
    records = sorted(record_factory(80, seed=5))
    snapshot = list(records)

    sort(records, record_less)

    assert records == snapshot


@pytest.mark.parametrize("sort", ALL_SORTS, ids=SORT_IDS)
@pytest.mark.parametrize("values", [[], [42]], ids=["empty", "single"])
def test_boundary_inputs_are_untouched_without_comparisons(sort, values) -> None:
    comp = _CountingLess()
    items = list(values)

    sort(items, comp)

    assert items == values
    assert comp.calls == 0


@pytest.mark.parametrize("sort", STABLE_SORTS, ids=STABLE_IDS)
def test_stable_sorts_keep_equivalent_records_in_input_order(sort, record_factory) -> None:
    # Tag each record with its input position through the job field, which
    # does not take part in the ordering.
    records = [
        r.model_copy(update={"job": f"pos-{i:04d}"})
        for i, r in enumerate(record_factory(200, seed=9, salary_span=2))
    ]

    sort(records, record_less)

    for a, b in zip(records, records[1:]):
        if compare_records(a, b) == 0:
            assert a.job < b.job


@pytest.mark.parametrize("sort", ALL_SORTS, ids=SORT_IDS)
def test_custom_comparator_drives_the_order(sort) -> None:
    values = [3, 1, 4, 1, 5, 9, 2, 6]

    sort(values, lambda a, b: a > b)

    assert values == sorted(values, reverse=True)


@pytest.mark.parametrize("sort", ALL_SORTS, ids=SORT_IDS)
def test_comparator_errors_propagate(sort) -> None:
    def broken(a, b) -> bool:
        raise RuntimeError("comparator exploded")

    with pytest.raises(RuntimeError, match="comparator exploded"):
        sort([2, 1, 3], broken)


def test_shaker_sort_stops_after_one_clean_forward_pass() -> None:
    comp = _CountingLess()
    values = list(range(50))

    shaker_sort(values, comp)

    assert comp.calls == len(values) - 1


def test_shaker_sort_handles_small_element_at_the_end() -> None:
    values = [2, 3, 4, 5, 6, 1]

    shaker_sort(values)

    assert values == [1, 2, 3, 4, 5, 6]


def test_insertion_sort_stops_shifting_at_first_smaller_element() -> None:
    comp = _CountingLess()
    values = list(range(30))

    insertion_sort(values, comp)

    assert comp.calls == len(values) - 1


def test_sorts_accept_non_list_mutable_sequences() -> None:
    for sort in ALL_SORTS:
        values = array.array("i", [5, 3, 1, 4, 2])
        sort(values)
        assert list(values) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "strategy_cls, name, quadratic",
    [
        (InsertionSortStrategy, "insertion_sort", True),
        (ShakerSortStrategy, "shaker_sort", True),
        (MergeSortStrategy, "merge_sort", False),
        (BuiltinSortStrategy, "builtin_sort", False),
    ],
)
def test_strategies_expose_protocol_attributes(strategy_cls, name, quadratic, record_factory) -> None:
    strategy = strategy_cls()
    records = record_factory(30, seed=1)

    strategy.sort(records, record_less)

    assert isinstance(strategy, SortStrategy)
    assert strategy.name == name
    assert strategy.quadratic is quadratic
    assert strategy.output_dir_name
    assert records == sorted(records)
