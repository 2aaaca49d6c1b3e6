"""
Orchestrator for timing sorting algorithms over growing datasets and persisting results.

Usage (example from CLI):
    from sortbench.orchestrator import RunConfig, run_benchmarks

    results = run_benchmarks(RunConfig(algorithm_names=["merge_sort", "builtin_sort"]))
    print(results)

Outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)

Sorted datasets land in `<output_dir>/<algorithm dir>/dataset_<i>.csv`.
"""

from __future__ import annotations

import json
import math
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from sortbench.algorithms.abstract import Comparator, SortStrategy
from sortbench.algorithms.builtin import BuiltinSortStrategy
from sortbench.algorithms.insertion import InsertionSortStrategy
from sortbench.algorithms.merge import MergeSortStrategy
from sortbench.algorithms.shaker import ShakerSortStrategy
from sortbench.config import FailurePolicy, get_settings
from sortbench.domain.models import Record, record_less
from sortbench.infrastructure.datasets import DatasetError, DatasetStore, prepare_output_tree
from sortbench.utils.logging import get_logger
from sortbench.utils.profiler import profile_block

log = get_logger(__name__)

Loader = Callable[[int], List[Record]]
Writer = Callable[[int, Sequence[Record]], Any]
Clock = Callable[[], float]

PLOTS_DIR_NAME = "plots"


class TimingSample(NamedTuple):
    size: int
    elapsed_seconds: float


@dataclass
class SeriesResult:
    """
    Index-aligned timing series for one algorithm.

    ``indices[k]``, ``sizes[k]`` and ``times[k]`` describe the same dataset.
    Datasets that failed under the tolerant policy appear only in ``failures``.
    """

    algorithm: str
    indices: List[int] = field(default_factory=list)
    sizes: List[int] = field(default_factory=list)
    times: List[float] = field(default_factory=list)
    failures: List[Dict[str, Any]] = field(default_factory=list)

    def append(self, index: int, sample: TimingSample) -> None:
        self.indices.append(index)
        self.sizes.append(sample.size)
        self.times.append(sample.elapsed_seconds)

    @property
    def samples(self) -> List[TimingSample]:
        return [TimingSample(s, t) for s, t in zip(self.sizes, self.times)]

    @property
    def ok(self) -> bool:
        return not self.failures


def _round_float(value: float, decimals: int = 6) -> float:
    """Round a float for human-readable output."""
    return round(value, decimals)


def estimate_growth(sizes: Sequence[int], times: Sequence[float]) -> Tuple[str, float]:
    """
    Pick the growth class (n, n log n, n^2) whose least-squares fit explains
    the timings best.

    Returns the class label and its R^2. With fewer than three points, or
    timings without any variance, ``("unknown", 0.0)`` is returned.
    """
    points = [(s, t) for s, t in zip(sizes, times) if s > 0]
    if len(points) < 3:
        return ("unknown", 0.0)
    actual = [t for _, t in points]
    mean = sum(actual) / len(actual)
    ss_tot = sum((a - mean) ** 2 for a in actual)
    if ss_tot == 0:
        return ("unknown", 0.0)

    def r_squared(xs: List[float]) -> float:
        n = len(xs)
        sx, sy = sum(xs), sum(actual)
        sxy = sum(x * y for x, y in zip(xs, actual))
        sxx = sum(x * x for x in xs)
        d = n * sxx - sx * sx
        if abs(d) < 1e-12:
            return 0.0
        slope = (n * sxy - sx * sy) / d
        intercept = (sy * sxx - sx * sxy) / d
        ss_res = sum((a - (slope * x + intercept)) ** 2 for x, a in zip(xs, actual))
        return 1 - ss_res / ss_tot

    candidates = [
        ("O(n)", r_squared([float(s) for s, _ in points])),
        ("O(n log n)", r_squared([s * math.log(s) if s > 1 else 0.0 for s, _ in points])),
        ("O(n^2)", r_squared([float(s * s) for s, _ in points])),
    ]
    label, score = max(candidates, key=lambda c: c[1])
    return (label, _round_float(score, 4))


def _strategy_factories() -> Dict[str, Callable[[], SortStrategy]]:
    """Registry of available sorting algorithms."""
    return {
        "insertion_sort": lambda: InsertionSortStrategy(),
        "shaker_sort": lambda: ShakerSortStrategy(),
        "merge_sort": lambda: MergeSortStrategy(),
        "builtin_sort": lambda: BuiltinSortStrategy(),
    }


def available_algorithms() -> List[str]:
    """List available algorithm names."""
    return sorted(_strategy_factories().keys())


def _resolve_strategy(name: str) -> SortStrategy:
    factories = _strategy_factories()
    if name not in factories:
        raise ValueError(f"Unknown algorithm '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def time_sort(
    strategy: SortStrategy,
    records: List[Record],
    comp: Comparator = record_less,
    clock: Clock = time.perf_counter,
) -> float:
    """
    Sort ``records`` in place with ``strategy`` and return the elapsed seconds.

    Only the sort call sits between the two clock readings.
    """
    start = clock()
    strategy.sort(records, comp)
    finish = clock()
    return max(0.0, finish - start)


def measure_series(
    strategy: SortStrategy,
    dataset_count: int,
    loader: Loader,
    writer: Optional[Writer] = None,
    comp: Comparator = record_less,
    clock: Clock = time.perf_counter,
    failure_policy: FailurePolicy = "tolerant",
) -> SeriesResult:
    """
    Time ``strategy`` on datasets ``1..dataset_count`` in order.

    Parameters
    ----------
    strategy : SortStrategy
        Algorithm under test.
    dataset_count : int
        Number of dataset indices to process.
    loader : Callable[[int], list[Record]]
        Returns a fresh collection for a dataset index.
    writer : Callable[[int, Sequence[Record]], Any], optional
        Receives each sorted collection keyed by its dataset index.
    comp : Comparator
        Ordering handed to the algorithm.
    clock : Callable[[], float]
        Monotonic time source in seconds.
    failure_policy : "tolerant" | "strict"
        Tolerant records a failing index and moves on; strict re-raises.

    Returns
    -------
    SeriesResult
        Index-aligned sizes and elapsed times, plus any recorded failures.

    Raises
    ------
    DatasetError
        Under the strict policy, on the first dataset that cannot be read or written.
    """
    if dataset_count < 0:
        raise ValueError("dataset_count must be nonnegative")
    if failure_policy not in ("tolerant", "strict"):
        raise ValueError(f"Unknown failure policy '{failure_policy}'")

    series = SeriesResult(algorithm=strategy.name)
    for index in range(1, dataset_count + 1):
        try:
            records = loader(index)
            elapsed = time_sort(strategy, records, comp, clock)
            if writer is not None:
                writer(index, records)
        except DatasetError as exc:
            if failure_policy == "strict":
                log.error(
                    f"{strategy.name}: dataset_n={index} failed",
                    extra={"algorithm": strategy.name, "dataset": index, "error": str(exc)},
                )
                raise
            log.exception(
                f"{strategy.name}: dataset_n={index} failed; continuing",
                extra={"algorithm": strategy.name, "dataset": index},
            )
            series.failures.append(
                {
                    "dataset": index,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                    "path": str(exc.path) if exc.path is not None else None,
                }
            )
            continue

        series.append(index, TimingSample(len(records), elapsed))
        log.info(
            f"{strategy.name}: dataset_n={index} size={len(records)} time={elapsed:.6f}",
            extra={
                "algorithm": strategy.name,
                "dataset": index,
                "size": len(records),
                "elapsed_seconds": elapsed,
            },
        )

    return series


def _summarize_series(series: SeriesResult) -> dict:
    growth, r2 = estimate_growth(series.sizes, series.times)
    summary: Dict[str, Any] = {
        "algorithm": series.algorithm,
        "datasets": series.indices,
        "sizes": series.sizes,
        "times": [_round_float(t) for t in series.times],
        "failures": series.failures,
        "total_seconds": _round_float(sum(series.times)),
        "largest_size": max(series.sizes) if series.sizes else 0,
        "growth": growth,
        "growth_r2": r2,
    }
    return summary


def _persist_results(payload: dict, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    with latest_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    with archive_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return latest_path


@dataclass
class RunConfig:
    """
    Options for one benchmark run. ``None`` fields fall back to settings.

    ``datasets`` overrides the per-algorithm dataset count (quadratic
    algorithms otherwise use ``benchmark_quadratic_datasets``).
    """

    algorithm_names: Optional[Iterable[str]] = None
    datasets: Optional[int] = None
    input_dir: Optional[Path] = None
    output_dir: Optional[Path] = None
    results_dir: Optional[Path] = None
    failure_policy: Optional[FailurePolicy] = None
    warmup: Optional[bool] = None
    persist: bool = True
    write_sorted: bool = True
    clock: Clock = time.perf_counter


def _resolve_names(algorithm_names: Optional[Iterable[str]]) -> List[str]:
    names = list(algorithm_names) if algorithm_names is not None else ["all"]
    if not names:
        return available_algorithms()
    expanded: List[str] = []
    for name in names:
        expanded.extend(available_algorithms() if name == "all" else [name])
    # Preserve order, drop duplicates.
    return list(dict.fromkeys(expanded))


def _warmup(strategy: SortStrategy, store: DatasetStore) -> None:
    log.info(f"[WARMUP] Starting warmup run for {strategy.name}", extra={"algorithm": strategy.name})
    try:
        records = store.load(1)
    except DatasetError as exc:
        log.warning(
            f"[WARMUP] Failed for {strategy.name}",
            extra={"algorithm": strategy.name, "error": str(exc)},
        )
        return
    strategy.sort(records, record_less)
    log.info(f"[WARMUP] Completed warmup for {strategy.name}", extra={"algorithm": strategy.name})


def run_benchmarks(config: Optional[RunConfig] = None) -> List[dict]:
    """
    Run one timing series per selected algorithm and optionally persist the results.

    Parameters
    ----------
    config : RunConfig | None
        Run options. Defaults to every algorithm with settings-driven values.

    Returns
    -------
    List[dict]
        One summary per algorithm: sizes, times, failures, fitted growth class
        and profiler stats for the whole series.
    """
    config = config or RunConfig()
    settings = get_settings()
    input_dir = Path(config.input_dir or settings.data_input_dir)
    output_dir = Path(config.output_dir or settings.data_output_dir)
    results_dir = Path(config.results_dir or settings.results_dir)
    policy: FailurePolicy = config.failure_policy or settings.benchmark_failure_policy
    warmup = settings.benchmark_warmup if config.warmup is None else config.warmup

    names = _resolve_names(config.algorithm_names)
    strategies = [_resolve_strategy(name) for name in names]

    if config.write_sorted:
        prepare_output_tree(
            output_dir, [s.output_dir_name for s in strategies] + [PLOTS_DIR_NAME]
        )
    store = DatasetStore(input_dir, output_dir if config.write_sorted else None)

    results: List[dict] = []
    for strategy in strategies:
        count = config.datasets or settings.datasets_for(strategy.quadratic)
        log.info(f"{'=' * 60}")
        log.info(
            f"[SERIES START] {strategy.name.upper()}",
            extra={"algorithm": strategy.name, "datasets": count, "failure_policy": policy},
        )
        log.info(f"{'=' * 60}")

        if warmup:
            _warmup(strategy, store)

        with profile_block(strategy.name) as stats:
            series = measure_series(
                strategy,
                count,
                loader=store.load,
                writer=partial(store.write, strategy.output_dir_name),
                clock=config.clock,
                failure_policy=policy,
            )

        summary = _summarize_series(series)
        summary["description"] = strategy.description
        summary["profile"] = stats.to_dict()
        results.append(summary)
        log.info(
            f"[SERIES COMPLETE] {strategy.name.upper()}",
            extra={
                "algorithm": strategy.name,
                "samples": len(series.sizes),
                "failures": len(series.failures),
                "total_seconds": summary["total_seconds"],
                "growth": summary["growth"],
            },
        )

    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "algorithms": names,
        "failure_policy": policy,
        "input_dir": str(input_dir),
        "results": results,
    }

    if config.persist:
        _persist_results(payload, results_dir)

    failed = sum(len(r["failures"]) for r in results)
    log.info(
        f"[ORCHESTRATOR COMPLETE] {len(names)} algorithm(s) executed, {failed} dataset failure(s)",
        extra={"algorithms": names, "dataset_failures": failed},
    )

    return results


__all__ = [
    "RunConfig",
    "SeriesResult",
    "TimingSample",
    "available_algorithms",
    "estimate_growth",
    "measure_series",
    "run_benchmarks",
    "time_sort",
]
