from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from sortbench.utils.logging import get_logger

log = get_logger(__name__)

X_LABEL = "Dataset size"
Y_LABEL = "Time to sort (s)"


@dataclass
class ChartSeries:
    label: str
    x: List[int]
    y: List[float]


@dataclass
class ChartSpec:
    """Everything an external plotter needs to draw one comparison chart."""

    name: str
    title: str
    x_label: str = X_LABEL
    y_label: str = Y_LABEL
    series: List[ChartSeries] = field(default_factory=list)


# (file stem, title, algorithms) for each comparison chart.
CHART_LAYOUT: Sequence[tuple[str, str, Sequence[str]]] = (
    (
        "all",
        "Insertion vs shaker vs merge vs builtin sort",
        ("insertion_sort", "shaker_sort", "merge_sort", "builtin_sort"),
    ),
    ("insertion_shaker", "Insertion vs shaker", ("insertion_sort", "shaker_sort")),
    ("merge_builtin", "Merge vs builtin sort", ("merge_sort", "builtin_sort")),
)

LEGEND = {
    "insertion_sort": "insertion",
    "shaker_sort": "shaker",
    "merge_sort": "merge",
    "builtin_sort": "builtin",
}


def comparison_charts(results: List[Dict[str, Any]]) -> List[ChartSpec]:
    """
    Build the comparison chart specs from harness results.

    A chart is emitted only when at least one of its algorithms was run;
    algorithms missing from ``results`` are left out of that chart.
    """
    by_name = {r["algorithm"]: r for r in results}
    charts: List[ChartSpec] = []
    for name, title, algorithms in CHART_LAYOUT:
        series = [
            ChartSeries(
                label=LEGEND.get(algo, algo),
                x=list(by_name[algo]["sizes"]),
                y=list(by_name[algo]["times"]),
            )
            for algo in algorithms
            if algo in by_name
        ]
        if series:
            charts.append(ChartSpec(name=name, title=title, series=series))
    return charts


def write_chart_specs(results: List[Dict[str, Any]], plots_dir: Path | str) -> Optional[Path]:
    """Persist chart specs as ``charts.json`` inside ``plots_dir``; None when nothing to chart."""
    charts = comparison_charts(results)
    if not charts:
        return None
    plots_dir = Path(plots_dir)
    plots_dir.mkdir(parents=True, exist_ok=True)
    target = plots_dir / "charts.json"
    with target.open("w", encoding="utf-8") as f:
        json.dump([asdict(c) for c in charts], f, indent=2)
    log.info("Chart specs written", extra={"path": str(target), "charts": len(charts)})
    return target


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render benchmark results as a rich table, fastest total time first.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(
        title="Sorting Benchmark Results",
        box=box.ROUNDED,
        caption="Sorted by total time (ascending)",
    )

    table.add_column("Algorithm", style="cyan", no_wrap=True)
    table.add_column("Datasets", justify="right", style="blue")
    table.add_column("Largest size", justify="right", style="magenta")
    table.add_column("Time @ largest (s)", justify="right", style="green")
    table.add_column("Total (s)", justify="right", style="bold green")
    table.add_column("Growth\n[dim](R²)[/dim]", justify="right")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")
    table.add_column("Failures", justify="right", style="red")

    for res in sorted(results, key=lambda r: r.get("total_seconds", 0.0)):
        sizes = res.get("sizes") or []
        times = res.get("times") or []
        if sizes:
            largest = max(range(len(sizes)), key=sizes.__getitem__)
            largest_str = f"{sizes[largest]:,}"
            largest_time = f"{times[largest]:.6f}"
        else:
            largest_str = largest_time = "N/A"

        growth = res.get("growth", "unknown")
        growth_str = growth if growth == "unknown" else f"{growth} ({res.get('growth_r2', 0.0):.3f})"

        mem_bytes = (res.get("profile") or {}).get("peak_rss_bytes") or 0
        mem_str = f"{mem_bytes / (1024 * 1024):.2f}" if mem_bytes else "N/A"

        table.add_row(
            res.get("algorithm", "Unknown"),
            str(len(sizes)),
            largest_str,
            largest_time,
            f"{res.get('total_seconds', 0.0):.6f}",
            growth_str,
            mem_str,
            str(len(res.get("failures") or [])),
        )

    console.print(table)

    for res in results:
        for failure in res.get("failures") or []:
            console.print(
                f"[red]{res.get('algorithm')}: dataset_{failure['dataset']} "
                f"{failure['error_type']}: {failure['error']}[/red]"
            )
