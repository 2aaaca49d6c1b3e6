from __future__ import annotations

import json
import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from sortbench.config import get_settings
from sortbench.infrastructure.datasets import DatasetError
from sortbench.orchestrator import PLOTS_DIR_NAME, RunConfig, available_algorithms, run_benchmarks
from sortbench.reporter import print_results, write_chart_specs
from sortbench.utils.logging import configure_logging

app = typer.Typer(help="Sorting algorithm benchmark CLI.")


class PolicyChoice(str, Enum):
    tolerant = "tolerant"
    strict = "strict"



@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"in={settings.data_input_dir} out={settings.data_output_dir} "
        f"results={settings.results_dir} | datasets={settings.benchmark_datasets} "
        f"quadratic_datasets={settings.benchmark_quadratic_datasets} "
        f"policy={settings.benchmark_failure_policy}"
    )


@app.command("list")
def list_algorithms() -> None:
    """
    List available algorithm names.
    """
    typer.echo("Available algorithms: " + ", ".join(available_algorithms()))


@app.command()
def run(
    algorithm: Optional[List[str]] = typer.Option(
        None,
        "--algorithm",
        "--algorithms",
        "-a",
        help="Algorithm to run; repeat for several (insertion_sort, shaker_sort, merge_sort, builtin_sort, all).",
    ),
    datasets: Optional[int] = typer.Option(
        None,
        "--datasets",
        "-n",
        min=1,
        help="Override number of datasets per algorithm (default from settings).",
    ),
    input_dir: Optional[Path] = typer.Option(
        None,
        "--input-dir",
        "-i",
        help="Directory holding dataset_<i>.csv files.",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Output tree for sorted datasets and chart specs (wiped before the run).",
    ),
    policy: Optional[PolicyChoice] = typer.Option(
        None,
        "--policy",
        case_sensitive=False,
        help="Dataset failure policy: tolerant (record and continue) or strict (abort).",
    ),
    warmup: bool = typer.Option(
        False,
        "--warmup",
        help="Sort the first dataset once, untimed, before each series.",
    ),
    persist: bool = typer.Option(
        True,
        "--persist/--no-persist",
        help="Write results JSON to the results directory.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print raw results as JSON instead of a table.",
    ),
) -> None:
    """
    Time the selected algorithms over the datasets and persist results.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    names = algorithm or ["all"]
    effective_output = output_dir or settings.data_output_dir
    typer.echo(f"Running algorithms={', '.join(names)} (datasets={datasets or 'settings'}).")

    try:
        results = run_benchmarks(
            RunConfig(
                algorithm_names=names,
                datasets=datasets,
                input_dir=input_dir,
                output_dir=effective_output,
                failure_policy=policy.value if policy is not None else None,
                warmup=warmup or None,
                persist=persist,
            )
        )
    except (DatasetError, ValueError) as exc:
        typer.echo(f"Benchmark failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    write_chart_specs(results, Path(effective_output) / PLOTS_DIR_NAME)

    if as_json:
        typer.echo(json.dumps(results, indent=2))
    else:
        print_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
