from pathlib import Path
from time import sleep

from sortbench import config
from sortbench.orchestrator import available_algorithms
from sortbench.utils import profiler

DEFAULT_DATASETS = 15
DEFAULT_QUADRATIC_DATASETS = 6


def test_get_settings_defaults(monkeypatch):
    for name in (
        "DATA_INPUT_DIR",
        "DATA_OUTPUT_DIR",
        "RESULTS_DIR",
        "BENCHMARK_DATASETS",
        "BENCHMARK_QUADRATIC_DATASETS",
        "BENCHMARK_FAILURE_POLICY",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.data_input_dir == Path("data/in")
    assert settings.data_output_dir == Path("data/out")
    assert settings.benchmark_datasets == DEFAULT_DATASETS
    assert settings.benchmark_quadratic_datasets == DEFAULT_QUADRATIC_DATASETS
    assert settings.benchmark_failure_policy == "tolerant"
    assert settings.datasets_for(quadratic=True) == DEFAULT_QUADRATIC_DATASETS
    assert settings.datasets_for(quadratic=False) == DEFAULT_DATASETS


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("BENCHMARK_DATASETS", "3")
    monkeypatch.setenv("BENCHMARK_FAILURE_POLICY", "strict")
    settings = config.get_settings()
    assert settings.benchmark_datasets == 3
    assert settings.benchmark_failure_policy == "strict"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is not None and stats.peak_rss_bytes > 0
    assert isinstance(stats.cpu_percent, float)
    assert stats.to_dict()["label"] == "sleep"


def test_profile_block_traces_python_allocations():
    with profiler.profile_block("alloc", enable_tracemalloc=True) as stats:
        data = [str(i) for i in range(10_000)]
    assert data
    assert stats.peak_traced_bytes is not None and stats.peak_traced_bytes > 0


def test_available_algorithms_contains_known_entries():
    names = available_algorithms()
    assert names == sorted(names)
    assert set(names) == {"insertion_sort", "shaker_sort", "merge_sort", "builtin_sort"}
