"""
Pytest configuration for sortbench.

Provides fixtures for:
- Settings isolation (cache reset + tmp_path-backed directories)
- Deterministic synthetic records
- Synthetic dataset files on disk
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from sortbench.config import Settings, get_settings
from sortbench.domain.models import Record
from sortbench.infrastructure.datasets import dataset_path, write_csv

UNITS = ["U1", "U2", "U3", "HQ"]
NAMES = ["Ivanov I.I.", "Petrov P.P.", "Sidorov S.S.", "Smirnov A.A.", "Kuznetsov K.K."]
JOBS = ["private", "sergeant", "lieutenant", "captain"]

DATASET_SIZES = (10, 100, 1000)


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Ensure every test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings pointing every directory at tmp_path.

    Applied through environment variables so get_settings() picks them up.
    """
    monkeypatch.setenv("DATA_INPUT_DIR", str(tmp_path / "data" / "in"))
    monkeypatch.setenv("DATA_OUTPUT_DIR", str(tmp_path / "data" / "out"))
    monkeypatch.setenv("RESULTS_DIR", str(tmp_path / "results"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def record_factory() -> Callable[..., List[Record]]:
    """
    Build deterministic pseudo-random records.

    Small value pools make equivalent ordering keys (and therefore stability
    checks) likely.
    """

    def make(count: int, seed: int = 42, salary_span: int = 5) -> List[Record]:
        rng = random.Random(seed)
        return [
            Record(
                full_name=rng.choice(NAMES),
                job=rng.choice(JOBS),
                unit=rng.choice(UNITS),
                salary=1000 * rng.randint(1, salary_span),
            )
            for _ in range(count)
        ]

    return make


@pytest.fixture
def dataset_dir(test_settings: Settings, record_factory: Callable[..., List[Record]]) -> Path:
    """
    Write datasets of sizes 10, 100 and 1000 as dataset_1..dataset_3.

    Returns the input directory.
    """
    input_dir = Path(test_settings.data_input_dir)
    input_dir.mkdir(parents=True, exist_ok=True)
    for index, size in enumerate(DATASET_SIZES, start=1):
        write_csv(dataset_path(input_dir, index), record_factory(size, seed=index))
    return input_dir
