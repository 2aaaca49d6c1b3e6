"""
Configuration settings for sortbench.

Uses Pydantic Settings to load environment variables for dataset locations,
logging, and benchmark defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FailurePolicy = Literal["tolerant", "strict"]


class Settings(BaseSettings):
    # Datasets
    data_input_dir: Path = Field(Path("data/in"), alias="DATA_INPUT_DIR")
    data_output_dir: Path = Field(Path("data/out"), alias="DATA_OUTPUT_DIR")
    results_dir: Path = Field(Path("results"), alias="RESULTS_DIR")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Benchmark defaults
    benchmark_datasets: int = Field(15, ge=1, alias="BENCHMARK_DATASETS")
    benchmark_quadratic_datasets: int = Field(6, ge=1, alias="BENCHMARK_QUADRATIC_DATASETS")
    benchmark_failure_policy: FailurePolicy = Field("tolerant", alias="BENCHMARK_FAILURE_POLICY")
    benchmark_warmup: bool = Field(False, alias="BENCHMARK_WARMUP")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def datasets_for(self, quadratic: bool) -> int:
        """Number of dataset indices to process for an algorithm class."""
        return self.benchmark_quadratic_datasets if quadratic else self.benchmark_datasets


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["FailurePolicy", "Settings", "get_settings"]
