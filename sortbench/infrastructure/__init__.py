"""
Infrastructure package for sortbench.

Centralizes file-system concerns (dataset loading, sorted output, output tree
setup). Keep this layer focused on I/O, decoupled from algorithm and harness
logic.
"""

from sortbench.infrastructure.datasets import (
    DatasetError,
    DatasetNotFoundError,
    DatasetReadError,
    DatasetStore,
    DatasetWriteError,
    MalformedRecordError,
    dataset_path,
    prepare_output_tree,
    read_csv,
    write_csv,
)

__all__ = [
    "DatasetError",
    "DatasetNotFoundError",
    "DatasetReadError",
    "DatasetStore",
    "DatasetWriteError",
    "MalformedRecordError",
    "dataset_path",
    "prepare_output_tree",
    "read_csv",
    "write_csv",
]
