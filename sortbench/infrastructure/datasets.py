"""
Dataset I/O for sortbench.

Reads and writes the header-less ``full_name,job,unit,salary`` CSV files the
benchmark consumes, and prepares the output directory tree before a run.
Every failure is raised as a `DatasetError` subclass carrying the offending
path (and line number for malformed rows); nothing is coerced or skipped.
"""

from __future__ import annotations

import csv
import shutil
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from pydantic import ValidationError

from sortbench.domain.models import Record
from sortbench.utils.logging import get_logger

log = get_logger(__name__)

FIELD_COUNT = 4
DATASET_TEMPLATE = "dataset_{index}.csv"


class DatasetError(Exception):
    """Base class for dataset I/O failures."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DatasetReadError(DatasetError):
    """A dataset could not be read."""


class DatasetNotFoundError(DatasetReadError):
    """The dataset file does not exist."""


class MalformedRecordError(DatasetReadError):
    """A dataset line does not describe a valid record."""

    def __init__(self, message: str, path: Path | str | None = None, line: int | None = None) -> None:
        super().__init__(message, path)
        self.line = line


class DatasetWriteError(DatasetError):
    """A sorted dataset could not be written."""


def dataset_path(directory: Path | str, index: int) -> Path:
    """Location of dataset number ``index`` (1-based) inside ``directory``."""
    if index < 1:
        raise ValueError(f"dataset index must be >= 1, got {index}")
    return Path(directory) / DATASET_TEMPLATE.format(index=index)


def parse_record(fields: Sequence[str], path: Path | str | None = None, line: int | None = None) -> Record:
    """
    Build a Record from one CSV row.

    Raises
    ------
    MalformedRecordError
        Wrong field count or a salary that is not an integer literal.
    """
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(
            f"{path}:{line}: expected {FIELD_COUNT} fields, got {len(fields)}", path, line
        )
    full_name, job, unit, raw_salary = fields
    try:
        salary = int(raw_salary.strip())
    except ValueError as exc:
        raise MalformedRecordError(
            f"{path}:{line}: salary {raw_salary!r} is not an integer", path, line
        ) from exc
    try:
        return Record(full_name=full_name, job=job, unit=unit, salary=salary)
    except ValidationError as exc:
        raise MalformedRecordError(f"{path}:{line}: {exc}", path, line) from exc


def read_csv(path: Path | str) -> List[Record]:
    """
    Read every record of a dataset file.

    Raises
    ------
    DatasetNotFoundError
        If ``path`` does not exist.
    DatasetReadError
        If the file cannot be opened or decoded.
    MalformedRecordError
        On the first invalid line.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetNotFoundError(f"dataset not found: {path}", path)

    records: List[Record] = []
    try:
        with path.open("r", newline="", encoding="utf-8") as f:
            reader = csv.reader(f, quoting=csv.QUOTE_NONE, quotechar=None)
            for line_no, row in enumerate(reader, start=1):
                if not row:
                    continue
                records.append(parse_record(row, path, line_no))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise DatasetReadError(f"could not read dataset {path}: {exc}", path) from exc

    log.debug("Dataset loaded", extra={"path": str(path), "records": len(records)})
    return records


def write_csv(path: Path | str, records: Iterable[Record]) -> int:
    """
    Write records in dataset format and return the number of lines written.

    Raises
    ------
    DatasetWriteError
        If the destination cannot be written.
    """
    path = Path(path)
    written = 0
    try:
        with path.open("w", newline="", encoding="utf-8") as f:
            # Fields are written verbatim; one that would need escaping is an error.
            writer = csv.writer(f, lineterminator="\n", quoting=csv.QUOTE_NONE, quotechar=None)
            for record in records:
                writer.writerow(record.as_row())
                written += 1
    except (OSError, csv.Error) as exc:
        raise DatasetWriteError(f"could not write dataset {path}: {exc}", path) from exc
    return written


def prepare_output_tree(output_dir: Path | str, subdirs: Iterable[str]) -> Path:
    """
    Remove ``output_dir`` if present and recreate it with the given sub-directories.

    Returns the root of the fresh tree.
    """
    root = Path(output_dir)
    try:
        if root.exists():
            shutil.rmtree(root)
        root.mkdir(parents=True)
        for name in subdirs:
            (root / name).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DatasetWriteError(f"could not prepare output tree {root}: {exc}", root) from exc
    log.info("Output tree prepared", extra={"output_dir": str(root)})
    return root


class DatasetStore:
    """
    Index-keyed access to the input datasets and the per-algorithm output sink.

    Parameters
    ----------
    input_dir : Path | str
        Directory holding ``dataset_<i>.csv`` files.
    output_dir : Path | str, optional
        Root of the output tree. When omitted, sorted datasets are not written.
    """

    def __init__(self, input_dir: Path | str, output_dir: Optional[Path | str] = None) -> None:
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir) if output_dir is not None else None

    def load(self, index: int) -> List[Record]:
        return read_csv(dataset_path(self.input_dir, index))

    def write(self, subdir: str, index: int, records: Sequence[Record]) -> Optional[Path]:
        if self.output_dir is None:
            return None
        target_dir = self.output_dir / subdir
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DatasetWriteError(f"could not create {target_dir}: {exc}", target_dir) from exc
        target = dataset_path(target_dir, index)
        write_csv(target, records)
        return target


__all__ = [
    "DATASET_TEMPLATE",
    "DatasetError",
    "DatasetNotFoundError",
    "DatasetReadError",
    "DatasetStore",
    "DatasetWriteError",
    "MalformedRecordError",
    "dataset_path",
    "parse_record",
    "prepare_output_tree",
    "read_csv",
    "write_csv",
]
