"""Reading and writing column tables as CSV or JSON."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, TextIO

import numpy as np

from .types import EdgeTable, table_length
from .validate import InputValidationError, coerce_table

logger = logging.getLogger(__name__)

_BOOL_TEXT = {"true": True, "false": False}


def _parse_csv_column(values: Sequence[str]) -> np.ndarray:
    lowered = [value.strip().lower() for value in values]
    if values and all(value in _BOOL_TEXT for value in lowered):
        return np.array([_BOOL_TEXT[value] for value in lowered], dtype=bool)
    try:
        return np.array([float(value) for value in values], dtype=float)
    except ValueError:
        return np.array(list(values), dtype=object)


def read_csv(stream: TextIO) -> EdgeTable:
    reader = csv.DictReader(stream)
    if reader.fieldnames is None:
        raise InputValidationError("CSV input has no header row")
    columns: Dict[str, List[str]] = {name: [] for name in reader.fieldnames}
    for row in reader:
        for name in reader.fieldnames:
            value = row.get(name)
            if value is None:
                raise InputValidationError(f"CSV row {reader.line_num} is missing column {name!r}")
            columns[name].append(value)
    return {name: _parse_csv_column(values) for name, values in columns.items()}


def read_json(stream: TextIO) -> EdgeTable:
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        raise InputValidationError(f"invalid JSON input: {exc}") from exc
    if isinstance(payload, list):
        names: List[str] = []
        for record in payload:
            if not isinstance(record, dict):
                raise InputValidationError("JSON row list must contain objects")
            for name in record:
                if name not in names:
                    names.append(name)
        try:
            payload = {name: [record[name] for record in payload] for name in names}
        except KeyError as exc:
            raise InputValidationError(f"JSON rows disagree on column {exc.args[0]!r}") from exc
    if not isinstance(payload, dict):
        raise InputValidationError("JSON input must be a column object or a list of row objects")
    return coerce_table(payload)


def read_table(path: Path, fmt: Optional[str] = None) -> EdgeTable:
    """Read an edge table from ``path``; the format defaults to the file suffix."""

    fmt = (fmt or path.suffix.lstrip(".")).lower()
    logger.info("Reading %s table from %s", fmt or "<unknown>", path)
    with open(path, newline="", encoding="utf-8") as fin:
        if fmt == "csv":
            return read_csv(fin)
        if fmt == "json":
            return read_json(fin)
    raise InputValidationError(f"unsupported table format {fmt!r} (expected csv or json)")


def _plain(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def iter_records(table: Mapping[str, np.ndarray]) -> Iterator[Dict[str, Any]]:
    """Yield the rows of ``table`` as plain dictionaries."""

    names = list(table)
    for idx in range(table_length(table)):
        yield {name: _plain(table[name][idx]) for name in names}


def write_csv(table: Mapping[str, np.ndarray], stream: TextIO) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(list(table))
    for record in iter_records(table):
        writer.writerow(
            ["true" if v is True else "false" if v is False else v for v in record.values()]
        )


def write_json(table: Mapping[str, np.ndarray], stream: TextIO) -> None:
    json.dump(list(iter_records(table)), stream, indent=2)
    stream.write("\n")


__all__ = [
    "iter_records",
    "read_csv",
    "read_json",
    "read_table",
    "write_csv",
    "write_json",
]
