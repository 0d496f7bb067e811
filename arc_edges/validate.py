"""Validation and coercion of edge tables."""

from __future__ import annotations

import logging
import numbers
from typing import Iterable, Mapping, Sequence

import numpy as np

from .types import EdgeTable, TableLike, table_length

logger = logging.getLogger(__name__)

FILTER_COLUMN = "filter"


class InputValidationError(ValueError):
    """Raised when an edge table or parameter set cannot be turned into arcs."""


def coerce_table(table: TableLike) -> EdgeTable:
    """Return a fresh column table of 1-D numpy arrays sharing one length."""

    if not isinstance(table, Mapping):
        raise InputValidationError(f"edge table must be a column mapping, got {type(table).__name__}")
    columns: EdgeTable = {}
    expected = None
    for name, values in table.items():
        if not isinstance(name, str):
            raise InputValidationError(f"column names must be strings, got {name!r}")
        arr = np.array(values, copy=True)
        if arr.ndim == 0:
            raise InputValidationError(f'column "{name}" must be a sequence')
        if arr.ndim != 1:
            raise InputValidationError(f'column "{name}" must be one-dimensional, got shape {arr.shape}')
        if expected is None:
            expected = len(arr)
        elif len(arr) != expected:
            raise InputValidationError(
                f'column "{name}" has {len(arr)} rows, expected {expected}'
            )
        columns[name] = arr
    return columns


def require_columns(table: Mapping[str, np.ndarray], required: Iterable[str], *, variant: str) -> None:
    missing = [name for name in required if name not in table]
    if missing:
        raise InputValidationError(f"{variant} requires column(s) {', '.join(missing)}")


def is_boolean_column(values: np.ndarray) -> bool:
    return values.dtype.kind == "b" or values.size == 0


def apply_filter(table: EdgeTable) -> EdgeTable:
    """Drop rows whose ``filter`` value is false and remove the filter column."""

    if FILTER_COLUMN not in table:
        return dict(table)
    mask = table[FILTER_COLUMN]
    if not is_boolean_column(mask):
        raise InputValidationError("filter must be logical")
    if mask.size == 0:
        mask = mask.astype(bool)
    filtered = {name: values[mask] for name, values in table.items() if name != FILTER_COLUMN}
    dropped = len(mask) - int(mask.sum())
    if dropped:
        logger.info("Filter dropped %d of %d rows", dropped, len(mask))
    return filtered


def float_column(table: Mapping[str, np.ndarray], name: str) -> np.ndarray:
    values = table[name]
    if values.dtype.kind not in "iuf":
        try:
            values = values.astype(float)
        except (TypeError, ValueError) as exc:
            raise InputValidationError(f'column "{name}" must be numeric') from exc
    values = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(values)):
        raise InputValidationError(f'column "{name}" contains missing or non-finite values')
    return values


def bool_column(table: Mapping[str, np.ndarray], name: str) -> np.ndarray:
    values = table[name]
    if not is_boolean_column(values):
        raise InputValidationError(f'column "{name}" must be logical')
    return values.astype(bool)


def validate_sample_count(n: object) -> int:
    if not isinstance(n, numbers.Integral) or isinstance(n, bool):
        raise InputValidationError(f"n must be an integer, got {n!r}")
    if n < 2:
        raise InputValidationError(f"n must be at least 2, got {n}")
    return int(n)


def take_rows(table: Mapping[str, np.ndarray], rows: Sequence[int] | np.ndarray) -> EdgeTable:
    index = np.asarray(rows, dtype=int)
    return {name: values[index] for name, values in table.items()}


def describe_table(table: Mapping[str, np.ndarray]) -> str:
    return f"{table_length(table)} row(s), columns={sorted(table)}"


__all__ = [
    "FILTER_COLUMN",
    "InputValidationError",
    "apply_filter",
    "bool_column",
    "coerce_table",
    "describe_table",
    "float_column",
    "is_boolean_column",
    "require_columns",
    "take_rows",
    "validate_sample_count",
]
