"""Assembly of edge tables into arc point tables.

Three variants share the control polygon derivation:

* ``arc`` takes one row per edge (``x, y, xend, yend``) and samples each arc.
* ``arc2`` takes two rows per edge sharing a ``group`` and interpolates the
  endpoint attributes along the sampled arc.
* ``arc0`` takes the same input as ``arc`` but returns the four control
  points per edge unsampled.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, Optional, Tuple, Union

import numpy as np

from .config import ArcOptions, get_arc_config, resolve_options
from .geometry import derive_control_polygons
from .interpolate import interpolate_attributes, repeat_column
from .logging_utils import apply_debug_logging
from .sampler import sample_polygons, sample_positions
from .types import EdgeTable, TableLike, table_length
from .validate import (
    InputValidationError,
    apply_filter,
    bool_column,
    coerce_table,
    describe_table,
    float_column,
    require_columns,
    take_rows,
    validate_sample_count,
)

logger = logging.getLogger(__name__)

ARC_REQUIRED: Tuple[str, ...] = ("x", "y", "xend", "yend", "circular")
ARC2_REQUIRED: Tuple[str, ...] = ("x", "y", "circular", "group")

POINTS_PER_POLYGON = 4


class ArcVariant(str, enum.Enum):
    ARC = "arc"
    ARC2 = "arc2"
    ARC0 = "arc0"

    @property
    def samples(self) -> bool:
        return self is not ArcVariant.ARC0

    @property
    def required_columns(self) -> Tuple[str, ...]:
        return ARC2_REQUIRED if self is ArcVariant.ARC2 else ARC_REQUIRED


def _prepare(table: TableLike, variant: ArcVariant) -> EdgeTable:
    columns = coerce_table(table)
    require_columns(columns, variant.required_columns, variant=variant.value)
    columns = apply_filter(columns)
    logger.info("Preparing %s input: %s", variant.value, describe_table(columns))
    return columns


def _passthrough(table: EdgeTable, reserved: Tuple[str, ...]) -> EdgeTable:
    return {name: values for name, values in table.items() if name not in reserved}


def _wide_polygons(table: EdgeTable, options: ArcOptions) -> np.ndarray:
    starts = np.column_stack((float_column(table, "x"), float_column(table, "y")))
    ends = np.column_stack((float_column(table, "xend"), float_column(table, "yend")))
    circular = bool_column(table, "circular")
    return derive_control_polygons(starts, ends, circular, curvature=options.curvature, fold=options.fold)


def _output(xy: np.ndarray, extra: Dict[str, np.ndarray], passthrough: EdgeTable) -> EdgeTable:
    out: EdgeTable = {"x": xy[:, 0].copy(), "y": xy[:, 1].copy()}
    out.update(extra)
    out.update(passthrough)
    return out


def _sampled_output(
    polygons: np.ndarray,
    groups: np.ndarray,
    passthrough: EdgeTable,
    n: int,
) -> EdgeTable:
    points, t = sample_polygons(polygons, n)
    count = polygons.shape[0]
    extra = {
        "index": np.tile(t, count),
        "group": repeat_column(groups, n),
    }
    return _output(points.reshape(-1, 2), extra, passthrough)


def arc(table: TableLike, options: Optional[ArcOptions] = None, **overrides) -> EdgeTable:
    """Sample one arc per row of a wide edge table.

    Output has ``n`` rows per surviving edge with the columns ``x``, ``y``,
    ``index`` (position along the arc), ``group`` and every passthrough
    column of the input.
    """

    opts = resolve_options(options, **overrides)
    n = validate_sample_count(opts.n)
    columns = _prepare(table, ArcVariant.ARC)
    count = table_length(columns)
    polygons = _wide_polygons(columns, opts)
    groups = np.arange(count)
    passthrough = {
        name: repeat_column(values, n)
        for name, values in _passthrough(columns, ("x", "y", "xend", "yend", "group", "index")).items()
    }
    out = _sampled_output(polygons, groups, passthrough, n)
    logger.info("arc: %d edge(s) -> %d point(s) with n=%d", count, count * n, n)
    return out


def arc0(table: TableLike, options: Optional[ArcOptions] = None, **overrides) -> EdgeTable:
    """Return the four control points of every edge in a wide edge table."""

    opts = resolve_options(options, **overrides)
    columns = _prepare(table, ArcVariant.ARC0)
    count = table_length(columns)
    polygons = _wide_polygons(columns, opts)
    groups = np.arange(count)
    passthrough = _passthrough(columns, ("x", "y", "xend", "yend", "group", "index"))

    # Point-major blocks carry a draw-order index of 4k + j; a stable sort on it
    # yields P0..P3 contiguously for each edge.
    xy = np.concatenate([polygons[:, j, :] for j in range(POINTS_PER_POLYGON)], axis=0)
    draw_index = np.concatenate([groups * POINTS_PER_POLYGON + j for j in range(POINTS_PER_POLYGON)])
    order = np.argsort(draw_index, kind="stable")
    rows = np.tile(groups, POINTS_PER_POLYGON)[order]

    out = _output(xy[order], {"group": groups[rows]}, take_rows(passthrough, rows))
    logger.info("arc0: %d edge(s) -> %d control point(s)", count, count * POINTS_PER_POLYGON)
    return out


def _pair_rows(columns: EdgeTable) -> Tuple[EdgeTable, EdgeTable]:
    groups = columns["group"]
    try:
        order = np.argsort(groups, kind="stable")
    except TypeError as exc:
        raise InputValidationError("group values must be mutually comparable") from exc
    ordered = take_rows(columns, order)
    total = table_length(ordered)
    if total % 2:
        raise InputValidationError(f"arc2 expects two rows per group, got {total} rows in total")
    starts = {name: values[0::2] for name, values in ordered.items()}
    ends = {name: values[1::2] for name, values in ordered.items()}
    start_groups = starts["group"]
    if np.any(start_groups != ends["group"]) or np.any(start_groups[1:] == start_groups[:-1]):
        raise InputValidationError("arc2 expects exactly two rows per group")
    return starts, ends


def arc2(table: TableLike, options: Optional[ArcOptions] = None, **overrides) -> EdgeTable:
    """Sample one arc per pair of endpoint rows sharing a ``group``.

    The first row of a group is the start of the edge and the second its end.
    Attribute columns are interpolated between the two rows along the arc.
    """

    opts = resolve_options(options, **overrides)
    n = validate_sample_count(opts.n)
    columns = _prepare(table, ArcVariant.ARC2)
    starts, ends = _pair_rows(columns)
    count = table_length(starts)

    start_xy = np.column_stack((float_column(starts, "x"), float_column(starts, "y")))
    end_xy = np.column_stack((float_column(ends, "x"), float_column(ends, "y")))
    circular = bool_column(starts, "circular")
    polygons = derive_control_polygons(start_xy, end_xy, circular, curvature=opts.curvature, fold=opts.fold)

    reserved = ("x", "y", "group", "index")
    t = sample_positions(n)
    passthrough = interpolate_attributes(
        _passthrough(starts, reserved),
        _passthrough(ends, reserved),
        t,
        colour_columns=get_arc_config().colour_columns,
    )
    out = _sampled_output(polygons, starts["group"], passthrough, n)
    logger.info("arc2: %d edge(s) -> %d point(s) with n=%d", count, count * n, n)
    return out


def compute_arcs(
    table: TableLike,
    variant: Union[ArcVariant, str] = ArcVariant.ARC,
    options: Optional[ArcOptions] = None,
    **overrides,
) -> EdgeTable:
    """Run ``variant`` over ``table``."""

    try:
        kind = ArcVariant(variant)
    except ValueError as exc:
        choices = ", ".join(v.value for v in ArcVariant)
        raise InputValidationError(f"unknown arc variant {variant!r} (expected one of {choices})") from exc
    handler = {ArcVariant.ARC: arc, ArcVariant.ARC2: arc2, ArcVariant.ARC0: arc0}[kind]
    return handler(table, options, **overrides)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "ARC2_REQUIRED",
    "ARC_REQUIRED",
    "ArcVariant",
    "arc",
    "arc0",
    "arc2",
    "compute_arcs",
]
