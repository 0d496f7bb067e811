"""Builders for the wide and long edge tables consumed by the assembler."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from .types import EdgeTable
from .validate import InputValidationError, coerce_table

logger = logging.getLogger(__name__)


def _node_positions(node_x: Sequence[float], node_y: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    xs = np.asarray(node_x, dtype=float)
    ys = np.asarray(node_y, dtype=float)
    if xs.ndim != 1 or xs.shape != ys.shape:
        raise InputValidationError("node_x and node_y must be one-dimensional and of equal length")
    return xs, ys


def _edge_endpoints(
    sources: Sequence[int], targets: Sequence[int], node_count: int
) -> Tuple[np.ndarray, np.ndarray]:
    frm = np.asarray(sources)
    to = np.asarray(targets)
    if frm.ndim != 1 or frm.shape != to.shape:
        raise InputValidationError("sources and targets must be one-dimensional and of equal length")
    if frm.size and (frm.dtype.kind not in "iu" or to.dtype.kind not in "iu"):
        raise InputValidationError("sources and targets must be integer node indices")
    frm = frm.astype(int)
    to = to.astype(int)
    for name, idx in (("sources", frm), ("targets", to)):
        bad = idx[(idx < 0) | (idx >= node_count)]
        if bad.size:
            raise InputValidationError(f"{name} reference unknown node(s): {sorted(set(bad.tolist()))}")
    return frm, to


def _attr_columns(attrs: Optional[Mapping[str, Sequence[Any]]], expected: int, what: str) -> EdgeTable:
    if not attrs:
        return {}
    columns = coerce_table(attrs)
    for name, values in columns.items():
        if len(values) != expected:
            raise InputValidationError(f'{what} attribute "{name}" has {len(values)} values, expected {expected}')
    return columns


def edge_table(
    node_x: Sequence[float],
    node_y: Sequence[float],
    sources: Sequence[int],
    targets: Sequence[int],
    *,
    circular: bool = False,
    edge_attrs: Optional[Mapping[str, Sequence[Any]]] = None,
    node_attrs: Optional[Mapping[str, Sequence[Any]]] = None,
) -> EdgeTable:
    """Return a wide edge table with one row per edge.

    Node attributes are attached to both ends with ``node1.`` and ``node2.``
    prefixes.
    """

    xs, ys = _node_positions(node_x, node_y)
    frm, to = _edge_endpoints(sources, targets, len(xs))
    count = len(frm)
    table: Dict[str, np.ndarray] = {
        "from": frm,
        "to": to,
        "x": xs[frm],
        "y": ys[frm],
        "xend": xs[to],
        "yend": ys[to],
        "circular": np.full(count, bool(circular)),
        "edge.id": np.arange(count),
    }
    table.update(_attr_columns(edge_attrs, count, "edge"))
    for name, values in _attr_columns(node_attrs, len(xs), "node").items():
        table[f"node1.{name}"] = values[frm]
        table[f"node2.{name}"] = values[to]
    logger.info("Built wide edge table with %d edge(s) over %d node(s)", count, len(xs))
    return table


def long_edge_table(
    node_x: Sequence[float],
    node_y: Sequence[float],
    sources: Sequence[int],
    targets: Sequence[int],
    *,
    circular: bool = False,
    edge_attrs: Optional[Mapping[str, Sequence[Any]]] = None,
    node_attrs: Optional[Mapping[str, Sequence[Any]]] = None,
) -> EdgeTable:
    """Return a long edge table with one row per edge endpoint.

    All start rows come first, followed by all end rows; both rows of an edge
    share ``group`` (equal to ``edge.id``). Node attributes use the ``node.``
    prefix and edge attributes are repeated on both rows.
    """

    xs, ys = _node_positions(node_x, node_y)
    frm, to = _edge_endpoints(sources, targets, len(xs))
    count = len(frm)
    nodes = np.concatenate((frm, to))
    edge_ids = np.tile(np.arange(count), 2)
    table: Dict[str, np.ndarray] = {
        "edge.id": edge_ids,
        "node": nodes,
        "x": xs[nodes],
        "y": ys[nodes],
        "circular": np.full(2 * count, bool(circular)),
        "group": edge_ids.copy(),
    }
    for name, values in _attr_columns(edge_attrs, count, "edge").items():
        table[name] = np.tile(values, 2)
    for name, values in _attr_columns(node_attrs, len(xs), "node").items():
        table[f"node.{name}"] = values[nodes]
    logger.info("Built long edge table with %d edge(s) over %d node(s)", count, len(xs))
    return table


__all__ = ["edge_table", "long_edge_table"]
