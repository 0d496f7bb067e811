"""Control polygon construction for arc edges.

Linear edges bend away from the chord by an angle proportional to
``curvature``; circular edges pull their control points towards the origin
in proportion to the chord length.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Union

import numpy as np

from .logging_utils import apply_debug_logging
from .types import ControlPolygon, Point2D

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], Sequence[Sequence[float]], np.ndarray]

_HALF_PI = 0.5 * math.pi


def _as_points(values: ArrayLike, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"{name} must be an (E, 2) array of coordinates, got shape {arr.shape}")
    return arr


def _unit_vectors(angles: np.ndarray) -> np.ndarray:
    return np.column_stack((np.cos(angles), np.sin(angles)))


def fold_control_points(polygons: np.ndarray, curvature: float) -> np.ndarray:
    """Return a copy of ``polygons`` with both control points forced to one side.

    The y component of ``P1`` and ``P2`` becomes ``|y| * sign(curvature)``;
    x and the endpoints are left as they are.
    """

    folded = np.array(polygons, dtype=float, copy=True)
    sign = float(np.sign(curvature))
    folded[..., 1:3, 1] = np.abs(folded[..., 1:3, 1]) * sign
    return folded


def derive_control_polygons(
    starts: ArrayLike,
    ends: ArrayLike,
    circular: Union[bool, Sequence[bool], np.ndarray],
    curvature: float = 1.0,
    fold: bool = False,
) -> np.ndarray:
    """Derive the control polygons of a batch of edges as an ``(E, 4, 2)`` array."""

    starts = _as_points(starts, "starts")
    ends = _as_points(ends, "ends")
    if starts.shape != ends.shape:
        raise ValueError(f"starts and ends differ in shape: {starts.shape} vs {ends.shape}")
    count = starts.shape[0]
    circ = np.broadcast_to(np.asarray(circular, dtype=bool), (count,))

    delta = ends - starts
    node_dist = np.hypot(delta[:, 0], delta[:, 1]) / 2.0
    ctrl1 = starts.copy()
    ctrl2 = ends.copy()

    if circ.any():
        # Both control points scale by the end point's radius.
        radius = np.hypot(ends[circ, 0], ends[circ, 1])
        on_origin = radius <= 0.0
        safe_radius = np.where(on_origin, 1.0, radius)
        scale = np.where(on_origin, 0.0, 1.0 - node_dist[circ] / safe_radius)
        ctrl1[circ] = starts[circ] * scale[:, None]
        ctrl2[circ] = ends[circ] * scale[:, None]
        if on_origin.any():
            logger.debug("%d circular edge(s) end at the origin", int(on_origin.sum()))

    linear = ~circ
    if linear.any():
        bend = _HALF_PI * float(curvature)
        edge_angle = np.arctan2(delta[linear, 1], delta[linear, 0])
        dist = node_dist[linear][:, None]
        ctrl1[linear] = starts[linear] + dist * _unit_vectors(edge_angle - bend)
        ctrl2[linear] = ends[linear] + dist * _unit_vectors(edge_angle - math.pi + bend)

    polygons = np.stack((starts, ctrl1, ctrl2, ends), axis=1)
    if fold and linear.any():
        polygons[linear] = fold_control_points(polygons[linear], curvature)

    degenerate = int(np.count_nonzero(node_dist == 0.0))
    if degenerate:
        logger.debug("%d edge(s) have coincident endpoints", degenerate)
    return polygons


def derive_control_polygon(
    start: Point2D,
    end: Point2D,
    circular: bool = False,
    curvature: float = 1.0,
    fold: bool = False,
) -> ControlPolygon:
    """Derive the control polygon of a single edge from ``start`` to ``end``."""

    polygons = derive_control_polygons([start], [end], [bool(circular)], curvature=curvature, fold=fold)
    return ControlPolygon.from_array(polygons[0])


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "derive_control_polygon",
    "derive_control_polygons",
    "fold_control_points",
]
