"""Evenly parameterised sampling of cubic bezier control polygons."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

import numpy as np
from scipy.interpolate import BPoly

from .types import ControlPolygon, SampledPoint
from .validate import validate_sample_count

logger = logging.getLogger(__name__)

PolygonLike = Union[ControlPolygon, np.ndarray]


def sample_positions(n: int) -> np.ndarray:
    """Return ``n`` evenly spaced parameter values from 0 to 1 inclusive."""

    n = validate_sample_count(n)
    t = np.linspace(0.0, 1.0, n)
    t[0] = 0.0
    t[-1] = 1.0
    return t


def sample_polygons(polygons: np.ndarray, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Sample ``n`` points along each cubic in an ``(E, 4, 2)`` polygon array.

    Returns the ``(E, n, 2)`` sampled coordinates and the shared ``(n,)``
    parameter values.
    """

    polygons = np.asarray(polygons, dtype=float)
    if polygons.ndim != 3 or polygons.shape[1:] != (4, 2):
        raise ValueError(f"polygons must have shape (E, 4, 2), got {polygons.shape}")
    t = sample_positions(n)
    count = polygons.shape[0]
    if count == 0:
        return np.empty((0, len(t), 2), dtype=float), t

    # BPoly wants the Bernstein coefficients first, then one interval, then trailing dims.
    coeffs = np.transpose(polygons, (1, 0, 2))[:, None, :, :]
    curve = BPoly(coeffs, [0.0, 1.0])
    points = np.transpose(curve(t), (1, 0, 2)).copy()
    points[:, 0, :] = polygons[:, 0, :]
    points[:, -1, :] = polygons[:, 3, :]
    return points, t


def sample(polygon: PolygonLike, n: int, attrs: Optional[Mapping[str, Any]] = None) -> List[SampledPoint]:
    """Sample ``n`` points along a single control polygon.

    ``attrs`` holds the edge's non-geometric attributes; every point gets its
    own copy.
    """

    arr = polygon.as_array() if isinstance(polygon, ControlPolygon) else np.asarray(polygon, dtype=float)
    if arr.shape != (4, 2):
        raise ValueError(f"control polygon must have shape (4, 2), got {arr.shape}")
    points, t = sample_polygons(arr[None, :, :], n)
    return [
        SampledPoint(float(x), float(y), float(ti), dict(attrs or {}))
        for (x, y), ti in zip(points[0], t)
    ]


__all__ = ["sample", "sample_polygons", "sample_positions"]
