"""Interpolation of endpoint attributes along sampled arcs."""

from __future__ import annotations

import logging
from typing import Collection, Dict, Mapping

import numpy as np
from matplotlib.colors import is_color_like, to_hex, to_rgba_array

from .types import EdgeTable

logger = logging.getLogger(__name__)


def is_continuous_column(values: np.ndarray) -> bool:
    return values.dtype.kind == "f"


def is_colour_column(values: np.ndarray) -> bool:
    if values.dtype.kind not in "USO" or values.size == 0:
        return False
    return all(isinstance(value, str) and is_color_like(value) for value in values.tolist())


def repeat_column(values: np.ndarray, n: int) -> np.ndarray:
    """Repeat every edge value ``n`` times, edge-major."""

    return np.repeat(values, n)


def _blend(start: np.ndarray, end: np.ndarray, t: np.ndarray) -> np.ndarray:
    # start, end: (E, k); result (E, n, k)
    weight = t[None, :, None]
    return start[:, None, :] * (1.0 - weight) + end[:, None, :] * weight


def interpolate_column(
    start_values: np.ndarray,
    end_values: np.ndarray,
    t: np.ndarray,
    *,
    colour: bool = False,
) -> np.ndarray:
    """Interpolate one attribute between edge endpoints at parameters ``t``.

    Floating point values blend linearly. Colours blend in RGBA space and
    come back as ``#rrggbbaa`` strings. Anything else, integer ids such as
    ``edge.id`` or ``node`` included, switches from the start value to the
    end value halfway along the arc.
    """

    start_values = np.asarray(start_values)
    end_values = np.asarray(end_values)
    t = np.asarray(t, dtype=float)
    if start_values.shape != end_values.shape:
        raise ValueError("start and end attribute arrays differ in shape")

    if colour:
        rgba = _blend(to_rgba_array(start_values.tolist()), to_rgba_array(end_values.tolist()), t)
        rgba = np.clip(rgba, 0.0, 1.0).reshape(-1, 4)
        return np.array([to_hex(tuple(row), keep_alpha=True) for row in rgba], dtype=object)

    if is_continuous_column(start_values) and is_continuous_column(end_values):
        blended = _blend(start_values[:, None], end_values[:, None], t)
        return blended.reshape(-1)

    stepped = np.where(t[None, :] < 0.5, start_values[:, None], end_values[:, None])
    return stepped.reshape(-1)


def interpolate_attributes(
    starts: Mapping[str, np.ndarray],
    ends: Mapping[str, np.ndarray],
    t: np.ndarray,
    *,
    colour_columns: Collection[str] = (),
) -> EdgeTable:
    """Interpolate every column shared by ``starts`` and ``ends``."""

    out: Dict[str, np.ndarray] = {}
    for name, start_values in starts.items():
        end_values = ends[name]
        colour = name in colour_columns and is_colour_column(start_values) and is_colour_column(end_values)
        out[name] = interpolate_column(start_values, end_values, t, colour=colour)
    if out:
        logger.debug("Interpolated %d attribute column(s) over %d samples", len(out), len(t))
    return out


__all__ = [
    "interpolate_attributes",
    "interpolate_column",
    "is_continuous_column",
    "is_colour_column",
    "repeat_column",
]
