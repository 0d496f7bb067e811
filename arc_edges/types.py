from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence, Tuple

import numpy as np

Point2D = Tuple[float, float]
Column = np.ndarray
EdgeTable = Dict[str, Column]
TableLike = Mapping[str, Sequence[Any]]


@dataclass(frozen=True)
class ControlPolygon:
    """Cubic bezier control polygon of a single arc edge."""

    p0: Point2D
    p1: Point2D
    p2: Point2D
    p3: Point2D

    @property
    def points(self) -> Tuple[Point2D, Point2D, Point2D, Point2D]:
        return (self.p0, self.p1, self.p2, self.p3)

    def as_array(self) -> np.ndarray:
        return np.asarray(self.points, dtype=float)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "ControlPolygon":
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (4, 2):
            raise ValueError(f"control polygon must have shape (4, 2), got {arr.shape}")
        p0, p1, p2, p3 = (tuple(float(v) for v in row) for row in arr)
        return cls(p0, p1, p2, p3)  # type: ignore[arg-type]


@dataclass
class SampledPoint:
    x: float
    y: float
    t: float
    attrs: Dict[str, Any] = field(default_factory=dict)

    @property
    def xy(self) -> Point2D:
        return (self.x, self.y)


def table_length(table: Mapping[str, Column]) -> int:
    """Return the shared row count of ``table`` (0 for a table without columns)."""

    for values in table.values():
        return int(len(values))
    return 0


__all__ = [
    "Column",
    "ControlPolygon",
    "EdgeTable",
    "Point2D",
    "SampledPoint",
    "TableLike",
    "table_length",
]
