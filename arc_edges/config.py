"""Configuration for arc generation."""

from __future__ import annotations

import copy
import math
import numbers
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import numpy as np

from .validate import InputValidationError

DEFAULT_COLOUR_COLUMNS: Tuple[str, ...] = ("edge_colour", "edge_color", "colour", "color", "edge_fill")


@dataclass(frozen=True)
class ArcOptions:
    """Per-call parameters shared by all arc variants."""

    curvature: float = 1.0
    fold: bool = False
    n: int = 100

    def __post_init__(self) -> None:
        if not isinstance(self.curvature, numbers.Real) or isinstance(self.curvature, bool):
            raise InputValidationError(f"curvature must be a real number, got {self.curvature!r}")
        if not math.isfinite(self.curvature):
            raise InputValidationError(f"curvature must be finite, got {self.curvature!r}")
        if not isinstance(self.fold, (bool, np.bool_)):
            raise InputValidationError(f"fold must be boolean, got {self.fold!r}")
        if not isinstance(self.n, numbers.Integral) or isinstance(self.n, bool):
            raise InputValidationError(f"n must be an integer, got {self.n!r}")
        object.__setattr__(self, "curvature", float(self.curvature))
        object.__setattr__(self, "fold", bool(self.fold))
        object.__setattr__(self, "n", int(self.n))


@dataclass
class ArcConfig:
    """Process-wide defaults for the assembler."""

    default_options: ArcOptions = field(default_factory=ArcOptions)
    colour_columns: Tuple[str, ...] = DEFAULT_COLOUR_COLUMNS


_ARC_CONFIG = ArcConfig()


def get_arc_config() -> ArcConfig:
    return copy.deepcopy(_ARC_CONFIG)


def set_arc_config(config: ArcConfig) -> None:
    global _ARC_CONFIG
    _ARC_CONFIG = copy.deepcopy(config)


def resolve_options(
    options: Optional[ArcOptions] = None,
    *,
    curvature: Optional[float] = None,
    fold: Optional[bool] = None,
    n: Optional[int] = None,
) -> ArcOptions:
    """Merge explicit overrides on top of ``options`` or the configured defaults."""

    base = options if options is not None else _ARC_CONFIG.default_options
    overrides = {}
    if curvature is not None:
        overrides["curvature"] = curvature
    if fold is not None:
        overrides["fold"] = fold
    if n is not None:
        overrides["n"] = n
    if not overrides:
        return base
    return replace(base, **overrides)


__all__ = [
    "ArcConfig",
    "ArcOptions",
    "DEFAULT_COLOUR_COLUMNS",
    "get_arc_config",
    "resolve_options",
    "set_arc_config",
]
