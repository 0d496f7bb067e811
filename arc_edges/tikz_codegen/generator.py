"""TikZ renderer for assembled arc tables."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..assemble import POINTS_PER_POLYGON, ArcVariant
from .utils import latex_escape

logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH_PT = 0.6

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\tikzset{
  edge/.style={line width=%(line_width)spt, line cap=butt, line join=round},
}
\begin{document}
%(header)s%(body)s
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _coord(x: float, y: float) -> str:
    return f"({_format_float(x)}, {_format_float(y)})"


def _grouped_points(result: Mapping[str, Sequence[Any]]) -> List[Tuple[Any, np.ndarray]]:
    for name in ("x", "y", "group"):
        if name not in result:
            raise ValueError(f'arc table is missing column "{name}"')
    xs = np.asarray(result["x"], dtype=float)
    ys = np.asarray(result["y"], dtype=float)
    groups = np.asarray(result["group"])
    if not (len(xs) == len(ys) == len(groups)):
        raise ValueError("arc table columns differ in length")

    # Keep groups in the order their first point appears.
    order: List[Any] = []
    rows: dict = {}
    for idx, group in enumerate(groups.tolist()):
        if group not in rows:
            rows[group] = []
            order.append(group)
        rows[group].append(idx)
    return [(group, np.column_stack((xs[rows[group]], ys[rows[group]]))) for group in order]


def _bezier_command(points: np.ndarray, style: str) -> str:
    p0, p1, p2, p3 = (_coord(x, y) for x, y in points)
    return f"  \\draw[{style}] {p0} .. controls {p1} and {p2} .. {p3};"


def _polyline_command(points: np.ndarray, style: str) -> str:
    coords = " ".join(_coord(x, y) for x, y in points)
    return f"  \\draw[{style}] plot coordinates {{{coords}}};"


def generate_tikz_code(
    result: Mapping[str, Sequence[Any]],
    variant: Union[ArcVariant, str] = ArcVariant.ARC,
    *,
    scale: float = 1.0,
    style: str = "edge",
) -> str:
    """Render an assembled arc table as a ``tikzpicture`` environment.

    Raw control points (``arc0``) are drawn with TikZ bezier syntax; sampled
    variants are drawn as polylines through their points.
    """

    kind = ArcVariant(variant)
    lines = [f"\\begin{{tikzpicture}}[scale={_format_float(scale)}]"]
    groups = _grouped_points(result)
    for group, points in groups:
        if kind.samples:
            if len(points) < 2:
                raise ValueError(f"edge {group!r} has fewer than two sampled points")
            lines.append(_polyline_command(points, style))
        else:
            if len(points) != POINTS_PER_POLYGON:
                raise ValueError(
                    f"edge {group!r} has {len(points)} control points, expected {POINTS_PER_POLYGON}"
                )
            lines.append(_bezier_command(points, style))
    lines.append("\\end{tikzpicture}")
    logger.info("Rendered %d %s edge(s) to TikZ", len(groups), kind.value)
    return "\n".join(lines)


def generate_tikz_document(
    result: Mapping[str, Sequence[Any]],
    variant: Union[ArcVariant, str] = ArcVariant.ARC,
    *,
    title: Optional[str] = None,
    scale: float = 1.0,
    line_width_pt: float = DEFAULT_LINE_WIDTH_PT,
) -> str:
    """Render a standalone LaTeX document containing the arcs."""

    header = ""
    if title:
        header = "\\noindent\\textbf{" + latex_escape(title.strip()) + "}\\par\\vspace{4pt}\n"
    body = generate_tikz_code(result, variant, scale=scale)
    return standalone_tpl % {
        "line_width": _format_float(line_width_pt),
        "header": header,
        "body": body,
    }
