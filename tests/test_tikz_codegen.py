from __future__ import annotations

import pytest

from arc_edges import arc, arc0
from arc_edges.tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape


def _table():
    return {'x': [0.0], 'y': [0.0], 'xend': [2.0], 'yend': [0.0], 'circular': [False]}


def test_arc0_renders_bezier_controls() -> None:
    tikz = generate_tikz_code(arc0(_table()), 'arc0')

    lines = tikz.splitlines()
    assert lines[0] == "\\begin{tikzpicture}[scale=1]"
    assert lines[1] == "  \\draw[edge] (0, 0) .. controls (0, -1) and (2, -1) .. (2, 0);"
    assert lines[-1] == "\\end{tikzpicture}"


def test_sampled_arcs_render_as_plots() -> None:
    tikz = generate_tikz_code(arc(_table(), n=3), 'arc', scale=0.5, style='thick')

    assert "[scale=0.5]" in tikz
    assert "\\draw[thick] plot coordinates {(0, 0) (1, -0.75) (2, 0)};" in tikz


def test_one_draw_command_per_group() -> None:
    table = {
        'x': [0.0, 0.0],
        'y': [0.0, 1.0],
        'xend': [1.0, 1.0],
        'yend': [0.0, 1.0],
        'circular': [False, False],
    }

    tikz = generate_tikz_code(arc(table, n=4))

    assert tikz.count("\\draw[edge]") == 2


def test_raw_variant_requires_four_points_per_edge() -> None:
    result = {'x': [0.0, 1.0], 'y': [0.0, 1.0], 'group': [0, 0]}

    with pytest.raises(ValueError):
        generate_tikz_code(result, 'arc0')


def test_missing_columns_and_non_finite_values() -> None:
    with pytest.raises(ValueError):
        generate_tikz_code({'x': [0.0], 'y': [0.0]}, 'arc')
    with pytest.raises(ValueError):
        generate_tikz_code({'x': [0.0, float('nan')], 'y': [0.0, 0.0], 'group': [0, 0]}, 'arc')


def test_generate_tikz_document_escapes_title() -> None:
    document = generate_tikz_document(arc0(_table()), 'arc0', title="Flows & 50% of_edges")

    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "edge/.style={line width=0.6pt" in document
    assert "\\textbf{Flows \\& 50\\% of\\_edges}" in document
    assert ".. controls" in document
    assert document.rstrip().endswith("\\end{document}")


def test_latex_escape() -> None:
    assert latex_escape("a_b $x$ {c}") == "a\\_b \\$x\\$ \\{c\\}"
