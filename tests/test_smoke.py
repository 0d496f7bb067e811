import numpy as np

from arc_edges import arc2, compute_arcs, edge_table, generate_tikz_code, long_edge_table


def test_linear_arc_diagram_pipeline():
    node_x = np.arange(6, dtype=float)
    node_y = np.zeros(6)
    sources = [0, 5, 2, 4]
    targets = [3, 1, 4, 0]
    node_class = ['a', 'b', 'c', 'a', 'b', 'c']

    wide = edge_table(node_x, node_y, sources, targets, edge_attrs={'edge_colour': ['red', 'green', 'blue', 'black']})
    sampled = compute_arcs(wide, 'arc', curvature=0.6, n=50, fold=True)

    assert len(sampled['x']) == 200
    assert np.all(sampled['y'] >= -1e-12)

    long = long_edge_table(node_x, node_y, sources, targets, node_attrs={'class': node_class})
    interpolated = arc2(long, n=20)
    assert interpolated['node.class'][0] == 'a'
    assert interpolated['node.class'][19] == 'a'

    tikz = generate_tikz_code(compute_arcs(wide, 'arc0'), 'arc0')
    assert tikz.count('.. controls') == 4
