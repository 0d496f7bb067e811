"""Example pipeline: build an arc diagram for a small graph and print TikZ."""

import numpy as np

from arc_edges import compute_arcs, edge_table, generate_tikz_document, long_edge_table

NODE_CLASS = ["a", "b", "c", "a", "b", "c", "a"]
SOURCES = [0, 1, 2, 6, 5, 3]
TARGETS = [4, 3, 6, 0, 1, 2]


def main() -> None:
    node_x = np.arange(len(NODE_CLASS), dtype=float)
    node_y = np.zeros(len(NODE_CLASS))

    wide = edge_table(node_x, node_y, SOURCES, TARGETS)
    sampled = compute_arcs(wide, "arc", curvature=0.8, n=40, fold=True)
    print(f"Sampled {len(sampled['x'])} points for {len(SOURCES)} edges")

    long = long_edge_table(node_x, node_y, SOURCES, TARGETS, node_attrs={"class": NODE_CLASS})
    blended = compute_arcs(long, "arc2", n=5)
    for x, y, t, cls in zip(blended["x"][:5], blended["y"][:5], blended["index"][:5], blended["node.class"][:5]):
        print(f"  t={t:.2f}: ({x:.3f}, {y:.3f}) class={cls}")

    angles = 2.0 * np.pi * np.arange(len(NODE_CLASS)) / len(NODE_CLASS)
    ring = edge_table(np.cos(angles), np.sin(angles), SOURCES, TARGETS, circular=True)
    raw = compute_arcs(ring, "arc0")
    print(generate_tikz_document(raw, "arc0", title="Circular arc diagram", scale=2.0))


if __name__ == "__main__":
    main()
