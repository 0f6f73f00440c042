"""
Deterministic example graphs.

Small standard graphs for examples, benchmarks and tests. Every
generator lists each undirected edge once.
"""

from __future__ import annotations

import random

from .graph import EdgeListGraph
from .validation import InvalidParameterError


def path_graph(n: int) -> EdgeListGraph:
    """Chain 0 - 1 - ... - (n-1)."""
    _check_size(n)
    return EdgeListGraph(n, [(i, i + 1) for i in range(n - 1)])


def cycle_graph(n: int) -> EdgeListGraph:
    """
    Ring of n nodes.

    For n < 3 there is no cycle; the result is a path.
    """
    _check_size(n)
    edges = [(i, i + 1) for i in range(n - 1)]
    if n >= 3:
        edges.append((n - 1, 0))
    return EdgeListGraph(n, edges)


def star_graph(n: int) -> EdgeListGraph:
    """Center node 0 connected to nodes 1..n-1."""
    _check_size(n)
    return EdgeListGraph(n, [(0, i) for i in range(1, n)])


def complete_graph(n: int) -> EdgeListGraph:
    """Every pair of distinct nodes connected."""
    _check_size(n)
    return EdgeListGraph(n, [(i, j) for i in range(n) for j in range(i + 1, n)])


def grid_graph(rows: int, cols: int) -> EdgeListGraph:
    """
    rows x cols lattice.

    Node (r, c) has index r * cols + c.
    """
    _check_size(rows)
    _check_size(cols)
    edges = []
    for r in range(rows):
        for c in range(cols):
            i = r * cols + c
            if c + 1 < cols:
                edges.append((i, i + 1))
            if r + 1 < rows:
                edges.append((i, i + cols))
    return EdgeListGraph(rows * cols, edges)


def random_graph(nodes: int, edges: int, seed: int) -> EdgeListGraph:
    """
    Random simple graph with a fixed number of edges.

    Edges are drawn uniformly from all unordered pairs of distinct nodes,
    without repetition.

    Args:
        nodes: Number of nodes
        edges: Number of edges, capped at nodes * (nodes - 1) / 2
        seed: Random seed for reproducibility

    Returns:
        EdgeListGraph with min(edges, max_edges) edges
    """
    _check_size(nodes)
    if edges < 0:
        raise InvalidParameterError(f"edges must be >= 0, got {edges}")

    rng = random.Random(seed)
    pairs = [(i, j) for i in range(nodes) for j in range(i + 1, nodes)]
    chosen = rng.sample(pairs, min(edges, len(pairs)))
    return EdgeListGraph(nodes, chosen)


def defined_graphs() -> dict[str, EdgeListGraph]:
    """Named example graphs, keyed by a file-name friendly name."""
    return {
        "single": EdgeListGraph(1),
        "pair": path_graph(2),
        "triangle": cycle_graph(3),
        "square": cycle_graph(4),
        "path-6": path_graph(6),
        "star-8": star_graph(8),
        "complete-5": complete_graph(5),
        "grid-4x4": grid_graph(4, 4),
        "disconnected": EdgeListGraph(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]),
    }


def _check_size(n: int) -> None:
    if n < 1:
        raise InvalidParameterError(f"Graph size must be >= 1, got {n}")


__all__ = [
    "path_graph",
    "cycle_graph",
    "star_graph",
    "complete_graph",
    "grid_graph",
    "random_graph",
    "defined_graphs",
]
