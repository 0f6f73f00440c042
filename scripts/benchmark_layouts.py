#!/usr/bin/env python3
"""
Benchmark the Fruchterman-Reingold engine on example graphs.

Usage:
    uv run python scripts/benchmark_layouts.py [--graphs PATTERN] [--iterations N]

Examples:
    uv run python scripts/benchmark_layouts.py
    uv run python scripts/benchmark_layouts.py --graphs "random-*"
    uv run python scripts/benchmark_layouts.py --iterations 50 --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from fnmatch import fnmatch
from typing import Any

import numpy as np

from plode import FruchtermanReingold, Graph, defined_graphs, random_graph


def benchmark_graphs() -> dict[str, Graph]:
    """Named graphs plus random graphs of growing size."""
    graphs: dict[str, Graph] = dict(defined_graphs())
    for n in (10, 25, 50, 100, 200):
        graphs[f"random-{n}-{2 * n}"] = random_graph(n, 2 * n, seed=31)
    return graphs


def benchmark_engine(engine: FruchtermanReingold, graph: Graph) -> dict[str, Any]:
    """
    Time one animate() run.

    Returns:
        Dict with timing and result info
    """
    start = time.perf_counter()
    sequence = engine.animate(graph)
    elapsed = time.perf_counter() - start

    lengths = sequence.last_frame.edge_lengths()
    return {
        "time_seconds": elapsed,
        "num_nodes": graph.node_count(),
        "num_edges": len(graph.edges()),
        "frames": sequence.frame_count,
        "mean_edge_length": float(lengths.mean()) if len(lengths) else None,
    }


def run_benchmarks(
    graph_pattern: str = "*",
    iterations: int = 200,
    ideal_edge_length: float = 150.0,
) -> list[dict]:
    """Run benchmarks on matching graphs."""
    graphs = {
        name: graph
        for name, graph in benchmark_graphs().items()
        if fnmatch(name, graph_pattern)
    }
    if not graphs:
        print(f"No graphs matching pattern '{graph_pattern}'")
        return []

    engine = FruchtermanReingold(
        ideal_edge_length=ideal_edge_length, iterations=iterations, random_seed=42
    )

    print(f"\nBenchmarking {engine!r} on {len(graphs)} graphs")
    print("=" * 72)
    print(f"{'Graph':<20s}{'nodes':>8s}{'edges':>8s}{'time (s)':>12s}{'mean edge':>12s}")
    print("-" * 72)

    results = []
    for name, graph in graphs.items():
        result = benchmark_engine(engine, graph)
        mean = result["mean_edge_length"]
        print(
            f"{name:<20s}{result['num_nodes']:>8d}{result['num_edges']:>8d}"
            f"{result['time_seconds']:>12.4f}"
            f"{mean if mean is None else round(mean, 1)!s:>12s}"
        )
        results.append({"graph": name, **result})

    total = np.sum([r["time_seconds"] for r in results])
    print("-" * 72)
    print(f"Total: {total:.4f}s")
    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark the force-directed engine")
    parser.add_argument("--graphs", default="*", help="Graph name pattern (e.g., 'random-*')")
    parser.add_argument("--iterations", type=int, default=200, help="Simulation steps")
    parser.add_argument("--k", type=float, default=150.0, help="Ideal edge length")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    results = run_benchmarks(
        graph_pattern=args.graphs,
        iterations=args.iterations,
        ideal_edge_length=args.k,
    )

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
