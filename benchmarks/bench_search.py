"""Benchmark graph construction and path search."""

import time
from typing import Dict

import numpy as np

import labelgraph as lg


def build_random_graph(
    n_nodes: int,
    n_edges: int,
    seed: int = 0,
    disable_check_rep: bool = True,
) -> lg.Graph:
    """Build a random graph with weights drawn uniformly from [0, 10).

    Args:
        n_nodes: Number of nodes, named "n0" .. "n{n_nodes-1}".
        n_edges: Number of edge insertions attempted; duplicates are skipped.
        seed: RNG seed.
        disable_check_rep: Forwarded to Graph.

    Returns:
        The populated graph.
    """
    rng = np.random.default_rng(seed)
    G = lg.Graph(disable_check_rep=disable_check_rep)
    names = [f"n{i}" for i in range(n_nodes)]
    for name in names:
        G.add_node(name)

    sources = rng.integers(0, n_nodes, size=n_edges)
    targets = rng.integers(0, n_nodes, size=n_edges)
    weights = np.round(rng.uniform(0.0, 10.0, size=n_edges), 3)
    for u, v, w in zip(sources, targets, weights):
        if not G.contains_edge(names[u], names[v], float(w)):
            G.add_edge(names[u], names[v], float(w))
    return G


def benchmark_search(n_nodes: int, n_edges: int, n_queries: int = 100) -> Dict[str, float]:
    """Benchmark both searches over random start/end pairs.

    Args:
        n_nodes: Number of nodes.
        n_edges: Number of edges.
        n_queries: Number of (start, end) pairs searched.

    Returns:
        Dictionary with timing results.
    """
    start = time.perf_counter()
    G = build_random_graph(n_nodes, n_edges)
    build_time = time.perf_counter() - start

    rng = np.random.default_rng(1)
    pairs = rng.integers(0, n_nodes, size=(n_queries, 2))
    queries = [(f"n{a}", f"n{b}") for a, b in pairs]

    start = time.perf_counter()
    for a, b in queries:
        lg.shortest_path(G, a, b)
    bfs_time = time.perf_counter() - start

    start = time.perf_counter()
    for a, b in queries:
        lg.least_weighted_path(G, a, b)
    dijkstra_time = time.perf_counter() - start

    return {
        "n_nodes": n_nodes,
        "n_edges": n_edges,
        "build_time_sec": build_time,
        "bfs_time_per_query_sec": bfs_time / n_queries,
        "dijkstra_time_per_query_sec": dijkstra_time / n_queries,
    }


if __name__ == "__main__":
    print("Benchmarking path search...")

    results = benchmark_search(n_nodes=2000, n_edges=10000)
    print("Search (2000 nodes, 10k edges):")
    print(f"  Build time: {results['build_time_sec']*1e3:.2f} ms")
    print(f"  BFS per query: {results['bfs_time_per_query_sec']*1e3:.3f} ms")
    print(f"  Dijkstra per query: {results['dijkstra_time_per_query_sec']*1e3:.3f} ms")
