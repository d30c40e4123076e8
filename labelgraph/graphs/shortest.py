"""
Least-cost paths over graphs whose edge labels are non-negative weights.

Dijkstra's algorithm with a binary heap. Parallel edges collapse to their
cheapest weight.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from ..errors import MissingNodeError
from ..logging import get_logger
from .core import Graph
from .utils import reconstruct_path

logger = get_logger(__name__)


def least_weighted_path(graph: Graph, start: Hashable, end: Hashable) -> Optional[List[Hashable]]:
    """
    Find the least-cost path from start to end.

    Edge labels are the edge weights and must be non-negative real numbers;
    negative weights are not detected and give undefined results. When
    several edges join the same pair of nodes only the cheapest is used.

    Args:
        graph: Graph whose labels are non-negative numbers.
        start: Start node; must be in the graph.
        end: End node; must be in the graph.

    Returns:
        List of nodes [start, ..., end] along a least-cost path, [start]
        when start == end, or None if end is unreachable.

    Complexity: O((V + E) log E) with lazy heap deletion.

    Example:
        >>> G = Graph()
        >>> for n in ("A", "B", "C"):
        ...     G.add_node(n)
        >>> G.add_edge("A", "B", 5.0)
        >>> G.add_edge("A", "C", 1.0)
        >>> G.add_edge("C", "B", 1.0)
        >>> least_weighted_path(G, "A", "B")
        ['A', 'C', 'B']
    """
    dist: Dict[Hashable, float] = {start: 0.0}
    parent: Dict[Hashable, Optional[Hashable]] = {start: None}
    settled: set = set()

    # Priority queue: (distance, insertion order, node). The counter breaks
    # ties so nodes themselves are never compared.
    counter = itertools.count()
    pq: List[Tuple[float, int, Hashable]] = [(0.0, next(counter), start)]

    while pq:
        d, _, u = heapq.heappop(pq)

        # Stale entry left behind by a later improvement
        if u in settled:
            continue

        if u == end:
            path = reconstruct_path(parent, end, source=start)
            logger.debug("Least-cost path %r -> %r costs %s", start, end, d)
            return path

        settled.add(u)

        for v, weights in graph.get_children(u).items():
            if v in settled:
                continue

            new_dist = d + min(weights)
            if v not in dist or new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, next(counter), v))

    logger.debug("No path from %r to %r", start, end)
    return None


def path_weight(graph: Graph, path: Sequence[Hashable]) -> float:
    """
    Total weight of a node path, using the cheapest edge between each pair.

    Args:
        graph: Graph whose labels are numbers.
        path: Sequence of nodes, as returned by least_weighted_path.

    Returns:
        Sum of edge weights; 0.0 for a path of fewer than two nodes.

    Raises:
        MissingNodeError: If a node of the path is not in the graph.
        ValueError: If two consecutive nodes are not joined by an edge.
    """
    for node in path:
        if not graph.contains_node(node):
            raise MissingNodeError(node)

    total = 0.0
    for u, v in zip(path, path[1:]):
        weights = graph.labels(u, v)
        if not weights:
            raise ValueError(f"No edge from {u!r} to {v!r}")
        total += min(weights)
    return total
