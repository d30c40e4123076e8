"""
Dense matrix export for weighted graphs.

Lays the cheapest edge weight between every ordered pair of nodes out in a
numpy array, in the node order given by node_index_map.
"""

from typing import Hashable, List, Optional

import numpy as np

from .core import Graph
from .utils import node_index_map


def weight_matrix(
    graph: Graph,
    nodes: Optional[List[Hashable]] = None,
    missing: float = np.inf,
) -> np.ndarray:
    """
    Compute the weight matrix W of a graph with numeric labels.

    W[i, j] is the minimum weight over all edges from node i to node j, or
    ``missing`` if there is no such edge.

    Args:
        graph: Graph whose labels are numbers.
        nodes: Optional list of nodes to include (defaults to all nodes).
            Edges to nodes outside the list are ignored.
        missing: Value stored where no edge exists (default: inf).

    Returns:
        (n, n) float array in node index order (sorted by string
        representation).

    Raises:
        MissingNodeError: If a node of ``nodes`` is not in the graph.

    Example:
        >>> G = Graph()
        >>> G.add_node('A'); G.add_node('B')
        >>> G.add_edge('A', 'B', 3.0)
        >>> G.add_edge('A', 'B', 7.0)
        >>> weight_matrix(G)[0, 1]
        3.0
    """
    if nodes is None:
        nodes = graph.nodes()

    node_to_idx, idx_to_node = node_index_map(nodes)
    n = len(idx_to_node)

    W = np.full((n, n), missing, dtype=float)

    for u in idx_to_node:
        i = node_to_idx[u]
        for v, weights in graph.get_children(u).items():
            if v in node_to_idx:
                W[i, node_to_idx[v]] = min(weights)

    return W
