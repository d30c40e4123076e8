"""
Graph container and path-search algorithms.

This package provides:
- Graph: mutable directed labeled multigraph
- shortest_path: fewest-edge path (BFS) with deterministic tie-breaking
- least_weighted_path: least-cost path over non-negative weights (Dijkstra)
- Helpers for path reconstruction and weight matrices
"""

from .core import Graph
from .matrix import weight_matrix
from .shortest import least_weighted_path, path_weight
from .traversal import shortest_path
from .utils import node_index_map, reconstruct_labeled_path, reconstruct_path

__all__ = [
    "Graph",
    "shortest_path",
    "least_weighted_path",
    "path_weight",
    "weight_matrix",
    "node_index_map",
    "reconstruct_path",
    "reconstruct_labeled_path",
]

# Example usage:
# from labelgraph.graphs import Graph, least_weighted_path
#
# G = Graph()
# for node in ('A', 'B', 'C'):
#     G.add_node(node)
# G.add_edge('A', 'B', 1.0)
# G.add_edge('B', 'C', 2.0)
# least_weighted_path(G, 'A', 'C')  # ['A', 'B', 'C']
