"""
Breadth-first shortest path with deterministic tie-breaking.

Children are expanded in sorted node order, and among parallel edges the
least label is taken, so among equally short paths the same one is always
returned.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
"""

from collections import deque
from typing import Dict, Hashable, List, Optional, Tuple

from ..logging import get_logger
from .core import Graph
from .utils import reconstruct_labeled_path

logger = get_logger(__name__)


def shortest_path(graph: Graph, start: Hashable, end: Hashable) -> Optional[List[Hashable]]:
    """
    Find the path from start to end with the fewest edges.

    Nodes and labels must be mutually orderable (typically strings). Among
    paths of equal length the result is the one reached by expanding
    children in ascending order and following the least label of each
    parallel edge group.

    Args:
        graph: Graph to search.
        start: Start node; must be in the graph.
        end: End node; must be in the graph.

    Returns:
        - [start, label_1, node_1, ..., label_k, end] when a path exists;
        - [] when start == end (zero-edge path; note that
          least_weighted_path returns [start] in this case);
        - None when end is unreachable from start.

    Complexity: O(V + E log E) because children are sorted at each expansion.

    Example:
        >>> G = Graph()
        >>> for n in ("A", "B", "C"):
        ...     G.add_node(n)
        >>> G.add_edge("A", "B", "x")
        >>> G.add_edge("B", "C", "y")
        >>> shortest_path(G, "A", "C")
        ['A', 'x', 'B', 'y', 'C']
    """
    if start == end:
        return []

    # node -> (parent, label) for every discovered node
    parent: Dict[Hashable, Optional[Tuple[Hashable, Hashable]]] = {start: None}
    queue = deque([start])

    while queue:
        u = queue.popleft()

        if u == end:
            path = reconstruct_labeled_path(parent, end)
            logger.debug("Shortest path %r -> %r has %d edges", start, end, len(path) // 2)
            return path

        children = graph.get_children(u)
        for v in sorted(children):
            if v in parent:
                continue
            parent[v] = (u, min(children[v]))
            queue.append(v)

    logger.debug("No path from %r to %r", start, end)
    return None
