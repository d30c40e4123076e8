"""
Utility functions for graph algorithms.

Provides helpers for node indexing and path reconstruction.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
    """
    sorted_nodes = sorted(set(nodes), key=lambda x: str(x))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


# Distinguishes "no source given" from a None node
_NO_SOURCE = object()


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]],
    target: Hashable,
    source: Hashable = _NO_SOURCE,
) -> Optional[List[Hashable]]:
    """
    Reconstruct a node path from source to target using a parent map.

    parent[node] is the previous node on the path. Without ``source`` the
    walk ends at the node whose parent is None; with ``source`` it ends at
    that node, so None may itself be a node of the path.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Target node to reconstruct path to.
        source: Node the path starts at. Required when None is a node.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is not in the parent map or the walk never reaches the source.

    Example:
        >>> reconstruct_path({'A': None, 'B': 'A', 'C': 'B'}, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path({'A': None, None: 'A', 'B': None}, 'B', source='A')
        ['A', None, 'B']
    """
    if target not in parent:
        return None

    path = [target]
    current = target
    visited = {target}
    while True:
        if source is _NO_SOURCE:
            if parent.get(current) is None:
                break
        elif current == source:
            break
        elif current not in parent:
            return None

        current = parent[current]
        if current in visited:
            # Cycle in the parent map
            return None
        visited.add(current)
        path.append(current)

    path.reverse()
    return path


def reconstruct_labeled_path(
    parent: Dict[Hashable, Optional[Tuple[Hashable, Hashable]]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct an interleaved node/label path from a labeled parent map.

    parent[node] is a (previous_node, label) pair, or None for the source.

    Args:
        parent: Dictionary mapping node -> (parent node, edge label) or None.
        target: Target node to reconstruct path to.

    Returns:
        List [source, label, node, ..., label, target], or None if target is
        not in the parent map.

    Example:
        >>> reconstruct_labeled_path({'A': None, 'B': ('A', 'x')}, 'B')
        ['A', 'x', 'B']
    """
    if target not in parent:
        return None

    path = [target]
    current = target
    visited = {target}
    while parent.get(current) is not None:
        previous, label = parent[current]
        if previous in visited:
            return None
        visited.add(previous)
        path.append(label)
        path.append(previous)
        current = previous

    path.reverse()
    return path
