"""
Core graph data structure.

Provides Graph, a mutable directed labeled multigraph. Each node maps to
its children, and each child to the set of labels on the edges leading to
it. Any number of edges may join an ordered pair of nodes as long as their
labels differ.

Query results are read-only snapshots: node and label sets are frozensets,
adjacency mappings are MappingProxyType views over a private copy.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, List, Mapping, Set, Tuple

from ..diagnostics.core import check_representation
from ..diagnostics.debug_mode import should_check_representation
from ..errors import DuplicateEdgeError, DuplicateNodeError, MissingNodeError
from ..logging import get_logger

logger = get_logger(__name__)


class Graph:
    """
    Mutable directed labeled multigraph with adjacency-map representation.

    Nodes and labels may be any hashable values. An edge is identified by
    its (source, destination, label) triple; the same triple cannot be
    added twice, but distinct labels between the same pair are allowed.
    Nodes and edges are never removed.

    Attributes:
        disable_check_rep: If True, the debug-mode representation check is
            skipped for this graph.

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(1) amortized
        - contains_node / contains_edge / contains_child: O(1)
        - get_nodes: O(V)
        - get_children: O(deg(v) + labels)
    """

    def __init__(self, disable_check_rep: bool = False):
        """
        Initialize an empty graph.

        Args:
            disable_check_rep: If True, never validate the representation
                after mutations, even when debug mode is enabled.
        """
        # node -> {child -> labels}
        self._adj: Dict[Hashable, Dict[Hashable, Set[Hashable]]] = {}
        self._disable_check_rep = disable_check_rep
        self._check_rep()

    @property
    def disable_check_rep(self) -> bool:
        """Whether the representation check is disabled for this graph."""
        return self._disable_check_rep

    def add_node(self, node: Hashable) -> None:
        """
        Add a node with no outgoing edges.

        Args:
            node: Hashable node identifier.

        Raises:
            DuplicateNodeError: If the node is already in the graph.
        """
        if node in self._adj:
            raise DuplicateNodeError(node)

        self._adj[node] = {}
        logger.debug("Added node %r", node)
        self._check_rep()

    def add_edge(self, source: Hashable, destination: Hashable, label: Hashable) -> None:
        """
        Add a labeled edge from source to destination.

        Args:
            source: Node the edge starts at.
            destination: Node the edge ends at.
            label: Edge label.

        Raises:
            MissingNodeError: If source or destination is not in the graph.
            DuplicateEdgeError: If an edge with the same source, destination
                and label already exists.
        """
        if source not in self._adj:
            raise MissingNodeError(source)
        if destination not in self._adj:
            raise MissingNodeError(destination)

        children = self._adj[source]
        labels = children.get(destination)
        if labels is None:
            children[destination] = {label}
        elif label in labels:
            raise DuplicateEdgeError(source, destination, label)
        else:
            labels.add(label)

        logger.debug("Added edge %r -> %r [%r]", source, destination, label)
        self._check_rep()

    def contains_node(self, node: Hashable) -> bool:
        """Return True if node is in the graph."""
        return node in self._adj

    def contains_edge(self, source: Hashable, destination: Hashable, label: Hashable) -> bool:
        """
        Return True if an edge source -> destination with label exists.

        Never raises; absent nodes simply yield False.
        """
        if source not in self._adj or destination not in self._adj:
            return False
        labels = self._adj[source].get(destination)
        return labels is not None and label in labels

    def contains_child(self, parent: Hashable, child: Hashable) -> bool:
        """
        Return True if at least one edge leads from parent to child.

        Raises:
            MissingNodeError: If parent is not in the graph.
        """
        if parent not in self._adj:
            raise MissingNodeError(parent)
        return child in self._adj[parent]

    def get_nodes(self) -> FrozenSet[Hashable]:
        """Return a snapshot of all nodes. Order is unspecified."""
        return frozenset(self._adj)

    def get_children(self, node: Hashable) -> Mapping[Hashable, FrozenSet[Hashable]]:
        """
        Return the adjacency of a node as a read-only mapping.

        Args:
            node: Node whose outgoing edges are requested.

        Returns:
            Mapping from each child to the frozenset of labels on the edges
            from node to that child.

        Raises:
            MissingNodeError: If node is not in the graph.
        """
        if node not in self._adj:
            raise MissingNodeError(node)
        return MappingProxyType(
            {child: frozenset(labels) for child, labels in self._adj[node].items()}
        )

    def labels(self, source: Hashable, destination: Hashable) -> FrozenSet[Hashable]:
        """
        Return the labels of all edges from source to destination.

        Returns an empty frozenset if destination is not a child of source.

        Raises:
            MissingNodeError: If source is not in the graph.
        """
        if source not in self._adj:
            raise MissingNodeError(source)
        return frozenset(self._adj[source].get(destination, ()))

    def nodes(self) -> List[Hashable]:
        """
        Return list of all nodes in sorted order.

        Returns:
            Nodes sorted by string representation.
        """
        return sorted(self._adj, key=lambda x: str(x))

    def edges(self) -> List[Tuple[Hashable, Hashable, Hashable]]:
        """
        Return list of all edges as (source, destination, label) triples.

        Triples are sorted by the string representation of their parts.
        """
        edges_list = []
        for source in self.nodes():
            children = self._adj[source]
            for destination in sorted(children, key=lambda x: str(x)):
                for label in sorted(children[destination], key=lambda x: str(x)):
                    edges_list.append((source, destination, label))
        return edges_list

    def edge_count(self) -> int:
        """Return the number of edges, counting parallel edges separately."""
        return sum(
            len(labels) for children in self._adj.values() for labels in children.values()
        )

    def __contains__(self, node: Hashable) -> bool:
        return self.contains_node(node)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._adj)}, edges={self.edge_count()})"

    def _check_rep(self) -> None:
        if should_check_representation(self._disable_check_rep):
            check_representation(self._adj)
