"""Representation checks for graph adjacency structures."""

from __future__ import annotations

from typing import Hashable, Mapping, Optional, Set

from ..errors import RepresentationError
from ..logging import get_logger

logger = get_logger(__name__)


def find_representation_violation(
    adjacency: Optional[Mapping[Hashable, Mapping[Hashable, Set[Hashable]]]],
) -> Optional[str]:
    """
    Describe the first representation-invariant violation in an adjacency map.

    The adjacency map is expected to map every node to a (possibly empty)
    mapping from child node to a non-empty set of edge labels, and every
    child to be a node of the map itself.

    Parameters
    ----------
    adjacency:
        Node -> {child -> labels} mapping, as stored by ``Graph``.

    Returns
    -------
    Optional[str]
        A description of the violation, or None if the structure is sound.
    """
    if adjacency is None:
        return "adjacency map is None"

    for node, children in adjacency.items():
        if node is None:
            return "graph contains a None node"
        if children is None:
            return f"node {node!r} has no adjacency mapping"
        for child, labels in children.items():
            if child not in adjacency:
                return f"child {child!r} of {node!r} is not a node of the graph"
            if labels is None:
                return f"edge set {node!r} -> {child!r} is None"
            if not labels:
                return f"edge set {node!r} -> {child!r} is empty"
            if None in labels:
                return f"edge set {node!r} -> {child!r} contains a None label"

    return None


def is_representation_valid(
    adjacency: Optional[Mapping[Hashable, Mapping[Hashable, Set[Hashable]]]],
) -> bool:
    """Return True if the adjacency map satisfies the representation invariant."""
    return find_representation_violation(adjacency) is None


def check_representation(
    adjacency: Optional[Mapping[Hashable, Mapping[Hashable, Set[Hashable]]]],
) -> None:
    """
    Assert that an adjacency map satisfies the representation invariant.

    Parameters
    ----------
    adjacency:
        Node -> {child -> labels} mapping, as stored by ``Graph``.

    Raises
    ------
    RepresentationError
        If any invariant is violated.
    """
    violation = find_representation_violation(adjacency)
    if violation is not None:
        logger.error("Graph representation invariant violated: %s", violation)
        raise RepresentationError(violation)
