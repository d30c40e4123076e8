"""Pytest configuration and shared fixtures for labelgraph tests.

This module provides:
- Small prebuilt graphs shared by the container and search tests
- Isolation of the global debug-mode switch between tests
"""

from typing import Iterator

import pytest

from labelgraph import Graph
from labelgraph.diagnostics import is_debug_enabled, set_debug_enabled


def build_graph(nodes, edges, **kwargs) -> Graph:
    """Build a Graph from a node iterable and (source, destination, label) triples."""
    G = Graph(**kwargs)
    for node in nodes:
        G.add_node(node)
    for source, destination, label in edges:
        G.add_edge(source, destination, label)
    return G


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Auto-use fixture restoring the global debug flag after every test."""
    original = is_debug_enabled()
    try:
        yield
    finally:
        set_debug_enabled(original)


@pytest.fixture
def make_graph():
    """Provide build_graph to tests that need a custom graph."""
    return build_graph


@pytest.fixture
def triangle_graph() -> Graph:
    """
    Labeled graph with a direct edge and a two-hop detour.

    Structure:
        A --x--> B --z--> C
        A --y-----------> C
    """
    return build_graph(
        ["A", "B", "C"],
        [("A", "B", "x"), ("A", "C", "y"), ("B", "C", "z")],
    )


@pytest.fixture
def weighted_graph() -> Graph:
    """
    Weighted graph where the cheap path has more edges.

    Structure:
        A --5.0--> B
        A --1.0--> C --1.0--> B
    """
    return build_graph(
        ["A", "B", "C"],
        [("A", "B", 5.0), ("A", "C", 1.0), ("C", "B", 1.0)],
    )
