"""Error types raised by labelgraph.

Caller-facing errors derive from :class:`GraphError` and keep a built-in
base (``ValueError`` or ``KeyError``) so generic handlers still catch them.
:class:`RepresentationError` is separate: it signals a broken container,
not a misuse.
"""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for errors caused by invalid graph operations."""


class DuplicateNodeError(GraphError, ValueError):
    """Raised when adding a node that is already in the graph."""

    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(f"Node {node!r} already in graph")


class MissingNodeError(GraphError, KeyError):
    """Raised when an operation references a node that is not in the graph."""

    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(f"Node {node!r} not in graph")

    def __str__(self) -> str:
        # KeyError would render the repr of the message
        return str(self.args[0])


class DuplicateEdgeError(GraphError, ValueError):
    """Raised when adding an edge whose (source, destination, label) exists."""

    def __init__(self, source: Hashable, destination: Hashable, label: Hashable):
        self.source = source
        self.destination = destination
        self.label = label
        super().__init__(
            f"Edge {source!r} -> {destination!r} with label {label!r} already in graph"
        )


class RepresentationError(AssertionError):
    """Raised by the debug-mode check when the graph's internal structure is corrupt."""
