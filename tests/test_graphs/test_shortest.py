"""Tests for least-cost path search."""

import pytest

from labelgraph import MissingNodeError, least_weighted_path, path_weight, set_debug_enabled


class TestLeastWeightedPath:
    """Tests for least_weighted_path."""

    def test_cheaper_detour(self, weighted_graph):
        """A cheaper two-edge path beats an expensive direct edge."""
        path = least_weighted_path(weighted_graph, "A", "B")
        assert path == ["A", "C", "B"]
        assert path_weight(weighted_graph, path) == pytest.approx(2.0)

    def test_direct_edge_when_cheapest(self, make_graph):
        """The direct edge wins when it is cheapest."""
        G = make_graph(
            ["A", "B", "C"],
            [("A", "B", 1.0), ("A", "C", 1.0), ("C", "B", 1.0)],
        )
        assert least_weighted_path(G, "A", "B") == ["A", "B"]

    def test_parallel_edges_use_minimum(self, make_graph):
        """Relaxation uses the cheapest of several parallel edges."""
        G = make_graph(
            ["A", "B", "C"],
            [("A", "B", 3.0), ("A", "B", 7.0), ("A", "C", 1.0), ("C", "B", 2.5)],
        )
        # 3.0 direct beats 1.0 + 2.5; with 7.0 the detour would win
        assert least_weighted_path(G, "A", "B") == ["A", "B"]
        assert path_weight(G, ["A", "B"]) == pytest.approx(3.0)

    def test_start_equals_end(self, weighted_graph):
        """A zero-edge search yields a single-node path."""
        assert least_weighted_path(weighted_graph, "A", "A") == ["A"]

    def test_unreachable_returns_none(self, weighted_graph):
        """No path is a None result, not an error."""
        weighted_graph.add_node("D")
        assert least_weighted_path(weighted_graph, "A", "D") is None
        assert least_weighted_path(weighted_graph, "B", "A") is None

    def test_zero_weights(self, make_graph):
        """Zero-weight edges are allowed."""
        G = make_graph(
            ["A", "B", "C"],
            [("A", "B", 0.0), ("B", "C", 0.0), ("A", "C", 0.5)],
        )
        assert least_weighted_path(G, "A", "C") == ["A", "B", "C"]

    def test_improvement_reprioritizes(self, make_graph):
        """A node first reached expensively is improved before it is settled."""
        G = make_graph(
            ["S", "A", "B", "T"],
            [
                ("S", "T", 10.0),
                ("S", "A", 1.0),
                ("A", "B", 1.0),
                ("B", "T", 1.0),
            ],
        )
        path = least_weighted_path(G, "S", "T")
        assert path == ["S", "A", "B", "T"]
        assert path_weight(G, path) == pytest.approx(3.0)

    def test_integer_weights_and_cycles(self, make_graph):
        """Integer weights work and cycles terminate."""
        G = make_graph(
            [0, 1, 2, 3, 4, 5],
            [
                (0, 1, 7),
                (0, 2, 9),
                (0, 5, 14),
                (1, 2, 10),
                (1, 3, 15),
                (2, 3, 11),
                (2, 5, 2),
                (3, 4, 6),
                (4, 5, 9),
                (5, 0, 1),
            ],
        )
        path = least_weighted_path(G, 0, 4)
        assert path == [0, 2, 3, 4]
        assert path_weight(G, path) == 26
        assert least_weighted_path(G, 0, 5) == [0, 2, 5]

    def test_unorderable_nodes(self, make_graph):
        """Nodes need not be mutually comparable."""
        a, b, c = object(), object(), object()
        G = make_graph([a, b, c], [(a, b, 1.0), (a, c, 1.0), (c, b, 1.0)])
        assert least_weighted_path(G, a, b) == [a, b]

    def test_path_through_none_node(self, make_graph):
        """None is an ordinary node in the middle of a path."""
        # The representation check rejects None nodes
        set_debug_enabled(False)
        G = make_graph(["A", None, "B"], [("A", None, 1.0), (None, "B", 1.0)])
        assert least_weighted_path(G, "A", "B") == ["A", None, "B"]
        assert path_weight(G, ["A", None, "B"]) == pytest.approx(2.0)

    def test_start_at_none_node(self, make_graph):
        """A search may start from the None node."""
        set_debug_enabled(False)
        G = make_graph([None, "B"], [(None, "B", 2.0)])
        assert least_weighted_path(G, None, "B") == [None, "B"]
        assert least_weighted_path(G, None, None) == [None]

    def test_deterministic(self, weighted_graph):
        """Repeated searches return equal results."""
        first = least_weighted_path(weighted_graph, "A", "B")
        for _ in range(5):
            assert least_weighted_path(weighted_graph, "A", "B") == first


class TestPathWeight:
    """Tests for path_weight."""

    def test_single_node(self, weighted_graph):
        """A one-node path costs nothing."""
        assert path_weight(weighted_graph, ["A"]) == 0.0

    def test_empty_path(self, weighted_graph):
        """An empty path costs nothing."""
        assert path_weight(weighted_graph, []) == 0.0

    def test_missing_node(self, weighted_graph):
        """Unknown nodes raise MissingNodeError."""
        with pytest.raises(MissingNodeError):
            path_weight(weighted_graph, ["A", "Z"])

    def test_disconnected_pair(self, weighted_graph):
        """Consecutive nodes without an edge raise ValueError."""
        with pytest.raises(ValueError, match="No edge"):
            path_weight(weighted_graph, ["B", "A"])
