"""Tests for the weight matrix export."""

import numpy as np
import pytest

from labelgraph import MissingNodeError, weight_matrix


class TestWeightMatrix:
    """Tests for weight_matrix."""

    def test_weight_matrix_simple(self, weighted_graph):
        """Test matrix layout in sorted node order."""
        W = weight_matrix(weighted_graph)

        assert W.shape == (3, 3)
        # Order: A, B, C
        assert W[0, 1] == pytest.approx(5.0)
        assert W[0, 2] == pytest.approx(1.0)
        assert W[2, 1] == pytest.approx(1.0)
        assert np.isinf(W[1, 0])
        assert np.all(np.isinf(np.diag(W)))

    def test_parallel_edges_minimum(self, make_graph):
        """Parallel edges collapse to their cheapest weight."""
        G = make_graph(["A", "B"], [("A", "B", 3.0), ("A", "B", 7.0)])
        W = weight_matrix(G)
        assert W[0, 1] == pytest.approx(3.0)

    def test_missing_value(self, weighted_graph):
        """Absent edges take the requested fill value."""
        W = weight_matrix(weighted_graph, missing=0.0)
        expected = np.array(
            [
                [0.0, 5.0, 1.0],
                [0.0, 0.0, 0.0],
                [0.0, 1.0, 0.0],
            ]
        )
        assert np.allclose(W, expected)

    def test_node_subset(self, weighted_graph):
        """Edges to excluded nodes are dropped."""
        W = weight_matrix(weighted_graph, nodes=["B", "A"], missing=0.0)
        assert W.shape == (2, 2)
        assert np.allclose(W, [[0.0, 5.0], [0.0, 0.0]])

    def test_unknown_node(self, weighted_graph):
        """Unknown nodes in the subset raise MissingNodeError."""
        with pytest.raises(MissingNodeError):
            weight_matrix(weighted_graph, nodes=["A", "Z"])

    def test_empty_graph(self, make_graph):
        """An empty graph gives an empty matrix."""
        W = weight_matrix(make_graph([], []))
        assert W.shape == (0, 0)
