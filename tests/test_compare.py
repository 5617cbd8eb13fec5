"""
Tests for side-by-side algorithm comparison.
"""

import pytest

from pathlab.algorithms import ALGORITHMS, run_algorithm
from pathlab.errors import UnknownAlgorithmError
from pathlab.playback import compare_algorithms, summarize


class TestSummarize:
    """Test reducing a run to headline numbers."""

    def test_bfs_summary(self, sample_graph, ids):
        """BFS A -> F: 14 steps, 6 nodes, 3 edges of weight 12."""
        result = run_algorithm("bfs", sample_graph, ids["A"], ids["F"])
        summary = summarize(result, sample_graph)
        assert summary.algorithm == "bfs"
        assert summary.total_steps == 14
        assert summary.nodes_visited == 6
        assert summary.path_length == 3
        assert summary.path_weight == 12
        assert summary.succeeded

    def test_no_path(self, sample_graph, ids):
        """Traversals without an end have no path numbers."""
        summary = summarize(run_algorithm("dfs", sample_graph, ids["A"]), sample_graph)
        assert summary.path is None
        assert summary.path_weight is None
        assert summary.has_cycle is True


class TestCompareAlgorithms:
    """Test running every algorithm on one input."""

    def test_all_algorithms_with_end(self, sample_graph, ids):
        """Every algorithm runs; weighted ones agree on cost 7."""
        summaries = compare_algorithms(sample_graph, ids["A"], ids["F"])
        assert [s.algorithm for s in summaries] == list(ALGORITHMS)
        weights = {s.algorithm: s.path_weight for s in summaries}
        assert weights["dijkstra"] == weights["bellman-ford"] == weights["astar"] == 7
        assert weights["bfs"] == 12

    def test_astar_reported_without_end(self, sample_graph, ids):
        """A* without an end is reported as an error, not raised."""
        summaries = {s.algorithm: s for s in compare_algorithms(sample_graph, ids["A"])}
        assert not summaries["astar"].succeeded
        assert "requires an end node" in summaries["astar"].error
        assert all(s.succeeded for name, s in summaries.items() if name != "astar")

    def test_subset_in_given_order(self, sample_graph, ids):
        """Only the named algorithms run, in the given order."""
        summaries = compare_algorithms(sample_graph, ids["A"], ids["F"], names=["dijkstra", "bfs"])
        assert [s.algorithm for s in summaries] == ["dijkstra", "bfs"]

    def test_unknown_name_raises(self, sample_graph, ids):
        """Typos are not swallowed."""
        with pytest.raises(UnknownAlgorithmError):
            compare_algorithms(sample_graph, ids["A"], names=["bfs", "kruskal"])

    def test_negative_cycle_flag(self, make_graph):
        """Bellman-Ford's negative cycle shows up in its summary."""
        graph = make_graph([("A", "B", 1), ("B", "C", -3), ("C", "A", 1)], directed=True)
        summary = compare_algorithms(graph, "A", "C", names=["bellman-ford"])[0]
        assert summary.has_negative_cycle is True
        assert summary.path is None
