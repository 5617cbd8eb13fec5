"""
Tests for step playback.
"""

import pytest

from pathlab.algorithms import AlgorithmResult, StepType, run_algorithm
from pathlab.playback import Playback


@pytest.fixture
def bfs_playback(sample_graph, ids):
    """Playback over BFS from A to F (14 steps)."""
    result = run_algorithm("bfs", sample_graph, ids["A"], ids["F"])
    return Playback(result, sample_graph)


class TestCursor:
    """Test moving through the trace."""

    def test_starts_on_first_step(self, bfs_playback, ids):
        """The cursor begins at step 0."""
        assert bfs_playback.index == 0
        assert bfs_playback.total_steps == 14
        assert bfs_playback.frame.step.node_id == ids["A"]

    def test_step_forward_and_back(self, bfs_playback):
        """Forward then back returns to the same frame."""
        first = bfs_playback.frame
        bfs_playback.step_forward()
        assert bfs_playback.index == 1
        assert bfs_playback.step_backward() == first

    def test_clamps_at_both_ends(self, bfs_playback):
        """Moving past either end leaves the cursor where it is."""
        bfs_playback.step_backward()
        assert bfs_playback.index == 0
        for _ in range(30):
            bfs_playback.step_forward()
        assert bfs_playback.index == 13
        assert bfs_playback.is_finished

    def test_seek(self, bfs_playback):
        """seek jumps directly; out-of-range raises."""
        frame = bfs_playback.seek(5)
        assert frame.index == 5
        with pytest.raises(IndexError):
            bfs_playback.seek(14)
        with pytest.raises(IndexError):
            bfs_playback.seek(-1)

    def test_reset(self, bfs_playback):
        """reset returns to the first step."""
        bfs_playback.seek(10)
        assert bfs_playback.reset().index == 0

    def test_empty_trace(self, sample_graph):
        """An empty result has no frames."""
        playback = Playback(AlgorithmResult(algorithm="bfs"), sample_graph)
        assert playback.frame is None
        assert list(playback.frames()) == []


class TestFrames:
    """Test highlight state per frame."""

    def test_highlights_current_step(self, bfs_playback, ids):
        """Explore steps highlight their node and edge."""
        frame = bfs_playback.seek(1)
        assert frame.step.type == StepType.EXPLORE
        assert frame.highlighted_nodes == {ids["B"]}
        assert frame.highlighted_edges == {"e1"}

    def test_visited_accumulates(self, bfs_playback, ids):
        """Visited nodes grow frame by frame."""
        frames = list(bfs_playback.frames())
        assert frames[0].visited_nodes == {ids["A"]}
        for earlier, later in zip(frames, frames[1:]):
            assert earlier.visited_nodes <= later.visited_nodes
        assert len(frames[-1].visited_nodes) == 6

    def test_path_only_on_completion(self, bfs_playback, ids):
        """The path appears with the complete step and maps to edges."""
        frames = list(bfs_playback.frames())
        assert all(not f.path_nodes for f in frames[:-1])
        last = frames[-1]
        assert last.path_nodes == {ids["A"], ids["B"], ids["C"], ids["F"]}
        assert last.path_edges == {"e1", "e3", "e5"}
        assert last.highlighted_nodes == frozenset()

    @pytest.mark.parametrize("name", ["bfs", "dfs", "dijkstra", "astar"])
    def test_frames_match_seek(self, name, sample_graph, ids):
        """Iterated frames equal the frame at the same cursor position."""
        result = run_algorithm(name, sample_graph, ids["A"], ids["F"])
        playback = Playback(result, sample_graph)
        for frame in playback.frames():
            assert playback.seek(frame.index) == frame

    def test_frames_do_not_move_cursor(self, bfs_playback):
        """Iterating frames leaves the cursor alone."""
        bfs_playback.seek(3)
        list(bfs_playback.frames())
        assert bfs_playback.index == 3

    def test_without_snapshots(self, sample_graph, ids):
        """With snapshots off, visited stays empty but the path still shows."""
        result = run_algorithm("bfs", sample_graph, ids["A"], ids["F"], snapshots=False)
        last = list(Playback(result, sample_graph).frames())[-1]
        assert last.visited_nodes == frozenset()
        assert last.path_edges == {"e1", "e3", "e5"}
