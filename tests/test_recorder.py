"""
Unit tests for the step recorder and step records.
"""

import math

import pytest

from pathlab.algorithms import AlgorithmResult, StepRecorder, StepType
from pathlab.algorithms.state import format_distance


class TestSnapshots:
    """Recorded steps must not change when working state does."""

    def test_visited_snapshot_is_copied(self):
        """Mutating the live set after recording leaves the step intact."""
        recorder = StepRecorder(snapshots=True)
        visited = {"a"}
        step = recorder.record(StepType.VISIT, "visit a", node_id="a", visited=visited)
        visited.add("b")
        assert step.visited == frozenset({"a"})

    def test_distances_snapshot_is_copied(self):
        """Later distance updates do not leak into old steps."""
        recorder = StepRecorder(snapshots=True)
        distances = {"a": 0, "b": math.inf}
        step = recorder.record(StepType.RELAX, "relax", distances=distances)
        distances["b"] = 3
        assert step.distances["b"] == math.inf

    def test_distances_snapshot_is_read_only(self):
        """Snapshots cannot be edited through the step."""
        recorder = StepRecorder(snapshots=True)
        step = recorder.record(StepType.RELAX, "relax", distances={"a": 0})
        with pytest.raises(TypeError):
            step.distances["a"] = 1

    def test_frontier_snapshot_is_ordered_copy(self):
        """Queue snapshots keep order and are tuples."""
        recorder = StepRecorder(snapshots=True)
        queue = ["b", "c"]
        step = recorder.record(StepType.EXPLORE, "explore", queue=queue)
        queue.pop(0)
        assert step.queue == ("b", "c")

    def test_steps_property_returns_copy(self):
        """Callers cannot append to the recorder through .steps."""
        recorder = StepRecorder()
        recorder.record(StepType.VISIT, "one")
        recorder.steps.append(None)
        assert len(recorder) == 1

    def test_snapshots_disabled_drops_containers(self):
        """With snapshots off only ids, message and path are kept."""
        recorder = StepRecorder(snapshots=False)
        step = recorder.record(
            StepType.COMPLETE,
            "done",
            node_id="a",
            visited={"a"},
            distances={"a": 0},
            current_path=["a"],
        )
        assert step.visited is None
        assert step.distances is None
        assert step.node_id == "a"
        assert step.current_path == ("a",)


class TestStepType:
    """Test the step vocabulary."""

    def test_values(self):
        """Step types use the wire names consumers expect."""
        assert [t.value for t in StepType] == [
            "visit",
            "explore",
            "relax",
            "path",
            "complete",
            "cycle-detected",
        ]

    def test_compares_to_string(self):
        """StepType is a str enum."""
        assert StepType.CYCLE_DETECTED == "cycle-detected"


class TestAlgorithmResult:
    """Test derived result properties."""

    def test_path_properties(self):
        """path_length counts edges."""
        result = AlgorithmResult(algorithm="bfs", shortest_path=["a", "b", "c"])
        assert result.found_path is True
        assert result.path_length == 2

    def test_no_path(self):
        """No path means no length."""
        result = AlgorithmResult(algorithm="bfs")
        assert result.found_path is False
        assert result.path_length is None
        assert result.final_step is None


class TestFormatDistance:
    """Test distance rendering in messages."""

    def test_integral(self):
        assert format_distance(7) == "7"
        assert format_distance(7.0) == "7"

    def test_fractional(self):
        assert format_distance(2.5) == "2.5"

    def test_infinite(self):
        assert format_distance(math.inf) == "∞"
