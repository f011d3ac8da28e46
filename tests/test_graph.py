"""Tests for dependency graph construction and topological ordering."""

import pytest

from ganttify.exceptions import CycleDetectedError, ScheduleError
from ganttify.scheduler.core import DependencyEdge, DependencyType
from ganttify.scheduler.graph import build_dependency_graph
from ganttify.scheduler.sorting import topological_sort
from tests.conftest import scenario_tasks, task


class TestBuildDependencyGraph:
    """Test edge derivation from task records."""

    def test_edges_from_references(self) -> None:
        """Each reference becomes one edge pointing at the referencing task."""
        graph = build_dependency_graph(scenario_tasks())

        assert list(graph.tasks) == [0, 1, 2, 3]
        assert graph.edges == [
            DependencyEdge(0, 1, DependencyType.END_BEFORE_START),
            DependencyEdge(1, 2, DependencyType.END_BEFORE_START),
            DependencyEdge(0, 3, DependencyType.START_AFTER_END),
        ]

    def test_multiple_references(self) -> None:
        """A task with several references gets one edge per reference."""
        graph = build_dependency_graph([task(0), task(1), task(2, starts_after=[1, 0])])

        assert graph.incoming(2, DependencyType.START_AFTER_END) == [
            DependencyEdge(0, 2, DependencyType.START_AFTER_END),
            DependencyEdge(1, 2, DependencyType.START_AFTER_END),
        ]
        assert graph.incoming(2, DependencyType.END_BEFORE_START) == []

    def test_incoming_is_indexed_at_build_time(self) -> None:
        """Incoming lookups come from the per-target index, not the edge list."""
        graph = build_dependency_graph(
            [task(0), task(1, starts_after=[0]), task(2, ends_before=[0])]
        )
        graph.edges.clear()

        assert graph.incoming(1, DependencyType.START_AFTER_END) == [
            DependencyEdge(0, 1, DependencyType.START_AFTER_END)
        ]
        assert graph.incoming(2, DependencyType.END_BEFORE_START) == [
            DependencyEdge(0, 2, DependencyType.END_BEFORE_START)
        ]
        assert graph.incoming(0, DependencyType.START_AFTER_END) == []

    def test_dangling_reference_is_not_validated(self) -> None:
        """References to unknown tasks still produce edges."""
        graph = build_dependency_graph([task(0, starts_after=[7])])
        assert graph.edges == [DependencyEdge(7, 0, DependencyType.START_AFTER_END)]

    def test_no_tasks(self) -> None:
        graph = build_dependency_graph([])
        assert graph.tasks == {}
        assert graph.edges == []


class TestTopologicalSort:
    """Test Kahn ordering."""

    def test_dependencies_first(self) -> None:
        """Every edge source precedes its target."""
        graph = build_dependency_graph(scenario_tasks())
        assert topological_sort(graph) == [0, 1, 3, 2]

    def test_ties_in_insertion_order(self) -> None:
        """Independent tasks keep their input order."""
        graph = build_dependency_graph([task(5), task(2), task(9), task(1)])
        assert topological_sort(graph) == [5, 2, 9, 1]

    def test_deterministic(self) -> None:
        """Sorting the same graph twice gives the same order."""
        tasks = [task(3, starts_after=[1]), task(1), task(2, starts_after=[1]), task(0)]
        first = topological_sort(build_dependency_graph(tasks))
        second = topological_sort(build_dependency_graph(tasks))
        assert first == second == [1, 0, 3, 2]

    def test_diamond(self) -> None:
        """A task waits for all of its predecessors."""
        tasks = [
            task(3, starts_after=[1, 2]),
            task(2, starts_after=[0]),
            task(1, starts_after=[0]),
            task(0),
        ]
        order = topological_sort(build_dependency_graph(tasks))
        assert order == [0, 2, 1, 3]

    def test_cycle_detected(self) -> None:
        """A dependency cycle is a fatal error naming the stuck tasks."""
        tasks = [task(0), task(1, starts_after=[2]), task(2, starts_after=[1]), task(3)]

        with pytest.raises(CycleDetectedError, match="Cycle detected") as exc_info:
            topological_sort(build_dependency_graph(tasks))

        assert exc_info.value.unresolved_ids == [1, 2]
        assert exc_info.value.task_id == 1
        assert isinstance(exc_info.value, ScheduleError)

    def test_self_loop_is_cycle(self) -> None:
        """A task referencing itself can never be ordered."""
        with pytest.raises(CycleDetectedError):
            topological_sort(build_dependency_graph([task(0, ends_before=[0])]))

    def test_cycle_regardless_of_input_order(self) -> None:
        """Reordering the input does not hide a cycle."""
        tasks = [task(0, starts_after=[2]), task(1, starts_after=[0]), task(2, starts_after=[1])]
        for rotation in range(len(tasks)):
            rotated = tasks[rotation:] + tasks[:rotation]
            with pytest.raises(CycleDetectedError):
                topological_sort(build_dependency_graph(rotated))

    def test_duplicate_edges(self) -> None:
        """Identical references in both directions are ordinary edges."""
        tasks = [task(0), task(1, starts_after=[0]), task(2, starts_after=[0])]
        assert topological_sort(build_dependency_graph(tasks)) == [0, 1, 2]

    def test_dangling_reference_adds_no_in_degree(self) -> None:
        """Unknown sources do not block ordering."""
        graph = build_dependency_graph([task(0, starts_after=[42]), task(1)])
        assert topological_sort(graph) == [0, 1]
