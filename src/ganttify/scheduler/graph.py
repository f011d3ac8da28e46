"""Dependency graph construction."""

from __future__ import annotations

from collections.abc import Iterable

from .core import DependencyEdge, DependencyType, TaskDefinition, TaskGraph


def build_dependency_graph(tasks: Iterable[TaskDefinition]) -> TaskGraph:
    """Create a dependency graph from a list of tasks.

    Each ``starts_after`` reference becomes a START_AFTER_END edge and each
    ``ends_before`` reference an END_BEFORE_START edge, directed from the
    referenced task to the task that holds the reference. References are not
    validated here.

    Args:
        tasks: Tasks to include in the graph

    Returns:
        TaskGraph with the tasks keyed by id and every derived edge
    """
    graph = TaskGraph()
    for task in tasks:
        graph.tasks[task.id] = task
        # Sorted so edge order does not depend on set iteration order
        for ref_id in sorted(task.starts_after):
            graph.add_edge(DependencyEdge(ref_id, task.id, DependencyType.START_AFTER_END))
        for ref_id in sorted(task.ends_before):
            graph.add_edge(DependencyEdge(ref_id, task.id, DependencyType.END_BEFORE_START))
    return graph
